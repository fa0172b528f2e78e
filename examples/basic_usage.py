#!/usr/bin/env python3
"""Basic usage example"""

from pathlib import Path

import dual_logger
from dual_logger import InitializationError, LoggerBuilder, Severity


def explicit_logger():
    # Create logger with builder pattern and pass it where it is needed
    logger = (LoggerBuilder()
        .with_level(Severity.DEBUG)
        .with_colors(True)
        .with_base_path(str(Path(__file__).parent) + "/")
        .with_log_directory("logs")
        .with_file()
        .build())

    here = dual_logger.caller_location(0)
    logger.debug("This is debug", here.file, here.line)
    logger.info("Application started")
    logger.warning("This is warning")
    logger.error("This is error")
    logger.todo("Read the level from the command line")

    if logger.fatal("This is fatal"):
        # The logger never exits; the caller decides
        pass

    logger.shutdown()


def global_logger():
    try:
        dual_logger.init()
    except InitializationError as e:
        print(f"Console only: {e}")

    # File and line of this call are captured automatically
    dual_logger.info("Hello from the shared logger")
    dual_logger.get_logger().enable_timestamps(False)
    dual_logger.warning("No timestamp on this one")


def main():
    explicit_logger()
    global_logger()


if __name__ == "__main__":
    main()
