"""Shared fixtures for logger tests"""

import io

import pytest

from dual_logger import LoggerConfiguration, LoggerCore, Severity


@pytest.fixture
def console():
    """In-memory console stream."""
    return io.StringIO()


@pytest.fixture
def plain_config(tmp_path):
    """Configuration with every optional field turned off."""
    return LoggerConfiguration(
        min_severity=Severity.DEBUG,
        colors_enabled=False,
        timestamps_enabled=False,
        source_info_enabled=False,
        log_directory=tmp_path / "logs",
    )


@pytest.fixture
def logger(plain_config, console):
    """Plain-format logger with an in-memory console and no file sink."""
    core = LoggerCore(plain_config, console_stream=console)
    yield core
    core.shutdown()


@pytest.fixture
def file_logger(logger):
    """Plain-format logger with an open session file."""
    logger.initialize()
    return logger
