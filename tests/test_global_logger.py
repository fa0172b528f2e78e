"""Tests for the process-wide logger handle and call-site capture"""

import io
import os
import sys

import pytest

import dual_logger
from dual_logger import LoggerConfiguration, LoggerCore, Severity
from dual_logger.call_site import UNKNOWN_LOCATION, caller_location


def helper_location():
    return caller_location()


class TestCallerLocation:
    """Test call-site capture."""

    def test_reports_calling_line(self):
        expected_line = sys._getframe().f_lineno + 1
        location = helper_location()

        assert os.path.basename(location.file) == "test_global_logger.py"
        assert location.line == expected_line

    def test_too_deep_returns_unknown(self):
        assert caller_location(10_000) == UNKNOWN_LOCATION


class TestGlobalLogger:
    """Test module-level logging helpers."""

    def setup_method(self):
        self.console = io.StringIO()
        self.config = LoggerConfiguration(
            min_severity=Severity.DEBUG,
            timestamps_enabled=False,
            source_info_enabled=True,
        )
        dual_logger.reset()
        dual_logger.set_logger(LoggerCore(self.config, console_stream=self.console))

    def teardown_method(self):
        dual_logger.reset()

    def test_get_logger_is_shared(self):
        assert dual_logger.get_logger() is dual_logger.get_logger()

    def test_lazy_creation(self):
        dual_logger.reset()
        logger = dual_logger.get_logger()
        assert isinstance(logger, LoggerCore)
        assert logger.configuration().min_severity == Severity.INFO

    def test_helpers_capture_caller_location(self):
        line = sys._getframe().f_lineno + 1
        dual_logger.warning("from helper")

        (output,) = self.console.getvalue().splitlines()
        assert output.startswith("[WARNING] [")
        assert output.endswith(f"test_global_logger.py:{line}] from helper")

    def test_base_path_applies_to_captured_location(self):
        logger = dual_logger.get_logger()
        logger.set_base_path(os.path.dirname(caller_location(0).file) + os.sep)

        line = sys._getframe().f_lineno + 1
        dual_logger.todo("short path")

        assert self.console.getvalue() == f"[TODO] [test_global_logger.py:{line}] short path\n"

    def test_every_level_helper(self):
        for name in ("debug", "info", "warning", "error", "fatal", "todo"):
            assert getattr(dual_logger, name)(name) is True

        tags = [line.split(" ", 1)[0] for line in self.console.getvalue().splitlines()]
        assert tags == ["[DEBUG]", "[INFO]", "[WARNING]", "[ERROR]", "[FATAL]", "[TODO]"]

    def test_filtered_helper_returns_false(self):
        dual_logger.get_logger().set_minimum_severity(Severity.ERROR)
        assert dual_logger.info("hidden") is False
        assert self.console.getvalue() == ""

    def test_init_with_config(self, tmp_path):
        path = dual_logger.init(LoggerConfiguration(
            timestamps_enabled=False,
            source_info_enabled=False,
            log_directory=tmp_path,
        ))

        dual_logger.error("to file")
        assert path.parent == tmp_path
        assert path.read_text(encoding="utf-8") == "[ERROR] to file\n"

    def test_set_logger_returns_previous(self):
        previous = dual_logger.get_logger()
        replacement = LoggerCore(self.config, console_stream=io.StringIO())

        assert dual_logger.set_logger(replacement) is previous
        assert dual_logger.get_logger() is replacement

    def test_init_failure_propagates_initialization_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(dual_logger.InitializationError):
            dual_logger.init(LoggerConfiguration(log_directory=blocker / "logs"))
