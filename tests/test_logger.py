import importlib
import logging

from py_angle import logger as package_logger
from py_angle.logger import logger, enable_file_logging, disable_file_logging

# the package rebinds its `logger` attribute to the Logger instance
logger_module = importlib.import_module("py_angle.logger")


class TestFileLogging:

    def test_enable_and_disable(self, tmp_path):
        log_file = tmp_path / "angles.log"
        enable_file_logging(str(log_file))
        try:
            assert logger_module.file_handler is not None
            assert logger_module.file_handler in logger.handlers
            logger.debug("converted to radians")
        finally:
            disable_file_logging()
        assert logger_module.file_handler is None
        assert "converted to radians" in log_file.read_text()

    def test_enable_replaces_handler(self, tmp_path):
        enable_file_logging(str(tmp_path / "first.log"))
        first = logger_module.file_handler
        enable_file_logging(str(tmp_path / "second.log"))
        try:
            assert first not in logger.handlers
            assert logger_module.file_handler is not first
        finally:
            disable_file_logging()

    def test_disable_twice(self):
        disable_file_logging()
        disable_file_logging()
        assert logger_module.file_handler is None

    def test_package_logger(self):
        assert package_logger is logger
        assert logger.name == "py_angle"
        assert isinstance(logger, logging.Logger)
