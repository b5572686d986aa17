"""
Unit tests for structured_logger.py

Tests the core logging functionality including:
- Log levels
- Structured fields
- Context propagation
- Output formats (JSON and text)
"""

import unittest
import json
import sys
from io import StringIO
from featurescan.logging.structured_logger import StructuredLogger, LoggerFactory, LogLevel


class TestLogLevel(unittest.TestCase):
    """Test LogLevel enum"""

    def test_log_level_ordering(self):
        """Test that log levels are properly ordered"""
        self.assertLess(LogLevel.DEBUG, LogLevel.INFO)
        self.assertLess(LogLevel.INFO, LogLevel.WARNING)
        self.assertLess(LogLevel.WARNING, LogLevel.ERROR)
        self.assertLess(LogLevel.ERROR, LogLevel.CRITICAL)


class TestStructuredLogger(unittest.TestCase):
    """Test StructuredLogger class"""

    def setUp(self):
        self.output = StringIO()
        self.logger = StructuredLogger(
            "featurescan.test", level=LogLevel.DEBUG, output_stream=self.output, format_style="json"
        )

    def tearDown(self):
        self.output.close()

    def test_log_level_filtering(self):
        """Messages below the logger level are dropped"""
        self.logger.level = LogLevel.INFO

        self.logger.debug("Debug message")
        self.assertEqual(self.output.getvalue(), "")

        self.logger.info("Info message")
        self.assertIn("Info message", self.output.getvalue())

    def test_json_format(self):
        self.logger.info("Feature file analyzed", file="login.feature", scenarios=3)

        log_entry = json.loads(self.output.getvalue().strip())

        self.assertEqual(log_entry["level"], "INFO")
        self.assertEqual(log_entry["logger"], "featurescan.test")
        self.assertEqual(log_entry["message"], "Feature file analyzed")
        self.assertEqual(log_entry["file"], "login.feature")
        self.assertEqual(log_entry["scenarios"], 3)
        self.assertIn("timestamp", log_entry)

    def test_none_fields_are_omitted(self):
        """Fields without a value, like a diagnostic without a line, are left out"""
        self.logger.warning("Title for feature is empty", file="empty.feature", line=None)

        log_entry = json.loads(self.output.getvalue().strip())
        self.assertEqual(log_entry["file"], "empty.feature")
        self.assertNotIn("line", log_entry)

    def test_non_ascii_is_kept(self):
        self.logger.info("Scenario extracted", name="Schlüsselworte werden übersetzt")
        self.assertIn("Schlüsselworte", self.output.getvalue())

    def test_text_format(self):
        text_logger = StructuredLogger(
            "featurescan.test", level=LogLevel.INFO, output_stream=self.output, format_style="text"
        )

        text_logger.info("Feature file analyzed", file="login.feature")

        output = self.output.getvalue()
        self.assertIn("[INFO]", output)
        self.assertIn("featurescan.test", output)
        self.assertIn("Feature file analyzed", output)
        self.assertIn("file=login.feature", output)

    def test_context_propagation(self):
        file_logger = self.logger.with_context(file="login.feature")
        scenario_logger = file_logger.with_context(scenario="Successful login")

        scenario_logger.info("Step dropped")

        log_entry = json.loads(self.output.getvalue().strip())
        self.assertEqual(log_entry["file"], "login.feature")
        self.assertEqual(log_entry["scenario"], "Successful login")

    def test_with_context_does_not_change_parent(self):
        self.logger.with_context(file="login.feature")
        self.logger.info("Plain message")

        log_entry = json.loads(self.output.getvalue().strip())
        self.assertNotIn("file", log_entry)

    def test_log_with_explicit_level(self):
        self.logger.level = LogLevel.WARNING

        self.logger.log(LogLevel.INFO, "Dropped")
        self.logger.log(LogLevel.ERROR, "Kept", file="a.feature")

        lines = self.output.getvalue().strip().split("\n")
        self.assertEqual(len(lines), 1)
        self.assertEqual(json.loads(lines[0])["message"], "Kept")

    def test_exc_info_without_exception(self):
        self.logger.error("No exception being handled", exc_info=True)

        log_entry = json.loads(self.output.getvalue().strip())
        self.assertNotIn("exception", log_entry)

    def test_exception_logging(self):
        try:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        except UnicodeDecodeError:
            self.logger.error("Parser failed", exc_info=True)

        log_entry = json.loads(self.output.getvalue().strip())
        self.assertEqual(log_entry["level"], "ERROR")
        self.assertEqual(log_entry["exception"]["type"], "UnicodeDecodeError")
        self.assertIn("traceback", log_entry["exception"])

    def test_all_log_levels(self):
        self.logger.debug("Debug message")
        self.logger.info("Info message")
        self.logger.warning("Warning message")
        self.logger.error("Error message")
        self.logger.critical("Critical message")

        lines = self.output.getvalue().strip().split("\n")
        levels = [json.loads(line)["level"] for line in lines]
        self.assertEqual(levels, ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


class TestLoggerFactory(unittest.TestCase):
    """Test LoggerFactory class"""

    def setUp(self):
        LoggerFactory.reset()

    def tearDown(self):
        LoggerFactory.reset()

    def test_factory_defaults(self):
        logger = LoggerFactory.get_logger("featurescan")

        self.assertEqual(logger.level, LogLevel.INFO)
        self.assertEqual(logger.format_style, "json")
        self.assertEqual(logger.output_stream, sys.stderr)

    def test_factory_configure(self):
        output = StringIO()
        LoggerFactory.configure(level="DEBUG", format_style="text", stream=output)

        logger = LoggerFactory.get_logger("featurescan")

        self.assertEqual(logger.level, LogLevel.DEBUG)
        self.assertEqual(logger.format_style, "text")
        self.assertEqual(logger.output_stream, output)

    def test_factory_invalid_settings(self):
        with self.assertRaises(ValueError):
            LoggerFactory.configure(level="INVALID")
        with self.assertRaises(ValueError):
            LoggerFactory.configure(format_style="xml")

    def test_factory_caches_loggers(self):
        self.assertIs(LoggerFactory.get_logger("featurescan"), LoggerFactory.get_logger("featurescan"))
        self.assertIsNot(LoggerFactory.get_logger("a"), LoggerFactory.get_logger("b"))

    def test_factory_updates_existing_loggers(self):
        logger = LoggerFactory.get_logger("featurescan")

        LoggerFactory.configure(level="DEBUG")

        self.assertEqual(logger.level, LogLevel.DEBUG)


if __name__ == "__main__":
    unittest.main()
