#!/usr/bin/env python3
# Test Configuration and Logging Setup

import logging
import tempfile
import unittest
import sys
import os
from pathlib import Path

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tea_timer.utils.io import load_config
from tea_timer.utils.logging import configure_logging, get_logger

class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        """Set up a scratch directory."""
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_load_yaml(self):
        """Test a YAML file is parsed into a dict."""
        path = self.root / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\n")

        config = load_config(path)
        self.assertEqual(config, {"logging": {"level": "DEBUG"}})

    def test_empty_file(self):
        """Test an empty file gives an empty config."""
        path = self.root / "empty.yaml"
        path.write_text("")
        self.assertEqual(load_config(str(path)), {})

    def test_missing_file(self):
        """Test a missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_config(self.root / "nope.yaml")

    def test_bundled_config(self):
        """Test the shipped sample config loads."""
        path = Path(__file__).parent.parent / "configs" / "logging.yaml"
        config = load_config(path)
        self.assertEqual(config["logging"]["level"], "INFO")

class TestLogging(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        self.name = f"tea_timer_test_{self._testMethodName}"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        self.tmpdir.cleanup()

    def test_get_logger_adds_handlers_once(self):
        """Test repeated calls reuse the configured logger."""
        first = get_logger(self.name, level="DEBUG")
        second = get_logger(self.name)

        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertEqual(second.level, logging.DEBUG)

    def test_get_logger_with_file(self):
        """Test a file handler is attached and writes records."""
        log_file = self.root / "logs" / "timings.log"
        logger = get_logger(self.name, log_file=str(log_file))
        logger.info("job took 1.00s")

        for handler in logger.handlers:
            handler.flush()
        self.assertIn("job took 1.00s", log_file.read_text())

    def test_unknown_level(self):
        """Test an unknown level name is rejected."""
        with self.assertRaises(ValueError):
            get_logger(self.name, level="LOUD")

    def test_configure_logging_level(self):
        """Test the logging section changes the level."""
        logger = configure_logging({"logging": {"level": "warning"}}, name=self.name)
        self.assertEqual(logger.level, logging.WARNING)

    def test_configure_logging_from_path(self):
        """Test a YAML path is loaded before applying the section."""
        path = self.root / "logging.yaml"
        path.write_text("logging:\n  level: ERROR\n")

        logger = configure_logging(path, name=self.name)
        self.assertEqual(logger.level, logging.ERROR)

        logger = configure_logging(str(path), name=self.name)
        self.assertEqual(logger.level, logging.ERROR)

    def test_configure_logging_defaults(self):
        """Test a missing section keeps the default level."""
        logger = configure_logging(None, name=self.name)
        self.assertEqual(logger.level, logging.INFO)

        logger = configure_logging({"other": 1}, name=self.name)
        self.assertEqual(logger.level, logging.INFO)

    def test_configure_logging_file_added_once(self):
        """Test the same log file is not attached twice."""
        log_file = str(self.root / "timings.log")
        config = {"logging": {"log_file": log_file}}

        configure_logging(config, name=self.name)
        logger = configure_logging(config, name=self.name)

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)

if __name__ == '__main__':
    unittest.main()
