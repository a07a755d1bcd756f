"""
Test cases for the logger.py formatter and configuration.
"""

import logging
import unittest

from agroclimate.logger import ColoredFormatter, config_logger


class TestColoredFormatter(unittest.TestCase):
    """Test suite for ColoredFormatter."""

    def setUp(self):
        self.formatter = ColoredFormatter("%(levelname)s: %(message)s")

    def make_record(self, level):
        return logging.LogRecord("agroclimate", level, __file__, 1, "hello", None, None)

    def test_every_level_is_reset(self):
        """Test that even uncoloured INFO lines end with the reset code."""
        self.assertEqual(
            self.formatter.format(self.make_record(logging.INFO)),
            f"INFO: hello{ColoredFormatter.RESET}",
        )

    def test_warning_is_yellow(self):
        message = self.formatter.format(self.make_record(logging.WARNING))
        self.assertTrue(message.startswith(ColoredFormatter.COLORS["WARNING"]))
        self.assertTrue(message.endswith(ColoredFormatter.RESET))


class TestConfigLogger(unittest.TestCase):
    """Test suite for config_logger."""

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level

    def tearDown(self):
        for handler in self.root.handlers[:]:
            self.root.removeHandler(handler)
        for handler in self.saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self.saved_level)

    def test_single_coloured_handler(self):
        config_logger(debug=True)
        config_logger(debug=False)

        self.assertEqual(len(self.root.handlers), 1)
        self.assertIsInstance(self.root.handlers[0].formatter, ColoredFormatter)
        self.assertEqual(self.root.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
