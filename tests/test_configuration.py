"""
Tests for validator settings and one-time initialization
"""

import logging
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch


sys.path.append(str(Path(__file__).parent.parent / "src"))

import image_validator
from image_validator.config import (
    BLUR_THRESHOLD,
    BRIGHT_THRESHOLD,
    DARK_THRESHOLD,
    LUMA_WEIGHTS,
    ValidatorSettings,
)
from image_validator.utils.log_utils import setup_logging


class TestThresholdConstants(unittest.TestCase):
    """Test the fixed thresholds."""

    def test_values(self):
        self.assertEqual(BLUR_THRESHOLD, 100.0)
        self.assertEqual(DARK_THRESHOLD, 0.3)
        self.assertEqual(BRIGHT_THRESHOLD, 0.8)
        self.assertEqual(LUMA_WEIGHTS, (0.2126, 0.7152, 0.0722))


class TestValidatorSettings(unittest.TestCase):
    """Test settings defaults, environment overrides and validation."""

    def test_defaults(self):
        settings = ValidatorSettings()

        self.assertEqual(settings.log_level, "INFO")
        self.assertTrue(settings.enable_faulthandler)
        settings.validate()

    def test_from_env(self):
        env = {
            "IMAGE_VALIDATOR_LOG_LEVEL": "debug",
            "IMAGE_VALIDATOR_LOG_FORMAT": "%(message)s",
            "IMAGE_VALIDATOR_FAULTHANDLER": "no",
        }
        with patch.dict(os.environ, env):
            settings = ValidatorSettings.from_env()

        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.log_format, "%(message)s")
        self.assertFalse(settings.enable_faulthandler)

    def test_from_env_fallbacks(self):
        names = ["IMAGE_VALIDATOR_LOG_LEVEL", "IMAGE_VALIDATOR_LOG_FORMAT", "IMAGE_VALIDATOR_FAULTHANDLER"]
        with patch.dict(os.environ, {}, clear=False):
            for name in names:
                os.environ.pop(name, None)
            settings = ValidatorSettings.from_env()

        self.assertEqual(settings, ValidatorSettings())

    def test_validate_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            ValidatorSettings(log_level="LOUD").validate()
        with self.assertRaises(ValueError):
            ValidatorSettings(log_format="").validate()


class TestSetupLogging(unittest.TestCase):
    """Test root logging configuration."""

    def test_default_format(self):
        with patch("logging.basicConfig") as mock_basic:
            setup_logging("debug")

        mock_basic.assert_called_once_with(level=logging.DEBUG)

    def test_custom_format(self):
        with patch("logging.basicConfig") as mock_basic:
            setup_logging("WARNING", "%(message)s")

        mock_basic.assert_called_once_with(level=logging.WARNING, format="%(message)s")


class TestInit(unittest.TestCase):
    """Test one-time initialization."""

    def test_runs_once(self):
        settings = ValidatorSettings(log_level="WARNING", enable_faulthandler=False)

        with patch.object(image_validator, "_initialized", False), patch.object(
            image_validator, "setup_logging"
        ) as mock_setup:
            self.assertTrue(image_validator.init(settings))
            self.assertFalse(image_validator.init(settings))

        mock_setup.assert_called_once_with("WARNING", settings.log_format)

    def test_invalid_settings_raise(self):
        with patch.object(image_validator, "_initialized", False), patch.object(
            image_validator, "setup_logging"
        ) as mock_setup:
            with self.assertRaises(ValueError):
                image_validator.init(ValidatorSettings(log_level="LOUD"))

        mock_setup.assert_not_called()


if __name__ == "__main__":
    unittest.main()
