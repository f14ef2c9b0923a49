"""
Configuration for image quality thresholds and runtime settings
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

# Decision thresholds. These are fixed and not read from the environment.
BLUR_THRESHOLD = 100.0  # blur_score below this is blurry
DARK_THRESHOLD = 0.3  # brightness below this is too dark
BRIGHT_THRESHOLD = 0.8  # brightness above this is too bright

# Rec. 709 luma coefficients (R, G, B)
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class ValidatorSettings:
    """Runtime settings for the validator process"""

    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    enable_faulthandler: bool = True

    @classmethod
    def from_env(cls) -> "ValidatorSettings":
        """Create settings from environment variables with fallbacks"""
        return cls(
            log_level=os.getenv("IMAGE_VALIDATOR_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("IMAGE_VALIDATOR_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            enable_faulthandler=_env_flag("IMAGE_VALIDATOR_FAULTHANDLER", "true"),
        )

    def validate(self) -> None:
        """Validate settings"""
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not self.log_format:
            raise ValueError("Log format cannot be empty")
