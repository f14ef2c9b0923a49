from .quality_config import (
    BLUR_THRESHOLD,
    BRIGHT_THRESHOLD,
    DARK_THRESHOLD,
    LUMA_WEIGHTS,
    ValidatorSettings,
)


__all__ = [
    "BLUR_THRESHOLD",
    "BRIGHT_THRESHOLD",
    "DARK_THRESHOLD",
    "LUMA_WEIGHTS",
    "ValidatorSettings",
]
