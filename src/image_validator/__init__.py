"""
Blur and exposure checks for photos before they are uploaded.

    >>> from image_validator import validate_image_quality
    >>> verdict = validate_image_quality("data:image/jpeg;base64,...")
    >>> verdict.is_good_quality
"""

import faulthandler
import logging
import threading
from typing import Optional

from .config import ValidatorSettings
from .errors import (
    Base64DecodeError,
    ImageDecodeError,
    ImageValidationError,
    SerializationError,
)
from .services.image_quality import ImageFailureReason, ImageQualityService, QualityVerdict
from .utils.log_utils import setup_logging


logger = logging.getLogger(__name__)

_service = ImageQualityService()
_init_lock = threading.Lock()
_initialized = False


def init(settings: Optional[ValidatorSettings] = None) -> bool:
    """Set up logging and crash diagnostics once per process.

    Returns True on the first call and False afterwards.
    """
    global _initialized
    with _init_lock:
        if _initialized:
            return False

        settings = settings or ValidatorSettings.from_env()
        settings.validate()

        setup_logging(settings.log_level, settings.log_format)
        if settings.enable_faulthandler and not faulthandler.is_enabled():
            faulthandler.enable()

        _initialized = True
        logger.info("Image validator initialized")
        return True


def validate_image_quality(image_data: str) -> QualityVerdict:
    """Check a base64 (or data URI) encoded image for blur and exposure."""
    return _service.validate(image_data)


__all__ = [
    "Base64DecodeError",
    "ImageDecodeError",
    "ImageFailureReason",
    "ImageQualityService",
    "ImageValidationError",
    "QualityVerdict",
    "SerializationError",
    "ValidatorSettings",
    "init",
    "validate_image_quality",
]
