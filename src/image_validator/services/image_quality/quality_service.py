import logging
import time

import numpy as np
from PIL import Image

from ...errors import ImageValidationError
from .decoder import decode_base64, load_image, strip_data_uri_prefix, to_rgb_array
from .heuristics import analyze_image_quality
from .verdict import QualityVerdict


logger = logging.getLogger(__name__)


class ImageQualityService:
    """Service for checking photos for blur and exposure before upload"""

    def __init__(self):
        self.version = "1.0.0"

    def validate(self, image_data: str) -> QualityVerdict:
        """
        Validate a base64 encoded image

        Args:
            image_data: Base64 image data, optionally with a
                ``data:image/...;base64,`` prefix

        Returns:
            QualityVerdict for the image

        Raises:
            Base64DecodeError: If the payload is not valid base64
            ImageDecodeError: If the bytes are not a supported image
        """
        try:
            data = decode_base64(strip_data_uri_prefix(image_data))
        except ImageValidationError as e:
            logger.error(f"Image validation failed at {e.stage}: {e}")
            raise

        return self.validate_bytes(data)

    def validate_bytes(self, data: bytes) -> QualityVerdict:
        """Validate raw encoded image bytes (PNG, JPEG, ...)"""
        try:
            pixels = load_image(data)
        except ImageValidationError as e:
            logger.error(f"Image validation failed at {e.stage}: {e}")
            raise

        return self.analyze(pixels)

    def analyze(self, pixels) -> QualityVerdict:
        """
        Analyze an already decoded image

        Args:
            pixels: RGB array of shape (height, width, 3), a 2-D grayscale
                array, or a PIL image

        Returns:
            QualityVerdict for the image
        """
        if isinstance(pixels, Image.Image):
            pixels = to_rgb_array(pixels)
        else:
            pixels = np.asarray(pixels)

        start_time = time.time()
        height, width = pixels.shape[:2]

        verdict = analyze_image_quality(pixels)

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"Analyzed {width}x{height} image in {elapsed_ms:.1f}ms: "
            f"blur_score={verdict.blur_score:.2f}, brightness={verdict.brightness:.3f}"
        )
        logger.info(verdict.summary)
        return verdict
