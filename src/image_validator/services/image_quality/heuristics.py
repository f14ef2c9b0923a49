"""
Numeric image quality checks: Laplacian-variance sharpness and
Rec. 709 luma brightness.

All functions take an RGB pixel grid as a ``numpy`` array of shape
``(height, width, 3)`` with 8-bit channel values. A 2-D array is treated
as grayscale (R = G = B).
"""

import logging

import cv2
import numpy as np

from ...config import LUMA_WEIGHTS
from .verdict import QualityVerdict


logger = logging.getLogger(__name__)

# Integer Rec. 709 weights used for the 8-bit grayscale conversion
_LUMA8_WEIGHTS = (2126, 7152, 722)
_LUMA8_DIVISOR = 10000


def _as_rgb(pixels) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim == 2:
        return np.repeat(pixels[:, :, np.newaxis], 3, axis=2)
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise ValueError(f"Expected an RGB pixel grid, got shape {pixels.shape}")
    return pixels[:, :, :3]


def to_luma8(pixels) -> np.ndarray:
    """Convert an RGB grid to 8-bit grayscale (truncating integer luma)."""
    pixels = np.asarray(pixels)
    if pixels.ndim == 2:
        return pixels.astype(np.uint8)

    rgb = _as_rgb(pixels).astype(np.uint32)
    r_w, g_w, b_w = _LUMA8_WEIGHTS
    luma = (r_w * rgb[:, :, 0] + g_w * rgb[:, :, 1] + b_w * rgb[:, :, 2]) // _LUMA8_DIVISOR
    return luma.astype(np.uint8)


def calculate_blur_score(pixels) -> float:
    """Sharpness as the population variance of the 4-neighbour Laplacian.

    Border pixels are excluded. Grids narrower or shorter than 3 pixels
    score 0.0.
    """
    gray = to_luma8(pixels)
    height, width = gray.shape[:2]
    if width < 3 or height < 3:
        return 0.0

    # ksize=1 applies the [[0, 1, 0], [1, -4, 1], [0, 1, 0]] kernel
    laplacian = cv2.Laplacian(gray.astype(np.float64), cv2.CV_64F, ksize=1)
    interior = laplacian[1:-1, 1:-1]
    if interior.size == 0:
        return 0.0

    return float(interior.var())


def calculate_brightness(pixels) -> float:
    """Mean Rec. 709 luma of the grid, in [0, 1].

    An empty grid has brightness 0.0.
    """
    rgb = _as_rgb(pixels)
    height, width = rgb.shape[:2]
    if height * width == 0:
        logger.warning("Brightness requested for an empty image, using 0.0")
        return 0.0

    normalized = rgb.astype(np.float64) / 255.0
    r_w, g_w, b_w = LUMA_WEIGHTS
    luma = r_w * normalized[:, :, 0] + g_w * normalized[:, :, 1] + b_w * normalized[:, :, 2]
    return float(luma.sum() / (height * width))


def classify(blur_score: float, brightness: float) -> QualityVerdict:
    return QualityVerdict.from_scores(blur_score, brightness)


def analyze_image_quality(pixels) -> QualityVerdict:
    """Run both checks on a pixel grid and classify the result"""
    blur_score = calculate_blur_score(pixels)
    brightness = calculate_brightness(pixels)
    return classify(blur_score, brightness)
