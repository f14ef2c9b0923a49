"""Shared fixtures for building test images in memory."""

import base64
import io

import numpy as np
from PIL import Image


def solid_rgb(width, height, color):
    """Uniform RGB grid of the given color."""
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    grid[:, :] = color
    return grid


def checkerboard(width, height, low=0, high=255):
    """Single-pixel checkerboard alternating between two gray levels."""
    ys, xs = np.indices((height, width))
    gray = np.where((xs + ys) % 2 == 0, high, low).astype(np.uint8)
    return np.repeat(gray[:, :, np.newaxis], 3, axis=2)


def encode_png(image):
    """Encode an array or PIL image as PNG bytes."""
    if not isinstance(image, Image.Image):
        image = Image.fromarray(np.asarray(image, dtype=np.uint8))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def to_data_uri(data, mime="image/png"):
    return f"data:{mime};base64," + base64.b64encode(data).decode("ascii")


def gray16_png(width, height, value):
    """16-bit grayscale PNG filled with one sample value."""
    return encode_png(Image.fromarray(np.full((height, width), value, dtype=np.uint16)))
