"""
Decoding of base64 image payloads into RGB pixel grids.
"""

import base64
import binascii
import io
import struct

import numpy as np
from PIL import Image, UnidentifiedImageError

from ...errors import Base64DecodeError, ImageDecodeError


BASE64_MARKER = "base64,"

# Grayscale modes wider than 8 bits
_WIDE_INT_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")


def strip_data_uri_prefix(image_data: str) -> str:
    """Drop everything up to and including the first ``base64,`` marker.

    The marker is matched anywhere in the string, so
    ``data:image/png;base64,AAAA`` and ``xxbase64,AAAA`` both become ``AAAA``.
    """
    idx = image_data.find(BASE64_MARKER)
    if idx == -1:
        return image_data
    return image_data[idx + len(BASE64_MARKER):]


def decode_base64(payload: str) -> bytes:
    """Strict standard-alphabet base64 decoding with padding"""
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Base64 decode error: {e}") from e

    # Reject non-zero trailing bits, e.g. "QR==" for "QQ=="
    if base64.b64encode(data).decode("ascii") != payload:
        raise Base64DecodeError("Base64 decode error: non-canonical encoding")
    return data


def to_rgb_array(img: Image.Image) -> np.ndarray:
    """Convert a PIL image into an ``(height, width, 3)`` uint8 array.

    Wide integer grayscale (``I;16*`` and ``I``) is read on a 0-65535
    scale and divided by 257. Float grayscale is read as [0, 1].
    Everything else goes through ``convert("RGB")``.
    """
    if img.mode in _WIDE_INT_MODES or img.mode == "F":
        values = np.asarray(img).astype(np.float64)
        if img.mode == "F":
            scaled = np.clip(values, 0.0, 1.0) * 255.0
        else:
            scaled = np.clip(values, 0, 65535) / 257.0
        gray = np.round(scaled).astype(np.uint8)
        return np.repeat(gray[:, :, np.newaxis], 3, axis=2)

    return np.asarray(img.convert("RGB"), dtype=np.uint8)


def load_image(data: bytes) -> np.ndarray:
    """Decode image bytes into an ``(height, width, 3)`` uint8 array.

    The container format is detected from the data itself. Only the first
    frame of animated formats is used and alpha is discarded.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return to_rgb_array(img)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        EOFError,
        SyntaxError,
        ValueError,
        struct.error,
    ) as e:
        raise ImageDecodeError(f"Image load error: {e}") from e
