"""
Errors raised while validating an image.

Each error names the stage that failed so callers can report it verbatim.
"""


class ImageValidationError(Exception):
    """Base class for validation failures"""

    stage = "validation"


class Base64DecodeError(ImageValidationError):
    """The payload is not valid standard base64"""

    stage = "base64_decode"


class ImageDecodeError(ImageValidationError):
    """The decoded bytes are not a supported raster image"""

    stage = "image_decode"


class SerializationError(ImageValidationError):
    """A verdict could not be converted to or from JSON"""

    stage = "serialization"
