from enum import Enum


class ImageFailureReason(Enum):
    """Enumeration of reasons an image fails the quality check"""

    TOO_BLURRY = "too_blurry"
    TOO_DARK = "too_dark"
    TOO_BRIGHT = "too_bright"

    @property
    def display_message(self) -> str:
        """Human-readable failure message"""
        messages = {
            ImageFailureReason.TOO_BLURRY: "Image is blurry",
            ImageFailureReason.TOO_DARK: "Image is too dark",
            ImageFailureReason.TOO_BRIGHT: "Image is too bright",
        }
        return messages[self]

    @property
    def suggestion(self) -> str:
        """What the user should do before retaking the photo"""
        suggestions = {
            ImageFailureReason.TOO_BLURRY: "Hold the camera steady and take the photo again",
            ImageFailureReason.TOO_DARK: "Move to a brighter place and take the photo again",
            ImageFailureReason.TOO_BRIGHT: "Adjust the lighting and take the photo again",
        }
        return suggestions[self]

    @classmethod
    def get_display_messages(cls, reasons: list["ImageFailureReason"]) -> list[str]:
        """Get display messages for a list of failure reasons"""
        return [reason.display_message for reason in reasons]
