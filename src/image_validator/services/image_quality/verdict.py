import json
import math
from dataclasses import dataclass
from typing import Any

from ...config import BLUR_THRESHOLD, BRIGHT_THRESHOLD, DARK_THRESHOLD
from ...errors import SerializationError
from .failure_reasons import ImageFailureReason


FIELD_NAMES = (
    "blur_score",
    "is_blurry",
    "brightness",
    "is_too_dark",
    "is_too_bright",
    "is_good_quality",
)


@dataclass(frozen=True)
class QualityVerdict:
    """Quality verdict for a single image"""

    blur_score: float  # Laplacian variance, higher is sharper
    is_blurry: bool
    brightness: float  # 0-1, luma-weighted mean
    is_too_dark: bool
    is_too_bright: bool
    is_good_quality: bool

    @classmethod
    def from_scores(cls, blur_score: float, brightness: float) -> "QualityVerdict":
        """Apply the fixed thresholds to raw scores"""
        blur_score = float(blur_score)
        brightness = float(brightness)

        is_blurry = blur_score < BLUR_THRESHOLD
        is_too_dark = brightness < DARK_THRESHOLD
        is_too_bright = brightness > BRIGHT_THRESHOLD

        return cls(
            blur_score=blur_score,
            is_blurry=is_blurry,
            brightness=brightness,
            is_too_dark=is_too_dark,
            is_too_bright=is_too_bright,
            is_good_quality=not is_blurry and not is_too_dark and not is_too_bright,
        )

    @property
    def failure_reasons(self) -> list[ImageFailureReason]:
        reasons = []
        if self.is_blurry:
            reasons.append(ImageFailureReason.TOO_BLURRY)
        if self.is_too_dark:
            reasons.append(ImageFailureReason.TOO_DARK)
        if self.is_too_bright:
            reasons.append(ImageFailureReason.TOO_BRIGHT)
        return reasons

    @property
    def summary(self) -> str:
        """Human-readable summary of the verdict"""
        if self.is_good_quality:
            return "Good image quality"
        issues = ", ".join(ImageFailureReason.get_display_messages(self.failure_reasons))
        return f"Image quality issues: {issues}"

    @property
    def suggestions(self) -> list[str]:
        if self.is_good_quality:
            return []
        return [reason.suggestion for reason in self.failure_reasons]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "blur_score": self.blur_score,
            "is_blurry": self.is_blurry,
            "brightness": self.brightness,
            "is_too_dark": self.is_too_dark,
            "is_too_bright": self.is_too_bright,
            "is_good_quality": self.is_good_quality,
        }

    def to_json(self) -> str:
        """Serialize to a JSON object string"""
        try:
            return json.dumps(self.to_dict(), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Serialization error: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "QualityVerdict":
        """Parse a verdict previously produced by to_json"""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Serialization error: {e}") from e

        if not isinstance(data, dict):
            raise SerializationError("Serialization error: expected a JSON object")
        missing = [name for name in FIELD_NAMES if name not in data]
        if missing:
            raise SerializationError(f"Serialization error: missing fields {missing}")

        values = {}
        for name in FIELD_NAMES:
            value = data[name]
            if name.startswith("is_"):
                if not isinstance(value, bool):
                    raise SerializationError(f"Serialization error: {name} must be a boolean")
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise SerializationError(f"Serialization error: {name} must be a number")
                value = float(value)
                if not math.isfinite(value):
                    raise SerializationError(f"Serialization error: {name} must be finite")
            values[name] = value

        verdict = cls(**values)
        if verdict != cls.from_scores(verdict.blur_score, verdict.brightness):
            raise SerializationError("Serialization error: flags do not match scores")
        return verdict
