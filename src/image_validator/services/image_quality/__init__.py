from .failure_reasons import ImageFailureReason
from .quality_service import ImageQualityService
from .verdict import QualityVerdict


__all__ = ["ImageQualityService", "QualityVerdict", "ImageFailureReason"]
