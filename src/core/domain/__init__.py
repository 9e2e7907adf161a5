"""
Domain models and value objects.

Contains BoundingBox, OrientationCorrection, EffectiveDimensions, TargetSpec
and the normalization result types.
"""

from src.core.domain.geometry import (
    ORIENTATION_ANGLES,
    Axis,
    BoundingBox,
    EffectiveDimensions,
    OrientationCase,
    OrientationCorrection,
)
from src.core.domain.outcome import (
    NormalizationResult,
    NormalizationStatus,
    NormalizationWarning,
    ScaleResult,
)
from src.core.domain.target import (
    SCALE_MAX_DEFAULT,
    SCALE_MIN_DEFAULT,
    TARGET_HEIGHT_DEFAULT_M,
    TARGET_WIDTH_DEFAULT_M,
    InvalidTargetSpec,
    TargetSpec,
)

__all__ = [
    # Geometry
    "ORIENTATION_ANGLES",
    "Axis",
    "BoundingBox",
    "EffectiveDimensions",
    "OrientationCase",
    "OrientationCorrection",
    # Target
    "SCALE_MAX_DEFAULT",
    "SCALE_MIN_DEFAULT",
    "TARGET_HEIGHT_DEFAULT_M",
    "TARGET_WIDTH_DEFAULT_M",
    "InvalidTargetSpec",
    "TargetSpec",
    # Outcome
    "NormalizationResult",
    "NormalizationStatus",
    "NormalizationWarning",
    "ScaleResult",
]
