"""
Core math modules

Численные примитивы для расчёта масштаба с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Safe division
    safe_cbrt,
    safe_ratio,
    # NaN/Inf handling
    floor_scale_candidate,
    is_valid_float,
    # Utilities
    clamp,
    # Validation
    validate_positive,
)

__all__ = [
    # Safe division
    "safe_cbrt",
    "safe_ratio",
    # NaN/Inf handling
    "floor_scale_candidate",
    "is_valid_float",
    # Utilities
    "clamp",
    # Validation
    "validate_positive",
]
