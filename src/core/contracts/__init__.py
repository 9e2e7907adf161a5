"""
Contract Validation Module

Валидация JSON контрактов на границе Normalizer ↔ рендерер.
"""

from .validators import (
    BoundingBoxValidator,
    ContractValidator,
    NormalizationOutputValidator,
    SchemaLoader,
    validate_bounding_box,
    validate_normalization_output,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BoundingBoxValidator",
    "NormalizationOutputValidator",
    # Functions
    "validate_bounding_box",
    "validate_normalization_output",
]
