"""
Outcome — Результаты нормализации

ScaleResult содержит итоговый равномерный масштаб и диагностику кандидатов.
NormalizationResult — итог пайплайна для одного ассета (NORMALIZED/SKIPPED).

Совместимость с JSON Schema: to_output_payload() соответствует
contracts/schema/normalization_output.json.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from src.core.domain.geometry import BoundingBox, EffectiveDimensions, OrientationCorrection


# =============================================================================
# ENUMS
# =============================================================================


class NormalizationStatus(str, Enum):
    """Итоговый статус нормализации ассета"""

    NORMALIZED = "NORMALIZED"
    SKIPPED = "SKIPPED"


class NormalizationWarning(str, Enum):
    """
    Нефатальные условия, обнаруженные при нормализации.

    - UNMEASURABLE_ASSET: все три размера нулевые → нормализация пропущена
    - DEGENERATE_DIMENSION: один или два размера нулевые → кандидаты
      масштаба невалидны и обработаны floor/clamp
    """

    UNMEASURABLE_ASSET = "UNMEASURABLE_ASSET"
    DEGENERATE_DIMENSION = "DEGENERATE_DIMENSION"


# =============================================================================
# SCALE RESULT
# =============================================================================


@dataclass(frozen=True)
class ScaleResult:
    """Результат Scale Calculator.

    value — единственный равномерный масштаб, применяемый ко всем трём осям.
    """

    value: float

    # Сырые кандидаты (могут быть inf/NaN при нулевых размерах)
    scale_by_height: float
    scale_by_width: float
    scale_by_volume: float

    # Кандидаты после floor невалидных значений
    floored_by_height: float
    floored_by_width: float
    floored_by_volume: float

    # Минимум кандидатов до clamp
    unclamped: float
    clamped: bool

    def as_axes(self) -> tuple[float, float, float]:
        """Масштаб по осям X, Y, Z (всегда одинаковый)."""
        return (self.value, self.value, self.value)


# =============================================================================
# NORMALIZATION RESULT
# =============================================================================


@dataclass(frozen=True)
class NormalizationResult:
    """Результат нормализации одного ассета."""

    status: NormalizationStatus
    raw_dimensions: Optional[BoundingBox]
    orientation: Optional[OrientationCorrection]
    effective_dimensions: Optional[EffectiveDimensions]
    scale: Optional[ScaleResult]
    warnings: tuple[NormalizationWarning, ...]

    # Детали
    details: str

    @property
    def is_skipped(self) -> bool:
        return self.status == NormalizationStatus.SKIPPED

    def to_output_payload(self) -> dict[str, Any]:
        """
        Выходной контракт для рендерера.

        Returns:
            {"orientation": {"x_deg", "y_deg", "z_deg"}, "scale": float}

        Raises:
            ValueError: если нормализация была пропущена
        """
        if self.orientation is None or self.scale is None:
            raise ValueError(f"no output for {self.status.value} normalization")

        return {
            "orientation": {
                "x_deg": self.orientation.x_deg,
                "y_deg": self.orientation.y_deg,
                "z_deg": self.orientation.z_deg,
            },
            "scale": self.scale.value,
        }
