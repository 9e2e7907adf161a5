"""
TargetSpec — Целевые физические размеры и границы масштаба

Конфигурация нормализации, создаётся один раз при старте и передаётся
в Normalizer явно. Никаких глобальных синглтонов.

ФОРМУЛА ЦЕЛЕВОГО ОБЪЁМА:
    target_volume = target_height * target_width * target_height

Высота используется дважды. Формула сохранена для совместимости
с уже откалиброванными ассетами и не заменяется на height * width * depth.
"""

from dataclasses import dataclass, field
from typing import Final

from src.core.math.numerical_safeguards import validate_positive


# =============================================================================
# DEFAULTS
# =============================================================================

# Целевая высота модели (метры)
TARGET_HEIGHT_DEFAULT_M: Final[float] = 0.08

# Целевая ширина модели (метры)
TARGET_WIDTH_DEFAULT_M: Final[float] = 0.08

# Нижняя граница итогового масштаба (1%)
SCALE_MIN_DEFAULT: Final[float] = 0.01

# Верхняя граница итогового масштаба (500%)
SCALE_MAX_DEFAULT: Final[float] = 5.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTargetSpec(ValueError):
    """
    Невалидная конфигурация нормализации.

    Фатальна на этапе конфигурации: обработка ассетов не начинается.
    """


# =============================================================================
# TARGET SPEC
# =============================================================================


@dataclass(frozen=True)
class TargetSpec:
    """Целевые размеры и границы clamp итогового масштаба.

    Raises:
        InvalidTargetSpec: если цели или границы не положительны / не конечны,
            или scale_min > scale_max
    """

    target_height_m: float = TARGET_HEIGHT_DEFAULT_M
    target_width_m: float = TARGET_WIDTH_DEFAULT_M
    scale_min: float = SCALE_MIN_DEFAULT
    scale_max: float = SCALE_MAX_DEFAULT

    target_volume_m3: float = field(init=False)

    def __post_init__(self) -> None:
        for name in ("target_height_m", "target_width_m", "scale_min", "scale_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidTargetSpec(f"{name} must be a number, got {value!r}")
            try:
                validate_positive(float(value), name)
            except ValueError as e:
                raise InvalidTargetSpec(str(e)) from e

        if self.scale_min > self.scale_max:
            raise InvalidTargetSpec(
                f"scale_min {self.scale_min} must be <= scale_max {self.scale_max}"
            )

        # frozen dataclass: производное поле задаётся через object.__setattr__
        object.__setattr__(
            self,
            "target_volume_m3",
            self.target_height_m * self.target_width_m * self.target_height_m,
        )
