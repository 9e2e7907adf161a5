"""
Geometry — Модели габаритов и коррекции ориентации 3D-модели

Immutable Pydantic модели:
- BoundingBox: измеренный axis-aligned bounding box (метры, оси X/Y/Z)
- OrientationCorrection: одна из трёх дискретных коррекций ориентации
- EffectiveDimensions: габариты после переразметки осей поворотом

Полная совместимость с JSON Schema (contracts/schema/bounding_box.json).
"""

from enum import Enum
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Axis(str, Enum):
    """Ось фиксированной системы координат рендерера"""

    X = "x"
    Y = "y"
    Z = "z"


class OrientationCase(str, Enum):
    """
    Случай коррекции ориентации.

    - UPRIGHT: высота уже наибольшая (или ничья) → без поворота
    - LYING_ON_BACK: глубина строго наибольшая → -90° вокруг X
    - LYING_ON_SIDE: ширина строго наибольшая → +90° вокруг Z
    """

    UPRIGHT = "UPRIGHT"
    LYING_ON_BACK = "LYING_ON_BACK"
    LYING_ON_SIDE = "LYING_ON_SIDE"


# Углы (x_deg, y_deg, z_deg) для каждого случая
ORIENTATION_ANGLES: Final[dict[OrientationCase, tuple[float, float, float]]] = {
    OrientationCase.UPRIGHT: (0.0, 0.0, 0.0),
    OrientationCase.LYING_ON_BACK: (-90.0, 0.0, 0.0),
    OrientationCase.LYING_ON_SIDE: (0.0, 0.0, 90.0),
}


# =============================================================================
# BOUNDING BOX
# =============================================================================


class BoundingBox(BaseModel):
    """
    Измеренный bounding box модели до любой коррекции.

    Immutable модель (frozen=True). Значения >= 0 и конечны.
    Bounding box со всеми нулями допустим как значение, но означает
    неизмеримую модель (см. is_unmeasurable).
    """

    width: float = Field(..., ge=0, allow_inf_nan=False, description="Ширина вдоль X (м)")
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Высота вдоль Y (м)")
    depth: float = Field(..., ge=0, allow_inf_nan=False, description="Глубина вдоль Z (м)")

    model_config = {"frozen": True}

    @classmethod
    def from_xyz(cls, dimensions: Mapping[str, Any]) -> "BoundingBox":
        """
        Построение из словаря рендерера {x, y, z}.

        Args:
            dimensions: Размеры модели вдоль осей X, Y, Z (метры)

        Returns:
            BoundingBox(width=x, height=y, depth=z)
        """
        return cls(width=dimensions["x"], height=dimensions["y"], depth=dimensions["z"])

    def as_tuple(self) -> tuple[float, float, float]:
        """(width, height, depth)"""
        return (self.width, self.height, self.depth)

    def is_unmeasurable(self) -> bool:
        """True если все три размера точно равны нулю."""
        return self.width == 0.0 and self.height == 0.0 and self.depth == 0.0

    def zero_axes(self) -> tuple[Axis, ...]:
        """Оси с нулевым размером (в порядке X, Y, Z)."""
        axes = []
        if self.width == 0.0:
            axes.append(Axis.X)
        if self.height == 0.0:
            axes.append(Axis.Y)
        if self.depth == 0.0:
            axes.append(Axis.Z)
        return tuple(axes)

    def is_degenerate(self) -> bool:
        """True если один или два размера нулевые (но не все три)."""
        return 0 < len(self.zero_axes()) < 3


# =============================================================================
# ORIENTATION
# =============================================================================


class OrientationCorrection(BaseModel):
    """
    Коррекция ориентации: три угла поворота (градусы) вокруг X, Y, Z.

    Immutable модель (frozen=True). Допустимы только тройки из
    ORIENTATION_ANGLES, согласованные с case.
    """

    case: OrientationCase = Field(..., description="Случай коррекции")
    x_deg: float = Field(..., description="Поворот вокруг X (градусы)")
    y_deg: float = Field(..., description="Поворот вокруг Y (градусы)")
    z_deg: float = Field(..., description="Поворот вокруг Z (градусы)")

    model_config = {"frozen": True}

    @field_validator("z_deg")
    @classmethod
    def validate_angles_match_case(cls, v: float, info) -> float:
        """Проверка, что тройка углов соответствует case"""
        data = info.data
        if not {"case", "x_deg", "y_deg"} <= data.keys():
            return v

        expected = ORIENTATION_ANGLES[data["case"]]
        actual = (data["x_deg"], data["y_deg"], v)
        if actual != expected:
            raise ValueError(
                f"angles {actual} do not match orientation case "
                f"{data['case'].value} (expected {expected})"
            )
        return v

    @classmethod
    def for_case(cls, case: OrientationCase) -> "OrientationCorrection":
        """Коррекция для заданного случая."""
        x_deg, y_deg, z_deg = ORIENTATION_ANGLES[case]
        return cls(case=case, x_deg=x_deg, y_deg=y_deg, z_deg=z_deg)

    def as_tuple(self) -> tuple[float, float, float]:
        """(x_deg, y_deg, z_deg)"""
        return (self.x_deg, self.y_deg, self.z_deg)

    def is_identity(self) -> bool:
        """True если поворот не требуется."""
        return self.case == OrientationCase.UPRIGHT


class EffectiveDimensions(BaseModel):
    """
    Габариты модели после коррекции ориентации.

    Производная величина: оси переразмечены поворотом, значения не измеряются.
    """

    width: float = Field(..., ge=0, description="Эффективная ширина (м)")
    height: float = Field(..., ge=0, description="Эффективная высота (м)")
    depth: float = Field(..., ge=0, description="Эффективная глубина (м)")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float, float]:
        """(width, height, depth)"""
        return (self.width, self.height, self.depth)

    def volume(self) -> float:
        """
        Объём bounding box.

        Returns:
            width * height * depth (м³)
        """
        return self.width * self.height * self.depth
