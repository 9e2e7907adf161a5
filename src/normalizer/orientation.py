"""Orientation Detector — определение наибольшей оси и коррекция ориентации

Многие экспортированные или сгенерированные модели повернуты произвольно:
наибольшая ось может не совпадать с вертикалью Y. Детектор выбирает одну
из трёх дискретных коррекций.

Порядок проверок (фиксированный приоритет):
1. depth > height и depth > width → модель лежит на спине:
   -90° вокруг X; new_height = depth, new_depth = height
2. width > height и width > depth → модель лежит на боку:
   +90° вокруг Z; new_width = height, new_height = width
3. Иначе (высота наибольшая или ничья) → без поворота

Сравнения строгие: ничья между осями никогда не выбирает поворот.
"""

from dataclasses import dataclass

from src.core.domain.geometry import (
    BoundingBox,
    EffectiveDimensions,
    OrientationCase,
    OrientationCorrection,
)


@dataclass(frozen=True)
class OrientationDetection:
    """Результат Orientation Detector."""

    correction: OrientationCorrection
    effective: EffectiveDimensions

    # Детали
    details: str


def is_depth_tallest(width: float, height: float, depth: float) -> bool:
    """Z строго больше обеих других осей."""
    return depth > height and depth > width


def is_width_tallest(width: float, height: float, depth: float) -> bool:
    """X строго больше обеих других осей."""
    return width > height and width > depth


def detect_orientation(box: BoundingBox) -> OrientationDetection:
    """Определение коррекции ориентации и эффективных габаритов.

    Тотальная функция: ровно одна из трёх ветвей срабатывает.

    Args:
        box: измеренный bounding box

    Returns:
        OrientationDetection с коррекцией и габаритами после поворота
    """
    w, h, d = box.width, box.height, box.depth

    if is_depth_tallest(w, h, d):
        # Z → Y, Y → Z, X без изменений
        case = OrientationCase.LYING_ON_BACK
        effective = EffectiveDimensions(width=w, height=d, depth=h)
    elif is_width_tallest(w, h, d):
        # X → Y, Y → X, Z без изменений
        case = OrientationCase.LYING_ON_SIDE
        effective = EffectiveDimensions(width=h, height=w, depth=d)
    else:
        case = OrientationCase.UPRIGHT
        effective = EffectiveDimensions(width=w, height=h, depth=d)

    correction = OrientationCorrection.for_case(case)

    return OrientationDetection(
        correction=correction,
        effective=effective,
        details=(
            f"{case.value}: rotation={correction.as_tuple()}, "
            f"effective=({effective.width:.4f}, {effective.height:.4f}, {effective.depth:.4f})"
        ),
    )

