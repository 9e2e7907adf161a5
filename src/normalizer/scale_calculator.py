"""Scale Calculator — равномерный масштаб под целевые физические размеры

Вычисляет единственный uniform scale, который вписывает модель в целевые
высоту и ширину без искажения пропорций.

ФОРМУЛЫ:
    scale_by_height = target_height / effective_height
    scale_by_width  = target_width  / effective_width
    scale_by_volume = cbrt(target_volume / (w * h * d))

    candidate_floored = scale_min, если кандидат NaN/Inf или <= 0
    final = clamp(min(candidates_floored), scale_min, scale_max)

Минимум гарантирует, что модель вписывается и по высоте, и по ширине;
объёмный кандидат не даёт плоской модели раздуться по глубине.

Нулевой размер даёт +inf в соответствующем кандидате (деление без исключения),
такой кандидат заменяется на scale_min до взятия минимума.

target_volume = target_height * target_width * target_height, поэтому
объёмный кандидат считается как произведение кубических корней отношений
по каждой оси. Произведение w * h * d не формируется: для малых, но
ненулевых габаритов оно уходит в underflow (0.0) и дало бы ложный +inf.
"""

from src.core.domain.geometry import EffectiveDimensions
from src.core.domain.outcome import ScaleResult
from src.core.domain.target import TargetSpec
from src.core.math.numerical_safeguards import (
    clamp,
    floor_scale_candidate,
    safe_cbrt,
    safe_ratio,
)


def volume_scale(effective: EffectiveDimensions, target: TargetSpec) -> float:
    """cbrt(target_volume / effective_volume) без промежуточного underflow/overflow.

    Returns:
        Объёмный кандидат; +inf только если какой-то размер равен нулю

    Examples:
        >>> volume_scale(EffectiveDimensions(width=0.08, height=0.08, depth=0.08), TargetSpec())
        1.0
    """
    return (
        safe_cbrt(safe_ratio(target.target_width_m, effective.width))
        * safe_cbrt(safe_ratio(target.target_height_m, effective.height))
        * safe_cbrt(safe_ratio(target.target_height_m, effective.depth))
    )


def compute_scale(effective: EffectiveDimensions, target: TargetSpec) -> ScaleResult:
    """Вычисление итогового uniform scale.

    Не вызывается для bounding box из одних нулей: этот случай отсекает
    пайплайн до расчёта.

    Args:
        effective: габариты после коррекции ориентации
        target: целевые размеры и границы clamp

    Returns:
        ScaleResult с итоговым масштабом в [scale_min, scale_max]
    """
    scale_by_height = safe_ratio(target.target_height_m, effective.height)
    scale_by_width = safe_ratio(target.target_width_m, effective.width)
    scale_by_volume = volume_scale(effective, target)

    floored_by_height = floor_scale_candidate(scale_by_height, target.scale_min)
    floored_by_width = floor_scale_candidate(scale_by_width, target.scale_min)
    floored_by_volume = floor_scale_candidate(scale_by_volume, target.scale_min)

    unclamped = min(floored_by_height, floored_by_width, floored_by_volume)
    value = clamp(unclamped, target.scale_min, target.scale_max)

    return ScaleResult(
        value=value,
        scale_by_height=scale_by_height,
        scale_by_width=scale_by_width,
        scale_by_volume=scale_by_volume,
        floored_by_height=floored_by_height,
        floored_by_width=floored_by_width,
        floored_by_volume=floored_by_volume,
        unclamped=unclamped,
        clamped=value != unclamped,
    )
