"""
Numerical Safeguards — безопасные математические примитивы для геометрии

Модуль обеспечивает численную устойчивость расчёта масштаба модели:
- Безопасное отношение (деление на ноль → +inf, без исключений)
- Безопасный кубический корень для отношения объёмов
- Floor невалидных кандидатов масштаба (NaN/Inf/неположительные)
- Clamp и валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ZeroDivisionError никогда не выбрасывается из safe_ratio
2. Невалидный кандидат масштаба (NaN, ±Inf, <= 0) заменяется на floor
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    Отношение numerator / denominator без ZeroDivisionError.

    Повторяет IEEE-семантику: деление положительного числа на ноль даёт +inf,
    0 / 0 даёт NaN. Результат дальше обрабатывается floor_scale_candidate.

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть 0)

    Returns:
        Результат деления, +inf/-inf/NaN при нулевом знаменателе

    Examples:
        >>> safe_ratio(1.0, 4.0)
        0.25
        >>> safe_ratio(0.08, 0.0)
        inf
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)

    return numerator / denominator


def safe_cbrt(value: float) -> float:
    """
    Кубический корень с пропуском NaN/Inf.

    Для отрицательных значений возвращает отрицательный корень,
    для +inf возвращает +inf.

    Args:
        value: Подкоренное значение

    Returns:
        cbrt(value)
    """
    if math.isnan(value) or math.isinf(value):
        return value

    return math.copysign(abs(value) ** (1.0 / 3.0), value)


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def floor_scale_candidate(value: float, floor: float) -> float:
    """
    Floor кандидата масштаба.

    Кандидат, который невалиден (NaN, ±Inf) или не положителен, заменяется
    на floor. Валидные положительные значения возвращаются без изменений,
    в том числе если они меньше floor (итоговый clamp применяется позже).

    Args:
        value: Кандидат масштаба
        floor: Нижняя граница clamp (scale_min)

    Returns:
        value или floor

    Examples:
        >>> floor_scale_candidate(0.4, 0.01)
        0.4
        >>> floor_scale_candidate(float('inf'), 0.01)
        0.01
        >>> floor_scale_candidate(0.0, 0.01)
        0.01
    """
    if not is_valid_float(value) or value <= 0.0:
        return floor
    return value


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(80000.0, 0.01, 5.0)
        5.0
        >>> clamp(0.001, 0.01, 5.0)
        0.01
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
