"""
Numerical Safeguards — валидация аргументов и IEEE-семантика скалярных функций

Модуль обеспечивает две вещи:
- Проверку внешних аргументов (длины, границы, целочисленность, конечность)
  с выбросом InvalidArgumentError
- Скалярные обёртки над math, которые следуют IEEE 754 вместо исключений
  Python (OverflowError, ValueError, ZeroDivisionError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация применяется только к данным извне (аргументы фабрик и операций)
2. IEEE-обёртки никогда не бросают исключений: результат может быть NaN/±Inf
3. bool не считается числом, хотя является подклассом int
"""

import math
import numbers
from typing import Any, Callable, Optional

from numvec.errors import InvalidArgumentError

# =============================================================================
# ПРОВЕРКИ ТИПОВ И КОНЕЧНОСТИ
# =============================================================================


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли значение вещественным числом.

    numbers.Real покрывает int, float, Fraction и скаляры numpy.
    bool исключается явно.

    Examples:
        >>> is_real_number(1.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("1.5")
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_integral(value: Any) -> bool:
    """
    Проверка, является ли значение целым числом (3 и 3.0 подходят, 3.5 нет).
    """
    if not is_real_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return is_valid_float(float(value)) and float(value).is_integer()


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def validate_finite(value: Any, name: str) -> float:
    """
    Валидация, что аргумент — конечное вещественное число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        InvalidArgumentError: Если value не число или NaN/Inf
    """
    if not is_real_number(value):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")

    try:
        result = float(value)
    except OverflowError:
        result = math.inf

    if not is_valid_float(result):
        raise InvalidArgumentError(f"{name} must be a finite number (not NaN/Inf), got {value}")

    return result


def validate_integral(value: Any, name: str) -> int:
    """
    Валидация, что аргумент — целое число.

    Returns:
        value как int

    Raises:
        InvalidArgumentError: Если value не целое (или NaN/Inf)
    """
    if not is_integral(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def validate_length(value: Any, name: str = "length") -> int:
    """
    Валидация длины: целое неотрицательное число.

    Examples:
        >>> validate_length(3)
        3
        >>> validate_length(3.0)
        3

    Raises:
        InvalidArgumentError: Если длина отрицательная или дробная
    """
    if not is_integral(value) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def validate_in_range(
    value: Any,
    name: str,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    Валидация, что значение конечно и лежит в заданном диапазоне (включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        value как float

    Raises:
        InvalidArgumentError: Если value вне диапазона или NaN/Inf
    """
    result = validate_finite(value, name)

    if min_value is not None and result < min_value:
        raise InvalidArgumentError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and result > max_value:
        raise InvalidArgumentError(f"{name} must be <= {max_value}, got {value}")

    return result


# =============================================================================
# IEEE-СЕМАНТИКА СКАЛЯРНЫХ ФУНКЦИЙ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по IEEE 754 без ZeroDivisionError.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # Знак результата = знак числителя * знак нуля в знаменателе
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def ieee_exp(value: float) -> float:
    """e^x; переполнение даёт inf вместо OverflowError."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_exp10(value: float) -> float:
    """10^x; переполнение даёт inf вместо OverflowError."""
    try:
        return math.pow(10.0, value)
    except OverflowError:
        return math.inf


def _ieee_log(value: float, func: Callable[[float], float]) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return func(value)


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм: log(0) = -inf, log(x < 0) = NaN.

    Examples:
        >>> ieee_log(0.0)
        -inf
        >>> math.isnan(ieee_log(-1.0))
        True
    """
    return _ieee_log(value, math.log)


def ieee_log10(value: float) -> float:
    """Десятичный логарифм: log10(0) = -inf, log10(x < 0) = NaN."""
    return _ieee_log(value, math.log10)


def ieee_trig(func: Callable[[float], float], value: float) -> float:
    """
    Тригонометрическая функция: sin/cos/tan(±inf) = NaN вместо ValueError.
    """
    if math.isinf(value):
        return math.nan
    return func(value)


def ieee_ceil(value: float) -> float:
    """ceil, сохраняющий NaN/±Inf (math.ceil бросает для них исключение)."""
    if not is_valid_float(value):
        return value
    return float(math.ceil(value))


def ieee_floor(value: float) -> float:
    """floor, сохраняющий NaN/±Inf."""
    if not is_valid_float(value):
        return value
    return float(math.floor(value))


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float, decimals: int = 0) -> float:
    """
    Округление до decimals знаков после запятой (round half away from zero).

    Встроенный round() использует банковское округление (2.5 -> 2),
    здесь 2.5 -> 3 и -2.5 -> -3. Отрицательные decimals округляют до
    десятков, сотен и т.д. NaN/Inf возвращаются без изменений.

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(1.23456, 2)
        1.23
        >>> round_half_away(1250.0, -2)
        1300.0
    """
    if not is_valid_float(value):
        return value

    try:
        scale = 10.0 ** abs(decimals)
    except OverflowError:
        # Шаг меньше точности double либо больше любого конечного значения
        return value if decimals > 0 else math.copysign(0.0, value)

    ratio = value * scale if decimals >= 0 else value / scale

    # Для очень больших значений дробной части уже нет
    if not is_valid_float(ratio):
        return value

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps / scale if decimals >= 0 else steps * scale
