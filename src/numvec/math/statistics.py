"""
Statistics — описательная статистика над последовательностями float

Чистые функции без состояния; NumericVector делегирует им вычисления.

ФОРМУЛЫ:
    percentile (linear): r = (n - 1) * p / 100
        P = x[floor(r)] * (ceil(r) - r) + x[ceil(r)] * (r - floor(r))
    quantile(q): cut points на 100*k/q, k = 1..q-1
    weighted mean: Σ(x_i * w_i) / Σw_i
    variance: Σ(x_i - mean)^2 / (n if population else n - 1)
"""

import math
from typing import Sequence

from numvec.errors import (
    DivisionByZeroError,
    EmptyVectorError,
    InvalidArgumentError,
    LengthMismatchError,
)
from numvec.math.numerical_safeguards import validate_in_range, validate_integral

# =============================================================================
# СРЕДНИЕ
# =============================================================================


def mean(values: Sequence[float]) -> float:
    """
    Арифметическое среднее.

    Raises:
        EmptyVectorError: Если values пустая
    """
    if not values:
        raise EmptyVectorError("Cannot compute the mean of an empty vector.")
    return sum(values) / len(values)


def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    """
    Взвешенное среднее Σ(x_i * w_i) / Σw_i.

    Args:
        values: Значения
        weights: Веса (та же длина)

    Raises:
        LengthMismatchError: Если длины различаются
        EmptyVectorError: Если values пустая
        DivisionByZeroError: Если сумма весов равна 0

    Examples:
        >>> weighted_mean([1.0, 2.0, 3.0], [3.0, 2.0, 1.0])
        1.6666666666666667
    """
    if len(weights) != len(values):
        raise LengthMismatchError(
            f"Number of weights ({len(weights)}) must be equal to the vector length "
            f"({len(values)}) to calculate the weighted average."
        )
    if not values:
        raise EmptyVectorError("Cannot compute the weighted average of an empty vector.")

    total_weight = sum(weights)
    if total_weight == 0:
        raise DivisionByZeroError("Weights sum to zero: weighted average is undefined.")

    return sum(x * w for x, w in zip(values, weights)) / total_weight


# =============================================================================
# РАЗБРОС
# =============================================================================


def variance(values: Sequence[float], population: bool = True) -> float:
    """
    Дисперсия: делитель n (population) или n - 1 (sample, поправка Бесселя).

    Raises:
        EmptyVectorError: Если values пустая
        InvalidArgumentError: Если population=False и элементов меньше двух

    Examples:
        >>> variance([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        4.0
    """
    center = mean(values)
    n = len(values)

    if not population and n < 2:
        raise InvalidArgumentError(
            f"Sample variance requires at least two elements, got {n}."
        )

    squared = sum((x - center) * (x - center) for x in values)
    return squared / (n if population else n - 1)


def std(values: Sequence[float], population: bool = True) -> float:
    """Стандартное отклонение sqrt(variance)."""
    return math.sqrt(variance(values, population))


# =============================================================================
# ПЕРЦЕНТИЛИ
# =============================================================================


def percentile_linear(sorted_values: Sequence[float], p: float) -> float:
    """
    Перцентиль методом линейной интерполяции.

    Args:
        sorted_values: Значения, отсортированные по возрастанию
        p: Перцентиль в [0, 100]

    Returns:
        Интерполированное значение между соседними элементами

    Raises:
        InvalidArgumentError: Если p вне [0, 100]
        EmptyVectorError: Если sorted_values пустая

    Examples:
        >>> percentile_linear([1.0, 2.0, 3.0, 4.0], 50)
        2.5
        >>> percentile_linear([1.0, 2.0, 3.0, 4.0], 100)
        4.0
    """
    p = validate_in_range(p, "percentile", 0.0, 100.0)
    if not sorted_values:
        raise EmptyVectorError("Cannot compute a percentile of an empty vector.")

    rank = (len(sorted_values) - 1) * (p / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)

    # Целочисленный ранг: точное значение
    if lower == upper:
        return sorted_values[lower]

    return sorted_values[lower] * (upper - rank) + sorted_values[upper] * (rank - lower)


def quantile_cut_points(sorted_values: Sequence[float], q: int) -> list[float]:
    """
    q-квантили: q - 1 точек разбиения на перцентилях 100/q, 200/q, ...

    q=2 — медиана, q=4 — квартили, q=10 — децили.

    Raises:
        InvalidArgumentError: Если q не целое >= 1
    """
    q = validate_integral(q, "q")
    if q < 1:
        raise InvalidArgumentError(f"q must be >= 1, got {q}")

    return [percentile_linear(sorted_values, 100.0 * k / q) for k in range(1, q)]
