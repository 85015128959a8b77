"""
Random Source — инжектируемый источник случайных чисел

Все случайные операции NumericVector выражены через единственную
возможность источника: random() -> float в [0, 1). Экземпляры random.Random
удовлетворяют протоколу, поэтому воспроизводимость достигается через
seeded_random_source(seed).

По умолчанию используется общий для процесса random.Random(). Методы
random.Random потокобезопасны в CPython, поэтому отдельная синхронизация
не требуется.
"""

import logging
import math
import random as _random
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Источник равномерно распределённых float в [0, 1)."""

    def random(self) -> float:
        ...


_DEFAULT_SOURCE: RandomSource = _random.Random()


def get_default_random_source() -> RandomSource:
    """Текущий общий источник процесса."""
    return _DEFAULT_SOURCE


def set_default_random_source(source: RandomSource) -> RandomSource:
    """
    Замена общего источника процесса.

    Args:
        source: Новый источник (например, seeded_random_source(42))

    Returns:
        Предыдущий источник (для восстановления в тестах)

    Raises:
        TypeError: Если source не реализует random()
    """
    global _DEFAULT_SOURCE

    if not isinstance(source, RandomSource):
        raise TypeError(f"source must provide random() -> float, got {type(source).__name__}")

    previous = _DEFAULT_SOURCE
    _DEFAULT_SOURCE = source
    logger.debug("Default random source replaced: %s -> %s", type(previous).__name__, type(source).__name__)
    return previous


def seeded_random_source(seed: int) -> RandomSource:
    """Детерминированный источник с фиксированным seed."""
    return _random.Random(seed)


def resolve(rng: Optional[RandomSource]) -> RandomSource:
    """rng если передан, иначе общий источник процесса."""
    return rng if rng is not None else _DEFAULT_SOURCE


# =============================================================================
# ПРОИЗВОДНЫЕ РАСПРЕДЕЛЕНИЯ
# =============================================================================


def uniform_index(rng: RandomSource, size: int) -> int:
    """
    Равномерный индекс в [0, size).

    min() защищает от u * size == size при округлении u, близкого к 1.
    """
    return min(int(math.floor(rng.random() * size)), size - 1)


def uniform_int(rng: RandomSource, low: int, high: int) -> int:
    """Равномерное целое в [low, high] включительно."""
    return low + uniform_index(rng, high - low + 1)


def uniform_float(rng: RandomSource, low: float, high: float) -> float:
    """
    Равномерный float в [low, high).

    Интерполяция (1 - u) * low + u * high не вычисляет high - low, которое
    переполняется при границах порядка 1e308. Значения, округлённые до high
    или ниже low, заменяются на low.
    """
    u = rng.random()
    value = (1.0 - u) * low + u * high
    return value if low <= value < high else low
