"""
NumericVector — неизменяемый вектор float с NumPy-подобными операциями

Immutable Pydantic модель поверх упорядоченной последовательности конечных
вещественных чисел. Операции сгруппированы по назначению:
- Фабрики: arange, fill, from_string, linspace, ones, zeros, random,
  random_int, random_float
- Линейная алгебра: dot
- Поэлементная математика: унарные преобразования, бинарные операции со
  скаляром или вектором той же длины, свёртки max/min/sum
- Случайные операции: choice, sample, shuffle
- Статистика: mean, percentile, median, iqr, quantile, average, variance, std

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Данные извне (конструктор, фабрики) содержат только конечные числа,
   иначе InvalidInputError
2. После создания data не изменяется; каждое преобразование возвращает
   новый NumericVector, elements возвращает копию
3. Результаты преобразований НЕ валидируются повторно: log(-1) = NaN,
   exp(1000) = inf, x / 0 = ±inf допустимы как выход математических функций
4. Бинарные операции между векторами требуют равных длин (LengthMismatchError),
   скаляр транслируется на все элементы
"""

import logging
import math
import operator
import re
from collections.abc import Iterable
from itertools import accumulate
from typing import Any, Callable, Optional, Sequence, Union

from pydantic import BaseModel, Field, field_validator

from numvec.config import ParseConfig
from numvec.errors import (
    DivisionByZeroError,
    EmptyVectorError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidInputError,
    LengthMismatchError,
)
from numvec.math import statistics
from numvec.math.numerical_safeguards import (
    ieee_ceil,
    ieee_divide,
    ieee_exp,
    ieee_exp10,
    ieee_floor,
    ieee_log,
    ieee_log10,
    ieee_trig,
    is_real_number,
    is_valid_float,
    round_half_away,
    validate_finite,
    validate_integral,
    validate_length,
)
from numvec.random_source import (
    RandomSource,
    resolve,
    uniform_float,
    uniform_index,
    uniform_int,
)

logger = logging.getLogger(__name__)

# Десятичное число: необязательный знак, дробная часть, экспонента
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_DEG_TO_RAD = math.pi / 180.0

Operand = Union[float, "NumericVector"]


def _flatten(values: tuple[Any, ...]) -> Any:
    """Переменное число аргументов или один iterable -> последовательность."""
    if len(values) == 1:
        single = values[0]
        if isinstance(single, NumericVector):
            return single.data
        if isinstance(single, Iterable) and not isinstance(single, (str, bytes)):
            return tuple(single)
    return values


def _as_finite_float(value: Any) -> float:
    """Внешнее значение -> float; нечисловое, NaN и ±Inf отклоняются."""
    if is_real_number(value):
        try:
            result = float(value)
        except OverflowError:
            result = math.inf
        if is_valid_float(result):
            return result
    raise InvalidInputError(
        f"Input contains non-numeric values: only finite numbers are allowed, got {value!r}."
    )


def _parse_token(token: str, config: ParseConfig) -> float:
    """Токен -> float; нераспознанный токен становится NaN."""
    if config.strip_tokens:
        token = token.strip()
    if token == "" and config.empty_token_value is not None:
        return config.empty_token_value
    if _NUMBER_PATTERN.fullmatch(token) is None:
        return math.nan
    return float(token)


class NumericVector(BaseModel):
    """
    Неизменяемый вектор float.

    Конструктор принимает либо отдельные числа, либо один iterable:

        >>> NumericVector(1, 2, 3).elements
        [1.0, 2.0, 3.0]
        >>> NumericVector([1, 2, 3]).elements
        [1.0, 2.0, 3.0]
        >>> NumericVector().elements
        []

    Случайные операции принимают rng: RandomSource; без него используется
    общий источник процесса (см. numvec.random_source).
    """

    data: tuple[float, ...] = Field(default=(), description="Элементы вектора по порядку")

    model_config = {"frozen": True}

    def __init__(self, *values: Any, **data: Any) -> None:
        # pydantic (model_validate, вложенные модели) вызывает __init__ с keyword-аргументами
        if data:
            if values:
                raise InvalidArgumentError("Pass either positional values or data=, not both.")
            super().__init__(**data)
        else:
            super().__init__(data=_flatten(values))

    @field_validator("data", mode="before")
    @classmethod
    def validate_data(cls, v: Any) -> tuple[float, ...]:
        """Только конечные вещественные числа: не bool, не str, не NaN/Inf."""
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise InvalidInputError(
                "Input contains non-numeric values: only numbers are allowed."
            )

        return tuple(_as_finite_float(value) for value in v)

    @classmethod
    def _wrap(cls, values: Iterable[float]) -> "NumericVector":
        """
        Построение из внутренне вычисленных значений без валидации.

        Используется для результатов математических преобразований, которые
        по IEEE 754 могут содержать NaN/±Inf.
        """
        data = tuple(values)
        if logger.isEnabledFor(logging.DEBUG) and not all(is_valid_float(x) for x in data):
            logger.debug("Transform produced non-finite values: %s", data)
        return cls.model_construct(data=data)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def arange(cls, start: float, stop: float, step: float = 1) -> "NumericVector":
        """
        Значения start, start + step, ... до stop включительно (если попадаем
        точно) или до последнего значения перед перешагиванием stop.

        count = 1 + floor((stop - start) / step)

        Args:
            start: Начало диапазона (включительно)
            stop: Конец диапазона (включительно при точном попадании)
            step: Шаг (не 0; знак задаёт направление)

        Returns:
            Пустой вектор при start == stop или если знак step не совпадает
            с направлением от start к stop

        Raises:
            InvalidArgumentError: Если step == 0, аргументы не конечны или
                число элементов не ограничено (step слишком мал)

        Examples:
            >>> NumericVector.arange(1, 5).elements
            [1.0, 2.0, 3.0, 4.0, 5.0]
            >>> NumericVector.arange(5, 1, -1).elements
            [5.0, 4.0, 3.0, 2.0, 1.0]
            >>> NumericVector.arange(5, 1, 1).elements
            []
        """
        start = validate_finite(start, "start")
        stop = validate_finite(stop, "stop")
        step = validate_finite(step, "step")

        if step == 0:
            raise InvalidArgumentError("The step value can not be 0.")
        if start == stop:
            return cls()
        if (start < stop and step < 0) or (start > stop and step > 0):
            return cls()

        span = (stop - start) / step
        if math.isinf(stop - start):
            # stop - start вне диапазона double
            span = stop / step - start / step
        if not is_valid_float(span):
            raise InvalidArgumentError(
                f"arange({start}, {stop}, {step}) produces an unbounded number of elements."
            )

        count = 1 + math.floor(span)
        logger.debug("arange(%s, %s, %s): %d elements", start, stop, step, count)
        return cls(start + index * step for index in range(count))

    @classmethod
    def fill(cls, length: int, value: float) -> "NumericVector":
        """
        Вектор длины length, все элементы равны value.

        Raises:
            InvalidArgumentError: Если length отрицательная или дробная
            InvalidInputError: Если value не конечное число
        """
        length = validate_length(length)
        return cls([value] * length)

    @classmethod
    def from_string(
        cls,
        text: str,
        separator: Optional[str] = None,
        config: Optional[ParseConfig] = None,
    ) -> "NumericVector":
        """
        Разбор строки с числами, разделёнными separator (default ";").

        Пустая строка или строка из пробелов даёт пустой вектор. Токен,
        который не является десятичным числом (знак, дробная часть,
        экспонента), превращается в NaN и отклоняется конструктором.

        Args:
            text: Строка вида "1;2.5;-3e2"
            separator: Разделитель (переопределяет config.separator)
            config: Конфигурация разбора (optional, используется default)

        Raises:
            InvalidInputError: Если какой-либо токен не является числом
            InvalidArgumentError: Если text не строка или separator пустой

        Examples:
            >>> NumericVector.from_string("1;2;3").elements
            [1.0, 2.0, 3.0]
            >>> NumericVector.from_string("1, 2", separator=",").elements
            [1.0, 2.0]
        """
        config = config or ParseConfig()
        separator = config.separator if separator is None else separator

        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")
        if not separator:
            raise InvalidArgumentError("separator must be a non-empty string")
        if text.strip() == "":
            return cls()

        return cls(_parse_token(token, config) for token in text.split(separator))

    @classmethod
    def linspace(cls, start: float, stop: float, length: int) -> "NumericVector":
        """
        length значений, равномерно распределённых от start до stop
        (оба конца включительно): start + (stop - start) * i / (length - 1).

        length == 1 или start == stop дают вектор из одного start (даже при
        length == 0), иначе length == 0 даёт пустой вектор.

        Examples:
            >>> NumericVector.linspace(0, 10, 5).elements
            [0.0, 2.5, 5.0, 7.5, 10.0]
        """
        length = validate_length(length)
        start = validate_finite(start, "start")
        stop = validate_finite(stop, "stop")

        if length == 1 or start == stop:
            return cls(start)
        if length == 0:
            return cls()

        return cls(start + (stop - start) * index / (length - 1) for index in range(length))

    @classmethod
    def ones(cls, length: int) -> "NumericVector":
        """Вектор из единиц."""
        return cls.fill(length, 1.0)

    @classmethod
    def zeros(cls, length: int) -> "NumericVector":
        """Вектор из нулей."""
        return cls.fill(length, 0.0)

    @classmethod
    def random(cls, length: int, rng: Optional[RandomSource] = None) -> "NumericVector":
        """length равномерных значений в [0, 1)."""
        length = validate_length(length)
        source = resolve(rng)
        return cls(source.random() for _ in range(length))

    @classmethod
    def random_int(
        cls,
        min_value: int,
        max_value: int,
        length: int,
        rng: Optional[RandomSource] = None,
    ) -> "NumericVector":
        """
        length равномерных целых в [min_value, max_value] (включительно).

        Raises:
            InvalidArgumentError: Если length некорректна, границы не целые
                или min_value >= max_value
        """
        length = validate_length(length)
        low = validate_integral(min_value, "min_value")
        high = validate_integral(max_value, "max_value")
        if low >= high:
            raise InvalidArgumentError(
                f"Minimum value must be smaller than maximum value, got {low} >= {high}."
            )

        source = resolve(rng)
        return cls(uniform_int(source, low, high) for _ in range(length))

    @classmethod
    def random_float(
        cls,
        min_value: float,
        max_value: float,
        length: int,
        rng: Optional[RandomSource] = None,
    ) -> "NumericVector":
        """
        length равномерных float в [min_value, max_value).

        Raises:
            InvalidArgumentError: Если length некорректна, границы не конечны
                или min_value >= max_value
        """
        length = validate_length(length)
        low = validate_finite(min_value, "min_value")
        high = validate_finite(max_value, "max_value")
        if low >= high:
            raise InvalidArgumentError(
                f"Minimum value must be smaller than maximum value, got {low} >= {high}."
            )

        source = resolve(rng)
        return cls(uniform_float(source, low, high) for _ in range(length))

    # =========================================================================
    # ДОСТУП К ЭЛЕМЕНТАМ
    # =========================================================================

    @property
    def elements(self) -> list[float]:
        """Копия данных: изменение списка не затрагивает вектор."""
        return list(self.data)

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def element(self, index: int) -> float:
        """
        Элемент по индексу.

        Raises:
            InvalidArgumentError: Если index не целый
            IndexOutOfRangeError: Если index < 0 или index >= length
        """
        index = validate_integral(index, "index")
        if index < 0 or index >= len(self.data):
            raise IndexOutOfRangeError(
                f"Index out of bounds: {index} (length {len(self.data)})."
            )
        return self.data[index]

    # =========================================================================
    # ВНУТРЕННИЕ ПОМОЩНИКИ
    # =========================================================================

    def _require_same_length(self, other: "NumericVector", operation: str) -> None:
        if len(self.data) != len(other.data):
            raise LengthMismatchError(
                f"Vector lengths must be equal for {operation}: "
                f"{len(self.data)} != {len(other.data)}."
            )

    def _operand(self, value: Operand, operation: str) -> Sequence[float]:
        """Скаляр транслируется на все элементы, вектор проверяется по длине."""
        if isinstance(value, NumericVector):
            self._require_same_length(value, operation)
            return value.data
        if is_real_number(value):
            return [float(value)] * len(self.data)
        raise InvalidArgumentError(
            f"Operand for {operation} must be a number or a NumericVector, "
            f"got {type(value).__name__}."
        )

    def _map(self, func: Callable[[float], float]) -> "NumericVector":
        return self._wrap(func(x) for x in self.data)

    def _zip(self, value: Operand, func: Callable[[float, float], float], operation: str) -> "NumericVector":
        operand = self._operand(value, operation)
        return self._wrap(func(x, y) for x, y in zip(self.data, operand))

    def _require_non_empty(self, operation: str) -> None:
        if not self.data:
            raise EmptyVectorError(f"Cannot compute {operation} of an empty vector.")

    # =========================================================================
    # ЛИНЕЙНАЯ АЛГЕБРА
    # =========================================================================

    def dot(self, other: "NumericVector") -> float:
        """
        Скалярное произведение Σ a_i * b_i.

        Raises:
            LengthMismatchError: Если длины различаются
            InvalidArgumentError: Если other не NumericVector

        Examples:
            >>> NumericVector(1, 2, 3).dot(NumericVector(4, 5, 6))
            32.0
        """
        if not isinstance(other, NumericVector):
            raise InvalidArgumentError(
                f"Operand for the dot product must be a NumericVector, got {type(other).__name__}."
            )
        self._require_same_length(other, "the dot product")
        return sum((a * b for a, b in zip(self.data, other.data)), 0.0)

    # =========================================================================
    # ПОЭЛЕМЕНТНАЯ МАТЕМАТИКА: УНАРНЫЕ
    # =========================================================================

    def ceil(self) -> "NumericVector":
        return self._map(ieee_ceil)

    def floor(self) -> "NumericVector":
        return self._map(ieee_floor)

    def exp(self) -> "NumericVector":
        """e^x поэлементно; переполнение даёт inf."""
        return self._map(ieee_exp)

    def exp10(self) -> "NumericVector":
        """10^x поэлементно."""
        return self._map(ieee_exp10)

    def log(self) -> "NumericVector":
        """Натуральный логарифм: log(0) = -inf, log(x < 0) = NaN."""
        return self._map(ieee_log)

    def log10(self) -> "NumericVector":
        return self._map(ieee_log10)

    def _trig(self, func: Callable[[float], float], radians: bool) -> "NumericVector":
        if radians:
            return self._map(lambda x: ieee_trig(func, x))
        return self._map(lambda x: ieee_trig(func, _DEG_TO_RAD * x))

    def cos(self, radians: bool = True) -> "NumericVector":
        """
        Косинус поэлементно.

        Args:
            radians: True — элементы в радианах, False — в градусах
        """
        return self._trig(math.cos, radians)

    def sin(self, radians: bool = True) -> "NumericVector":
        """Синус поэлементно (radians=False — элементы в градусах)."""
        return self._trig(math.sin, radians)

    def tan(self, radians: bool = True) -> "NumericVector":
        """Тангенс поэлементно (radians=False — элементы в градусах)."""
        return self._trig(math.tan, radians)

    def round(self, decimals: int = 0) -> "NumericVector":
        """
        Округление до decimals знаков (half away from zero: 2.5 -> 3).

        Raises:
            InvalidArgumentError: Если decimals не целое
        """
        decimals = validate_integral(decimals, "decimals")
        return self._map(lambda x: round_half_away(x, decimals))

    def cumsum(self) -> "NumericVector":
        """Накопленная сумма: элемент i = сумма элементов 0..i."""
        return self._wrap(accumulate(self.data, operator.add))

    def cumprod(self) -> "NumericVector":
        """Накопленное произведение: элемент i = произведение элементов 0..i."""
        return self._wrap(accumulate(self.data, operator.mul))

    # =========================================================================
    # ПОЭЛЕМЕНТНАЯ МАТЕМАТИКА: БИНАРНЫЕ
    # =========================================================================

    def add(self, value: Operand) -> "NumericVector":
        """
        Поэлементное сложение со скаляром или вектором той же длины.

        Raises:
            LengthMismatchError: Если длины векторов различаются
        """
        return self._zip(value, operator.add, "addition")

    def subtract(self, value: Operand) -> "NumericVector":
        return self._zip(value, operator.sub, "subtraction")

    def multiply(self, value: Operand) -> "NumericVector":
        return self._zip(value, operator.mul, "multiplication")

    def divide(self, value: Operand) -> "NumericVector":
        """
        Поэлементное деление.

        Скаляр 0 следует IEEE 754 (x / 0 = ±inf, 0 / 0 = NaN) без исключения.
        Вектор-делитель с нулевым элементом — ошибка.

        Raises:
            LengthMismatchError: Если длины векторов различаются
            DivisionByZeroError: Если вектор-делитель содержит 0
        """
        if isinstance(value, NumericVector):
            self._require_same_length(value, "division")
            if any(x == 0 for x in value.data):
                raise DivisionByZeroError("Cannot divide by zero: divisor vector contains 0.")
        return self._zip(value, ieee_divide, "division")

    def maximum(self, value: Operand) -> "NumericVector":
        """Поэлементный максимум со скаляром или вектором."""
        return self._zip(value, lambda x, y: x if x > y else y, "the elementwise maximum")

    def minimum(self, value: Operand) -> "NumericVector":
        """Поэлементный минимум со скаляром или вектором."""
        return self._zip(value, lambda x, y: x if x < y else y, "the elementwise minimum")

    # =========================================================================
    # СВЁРТКИ
    # =========================================================================

    def max(self) -> float:
        """
        Raises:
            EmptyVectorError: Если вектор пустой
        """
        self._require_non_empty("the maximum")
        return max(self.data)

    def min(self) -> float:
        """
        Raises:
            EmptyVectorError: Если вектор пустой
        """
        self._require_non_empty("the minimum")
        return min(self.data)

    def sum(self) -> float:
        """Сумма элементов; 0.0 для пустого вектора."""
        return sum(self.data, 0.0)

    # =========================================================================
    # СЛУЧАЙНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def choice(self, rng: Optional[RandomSource] = None) -> float:
        """
        Равномерно выбранный элемент.

        Raises:
            EmptyVectorError: Если вектор пустой
        """
        self._require_non_empty("a random choice")
        return self.data[uniform_index(resolve(rng), len(self.data))]

    def sample(
        self,
        size: int,
        replace: bool = True,
        rng: Optional[RandomSource] = None,
    ) -> list[float]:
        """
        Выборка из size значений.

        С возвращением — size независимых choice() (size может превышать
        длину). Без возвращения — равномерный выбор из рабочей копии, каждый
        выбранный элемент удаляется.

        Args:
            size: Размер выборки (целое >= 0)
            replace: С возвращением (default) или без
            rng: Источник случайных чисел (optional)

        Raises:
            InvalidArgumentError: Если size некорректен или (без возвращения)
                size больше длины вектора
            EmptyVectorError: Если вектор пустой, size > 0 и replace=True
        """
        size = validate_length(size, "size")
        source = resolve(rng)

        if replace:
            return [self.choice(source) for _ in range(size)]

        if size > len(self.data):
            raise InvalidArgumentError(
                f"Sample size can not exceed vector length: {size} > {len(self.data)}."
            )

        pool = list(self.data)
        return [pool.pop(uniform_index(source, len(pool))) for _ in range(size)]

    def shuffle(self, rng: Optional[RandomSource] = None) -> "NumericVector":
        """
        Новый вектор со случайной перестановкой элементов.

        Fisher–Yates: индекс i меняется с равномерным индексом из [i, n - 1],
        поэтому все n! перестановок равновероятны.
        """
        source = resolve(rng)
        shuffled = list(self.data)
        n = len(shuffled)

        for i in range(n - 1):
            j = i + uniform_index(source, n - i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

        return self._wrap(shuffled)

    # =========================================================================
    # СТАТИСТИКА
    # =========================================================================

    def mean(self) -> float:
        """
        Арифметическое среднее.

        Raises:
            EmptyVectorError: Если вектор пустой
        """
        return statistics.mean(self.data)

    def percentile(self, p: float) -> float:
        """
        Перцентиль (линейная интерполяция по отсортированным данным).

        Raises:
            InvalidArgumentError: Если p вне [0, 100]
            EmptyVectorError: Если вектор пустой
        """
        return statistics.percentile_linear(sorted(self.data), p)

    def median(self) -> float:
        return self.percentile(50)

    def iqr(self) -> float:
        """Интерквартильный размах P75 - P25."""
        ordered = sorted(self.data)
        return statistics.percentile_linear(ordered, 75) - statistics.percentile_linear(ordered, 25)

    def quantile(self, q: int) -> list[float]:
        """
        q - 1 точек разбиения на q равных частей (q=4 — квартили).

        Raises:
            InvalidArgumentError: Если q не целое >= 1
        """
        return statistics.quantile_cut_points(sorted(self.data), q)

    def average(self, weights: Union[Sequence[float], "NumericVector"]) -> float:
        """
        Взвешенное среднее Σ(x_i * w_i) / Σw_i.

        Raises:
            LengthMismatchError: Если число весов не равно длине вектора
            DivisionByZeroError: Если веса в сумме дают 0
            InvalidArgumentError: Если веса не последовательность конечных чисел
        """
        if isinstance(weights, NumericVector):
            values = list(weights.data)
        elif isinstance(weights, Iterable) and not isinstance(weights, (str, bytes)):
            values = [validate_finite(w, "weight") for w in weights]
        else:
            raise InvalidArgumentError(
                f"weights must be a sequence of numbers or a NumericVector, got {type(weights).__name__}."
            )
        return statistics.weighted_mean(self.data, values)

    def variance(self, population: bool = True) -> float:
        """
        Дисперсия: делитель n (population=True) или n - 1 (выборочная).

        Raises:
            EmptyVectorError: Если вектор пустой
            InvalidArgumentError: Если population=False и элементов меньше двух
        """
        return statistics.variance(self.data, population)

    def std(self, population: bool = True) -> float:
        """Стандартное отклонение sqrt(variance(population))."""
        return statistics.std(self.data, population)
