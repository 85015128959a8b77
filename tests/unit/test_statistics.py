"""
Тесты для Statistics — описательная статистика над последовательностями

Проверяемые инварианты:
1. Линейный перцентиль: точное значение при целом ранге, интерполяция иначе
2. Монотонность перцентиля по p
3. Population vs sample дисперсия
4. Взвешенное среднее и его ошибки
"""

import math

import pytest

from numvec.errors import (
    DivisionByZeroError,
    EmptyVectorError,
    InvalidArgumentError,
    LengthMismatchError,
)
from numvec.math.statistics import (
    mean,
    percentile_linear,
    quantile_cut_points,
    std,
    variance,
    weighted_mean,
)

SPREAD = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


class TestMean:
    """Тесты mean и weighted_mean."""

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_mean_of_empty_raises(self):
        with pytest.raises(EmptyVectorError, match="mean"):
            mean([])

    def test_weighted_mean(self):
        """Σ(x*w)/Σw"""
        assert weighted_mean([1.0, 2.0, 3.0], [3.0, 2.0, 1.0]) == pytest.approx(10.0 / 6.0)

    def test_equal_weights_match_mean(self):
        assert weighted_mean(SPREAD, [1.0] * len(SPREAD)) == pytest.approx(mean(SPREAD))

    def test_weighted_mean_length_mismatch(self):
        with pytest.raises(LengthMismatchError, match="Number of weights"):
            weighted_mean([1.0, 2.0], [1.0])

    def test_weighted_mean_zero_weight_sum(self):
        with pytest.raises(DivisionByZeroError, match="sum to zero"):
            weighted_mean([1.0, 2.0], [1.0, -1.0])

    def test_weighted_mean_empty(self):
        with pytest.raises(EmptyVectorError):
            weighted_mean([], [])


class TestVariance:
    """Тесты variance и std."""

    def test_population_variance(self):
        assert variance(SPREAD) == pytest.approx(4.0)
        assert std(SPREAD) == pytest.approx(2.0)

    def test_sample_variance(self):
        """Поправка Бесселя: делитель n - 1"""
        assert variance(SPREAD, population=False) == pytest.approx(32.0 / 7.0)
        assert std(SPREAD, population=False) == pytest.approx(math.sqrt(32.0 / 7.0))

    def test_single_element(self):
        """Population дисперсия одного элемента равна 0, выборочная не определена"""
        assert variance([3.0]) == 0.0

        with pytest.raises(InvalidArgumentError, match="at least two elements"):
            variance([3.0], population=False)

    def test_empty(self):
        with pytest.raises(EmptyVectorError):
            variance([])


class TestPercentile:
    """Тесты percentile_linear и quantile_cut_points."""

    def test_exact_rank(self):
        """Целый ранг возвращает элемент без интерполяции"""
        assert percentile_linear([1.0, 2.0, 3.0, 4.0, 5.0], 50) == 3.0
        assert percentile_linear([1.0, 2.0, 3.0, 4.0], 0) == 1.0
        assert percentile_linear([1.0, 2.0, 3.0, 4.0], 100) == 4.0

    def test_interpolated_rank(self):
        """r = (n - 1) * p / 100 между соседними элементами"""
        data = [1.0, 2.0, 3.0, 4.0]
        assert percentile_linear(data, 50) == pytest.approx(2.5)
        assert percentile_linear(data, 25) == pytest.approx(1.75)
        assert percentile_linear(data, 75) == pytest.approx(3.25)

    def test_monotonic_in_p(self):
        data = sorted([7.0, -1.0, 3.5, 3.5, 10.0, 0.25])
        values = [percentile_linear(data, p) for p in range(0, 101, 5)]
        assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("p", [-0.01, 100.01, math.nan])
    def test_out_of_range(self, p):
        with pytest.raises(InvalidArgumentError):
            percentile_linear([1.0, 2.0], p)

    def test_empty(self):
        with pytest.raises(EmptyVectorError, match="percentile"):
            percentile_linear([], 50)

    def test_quartiles(self):
        assert quantile_cut_points([1.0, 2.0, 3.0, 4.0, 5.0], 4) == pytest.approx([2.0, 3.0, 4.0])

    def test_two_quantiles_is_median(self):
        assert quantile_cut_points([1.0, 2.0, 3.0, 4.0], 2) == pytest.approx([2.5])

    def test_single_quantile_has_no_cut_points(self):
        assert quantile_cut_points([1.0, 2.0], 1) == []

    @pytest.mark.parametrize("q", [0, -2, 2.5])
    def test_invalid_q(self, q):
        with pytest.raises(InvalidArgumentError):
            quantile_cut_points([1.0, 2.0], q)
