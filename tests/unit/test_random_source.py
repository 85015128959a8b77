"""
Тесты для Random Source — инжектируемый источник случайных чисел

Проверяет:
1. Замену и восстановление общего источника процесса
2. Детерминизм при фиксированном seed
3. Границы производных распределений (index, int, float)
"""

import random

import pytest

from numvec.random_source import (
    RandomSource,
    get_default_random_source,
    resolve,
    seeded_random_source,
    set_default_random_source,
    uniform_float,
    uniform_index,
    uniform_int,
)


class TestDefaultSource:
    """Тесты общего источника процесса."""

    def test_default_is_random_instance(self):
        assert isinstance(get_default_random_source(), random.Random)
        assert isinstance(get_default_random_source(), RandomSource)

    def test_set_returns_previous(self, scripted, restore_default_source):
        original = get_default_random_source()
        replacement = scripted([0.5])

        previous = set_default_random_source(replacement)

        assert previous is original
        assert get_default_random_source() is replacement

    def test_set_rejects_objects_without_random(self, restore_default_source):
        with pytest.raises(TypeError, match="random"):
            set_default_random_source(object())

    def test_resolve_prefers_explicit_source(self, scripted):
        explicit = scripted([0.1])
        assert resolve(explicit) is explicit
        assert resolve(None) is get_default_random_source()


class TestSeededSource:
    """Детерминизм и воспроизводимость."""

    def test_same_seed_same_sequence(self):
        first = seeded_random_source(42)
        second = seeded_random_source(42)
        assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]

    def test_different_seeds_differ(self):
        first = seeded_random_source(1)
        second = seeded_random_source(2)
        assert [first.random() for _ in range(5)] != [second.random() for _ in range(5)]


class TestDerivedDistributions:
    """Тесты uniform_index / uniform_int / uniform_float."""

    def test_uniform_index_bounds(self, scripted):
        assert uniform_index(scripted([0.0]), 4) == 0
        assert uniform_index(scripted([0.5]), 4) == 2
        assert uniform_index(scripted([0.9999999999999999]), 4) == 3

    def test_uniform_index_never_reaches_size(self, scripted):
        """u, округлённое до size, ограничивается size - 1"""
        assert uniform_index(scripted([1.0]), 5) == 4

    def test_uniform_int_inclusive(self, scripted):
        assert uniform_int(scripted([0.0]), 1, 6) == 1
        assert uniform_int(scripted([0.9999]), 1, 6) == 6
        assert uniform_int(scripted([0.5]), -3, 3) == 0

    def test_uniform_float_half_open(self, scripted):
        assert uniform_float(scripted([0.0]), 2.0, 4.0) == 2.0
        assert uniform_float(scripted([0.5]), 2.0, 4.0) == 3.0
        assert uniform_float(scripted([0.9999]), 2.0, 4.0) < 4.0
        assert uniform_float(scripted([1.0]), 2.0, 4.0) == 2.0

    def test_uniform_float_wide_bounds(self, scripted):
        """Границы порядка 1e308 не переполняют интерполяцию"""
        assert uniform_float(scripted([0.5]), -1e308, 1e308) == 0.0
        assert uniform_float(scripted([0.25]), -1e308, 1e308) == pytest.approx(-5e307)
        assert uniform_float(scripted([0.0]), -1e308, 1e308) == -1e308
