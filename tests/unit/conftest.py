"""Общие fixtures для unit-тестов numvec."""

import pytest

from numvec.random_source import get_default_random_source, set_default_random_source


class ScriptedSource:
    """Источник, возвращающий заранее заданные значения по кругу."""

    def __init__(self, values):
        self._values = list(values)
        self._position = 0

    def random(self) -> float:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value


@pytest.fixture
def scripted():
    """Фабрика детерминированных источников: scripted([0.0, 0.5])"""
    return ScriptedSource


@pytest.fixture
def restore_default_source():
    """Восстанавливает общий источник после теста"""
    previous = get_default_random_source()
    yield
    set_default_random_source(previous)
