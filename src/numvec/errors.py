"""
Errors — иерархия исключений NumericVector

Все ошибки синхронные и не подлежат повтору: они сигнализируют о нарушении
контракта вызывающей стороной. Внутри библиотеки исключения не
перехватываются.

Базовый класс наследуется от Exception (не от ValueError), поэтому
pydantic-валидаторы пропускают его наружу без обёртки в ValidationError.
"""


class NumericVectorError(Exception):
    """Базовое исключение для всех ошибок NumericVector."""
    pass


class InvalidInputError(NumericVectorError):
    """
    Нечисловое, NaN или бесконечное значение передано в конструктор.

    Проверка выполняется только на границе конструирования из внешних данных.
    """
    pass


class InvalidArgumentError(NumericVectorError):
    """
    Некорректный аргумент фабрики или операции.

    Примеры: step == 0, отрицательная/дробная длина, percentile вне [0, 100],
    min >= max, выборка без возвращения больше длины вектора.
    """
    pass


class LengthMismatchError(NumericVectorError):
    """Бинарная операция между векторами разной длины."""
    pass


class DivisionByZeroError(NumericVectorError):
    """Поэлементное деление на вектор, содержащий ноль."""
    pass


class EmptyVectorError(NumericVectorError):
    """Редукция (max, min, choice, mean, ...) над пустым вектором."""
    pass


class IndexOutOfRangeError(NumericVectorError):
    """element(index) с индексом вне [0, length)."""
    pass
