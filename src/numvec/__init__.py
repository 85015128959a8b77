"""
numvec — небольшой вектор float с NumPy-подобными операциями

Линейная алгебра, поэлементная математика, случайные выборки и описательная
статистика без полного научного стека.
"""

from numvec.config import DEFAULT_SEPARATOR, ParseConfig
from numvec.domain.numeric_vector import NumericVector
from numvec.errors import (
    DivisionByZeroError,
    EmptyVectorError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidInputError,
    LengthMismatchError,
    NumericVectorError,
)
from numvec.random_source import (
    RandomSource,
    get_default_random_source,
    seeded_random_source,
    set_default_random_source,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "NumericVector",
    "ParseConfig",
    "RandomSource",
    # Constants
    "DEFAULT_SEPARATOR",
    # Exceptions
    "NumericVectorError",
    "InvalidInputError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "DivisionByZeroError",
    "EmptyVectorError",
    "IndexOutOfRangeError",
    # Random source
    "get_default_random_source",
    "seeded_random_source",
    "set_default_random_source",
]
