"""
Config — конфигурация разбора и построения NumericVector
"""

from dataclasses import dataclass
from typing import Final, Optional

# Разделитель по умолчанию для from_string
DEFAULT_SEPARATOR: Final[str] = ";"


@dataclass(frozen=True)
class ParseConfig:
    """Конфигурация разбора строки в NumericVector.

    Attributes:
        separator: разделитель токенов (default ";")
        strip_tokens: убирать пробелы вокруг токенов перед разбором
        empty_token_value: значение для пустого токена ("1;;3").
            None означает, что пустой токен нечисловой и отклоняется.
    """

    separator: str = DEFAULT_SEPARATOR
    strip_tokens: bool = True
    empty_token_value: Optional[float] = None
