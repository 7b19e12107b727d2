"""
Utils - Ошибки, проверки аргументов и валидация данных
"""

from .errors import (
    MovingAverageError,
    NullInputError,
    InvalidArgumentError,
    InvalidStateError,
    SeriesError
)
from .validators import (
    null_not_permitted,
    require_integer,
    require_at_least,
    require_positive,
    require_non_negative
)

__all__ = [
    'MovingAverageError',
    'NullInputError',
    'InvalidArgumentError',
    'InvalidStateError',
    'SeriesError',
    'null_not_permitted',
    'require_integer',
    'require_at_least',
    'require_positive',
    'require_non_negative'
]
