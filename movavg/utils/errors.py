# movavg/utils/errors.py

"""
Иерархия исключений для расчёта скользящих средних
"""


class MovingAverageError(Exception):
    """Базовое исключение пакета"""


class NullInputError(MovingAverageError, TypeError):
    """Источник (серия или коллекция) не передан"""


class InvalidArgumentError(MovingAverageError, ValueError):
    """Числовой параметр вне допустимой области"""


class InvalidStateError(MovingAverageError, RuntimeError):
    """Значение, которое обязано присутствовать, отсутствует"""


class SeriesError(MovingAverageError, ValueError):
    """Некорректное использование контейнера серии"""
