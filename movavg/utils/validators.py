# movavg/utils/validators.py

from .errors import NullInputError, InvalidArgumentError


def null_not_permitted(obj, name):
    """Проверка, что аргумент передан"""
    if obj is None:
        raise NullInputError(f"Null '{name}' argument.")


def require_integer(value, name):
    """
    Проверка, что параметр целочисленный
    
    Args:
        value: проверяемое значение
        name: имя параметра для сообщения об ошибке
    """
    # bool наследуется от int, но количество периодов им быть не может
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}.")


def require_at_least(value, minimum, name):
    """Проверка нижней границы целого параметра"""
    require_integer(value, name)
    if value < minimum:
        raise InvalidArgumentError(
            f"{name} must be greater than or equal to {minimum}."
        )


def require_positive(value, name):
    """Проверка, что вещественный параметр строго положительный"""
    if value is None or not value > 0.0:
        raise InvalidArgumentError(f"{name} must be positive.")


def require_non_negative(value, name):
    """Проверка, что параметр не отрицательный"""
    if value is None or not value >= 0:
        raise InvalidArgumentError(f"{name} must be >= 0.")
