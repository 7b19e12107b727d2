# movavg/series/time_period.py

"""
Серийный индекс периода времени
"""

import numpy as np
import pandas as pd

from ..utils.errors import InvalidArgumentError


def serial_index(period):
    """
    Возвращает серийный индекс периода
    
    Args:
        period: pandas.Period (индекс = ordinal, непрерывен внутри одной частоты)
                или целое число (само является индексом)
        
    Returns:
        int: серийный индекс
    """
    if isinstance(period, pd.Period):
        return int(period.ordinal)
    if isinstance(period, (int, np.integer)) and not isinstance(period, bool):
        return int(period)
    raise InvalidArgumentError(f"Unsupported time period: {period!r}")


def period_kind(period):
    """
    Тип периода: частота для pandas.Period, 'serial' для целых чисел
    
    Используется контейнером, чтобы не смешивать разные виды периодов в одной серии
    """
    if isinstance(period, pd.Period):
        return period.freqstr
    serial_index(period)
    return "serial"
