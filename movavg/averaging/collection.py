# movavg/averaging/collection.py

"""
Скользящие средние для всех серий коллекции
"""

import logging

from ..series.time_series import TimeSeriesCollection
from ..series.xy_series import XYSeriesCollection
from ..utils.validators import (
    null_not_permitted,
    require_at_least,
    require_positive,
    require_non_negative
)
from .period_window import create_moving_average
from .xy_window import create_xy_moving_average

logger = logging.getLogger(__name__)


def derive_key(key, suffix):
    """Ключ производной серии: <ключ источника><суффикс>"""
    return f"{key}{suffix}"


def create_moving_average_collection(source, suffix, period_count, skip=0, capped=True):
    """
    Новая TimeSeriesCollection со скользящим средним для каждой серии
    
    Args:
        source: TimeSeriesCollection
        suffix: суффикс, добавляемый к ключу каждой серии
        period_count: ширина окна в периодах
        skip: число начальных периодов без результата
        capped: ограничивать окно period_count элементами
        
    Returns:
        TimeSeriesCollection в том же порядке серий
    """
    null_not_permitted(source, "source")
    null_not_permitted(suffix, "suffix")
    require_at_least(period_count, 1, "period_count")
    require_at_least(skip, 0, "skip")

    result = TimeSeriesCollection()
    for i in range(source.get_series_count()):
        source_series = source.get_series(i)
        ma_series = create_moving_average(
            source_series,
            derive_key(source_series.get_key(), suffix),
            period_count,
            skip,
            capped=capped
        )
        result.add_series(ma_series)

    logger.debug(f"Period MA collection: {result.get_series_count()} series, suffix='{suffix}'")
    return result


def create_xy_moving_average_collection(source, suffix, period, skip=0.0):
    """
    Новый XY-датасет со скользящим средним для каждой серии
    
    Args:
        source: XYSeriesCollection
        suffix: суффикс для ключей серий
        period: ширина окна по X (целое значение приводится к float)
        skip: начальный отрезок по X без результата
        
    Returns:
        XYSeriesCollection
    """
    null_not_permitted(source, "source")
    null_not_permitted(suffix, "suffix")
    require_positive(period, "period")
    require_non_negative(skip, "skip")

    result = XYSeriesCollection()
    for i in range(source.get_series_count()):
        ma_series = create_xy_moving_average(
            source,
            i,
            derive_key(source.get_series_key(i), suffix),
            float(period),
            float(skip)
        )
        result.add_series(ma_series)

    logger.debug(f"XY MA collection: {result.get_series_count()} series, suffix='{suffix}'")
    return result
