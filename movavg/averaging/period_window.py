# movavg/averaging/period_window.py

"""
Скользящее среднее по периодам (окно по серийному индексу, а не по числу точек)
"""

import logging

from ..series.time_period import serial_index
from ..series.time_series import TimeSeries
from ..utils.validators import null_not_permitted, require_at_least
from .window_scan import scan_moving_average

logger = logging.getLogger(__name__)


def create_moving_average(source, name, period_count, skip=0, capped=True):
    """
    Скользящее среднее временного ряда по периодам
    
    Для каждого периода P (не раньше первого периода + skip) усредняются все
    присутствующие значения с серийным индексом в (P - period_count, P].
    При пропусках в ряду окно содержит меньше period_count точек.
    
    Args:
        source: исходный TimeSeries
        name: ключ результирующей серии
        period_count: ширина окна в периодах (>= 1)
        skip: число начальных периодов без результата (>= 0)
        capped: не смотреть больше period_count элементов назад
        
    Returns:
        TimeSeries со средними (None там, где в окне нет значений)
    """
    null_not_permitted(source, "source")
    require_at_least(period_count, 1, "period_count")
    require_at_least(skip, 0, "skip")

    result = TimeSeries(name)
    item_count = source.get_item_count()
    if item_count == 0:
        return result

    periods = [source.get_time_period(i) for i in range(item_count)]
    serials = [serial_index(p) for p in periods]
    values = [source.get_value(i) for i in range(item_count)]

    first_serial = serials[0] + skip
    max_items = period_count if capped else None

    for index, average in scan_moving_average(serials, values, period_count, first_serial, max_items):
        result.add(periods[index], average)

    logger.debug(
        f"Period MA '{name}': period_count={period_count}, skip={skip}, "
        f"{item_count} -> {result.get_item_count()} items"
    )
    return result
