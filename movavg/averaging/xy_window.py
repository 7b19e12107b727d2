# movavg/averaging/xy_window.py

"""
Скользящее среднее для X/Y серий (окно по расстоянию вдоль X)
"""

import logging

from ..series.xy_series import XYSeries, XYSeriesCollection
from ..utils.validators import null_not_permitted, require_positive, require_non_negative
from .window_scan import scan_moving_average

logger = logging.getLogger(__name__)


def create_xy_moving_average(source, series, name, period, skip=0.0):
    """
    Скользящее среднее одной серии XY-датасета
    
    Для каждой точки x (не меньше первого x + skip) усредняются присутствующие
    y в окне (x - period, x]. Число точек в окне не ограничено.
    
    Args:
        source: XYSeriesCollection (или отдельная XYSeries, тогда series = 0)
        series: индекс серии в датасете
        name: ключ результирующей серии
        period: ширина окна по X (> 0)
        skip: начальный отрезок по X без результата (>= 0)
        
    Returns:
        XYSeries со средними
    """
    null_not_permitted(source, "source")
    require_positive(period, "period")
    require_non_negative(skip, "skip")
    period = float(period)
    skip = float(skip)

    if isinstance(source, XYSeries):
        source = XYSeriesCollection([source])

    result = XYSeries(name)
    item_count = source.get_item_count(series)
    if item_count == 0:
        return result

    xs = [source.get_x_value(series, i) for i in range(item_count)]
    ys = [source.get_y(series, i) for i in range(item_count)]
    first_x = xs[0] + skip

    for index, average in scan_moving_average(xs, ys, period, first_x):
        result.add(xs[index], average)

    logger.debug(
        f"XY MA '{name}': period={period}, skip={skip}, "
        f"{item_count} -> {result.get_item_count()} items"
    )
    return result
