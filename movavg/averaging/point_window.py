# movavg/averaging/point_window.py

"""
Скользящее среднее по количеству точек (без учёта возраста точек)
"""

import logging

import numpy as np
import pandas as pd

from ..series.time_series import TimeSeries
from ..utils.errors import InvalidStateError
from ..utils.validators import null_not_permitted, require_at_least

logger = logging.getLogger(__name__)


def create_point_moving_average(source, name, point_count):
    """
    Скользящее среднее по point_count последним точкам
    
    Результат появляется, когда окно заполнено впервые (индекс point_count - 1).
    
    Args:
        source: исходный TimeSeries без пропусков
        name: ключ результирующей серии
        point_count: число точек в окне (>= 2)
        
    Returns:
        TimeSeries длиной max(0, n - point_count + 1)
    """
    null_not_permitted(source, "source")
    require_at_least(point_count, 2, "point_count")

    result = TimeSeries(name)
    item_count = source.get_item_count()
    values = pd.Series([source.get_value(i) for i in range(item_count)], dtype=float)

    missing = values.isna()
    if missing.any():
        index = int(np.flatnonzero(missing.to_numpy())[0])
        raise InvalidStateError(
            f"Missing value at index {index} in series '{source.get_key()}', "
            f"point moving average requires all values"
        )

    means = values.rolling(point_count).mean()
    for i in range(point_count - 1, item_count):
        result.add(source.get_time_period(i), means.iloc[i])

    logger.debug(
        f"Point MA '{name}': point_count={point_count}, "
        f"{item_count} -> {result.get_item_count()} items"
    )
    return result
