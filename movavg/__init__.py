"""
movavg - Скользящие средние для временных рядов и X/Y серий
"""

from .averaging import (
    MovingAverageEngine,
    create_moving_average,
    create_point_moving_average,
    create_xy_moving_average,
    create_moving_average_collection,
    create_xy_moving_average_collection
)
from .series import (
    TimeSeries,
    TimeSeriesCollection,
    XYSeries,
    XYSeriesCollection
)

__version__ = "0.1.0"

__all__ = [
    'MovingAverageEngine',
    'create_moving_average',
    'create_point_moving_average',
    'create_xy_moving_average',
    'create_moving_average_collection',
    'create_xy_moving_average_collection',
    'TimeSeries',
    'TimeSeriesCollection',
    'XYSeries',
    'XYSeriesCollection'
]
