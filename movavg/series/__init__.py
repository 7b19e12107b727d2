"""
Series - Контейнеры временных рядов и X/Y серий
"""

from .time_period import serial_index
from .time_series import TimeSeriesDataItem, TimeSeries, TimeSeriesCollection
from .xy_series import XYDataItem, XYSeries, XYSeriesCollection
from .conversion import (
    time_series_from_pandas,
    time_series_to_pandas,
    collection_from_frame,
    collection_to_frame,
    xy_series_from_pandas,
    xy_series_to_pandas
)

__all__ = [
    'serial_index',
    'TimeSeriesDataItem',
    'TimeSeries',
    'TimeSeriesCollection',
    'XYDataItem',
    'XYSeries',
    'XYSeriesCollection',
    'time_series_from_pandas',
    'time_series_to_pandas',
    'collection_from_frame',
    'collection_to_frame',
    'xy_series_from_pandas',
    'xy_series_to_pandas'
]
