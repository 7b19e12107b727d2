# movavg/series/conversion.py

"""
Преобразование между pandas и контейнерами серий
"""

import numpy as np
import pandas as pd

from .time_series import TimeSeries, TimeSeriesCollection
from .xy_series import XYSeries, XYSeriesCollection
from ..utils.errors import InvalidArgumentError
from ..utils.validators import null_not_permitted


def _to_periods(index):
    """Приводит индекс pandas к списку периодов (pd.Period или int)"""
    if isinstance(index, pd.PeriodIndex):
        return list(index)
    if isinstance(index, pd.DatetimeIndex):
        freq = index.freq
        if freq is None and len(index) >= 3:
            freq = pd.infer_freq(index)
        if freq is None:
            raise InvalidArgumentError(
                "DatetimeIndex without frequency, cannot map to periods"
            )
        return list(index.to_period(freq))
    if pd.api.types.is_integer_dtype(index.dtype):
        return [int(v) for v in index]
    raise InvalidArgumentError(f"Unsupported index type: {type(index).__name__}")


def time_series_from_pandas(series, key=None):
    """
    Создаёт TimeSeries из pandas Series
    
    Args:
        series: pandas Series с PeriodIndex, DatetimeIndex (с частотой)
                или целочисленным индексом
        key: ключ серии (по умолчанию series.name)
        
    Returns:
        TimeSeries, NaN значения становятся пропусками
    """
    null_not_permitted(series, "series")
    key = series.name if key is None else key
    result = TimeSeries(key)
    for period, value in zip(_to_periods(series.index), series.to_numpy(dtype=float, na_value=np.nan)):
        result.add(period, value)
    return result


def time_series_to_pandas(series):
    """TimeSeries -> pandas Series (пропуски = NaN)"""
    null_not_permitted(series, "series")
    periods = series.get_periods()
    values = [np.nan if v is None else v for v in series.get_values()]
    if periods and isinstance(periods[0], pd.Period):
        index = pd.PeriodIndex(periods, freq=periods[0].freq, name="period")
    else:
        index = pd.Index(periods, dtype="int64", name="period")
    return pd.Series(values, index=index, dtype=float, name=series.get_key())


def collection_from_frame(df, columns=None):
    """
    Каждая числовая колонка DataFrame становится TimeSeries
    
    Args:
        df: DataFrame, индекс - периоды
        columns: список колонок (по умолчанию все числовые)
    """
    null_not_permitted(df, "df")
    if columns is None:
        columns = list(df.select_dtypes(include="number").columns)
    result = TimeSeriesCollection()
    for column in columns:
        result.add_series(time_series_from_pandas(df[column], key=column))
    return result


def collection_to_frame(collection):
    """Коллекция серий -> DataFrame, по колонке на серию (outer join по индексу)"""
    null_not_permitted(collection, "collection")
    if isinstance(collection, XYSeriesCollection):
        frames = [xy_series_to_pandas(s) for s in collection]
    else:
        frames = [time_series_to_pandas(s) for s in collection]
    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, axis=1)


def xy_series_from_pandas(series, key=None):
    """pandas Series (индекс = x) -> XYSeries"""
    null_not_permitted(series, "series")
    key = series.name if key is None else key
    result = XYSeries(key)
    for x, y in zip(series.index.to_numpy(dtype=float), series.to_numpy(dtype=float, na_value=np.nan)):
        result.add(x, y)
    return result


def xy_series_to_pandas(series):
    """XYSeries -> pandas Series с вещественным индексом x"""
    null_not_permitted(series, "series")
    values = [np.nan if v is None else v for v in series.get_y_values()]
    index = pd.Index(series.get_x_values(), dtype=float, name="x")
    return pd.Series(values, index=index, dtype=float, name=series.get_key())
