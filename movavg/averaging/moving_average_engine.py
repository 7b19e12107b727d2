# movavg/averaging/moving_average_engine.py

import logging

from ..series.time_series import TimeSeriesCollection
from ..series.xy_series import XYSeriesCollection
from ..series.conversion import collection_from_frame, collection_to_frame
from .period_window import create_moving_average
from .point_window import create_point_moving_average
from .xy_window import create_xy_moving_average
from .collection import (
    derive_key,
    create_moving_average_collection,
    create_xy_moving_average_collection
)

logger = logging.getLogger(__name__)


class MovingAverageEngine:
    """
    Единая точка входа для скользящих средних
    Параметры по умолчанию берутся из конфига
    """

    def __init__(self, config=None):
        self.config = config
        self.suffix = getattr(config, 'MA_SUFFIX', ' MA') if config else ' MA'
        self.period_count = getattr(config, 'MA_PERIOD_COUNT', 3) if config else 3
        self.skip = getattr(config, 'MA_SKIP', 0) if config else 0
        self.point_count = getattr(config, 'MA_POINT_COUNT', 2) if config else 2
        self.xy_period = getattr(config, 'MA_XY_PERIOD', 1.0) if config else 1.0
        self.xy_skip = getattr(config, 'MA_XY_SKIP', 0.0) if config else 0.0
        self.capped = getattr(config, 'MA_CAPPED_SCAN', True) if config else True

    def period_average(self, source, period_count=None, skip=None):
        """
        Скользящее среднее по периодам для серии или коллекции
        
        Args:
            source: TimeSeries или TimeSeriesCollection
            period_count: ширина окна (по умолчанию из конфига)
            skip: число начальных периодов без результата
        """
        period_count = self.period_count if period_count is None else period_count
        skip = self.skip if skip is None else skip

        if isinstance(source, TimeSeriesCollection):
            return create_moving_average_collection(
                source, self.suffix, period_count, skip, capped=self.capped
            )
        key = derive_key(source.get_key(), self.suffix) if source is not None else None
        return create_moving_average(source, key, period_count, skip, capped=self.capped)

    def point_average(self, source, point_count=None):
        """Скользящее среднее по числу точек для серии или коллекции"""
        point_count = self.point_count if point_count is None else point_count

        if isinstance(source, TimeSeriesCollection):
            result = TimeSeriesCollection()
            for series in source:
                result.add_series(create_point_moving_average(
                    series, derive_key(series.get_key(), self.suffix), point_count
                ))
            return result
        key = derive_key(source.get_key(), self.suffix) if source is not None else None
        return create_point_moving_average(source, key, point_count)

    def xy_average(self, source, period=None, skip=None):
        """Скользящее среднее X/Y для серии или всего датасета"""
        period = self.xy_period if period is None else period
        skip = self.xy_skip if skip is None else skip

        if isinstance(source, XYSeriesCollection):
            return create_xy_moving_average_collection(source, self.suffix, period, skip)
        key = derive_key(source.get_key(), self.suffix) if source is not None else None
        return create_xy_moving_average(source, 0, key, period, skip)

    def analyze_frame(self, df, columns=None, period_count=None, skip=None):
        """
        Скользящие средние по периодам для колонок DataFrame
        
        Args:
            df: DataFrame, индекс - периоды (PeriodIndex, DatetimeIndex с частотой или целые)
            columns: колонки для расчёта (по умолчанию все числовые)
            
        Returns:
            DataFrame с колонками '<колонка><суффикс>'
        """
        collection = collection_from_frame(df, columns)
        result = self.period_average(collection, period_count, skip)
        logger.info(f"Moving averages calculated for {result.get_series_count()} columns")
        return collection_to_frame(result)
