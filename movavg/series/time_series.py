# movavg/series/time_series.py

"""
Контейнеры для регулярных временных рядов: серия и коллекция серий
"""

import bisect
import math

from .time_period import serial_index, period_kind
from ..utils.errors import SeriesError
from ..utils.validators import null_not_permitted


def normalize_value(value):
    """Приводит значение к float; None и NaN означают пропуск"""
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


class TimeSeriesDataItem:
    """
    Пара (период, значение). Значение None = пропуск
    """

    __slots__ = ("period", "value")

    def __init__(self, period, value=None):
        null_not_permitted(period, "period")
        self.period = period
        self.value = normalize_value(value)

    @property
    def serial(self):
        return serial_index(self.period)

    def __eq__(self, other):
        if not isinstance(other, TimeSeriesDataItem):
            return NotImplemented
        return self.period == other.period and self.value == other.value

    def __repr__(self):
        return f"TimeSeriesDataItem({self.period!r}, {self.value!r})"


class TimeSeries:
    """
    Временной ряд: элементы хранятся по возрастанию серийного индекса,
    без повторов периодов
    """

    def __init__(self, key):
        null_not_permitted(key, "key")
        self.key = key
        self._items = []
        self._serials = []
        self._kind = None

    def add(self, period, value=None):
        """
        Добавляет элемент, сохраняя порядок по серийному индексу
        
        Args:
            period: pandas.Period или int
            value: число или None (пропуск)
        """
        item = TimeSeriesDataItem(period, value)
        kind = period_kind(period)
        if self._kind is None:
            self._kind = kind
        elif kind != self._kind:
            raise SeriesError(
                f"Series '{self.key}' holds '{self._kind}' periods, got '{kind}'"
            )

        serial = item.serial
        position = bisect.bisect_left(self._serials, serial)
        if position < len(self._serials) and self._serials[position] == serial:
            raise SeriesError(
                f"Period {period!r} already exists in series '{self.key}'"
            )
        self._serials.insert(position, serial)
        self._items.insert(position, item)
        return item

    def get_key(self):
        return self.key

    def get_item_count(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def get_time_period(self, index):
        return self._items[index].period

    def get_value(self, index):
        return self._items[index].value

    def get_serial_index(self, index):
        return self._serials[index]

    def get_periods(self):
        return [item.period for item in self._items]

    def get_values(self):
        return [item.value for item in self._items]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"TimeSeries(key={self.key!r}, items={len(self._items)})"


class TimeSeriesCollection:
    """
    Упорядоченная коллекция временных рядов с уникальными ключами
    """

    def __init__(self, series=None):
        self._series = []
        for s in series or []:
            self.add_series(s)

    def add_series(self, series):
        null_not_permitted(series, "series")
        if any(s.get_key() == series.get_key() for s in self._series):
            raise SeriesError(f"Duplicate series key: {series.get_key()!r}")
        self._series.append(series)

    def get_series_count(self):
        return len(self._series)

    def get_series(self, index):
        return self._series[index]

    def get_series_key(self, index):
        return self._series[index].get_key()

    def get_series_by_key(self, key):
        for s in self._series:
            if s.get_key() == key:
                return s
        return None

    def get_keys(self):
        return [s.get_key() for s in self._series]

    def __len__(self):
        return len(self._series)

    def __iter__(self):
        return iter(self._series)
