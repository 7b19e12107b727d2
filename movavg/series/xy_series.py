# movavg/series/xy_series.py

"""
Контейнеры для нерегулярных X/Y серий и XY-датасета
"""

import bisect
import math

from .time_series import normalize_value
from ..utils.errors import SeriesError, InvalidArgumentError
from ..utils.validators import null_not_permitted


class XYDataItem:
    """Пара (x, y). y = None означает пропуск"""

    __slots__ = ("x", "y")

    def __init__(self, x, y=None):
        null_not_permitted(x, "x")
        x = float(x)
        if math.isnan(x):
            raise InvalidArgumentError("x must not be NaN")
        self.x = x
        self.y = normalize_value(y)

    def __eq__(self, other):
        if not isinstance(other, XYDataItem):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"XYDataItem({self.x!r}, {self.y!r})"


class XYSeries:
    """
    Серия X/Y: элементы автоматически сортируются по x, повторы x запрещены
    """

    def __init__(self, key):
        null_not_permitted(key, "key")
        self.key = key
        self._items = []
        self._xs = []

    def add(self, x, y=None):
        item = XYDataItem(x, y)
        position = bisect.bisect_left(self._xs, item.x)
        if position < len(self._xs) and self._xs[position] == item.x:
            raise SeriesError(f"x={item.x} already exists in series '{self.key}'")
        self._xs.insert(position, item.x)
        self._items.insert(position, item)
        return item

    def get_key(self):
        return self.key

    def get_item_count(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def get_x(self, index):
        return self._items[index].x

    def get_y(self, index):
        return self._items[index].y

    def get_x_values(self):
        return list(self._xs)

    def get_y_values(self):
        return [item.y for item in self._items]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"XYSeries(key={self.key!r}, items={len(self._items)})"


class XYSeriesCollection:
    """
    XY-датасет: доступ к значениям по индексу серии и индексу элемента
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

    def get_series(self, series):
        return self._series[series]

    def get_series_key(self, series):
        return self._series[series].get_key()

    def get_item_count(self, series):
        return self._series[series].get_item_count()

    def get_x_value(self, series, item):
        return self._series[series].get_x(item)

    def get_y(self, series, item):
        return self._series[series].get_y(item)

    def get_keys(self):
        return [s.get_key() for s in self._series]

    def __len__(self):
        return len(self._series)

    def __iter__(self):
        return iter(self._series)
