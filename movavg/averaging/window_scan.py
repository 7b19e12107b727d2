# movavg/averaging/window_scan.py

"""
Общая логика скользящего окна (P - W, P] по упорядоченным позициям
"""

import numpy as np
import pandas as pd
from pandas.api.indexers import BaseIndexer


class TrailingDistanceIndexer(BaseIndexer):
    """
    Границы окон для rolling: окно позиции P - элементы j <= i,
    у которых position[j] > P - width

    Атрибуты (передаются в конструктор):
        positions: numpy массив позиций по возрастанию
        width: ширина окна в единицах позиции
        max_items: максимум элементов в окне (None = без ограничения)
    """

    def get_window_bounds(self, num_values=0, min_periods=None, center=None, closed=None, step=None):
        end = np.arange(1, num_values + 1, dtype=np.int64)
        start = np.searchsorted(self.positions, self.positions - self.width, side="right").astype(np.int64)
        if self.max_items is not None:
            start = np.maximum(start, end - self.max_items)
        return start, end


def trailing_mean(positions, values, width, max_items=None):
    """
    Скользящее среднее присутствующих значений по окну (P - width, P]

    Args:
        positions: позиции по возрастанию (серийные индексы или x)
        values: значения той же длины, None = пропуск
        width: ширина окна
        max_items: ограничение числа элементов в окне

    Returns:
        Series со средними, NaN там, где в окне нет значений
    """
    indexer = TrailingDistanceIndexer(
        positions=np.asarray(positions),
        width=width,
        max_items=max_items
    )
    return pd.Series(values, dtype=float).rolling(indexer, min_periods=1).mean()


def scan_moving_average(positions, values, width, first_position, max_items=None):
    """
    Скользящее среднее для всех позиций не раньше first_position

    Элементы до first_position в результат не попадают, но участвуют
    в окнах последующих позиций.

    Returns:
        list of (index, mean), mean = None при пустом окне
    """
    means = trailing_mean(positions, values, width, max_items).to_numpy()
    eligible = np.flatnonzero(np.asarray(positions) >= first_position)
    return [
        (int(index), None if np.isnan(means[index]) else float(means[index]))
        for index in eligible
    ]
