# tests/test_period_window.py

"""
Unit тесты для скользящего среднего по периодам
"""

import pytest
import pandas as pd
from movavg.averaging.period_window import create_moving_average
from movavg.series.time_series import TimeSeries
from movavg.utils.errors import NullInputError, InvalidArgumentError


def make_series(points, key="S"):
    series = TimeSeries(key)
    for period, value in points:
        series.add(period, value)
    return series


class TestPeriodMovingAverage:
    def setup_method(self):
        self.source = make_series([(p, float(p)) for p in range(1, 6)])
    
    def test_trailing_mean(self):
        """Тест: [1..5], окно 3 периода"""
        result = create_moving_average(self.source, "S MA", 3, 0)
        
        assert result.get_key() == "S MA"
        assert result.get_periods() == [1, 2, 3, 4, 5]
        assert result.get_values() == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])
    
    def test_period_count_one_returns_source(self):
        """Тест: окно 1 период возвращает исходные значения"""
        result = create_moving_average(self.source, "copy", 1, 0)
        
        assert result.get_periods() == self.source.get_periods()
        assert result.get_values() == self.source.get_values()
    
    def test_skip_excludes_initial_periods(self):
        """Тест: skip убирает начальные периоды, но они остаются в окне"""
        result = create_moving_average(self.source, "S MA", 3, 2)
        
        assert result.get_periods() == [3, 4, 5]
        assert result.get_values() == pytest.approx([2.0, 3.0, 4.0])
    
    def test_skip_beyond_series(self):
        """Тест: skip больше длины ряда даёт пустой результат"""
        result = create_moving_average(self.source, "S MA", 3, 10)
        
        assert result.get_item_count() == 0
    
    def test_gaps_shrink_window(self):
        """Тест: окно считается по серийному индексу, а не по числу точек"""
        source = make_series([(1, 1.0), (2, 2.0), (5, 5.0), (6, 6.0)])
        
        result = create_moving_average(source, "gap", 3, 0)
        
        assert result.get_periods() == [1, 2, 5, 6]
        assert result.get_values() == pytest.approx([1.0, 1.5, 5.0, 5.5])
    
    def test_missing_values_excluded(self):
        """Тест: пропуски не входят ни в сумму, ни в количество"""
        source = make_series([(1, 1.0), (2, None), (3, 3.0), (4, None)])
        
        result = create_moving_average(source, "missing", 2, 0)
        
        assert result.get_values() == pytest.approx([1.0, 1.0, 3.0, 3.0])
    
    def test_empty_window_emits_missing(self):
        """Тест: окно без значений даёт пропуск, а не отсутствие элемента"""
        source = make_series([(1, 1.0), (2, None), (3, None), (4, 4.0)])
        
        result = create_moving_average(source, "missing", 2, 0)
        
        assert result.get_item_count() == 4
        assert result.get_values()[2] is None
        assert result.get_values()[3] == 4.0
    
    def test_uncapped_matches_capped_for_distinct_periods(self):
        """Тест: для строго возрастающих периодов ограничение окна не влияет"""
        source = make_series([(1, 1.0), (2, 4.0), (4, 2.0), (5, 8.0), (9, 3.0)])
        
        capped = create_moving_average(source, "c", 3, 0)
        uncapped = create_moving_average(source, "u", 3, 0, capped=False)
        
        assert capped.get_values() == uncapped.get_values()
    
    def test_pandas_periods(self):
        """Тест: месячные периоды pandas"""
        periods = pd.period_range("2024-01", periods=4, freq="M")
        source = make_series(zip(periods, [10.0, 20.0, 30.0, 40.0]))
        
        result = create_moving_average(source, "monthly", 2, 1)
        
        assert result.get_periods() == list(periods[1:])
        assert result.get_values() == pytest.approx([15.0, 25.0, 35.0])
    
    def test_output_positions_follow_source(self):
        """Тест: позиции результата = позиции источника начиная с границы skip"""
        source = make_series([(p, float(p % 3)) for p in range(0, 40, 3)])
        
        result = create_moving_average(source, "S MA", 7, 6)
        
        assert result.get_item_count() <= source.get_item_count()
        assert result.get_periods() == [p for p in source.get_periods() if p >= 6]
    
    def test_source_not_modified_and_deterministic(self):
        """Тест: источник не меняется, повторный расчёт даёт то же"""
        before = self.source.get_values()
        
        first = create_moving_average(self.source, "a", 2, 0)
        second = create_moving_average(self.source, "a", 2, 0)
        
        assert self.source.get_values() == before
        assert first.get_values() == second.get_values()
    
    def test_constant_inexact_value(self):
        """Тест: константный ряд 0.1 даёт ровно 0.1 в каждом окне"""
        source = make_series([(p, 0.1) for p in range(60)])
        
        result = create_moving_average(source, "S MA", 4, 0)
        
        assert [v for v in result.get_values() if v != 0.1] == []
    
    def test_empty_source(self):
        """Тест: пустой ряд даёт пустой результат"""
        result = create_moving_average(TimeSeries("empty"), "empty MA", 3, 0)
        
        assert result.get_item_count() == 0
        assert result.get_key() == "empty MA"
    
    def test_invalid_period_count(self):
        """Тест: period_count < 1"""
        with pytest.raises(InvalidArgumentError):
            create_moving_average(self.source, "bad", 0, 0)
        with pytest.raises(ValueError):
            create_moving_average(self.source, "bad", 2.5, 0)
    
    def test_negative_skip(self):
        """Тест: отрицательный skip"""
        with pytest.raises(InvalidArgumentError):
            create_moving_average(self.source, "bad", 3, -1)
    
    def test_null_source(self):
        """Тест: источник None"""
        with pytest.raises(NullInputError):
            create_moving_average(None, "bad", 3, 0)
