# tests/test_moving_average_engine.py

"""
Unit тесты для MovingAverageEngine и запуска из CSV
"""

import pytest
import pandas as pd
from types import SimpleNamespace
from main import run, read_frame
from movavg.averaging import MovingAverageEngine
from movavg.series import TimeSeries, TimeSeriesCollection, XYSeries, XYSeriesCollection
from movavg.utils.errors import InvalidStateError, NullInputError


def make_series(key, values):
    series = TimeSeries(key)
    for period, value in enumerate(values, start=1):
        series.add(period, value)
    return series


class TestMovingAverageEngine:
    def setup_method(self):
        self.engine = MovingAverageEngine()
    
    def test_defaults_without_config(self):
        """Тест: значения по умолчанию"""
        assert self.engine.suffix == " MA"
        assert self.engine.period_count == 3
        assert self.engine.capped == True
    
    def test_config_overrides(self):
        """Тест: параметры из конфига"""
        config = SimpleNamespace(MA_SUFFIX="_sma", MA_PERIOD_COUNT=2, MA_SKIP=1)
        engine = MovingAverageEngine(config)
        
        result = engine.period_average(make_series("close", [1.0, 2.0, 3.0]))
        
        assert result.get_key() == "close_sma"
        assert result.get_periods() == [2, 3]
        assert result.get_values() == pytest.approx([1.5, 2.5])
    
    def test_period_average_collection(self):
        """Тест: коллекция серий"""
        collection = TimeSeriesCollection([make_series("a", [1.0, 2.0, 3.0, 4.0, 5.0])])
        
        result = self.engine.period_average(collection)
        
        assert result.get_keys() == ["a MA"]
        assert result.get_series(0).get_values() == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])
    
    def test_point_average(self):
        """Тест: среднее по точкам"""
        result = self.engine.point_average(make_series("p", [10.0, 20.0, 30.0]))
        
        assert result.get_key() == "p MA"
        assert result.get_values() == pytest.approx([15.0, 25.0])
    
    def test_point_average_collection_no_partial_result(self):
        """Тест: ошибка в одной серии прерывает всю операцию"""
        collection = TimeSeriesCollection([
            make_series("ok", [1.0, 2.0, 3.0]),
            make_series("broken", [1.0, None, 3.0])
        ])
        
        with pytest.raises(InvalidStateError):
            self.engine.point_average(collection)
    
    def test_xy_average(self):
        """Тест: X/Y серия и датасет"""
        series = XYSeries("xy")
        for x in [0.0, 1.0, 2.0]:
            series.add(x, x * 2)
        
        single = self.engine.xy_average(series, period=1.5)
        dataset = self.engine.xy_average(XYSeriesCollection([series]), period=1.5)
        
        assert single.get_key() == "xy MA"
        assert single.get_y_values() == pytest.approx([0.0, 1.0, 3.0])
        assert dataset.get_series(0).get_y_values() == single.get_y_values()
    
    def test_null_source(self):
        """Тест: источник None"""
        with pytest.raises(NullInputError):
            self.engine.period_average(None)
    
    def test_analyze_frame(self):
        """Тест: DataFrame с числовыми колонками"""
        df = pd.DataFrame(
            {"close": [1.0, 2.0, 3.0, 4.0, 5.0], "symbol": ["X"] * 5},
            index=pd.period_range("2024-01-01", periods=5, freq="D")
        )
        
        result = self.engine.analyze_frame(df)
        
        assert list(result.columns) == ["close MA"]
        assert result["close MA"].tolist() == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])


class TestRun:
    def setup_method(self):
        self.config = SimpleNamespace(MA_FREQ="D", MA_PERIOD_COUNT=2, MA_SUFFIX=" MA")
    
    def test_integer_index_csv(self, tmp_path):
        """Тест: CSV с целочисленным индексом"""
        source = tmp_path / "in.csv"
        target = tmp_path / "out.csv"
        source.write_text("period,close\n1,2\n2,4\n4,8\n")
        
        result = run(source, target, self.config)
        
        assert target.exists()
        assert result["close MA"].tolist() == pytest.approx([2.0, 3.0, 8.0])
    
    def test_date_index_csv(self, tmp_path):
        """Тест: CSV с датами превращается в дневные периоды"""
        source = tmp_path / "in.csv"
        source.write_text("date,close,volume\n2024-01-01,1,10\n2024-01-02,3,30\n2024-01-03,5,50\n")
        
        df = read_frame(source, "D")
        result = run(source, tmp_path / "out.csv", self.config, columns=["close"])
        
        assert isinstance(df.index, pd.PeriodIndex)
        assert list(result.columns) == ["close MA"]
        assert result["close MA"].tolist() == pytest.approx([1.0, 2.0, 4.0])


class TestConfig:
    def test_logs_dir_created(self, tmp_path, monkeypatch):
        """Тест: Config создаёт директорию логов"""
        from config import Config
        monkeypatch.chdir(tmp_path)
        
        config = Config()
        
        assert (tmp_path / config.LOGS_DIR).is_dir()
        assert config.log_path.endswith(config.LOG_FILE)
