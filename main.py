"""
movavg - точка входа
Читает CSV, считает скользящие средние по периодам для числовых колонок и пишет результат
"""

import argparse
import logging

import pandas as pd

from config import Config
from movavg.averaging import MovingAverageEngine
from movavg.series import collection_from_frame
from movavg.utils.data_validator import SeriesQualityValidator

logger = logging.getLogger(__name__)


def setup_logging(config):
    """Настройка логирования: консоль + файл в LOGS_DIR"""
    handlers = [logging.StreamHandler()]
    if config.log_path:
        handlers.append(logging.FileHandler(config.log_path))
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def read_frame(path, freq):
    """
    Чтение CSV: первая колонка - индекс периодов
    
    Целочисленный индекс используется как серийный, иначе строки
    разбираются в pandas.Period с частотой freq
    """
    df = pd.read_csv(path, index_col=0)
    if not pd.api.types.is_integer_dtype(df.index.dtype):
        df.index = pd.PeriodIndex(df.index.astype(str), freq=freq)
    return df


def run(input_csv, output_csv, config, columns=None, period_count=None, skip=None):
    """
    Расчёт скользящих средних для CSV файла
    
    Returns:
        DataFrame с результатом (он же записывается в output_csv)
    """
    engine = MovingAverageEngine(config)
    validator = SeriesQualityValidator(config)

    df = read_frame(input_csv, config.MA_FREQ)
    logger.info(f"Loaded {len(df)} rows, columns: {list(df.columns)}")

    for series in collection_from_frame(df, columns):
        report = validator.validate_time_series(series)
        if report["issues"]:
            logger.info(f"'{series.get_key()}': {report['issues']}")

    result = engine.analyze_frame(df, columns=columns, period_count=period_count, skip=skip)
    result.to_csv(output_csv)
    logger.info(f"Saved {len(result.columns)} moving average columns to {output_csv}")
    return result


def main(argv=None):
    """Главная функция запуска"""
    parser = argparse.ArgumentParser(description="Moving averages for CSV time series")
    parser.add_argument("input", help="input CSV, first column is the period index")
    parser.add_argument("output", help="output CSV")
    parser.add_argument("--column", action="append", dest="columns", help="column to average (repeatable)")
    parser.add_argument("--period-count", type=int, default=None)
    parser.add_argument("--skip", type=int, default=None)
    args = parser.parse_args(argv)

    config = Config()
    setup_logging(config)
    run(args.input, args.output, config, args.columns, args.period_count, args.skip)


if __name__ == "__main__":
    main()
