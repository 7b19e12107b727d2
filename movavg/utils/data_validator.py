# movavg/utils/data_validator.py

import logging

from ..series.time_period import serial_index

logger = logging.getLogger(__name__)


class SeriesQualityValidator:
    """
    Валидатор качества серий перед расчётом скользящих средних
    """

    def __init__(self, config=None):
        self.config = config
        # Максимальная доля пропусков
        self.max_missing_ratio = getattr(config, 'MAX_MISSING_RATIO', 0.5) if config else 0.5

    def _check_missing(self, values, issues):
        missing_count = sum(1 for v in values if v is None)
        penalty = 0.0
        if values and missing_count / len(values) > self.max_missing_ratio:
            issues.append(
                f"Too many missing values: {missing_count}/{len(values)} "
                f"> {self.max_missing_ratio:.0%}"
            )
            penalty = 0.5
        elif missing_count:
            issues.append(f"Found {missing_count} missing values")
            penalty = 0.1
        return missing_count, penalty

    def _report(self, kind, key, quality_score, issues, item_count, missing_count):
        valid = quality_score > 0.3
        quality_score = max(0, quality_score)

        if not valid:
            logger.warning(f"{kind} '{key}' validation failed: {issues}")

        return {
            "valid": valid,
            "quality_score": quality_score,
            "issues": issues,
            "item_count": item_count,
            "missing_count": missing_count
        }

    def validate_time_series(self, series):
        """
        Валидация временного ряда
        
        Returns:
            dict: {"valid": bool, "quality_score": 0-1, "issues": [],
                   "item_count": int, "missing_count": int}
        """
        if series is None or series.is_empty():
            return {"valid": False, "quality_score": 0, "issues": ["Series is empty"],
                    "item_count": 0, "missing_count": 0}

        issues = []
        quality_score = 1.0
        count = series.get_item_count()
        serials = [serial_index(series.get_time_period(i)) for i in range(count)]

        # Порядок и повторы периодов
        disorder = sum(1 for a, b in zip(serials, serials[1:]) if b <= a)
        if disorder:
            issues.append(f"Periods are not strictly increasing at {disorder} positions")
            quality_score -= 0.8

        # Пропущенные периоды (разрывы серийного индекса)
        gaps = sum(1 for a, b in zip(serials, serials[1:]) if b - a > 1)
        if gaps:
            issues.append(f"Found {gaps} period gaps")
            quality_score -= 0.1

        missing_count, penalty = self._check_missing(series.get_values(), issues)
        quality_score -= penalty

        return self._report("Time series", series.get_key(), quality_score, issues, count, missing_count)

    def validate_xy_series(self, series):
        """
        Валидация X/Y серии
        
        Returns:
            dict той же структуры, что и validate_time_series
        """
        if series is None or series.is_empty():
            return {"valid": False, "quality_score": 0, "issues": ["Series is empty"],
                    "item_count": 0, "missing_count": 0}

        issues = []
        quality_score = 1.0
        count = series.get_item_count()
        xs = [series.get_x(i) for i in range(count)]

        disorder = sum(1 for a, b in zip(xs, xs[1:]) if b <= a)
        if disorder:
            issues.append(f"X values are not strictly increasing at {disorder} positions")
            quality_score -= 0.8

        missing_count, penalty = self._check_missing(series.get_y_values(), issues)
        quality_score -= penalty

        return self._report("XY series", series.get_key(), quality_score, issues, count, missing_count)
