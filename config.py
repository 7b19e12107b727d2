"""
Конфигурация проекта movavg
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

# Определяем путь к .env файлу (в корне проекта)
env_path = Path(__file__).parent / '.env'

# Загрузка переменных окружения из .env файла
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=True)
else:
    # Пробуем загрузить из текущей директории
    load_dotenv()


class Config:
    """Класс для хранения всех настроек проекта"""
    
    # ============================================
    # СКОЛЬЗЯЩИЕ СРЕДНИЕ ПО ПЕРИОДАМ
    # ============================================
    MA_SUFFIX: str = os.getenv("MA_SUFFIX", " MA")
    MA_PERIOD_COUNT: int = int(os.getenv("MA_PERIOD_COUNT", "3"))
    MA_SKIP: int = int(os.getenv("MA_SKIP", "0"))
    # Ограничивать окно period_count элементами (поведение по умолчанию)
    MA_CAPPED_SCAN: bool = os.getenv("MA_CAPPED_SCAN", "True").lower() == "true"
    # Частота периодов для индекса из CSV (D, W, M, Q, Y ...)
    MA_FREQ: str = os.getenv("MA_FREQ", "D")
    
    # ============================================
    # СКОЛЬЗЯЩИЕ СРЕДНИЕ ПО ТОЧКАМ
    # ============================================
    MA_POINT_COUNT: int = int(os.getenv("MA_POINT_COUNT", "2"))
    
    # ============================================
    # X/Y СЕРИИ
    # ============================================
    MA_XY_PERIOD: float = float(os.getenv("MA_XY_PERIOD", "1.0"))
    MA_XY_SKIP: float = float(os.getenv("MA_XY_SKIP", "0.0"))
    
    # ============================================
    # ВАЛИДАЦИЯ ДАННЫХ
    # ============================================
    MAX_MISSING_RATIO: float = float(os.getenv("MAX_MISSING_RATIO", "0.5"))
    
    # ============================================
    # ЛОГИРОВАНИЕ
    # ============================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE", "movavg.log")
    LOGS_DIR: str = os.getenv("LOGS_DIR", "logs")
    
    def __init__(self):
        """Инициализация и создание необходимых директорий"""
        os.makedirs(self.LOGS_DIR, exist_ok=True)
    
    @property
    def log_path(self) -> Optional[str]:
        """Полный путь к файлу лога (None - только консоль)"""
        if not self.LOG_FILE:
            return None
        return os.path.join(self.LOGS_DIR, self.LOG_FILE)
