"""
Averaging - Скользящие средние по периодам, точкам и X/Y расстоянию
"""

from .moving_average_engine import MovingAverageEngine
from .period_window import create_moving_average
from .point_window import create_point_moving_average
from .xy_window import create_xy_moving_average
from .collection import (
    derive_key,
    create_moving_average_collection,
    create_xy_moving_average_collection
)

__all__ = [
    'MovingAverageEngine',
    'create_moving_average',
    'create_point_moving_average',
    'create_xy_moving_average',
    'derive_key',
    'create_moving_average_collection',
    'create_xy_moving_average_collection'
]
