"""
tsexport Export - Core Module

CSV writer and batch serialization of the registered time series.
"""

from .writer import write_out
from .serializer import (
    fixed_point_notation,
    serialize_specific_time_series,
    serialize_time_series,
)

__all__ = [
    'write_out',
    'fixed_point_notation',
    'serialize_specific_time_series',
    'serialize_time_series',
]
