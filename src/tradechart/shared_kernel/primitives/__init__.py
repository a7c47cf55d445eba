"""
Shared Kernel primitives.

This package re-exports the minimal set of time and bar primitives so that other
modules can import them from one place:

    from tradechart.shared_kernel.primitives import Bar, TimeGranularity, UtcTimestamp
"""

from .bar import Bar
from .time_granularity import TimeGranularity, bucket_time
from .utc_timestamp import UtcTimestamp

__all__ = [
    "Bar",
    "TimeGranularity",
    "UtcTimestamp",
    "bucket_time",
]
