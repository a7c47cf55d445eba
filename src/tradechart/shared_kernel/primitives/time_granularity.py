from __future__ import annotations

from datetime import timedelta
from enum import Enum

from tradechart.platform.errors import ConfigurationError

from .utc_timestamp import UtcTimestamp

# Bucket widths in milliseconds, epoch-aligned.
_BUCKET_MILLIS = {
    "minute": 60_000,
    "second": 1_000,
}


class TimeGranularity(str, Enum):
    """
    Resolution used to align bar end-times onto a chart time axis.

    Representation:
    - value: "minute" or "second"
    """

    MINUTE = "minute"
    SECOND = "second"

    @classmethod
    def parse(cls, raw: TimeGranularity | str) -> TimeGranularity:
        """
        Normalize granularity literal or enum member.

        Args:
            raw: Enum member or case-insensitive literal (`minute`, `second`).
        Returns:
            TimeGranularity: Normalized granularity.
        Assumptions:
            None.
        Raises:
            ConfigurationError: If literal is not a supported granularity.
        Side Effects:
            None.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ConfigurationError(
                f"granularity must be a string literal, got {type(raw).__name__}"
            )
        normalized = raw.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ConfigurationError(
            f"Unsupported granularity={normalized!r}. Supported: {sorted(_BUCKET_MILLIS.keys())}"
        )

    def duration(self) -> timedelta:
        """Bucket width as timedelta."""
        return timedelta(milliseconds=_BUCKET_MILLIS[self.value])

    def bucket_open(self, ts: UtcTimestamp) -> UtcTimestamp:
        """
        Truncate timestamp down to the start of its epoch-aligned bucket.

        Pure alignment only, no aggregation.
        """
        width_ms = _BUCKET_MILLIS[self.value]
        return UtcTimestamp.from_epoch_millis((ts.epoch_millis() // width_ms) * width_ms)

    def __str__(self) -> str:
        return self.value


def bucket_time(timestamp: UtcTimestamp, granularity: TimeGranularity | str) -> UtcTimestamp:
    """
    Map a timestamp to its time bucket under the given granularity.

    Args:
        timestamp: Bar end-time or any UTC timestamp.
        granularity: `TimeGranularity` member or its string literal.
    Returns:
        UtcTimestamp: Start of the enclosing minute/second.
    Assumptions:
        Timestamp satisfies `UtcTimestamp` invariants.
    Raises:
        ConfigurationError: If granularity is unsupported.
    Side Effects:
        None.
    """
    return TimeGranularity.parse(granularity).bucket_open(timestamp)
