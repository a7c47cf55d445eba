from __future__ import annotations

from dataclasses import dataclass

from .utc_timestamp import UtcTimestamp


@dataclass(frozen=True, slots=True)
class Bar:
    """
    Bar: one fixed-interval price/volume summary as produced by the bar source.

    Fields:
    - end_time: bar period end (UTC, ms precision)
    - OHLC prices
    - volume
    """

    end_time: UtcTimestamp

    open: float
    high: float
    low: float
    close: float

    volume: float

    def __post_init__(self) -> None:
        if not isinstance(self.end_time, UtcTimestamp):
            raise TypeError("Bar requires end_time as UtcTimestamp")

        if self.high < self.low:
            raise ValueError(f"Bar requires high >= low, got high={self.high} low={self.low}")

        if self.volume < 0:
            raise ValueError("Bar requires volume >= 0")

    def as_dict(self) -> dict:
        """
        Serialize bar as plain mapping (time as str(UtcTimestamp), numbers as float).
        """
        return {
            "end_time": str(self.end_time),
            "open": float(self.open),
            "high": float(self.high),
            "low": float(self.low),
            "close": float(self.close),
            "volume": float(self.volume),
        }
