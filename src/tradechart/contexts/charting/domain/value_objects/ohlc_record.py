from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OhlcRecordV1:
    """
    One unbucketed candlestick record copied from a single bar.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/ohlc_dataset_builder_v1.py
      - src/tradechart/contexts/charting/application/dto/ohlc_columns.py
    """

    time: int
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        if isinstance(self.time, bool) or not isinstance(self.time, int):
            raise TypeError("OhlcRecordV1.time must be int epoch seconds")
        for field_name in ("open", "high", "low", "close", "volume"):
            object.__setattr__(self, field_name, float(getattr(self, field_name)))

    def as_dict(self) -> dict[str, float | int]:
        """Candlestick payload keyed like common chart toolkits."""
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }
