from __future__ import annotations

from typing import Sequence

from tradechart.contexts.charting.application.dto import OhlcColumnsV1
from tradechart.contexts.charting.domain.entities import BarSeries
from tradechart.contexts.charting.domain.value_objects import OhlcRecordV1


class OhlcDatasetBuilderV1:
    """
    Build unbucketed candlestick records, one per bar, in series order.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/domain/value_objects/ohlc_record.py
      - src/tradechart/contexts/charting/application/dto/ohlc_columns.py
      - tests/unit/contexts/charting/application/services/test_ohlc_dataset_builder_v1.py
    """

    def build(self, *, series: BarSeries) -> tuple[OhlcRecordV1, ...]:
        """
        Copy every bar into one OHLC record without deduplication or truncation.

        Args:
            series: Source bar series.
        Returns:
            tuple[OhlcRecordV1, ...]: Records in bar order, time as epoch seconds.
        Assumptions:
            Bar end-times are strictly increasing (enforced by `BarSeries`).
        Raises:
            None.
        Side Effects:
            None.
        """
        return tuple(
            OhlcRecordV1(
                time=bar.end_time.epoch_seconds(),
                open=bar.open,
                high=bar.high,
                low=bar.low,
                close=bar.close,
                volume=bar.volume,
            )
            for bar in series
        )

    def to_columns(self, *, records: Sequence[OhlcRecordV1]) -> OhlcColumnsV1:
        """Parallel-array form of built records."""
        return OhlcColumnsV1.from_records(records)


def build_ohlc(series: BarSeries) -> tuple[OhlcRecordV1, ...]:
    """Module-level shortcut for `OhlcDatasetBuilderV1().build(series=...)`."""
    return OhlcDatasetBuilderV1().build(series=series)


def to_columns(records: Sequence[OhlcRecordV1]) -> OhlcColumnsV1:
    """Module-level shortcut for `OhlcDatasetBuilderV1().to_columns(records=...)`."""
    return OhlcDatasetBuilderV1().to_columns(records=records)


__all__ = [
    "OhlcDatasetBuilderV1",
    "build_ohlc",
    "to_columns",
]
