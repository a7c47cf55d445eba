from __future__ import annotations

import logging
from typing import Iterable

from tradechart.contexts.charting.domain.entities import BarSeries, TradingRecord
from tradechart.contexts.charting.domain.value_objects import MarkerV1
from tradechart.shared_kernel.primitives import TimeGranularity

log = logging.getLogger(__name__)


class SignalMarkerBuilderV1:
    """
    Build BUY/SELL markers at the bucketed end-times of trade entry and exit bars.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/domain/value_objects/marker.py
      - src/tradechart/contexts/charting/domain/entities/trading_record.py
      - tests/unit/contexts/charting/application/services/test_signal_marker_builder_v1.py
    """

    def build(
        self,
        *,
        series: BarSeries,
        record: TradingRecord,
        granularity: TimeGranularity | str,
    ) -> tuple[MarkerV1, ...]:
        """
        Emit one BUY and one SELL marker per in-range trade, in trade order.

        Args:
            series: Bar series the trading record indexes into.
            record: Trades produced by the strategy run.
            granularity: Marker bucket resolution.
        Returns:
            tuple[MarkerV1, ...]: `2k` markers for `k` in-range trades, BUY before SELL.
        Assumptions:
            `entry_index <= exit_index` is not enforced; markers follow indexes as given.
        Raises:
            ConfigurationError: If granularity is unsupported.
        Side Effects:
            Emits DEBUG log per skipped trade and one INFO summary when trades were skipped.
        """
        resolved_granularity = TimeGranularity.parse(granularity)

        markers: list[MarkerV1] = []
        skipped = 0
        for trade_index, trade in enumerate(record):
            if not series.contains_index(trade.entry_index) or not series.contains_index(
                trade.exit_index
            ):
                skipped += 1
                log.debug(
                    "trade markers skipped trade_index=%s entry_index=%s exit_index=%s bars=%s",
                    trade_index,
                    trade.entry_index,
                    trade.exit_index,
                    len(series),
                )
                continue

            entry_time = series.bar(trade.entry_index).end_time
            exit_time = series.bar(trade.exit_index).end_time
            markers.append(
                MarkerV1.buy(
                    time=resolved_granularity.bucket_open(entry_time),
                    trade_index=trade_index,
                )
            )
            markers.append(
                MarkerV1.sell(
                    time=resolved_granularity.bucket_open(exit_time),
                    trade_index=trade_index,
                )
            )

        if skipped > 0:
            log.info(
                "trade markers built with skipped trades trades=%s skipped=%s markers=%s",
                record.trade_count,
                skipped,
                len(markers),
            )
        return tuple(markers)


def build_markers(
    series: BarSeries,
    record: TradingRecord,
    granularity: TimeGranularity | str,
) -> tuple[MarkerV1, ...]:
    """Module-level shortcut for `SignalMarkerBuilderV1().build(...)`."""
    return SignalMarkerBuilderV1().build(series=series, record=record, granularity=granularity)


def sort_markers_for_display(markers: Iterable[MarkerV1]) -> tuple[MarkerV1, ...]:
    """
    Order markers by `(time, trade order)` for renderers that require sorted markers.

    Args:
        markers: Markers in canonical trade order.
    Returns:
        tuple[MarkerV1, ...]: Time-sorted markers; BUY stays before SELL of the same trade.
    Assumptions:
        Input comes from `SignalMarkerBuilderV1`, so BUY precedes SELL per trade.
    Raises:
        None.
    Side Effects:
        None.
    """
    return tuple(
        sorted(markers, key=lambda item: (item.time.epoch_millis(), item.trade_index))
    )


__all__ = [
    "SignalMarkerBuilderV1",
    "build_markers",
    "sort_markers_for_display",
]
