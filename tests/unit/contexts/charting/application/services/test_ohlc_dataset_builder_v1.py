from __future__ import annotations

from datetime import datetime, timezone

import numpy as np

from tradechart.contexts.charting.application.services import (
    OhlcDatasetBuilderV1,
    build_ohlc,
    to_columns,
)
from tradechart.contexts.charting.domain.entities import BarSeries
from tradechart.shared_kernel.primitives import Bar, UtcTimestamp


def _series() -> BarSeries:
    """
    Build three bars inside one minute to show OHLC records are never bucketed.

    Args:
        None.
    Returns:
        BarSeries: Deterministic three-bar series.
    Assumptions:
        None.
    Raises:
        ValueError: If bar invariants are violated.
    Side Effects:
        None.
    """
    rows = (
        (10, 100.0, 101.0, 99.0, 100.5, 2.0),
        (20, 100.5, 102.0, 100.0, 101.5, 3.0),
        (30, 101.5, 101.5, 98.0, 98.5, 0.0),
    )
    return BarSeries(
        bars=tuple(
            Bar(
                end_time=UtcTimestamp(
                    datetime(2026, 2, 4, 12, 0, second, 500000, tzinfo=timezone.utc)
                ),
                open=open_,
                high=high,
                low=low,
                close=close,
                volume=volume,
            )
            for second, open_, high, low, close, volume in rows
        ),
        name="BTC",
    )


def test_build_ohlc_copies_every_bar_in_order() -> None:
    series = _series()

    records = build_ohlc(series)

    assert len(records) == series.bar_count
    for bar, record in zip(series, records):
        assert record.time == bar.end_time.epoch_seconds()
        assert (record.open, record.high, record.low, record.close, record.volume) == (
            bar.open,
            bar.high,
            bar.low,
            bar.close,
            bar.volume,
        )
    assert [record.time for record in records] == [
        records[0].time,
        records[0].time + 10,
        records[0].time + 20,
    ]


def test_build_ohlc_empty_series_and_idempotence() -> None:
    assert build_ohlc(BarSeries(bars=())) == ()
    assert OhlcDatasetBuilderV1().build(series=_series()) == build_ohlc(_series())


def test_to_columns_produces_aligned_numpy_arrays() -> None:
    records = build_ohlc(_series())

    columns = to_columns(records)

    assert len(columns) == 3
    assert columns.time.dtype == np.int64
    assert columns.close.dtype == np.float64
    assert columns.close.tolist() == [100.5, 101.5, 98.5]
    assert columns.as_dict()["time"] == [record.time for record in records]


def test_to_columns_accepts_empty_records() -> None:
    columns = to_columns(())

    assert len(columns) == 0
    assert columns.as_dict()["volume"] == []
