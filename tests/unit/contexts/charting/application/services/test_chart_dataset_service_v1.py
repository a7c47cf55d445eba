from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tradechart.contexts.charting.application.dto import LineSeriesRequestV1
from tradechart.contexts.charting.application.services import (
    ChartDatasetServiceV1,
    close_price_indicator,
)
from tradechart.contexts.charting.domain.entities import BarSeries, Trade, TradingRecord
from tradechart.contexts.charting.domain.value_objects import CollisionPolicy
from tradechart.platform.errors import ConfigurationError
from tradechart.shared_kernel.primitives import Bar, TimeGranularity, UtcTimestamp


def _series() -> BarSeries:
    """
    Build bars at 00:00:30, 00:01:10, 00:01:45 with closes 10, 11, 12.

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
    base_seconds = UtcTimestamp(datetime(2026, 2, 4, tzinfo=timezone.utc)).epoch_seconds()
    return BarSeries(
        bars=tuple(
            Bar(
                end_time=UtcTimestamp.from_epoch_seconds(base_seconds + offset),
                open=close,
                high=close,
                low=close,
                close=close,
                volume=1.0,
            )
            for offset, close in ((30, 10.0), (70, 11.0), (105, 12.0))
        )
    )


def test_build_dataset_composes_all_builders() -> None:
    """
    Verify dataset contains candles, named lines, markers, and rendered title.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Line order follows request mapping order.
    Raises:
        AssertionError: If one dataset part differs from builder output.
    Side Effects:
        None.
    """
    series = _series()
    close = close_price_indicator(series)

    dataset = ChartDatasetServiceV1().build_dataset(
        series=series,
        record=TradingRecord(trades=(Trade(0, 2),)),
        lines={
            "close_first": LineSeriesRequestV1(
                evaluator=close,
                granularity="minute",
                collision_policy="skip_on_collision",
            ),
            "close_last": LineSeriesRequestV1(
                evaluator=close,
                granularity=TimeGranularity.MINUTE,
                collision_policy=CollisionPolicy.OVERWRITE_ON_COLLISION,
            ),
        },
        metric=1.5,
        title="Bitstamp BTC price",
    )

    assert dataset.title == "Bitstamp BTC price, trades count: 1 p = 1.5"
    assert len(dataset.ohlc) == 3
    assert [line.name for line in dataset.lines] == ["close_first", "close_last"]
    assert [point.value for point in dataset.line("close_first").points] == [10.0, 11.0]
    assert [point.value for point in dataset.line("close_last").points] == [10.0, 12.0]
    assert [marker.label for marker in dataset.markers] == ["B", "S"]


def test_dataset_as_dict_is_plain_payload() -> None:
    series = _series()
    dataset = ChartDatasetServiceV1().build_dataset(
        series=series,
        record=TradingRecord(trades=(Trade(0, 1),)),
        lines={
            "close": LineSeriesRequestV1(
                evaluator=close_price_indicator(series),
                granularity=TimeGranularity.MINUTE,
                collision_policy=CollisionPolicy.SKIP_ON_COLLISION,
            ),
        },
        metric=2.0,
        title="BTC",
        marker_granularity="second",
        summary_template="{title}: {trade_count}",
    )

    payload = dataset.as_dict()

    assert payload["title"] == "BTC: 1"
    assert payload["ohlc"][0]["time"] == series.bar(0).end_time.epoch_seconds()
    assert payload["lines"][0]["name"] == "close"
    assert payload["lines"][0]["granularity"] == "minute"
    assert payload["lines"][0]["collision_policy"] == "skip_on_collision"
    assert payload["markers"] == [
        {"time": series.bar(0).end_time.epoch_seconds(), "kind": "BUY", "label": "B"},
        {"time": series.bar(1).end_time.epoch_seconds(), "kind": "SELL", "label": "S"},
    ]


def test_build_dataset_rejects_invalid_template_and_line_request() -> None:
    series = _series()

    with pytest.raises(ConfigurationError):
        ChartDatasetServiceV1().build_dataset(
            series=series,
            record=TradingRecord(),
            lines={},
            metric=0.0,
            summary_template="{oops}",
        )
    with pytest.raises(ConfigurationError):
        LineSeriesRequestV1(
            evaluator=close_price_indicator(series),
            granularity="hour",  # type: ignore[arg-type]
            collision_policy=CollisionPolicy.SKIP_ON_COLLISION,
        )
    with pytest.raises(TypeError):
        LineSeriesRequestV1(
            evaluator=1.0,  # type: ignore[arg-type]
            granularity=TimeGranularity.SECOND,
            collision_policy=CollisionPolicy.SKIP_ON_COLLISION,
        )


def test_line_request_requires_explicit_granularity_and_policy() -> None:
    series = _series()

    with pytest.raises(TypeError):
        LineSeriesRequestV1(evaluator=close_price_indicator(series))  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        LineSeriesRequestV1(  # type: ignore[call-arg]
            evaluator=close_price_indicator(series),
            granularity=TimeGranularity.SECOND,
        )


def test_close_price_indicator_reads_close_and_rejects_out_of_range() -> None:
    series = _series()
    indicator = close_price_indicator(series)

    assert indicator(2) == 12.0
    with pytest.raises(IndexError):
        indicator(3)
