from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from tradechart.contexts.charting.application.use_cases import BuildStrategyChartUseCase
from tradechart.contexts.charting.domain.entities import BarSeries, Trade, TradingRecord
from tradechart.platform.errors import ConfigurationError
from tradechart.shared_kernel.primitives import Bar, UtcTimestamp


class _StrategyRunnerStub:
    """
    Deterministic strategy-runner stub returning a fixed trading record.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/ports/strategy_runner.py
    """

    def __init__(self, *, record: TradingRecord) -> None:
        self._record = record
        self.calls: list[tuple[BarSeries, Any]] = []

    def run(self, *, series: BarSeries, strategy: Any) -> TradingRecord:
        self.calls.append((series, strategy))
        return self._record


class _CriterionStub:
    def __init__(self, *, value: float) -> None:
        self._value = value
        self.calls: list[TradingRecord] = []

    def calculate(self, *, series: BarSeries, record: TradingRecord) -> float:
        self.calls.append(record)
        return self._value


def _series() -> BarSeries:
    """
    Build bars at 00:00:30.2, 00:00:30.7, 00:01:10 so two bars share one second.

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
    base_millis = UtcTimestamp(datetime(2026, 2, 4, tzinfo=timezone.utc)).epoch_millis()
    return BarSeries(
        bars=tuple(
            Bar(
                end_time=UtcTimestamp.from_epoch_millis(base_millis + offset_ms),
                open=close,
                high=close,
                low=close,
                close=close,
                volume=1.0,
            )
            for offset_ms, close in ((30_200, 10.0), (30_700, 11.0), (70_000, 12.0))
        ),
        name="BTCUSD",
    )


def test_execute_calls_each_port_once_and_builds_dataset() -> None:
    """
    Verify use-case runs engine ports once and applies configured chart defaults.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Defaults are second-granularity overwrite close line and minute markers.
    Raises:
        AssertionError: If port calls or dataset content differ.
    Side Effects:
        None.
    """
    series = _series()
    record = TradingRecord(trades=(Trade(0, 2),))
    runner = _StrategyRunnerStub(record=record)
    criterion = _CriterionStub(value=1.0375)
    strategy = object()

    dataset = BuildStrategyChartUseCase(
        strategy_runner=runner,
        criterion=criterion,
    ).execute(series=series, strategy=strategy, title="Bitstamp BTC price")

    assert runner.calls == [(series, strategy)]
    assert criterion.calls == [record]
    assert dataset.title == "Bitstamp BTC price, trades count: 1 p = 1.0375"
    assert len(dataset.ohlc) == 3
    assert [line.name for line in dataset.lines] == ["close"]
    assert [point.value for point in dataset.line("close").points] == [11.0, 12.0]
    assert [str(marker.time) for marker in dataset.markers] == [
        "2026-02-04T00:00:00.000Z",
        "2026-02-04T00:01:00.000Z",
    ]


def test_execute_uses_custom_defaults() -> None:
    series = _series()
    use_case = BuildStrategyChartUseCase(
        strategy_runner=_StrategyRunnerStub(record=TradingRecord()),
        criterion=_CriterionStub(value=0.0),
        price_line_name="price",
        series_granularity="minute",
        series_collision_policy="skip_on_collision",
        marker_granularity="second",
        summary_template="{trade_count} trades",
    )

    dataset = use_case.execute(series=series, strategy="sma-cross")

    assert dataset.title == "0 trades"
    assert [point.value for point in dataset.line("price").points] == [10.0, 12.0]
    assert dataset.markers == ()


def test_use_case_rejects_missing_ports_and_invalid_defaults() -> None:
    runner = _StrategyRunnerStub(record=TradingRecord())
    criterion = _CriterionStub(value=0.0)

    with pytest.raises(ValueError, match="strategy_runner"):
        BuildStrategyChartUseCase(
            strategy_runner=None,  # type: ignore[arg-type]
            criterion=criterion,
        )
    with pytest.raises(ValueError, match="criterion"):
        BuildStrategyChartUseCase(
            strategy_runner=runner,
            criterion=None,  # type: ignore[arg-type]
        )
    with pytest.raises(ConfigurationError):
        BuildStrategyChartUseCase(
            strategy_runner=runner,
            criterion=criterion,
            summary_template="{bogus}",
        )
    with pytest.raises(ConfigurationError):
        BuildStrategyChartUseCase(
            strategy_runner=runner,
            criterion=criterion,
            series_collision_policy="average",
        )
