from __future__ import annotations

import logging
from typing import Any

from tradechart.contexts.charting.application.dto import ChartDatasetV1, LineSeriesRequestV1
from tradechart.contexts.charting.application.ports import PerformanceCriterion, StrategyRunner
from tradechart.contexts.charting.application.services import (
    DEFAULT_SUMMARY_TEMPLATE,
    ChartDatasetServiceV1,
    close_price_indicator,
    validate_summary_template,
)
from tradechart.contexts.charting.domain.entities import BarSeries
from tradechart.contexts.charting.domain.value_objects import CollisionPolicy
from tradechart.shared_kernel.primitives import TimeGranularity

log = logging.getLogger(__name__)


class BuildStrategyChartUseCase:
    """
    Run a strategy through the engine port and turn its outcome into a chart dataset.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/ports/strategy_runner.py
      - src/tradechart/contexts/charting/application/ports/performance_criterion.py
      - src/tradechart/contexts/charting/adapters/outbound/config/charting_runtime_config.py
    """

    def __init__(
        self,
        *,
        strategy_runner: StrategyRunner,
        criterion: PerformanceCriterion,
        dataset_service: ChartDatasetServiceV1 | None = None,
        price_line_name: str = "close",
        series_granularity: TimeGranularity | str = TimeGranularity.SECOND,
        series_collision_policy: CollisionPolicy | str = CollisionPolicy.OVERWRITE_ON_COLLISION,
        marker_granularity: TimeGranularity | str = TimeGranularity.MINUTE,
        summary_template: str = DEFAULT_SUMMARY_TEMPLATE,
    ) -> None:
        """
        Initialize engine ports and chart defaults.

        Args:
            strategy_runner: Port running a strategy over a bar series.
            criterion: Port computing the performance metric of a trading record.
            dataset_service: Optional custom dataset orchestrator.
            price_line_name: Name of the close-price line series.
            series_granularity: Bucket resolution of the close-price line.
            series_collision_policy: Collision policy of the close-price line.
            marker_granularity: Bucket resolution of trade markers.
            summary_template: Summary format string.
        Returns:
            None.
        Assumptions:
            Defaults usually come from `configs/<env>/charting.yaml` loader.
        Raises:
            ValueError: If ports are missing or line name is blank.
            ConfigurationError: If one literal default is unsupported.
        Side Effects:
            None.
        """
        if strategy_runner is None:  # type: ignore[truthy-bool]
            raise ValueError("BuildStrategyChartUseCase requires strategy_runner")
        if criterion is None:  # type: ignore[truthy-bool]
            raise ValueError("BuildStrategyChartUseCase requires criterion")
        normalized_line_name = price_line_name.strip()
        if not normalized_line_name:
            raise ValueError("BuildStrategyChartUseCase.price_line_name must be non-empty")

        self._strategy_runner = strategy_runner
        self._criterion = criterion
        self._dataset_service = (
            dataset_service if dataset_service is not None else ChartDatasetServiceV1()
        )
        self._price_line_name = normalized_line_name
        self._series_granularity = TimeGranularity.parse(series_granularity)
        self._series_collision_policy = CollisionPolicy.parse(series_collision_policy)
        self._marker_granularity = TimeGranularity.parse(marker_granularity)
        self._summary_template = validate_summary_template(summary_template)

    def execute(self, *, series: BarSeries, strategy: Any, title: str = "") -> ChartDatasetV1:
        """
        Build chart dataset for one strategy run over `series`.

        Args:
            series: Source bar series.
            strategy: Opaque strategy handle understood by the runner port.
            title: Base chart title, usually instrument and venue.
        Returns:
            ChartDatasetV1: Candles, close-price line, trade markers, and summary title.
        Assumptions:
            Runner and criterion are deterministic for identical inputs.
        Raises:
            Exception: Propagated from engine ports.
        Side Effects:
            Calls each engine port exactly once and emits one INFO log.
        """
        record = self._strategy_runner.run(series=series, strategy=strategy)
        metric = self._criterion.calculate(series=series, record=record)
        dataset = self._dataset_service.build_dataset(
            series=series,
            record=record,
            lines={
                self._price_line_name: LineSeriesRequestV1(
                    evaluator=close_price_indicator(series),
                    granularity=self._series_granularity,
                    collision_policy=self._series_collision_policy,
                ),
            },
            metric=metric,
            title=title,
            marker_granularity=self._marker_granularity,
            summary_template=self._summary_template,
        )
        log.info(
            "strategy chart built series=%s bars=%s trades=%s markers=%s",
            series.name or "-",
            len(series),
            record.trade_count,
            len(dataset.markers),
        )
        return dataset


__all__ = [
    "BuildStrategyChartUseCase",
]
