from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tradechart.contexts.charting.application.dto import (
    ChartDatasetV1,
    ChartLineSeriesV1,
    LineSeriesRequestV1,
)
from tradechart.contexts.charting.domain.entities import BarSeries, TradingRecord
from tradechart.shared_kernel.primitives import TimeGranularity

from .indicator_series_builder_v1 import IndicatorSeriesBuilderV1
from .ohlc_dataset_builder_v1 import OhlcDatasetBuilderV1
from .signal_marker_builder_v1 import SignalMarkerBuilderV1
from .summary_formatter_v1 import DEFAULT_SUMMARY_TEMPLATE, SummaryFormatterV1


@dataclass(frozen=True, slots=True)
class ChartDatasetServiceV1:
    """
    Orchestrate candles, price lines, trade markers, and summary title into one dataset.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/ohlc_dataset_builder_v1.py
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
      - src/tradechart/contexts/charting/application/services/signal_marker_builder_v1.py
      - src/tradechart/contexts/charting/application/services/summary_formatter_v1.py
    """

    ohlc_builder: OhlcDatasetBuilderV1 = OhlcDatasetBuilderV1()
    series_builder: IndicatorSeriesBuilderV1 = IndicatorSeriesBuilderV1()
    marker_builder: SignalMarkerBuilderV1 = SignalMarkerBuilderV1()
    summary_formatter: SummaryFormatterV1 = SummaryFormatterV1()

    def build_dataset(
        self,
        *,
        series: BarSeries,
        record: TradingRecord,
        lines: Mapping[str, LineSeriesRequestV1],
        metric: float,
        title: str = "",
        marker_granularity: TimeGranularity | str = TimeGranularity.MINUTE,
        summary_template: str = DEFAULT_SUMMARY_TEMPLATE,
    ) -> ChartDatasetV1:
        """
        Build complete chart dataset for one strategy run.

        Args:
            series: Source bar series.
            record: Trading record of the strategy run over `series`.
            lines: Ordered mapping of line name to series request.
            metric: Externally computed performance value for the summary.
            title: Base chart title inserted into `{title}`.
            marker_granularity: Bucket resolution for trade markers.
            summary_template: Summary format string.
        Returns:
            ChartDatasetV1: Dataset whose title is the rendered summary.
        Assumptions:
            Line evaluators are bound to `series`.
        Raises:
            ConfigurationError: If granularity, collision policy, or template is unsupported.
            ValueError: If line names collide after normalization.
        Side Effects:
            Emits builder skip logs.
        """
        resolved_marker_granularity = TimeGranularity.parse(marker_granularity)
        summary = self.summary_formatter.format(
            record=record,
            metric=metric,
            template=summary_template,
            title=title,
        )

        built_lines = tuple(
            ChartLineSeriesV1(
                name=name,
                granularity=request.granularity,
                collision_policy=request.collision_policy,
                points=self.series_builder.build(
                    series=series,
                    evaluator=request.evaluator,
                    granularity=request.granularity,
                    collision_policy=request.collision_policy,
                ),
            )
            for name, request in lines.items()
        )
        return ChartDatasetV1(
            title=summary,
            ohlc=self.ohlc_builder.build(series=series),
            lines=built_lines,
            markers=self.marker_builder.build(
                series=series,
                record=record,
                granularity=resolved_marker_granularity,
            ),
        )


__all__ = [
    "ChartDatasetServiceV1",
]
