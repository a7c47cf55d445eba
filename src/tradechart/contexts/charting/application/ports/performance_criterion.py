from __future__ import annotations

from typing import Protocol

from tradechart.contexts.charting.domain.entities import BarSeries, TradingRecord


class PerformanceCriterion(Protocol):
    """
    Outbound port for one scalar performance metric (for example total profit).

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/use_cases/build_strategy_chart.py
      - src/tradechart/contexts/charting/application/services/summary_formatter_v1.py
    """

    def calculate(self, *, series: BarSeries, record: TradingRecord) -> float:
        """
        Compute metric for record over series.

        Args:
            series: Bar series the record was produced on.
            record: Trading record to score.
        Returns:
            float: Metric inserted verbatim into the chart summary.
        Assumptions:
            None.
        Raises:
            Exception: Criterion-specific failures propagate unchanged.
        Side Effects:
            None.
        """
        ...
