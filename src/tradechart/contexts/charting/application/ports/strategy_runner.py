from __future__ import annotations

from typing import Any, Protocol

from tradechart.contexts.charting.domain.entities import BarSeries, TradingRecord


class StrategyRunner(Protocol):
    """
    Outbound port to the external strategy/backtesting engine.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/use_cases/build_strategy_chart.py
      - src/tradechart/contexts/charting/application/ports/performance_criterion.py
    """

    def run(self, *, series: BarSeries, strategy: Any) -> TradingRecord:
        """
        Run opaque strategy definition over series and return its trading record.

        Args:
            series: Bar series to trade on.
            strategy: Engine-specific strategy definition (not interpreted here).
        Returns:
            TradingRecord: Closed trades in chronological entry order.
        Assumptions:
            Trade indexes reference `series` positions.
        Raises:
            Exception: Engine-specific failures propagate unchanged.
        Side Effects:
            Engine-defined.
        """
        ...
