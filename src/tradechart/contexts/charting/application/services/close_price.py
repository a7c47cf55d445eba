from __future__ import annotations

from dataclasses import dataclass

from tradechart.contexts.charting.domain.entities import BarSeries


@dataclass(frozen=True, slots=True)
class ClosePriceIndicator:
    """
    Evaluator returning the close price of the bar at `index`.

    Field access only; indicator formulas live in the external strategy engine.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/ports/indicator.py
      - src/tradechart/contexts/charting/application/use_cases/build_strategy_chart.py
    """

    series: BarSeries

    def __call__(self, index: int) -> float:
        return self.series.bar(index).close


def close_price_indicator(series: BarSeries) -> ClosePriceIndicator:
    """Close-price evaluator bound to `series`."""
    return ClosePriceIndicator(series=series)


__all__ = [
    "ClosePriceIndicator",
    "close_price_indicator",
]
