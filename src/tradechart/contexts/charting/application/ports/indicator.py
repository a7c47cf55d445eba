from __future__ import annotations

from typing import Protocol


class Indicator(Protocol):
    """
    Indicator evaluator port: numeric value for one bar index of a bound series.

    Evaluators may signal "no value for this bar" by raising
    `IndicatorValueUnavailableError` (or returning `None`/non-finite); series builders treat
    that as a per-bar skip.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
      - src/tradechart/contexts/charting/application/services/close_price.py
    """

    def __call__(self, index: int) -> float | None:
        """
        Evaluate indicator at bar `index`.

        Args:
            index: Zero-based bar position in the series the evaluator is bound to.
        Returns:
            float | None: Indicator value, or `None` when unavailable.
        Assumptions:
            Evaluator is deterministic for a fixed series.
        Raises:
            IndicatorValueUnavailableError: If value cannot be produced for this index.
        Side Effects:
            None.
        """
        ...
