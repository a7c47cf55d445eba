from __future__ import annotations


class ChartDomainError(ValueError):
    """
    Base deterministic domain error for the charting bounded context.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/platform/errors/configuration_error.py
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
    """


class IndicatorValueUnavailableError(ChartDomainError):
    """
    Raised by an indicator evaluator when no value exists for a bar index.

    Typical cause is insufficient warm-up history. Series builders treat it as a per-bar
    skip, never as a build failure.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/ports/indicator.py
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
    """

    def __init__(self, *, index: int, reason: str = "value unavailable") -> None:
        """
        Build unavailable-value error bound to one bar index.

        Args:
            index: Bar index requested from the evaluator.
            reason: Short human-readable cause.
        Returns:
            None.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            Stores index for skip logging.
        """
        super().__init__(f"indicator value unavailable at index {index}: {reason}")
        self._index = index

    @property
    def index(self) -> int:
        """Bar index that has no indicator value."""
        return self._index
