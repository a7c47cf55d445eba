from __future__ import annotations


class ConfigurationError(ValueError):
    """
    Raised when a caller passes an unsupported configuration literal or template.

    This is a programming mistake, not a data condition, so it is always surfaced to the
    caller at call time and never swallowed by per-bar or per-trade skip policies.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/shared_kernel/primitives/time_granularity.py
      - src/tradechart/contexts/charting/domain/value_objects/collision_policy.py
      - src/tradechart/contexts/charting/adapters/outbound/config/charting_runtime_config.py
    """

    def __init__(self, message: str, *, field_path: str | None = None) -> None:
        """
        Build configuration error with optional dotted field path.

        Args:
            message: Human-readable failure description.
            field_path: Optional dotted path of the offending setting
                (for example `charting.series.granularity`).
        Returns:
            None.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            Prefixes message with field path when one is provided.
        """
        normalized_path = field_path.strip() if field_path is not None else ""
        super().__init__(f"{normalized_path}: {message}" if normalized_path else message)
        self._field_path = normalized_path or None

    @property
    def field_path(self) -> str | None:
        """Dotted path of the offending setting, if known."""
        return self._field_path
