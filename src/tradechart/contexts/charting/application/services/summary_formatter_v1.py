from __future__ import annotations

from string import Formatter

from tradechart.contexts.charting.domain.entities import TradingRecord
from tradechart.platform.errors import ConfigurationError

DEFAULT_SUMMARY_TEMPLATE = "{title}, trades count: {trade_count} p = {metric}"
_ALLOWED_PLACEHOLDERS = frozenset({"title", "trade_count", "metric"})


class SummaryFormatterV1:
    """
    Render chart annotation text from trade count and externally computed metric.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/chart_dataset_service_v1.py
      - tests/unit/contexts/charting/application/services/test_summary_formatter_v1.py
    """

    def format(
        self,
        *,
        record: TradingRecord,
        metric: float,
        template: str = DEFAULT_SUMMARY_TEMPLATE,
        title: str = "",
    ) -> str:
        """
        Fill `{title}`, `{trade_count}` and `{metric}` placeholders.

        Args:
            record: Trading record whose length becomes `trade_count`.
            metric: Performance value inserted with standard `str.format` rules.
            template: Format string using only the supported placeholders.
            title: Optional chart title for `{title}`.
        Returns:
            str: Rendered summary.
        Assumptions:
            Metric semantics belong to the external criterion; it is not rounded here.
        Raises:
            ConfigurationError: If template is malformed or uses unknown placeholders.
        Side Effects:
            None.
        """
        validate_summary_template(template)
        try:
            return template.format(
                title=title,
                trade_count=record.trade_count,
                metric=metric,
            )
        except (IndexError, KeyError, ValueError) as error:
            raise ConfigurationError(
                f"summary template {template!r} cannot be rendered: {error}"
            ) from error


def format_summary(
    record: TradingRecord,
    metric: float,
    template: str = DEFAULT_SUMMARY_TEMPLATE,
    *,
    title: str = "",
) -> str:
    """Module-level shortcut for `SummaryFormatterV1().format(...)`."""
    return SummaryFormatterV1().format(
        record=record,
        metric=metric,
        template=template,
        title=title,
    )


def validate_summary_template(template: str) -> str:
    """
    Check template syntax and placeholder names without rendering it.

    Args:
        template: Candidate summary template.
    Returns:
        str: Same template.
    Assumptions:
        Placeholders are plain names; positional fields, attribute and index access are
        rejected.
    Raises:
        ConfigurationError: If template is not a string, malformed, or references unknown
            placeholders.
    Side Effects:
        None.
    """
    if not isinstance(template, str):
        raise ConfigurationError(
            f"summary template must be a string, got {type(template).__name__}"
        )
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as error:
        raise ConfigurationError(f"summary template {template!r} is malformed: {error}") from error

    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        if field_name not in _ALLOWED_PLACEHOLDERS:
            raise ConfigurationError(
                f"summary template {template!r} uses unknown placeholder {{{field_name}}}. "
                f"Supported: {sorted(_ALLOWED_PLACEHOLDERS)}"
            )
    return template


__all__ = [
    "DEFAULT_SUMMARY_TEMPLATE",
    "SummaryFormatterV1",
    "format_summary",
    "validate_summary_template",
]
