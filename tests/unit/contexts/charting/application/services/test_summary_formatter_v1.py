from __future__ import annotations

import pytest

from tradechart.contexts.charting.application.services import (
    DEFAULT_SUMMARY_TEMPLATE,
    SummaryFormatterV1,
    format_summary,
)
from tradechart.contexts.charting.domain.entities import Trade, TradingRecord
from tradechart.platform.errors import ConfigurationError

_RECORD = TradingRecord(trades=(Trade(0, 1), Trade(2, 3), Trade(4, 5)))


def test_default_template_renders_title_trade_count_and_metric() -> None:
    summary = format_summary(_RECORD, 1.25, title="Bitstamp BTC price")

    assert summary == "Bitstamp BTC price, trades count: 3 p = 1.25"
    assert DEFAULT_SUMMARY_TEMPLATE.count("{") == 3


def test_metric_is_inserted_with_standard_formatting() -> None:
    assert format_summary(_RECORD, 0.1 + 0.2, "{metric}") == str(0.1 + 0.2)
    assert format_summary(_RECORD, 1.23456, "p={metric:.2f}") == "p=1.23"
    assert format_summary(TradingRecord(), 0, "n={trade_count}") == "n=0"


def test_format_summary_is_idempotent() -> None:
    first = format_summary(_RECORD, 1.0375, title="Bitstamp BTC price")
    second = format_summary(_RECORD, 1.0375, title="Bitstamp BTC price")

    assert first == second


@pytest.mark.parametrize(
    "template",
    [
        "{unknown}",
        "{0}",
        "{}",
        "trades {trade_count",
        "p = {metric:Q}",
        "{title.foo}",
        "{title.upper}",
        "{metric.real}",
        "{title[0]}",
    ],
)
def test_invalid_templates_raise_configuration_error(template: str) -> None:
    with pytest.raises(ConfigurationError):
        SummaryFormatterV1().format(record=_RECORD, metric=1.0, template=template)
