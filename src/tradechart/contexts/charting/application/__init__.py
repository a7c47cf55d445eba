from .dto import ChartDatasetV1, ChartLineSeriesV1, LineSeriesRequestV1, OhlcColumnsV1
from .ports import Indicator, PerformanceCriterion, StrategyRunner
from .services import (
    DEFAULT_SUMMARY_TEMPLATE,
    ChartDatasetServiceV1,
    ClosePriceIndicator,
    IndicatorSeriesBuilderV1,
    OhlcDatasetBuilderV1,
    SignalMarkerBuilderV1,
    SummaryFormatterV1,
    build_markers,
    build_ohlc,
    build_series,
    close_price_indicator,
    format_summary,
    sort_markers_for_display,
    to_columns,
)
from .use_cases import BuildStrategyChartUseCase

__all__ = [
    "BuildStrategyChartUseCase",
    "ChartDatasetServiceV1",
    "ChartDatasetV1",
    "ChartLineSeriesV1",
    "ClosePriceIndicator",
    "DEFAULT_SUMMARY_TEMPLATE",
    "Indicator",
    "IndicatorSeriesBuilderV1",
    "LineSeriesRequestV1",
    "OhlcColumnsV1",
    "OhlcDatasetBuilderV1",
    "PerformanceCriterion",
    "SignalMarkerBuilderV1",
    "StrategyRunner",
    "SummaryFormatterV1",
    "build_markers",
    "build_ohlc",
    "build_series",
    "close_price_indicator",
    "format_summary",
    "sort_markers_for_display",
    "to_columns",
]
