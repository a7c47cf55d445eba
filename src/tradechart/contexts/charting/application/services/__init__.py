from .chart_dataset_service_v1 import ChartDatasetServiceV1
from .close_price import ClosePriceIndicator, close_price_indicator
from .indicator_series_builder_v1 import IndicatorSeriesBuilderV1, build_series
from .ohlc_dataset_builder_v1 import OhlcDatasetBuilderV1, build_ohlc, to_columns
from .signal_marker_builder_v1 import (
    SignalMarkerBuilderV1,
    build_markers,
    sort_markers_for_display,
)
from .summary_formatter_v1 import (
    DEFAULT_SUMMARY_TEMPLATE,
    SummaryFormatterV1,
    format_summary,
    validate_summary_template,
)

__all__ = [
    "ChartDatasetServiceV1",
    "ClosePriceIndicator",
    "DEFAULT_SUMMARY_TEMPLATE",
    "IndicatorSeriesBuilderV1",
    "OhlcDatasetBuilderV1",
    "SignalMarkerBuilderV1",
    "SummaryFormatterV1",
    "build_markers",
    "build_ohlc",
    "build_series",
    "close_price_indicator",
    "format_summary",
    "sort_markers_for_display",
    "to_columns",
    "validate_summary_template",
]
