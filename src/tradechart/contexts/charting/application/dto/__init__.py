from .chart_dataset import ChartDatasetV1, ChartLineSeriesV1, LineSeriesRequestV1
from .ohlc_columns import OhlcColumnsV1

__all__ = [
    "ChartDatasetV1",
    "ChartLineSeriesV1",
    "LineSeriesRequestV1",
    "OhlcColumnsV1",
]
