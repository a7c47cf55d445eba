from .config import (
    ChartingMarkersRuntimeConfig,
    ChartingRuntimeConfig,
    ChartingSeriesRuntimeConfig,
    ChartingSummaryRuntimeConfig,
    load_charting_runtime_config,
    resolve_charting_config_path,
)

__all__ = [
    "ChartingMarkersRuntimeConfig",
    "ChartingRuntimeConfig",
    "ChartingSeriesRuntimeConfig",
    "ChartingSummaryRuntimeConfig",
    "load_charting_runtime_config",
    "resolve_charting_config_path",
]
