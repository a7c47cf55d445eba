from .chart_errors import ChartDomainError, IndicatorValueUnavailableError

__all__ = [
    "ChartDomainError",
    "IndicatorValueUnavailableError",
]
