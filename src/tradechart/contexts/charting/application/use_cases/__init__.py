from .build_strategy_chart import BuildStrategyChartUseCase

__all__ = [
    "BuildStrategyChartUseCase",
]
