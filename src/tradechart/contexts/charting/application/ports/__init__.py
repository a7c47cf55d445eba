from .indicator import Indicator
from .performance_criterion import PerformanceCriterion
from .strategy_runner import StrategyRunner

__all__ = [
    "Indicator",
    "PerformanceCriterion",
    "StrategyRunner",
]
