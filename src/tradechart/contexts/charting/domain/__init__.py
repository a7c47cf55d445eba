from .entities import BarSeries, Trade, TradingRecord
from .errors import ChartDomainError, IndicatorValueUnavailableError
from .value_objects import ChartPointV1, CollisionPolicy, MarkerKind, MarkerV1, OhlcRecordV1

__all__ = [
    "BarSeries",
    "ChartDomainError",
    "ChartPointV1",
    "CollisionPolicy",
    "IndicatorValueUnavailableError",
    "MarkerKind",
    "MarkerV1",
    "OhlcRecordV1",
    "Trade",
    "TradingRecord",
]
