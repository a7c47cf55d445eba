from .chart_point import ChartPointV1
from .collision_policy import CollisionPolicy
from .marker import MarkerKind, MarkerV1
from .ohlc_record import OhlcRecordV1

__all__ = [
    "ChartPointV1",
    "CollisionPolicy",
    "MarkerKind",
    "MarkerV1",
    "OhlcRecordV1",
]
