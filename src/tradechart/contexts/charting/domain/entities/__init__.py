from .bar_series import BarSeries
from .trading_record import Trade, TradingRecord

__all__ = [
    "BarSeries",
    "Trade",
    "TradingRecord",
]
