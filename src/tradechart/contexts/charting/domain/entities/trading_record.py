from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Trade:
    """
    One completed entry/exit pair produced by the external strategy engine.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/signal_marker_builder_v1.py
      - tests/unit/contexts/charting/domain/entities/test_trading_record.py
    """

    entry_index: int
    exit_index: int

    def __post_init__(self) -> None:
        """
        Validate bar index field types and normalize them to builtin int.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Index bounds and `entry_index <= exit_index` are owned by the upstream engine and
            checked against a concrete series by marker builders.
        Raises:
            TypeError: If one index is not an integer (bool is rejected).
        Side Effects:
            Converts integral values such as `numpy.int64` to `int`.
        """
        for field_name in ("entry_index", "exit_index"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Trade.{field_name} must be int")
            object.__setattr__(self, field_name, int(value))


@dataclass(frozen=True, slots=True)
class TradingRecord:
    """
    Ordered trades of one strategy run, in chronological order of entry.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/ports/strategy_runner.py
      - src/tradechart/contexts/charting/application/services/summary_formatter_v1.py
    """

    trades: tuple[Trade, ...] = ()

    def __post_init__(self) -> None:
        trades = tuple(self.trades)
        for position, trade in enumerate(trades):
            if not isinstance(trade, Trade):
                raise TypeError(f"TradingRecord.trades[{position}] must be Trade")
        object.__setattr__(self, "trades", trades)

    @property
    def trade_count(self) -> int:
        """Number of trades in record."""
        return len(self.trades)

    def __len__(self) -> int:
        return len(self.trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self.trades)
