from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tradechart.shared_kernel.primitives import UtcTimestamp


class MarkerKind(str, Enum):
    """
    Trade event kind rendered as a timed chart marker.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/signal_marker_builder_v1.py
    """

    BUY = "BUY"
    SELL = "SELL"

    @property
    def label(self) -> str:
        """Short marker label: `B` for buy, `S` for sell."""
        return "B" if self is MarkerKind.BUY else "S"


@dataclass(frozen=True, slots=True)
class MarkerV1:
    """
    Timed buy/sell annotation placed at the bucket of a trade entry or exit bar.

    `trade_index` is the position of the source trade inside its trading record and
    provides the tie-break of the stable `(time, trade order)` display ordering.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/signal_marker_builder_v1.py
      - tests/unit/contexts/charting/application/services/test_signal_marker_builder_v1.py
    """

    time: UtcTimestamp
    kind: MarkerKind
    label: str
    trade_index: int = 0

    def __post_init__(self) -> None:
        """
        Validate marker fields and label/kind agreement.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            None.
        Raises:
            TypeError: If time is not `UtcTimestamp`.
            ValueError: If kind is unknown, label does not match kind, or trade index < 0.
        Side Effects:
            Normalizes `kind` literal into `MarkerKind`.
        """
        if not isinstance(self.time, UtcTimestamp):
            raise TypeError("MarkerV1.time must be UtcTimestamp")
        kind = MarkerKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if self.label != kind.label:
            raise ValueError(f"MarkerV1.label must be {kind.label!r} for {kind.value}")
        if self.trade_index < 0:
            raise ValueError("MarkerV1.trade_index must be >= 0")

    @classmethod
    def buy(cls, *, time: UtcTimestamp, trade_index: int = 0) -> MarkerV1:
        """Build BUY marker labelled `B`."""
        return cls(
            time=time,
            kind=MarkerKind.BUY,
            label=MarkerKind.BUY.label,
            trade_index=trade_index,
        )

    @classmethod
    def sell(cls, *, time: UtcTimestamp, trade_index: int = 0) -> MarkerV1:
        """Build SELL marker labelled `S`."""
        return cls(
            time=time,
            kind=MarkerKind.SELL,
            label=MarkerKind.SELL.label,
            trade_index=trade_index,
        )

    def as_dict(self) -> dict[str, str | int]:
        """Marker payload with time as epoch seconds."""
        return {
            "time": self.time.epoch_seconds(),
            "kind": self.kind.value,
            "label": self.label,
        }
