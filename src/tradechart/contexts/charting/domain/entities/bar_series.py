from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tradechart.shared_kernel.primitives import Bar


@dataclass(frozen=True, slots=True)
class BarSeries:
    """
    Ordered immutable bar sequence for one instrument, indexable by position.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/shared_kernel/primitives/bar.py
      - src/tradechart/contexts/charting/application/services/ohlc_dataset_builder_v1.py
      - tests/unit/contexts/charting/domain/entities/test_bar_series.py
    """

    bars: tuple[Bar, ...]
    name: str = ""

    def __post_init__(self) -> None:
        """
        Freeze bars into tuple and validate strict end-time ordering.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Bars arrive in chronological order from the bar source.
        Raises:
            TypeError: If one item is not a `Bar`.
            ValueError: If bar end-times are not strictly increasing.
        Side Effects:
            Replaces `bars` with a tuple copy and strips `name`.
        """
        bars = tuple(self.bars)
        for position, bar in enumerate(bars):
            if not isinstance(bar, Bar):
                raise TypeError(f"BarSeries.bars[{position}] must be Bar")
            if position > 0 and bars[position - 1].end_time.value >= bar.end_time.value:
                raise ValueError(
                    "BarSeries.bars end_time must be strictly increasing, "
                    f"got {bars[position - 1].end_time} then {bar.end_time} at index {position}"
                )
        object.__setattr__(self, "bars", bars)
        object.__setattr__(self, "name", self.name.strip())

    @property
    def bar_count(self) -> int:
        """Number of bars in series."""
        return len(self.bars)

    def is_empty(self) -> bool:
        """Whether series holds no bars."""
        return len(self.bars) == 0

    def contains_index(self, index: int) -> bool:
        """Whether `index` addresses a bar (negative indexes never do)."""
        return 0 <= index < len(self.bars)

    def bar(self, index: int) -> Bar:
        """
        Return bar at position `index`.

        Args:
            index: Zero-based bar position.
        Returns:
            Bar: Bar at position.
        Assumptions:
            Python negative indexing is not part of the series contract.
        Raises:
            IndexError: If index is negative or beyond the last bar.
        Side Effects:
            None.
        """
        if not self.contains_index(index):
            raise IndexError(f"bar index {index} out of range for series of {len(self.bars)}")
        return self.bars[index]

    def __len__(self) -> int:
        return len(self.bars)

    def __iter__(self) -> Iterator[Bar]:
        return iter(self.bars)
