from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tradechart.contexts.charting.application.ports import Indicator
from tradechart.contexts.charting.domain.value_objects import (
    ChartPointV1,
    CollisionPolicy,
    MarkerV1,
    OhlcRecordV1,
)
from tradechart.shared_kernel.primitives import TimeGranularity


@dataclass(frozen=True, slots=True)
class LineSeriesRequestV1:
    """
    Request for one named price-line series inside a chart dataset build.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/chart_dataset_service_v1.py
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
    """

    evaluator: Indicator
    granularity: TimeGranularity
    collision_policy: CollisionPolicy

    def __post_init__(self) -> None:
        """
        Validate evaluator and normalize granularity/policy literals.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Evaluator is a pure callable `(index) -> number`.
        Raises:
            TypeError: If evaluator is not callable.
            ConfigurationError: If granularity or collision policy literal is unsupported.
        Side Effects:
            Normalizes literals into enum members.
        """
        if not callable(self.evaluator):
            raise TypeError("LineSeriesRequestV1.evaluator must be callable")
        object.__setattr__(self, "granularity", TimeGranularity.parse(self.granularity))
        object.__setattr__(
            self,
            "collision_policy",
            CollisionPolicy.parse(self.collision_policy),
        )


@dataclass(frozen=True, slots=True)
class ChartLineSeriesV1:
    """
    Built line series: deduplicated points plus the settings that produced them.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/chart_dataset_service_v1.py
    """

    name: str
    granularity: TimeGranularity
    collision_policy: CollisionPolicy
    points: tuple[ChartPointV1, ...]

    def __post_init__(self) -> None:
        """
        Validate series name and strictly increasing point buckets.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Points come from `IndicatorSeriesBuilderV1`.
        Raises:
            ValueError: If name is blank or buckets are not strictly increasing.
        Side Effects:
            Normalizes name and converts points to tuple.
        """
        name = self.name.strip()
        if not name:
            raise ValueError("ChartLineSeriesV1.name must be non-empty")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "granularity", TimeGranularity.parse(self.granularity))
        object.__setattr__(
            self,
            "collision_policy",
            CollisionPolicy.parse(self.collision_policy),
        )

        points = tuple(self.points)
        for previous, current in zip(points, points[1:]):
            if current.bucket.value <= previous.bucket.value:
                raise ValueError(
                    f"ChartLineSeriesV1 {name!r} buckets must be strictly increasing"
                )
        object.__setattr__(self, "points", points)

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "granularity": self.granularity.value,
            "collision_policy": self.collision_policy.value,
            "points": [point.as_dict() for point in self.points],
        }


@dataclass(frozen=True, slots=True)
class ChartDatasetV1:
    """
    Complete chart payload: candles, named price lines, trade markers, and title.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/chart_dataset_service_v1.py
      - src/tradechart/contexts/charting/application/use_cases/build_strategy_chart.py
    """

    title: str
    ohlc: tuple[OhlcRecordV1, ...]
    lines: tuple[ChartLineSeriesV1, ...]
    markers: tuple[MarkerV1, ...]

    def __post_init__(self) -> None:
        """
        Normalize collections to tuples and enforce unique line names.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            None.
        Raises:
            ValueError: If two line series share one name.
        Side Effects:
            Converts collection fields to tuples.
        """
        object.__setattr__(self, "ohlc", tuple(self.ohlc))
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "markers", tuple(self.markers))

        names = [line.name for line in self.lines]
        if len(names) != len(set(names)):
            raise ValueError(f"ChartDatasetV1 line names must be unique, got {names}")

    def line(self, name: str) -> ChartLineSeriesV1:
        """
        Return line series by name.

        Args:
            name: Line series name.
        Returns:
            ChartLineSeriesV1: Matching series.
        Assumptions:
            None.
        Raises:
            KeyError: If no line has this name.
        Side Effects:
            None.
        """
        for item in self.lines:
            if item.name == name:
                return item
        raise KeyError(name)

    def as_dict(self) -> dict[str, Any]:
        """
        Build JSON-compatible payload with every time as epoch seconds.

        Args:
            None.
        Returns:
            dict[str, Any]: Plain payload with `title`, `ohlc`, `lines`, `markers` keys.
        Assumptions:
            Consumers render markers in the given order or sort them themselves.
        Raises:
            None.
        Side Effects:
            None.
        """
        return {
            "title": self.title,
            "ohlc": [record.as_dict() for record in self.ohlc],
            "lines": [line.as_dict() for line in self.lines],
            "markers": [marker.as_dict() for marker in self.markers],
        }


__all__ = [
    "ChartDatasetV1",
    "ChartLineSeriesV1",
    "LineSeriesRequestV1",
]
