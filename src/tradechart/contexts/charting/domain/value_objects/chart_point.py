from __future__ import annotations

import math
from dataclasses import dataclass

from tradechart.shared_kernel.primitives import UtcTimestamp


@dataclass(frozen=True, slots=True)
class ChartPointV1:
    """
    One deduplicated line-series point: bucket time and indicator value.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
      - src/tradechart/contexts/charting/application/dto/chart_dataset.py
    """

    bucket: UtcTimestamp
    value: float

    def __post_init__(self) -> None:
        """
        Validate bucket type and finite float value.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Builders filter non-finite evaluator output before constructing points.
        Raises:
            TypeError: If bucket is not `UtcTimestamp`.
            ValueError: If value is not finite.
        Side Effects:
            Normalizes value to builtin float.
        """
        if not isinstance(self.bucket, UtcTimestamp):
            raise TypeError("ChartPointV1.bucket must be UtcTimestamp")
        value = float(self.value)
        if not math.isfinite(value):
            raise ValueError("ChartPointV1.value must be finite")
        object.__setattr__(self, "value", value)

    def as_dict(self) -> dict[str, float | int]:
        """Line point payload with time as epoch seconds."""
        return {"time": self.bucket.epoch_seconds(), "value": self.value}
