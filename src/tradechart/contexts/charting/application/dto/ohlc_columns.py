from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import numpy.typing as npt

from tradechart.contexts.charting.domain.value_objects import OhlcRecordV1


@dataclass(frozen=True, slots=True)
class OhlcColumnsV1:
    """
    Parallel OHLCV arrays for renderers that consume columns instead of records.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/domain/value_objects/ohlc_record.py
      - src/tradechart/contexts/charting/application/services/ohlc_dataset_builder_v1.py
    """

    time: np.ndarray
    open: np.ndarray
    high: np.ndarray
    low: np.ndarray
    close: np.ndarray
    volume: np.ndarray

    def __post_init__(self) -> None:
        """
        Validate aligned array contracts.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Arrays are aligned by bar index.
        Raises:
            ValueError: If one array has unexpected dtype, shape, length, or ordering.
        Side Effects:
            None.
        """
        length = _validate_array(
            name="time",
            values=self.time,
            expected_dtype=np.int64,
            expected_length=None,
        )
        for name in ("open", "high", "low", "close", "volume"):
            _validate_array(
                name=name,
                values=getattr(self, name),
                expected_dtype=np.float64,
                expected_length=length,
            )
        if length > 1 and not np.all(self.time[1:] >= self.time[:-1]):
            raise ValueError("OhlcColumnsV1.time must be sorted in non-decreasing order")

    @classmethod
    def from_records(cls, records: Sequence[OhlcRecordV1]) -> OhlcColumnsV1:
        """
        Build columns from OHLC records preserving record order.

        Args:
            records: OHLC records in bar order.
        Returns:
            OhlcColumnsV1: Contiguous int64 time and float64 value arrays.
        Assumptions:
            Records come from one bar series.
        Raises:
            ValueError: If resulting arrays violate column invariants.
        Side Effects:
            Allocates numpy arrays.
        """
        return cls(
            time=np.ascontiguousarray([item.time for item in records], dtype=np.int64),
            open=np.ascontiguousarray([item.open for item in records], dtype=np.float64),
            high=np.ascontiguousarray([item.high for item in records], dtype=np.float64),
            low=np.ascontiguousarray([item.low for item in records], dtype=np.float64),
            close=np.ascontiguousarray([item.close for item in records], dtype=np.float64),
            volume=np.ascontiguousarray([item.volume for item in records], dtype=np.float64),
        )

    def __len__(self) -> int:
        return int(self.time.shape[0])

    def as_dict(self) -> dict[str, list[float] | list[int]]:
        """Plain-list payload keyed by column name."""
        return {
            "time": [int(value) for value in self.time.tolist()],
            "open": self.open.tolist(),
            "high": self.high.tolist(),
            "low": self.low.tolist(),
            "close": self.close.tolist(),
            "volume": self.volume.tolist(),
        }


def _validate_array(
    *,
    name: str,
    values: np.ndarray,
    expected_dtype: npt.DTypeLike,
    expected_length: int | None,
) -> int:
    """
    Validate one column for dtype, one-dimensional shape, and optional length.

    Args:
        name: Field name for deterministic validation error messages.
        values: Candidate numpy array.
        expected_dtype: Required array dtype.
        expected_length: Required length or `None` for baseline field.
    Returns:
        int: Validated length of the array.
    Assumptions:
        None.
    Raises:
        ValueError: If value is not an ndarray or one validation check fails.
    Side Effects:
        None.
    """
    normalized_dtype = np.dtype(expected_dtype)
    try:
        if values.ndim != 1:
            raise ValueError(f"{name} must be a 1D numpy array")
        if values.dtype != normalized_dtype:
            raise ValueError(f"{name} must have dtype {normalized_dtype}, got {values.dtype}")
    except AttributeError as error:
        raise ValueError(f"{name} must be a numpy ndarray") from error

    length = int(values.shape[0])
    if expected_length is not None and length != expected_length:
        raise ValueError(f"{name} length must be {expected_length}, got {length}")
    return length


__all__ = [
    "OhlcColumnsV1",
]
