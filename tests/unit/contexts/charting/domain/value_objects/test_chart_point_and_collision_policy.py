from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tradechart.contexts.charting.domain.value_objects import (
    ChartPointV1,
    CollisionPolicy,
    OhlcRecordV1,
)
from tradechart.platform.errors import ConfigurationError
from tradechart.shared_kernel.primitives import UtcTimestamp

_TS = UtcTimestamp(datetime(2026, 2, 4, 12, 0, tzinfo=timezone.utc))


def test_chart_point_normalizes_value_and_rejects_non_finite() -> None:
    point = ChartPointV1(bucket=_TS, value=3)

    assert point.value == 3.0
    assert point.as_dict() == {"time": _TS.epoch_seconds(), "value": 3.0}
    with pytest.raises(ValueError):
        ChartPointV1(bucket=_TS, value=float("nan"))
    with pytest.raises(TypeError):
        ChartPointV1(bucket=_TS.value, value=1.0)  # type: ignore[arg-type]


def test_collision_policy_parse_and_reject() -> None:
    assert CollisionPolicy.parse("SKIP_ON_COLLISION") is CollisionPolicy.SKIP_ON_COLLISION
    assert (
        CollisionPolicy.parse(CollisionPolicy.OVERWRITE_ON_COLLISION)
        is CollisionPolicy.OVERWRITE_ON_COLLISION
    )
    with pytest.raises(ConfigurationError, match="collision policy"):
        CollisionPolicy.parse("last_wins")


def test_ohlc_record_requires_int_epoch_seconds() -> None:
    record = OhlcRecordV1(time=60, open=1, high=2, low=0, close=1, volume=5)

    assert record.as_dict()["open"] == 1.0
    with pytest.raises(TypeError):
        OhlcRecordV1(time=60.0, open=1, high=2, low=0, close=1, volume=5)  # type: ignore[arg-type]
