from datetime import datetime, timezone

import pytest

from tradechart.shared_kernel.primitives import Bar, UtcTimestamp


def _ts() -> UtcTimestamp:
    return UtcTimestamp(datetime(2026, 2, 4, 12, 1, 0, 0, tzinfo=timezone.utc))


def test_bar_accepts_valid_values() -> None:
    bar = Bar(end_time=_ts(), open=100.0, high=110.0, low=90.0, close=105.0, volume=1.23)

    payload = bar.as_dict()
    assert payload["end_time"] == "2026-02-04T12:01:00.000Z"
    assert payload["close"] == 105.0
    assert payload["volume"] == 1.23


def test_bar_rejects_high_below_low() -> None:
    with pytest.raises(ValueError, match="high >= low"):
        Bar(end_time=_ts(), open=1.0, high=1.0, low=2.0, close=1.0, volume=0.0)


def test_bar_rejects_negative_volume() -> None:
    with pytest.raises(ValueError, match="volume"):
        Bar(end_time=_ts(), open=1.0, high=1.0, low=1.0, close=1.0, volume=-0.1)


def test_bar_requires_utc_timestamp() -> None:
    with pytest.raises(TypeError):
        Bar(
            end_time=datetime(2026, 2, 4, tzinfo=timezone.utc),  # type: ignore[arg-type]
            open=1.0,
            high=1.0,
            low=1.0,
            close=1.0,
            volume=0.0,
        )
