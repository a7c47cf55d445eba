from datetime import datetime, timedelta, timezone

import pytest

from tradechart.shared_kernel.primitives import UtcTimestamp


def test_utc_timestamp_rejects_naive_datetime() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        UtcTimestamp(datetime(2026, 2, 4, 12, 0, 0))


def test_utc_timestamp_converts_to_utc_and_truncates_to_millis() -> None:
    plus_three = timezone(timedelta(hours=3))
    ts = UtcTimestamp(datetime(2026, 2, 4, 15, 0, 0, 123456, tzinfo=plus_three))

    assert ts.value.tzinfo == timezone.utc
    assert str(ts) == "2026-02-04T12:00:00.123Z"


def test_utc_timestamp_epoch_conversions() -> None:
    ts = UtcTimestamp.from_epoch_millis(1_700_000_000_500)

    assert ts.epoch_millis() == 1_700_000_000_500
    assert ts.epoch_seconds() == 1_700_000_000
    assert UtcTimestamp.from_epoch_seconds(1_700_000_000).epoch_millis() == 1_700_000_000_000
