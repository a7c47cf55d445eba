from __future__ import annotations

import logging
import math

from tradechart.contexts.charting.application.ports import Indicator
from tradechart.contexts.charting.domain.entities import BarSeries
from tradechart.contexts.charting.domain.value_objects import ChartPointV1, CollisionPolicy
from tradechart.shared_kernel.primitives import TimeGranularity, UtcTimestamp

log = logging.getLogger(__name__)


class IndicatorSeriesBuilderV1:
    """
    Build one bucketed, deduplicated line series from an indicator evaluator.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/shared_kernel/primitives/time_granularity.py
      - src/tradechart/contexts/charting/domain/value_objects/collision_policy.py
      - tests/unit/contexts/charting/application/services/test_indicator_series_builder_v1.py
    """

    def build(
        self,
        *,
        series: BarSeries,
        evaluator: Indicator,
        granularity: TimeGranularity | str,
        collision_policy: CollisionPolicy | str,
    ) -> tuple[ChartPointV1, ...]:
        """
        Evaluate indicator per bar and keep one value per time bucket.

        Docs:
          - docs/architecture/charting/chart-datasets-v1.md
        Related:
          - src/tradechart/contexts/charting/application/services/chart_dataset_service_v1.py

        Args:
            series: Source bar series the evaluator is bound to.
            evaluator: Callable `(index) -> number`.
            granularity: Bucket resolution (`minute` or `second`).
            collision_policy: `skip_on_collision` keeps first value, `overwrite_on_collision`
                keeps last value.
        Returns:
            tuple[ChartPointV1, ...]: Points with strictly increasing buckets.
        Assumptions:
            Bars are strictly increasing in time, so buckets are non-decreasing in bar order.
        Raises:
            ConfigurationError: If granularity or collision policy is unsupported.
        Side Effects:
            Emits DEBUG log per skipped bar and one INFO summary when bars were skipped.
        """
        resolved_granularity = TimeGranularity.parse(granularity)
        resolved_policy = CollisionPolicy.parse(collision_policy)
        overwrite = resolved_policy is CollisionPolicy.OVERWRITE_ON_COLLISION

        values_by_bucket_ms: dict[int, float] = {}
        skipped = 0
        for index, bar in enumerate(series):
            value = _evaluate(evaluator=evaluator, index=index)
            if value is None:
                skipped += 1
                continue

            bucket_ms = resolved_granularity.bucket_open(bar.end_time).epoch_millis()
            if overwrite or bucket_ms not in values_by_bucket_ms:
                values_by_bucket_ms[bucket_ms] = value

        if skipped > 0:
            log.info(
                "indicator series built with skipped bars series=%s bars=%s skipped=%s points=%s",
                series.name or "-",
                len(series),
                skipped,
                len(values_by_bucket_ms),
            )

        return tuple(
            ChartPointV1(bucket=UtcTimestamp.from_epoch_millis(bucket_ms), value=value)
            for bucket_ms, value in sorted(values_by_bucket_ms.items())
        )


def build_series(
    series: BarSeries,
    evaluator: Indicator,
    granularity: TimeGranularity | str,
    collision_policy: CollisionPolicy | str,
) -> tuple[ChartPointV1, ...]:
    """Module-level shortcut for `IndicatorSeriesBuilderV1().build(...)`."""
    return IndicatorSeriesBuilderV1().build(
        series=series,
        evaluator=evaluator,
        granularity=granularity,
        collision_policy=collision_policy,
    )


def _evaluate(*, evaluator: Indicator, index: int) -> float | None:
    """
    Call evaluator once and map unavailable values to `None`.

    Args:
        evaluator: Indicator evaluator.
        index: Bar index.
    Returns:
        float | None: Finite value, or `None` when the bar must be skipped.
    Assumptions:
        Any evaluator failure or non-numeric result means "no value" for this bar only.
    Raises:
        None.
    Side Effects:
        Emits DEBUG log when the bar is skipped.
    """
    try:
        raw = evaluator(index)
    except Exception as error:  # noqa: BLE001
        log.debug(
            "indicator value skipped index=%s reason=%s error=%s",
            index,
            type(error).__name__,
            error,
        )
        return None

    if raw is None:
        log.debug("indicator value skipped index=%s reason=none", index)
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        log.debug("indicator value skipped index=%s reason=not_numeric value=%r", index, raw)
        return None
    if not math.isfinite(value):
        log.debug("indicator value skipped index=%s reason=non_finite value=%s", index, value)
        return None
    return value


__all__ = [
    "IndicatorSeriesBuilderV1",
    "build_series",
]
