from __future__ import annotations

from enum import Enum

from tradechart.platform.errors import ConfigurationError


class CollisionPolicy(str, Enum):
    """
    Rule for two indicator values that land in the same time bucket.

    - SKIP_ON_COLLISION: first value for a bucket wins, later ones are discarded.
    - OVERWRITE_ON_COLLISION: last value for a bucket wins.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
      - tests/unit/contexts/charting/application/services/test_indicator_series_builder_v1.py
    """

    SKIP_ON_COLLISION = "skip_on_collision"
    OVERWRITE_ON_COLLISION = "overwrite_on_collision"

    @classmethod
    def parse(cls, raw: CollisionPolicy | str) -> CollisionPolicy:
        """
        Normalize collision policy literal or enum member.

        Args:
            raw: Enum member or case-insensitive literal.
        Returns:
            CollisionPolicy: Normalized policy.
        Assumptions:
            None.
        Raises:
            ConfigurationError: If literal is not a known policy.
        Side Effects:
            None.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ConfigurationError(
                f"collision policy must be a string literal, got {type(raw).__name__}"
            )
        normalized = raw.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ConfigurationError(
            f"Unsupported collision policy={normalized!r}. "
            f"Supported: {sorted(member.value for member in cls)}"
        )

    def __str__(self) -> str:
        return self.value
