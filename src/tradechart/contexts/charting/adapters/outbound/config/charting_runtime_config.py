from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from tradechart.contexts.charting.application.services import (
    DEFAULT_SUMMARY_TEMPLATE,
    validate_summary_template,
)
from tradechart.contexts.charting.domain.value_objects import CollisionPolicy
from tradechart.platform.errors import ConfigurationError
from tradechart.shared_kernel.primitives import TimeGranularity

_ENV_NAME_KEY = "TRADECHART_ENV"
_CHARTING_CONFIG_PATH_KEY = "TRADECHART_CHARTING_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_PRICE_LINE_NAME_DEFAULT = "close"
_SERIES_GRANULARITY_DEFAULT = TimeGranularity.SECOND
_SERIES_COLLISION_POLICY_DEFAULT = CollisionPolicy.OVERWRITE_ON_COLLISION
_MARKERS_GRANULARITY_DEFAULT = TimeGranularity.MINUTE


@dataclass(frozen=True, slots=True)
class ChartingSeriesRuntimeConfig:
    """
    Runtime defaults for the price-line series loaded from `charting.series` section.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - src/tradechart/contexts/charting/application/services/indicator_series_builder_v1.py
    """

    price_line_name: str = _PRICE_LINE_NAME_DEFAULT
    granularity: TimeGranularity = _SERIES_GRANULARITY_DEFAULT
    collision_policy: CollisionPolicy = _SERIES_COLLISION_POLICY_DEFAULT

    def __post_init__(self) -> None:
        """
        Validate line name and normalize granularity/policy literals.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            None.
        Raises:
            ConfigurationError: If one value is blank or unsupported.
        Side Effects:
            Normalizes literals into enum members and strips line name.
        """
        price_line_name = self.price_line_name.strip()
        if not price_line_name:
            raise ConfigurationError(
                "must be non-empty",
                field_path="charting.series.price_line_name",
            )
        object.__setattr__(self, "price_line_name", price_line_name)
        object.__setattr__(
            self,
            "granularity",
            _parse_literal(
                parser=TimeGranularity.parse,
                raw=self.granularity,
                field_path="charting.series.granularity",
            ),
        )
        object.__setattr__(
            self,
            "collision_policy",
            _parse_literal(
                parser=CollisionPolicy.parse,
                raw=self.collision_policy,
                field_path="charting.series.collision_policy",
            ),
        )


@dataclass(frozen=True, slots=True)
class ChartingMarkersRuntimeConfig:
    """
    Runtime defaults for trade markers loaded from `charting.markers` section.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - src/tradechart/contexts/charting/application/services/signal_marker_builder_v1.py
    """

    granularity: TimeGranularity = _MARKERS_GRANULARITY_DEFAULT

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "granularity",
            _parse_literal(
                parser=TimeGranularity.parse,
                raw=self.granularity,
                field_path="charting.markers.granularity",
            ),
        )


@dataclass(frozen=True, slots=True)
class ChartingSummaryRuntimeConfig:
    """
    Runtime summary annotation template loaded from `charting.summary` section.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - src/tradechart/contexts/charting/application/services/summary_formatter_v1.py
    """

    template: str = DEFAULT_SUMMARY_TEMPLATE

    def __post_init__(self) -> None:
        _parse_literal(
            parser=validate_summary_template,
            raw=self.template,
            field_path="charting.summary.template",
        )


@dataclass(frozen=True, slots=True)
class ChartingRuntimeConfig:
    """
    Charting runtime config v1 loaded from `configs/<env>/charting.yaml`.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - configs/test/charting.yaml
      - configs/prod/charting.yaml
    """

    version: int
    series: ChartingSeriesRuntimeConfig = field(default_factory=ChartingSeriesRuntimeConfig)
    markers: ChartingMarkersRuntimeConfig = field(default_factory=ChartingMarkersRuntimeConfig)
    summary: ChartingSummaryRuntimeConfig = field(default_factory=ChartingSummaryRuntimeConfig)

    def __post_init__(self) -> None:
        """
        Validate config version and section presence.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Version remains fixed to `1` for chart dataset v1 contracts.
        Raises:
            ConfigurationError: If version is not 1 or one section is missing.
        Side Effects:
            None.
        """
        if self.version != 1:
            raise ConfigurationError(
                f"charting config version must be 1, got {self.version!r}",
                field_path="version",
            )
        if self.series is None:  # type: ignore[truthy-bool]
            raise ConfigurationError("section must be configured", field_path="charting.series")
        if self.markers is None:  # type: ignore[truthy-bool]
            raise ConfigurationError("section must be configured", field_path="charting.markers")
        if self.summary is None:  # type: ignore[truthy-bool]
            raise ConfigurationError("section must be configured", field_path="charting.summary")


def resolve_charting_config_path(
    *,
    environ: Mapping[str, str],
) -> Path:
    """
    Resolve runtime config path using env override precedence contract.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - configs/test/charting.yaml
      - configs/prod/charting.yaml

    Args:
        environ: Runtime environment mapping.
    Returns:
        Path: Resolved `charting.yaml` path.
    Assumptions:
        Precedence is `TRADECHART_CHARTING_CONFIG` > `configs/<TRADECHART_ENV>/charting.yaml`.
    Raises:
        ConfigurationError: If `TRADECHART_ENV` value is unsupported.
    Side Effects:
        None.
    """
    override_path = environ.get(_CHARTING_CONFIG_PATH_KEY, "").strip()
    if override_path:
        return Path(override_path)

    env_name = _runtime_env_name(environ)
    return Path("configs") / env_name / "charting.yaml"


def load_charting_runtime_config(path: str | Path) -> ChartingRuntimeConfig:
    """
    Load and validate charting runtime YAML configuration.

    Docs:
      - docs/architecture/charting/chart-datasets-v1.md
    Related:
      - configs/dev/charting.yaml
      - src/tradechart/contexts/charting/application/use_cases/build_strategy_chart.py

    Args:
        path: Path to `charting.yaml`.
    Returns:
        ChartingRuntimeConfig: Parsed validated config object.
    Assumptions:
        Missing optional sections and keys fall back to documented defaults.
    Raises:
        FileNotFoundError: If path does not exist.
        ConfigurationError: If YAML shape or values are invalid.
    Side Effects:
        Reads one UTF-8 YAML file from filesystem.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"charting config not found: {config_path}")

    payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if not isinstance(payload, Mapping):
        raise ConfigurationError("charting config must be mapping at top-level")

    version = _schema_version(payload)
    charting_map = _section(payload, "charting")
    series_map = _section(charting_map, "series")
    markers_map = _section(charting_map, "markers")
    summary_map = _section(charting_map, "summary")

    series = ChartingSeriesRuntimeConfig(
        price_line_name=_optional_str(
            series_map,
            "price_line_name",
            default=_PRICE_LINE_NAME_DEFAULT,
        ),
        granularity=_optional_str(  # type: ignore[arg-type]
            series_map,
            "granularity",
            default=_SERIES_GRANULARITY_DEFAULT.value,
        ),
        collision_policy=_optional_str(  # type: ignore[arg-type]
            series_map,
            "collision_policy",
            default=_SERIES_COLLISION_POLICY_DEFAULT.value,
        ),
    )
    markers = ChartingMarkersRuntimeConfig(
        granularity=_optional_str(  # type: ignore[arg-type]
            markers_map,
            "granularity",
            default=_MARKERS_GRANULARITY_DEFAULT.value,
        ),
    )
    summary = ChartingSummaryRuntimeConfig(
        template=_optional_str(
            summary_map,
            "template",
            default=DEFAULT_SUMMARY_TEMPLATE,
        ),
    )
    return ChartingRuntimeConfig(
        version=version,
        series=series,
        markers=markers,
        summary=summary,
    )


def _parse_literal(*, parser: Any, raw: Any, field_path: str) -> Any:
    """
    Apply one literal parser and attach config field path to its error.

    Args:
        parser: Callable normalizing the literal.
        raw: Raw config value.
        field_path: Dotted config key for error messages.
    Returns:
        Any: Parsed value.
    Assumptions:
        Parser raises `ConfigurationError` for unsupported literals.
    Raises:
        ConfigurationError: If literal is unsupported, prefixed with `field_path`.
    Side Effects:
        None.
    """
    try:
        return parser(raw)
    except ConfigurationError as error:
        raise ConfigurationError(str(error), field_path=field_path) from error


def _runtime_env_name(environ: Mapping[str, str]) -> str:
    """
    Normalize `TRADECHART_ENV` into one known config directory name.

    Args:
        environ: Runtime environment mapping.
    Returns:
        str: `dev`, `prod`, or `test`.
    Assumptions:
        Unset variable selects `dev`; case and surrounding spaces are ignored.
    Raises:
        ConfigurationError: If the value names an unknown environment.
    Side Effects:
        None.
    """
    env_name = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if env_name in _ALLOWED_ENVS:
        return env_name
    raise ConfigurationError(f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {env_name!r}")


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """
    Return optional nested config section, empty when the key is absent or null.

    Args:
        data: Parent mapping.
        key: Section name.
    Returns:
        Mapping[str, Any]: Section payload.
    Assumptions:
        Every charting section is optional.
    Raises:
        ConfigurationError: If the section is present but not a mapping.
    Side Effects:
        None.
    """
    section = data.get(key)
    if section is None:
        return {}
    if isinstance(section, Mapping):
        return section
    raise ConfigurationError(f"expected mapping at key '{key}', got {type(section).__name__}")


def _schema_version(payload: Mapping[str, Any]) -> int:
    """
    Read mandatory top-level `version`; YAML booleans do not count as integers.

    Args:
        payload: Top-level config mapping.
    Returns:
        int: Config schema version.
    Assumptions:
        None.
    Raises:
        ConfigurationError: If `version` is absent or not an integer.
    Side Effects:
        None.
    """
    if payload.get("version") is None:
        raise ConfigurationError("missing required key: version")
    version = payload["version"]
    if isinstance(version, bool) or not isinstance(version, int):
        raise ConfigurationError(f"expected int at key 'version', got {type(version).__name__}")
    return version


def _optional_str(section: Mapping[str, Any], key: str, *, default: str) -> str:
    """Return string literal at `key`, or `default` when the section omits it."""
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigurationError(f"expected str at key '{key}', got {type(value).__name__}")
    return value


__all__ = [
    "ChartingMarkersRuntimeConfig",
    "ChartingRuntimeConfig",
    "ChartingSeriesRuntimeConfig",
    "ChartingSummaryRuntimeConfig",
    "load_charting_runtime_config",
    "resolve_charting_config_path",
]
