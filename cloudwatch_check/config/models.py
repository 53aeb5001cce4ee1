"""Config models and loader.

This module defines the environment-based settings that seed CLI defaults and
the explicit :class:`CheckConfig` built once per run. The run configuration
is constructed by the CLI and passed into the engine; nothing here keeps
module-level mutable state.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.presets import NONE_PRESET

DEFAULT_STATS = "Average,Sum,SampleCount,Maximum,Minimum"


class AWSSettings(BaseModel):
    """Connection settings for the AWS client.

    Attributes
    ----------
    region: str
        Client region; empty defers to the SDK's resolution chain.
    profile: str
        Named credential profile.
    config_file: str
        Alternative shared config file.
    credentials_file: str
        Alternative shared credentials file.
    """

    region: str = ""
    profile: str = ""
    config_file: str = ""
    credentials_file: str = ""


class CheckConfig(BaseModel):
    """Explicit configuration of one check run.

    Attributes
    ----------
    preset: str
        Registered preset name. ``None`` selects ad-hoc or custom mode.
    config_text: str
        Literal measurement document (custom mode); empty when unset.
    namespace: str
        Namespace narrowing for ad-hoc mode.
    metric_filter: str
        Single metric-name override applied to every configuration.
    dimension_filters: List[str]
        ``Name`` / ``Name=Value`` expressions appended to every configuration.
    stats: List[str]
        Statistics used for series adopted in ad-hoc mode.
    max_pages: int
        Listing page limit; 0 means unlimited.
    period_minutes: int
        Default aggregation period when the configuration sets none.
    """

    preset: str = NONE_PRESET
    config_text: str = ""
    namespace: str = ""
    metric_filter: str = ""
    dimension_filters: List[str] = Field(default_factory=list)
    stats: List[str] = Field(
        default_factory=lambda: DEFAULT_STATS.split(","),
        min_length=1,
    )
    max_pages: int = Field(1, ge=0)
    period_minutes: int = Field(1, ge=1)
    recently_active: bool = False
    dry_run: bool = False
    verbose: bool = False
    error_on_missing: bool = False
    output_config: bool = False
    with_metadata: bool = False
    aws: AWSSettings = Field(default_factory=AWSSettings)

    @staticmethod
    def read_config_text(path: Path) -> str:
        """Read a measurement document from ``path`` (``@file`` CLI form)."""
        return path.read_bytes().decode("utf-8")


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Every field seeds the default of the matching CLI option.

    Attributes
    ----------
    log_level: Optional[str]
        Logging level name (e.g., "DEBUG", "INFO"). Unset means WARNING, or
        DEBUG with ``--verbose``.
    namespace: str
        Default ``--namespace``.
    dimension_filters: str
        Default ``--dimension-filters`` (comma separated).
    stats: str
        Default ``--stats`` (comma separated).
    metric_filter: str
        Default ``--metric-filter``.
    preset: str
        Default ``--preset``.
    max_pages: int
        Default ``--max-pages``.
    period_minutes: int
        Default ``--period-minutes``.
    error_on_missing: bool
        Default ``--error-on-missing``.
    config: str
        Default ``--config`` document.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="CLOUDWATCH_CHECK_", extra="ignore"
    )

    log_level: Optional[str] = None
    namespace: str = ""
    dimension_filters: str = ""
    stats: str = DEFAULT_STATS
    metric_filter: str = ""
    preset: str = NONE_PRESET
    max_pages: int = Field(1, ge=0)
    period_minutes: int = Field(1, ge=1)
    error_on_missing: bool = False
    config: str = ""


class AWSEnvSettings(BaseSettings):
    """Standard AWS environment variables used as CLI defaults."""

    model_config = SettingsConfigDict(env_prefix="AWS_", extra="ignore")

    region: str = ""
    profile: str = ""
