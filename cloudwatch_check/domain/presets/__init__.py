"""Built-in service preset registry.

A preset is a named, read-only measurement configuration template for a common
service type. Every preset is pure data: its only distinguishing behavior is
which embedded document it loads. ``None`` carries no document and selects
ad-hoc mode, where listed metrics are adopted with the run's default stats.

Callers receive a fresh :class:`MeasurementConfiguration` from
:meth:`Preset.build`, so templates are never mutated by a run.
"""

# pylint: disable=too-few-public-methods

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from ...errors import UnknownPreset
from ..measurements import MeasurementConfiguration

logger = logging.getLogger(__name__)

NONE_PRESET = "None"


class Preset(BaseModel):
    """A named configuration template.

    Attributes
    ----------
    name: str
        Registry key (e.g., "EC2").
    description: str
        One-line description shown in the unknown-preset catalog.
    document: Optional[str]
        Embedded measurement document; ``None`` for ad-hoc mode.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    document: Optional[str] = None

    def build(self) -> MeasurementConfiguration:
        """Return a new configuration initialized from this template."""
        config = MeasurementConfiguration()
        if self.document is not None:
            config.load_from_text(self.document)
        return config

    def metric_count(self) -> int:
        """Number of metrics the template configures."""
        return len(self.build().stat_map) if self.document is not None else 0


_registry: Dict[str, Preset] = {}


def register(preset: Preset) -> None:
    """Register a preset by its ``name``.

    Parameters
    ----------
    preset: Preset
        Template to register. Its ``name`` must be unique.
    """
    _registry[preset.name] = preset
    logger.debug("Registered preset: '%s'", preset.name)


def get_preset(name: str) -> Preset:
    """Retrieve a preset by name.

    Raises
    ------
    UnknownPreset
        If no preset is registered under ``name``. The error message lists
        every known preset with its description.
    """
    key = name.strip()
    try:
        return _registry[key]
    except KeyError:
        raise UnknownPreset(key, catalog()) from None


def all_presets() -> Iterable[Preset]:
    """Iterate over all registered presets."""
    return _registry.values()


def catalog() -> List[tuple[str, str]]:
    """``(name, description)`` pairs for every registered preset."""
    return [(p.name, p.description) for p in _registry.values()]


def log_preset_status() -> None:
    """Log the registered presets and how many metrics each configures."""
    if not _registry:
        logger.warning(
            "No presets registered. Only --config documents can be used.\n"
            "  - Check that the bundled preset modules are importable"
        )
        return
    preset_info = [f"'{p.name}' ({p.metric_count()} metrics)" for p in all_presets()]
    logger.info(
        "Presets loaded: %s\n  - Total presets: %d",
        ", ".join(preset_info),
        len(_registry),
    )


def reset_presets() -> None:
    """Reset the registry to the bundled presets.

    Clears the in-memory registry and registers the bundled presets explicitly.
    Used by tests to avoid cross-test contamination.
    """
    _registry.clear()
    from . import alb, clb, cloudfront, ec2  # noqa: WPS433 (local import)

    register(
        Preset(
            name=NONE_PRESET,
            description=(
                "No Service Presets Active, use cmdline --namespace --metric-filter "
                "--dimension-filters to tailor cloudwatch results"
            ),
        )
    )
    for module in (clb, alb, ec2, cloudfront):
        register(
            Preset(
                name=module.NAME,
                description=module.DESCRIPTION,
                document=module.DOCUMENT,
            )
        )


reset_presets()
