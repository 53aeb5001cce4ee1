"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so imports like
``import cloudwatch_check`` resolve correctly regardless of the working
directory pytest chooses.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


@pytest.fixture(autouse=True)
def reset_preset_registry():
    """Reset preset registry before each test to avoid cross-test contamination.

    This ensures each test starts with the bundled presets only.
    """
    from cloudwatch_check.domain.presets import reset_presets

    reset_presets()
    yield


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep host AWS / check settings and any local .env out of the tests."""
    for name in (
        "AWS_REGION",
        "AWS_PROFILE",
        "AWS_CONFIG_FILE",
        "AWS_SHARED_CREDENTIALS_FILE",
        "AWS_DEFAULT_REGION",
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "CLOUDWATCH_CHECK_LOG_LEVEL",
        "CLOUDWATCH_CHECK_NAMESPACE",
        "CLOUDWATCH_CHECK_DIMENSION_FILTERS",
        "CLOUDWATCH_CHECK_STATS",
        "CLOUDWATCH_CHECK_METRIC_FILTER",
        "CLOUDWATCH_CHECK_PRESET",
        "CLOUDWATCH_CHECK_MAX_PAGES",
        "CLOUDWATCH_CHECK_PERIOD_MINUTES",
        "CLOUDWATCH_CHECK_ERROR_ON_MISSING",
        "CLOUDWATCH_CHECK_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
