"""Run-level models: result state and the summary of one check run."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from ..domain.models import DataQuery, MessageData


class CheckState(int, Enum):
    """Run result, using the monitoring-plugin exit-code convention."""

    OK = 0
    WARNING = 1
    CRITICAL = 2


class CheckOptions(BaseModel):
    """Engine switches that are not part of the measurement configuration."""

    max_pages: int = Field(1, ge=0, description="0 disables the page limit")
    period_minutes: int = Field(1, ge=1)
    recently_active: bool = False
    dry_run: bool = False
    verbose: bool = False
    error_on_missing: bool = False
    output_config: bool = False
    with_metadata: bool = False
    region: str = Field("", description="Client region, used in diagnostics")


class CheckResult(BaseModel):
    """Summary of one run of the engine.

    Attributes
    ----------
    state: CheckState
        Overall run result (``OK`` or ``WARNING``; fatal runs raise instead).
    pages: int
        Number of listing pages fetched.
    page_cap_exceeded: bool
        True when the page limit stopped the listing with pages remaining.
    queries: Dict[str, DataQuery]
        Identifier to query map of everything submitted.
    used: List[str]
        Identifiers of queries that produced at least one datapoint.
    unused: List[str]
        ``queries - used``, in submission order.
    results: int
        Number of results returned by the provider across all batches.
    provider_messages: List[MessageData]
        Diagnostics attached to fetch responses.
    rejections: int
        Listed series that were not accepted.
    """

    state: CheckState = CheckState.OK
    pages: int = 0
    page_cap_exceeded: bool = False
    queries: Dict[str, DataQuery] = Field(default_factory=dict)
    used: List[str] = Field(default_factory=list)
    unused: List[str] = Field(default_factory=list)
    results: int = 0
    provider_messages: List[MessageData] = Field(default_factory=list)
    rejections: int = 0
    lines_written: int = 0
