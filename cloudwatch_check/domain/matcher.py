"""Series matcher: decides which listed series join the working set."""

from __future__ import annotations

import logging
from typing import List, Sequence, Set, Tuple

from ..errors import PartialRejection, Rejection
from .measurements import MeasurementConfiguration
from .models import MetricSeries

logger = logging.getLogger(__name__)

REASON_METRIC_OVERRIDE = "filtered by metric-name override"
REASON_NOT_CONFIGURED = "no configuration entry for metric"


class SeriesMatcher:
    """Accumulates accepted series across listing pages.

    The working set only grows: a series accepted on one page is never
    dropped by a later call. A series listed twice is kept once.

    Parameters
    ----------
    config: MeasurementConfiguration
        Active configuration. In ad-hoc mode unknown metrics are adopted into
        it, so the matcher mutates the run's own copy.
    """

    def __init__(self, config: MeasurementConfiguration) -> None:
        self.config = config
        self.working_set: List[MetricSeries] = []
        self.rejections: List[Rejection] = []
        self._seen: Set[Tuple[str, str, frozenset]] = set()

    def add_series(self, candidates: Sequence[MetricSeries]) -> None:
        """Match a page of candidates against the configuration.

        Every candidate is processed before any error is raised, so accepted
        series from a partially rejected page are kept.

        Raises
        ------
        PartialRejection
            If any candidate on this page was rejected.
        """
        rejected: List[Rejection] = []
        for series in candidates:
            reason = self._reject_reason(series)
            if reason is not None:
                rejection = Rejection(series, reason)
                rejected.append(rejection)
                logger.debug(
                    "matcher.reject",
                    extra={"metric": series.metric_name, "reason": reason},
                )
                continue
            key = series.identity()
            if key in self._seen:
                logger.debug("matcher.duplicate", extra={"metric": series.metric_name})
                continue
            self._seen.add(key)
            self.working_set.append(series)

        if rejected:
            self.rejections.extend(rejected)
            raise PartialRejection(rejected)

    def _reject_reason(self, series: MetricSeries) -> str | None:
        override = self.config.metric_filter
        if override and override != series.metric_name:
            return REASON_METRIC_OVERRIDE
        if self.config.accepts_metric(series.metric_name):
            return None
        if self.config.adopt_series(series):
            logger.debug("matcher.adopt", extra={"metric": series.metric_name})
            return None
        return REASON_NOT_CONFIGURED
