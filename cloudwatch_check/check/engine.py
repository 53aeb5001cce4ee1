"""Check run engine.

Drives one run end to end, strictly sequentially:

1. Listing loop: page through ``list_series`` feeding every page into the
   :class:`~cloudwatch_check.domain.matcher.SeriesMatcher`, until the
   provider stops returning a continuation token or the page limit is hit.
2. Query expansion and batching.
3. Fetch loop: one ``fetch_datapoints`` call per batch, reconciling every
   returned result against the submitted queries and writing data lines as
   each batch completes.
4. Warning comment lines and the run summary.

Fatal conditions propagate as :class:`~cloudwatch_check.errors.CloudWatchCheckError`
subclasses; whatever was already written stays written.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Callable, List, Optional, Set, TextIO

from ..adapters import MetricsProvider
from ..domain.batcher import batched, build_queries
from ..domain.matcher import SeriesMatcher
from ..domain.measurements import MeasurementConfiguration
from ..domain.models import DataQuery, DataResult, DimensionFilter, TimeWindow
from ..domain.utils.labels import label_base
from ..domain.utils.timestamps import fetch_window
from ..errors import PaginationCapExceeded, PartialRejection, ReconciliationFault
from ..schemas.provider_contract import FetchDatapointsRequest, ListSeriesRequest
from ..utils.diagnostics import RunDiagnostics, format_run_summary
from .exposition import format_dry_run_line, format_metadata_lines, format_point_line
from .models import CheckOptions, CheckResult, CheckState

logger = logging.getLogger(__name__)


class CheckRunner:
    """Runs one check against a metrics provider.

    Parameters
    ----------
    provider: MetricsProvider
        Adapter serving ``list_series`` and ``fetch_datapoints``.
    config: MeasurementConfiguration
        The run's own configuration. In ad-hoc mode it grows as unknown
        metrics are adopted, so callers pass one built for this run.
    options: CheckOptions
        Engine switches (page limit, dry-run, strict mode, ...).
    out: TextIO
        Sink for result lines; defaults to stdout.
    clock: Callable[[], datetime], optional
        Source of "now" for the fetch window.
    """

    def __init__(
        self,
        provider: MetricsProvider,
        config: MeasurementConfiguration,
        options: Optional[CheckOptions] = None,
        out: Optional[TextIO] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.provider = provider
        self.config = config
        self.options = options or CheckOptions()
        self.out = out if out is not None else sys.stdout
        self.clock = clock
        self.diagnostics = RunDiagnostics()
        self._lines = 0

    @property
    def period_minutes(self) -> int:
        """Configuration period when set, else the run default."""
        if self.config.period_minutes > 0:
            return self.config.period_minutes
        return self.options.period_minutes

    @property
    def region(self) -> str:
        """Configuration region when set, else the client region."""
        return self.config.region or self.options.region

    def run(self) -> CheckResult:
        """Execute the run and return its summary.

        Raises
        ------
        PartialRejection
            When series were rejected and ``error_on_missing`` is set.
        ReconciliationFault
            When the results of a batch do not line up one-to-one with its
            submitted queries.
        TransportError
            When a provider call fails.
        """
        result = CheckResult()
        matcher = SeriesMatcher(self.config)
        self._list_series(matcher, result)
        self.diagnostics.rejections = list(matcher.rejections)
        result.rejections = len(matcher.rejections)

        if self.options.output_config:
            self._write(self.config.to_text(pretty=True))
            for line in self.diagnostics.comment_lines():
                self._write(line)
            result.lines_written = self._lines
            if self.diagnostics.degraded:
                result.state = CheckState.WARNING
            logger.info(
                "check.output_config",
                extra={"metrics": len(self.config.stat_map), "state": result.state.name},
            )
            return result

        queries = build_queries(matcher.working_set, self.config, self.period_minutes)
        result.queries = {q.id: q for q in queries}
        if not queries:
            self.diagnostics.no_queries = True
        else:
            self._fetch(queries, result)

        used = set(result.used)
        result.unused = [qid for qid in result.queries if qid not in used]
        result.provider_messages = list(self.diagnostics.provider_messages)
        for line in self.diagnostics.comment_lines():
            self._write(line)
        result.lines_written = self._lines

        summary = format_run_summary(
            result.queries, result.results, result.unused, self.diagnostics, self.region
        )
        logger.log(logging.INFO if self.options.verbose else logging.DEBUG, summary)

        if self.diagnostics.degraded:
            result.state = CheckState.WARNING
        logger.info(
            "check.complete",
            extra={
                "state": result.state.name,
                "pages": result.pages,
                "queries": len(result.queries),
                "used": len(result.used),
                "unused": len(result.unused),
            },
        )
        return result

    def _listing_filters(self) -> List[DimensionFilter]:
        # Duplicate expressions narrow nothing further
        return list(dict.fromkeys(self.config.dimension_filters))

    def _list_series(self, matcher: SeriesMatcher, result: CheckResult) -> None:
        token: Optional[str] = None
        max_pages = self.options.max_pages
        while True:
            req = ListSeriesRequest(
                namespace=self.config.namespace or None,
                metric_name=self.config.metric_filter or None,
                dimensions=self._listing_filters(),
                recently_active=self.options.recently_active,
                next_token=token,
            )
            page = self.provider.list_series(req)
            result.pages += 1
            logger.debug(
                "check.list.page",
                extra={"page": result.pages, "series": len(page.series)},
            )
            try:
                matcher.add_series(page.series)
            except PartialRejection as exc:
                logger.debug(
                    "check.list.rejected",
                    extra={"page": result.pages, "rejected": len(exc.reasons)},
                )
                if self.options.error_on_missing:
                    raise

            token = page.next_token
            if not token:
                return
            if max_pages > 0 and result.pages >= max_pages:
                self.diagnostics.page_cap = PaginationCapExceeded(max_pages)
                result.page_cap_exceeded = True
                logger.warning("check.list.page_cap", extra={"max_pages": max_pages})
                return

    def _fetch(self, queries: List[DataQuery], result: CheckResult) -> None:
        now = self.clock() if self.clock is not None else None
        start, end = fetch_window(self.period_minutes, now)
        window = TimeWindow(start=start, end=end)
        used: Set[str] = set()
        seen_bases: Set[str] = set()

        for number, batch in enumerate(batched(queries), start=1):
            logger.debug("check.fetch.batch", extra={"batch": number, "queries": len(batch)})
            if self.options.dry_run:
                for query in batch:
                    self._write(format_dry_run_line(query, self.config.region))
                    used.add(query.id)
                    result.used.append(query.id)
                continue

            response = self.provider.fetch_datapoints(
                FetchDatapointsRequest(queries=batch, window=window)
            )
            if response.next_token:
                raise ReconciliationFault(
                    "GetMetricData returned a continuation token; "
                    "paginated fetch batches are not supported"
                )
            self.diagnostics.provider_messages.extend(response.messages)
            result.results += len(response.results)
            answered: Set[str] = set()
            for data in response.results:
                query = result.queries.get(data.id)
                if query is None:
                    raise ReconciliationFault(
                        f"result id {data.id!r} does not match any submitted query"
                    )
                if data.id in answered:
                    raise ReconciliationFault(
                        f"result id {data.id!r} returned more than once in one response"
                    )
                answered.add(data.id)
                if len(data.timestamps) != len(data.values):
                    raise ReconciliationFault(
                        f"result id {data.id!r} has {len(data.timestamps)} timestamps "
                        f"but {len(data.values)} values"
                    )
                self._emit(query, data, seen_bases)
                if data.timestamps and data.id not in used:
                    used.add(data.id)
                    result.used.append(data.id)

    def _emit(self, query: DataQuery, data: DataResult, seen_bases: Set[str]) -> None:
        if data.messages:
            logger.debug(
                "check.fetch.result_messages",
                extra={"id": data.id, "messages": [m.model_dump() for m in data.messages]},
            )
        if not data.timestamps:
            return
        if self.options.with_metadata:
            base = label_base(query.label)
            if base not in seen_bases:
                seen_bases.add(base)
                for line in format_metadata_lines(query, self.region):
                    self._write(line)
        for timestamp, value in data.points():
            self._write(format_point_line(query, timestamp, value, self.config.region))

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self._lines += 1

