"""
Error taxonomy for a check run.

Every fatal condition is a :class:`CloudWatchCheckError` carrying the
``CheckState`` it maps to, so the CLI can turn any of them into a single-line
explanation and an exit code without inspecting the concrete type. Non-fatal
conditions (:class:`PartialRejection` outside strict mode,
:class:`PaginationCapExceeded`, :class:`ProviderDiagnostic`) are recorded by the
engine and surfaced in the end-of-run summary instead of aborting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from .check.models import CheckState

if TYPE_CHECKING:
    from .domain.models import MetricSeries


class CloudWatchCheckError(Exception):
    """Base class for all errors raised by the check engine.

    Attributes
    ----------
    state: CheckState
        Run result this error maps to when it escapes the engine.
    """

    state: CheckState = CheckState.CRITICAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigParseError(CloudWatchCheckError):
    """Malformed measurement configuration document."""


class InvalidFilterSyntax(CloudWatchCheckError):
    """Malformed dimension filter expression."""

    def __init__(self, expression: str) -> None:
        super().__init__(
            f"error parsing dimension filter {expression!r}: "
            "expected 'Name' or 'Name=Value'"
        )
        self.expression = expression


class UnknownPreset(CloudWatchCheckError):
    """Requested preset name is not registered.

    The message enumerates every known preset with its description.
    """

    def __init__(self, name: str, catalog: Iterable[tuple[str, str]]) -> None:
        lines = [f"Preset {name} not defined", "Choose from:"]
        lines.extend(f" {key} : {description}" for key, description in catalog)
        super().__init__("\n".join(lines))
        self.name = name


class ArgumentError(CloudWatchCheckError):
    """Invalid combination of run arguments."""


class CredentialError(CloudWatchCheckError):
    """AWS credentials or shared config files could not be resolved."""


class TransportError(CloudWatchCheckError):
    """A list or fetch call to the provider failed. Never retried."""

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class ReconciliationFault(CloudWatchCheckError):
    """A returned result does not belong to any submitted query."""


class Rejection:
    """A listed series that was not accepted, and why."""

    __slots__ = ("series", "reason")

    def __init__(self, series: "MetricSeries", reason: str) -> None:
        self.series = series
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.reason}: {self.series.metric_name}"

    def __repr__(self) -> str:
        return f"Rejection({self.series.metric_name!r}, {self.reason!r})"


class PartialRejection(CloudWatchCheckError):
    """One or more listed series did not match the active configuration.

    Non-fatal by default; the engine re-raises it only in strict mode.
    """

    def __init__(self, reasons: List[Rejection]) -> None:
        super().__init__("\n".join(str(r) for r in reasons))
        self.reasons = reasons


class PaginationCapExceeded(CloudWatchCheckError):
    """More listing pages existed than the configured maximum."""

    state = CheckState.WARNING

    def __init__(self, max_pages: int) -> None:
        super().__init__(
            f"max allowed ListMetrics result pages ({max_pages}) exceeded, "
            "either filter via --namespace or --metric-filter option or "
            "increase --max-pages value"
        )
        self.max_pages = max_pages


class ProviderDiagnostic(CloudWatchCheckError):
    """The fetch call succeeded but attached warning messages."""

    state = CheckState.WARNING

    def __init__(self, code: str, value: str) -> None:
        super().__init__(f"Code: {code} Message: {value}")
        self.code = code
        self.value = value
