"""
Dimension filter expression parsing.

Expressions take the form ``Name`` (any value) or ``Name=Value`` (exact
match). They come from the CLI, the environment, or a configuration
document's ``dimension-filters`` list.
"""

from typing import Iterable, List, Sequence

from ...errors import InvalidFilterSyntax
from ..models import DimensionFilter


def parse_dimension_filters(filters: Sequence[str]) -> List[DimensionFilter]:
    """
    Parse filter expressions into predicates.

    Output order matches input order and duplicates are kept.

    Raises
    ------
    InvalidFilterSyntax
        If an expression splits into more than two ``=`` segments.

    Examples
    --------
    >>> [f.to_expression() for f in parse_dimension_filters(["hey=you", "what"])]
    ['hey=you', 'what']
    """
    output: List[DimensionFilter] = []
    for item in filters:
        expression = item.strip()
        # A blank expression has no segments at all
        segments = expression.split("=") if expression else []
        if len(segments) < 1 or len(segments) > 2:
            raise InvalidFilterSyntax(item)
        if len(segments) == 1:
            output.append(DimensionFilter(name=segments[0]))
        else:
            output.append(DimensionFilter(name=segments[0], value=segments[1]))
    return output


def split_list(value: str) -> List[str]:
    """Split a comma separated CLI/env list, dropping blank items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def dedupe_expressions(filters: Iterable[DimensionFilter]) -> List[str]:
    """Return unique filter expressions in first-seen order."""
    seen: dict[str, None] = {}
    for f in filters:
        seen.setdefault(f.to_expression(), None)
    return list(seen)
