"""Split a dotted lookup query into an optional module qualifier and a name."""

from __future__ import annotations

from .errors import UsageError
from .models import ClassifiedQuery, QualifiedQuery, UnqualifiedQuery


def classify_query(query: str) -> ClassifiedQuery:
    """Classify *query* as qualified (``Dict.get``) or unqualified (``map``).

    The qualifier keeps every segment but the last, so nested aliases such as
    ``Html.Attributes.class`` compare against the full alias string.

    Raises:
        UsageError: If *query* is empty.
    """
    if not query:
        raise UsageError("A query is required. Either a function or a type name.")

    parts = query.split(".")
    if len(parts) == 1:
        return UnqualifiedQuery(name=parts[0])
    return QualifiedQuery(module_path=".".join(parts[:-1]), name=parts[-1])
