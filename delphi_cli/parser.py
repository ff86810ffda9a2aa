"""Regex-based extraction of Elm import statements.

Only a subset of the import grammar is recognised, one statement per line:

    import <Module>[ as <Alias>][ exposing (<entries>)]

- The statement must start at column 0; indented imports are ignored.
- ``<Module>`` may be dotted (``Platform.Cmd``); ``<Alias>`` is one segment.
- ``<entries>`` may nest parentheses one level deep and is split on commas.
  Entries are kept as opaque strings, so ``Maybe(..)`` and ``(::)`` survive
  unchanged.
- An entry of exactly ``..`` exposes the whole module.

Multi-line exposing lists and imports followed by a ``--`` comment on the
same line do not match and are skipped silently, like any other line.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .config import PRELUDE
from .models import Exposing, ImportDeclaration

logger = logging.getLogger(__name__)

IMPORT_PATTERN = re.compile(
    r"^import[ \t]+(?P<module>\w+(?:\.\w+)*)"
    r"(?:[ \t]+as[ \t]+(?P<alias>\w+))?"
    r"(?:[ \t]+exposing[ \t]*\((?P<exposing>(?:[^()\n]|\([^()\n]*\))*)\))?"
    r"[ \t]*\r?$",
    re.MULTILINE,
)

WILDCARD_ENTRY = ".."


def parse_exposing(clause: Optional[str]) -> Exposing:
    """Classify the body of an ``exposing (...)`` clause."""
    if clause is None:
        return Exposing.none()
    entries = tuple(entry.strip() for entry in clause.split(","))
    entries = tuple(entry for entry in entries if entry)
    if WILDCARD_ENTRY in entries:
        return Exposing.wildcard()
    return Exposing.explicit(entries)


def parse_imports(source: str) -> List[ImportDeclaration]:
    """Return every import declaration in *source*, in order of appearance.

    Duplicate imports of the same module are all kept.
    """
    imports: List[ImportDeclaration] = []
    for match in IMPORT_PATTERN.finditer(source):
        module_name = match.group("module")
        imports.append(
            ImportDeclaration(
                module_name=module_name,
                alias=match.group("alias") or module_name,
                exposed=parse_exposing(match.group("exposing")),
            )
        )
    logger.debug("Found %d import(s)", len(imports))
    return imports


def with_prelude(source: str) -> str:
    """Prefix *source* with the implicit imports every Elm module has."""
    return PRELUDE + source


def parse_source_imports(source: str) -> List[ImportDeclaration]:
    """Parse the imports of an Elm file, prelude imports first."""
    return parse_imports(with_prelude(source))
