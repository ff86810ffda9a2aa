"""Core data models shared by the import parser, loader and resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class ExposingKind(Enum):
    NONE = "none"
    WILDCARD = "wildcard"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class Exposing:
    """Which names of an imported module enter unqualified scope."""

    kind: ExposingKind
    names: Tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "Exposing":
        return cls(ExposingKind.NONE)

    @classmethod
    def wildcard(cls) -> "Exposing":
        return cls(ExposingKind.WILDCARD)

    @classmethod
    def explicit(cls, names: Tuple[str, ...]) -> "Exposing":
        return cls(ExposingKind.EXPLICIT, tuple(names))

    def admits(self, name: str) -> bool:
        """True if an unqualified *name* may come from this module.

        Explicit entries match when equal to *name* or when they start with
        it, so ``Ma`` reaches an entry written ``Maybe(..)``.
        """
        if self.kind is ExposingKind.WILDCARD:
            return True
        if self.kind is ExposingKind.NONE:
            return False
        return any(entry == name or entry.startswith(name) for entry in self.names)


@dataclass(frozen=True)
class ImportDeclaration:
    module_name: str
    alias: str
    exposed: Exposing = field(default_factory=Exposing.none)


@dataclass(frozen=True)
class DocValue:
    name: str
    type: str
    comment: str = ""


@dataclass(frozen=True)
class DocModule:
    name: str
    comment: str = ""
    values: Tuple[DocValue, ...] = ()
    package: Optional[str] = None
    version: Optional[str] = None


@dataclass(frozen=True)
class UnqualifiedQuery:
    name: str


@dataclass(frozen=True)
class QualifiedQuery:
    module_path: str
    name: str


ClassifiedQuery = Union[UnqualifiedQuery, QualifiedQuery]


@dataclass(frozen=True)
class SearchResult:
    name: str
    full_name: str
    href: str
    signature: str
    comment: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "fullName": self.full_name,
            "href": self.href,
            "signature": self.signature,
            "comment": self.comment,
        }


def results_to_json_ready(results: List[SearchResult]) -> List[Dict[str, str]]:
    return [result.to_dict() for result in results]
