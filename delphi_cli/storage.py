"""Read access to the project manifest and installed package documentation.

- ``elm.json`` in the project root lists the direct dependencies.
- Each installed package version ships a ``documentation.json`` index under
  ``<package store>/<author>/<name>/<version>/``.

Only direct dependencies are loaded: indirect ones cannot be imported from
the project, so nothing in them is ever in scope.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .config import DOCS_FILE_NAME, MANIFEST_NAME
from .errors import DocLoadError, ManifestError
from .models import DocModule, DocValue

logger = logging.getLogger(__name__)


def manifest_path(project_root: Path) -> Path:
    return project_root / MANIFEST_NAME


def load_direct_dependencies(path: Path) -> Dict[str, str]:
    """Return the ``dependencies.direct`` mapping of package name to version.

    Raises:
        ManifestError: If the manifest is missing, not valid JSON, or lacks a
            ``dependencies.direct`` object of string versions.
    """
    if not path.is_file():
        raise ManifestError(f"Cannot find {MANIFEST_NAME} in project path")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    dependencies = payload.get("dependencies") if isinstance(payload, dict) else None
    direct = dependencies.get("direct") if isinstance(dependencies, dict) else None
    if not isinstance(direct, dict):
        raise ManifestError(f"{path} has no 'dependencies.direct' section")

    for name, version in direct.items():
        if not isinstance(version, str):
            raise ManifestError(f"{path}: version of '{name}' must be a string")

    logger.debug("Direct dependencies: %s", ", ".join(direct) or "none")
    return dict(direct)


class PackageStore:
    """Installed Elm packages rooted at one directory."""

    def __init__(self, root: Optional[Path]) -> None:
        self.root = root

    def docs_path(self, package: str, version: str) -> Path:
        if self.root is None:
            raise DocLoadError(
                "Cannot locate the Elm package store; set ELM_HOME or APPDATA, "
                "or pass --package-store"
            )
        return self.root / package / version / DOCS_FILE_NAME

    def load_package(self, package: str, version: str) -> List[DocModule]:
        """Load the documentation index of one package version.

        Raises:
            DocLoadError: If the index is missing, unreadable or malformed.
        """
        path = self.docs_path(package, version)
        if not path.is_file():
            raise DocLoadError(f"No documentation for {package} {version} at {path}")

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise DocLoadError(f"Cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DocLoadError(f"Invalid JSON in {path}: {exc}") from exc

        try:
            modules = _parse_modules(payload, package, version)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DocLoadError(f"Malformed documentation for {package} {version}: {exc}") from exc

        logger.debug("Loaded %d module(s) from %s %s", len(modules), package, version)
        return modules

    def load_documentation(self, dependencies: Mapping[str, str]) -> List[DocModule]:
        """Concatenate the modules of every dependency, in manifest order."""
        docs: List[DocModule] = []
        for package, version in dependencies.items():
            docs.extend(self.load_package(package, version))
        logger.info("Loaded %d module(s) from %d package(s)", len(docs), len(dependencies))
        return docs


def _parse_modules(payload: Any, package: str, version: str) -> List[DocModule]:
    if not isinstance(payload, list):
        raise ValueError("expected a list of modules")
    return [_parse_module(item, package, version) for item in payload]


def _parse_module(item: Dict[str, Any], package: str, version: str) -> DocModule:
    values = item["values"]
    if not isinstance(values, list):
        raise ValueError(f"'values' of module {item.get('name')!r} is not a list")
    return DocModule(
        name=_string(item, "name"),
        comment=item.get("comment") or "",
        values=tuple(
            DocValue(
                name=_string(value, "name"),
                type=_string(value, "type"),
                comment=value.get("comment") or "",
            )
            for value in values
        ),
        package=package,
        version=version,
    )


def _string(item: Dict[str, Any], key: str) -> str:
    value = item[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
