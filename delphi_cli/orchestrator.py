"""Lookup pipeline: manifest, documentation, imports, then resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .config_manager import Settings, package_store_root
from .errors import UsageError
from .models import SearchResult
from .parser import parse_source_imports
from .query import classify_query
from .resolver import check_href_template, resolve
from .storage import PackageStore, load_direct_dependencies, manifest_path

logger = logging.getLogger(__name__)


class LookupOrchestrator:
    """Runs one query for one source file of an Elm project."""

    def __init__(self, project_root: Path, settings: Optional[Settings] = None):
        self.project_root = project_root
        self.settings = settings or Settings()
        self.store = PackageStore(package_store_root(self.settings))

    def read_source(self, file: str) -> str:
        source_path = self.project_root / file
        try:
            return source_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise UsageError(f"Cannot find Elm file {source_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise UsageError(f"Cannot read Elm file {source_path}: {exc}") from exc

    def lookup(self, file: str, query: str) -> List[SearchResult]:
        try:
            check_href_template(self.settings.href)
        except ValueError as exc:
            raise UsageError(str(exc)) from exc
        classified = classify_query(query)

        dependencies = load_direct_dependencies(manifest_path(self.project_root))
        docs = self.store.load_documentation(dependencies)

        imports = parse_source_imports(self.read_source(file))
        results = resolve(docs, imports, classified, href=self.settings.href)
        logger.info("%d match(es) for '%s'", len(results), query)
        return results
