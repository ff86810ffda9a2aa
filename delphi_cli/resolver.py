"""Resolve a classified query against the imports in scope and loaded docs."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_HREF
from .models import (
    ClassifiedQuery,
    DocModule,
    DocValue,
    ImportDeclaration,
    QualifiedQuery,
    SearchResult,
    UnqualifiedQuery,
)

logger = logging.getLogger(__name__)


def find_import_by_alias(
    imports: Sequence[ImportDeclaration],
    alias: str,
) -> Optional[ImportDeclaration]:
    """Return the first import whose alias is *alias*, if any."""
    return next((imp for imp in imports if imp.alias == alias), None)


def modules_exposing(imports: Sequence[ImportDeclaration], name: str) -> List[str]:
    """Module names that may put unqualified *name* in scope.

    Order follows *imports*; a module imported twice appears twice.
    """
    return [imp.module_name for imp in imports if imp.exposed.admits(name)]


def build_href(template: str, module: DocModule, value: DocValue) -> str:
    return template.format(
        package=module.package or "",
        version=module.version or "",
        module=module.name,
        module_path=module.name.replace(".", "-"),
        name=value.name,
    )


def search_module(
    docs: Sequence[DocModule],
    module_name: str,
    name: str,
    href: str = DEFAULT_HREF,
) -> List[SearchResult]:
    """Values of *module_name* whose name starts with *name*."""
    results: List[SearchResult] = []
    for module in docs:
        if module.name != module_name:
            continue
        for value in module.values:
            if not value.name.startswith(name):
                continue
            results.append(
                SearchResult(
                    name=value.name,
                    full_name=f"{module_name}.{value.name}",
                    href=build_href(href, module, value),
                    signature=value.type,
                    comment=value.comment,
                )
            )
    return results


def resolve(
    docs: Sequence[DocModule],
    imports: Sequence[ImportDeclaration],
    query: ClassifiedQuery,
    href: str = DEFAULT_HREF,
) -> List[SearchResult]:
    """Find the documented values *query* can refer to from a file with *imports*.

    A qualifier that matches no import alias is not an error; it simply
    yields no results.
    """
    if isinstance(query, QualifiedQuery):
        target = find_import_by_alias(imports, query.module_path)
        if target is None:
            logger.debug("No import aliased '%s'", query.module_path)
            return []
        logger.debug("Alias '%s' resolves to %s", query.module_path, target.module_name)
        return search_module(docs, target.module_name, query.name, href)

    if isinstance(query, UnqualifiedQuery):
        module_names = modules_exposing(imports, query.name)
        logger.debug("Searching %s for '%s'", module_names, query.name)
        results: List[SearchResult] = []
        for module_name in module_names:
            results.extend(search_module(docs, module_name, query.name, href))
        return results

    raise TypeError(f"Unsupported query type: {type(query).__name__}")


def check_href_template(template: str) -> None:
    """Raise ValueError if *template* uses fields :func:`build_href` lacks."""
    try:
        template.format(
            package="author/project",
            version="1.0.0",
            module="Module.Name",
            module_path="Module-Name",
            name="value",
        )
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid href template {template!r}: {exc!r}") from exc
