"""Pytest configuration and fixtures for Delphi tests."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from delphi_cli.models import DocModule, DocValue

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch):
    """Keep the user's Elm install and Delphi config out of every test."""
    monkeypatch.delenv("ELM_HOME", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr("delphi_cli.config.CONFIG_FILE", tmp_path / "delphi-config" / "config.toml")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_project_path() -> Path:
    """Elm application depending on elm/core and elm/html."""
    return FIXTURES / "sample_project"


@pytest.fixture
def elm_home() -> Path:
    """ELM_HOME layout with documentation for elm/core and elm/html 1.0.0."""
    return FIXTURES / "elm_home"


@pytest.fixture
def package_store_path(elm_home: Path) -> Path:
    return elm_home / "0.19.0" / "package"


@pytest.fixture
def with_elm_home(elm_home: Path, monkeypatch) -> Path:
    monkeypatch.setenv("ELM_HOME", str(elm_home))
    return elm_home


@pytest.fixture
def make_project(temp_dir: Path):
    """Build an Elm project in a temporary directory.

    Returns a factory taking the direct dependencies and the text of
    ``src/Main.elm``; pass ``dependencies=None`` to omit elm.json.
    """

    def _make(dependencies=None, source: str = "module Main exposing (..)\n") -> Path:
        if dependencies is not None:
            manifest = {"dependencies": {"direct": dependencies, "indirect": {}}}
            (temp_dir / "elm.json").write_text(json.dumps(manifest), encoding="utf-8")
        src = temp_dir / "src"
        src.mkdir(exist_ok=True)
        (src / "Main.elm").write_text(source, encoding="utf-8")
        return temp_dir

    return _make


@pytest.fixture
def write_docs(temp_dir: Path):
    """Write a documentation.json into a package store under *temp_dir*."""
    store = temp_dir / "store"

    def _write(package: str, version: str, payload) -> Path:
        target = store / package / version
        target.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        (target / "documentation.json").write_text(text, encoding="utf-8")
        return store

    return _write


@pytest.fixture
def sample_docs() -> list:
    """Loaded documentation: List, Dict and a nested Html.Attributes module."""
    return [
        DocModule(
            name="List",
            values=(
                DocValue(name="filter", type="(a -> Bool) -> List a -> List a"),
                DocValue(name="map", type="(a -> b) -> List a -> List b", comment=" Map a list."),
                DocValue(name="map2", type="(a -> b -> c) -> List a -> List b -> List c"),
            ),
        ),
        DocModule(
            name="Dict",
            values=(
                DocValue(name="get", type="comparable -> Dict comparable v -> Maybe v"),
                DocValue(name="map", type="(k -> a -> b) -> Dict k a -> Dict k b"),
            ),
        ),
        DocModule(
            name="Maybe",
            values=(DocValue(name="withDefault", type="a -> Maybe a -> a"),),
        ),
        DocModule(
            name="Html.Attributes",
            values=(
                DocValue(name="class", type="String -> Attribute msg"),
                DocValue(name="classList", type="List ( String, Bool ) -> Attribute msg"),
            ),
        ),
    ]

