"""Configuration paths and fixed lookup constants."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("DELPHI_HOME", str(Path.home() / ".delphi"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

MANIFEST_NAME = "elm.json"
DOCS_FILE_NAME = "documentation.json"
DEFAULT_ELM_VERSION = "0.19.0"
DEFAULT_HREF = "http://elm-lang.org"

# Modules every Elm file sees without importing them.
PRELUDE = """import Basics exposing (..)
import List exposing (List, (::))
import Maybe exposing (Maybe(..))
import Result exposing (Result(..))
import String exposing (String)
import Char exposing (Char)
import Tuple

import Debug

import Platform exposing ( Program )
import Platform.Cmd as Cmd exposing ( Cmd )
import Platform.Sub as Sub exposing ( Sub )
"""
