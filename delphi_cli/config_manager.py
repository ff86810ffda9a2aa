"""Settings for Delphi, layered from defaults, a TOML file and CLI overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import toml

from . import config

logger = logging.getLogger(__name__)

SECTION = "delphi"


@dataclass(frozen=True)
class Settings:
    elm_version: str = config.DEFAULT_ELM_VERSION
    package_store: Optional[Path] = None
    href: str = config.DEFAULT_HREF


def load_config() -> Dict[str, Any]:
    """Load the ``[delphi]`` section of the TOML config file.

    Returns:
        The section as a dictionary. Empty if the file doesn't exist or
        cannot be parsed; a broken config file never aborts a lookup.
    """
    config_file = Path(config.CONFIG_FILE)
    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_file, exc)
        return {}

    section = data.get(SECTION, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s] in %s: not a table", SECTION, config_file)
        return {}
    return section


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> Settings:
    """Build settings from defaults < config file < explicit overrides.

    ``None`` values in *overrides* are treated as "not given".
    """
    settings = Settings()
    for source in (load_config(), overrides or {}):
        settings = _apply(settings, source)
    return settings


def _apply(settings: Settings, values: Mapping[str, Any]) -> Settings:
    changes: Dict[str, Any] = {}
    if values.get("elm_version"):
        changes["elm_version"] = str(values["elm_version"])
    if values.get("package_store"):
        changes["package_store"] = Path(str(values["package_store"])).expanduser()
    if values.get("href"):
        changes["href"] = str(values["href"])
    return replace(settings, **changes) if changes else settings


def package_store_root(
    settings: Settings,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    """Locate the directory holding installed Elm packages.

    Order: explicit ``package_store`` setting, ``$ELM_HOME/<version>/package``,
    then ``$APPDATA/elm/<version>/package``. Returns ``None`` when none apply.
    """
    env = os.environ if environ is None else environ
    if settings.package_store is not None:
        return settings.package_store

    elm_home = env.get("ELM_HOME")
    if elm_home:
        return Path(elm_home).expanduser() / settings.elm_version / "package"

    appdata = env.get("APPDATA")
    if appdata:
        return Path(appdata) / "elm" / settings.elm_version / "package"

    return None
