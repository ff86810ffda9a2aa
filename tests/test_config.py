"""Tests for settings layering and package store discovery."""

from pathlib import Path

import pytest

from delphi_cli import config
from delphi_cli.config_manager import Settings, load_config, load_settings, package_store_root


@pytest.fixture
def config_file() -> Path:
    path = Path(config.CONFIG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def test_defaults_without_config_file():
    assert load_config() == {}
    assert load_settings() == Settings(elm_version="0.19.0", package_store=None, href="http://elm-lang.org")


def test_config_file_section(config_file: Path, temp_dir: Path):
    config_file.write_text(
        '[delphi]\nelm_version = "0.19.1"\n'
        f'package_store = "{temp_dir.as_posix()}"\n'
        'href = "https://package.elm-lang.org/packages/{package}/{version}/"\n'
    )

    settings = load_settings()

    assert settings.elm_version == "0.19.1"
    assert settings.package_store == temp_dir
    assert settings.href.endswith("{package}/{version}/")


def test_overrides_beat_config_file(config_file: Path):
    config_file.write_text('[delphi]\nelm_version = "0.19.1"\nhref = "from-file"\n')

    settings = load_settings({"elm_version": "0.19.0", "href": None, "package_store": None})

    assert settings.elm_version == "0.19.0"
    assert settings.href == "from-file"
    assert settings.package_store is None


def test_malformed_config_file_is_ignored(config_file: Path, caplog):
    config_file.write_text("[delphi\nelm_version = ")

    assert load_settings() == Settings()
    assert "Ignoring unreadable config file" in caplog.text


def test_non_table_section_is_ignored(config_file: Path):
    config_file.write_text('delphi = "yes"\n')

    assert load_config() == {}


class TestPackageStoreRoot:
    def test_explicit_setting_wins(self, temp_dir: Path):
        settings = Settings(package_store=temp_dir)

        assert package_store_root(settings, {"ELM_HOME": "/elm", "APPDATA": "/appdata"}) == temp_dir

    def test_elm_home(self):
        root = package_store_root(Settings(elm_version="0.19.1"), {"ELM_HOME": "/elm", "APPDATA": "/appdata"})

        assert root == Path("/elm") / "0.19.1" / "package"

    def test_appdata(self):
        root = package_store_root(Settings(), {"APPDATA": "/appdata"})

        assert root == Path("/appdata") / "elm" / "0.19.0" / "package"

    def test_nothing_configured(self):
        assert package_store_root(Settings(), {}) is None

    def test_reads_process_environment(self, with_elm_home: Path):
        assert package_store_root(Settings()) == with_elm_home / "0.19.0" / "package"
