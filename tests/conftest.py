"""Shared fixtures for catalog and API tests."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api import dependencies
from api.plugins.catalog import PluginCatalog
from api.plugins.discovery import PluginMetadataDiscovery

CATALOG_IDS = ["LuckPerms", "MinecraftPluginManager", "QuickShop-Hikari"]


def make_plugin_info(plugin_id: str = "LuckPerms", **overrides) -> dict:
    """Build a raw, valid PluginInfo document."""
    data = {
        "id": plugin_id,
        "website": "https://luckperms.net",
        "source": "https://github.com/LuckPerms/LuckPerms",
        "license": "MIT",
        "repositories": [
            {
                "type": "modrinth",
                "id": "Vebnzrzj",
                "fileNameRegex": r"LuckPerms-Bukkit-.*\.jar",
            }
        ],
    }
    data.update(overrides)
    return data


def write_metadata(plugins_dir: Path, plugin_id: str, data) -> Path:
    plugins_dir.mkdir(parents=True, exist_ok=True)
    path = plugins_dir / f"{plugin_id}.json"
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def catalog() -> PluginCatalog:
    return PluginCatalog(CATALOG_IDS)


@pytest.fixture
def plugins_dir(tmp_path) -> Path:
    directory = tmp_path / "plugins"
    for plugin_id in CATALOG_IDS:
        write_metadata(directory, plugin_id, make_plugin_info(plugin_id))
    return directory


@pytest.fixture
def install_services(monkeypatch):
    """Install a catalog (and optionally a metadata directory) into the service singletons."""

    def _install(catalog: PluginCatalog, plugins_dir: Path = None):
        monkeypatch.setattr(dependencies, "_plugin_catalog_instance", catalog)
        if plugins_dir is not None:
            monkeypatch.setattr(
                dependencies, "_metadata_discovery_instance", PluginMetadataDiscovery(plugins_dir)
            )

    yield _install
    dependencies.reset_services()


@pytest.fixture
def client(install_services, catalog, plugins_dir) -> TestClient:
    from app import app

    install_services(catalog, plugins_dir)
    return TestClient(app)
