"""Tests for the plugin catalog."""

import json

import pytest

from api.errors import CatalogLoadError
from api.plugins.catalog import PluginCatalog
from conftest import CATALOG_IDS


class TestPluginCatalog:
    """Tests for PluginCatalog."""

    def test_list_preserves_order(self, catalog):
        assert catalog.list() == CATALOG_IDS

    def test_list_returns_copy(self, catalog):
        ids = catalog.list()
        ids.append("Injected")
        assert catalog.list() == CATALOG_IDS

    def test_has_exact_match(self, catalog):
        assert catalog.has("LuckPerms")
        assert catalog.has("QuickShop-Hikari")

    def test_has_is_case_sensitive(self, catalog):
        assert not catalog.has("luckperms")
        assert not catalog.has("LUCKPERMS")

    def test_has_rejects_partial_and_empty(self, catalog):
        assert not catalog.has("Luck")
        assert not catalog.has("LuckPerms.json")
        assert not catalog.has("")

    def test_find_returns_entry(self, catalog):
        assert catalog.find("MinecraftPluginManager") == "MinecraftPluginManager"
        assert catalog.find("DoesNotExist") is None

    def test_duplicates_served_as_declared(self):
        catalog = PluginCatalog(["B", "A", "B"])
        assert catalog.list() == ["B", "A", "B"]
        assert len(catalog) == 3
        assert catalog.has("B")
        assert catalog.find("B") == "B"

    def test_empty_catalog(self):
        catalog = PluginCatalog([])
        assert catalog.list() == []
        assert len(catalog) == 0
        assert not catalog.has("LuckPerms")

    def test_iteration(self, catalog):
        assert list(catalog) == CATALOG_IDS


class TestPluginCatalogFromFile:
    """Tests for loading the build-time plugin list."""

    def test_load_list(self, tmp_path):
        list_file = tmp_path / "_list.json"
        list_file.write_text(json.dumps(CATALOG_IDS), encoding="utf-8")

        catalog = PluginCatalog.from_file(list_file)
        assert catalog.list() == CATALOG_IDS

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as exc_info:
            PluginCatalog.from_file(tmp_path / "_list.json")
        assert exc_info.value.reason == "file not found"

    def test_invalid_json(self, tmp_path):
        list_file = tmp_path / "_list.json"
        list_file.write_text("[\"LuckPerms\",", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="invalid JSON"):
            PluginCatalog.from_file(list_file)

    @pytest.mark.parametrize("content", [{"LuckPerms": 1}, ["LuckPerms", 2], "LuckPerms"])
    def test_not_an_array_of_strings(self, tmp_path, content):
        list_file = tmp_path / "_list.json"
        list_file.write_text(json.dumps(content), encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="array of strings"):
            PluginCatalog.from_file(list_file)

    def test_bundled_list_is_loadable(self):
        from api.constants import PAPER_LIST_FILE

        catalog = PluginCatalog.from_file(PAPER_LIST_FILE)
        assert catalog.list() == CATALOG_IDS


class TestPackageExports:
    """Tests for the lazy api.plugins exports."""

    def test_lazy_attributes(self):
        import api.plugins as plugins
        from api.plugins.discovery import PluginMetadataDiscovery
        from api.plugins.metadata import describe_plugin_info

        assert plugins.PluginCatalog is PluginCatalog
        assert plugins.PluginMetadataDiscovery is PluginMetadataDiscovery
        assert plugins.describe_plugin_info is describe_plugin_info

    def test_unknown_attribute(self):
        import api.plugins as plugins

        with pytest.raises(AttributeError):
            plugins.PluginManager
