"""Dependency injection container for services."""

import logging

from api.constants import PAPER_LIST_FILE, PAPER_PLUGINS_DIR
from api.plugins.catalog import PluginCatalog
from api.plugins.discovery import PluginMetadataDiscovery

logger = logging.getLogger(__name__)

# ============================================================================
# Global service instances (Singleton pattern, but exposed via functions for easier testing/mocking)
# ============================================================================

_plugin_catalog_instance = None
_metadata_discovery_instance = None


def get_plugin_catalog() -> PluginCatalog:
    """Get the plugin catalog (singleton, loaded from the build-time list)."""
    global _plugin_catalog_instance
    if _plugin_catalog_instance is None:
        _plugin_catalog_instance = PluginCatalog.from_file(PAPER_LIST_FILE)
        logger.info("Created PluginCatalog instance")
    return _plugin_catalog_instance


def get_metadata_discovery() -> PluginMetadataDiscovery:
    """Get plugin metadata discovery (singleton)."""
    global _metadata_discovery_instance
    if _metadata_discovery_instance is None:
        _metadata_discovery_instance = PluginMetadataDiscovery(PAPER_PLUGINS_DIR)
        logger.info("Created PluginMetadataDiscovery instance")
    return _metadata_discovery_instance


# Test utility function (for unit testing - resets all singletons)
def reset_services():
    """Reset all service instances (only for testing)."""
    global _plugin_catalog_instance, _metadata_discovery_instance

    _plugin_catalog_instance = None
    _metadata_discovery_instance = None
    logger.info("Reset all service instances")
