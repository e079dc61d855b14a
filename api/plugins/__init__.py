"""Plugin catalog and metadata schema.

Imports are lazy so importing one component does not load the others.
"""

__all__ = [
    "PluginCatalog",
    "PluginInfo",
    "RepositoryDescriptor",
    "RepositoryType",
    "PluginMetadataDiscovery",
    "validate_plugin_info",
    "describe_plugin_info",
]


def __getattr__(name):
    if name == "PluginCatalog":
        from api.plugins.catalog import PluginCatalog
        return PluginCatalog
    if name in (
        "PluginInfo",
        "RepositoryDescriptor",
        "RepositoryType",
        "validate_plugin_info",
        "describe_plugin_info",
    ):
        from api.plugins import metadata
        return getattr(metadata, name)
    if name == "PluginMetadataDiscovery":
        from api.plugins.discovery import PluginMetadataDiscovery
        return PluginMetadataDiscovery
    raise AttributeError(f"module 'api.plugins' has no attribute {name!r}")
