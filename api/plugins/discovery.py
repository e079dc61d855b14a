"""Plugin metadata discovery - scans the plugins directory for <PluginName>.json files."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from api.errors import MetadataLoadError, PluginValidationError
from api.plugins.metadata import PluginInfo, validate_plugin_info

logger = logging.getLogger(__name__)


class PluginMetadataDiscovery:
    """Discovers plugin metadata files in a single directory."""

    METADATA_SUFFIX = ".json"

    def __init__(self, plugins_dir: Path):
        self.plugins_dir = plugins_dir

    def list_ids(self) -> List[str]:
        """Return plugin ids (file names without suffix), sorted.

        Returns:
            Sorted list of ids; empty if the directory does not exist
        """
        if not self.plugins_dir.exists():
            logger.debug(f"Plugins directory does not exist: {self.plugins_dir}")
            return []

        ids = [
            item.name[: -len(self.METADATA_SUFFIX)]
            for item in self.plugins_dir.iterdir()
            if item.is_file() and item.name.endswith(self.METADATA_SUFFIX)
        ]
        ids.sort()
        return ids

    def metadata_file(self, plugin_id: str) -> Path:
        return self.plugins_dir / f"{plugin_id}{self.METADATA_SUFFIX}"

    def load(self, plugin_id: str) -> Optional[PluginInfo]:
        """Load and validate the metadata for one plugin.

        Args:
            plugin_id: Plugin id (file name without suffix)

        Returns:
            PluginInfo, or None if no metadata file exists

        Raises:
            MetadataLoadError: the file is not valid JSON
            PluginValidationError: the content does not match the schema
        """
        # ids come from the URL; refuse anything that would leave the directory
        if not plugin_id or "/" in plugin_id or "\\" in plugin_id or plugin_id in (".", ".."):
            return None

        metadata_file = self.metadata_file(plugin_id)
        if not metadata_file.is_file():
            return None

        try:
            with open(metadata_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MetadataLoadError(metadata_file, f"invalid JSON ({e})") from e

        return validate_plugin_info(data, source=metadata_file.name)

    def validate_all(self) -> Dict[str, List[Dict[str, Any]]]:
        """Validate every metadata file.

        Returns:
            Mapping of plugin id to its issues (empty list when valid)
        """
        results = {}
        for plugin_id in self.list_ids():
            try:
                self.load(plugin_id)
                results[plugin_id] = []
            except PluginValidationError as e:
                logger.error(f"Invalid metadata for '{plugin_id}': {e}")
                results[plugin_id] = e.issues
            except MetadataLoadError as e:
                logger.error(str(e))
                results[plugin_id] = [{"field": "(root)", "message": e.reason, "type": "json_invalid"}]
        return results


def write_catalog_list(plugin_ids: List[str], output_file: Path) -> None:
    """Write the build-time plugin list consumed by PluginCatalog.from_file."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(plugin_ids, f, indent=2, ensure_ascii=False)
    logger.debug(f"Wrote {len(plugin_ids)} plugin id(s) to {output_file}")
