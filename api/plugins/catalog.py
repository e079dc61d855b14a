"""Plugin catalog - the fixed, ordered set of known plugin identifiers."""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import TypeAdapter, ValidationError

from api.errors import CatalogLoadError

logger = logging.getLogger(__name__)

_ID_LIST_ADAPTER = TypeAdapter(List[str])


class PluginCatalog:
    """Immutable catalog of plugin identifiers.

    Built once at startup and shared read-only by all request handlers.
    The declared sequence is kept exactly as given, repeated identifiers included.
    """

    def __init__(self, plugin_ids: Iterable[str]):
        self._ids = tuple(plugin_ids)
        seen = set()
        for plugin_id in self._ids:
            if plugin_id in seen:
                logger.warning(f"Duplicate plugin id '{plugin_id}' in catalog")
            seen.add(plugin_id)

    @classmethod
    def from_file(cls, path: Path) -> "PluginCatalog":
        """Load the catalog from a JSON array of plugin identifiers.

        Args:
            path: Path to the build-time list (``_list.json``)

        Raises:
            CatalogLoadError: file missing, not JSON, or not an array of strings
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CatalogLoadError(path, "file not found") from None
        except json.JSONDecodeError as e:
            raise CatalogLoadError(path, f"invalid JSON ({e})") from e

        try:
            plugin_ids = _ID_LIST_ADAPTER.validate_python(data, strict=True)
        except ValidationError as e:
            raise CatalogLoadError(path, "expected a JSON array of strings") from e

        catalog = cls(plugin_ids)
        logger.info(f"Loaded {len(catalog)} plugin id(s) from {path}")
        return catalog

    def list(self) -> List[str]:
        """All identifiers in catalog order."""
        return list(self._ids)

    def find(self, plugin_id: str) -> Optional[str]:
        """Return the catalog entry exactly matching ``plugin_id``, if any."""
        return next((p for p in self._ids if p == plugin_id), None)

    def has(self, plugin_id: str) -> bool:
        """Exact, case-sensitive membership test."""
        return self.find(plugin_id) is not None

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __repr__(self) -> str:
        return f"PluginCatalog({list(self._ids)!r})"
