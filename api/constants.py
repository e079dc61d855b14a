"""Global constants for the mpm repository service."""

import os
from pathlib import Path

# Directory paths
CATALOG_ROOT = Path(__file__).resolve().parent.parent  # repository root

# Static data directory (supports CATALOG_DATA_DIR env var, relative paths resolve against CATALOG_ROOT)
_data_dir_env = os.getenv("CATALOG_DATA_DIR", "")
if _data_dir_env:
    _data_dir_path = Path(_data_dir_env)
    DATA_DIR = _data_dir_path if _data_dir_path.is_absolute() else (CATALOG_ROOT / _data_dir_path).resolve()
else:
    DATA_DIR = CATALOG_ROOT / "public"

PAPER_DIR = DATA_DIR / "paper"                        # /public/paper
PAPER_LIST_FILE = PAPER_DIR / "_list.json"            # build-time list of plugin ids
PAPER_PLUGINS_DIR = PAPER_DIR / "plugins"             # one <PluginName>.json per plugin

# Documented default for the lookup endpoint's path parameter (on-disk file naming convention)
DEFAULT_PLUGIN_ID = "MinecraftPluginManager.json"

PLUGIN_NOT_FOUND = "Plugin not found"

# Server
DEFAULT_PORT = int(os.getenv("PORT", "8787"))
