#!/usr/bin/env python3
"""Plugin catalog management CLI tool."""

import argparse
import json
import sys
from pathlib import Path

# Ensure project root is in path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from api.constants import PAPER_LIST_FILE, PAPER_PLUGINS_DIR
from api.errors import CatalogLoadError, MetadataLoadError, PluginValidationError
from api.plugins.catalog import PluginCatalog
from api.plugins.discovery import PluginMetadataDiscovery, write_catalog_list
from api.plugins.metadata import dump_plugin_info


def get_discovery(args) -> PluginMetadataDiscovery:
    """Create a PluginMetadataDiscovery instance."""
    return PluginMetadataDiscovery(Path(args.plugins_dir))


def get_catalog(args) -> PluginCatalog:
    """Load the catalog, exiting with a message if the list is unusable."""
    try:
        return PluginCatalog.from_file(Path(args.list_file))
    except CatalogLoadError as e:
        print(str(e))
        sys.exit(1)


def cmd_gen_list(args):
    """Generate the plugin list from the metadata directory."""
    discovery = get_discovery(args)
    ids = discovery.list_ids()
    write_catalog_list(ids, Path(args.list_file))
    print(f"Generated {args.list_file} with {len(ids)} plugins")


def cmd_list(args):
    """List all plugins in the catalog."""
    catalog = get_catalog(args)

    if not len(catalog):
        print("No plugins found.")
        return

    for plugin_id in catalog:
        print(plugin_id)


def cmd_info(args):
    """Show validated metadata for one plugin."""
    discovery = get_discovery(args)
    try:
        info = discovery.load(args.plugin_id)
    except PluginValidationError as e:
        print(f"Plugin '{args.plugin_id}' has invalid metadata:")
        for issue in e.issues:
            print(f"  {issue['field']}: {issue['message']}")
        sys.exit(1)
    except MetadataLoadError as e:
        print(str(e))
        sys.exit(1)

    if info is None:
        print(f"Plugin '{args.plugin_id}' not found.")
        sys.exit(1)

    print(f"Plugin: {info.id}")
    print(f"  Website:      {info.website}")
    print(f"  Source:       {info.source}")
    print(f"  License:      {info.license}")
    print(f"  Repositories: {len(info.repositories)}")
    for repository in info.repositories:
        print(f"    - {repository.type}: {repository.id}")
    if args.json:
        print(json.dumps(dump_plugin_info(info), indent=2, ensure_ascii=False))


def cmd_validate(args):
    """Validate every metadata file."""
    discovery = get_discovery(args)
    results = discovery.validate_all()

    invalid = {plugin_id: issues for plugin_id, issues in results.items() if issues}
    for plugin_id, issues in invalid.items():
        print(f"{plugin_id}:")
        for issue in issues:
            print(f"  {issue['field']}: {issue['message']}")

    if invalid:
        print(f"{len(invalid)} of {len(results)} metadata file(s) invalid.")
        sys.exit(1)
    print(f"All {len(results)} metadata file(s) valid.")


def cmd_doctor(args):
    """Run consistency checks between the plugin list and metadata files."""
    issues = []

    plugins_dir = Path(args.plugins_dir)
    list_file = Path(args.list_file)

    if not plugins_dir.exists():
        issues.append(f"Plugins directory missing: {plugins_dir}")

    catalog = None
    try:
        catalog = PluginCatalog.from_file(list_file)
    except CatalogLoadError as e:
        issues.append(str(e))

    discovery = get_discovery(args)
    metadata_ids = discovery.list_ids()

    if catalog is not None:
        for plugin_id in catalog:
            if plugin_id not in metadata_ids:
                issues.append(f"Listed plugin '{plugin_id}' has no metadata file")
        for plugin_id in metadata_ids:
            if not catalog.has(plugin_id):
                issues.append(f"Metadata file for '{plugin_id}' is not in {list_file.name} (run gen-list)")

    for plugin_id, plugin_issues in discovery.validate_all().items():
        for issue in plugin_issues:
            issues.append(f"Plugin '{plugin_id}': {issue['field']}: {issue['message']}")

    if issues:
        print(f"Found {len(issues)} issue(s):")
        for i, issue in enumerate(issues, 1):
            print(f"  {i}. {issue}")
        sys.exit(1)
    else:
        print(f"All checks passed. {len(metadata_ids)} plugin(s) found.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="mpm Plugin Repository Manager")
    parser.add_argument(
        "--plugins-dir",
        default=str(PAPER_PLUGINS_DIR),
        help=f"Directory of <PluginName>.json metadata files (default: {PAPER_PLUGINS_DIR})",
    )
    parser.add_argument(
        "--list-file",
        default=str(PAPER_LIST_FILE),
        help=f"Plugin list file (default: {PAPER_LIST_FILE})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # gen-list
    subparsers.add_parser("gen-list", help="Generate the plugin list from metadata files")

    # list
    subparsers.add_parser("list", help="List all plugins")

    # info
    info_parser = subparsers.add_parser("info", help="Show plugin metadata")
    info_parser.add_argument("plugin_id", help="Plugin ID")
    info_parser.add_argument("--json", action="store_true", help="Also print the normalized JSON record")

    # validate
    subparsers.add_parser("validate", help="Validate all metadata files")

    # doctor
    subparsers.add_parser("doctor", help="Run health checks")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "gen-list": cmd_gen_list,
        "list": cmd_list,
        "info": cmd_info,
        "validate": cmd_validate,
        "doctor": cmd_doctor,
    }

    commands[args.command](args)


if __name__ == "__main__":
    main()
