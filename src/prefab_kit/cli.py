"""Command-line interface for the prefab toolkit."""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional, Sequence

from .asset_path import identity, normalize_asset_path, replace_illegal_chars
from .asset_store import AssetStore
from .config import Config
from .facility import is_same_facility
from .outcome import Ok, err, format_outcome
from .prefab_builder import PrefabBuilder
from .resolver import resolve_reference


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='prefab-kit',
        description='Asset path and prefab authoring tools.'
    )

    parser.add_argument(
        '--config',
        help='Path to configuration file (default: built-in defaults)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    normalize = subparsers.add_parser('normalize', help='Print the canonical form of an asset path')
    normalize.add_argument('path', help='Path to normalize')
    normalize.add_argument(
        '--sanitize',
        action='store_true',
        help='Replace characters that are illegal in file names with "_"'
    )

    facility = subparsers.add_parser('same-facility', help='Check whether two directories share a facility')
    facility.add_argument('dir_a')
    facility.add_argument('dir_b')

    make_prefab = subparsers.add_parser('make-prefab', help='Create a prefab from a source model asset')
    make_prefab.add_argument('source', help='Asset path of the source model')

    resolve = subparsers.add_parser('resolve', help="Resolve a prefab's side-directory reference")
    resolve.add_argument('prefab', help='Asset path of the prefab')
    resolve.add_argument('reference', help='Asset path currently referenced')

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Config:
    """Load the config file, or the built-in defaults when none is given."""
    if config_path:
        return Config(config_path)
    return Config.from_dict({}, Path.cwd())


def run_command(args: argparse.Namespace, config: Config) -> int:
    """Run the selected subcommand.

    Returns:
        Exit code
    """
    separators = config.separators

    if args.command == 'normalize':
        segment_map = replace_illegal_chars if args.sanitize else identity
        print(normalize_asset_path(args.path, segment_map, separators))
        return 0

    if args.command == 'same-facility':
        dir_a = normalize_asset_path(args.dir_a, separators=separators)
        dir_b = normalize_asset_path(args.dir_b, separators=separators)
        print('true' if is_same_facility(dir_a, dir_b) else 'false')
        return 0

    config.validate_paths()
    store = AssetStore(config.assets_root, separators)

    if args.command == 'make-prefab':
        outcome = PrefabBuilder(config, store).make_prefab(args.source)
        if isinstance(outcome, Ok):
            print(format_outcome(outcome, f"Created {outcome.value}"))
            return 0
        print(format_outcome(outcome))
        return 1

    if args.command == 'resolve':
        print(resolve_reference(
            args.reference,
            args.prefab,
            store,
            config.get('resolve.side_dir_suffix', '.Textures'),
        ))
        return 0

    print(format_outcome(err(f"Unknown command: {args.command}")))
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"Please ensure the configuration file exists at: {args.config}")
        return 1
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    try:
        return run_command(args, config)
    except FileNotFoundError as e:
        print(format_outcome(err(str(e))))
        return 1
    except Exception as e:
        logging.exception("Error running command")
        print(format_outcome(err(str(e))))
        return 1


if __name__ == '__main__':
    sys.exit(main())
