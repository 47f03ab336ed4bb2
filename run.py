#!/usr/bin/env python3
"""
Game Data Exporter - Entry Point.

This is the main script that users run to export game data for a release.
It reads configuration from a .env file, checks its three positional
arguments, and runs the export pipeline.

The export pipeline (managed by ExportOrchestrator) performs 4 steps:
  1. Check the game directory and initialize the bundle decoder
  2. Export every catalog table as sorted JSON (.json.gz and .json.br)
  3. Download the passive skill tree data.json (.json.gz and .json.br)
  4. Download one sprite sheet per sprite group, shared sheets once

Usage:
    python run.py <gamePath> <treeVersion> <gameVersion>
    python run.py "C:/Games/Path of Exile" 3.22.0 3.22.1.1
    python run.py <...> --debug          # Verbose output
    python run.py <...> --workers 8      # Parallel tables and downloads
    python run.py <...> --output-dir DIR # Override OUTPUT_DIR
    python run.py --version              # Show version
    python run.py <...> --env /path      # Use alternate .env file

Exit status is 0 when every table and sprite sheet was written, 1 otherwise.
"""

import sys
import argparse
import logging
from pathlib import Path

from core import ExportOrchestrator

# Read version from the repo-root VERSION file (e.g., "0.1.0").
VERSION_FILE = Path(__file__).resolve().parent / "VERSION"
VERSION = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "unknown"

# Positional arguments in the order they are checked, with the message shown
# when one is missing.
REQUIRED_ARGUMENTS = (
    ("game_path", "please provide path to the game directory"),
    ("tree_version", "please provide passive tree version"),
    ("game_version", "please provide game version"),
)


class UsageExitParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1 like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageExitParser(
        description="Game Data Exporter - Export bundle tables and the passive skill tree"
    )
    # Optional at the argparse level so missing ones exit with status 1
    parser.add_argument("game_path", nargs="?", help="Game installation directory")
    parser.add_argument("tree_version", nargs="?", help="Passive skill tree export version")
    parser.add_argument("game_version", nargs="?", help="Game version, names the output folder")
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument("--output-dir", "-o", help="Override OUTPUT_DIR")
    parser.add_argument("--workers", "-w", type=int, help="Override MAX_WORKERS")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")
    return parser


def main(argv=None):
    """Parse CLI arguments and run the export pipeline."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"game-data-export {VERSION}")
        sys.exit(0)

    for name, message in REQUIRED_ARGUMENTS:
        if not getattr(args, name):
            print(message, file=sys.stderr)
            parser.print_usage(sys.stderr)
            sys.exit(1)

    # Show HTTP traffic from requests/urllib3 in debug mode
    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s'
        )

    # Initialize the orchestrator (loads .env and builds internal config)
    orchestrator = ExportOrchestrator(env_file=args.env)

    # Apply CLI overrides on top of .env values
    if args.output_dir:
        orchestrator.output_dir = args.output_dir
    if args.workers is not None:
        orchestrator.max_workers = args.workers
    if args.debug:
        orchestrator.debug = True

    # Print header
    print(f"\n{'='*60}")
    print(f"GAME DATA EXPORTER v{VERSION}")
    print("="*60)
    print(f"Game: {args.game_path}")
    print(f"Tree version: {args.tree_version}")
    print(f"Game version: {args.game_version}")
    print(f"Output: {orchestrator.output_dir}")

    # Validate required configuration before proceeding
    if not orchestrator.validate_config():
        sys.exit(1)

    # Run the 4-step export pipeline
    results = orchestrator.run(args.game_path, args.tree_version, args.game_version)

    # Print final summary
    orchestrator.print_summary(results)

    # Exit with error code if the export failed
    if not results.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
