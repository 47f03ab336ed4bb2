"""
Export Orchestrator - Pipeline coordination for the game data export.

This module ties together the table exporter and the skill tree synchronizer
into a sequential 4-step workflow:

  Step 1: GAME DIRECTORY
      Checks that the game directory holds a bundle index
      (Bundles2/_.index.bin) and initializes the bundle decoder plugin named
      by BUNDLE_DECODER. Nothing is written if either fails.

  Step 2: TABLE EXPORT
      TableExporter decodes every table of the catalog, sorts its records by
      primary key and writes data/<gameVersion>/raw/<Table>.json.{gz,br}.

  Step 3: SKILL TREE DATA
      SkillTreeClient downloads data.json for the tree version; it is written
      to data/<gameVersion>/tree/data.json.{gz,br} and parsed.

  Step 4: SPRITE ASSETS
      TreeAssetSynchronizer picks one sprite sheet per sprite group and
      downloads each distinct sheet once to data/<gameVersion>/tree/assets/.

The first error in any step ends the run. Files written by earlier steps are
left in place; running the export again overwrites them.

Configuration:
    All settings are loaded from environment variables (typically via .env file).
    Required: BUNDLE_DECODER. See config/settings.py for defaults.

Typical usage:
    orchestrator = ExportOrchestrator(env_file="./.env")
    if orchestrator.validate_config():
        results = orchestrator.run(game_path, tree_version, game_version)
        orchestrator.print_summary(results)
"""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from config import DEFAULT_SETTINGS, TABLES_TO_EXPORT

from .bundle_decoder import load_parser
from .output_manager import OutputManager
from .table_exporter import TableExporter, check_game_directory
from .tree_client import SkillTreeClient, repo_base_for
from .tree_sync import TreeAssetSynchronizer


def _int_setting(name: str) -> Optional[int]:
    """Read an integer setting, None if it is not a valid integer."""
    value = os.getenv(name, str(DEFAULT_SETTINGS[name]))
    try:
        return int(value)
    except ValueError:
        return None


def _print_step(title: str):
    print(f"\n{'='*60}")
    print(title)
    print("="*60)


class ExportOrchestrator:
    """Orchestrates the table export and skill tree synchronization.

    Attributes:
        output_dir: Root output directory (default: "./data").
        tree_repo_base: Skill tree export URL template with a {version} placeholder.
        bundle_decoder: "module:callable" of the bundle decoder plugin.
        max_workers: Worker threads for tables and downloads (1 = sequential).
        http_timeout: Seconds to wait on each HTTP request.
        debug: Whether to enable verbose output (default: False).
    """

    def __init__(self, env_file: str = "./.env"):
        """Initialize the orchestrator by loading configuration from environment.

        Args:
            env_file: Path to a .env file. If the file exists, it is loaded via
                      python-dotenv. Otherwise, falls back to system environment.
        """
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            print(f"Loaded configuration from: {env_file}")
        else:
            print(f"Warning: {env_file} not found, using defaults/environment")

        self.output_dir = os.getenv("OUTPUT_DIR", DEFAULT_SETTINGS["OUTPUT_DIR"])
        self.tree_repo_base = os.getenv("TREE_REPO_BASE", DEFAULT_SETTINGS["TREE_REPO_BASE"])
        self.bundle_decoder = os.getenv("BUNDLE_DECODER", DEFAULT_SETTINGS["BUNDLE_DECODER"])

        # Processing options
        self.max_workers = _int_setting("MAX_WORKERS")
        self.http_timeout = _int_setting("HTTP_TIMEOUT")
        self.debug = os.getenv("DEBUG", str(DEFAULT_SETTINGS["DEBUG"])).lower() == "true"

    def validate_config(self) -> bool:
        """Validate that all required configuration values are present and usable.

        Returns:
            True if the configuration is valid, False otherwise.
            Prints specific error messages for each problem.
        """
        errors = []
        if not self.bundle_decoder:
            errors.append("BUNDLE_DECODER is required (e.g. my_decoder.module:load_parser)")
        if not self.output_dir:
            errors.append("OUTPUT_DIR must not be empty")
        if "{version}" not in self.tree_repo_base:
            errors.append("TREE_REPO_BASE must contain a {version} placeholder")
        if self.max_workers is None or self.max_workers < 1:
            errors.append("MAX_WORKERS must be a positive integer")
        if self.http_timeout is None or self.http_timeout < 1:
            errors.append("HTTP_TIMEOUT must be a positive integer")

        if errors:
            print("\nConfiguration Errors:")
            for err in errors:
                print(f"  - {err}")
            return False
        return True

    def run(self, game_path: str, tree_version: str, game_version: str) -> Dict[str, Any]:
        """Execute the full 4-step export pipeline.

        Args:
            game_path: Game installation directory (contains Bundles2/).
            tree_version: Skill tree export version, fills TREE_REPO_BASE.
            game_version: Game version tag, names the output folder.

        Returns:
            A dict containing:
                - started_at/completed_at: ISO timestamps
                - config: Paths and versions used
                - success: True if all steps completed without error
                - tables: Written .json.gz paths
                - assets: Downloaded sprite sheet filenames
                - summary: Counts of tables and assets
                - error/failed_step: First failure (if success=False)
        """
        output_manager = OutputManager(self.output_dir, game_version)
        repo_base = repo_base_for(tree_version, self.tree_repo_base)

        results = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "game_path": game_path,
                "tree_version": tree_version,
                "game_version": game_version,
                "output_dir": output_manager.version_dir,
                "tree_repo_base": repo_base,
                "max_workers": self.max_workers,
            },
            "success": False,
            "tables": [],
            "assets": [],
        }

        step = "GAME DIRECTORY"
        try:
            # Step 1: Validate the game install and initialize the decoder
            _print_step("STEP 1: GAME DIRECTORY")
            marker = check_game_directory(game_path)
            print(f"  Found bundle index: {marker}")
            decoder = load_parser(self.bundle_decoder)
            print(f"  Decoder initialized: {self.bundle_decoder}")

            # Step 2: Decode, sort and write every catalog table
            step = "TABLE EXPORT"
            _print_step("STEP 2: TABLE EXPORT")
            exporter = TableExporter(decoder, output_manager, self.max_workers, self.debug)
            results["tables"] = exporter.export_all(game_path, TABLES_TO_EXPORT)
            print(f"  Exported {len(results['tables'])} tables")

            # Step 3: Download and persist the skill tree description
            step = "SKILL TREE DATA"
            _print_step("STEP 3: SKILL TREE DATA")
            client = SkillTreeClient(repo_base, self.http_timeout, self.debug)
            try:
                synchronizer = TreeAssetSynchronizer(
                    client, output_manager, max_workers=self.max_workers, debug=self.debug
                )
                tree = synchronizer.fetch_tree()
                print(f"  Zoom levels: {tree.image_zoom_levels}")
                print(f"  Sprite groups: {len(tree.sprites)}")

                # Step 4: Download one sprite sheet per group, shared sheets once
                step = "SPRITE ASSETS"
                _print_step("STEP 4: SPRITE ASSETS")
                results["assets"] = synchronizer.download_assets(tree)
                print(f"  Downloaded {len(results['assets'])} sprite sheets")
            finally:
                client.close()

            results["success"] = True
            results["summary"] = {
                "tables": len(results["tables"]),
                "assets": len(results["assets"]),
            }

        except Exception as e:
            results["error"] = str(e)
            results["failed_step"] = step
            print(f"\n  ERROR: {e}")
            if self.debug:
                import traceback
                traceback.print_exc()

        results["completed_at"] = datetime.now(timezone.utc).isoformat()
        return results

    def print_summary(self, results: Dict):
        """Print a human-readable execution summary.

        Args:
            results: The dict returned by run().
        """
        _print_step("EXPORT COMPLETE")
        print(f"Status: {'SUCCESS' if results.get('success') else 'FAILED'}")

        config = results.get("config", {})
        if config:
            print(f"Game version: {config.get('game_version', 'N/A')}")
            print(f"Tree version: {config.get('tree_version', 'N/A')}")
            print(f"Output: {config.get('output_dir', 'N/A')}")

        print(f"Tables: {len(results.get('tables', []))}/{len(TABLES_TO_EXPORT)}")
        print(f"Sprite sheets: {len(results.get('assets', []))}")

        if results.get("error"):
            print(f"Failed step: {results.get('failed_step', 'N/A')}")
            print(f"Error: {results['error']}")
