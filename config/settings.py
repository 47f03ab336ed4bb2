"""
Settings - Default configuration values for the game data exporter.

This module provides the DEFAULT_SETTINGS dict that the orchestrator uses as
fallback values when environment variables are not set. The actual configuration
is loaded from .env at runtime; these defaults let the exporter run out of the
box once a bundle decoder is configured.

Configuration precedence (highest to lowest):
  1. CLI flags (--output-dir, --workers, --debug)
  2. Environment variables (from .env file)
  3. DEFAULT_SETTINGS (this file)

Settings reference:
  OUTPUT_DIR       Root of the exported tree (default: ./data)
  TREE_REPO_BASE   Skill tree export URL template, {version} is the tree version
  BUNDLE_DECODER   "module:callable" returning the record decoder handle
  MAX_WORKERS      Worker threads for tables and asset downloads (1 = sequential)
  HTTP_TIMEOUT     Seconds to wait on each HTTP request
  DEBUG            Whether to print verbose output (default: False)
"""

TREE_REPO_BASE = "https://raw.githubusercontent.com/grindinggear/skilltree-export/{version}"

# Relative to the game directory; its presence marks a valid install.
BUNDLE_INDEX_MARKER = ("Bundles2", "_.index.bin")

DEFAULT_SETTINGS = {
    "OUTPUT_DIR": "./data",
    "TREE_REPO_BASE": TREE_REPO_BASE,
    "BUNDLE_DECODER": "",
    "MAX_WORKERS": 1,
    "HTTP_TIMEOUT": 60,
    "DEBUG": False,
}
