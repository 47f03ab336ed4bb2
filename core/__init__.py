"""
Core package - The export pipeline modules.

This package contains all the modules that implement the 4-step export
pipeline. Each module handles one concern:

  orchestrator.py      Pipeline coordination (Steps 1-4)
  bundle_decoder.py    Interface to the external bundle/table decoder (Steps 1-2)
  records.py           Primary-key capability, sorting and JSON encoding (Step 2)
  table_exporter.py    Catalog table export (Step 2)
  tree_client.py       HTTP access to the skill tree export (Steps 3-4)
  skill_tree.py        Typed view of the tree data.json (Step 3)
  tree_sync.py         Sprite sheet selection, dedup and download (Steps 3-4)
  output_manager.py    Versioned output paths and dual-compressed writes
  worker_pool.py       Bounded parallelism with first-error-wins
  errors.py            Exception hierarchy
"""

from .orchestrator import ExportOrchestrator
from .bundle_decoder import BundleLoader, RecordDecoder, load_parser
from .records import DecodedRecord, DictRecord, sort_records, serialize_records
from .table_exporter import TableExporter, check_game_directory
from .tree_client import SkillTreeClient, repo_base_for
from .skill_tree import AssetReference, SkillTreeDescription, format_zoom_level
from .tree_sync import DownloadedSet, TreeAssetSynchronizer, asset_filename, select_sprite_asset
from .output_manager import OutputManager
from .errors import (
    ExportError,
    DecoderConfigError,
    GameDirectoryError,
    TableDecodeError,
    FetchError,
    TreeParseError,
    AssetResolutionError,
    OutputWriteError,
)
