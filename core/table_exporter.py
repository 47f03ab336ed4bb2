"""
Table Exporter - Decode catalog tables and write them as sorted, compressed JSON.

For every table in the catalog (config/tables.py) the exporter:

  1. Opens the table's raw bytes through the decoder's BundleLoader
  2. Decodes them into records with RecordDecoder.parse_dat()
  3. Sorts the records by primary key (stable, so ties keep decoder order)
  4. Serializes them to a single compact JSON array
  5. Writes raw/<Table>.json.gz and raw/<Table>.json.br

Before any table is touched the game directory must contain the bundle index
(Bundles2/_.index.bin). The first failure stops the export; tables written
before it stay on disk.

Pipeline context:
    Step 1 (game directory check) and Step 2 (table export) of the
    orchestrator pipeline.
"""

import os
from typing import List, Sequence

from config import BUNDLE_INDEX_MARKER, TABLES_TO_EXPORT

from .bundle_decoder import BundleLoader, RecordDecoder
from .errors import ExportError, GameDirectoryError, TableDecodeError
from .output_manager import OutputManager
from .records import sort_records, serialize_records
from .worker_pool import run_bounded


def check_game_directory(game_path: str) -> str:
    """Verify game_path holds a bundled game install.

    Returns:
        The path of the bundle index file.

    Raises:
        GameDirectoryError: If the bundle index does not exist.
    """
    marker = os.path.join(game_path, *BUNDLE_INDEX_MARKER)
    if not os.path.isfile(marker):
        raise GameDirectoryError(f"Bundle index not found: {marker}")
    return marker


class TableExporter:
    """Exports the table catalog for one game version.

    Attributes:
        decoder: Initialized RecordDecoder handle (see bundle_decoder.load_parser).
        output_manager: Resolves raw/ paths and writes the compressed files.
        max_workers: Tables exported concurrently (1 = in catalog order).
        debug: If True, print per-table record counts and paths.
    """

    def __init__(
        self,
        decoder: RecordDecoder,
        output_manager: OutputManager,
        max_workers: int = 1,
        debug: bool = False,
    ):
        self.decoder = decoder
        self.output_manager = output_manager
        self.max_workers = max_workers
        self.debug = debug

    def export_table(self, loader: BundleLoader, table_path: str) -> str:
        """Decode, sort and write a single table.

        Returns:
            Path of the written .json.gz file.

        Raises:
            TableDecodeError: If the table cannot be opened or decoded, or a
                record has an invalid primary key.
            OutputWriteError: If the output files cannot be written.
        """
        print(f"  Extracting {table_path}")
        table_name = os.path.basename(table_path)

        try:
            data = loader.open(table_path)
        except ExportError:
            raise
        except Exception as e:
            raise TableDecodeError(table_path, f"could not open: {e}") from e

        try:
            records = list(self.decoder.parse_dat(data, table_name))
        except ExportError:
            raise
        except Exception as e:
            raise TableDecodeError(table_path, f"could not decode: {e}") from e

        try:
            sort_records(records)
        except (TypeError, ValueError) as e:
            raise TableDecodeError(table_path, str(e)) from e

        try:
            payload = serialize_records(records)
        except (TypeError, ValueError) as e:
            raise TableDecodeError(table_path, f"records are not JSON serializable: {e}") from e

        gz_path, br_path = self.output_manager.write_dual_compressed(
            self.output_manager.table_stem(table_path), payload
        )

        if self.debug:
            print(f"    {len(records)} records, {len(payload)} bytes -> {gz_path}, {br_path}")

        return gz_path

    def export_all(self, game_path: str, tables: Sequence[str] = TABLES_TO_EXPORT) -> List[str]:
        """Export every catalog table from the game installed at game_path.

        Checks the bundle index itself when used on its own; within a pipeline
        run this repeats the orchestrator's Step 1 check.

        Returns:
            Paths of the written .json.gz files, in catalog order.

        Raises:
            GameDirectoryError: If the bundle index is missing (nothing is written).
            ExportError: The first table failure.
        """
        check_game_directory(game_path)

        try:
            loader = self.decoder.get_bundle_loader(game_path)
        except ExportError:
            raise
        except Exception as e:
            raise GameDirectoryError(f"Could not open bundles in {game_path}: {e}") from e

        return run_bounded(
            tables,
            lambda table_path: self.export_table(loader, table_path),
            self.max_workers,
        )
