"""
Output Manager - Versioned output directories and dual-compressed writes.

Each export run writes under a folder named after the game version:

  {base_dir}/{game_version}/raw/<Table>.json.gz     gzip table export
  {base_dir}/{game_version}/raw/<Table>.json.br     brotli table export
  {base_dir}/{game_version}/tree/data.json.gz       gzip skill tree data
  {base_dir}/{game_version}/tree/data.json.br       brotli skill tree data
  {base_dir}/{game_version}/tree/assets/<file>      raw sprite sheets

Every JSON payload is written twice, once per codec, so consumers can pick the
transfer encoding they serve without a second export. Both files decompress to
the same bytes. gzip output is written with a zero mtime so that exporting the
same data twice produces byte-identical files.

Writes go to a temporary sibling first and are moved into place with
os.replace(), so an interrupted or failed run never leaves a truncated file
behind. Files from earlier runs are simply overwritten.
"""

import gzip
import os
import tempfile
from typing import Tuple

import brotli

from .errors import OutputWriteError

GZIP_EXTENSION = ".gz"
BROTLI_EXTENSION = ".br"


def compress_gzip(payload: bytes) -> bytes:
    """gzip at maximum compression with a fixed header timestamp."""
    return gzip.compress(payload, compresslevel=9, mtime=0)


def compress_brotli(payload: bytes) -> bytes:
    """brotli at maximum quality in generic mode."""
    return brotli.compress(payload, mode=brotli.MODE_GENERIC, quality=11)


def decompress_output(path: str) -> bytes:
    """Read back a file written by write_dual_compressed(), by extension."""
    with open(path, "rb") as f:
        data = f.read()
    if path.endswith(GZIP_EXTENSION):
        return gzip.decompress(data)
    if path.endswith(BROTLI_EXTENSION):
        return brotli.decompress(data)
    raise ValueError(f"Unknown compressed output extension: {path}")


class OutputManager:
    """Resolves output paths for one game version and writes files atomically.

    Attributes:
        base_dir: Root output directory (default: ./data).
        game_version: Free-form version tag, used only as a folder name.
        version_dir: {base_dir}/{game_version}.
    """

    def __init__(self, base_dir: str, game_version: str):
        """Initialize the output manager.

        Args:
            base_dir: Root directory for all output (e.g., "./data").
            game_version: Game version tag (e.g., "3.22.1.1").
        """
        self.base_dir = base_dir
        self.game_version = game_version
        self.version_dir = os.path.join(base_dir, game_version)

    @property
    def raw_dir(self) -> str:
        return os.path.join(self.version_dir, "raw")

    @property
    def tree_dir(self) -> str:
        return os.path.join(self.version_dir, "tree")

    @property
    def assets_dir(self) -> str:
        return os.path.join(self.tree_dir, "assets")

    def table_stem(self, table_path: str) -> str:
        """Output stem for a catalog table: raw/<basename up to first dot>.json."""
        name = os.path.basename(table_path).split(".")[0]
        return os.path.join(self.raw_dir, f"{name}.json")

    def asset_path(self, filename: str) -> str:
        return os.path.join(self.assets_dir, filename)

    def write_bytes(self, path: str, payload: bytes) -> str:
        """Write payload to path, creating parent directories as needed.

        Raises:
            OutputWriteError: If the directory or file cannot be written.
        """
        directory = os.path.dirname(path) or "."
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                # mkstemp creates 0600
                os.chmod(tmp_path, 0o644)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise OutputWriteError(f"Could not write {path}: {e}") from e
        return path

    def write_dual_compressed(self, stem: str, payload: bytes) -> Tuple[str, str]:
        """Write payload as <stem>.gz and <stem>.br.

        Both files are compressed from the same bytes and fully built in memory
        before either is written.

        Returns:
            (gzip_path, brotli_path)
        """
        gz_data = compress_gzip(payload)
        br_data = compress_brotli(payload)
        gz_path = self.write_bytes(stem + GZIP_EXTENSION, gz_data)
        br_path = self.write_bytes(stem + BROTLI_EXTENSION, br_data)
        return gz_path, br_path
