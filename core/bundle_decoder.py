"""
Bundle Decoder - The interface to the external bundle and table decoder.

The exporter does not read the game's bundle container or the binary table
layout itself. It talks to a decoder plugin through two small interfaces:

  RecordDecoder     Handle returned by the plugin's one-time initialization.
                    get_bundle_loader(game_path) -> BundleLoader
                    parse_dat(raw, table_name)   -> sequence of DecodedRecord
  BundleLoader      Reads raw table bytes out of the bundles.
                    open(table_path) -> bytes

The plugin is named in the BUNDLE_DECODER setting as "module:callable", e.g.

    BUNDLE_DECODER=poe_bundles.exporter:load_parser

load_parser() imports the module, calls the callable with no arguments once,
and returns the RecordDecoder it produced. That handle is then passed to the
TableExporter; there is no module-level decoder state.
"""

import importlib
from abc import ABC, abstractmethod
from typing import Sequence

from .errors import DecoderConfigError
from .records import DecodedRecord


class BundleLoader(ABC):
    """Opens table files inside a game installation's bundles."""

    @abstractmethod
    def open(self, table_path: str) -> bytes:
        """Return the raw bytes of a table (e.g. "Data/Stats.dat64")."""


class RecordDecoder(ABC):
    """An initialized table decoder."""

    @abstractmethod
    def get_bundle_loader(self, game_path: str) -> BundleLoader:
        """Open the bundle index of the game installed at game_path."""

    @abstractmethod
    def parse_dat(self, data: bytes, table_name: str) -> Sequence[DecodedRecord]:
        """Decode a table's raw bytes into records.

        Args:
            data: Bytes returned by BundleLoader.open().
            table_name: Table file basename (e.g. "Stats.dat64"), selects the schema.
        """


def load_parser(spec: str) -> RecordDecoder:
    """Import and initialize the decoder plugin named by spec.

    Args:
        spec: "package.module:callable". The callable takes no arguments and
              returns a RecordDecoder.

    Raises:
        DecoderConfigError: If spec is malformed, cannot be imported, or the
            callable does not return a RecordDecoder.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise DecoderConfigError(
            f"BUNDLE_DECODER must look like 'module:callable', got {spec!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DecoderConfigError(f"Could not import decoder module '{module_name}': {e}") from e

    factory = getattr(module, attr, None)
    if not callable(factory):
        raise DecoderConfigError(f"'{attr}' in '{module_name}' is not callable")

    decoder = factory()
    if not isinstance(decoder, RecordDecoder):
        raise DecoderConfigError(
            f"{spec} returned {type(decoder).__name__}, expected a RecordDecoder"
        )
    return decoder
