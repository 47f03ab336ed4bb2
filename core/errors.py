"""
Errors - Exception hierarchy for the export pipeline.

Every failure the pipeline can hit is raised as a subclass of ExportError and
propagates up to ExportOrchestrator.run(), which records it as the run's single
error and makes run.py exit with status 1. Nothing is retried and nothing that
was already written is rolled back; re-running the export overwrites in place.
"""


class ExportError(Exception):
    """Base class for all export pipeline failures."""


class DecoderConfigError(ExportError):
    """The bundle decoder named in BUNDLE_DECODER could not be loaded."""


class GameDirectoryError(ExportError):
    """The game directory is missing or has no bundle index."""


class TableDecodeError(ExportError):
    """A catalog table could not be opened, parsed or ordered."""

    def __init__(self, table_path: str, message: str):
        self.table_path = table_path
        super().__init__(f"{table_path}: {message}")


class FetchError(ExportError):
    """An HTTP request failed or returned a non-success status."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"GET {url} failed: {message}")


class TreeParseError(ExportError):
    """The skill tree data.json does not have the expected shape."""


class AssetResolutionError(ExportError):
    """No usable sprite sheet could be selected for a sprite group."""

    def __init__(self, group: str, message: str):
        self.group = group
        super().__init__(f"sprite group '{group}': {message}")


class OutputWriteError(ExportError):
    """An output directory or file could not be written."""
