import pytest

from core.output_manager import OutputManager


@pytest.fixture
def game_dir(tmp_path):
    """A game directory with an (empty) bundle index."""
    path = tmp_path / "game"
    (path / "Bundles2").mkdir(parents=True)
    (path / "Bundles2" / "_.index.bin").write_bytes(b"")
    return path


@pytest.fixture
def output_manager(tmp_path):
    return OutputManager(str(tmp_path / "data"), "3.22.1.1")
