"""Tests for the run.py command line entry point."""

from unittest.mock import patch

import pytest

import run


def _mock_orchestrator(mock_cls, success=True, valid=True):
    orchestrator = mock_cls.return_value
    orchestrator.output_dir = "./data"
    orchestrator.max_workers = 1
    orchestrator.debug = False
    orchestrator.validate_config.return_value = valid
    orchestrator.run.return_value = {"success": success}
    return orchestrator


# ---------------------------------------------------------------------------
# Usage errors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("argv, message", [
    ([], "please provide path to the game directory"),
    (["/games/poe"], "please provide passive tree version"),
    (["/games/poe", "3.22.0"], "please provide game version"),
])
def test_missing_positional_exits_with_status_1(argv, message, capsys):
    with patch("run.ExportOrchestrator") as mock_cls:
        with pytest.raises(SystemExit) as exc:
            run.main(argv)
        mock_cls.assert_not_called()
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert message in err
    assert "usage:" in err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        run.main(["--version"])
    assert exc.value.code == 0
    assert "game-data-export" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def test_successful_run_returns_normally():
    with patch("run.ExportOrchestrator") as mock_cls:
        orchestrator = _mock_orchestrator(mock_cls)
        run.main(["/games/poe", "3.22.0", "3.22.1.1"])

    mock_cls.assert_called_once_with(env_file="./.env")
    orchestrator.run.assert_called_once_with("/games/poe", "3.22.0", "3.22.1.1")
    orchestrator.print_summary.assert_called_once()


def test_failed_run_exits_with_status_1():
    with patch("run.ExportOrchestrator") as mock_cls:
        _mock_orchestrator(mock_cls, success=False)
        with pytest.raises(SystemExit) as exc:
            run.main(["/games/poe", "3.22.0", "3.22.1.1"])
    assert exc.value.code == 1


def test_invalid_config_exits_before_running():
    with patch("run.ExportOrchestrator") as mock_cls:
        orchestrator = _mock_orchestrator(mock_cls, valid=False)
        with pytest.raises(SystemExit) as exc:
            run.main(["/games/poe", "3.22.0", "3.22.1.1"])
    assert exc.value.code == 1
    orchestrator.run.assert_not_called()


def test_cli_overrides_are_applied():
    with patch("run.ExportOrchestrator") as mock_cls, \
         patch("run.logging.basicConfig"):
        orchestrator = _mock_orchestrator(mock_cls)
        run.main([
            "/games/poe", "3.22.0", "3.22.1.1",
            "--env", "custom.env", "--output-dir", "out", "--workers", "6", "--debug",
        ])

    mock_cls.assert_called_once_with(env_file="custom.env")
    assert orchestrator.output_dir == "out"
    assert orchestrator.max_workers == 6
    assert orchestrator.debug is True


@pytest.mark.parametrize("argv, message", [
    (["/games/poe", "3.22.0", "3.22.1.1", "extra"], "unrecognized arguments: extra"),
    (["/games/poe", "3.22.0", "3.22.1.1", "--workers", "abc"], "invalid int value"),
    (["/games/poe", "3.22.0", "3.22.1.1", "--no-such-flag"], "unrecognized arguments"),
])
def test_argument_errors_exit_with_status_1(argv, message, capsys):
    with patch("run.ExportOrchestrator") as mock_cls:
        with pytest.raises(SystemExit) as exc:
            run.main(argv)
        mock_cls.assert_not_called()
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert message in err
    assert "usage:" in err
