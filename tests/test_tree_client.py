"""Tests for core.tree_client.SkillTreeClient.

All tests patch requests.Session so no real HTTP calls are made.
"""

from unittest.mock import patch, MagicMock

import pytest
import requests

from core.errors import FetchError
from core.tree_client import SkillTreeClient, repo_base_for


def _mock_response(content=b"{}", status_code=200):
    mock_resp = MagicMock()
    mock_resp.content = content
    mock_resp.status_code = status_code
    if status_code >= 400:
        mock_resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=mock_resp
        )
    else:
        mock_resp.raise_for_status = MagicMock()
    return mock_resp


def _make_client(response):
    with patch("core.tree_client.requests.Session") as mock_session_cls:
        session = mock_session_cls.return_value
        session.get.return_value = response
        client = SkillTreeClient("https://example.test/tree/3.22.0/", timeout=5)
    return client, session


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

def test_repo_base_for_fills_version():
    template = "https://raw.githubusercontent.com/grindinggear/skilltree-export/{version}"
    assert repo_base_for("3.22.0", template) == (
        "https://raw.githubusercontent.com/grindinggear/skilltree-export/3.22.0"
    )


def test_repo_base_for_strips_trailing_slash():
    assert repo_base_for("3.22.0", "https://example.test/{version}/") == "https://example.test/3.22.0"


def test_fetch_tree_data_url_and_timeout():
    client, session = _make_client(_mock_response(b'{"tree": "Default"}'))
    assert client.fetch_tree_data() == b'{"tree": "Default"}'
    session.get.assert_called_once_with("https://example.test/tree/3.22.0/data.json", timeout=5)


def test_fetch_asset_url():
    client, session = _make_client(_mock_response(b"\x89PNG"))
    assert client.fetch_asset("frame-3.png") == b"\x89PNG"
    session.get.assert_called_once_with(
        "https://example.test/tree/3.22.0/assets/frame-3.png", timeout=5
    )


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_http_error_status_raises_fetch_error():
    client, _ = _make_client(_mock_response(status_code=404))
    with pytest.raises(FetchError) as exc:
        client.fetch_asset("missing.png")
    assert exc.value.url == "https://example.test/tree/3.22.0/assets/missing.png"
    assert "404" in str(exc.value)


def test_connection_error_raises_fetch_error():
    client, session = _make_client(_mock_response())
    session.get.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(FetchError) as exc:
        client.fetch_tree_data()
    assert "connection refused" in str(exc.value)


def test_close_closes_session():
    client, session = _make_client(_mock_response())
    client.close()
    session.close.assert_called_once()
