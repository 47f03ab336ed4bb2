"""
Skill Tree Client - HTTP access to the published passive skill tree export.

The tree export is a static file tree, one per tree version:

    GET {repo_base}/data.json           Tree description (JSON)
    GET {repo_base}/assets/<filename>   Sprite sheet images

repo_base is built from the TREE_REPO_BASE template, whose {version}
placeholder is replaced with the tree version given on the command line.

Pipeline context:
    Used in Step 3 (tree data) and Step 4 (sprite assets) of the
    orchestrator pipeline.
"""

import requests

from .errors import FetchError


def repo_base_for(tree_version: str, template: str) -> str:
    """Fill the tree version into the repository URL template."""
    return template.format(version=tree_version).rstrip("/")


class SkillTreeClient:
    """Client for one version of the skill tree export.

    Attributes:
        repo_base: Base URL for this tree version (trailing slash stripped).
        timeout: Seconds to wait for each response.
        debug: If True, print each request.
    """

    def __init__(self, repo_base: str, timeout: float = 60, debug: bool = False):
        self.repo_base = repo_base.rstrip("/")
        self.timeout = timeout
        self.debug = debug
        self._session = requests.Session()

    def _get(self, url: str) -> bytes:
        if self.debug:
            print(f"  GET {url}")

        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        if self.debug:
            print(f"  Received {len(response.content)} bytes")

        return response.content

    def fetch_tree_data(self) -> bytes:
        """Download data.json as raw bytes.

        Raises:
            FetchError: On transport failure or a non-success status.
        """
        return self._get(f"{self.repo_base}/data.json")

    def fetch_asset(self, filename: str) -> bytes:
        """Download a sprite sheet as raw bytes.

        Raises:
            FetchError: On transport failure or a non-success status.
        """
        return self._get(f"{self.repo_base}/assets/{filename}")

    def close(self):
        self._session.close()
