"""
Tree Asset Synchronizer - Mirror the skill tree data and its sprite sheets.

For one tree version the synchronizer:

  1. Downloads data.json and writes tree/data.json.gz and tree/data.json.br
  2. Parses it into a SkillTreeDescription
  3. Picks one sprite sheet per sprite group (config/sprite_groups.py)
  4. Downloads each distinct sheet once into tree/assets/<filename>

Sheet selection per group prefers the highest zoom level. Not every group is
published at every zoom level, so when the preferred key is missing (or has no
filename) the first entry of the group with a filename is used instead. A group
with no usable entry at all is an error.

Several groups share sheets (e.g. "frame" and "jewel"), so filenames already
claimed during the run are skipped rather than downloaded again.

Pipeline context:
    Step 3 (tree data) and Step 4 (sprite assets) of the orchestrator pipeline.
"""

import os
import posixpath
import threading
from typing import List, Sequence
from urllib.parse import urlparse

from config import SKILL_TREE_SPRITE_GROUPS

from .errors import AssetResolutionError
from .output_manager import OutputManager
from .skill_tree import AssetReference, SkillTreeDescription, format_zoom_level
from .tree_client import SkillTreeClient
from .worker_pool import run_bounded


class DownloadedSet:
    """Filenames already claimed for download during this run."""

    def __init__(self):
        self._names = set()
        self._lock = threading.Lock()

    def claim(self, filename: str) -> bool:
        """Mark filename as downloaded. Returns False if it was already claimed."""
        with self._lock:
            if filename in self._names:
                return False
            self._names.add(filename)
            return True

    def __contains__(self, filename):
        with self._lock:
            return filename in self._names

    def __len__(self):
        with self._lock:
            return len(self._names)


def select_sprite_asset(tree: SkillTreeDescription, group: str) -> AssetReference:
    """Choose the sprite sheet to download for a sprite group.

    Raises:
        AssetResolutionError: If the group is missing or has no entry with a filename.
    """
    resolutions = tree.sprites.get(group)
    if not resolutions:
        raise AssetResolutionError(group, "not present in tree data")

    preferred = resolutions.get(format_zoom_level(tree.preferred_zoom_level))
    if preferred is not None and preferred.filename:
        return preferred

    for reference in resolutions.values():
        if reference.filename:
            return reference

    raise AssetResolutionError(group, "no resolution has a filename")


def asset_filename(reference: AssetReference) -> str:
    """Final path segment of the reference's URL, without query or directories.

        "https://web.poecdn.com/image/passive-skill/frame-3.png?5b2" -> "frame-3.png"
    """
    path = urlparse(reference.filename).path
    return posixpath.basename(path.rstrip("/"))


class TreeAssetSynchronizer:
    """Downloads the tree description and sprite sheets for one game version.

    Attributes:
        client: SkillTreeClient bound to the tree version's repository.
        output_manager: Resolves tree/ paths and writes files.
        sprite_groups: Groups to resolve, in order.
        max_workers: Concurrent asset downloads (1 = one at a time).
        debug: If True, print the chosen sheet for every group.
    """

    def __init__(
        self,
        client: SkillTreeClient,
        output_manager: OutputManager,
        sprite_groups: Sequence[str] = SKILL_TREE_SPRITE_GROUPS,
        max_workers: int = 1,
        debug: bool = False,
    ):
        self.client = client
        self.output_manager = output_manager
        self.sprite_groups = sprite_groups
        self.max_workers = max_workers
        self.debug = debug

    def fetch_tree(self) -> SkillTreeDescription:
        """Download data.json, persist it dual-compressed, and parse it."""
        payload = self.client.fetch_tree_data()
        stem = os.path.join(self.output_manager.tree_dir, "data.json")
        gz_path, br_path = self.output_manager.write_dual_compressed(stem, payload)
        if self.debug:
            print(f"  Saved tree data: {gz_path}, {br_path}")
        return SkillTreeDescription.from_json(payload)

    def resolve_assets(self, tree: SkillTreeDescription, downloaded: DownloadedSet) -> List[str]:
        """Resolve every sprite group and return the filenames to fetch, first claim wins.

        Raises:
            AssetResolutionError: If any group cannot be resolved.
        """
        to_fetch = []
        for group in self.sprite_groups:
            reference = select_sprite_asset(tree, group)
            filename = asset_filename(reference)
            if not filename:
                raise AssetResolutionError(group, f"no filename in {reference.filename!r}")

            if self.debug:
                print(f"  {group}: {filename}")

            if downloaded.claim(filename):
                to_fetch.append(filename)
        return to_fetch

    def download_asset(self, filename: str) -> str:
        print(f"  Downloading {filename}")
        data = self.client.fetch_asset(filename)
        return self.output_manager.write_bytes(self.output_manager.asset_path(filename), data)

    def download_assets(self, tree: SkillTreeDescription) -> List[str]:
        """Resolve all sprite groups and download each distinct sheet once.

        Returns:
            The downloaded filenames, in sprite group order.
        """
        downloaded = DownloadedSet()
        filenames = self.resolve_assets(tree, downloaded)
        run_bounded(filenames, self.download_asset, self.max_workers)
        return filenames
