"""
Config module - Exporter defaults and the fixed export catalogs.
"""

from .settings import DEFAULT_SETTINGS, TREE_REPO_BASE, BUNDLE_INDEX_MARKER
from .tables import TABLES_TO_EXPORT
from .sprite_groups import SKILL_TREE_SPRITE_GROUPS

__all__ = [
    'DEFAULT_SETTINGS',
    'TREE_REPO_BASE',
    'BUNDLE_INDEX_MARKER',
    'TABLES_TO_EXPORT',
    'SKILL_TREE_SPRITE_GROUPS',
]
