"""
Skill Tree - Typed view of the passive skill tree export (data.json).

Only the parts of the document the asset synchronizer needs are modelled:

    {
      "imageZoomLevels": [0.1246, 0.2109, 0.2972, 0.3835],
      "sprites": {
        "normalActive": {
          "0.3835": {"filename": "https://web.poecdn.com/.../skills-3.jpg?abc", ...},
          ...
        },
        ...
      }
    }

Zoom levels are ascending; the last one is the highest resolution. Sprite
resolutions are keyed by the zoom level printed as a plain decimal string,
see format_zoom_level().
"""

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from .errors import TreeParseError


@dataclass(frozen=True)
class AssetReference:
    """One sprite sheet, identified by its (URL-shaped) filename."""
    filename: str = ""


@dataclass
class SkillTreeDescription:
    image_zoom_levels: List[float] = field(default_factory=list)
    sprites: Dict[str, Dict[str, AssetReference]] = field(default_factory=dict)

    @property
    def preferred_zoom_level(self) -> float:
        """The highest zoom level (the list is ascending)."""
        if not self.image_zoom_levels:
            raise TreeParseError("imageZoomLevels is empty")
        return self.image_zoom_levels[-1]

    @classmethod
    def from_json(cls, payload: bytes) -> "SkillTreeDescription":
        """Parse a data.json document.

        Raises:
            TreeParseError: If the payload is not JSON or lacks the expected shape.
        """
        try:
            document = json.loads(payload)
        except (UnicodeDecodeError, ValueError) as e:
            raise TreeParseError(f"data.json is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise TreeParseError("data.json must be a JSON object")

        zoom_levels = document.get("imageZoomLevels")
        if not isinstance(zoom_levels, list) or not zoom_levels:
            raise TreeParseError("data.json has no imageZoomLevels")
        for level in zoom_levels:
            if isinstance(level, bool) or not isinstance(level, (int, float)) or not math.isfinite(level):
                raise TreeParseError(f"invalid zoom level: {level!r}")

        raw_sprites = document.get("sprites")
        if not isinstance(raw_sprites, dict):
            raise TreeParseError("data.json has no sprites mapping")

        sprites = {}
        for group, resolutions in raw_sprites.items():
            if not isinstance(resolutions, dict):
                raise TreeParseError(f"sprites.{group} must be an object")
            sprites[group] = {}
            for key, entry in resolutions.items():
                if not isinstance(entry, dict):
                    raise TreeParseError(f"sprites.{group}.{key} must be an object")
                filename = entry.get("filename") or ""
                if not isinstance(filename, str):
                    raise TreeParseError(f"sprites.{group}.{key}.filename must be a string")
                sprites[group][key] = AssetReference(filename=filename)

        return cls(
            image_zoom_levels=[float(level) for level in zoom_levels],
            sprites=sprites,
        )


def format_zoom_level(value: float) -> str:
    """Format a zoom level the way data.json keys its sprite resolutions.

    Shortest decimal that round-trips, without exponent notation, and
    without a fractional part for whole numbers:

        1.0                -> "1"
        0.3835             -> "0.3835"
        2.6700000762939453 -> "2.6700000762939453"
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
