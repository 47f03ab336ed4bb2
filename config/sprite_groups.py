"""
Sprite groups - Skill tree sprite sheets downloaded alongside the tree data.

Each name is a key of the "sprites" mapping in the tree export's data.json.
Exactly one sheet is downloaded per group (the highest zoom level available),
and sheets shared between groups are downloaded once.
"""

SKILL_TREE_SPRITE_GROUPS = (
    "background",
    "normalActive",
    "notableActive",
    "keystoneActive",
    "normalInactive",
    "notableInactive",
    "keystoneInactive",
    "mastery",
    "masteryConnected",
    "masteryActiveSelected",
    "masteryInactive",
    "masteryActiveEffect",
    "ascendancyBackground",
    "ascendancy",
    "startNode",
    "groupBackground",
    "frame",
    "jewel",
    "line",
    "jewelRadius",
)
