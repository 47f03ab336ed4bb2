"""
Tables - The fixed catalog of bundle tables exported on every run.

Each entry is a path inside the game's bundle namespace. The exporter writes
one JSON document per entry, named after the basename up to its first dot
(e.g. "Data/Stats.dat64" -> "Stats.json.gz").

Order matters only for progress output and failure reporting: tables are
exported in the order listed, and the first failing table stops the run.
"""

TABLES_TO_EXPORT = (
    # Passive tree cluster jewels
    "Data/PassiveTreeExpansionJewels.dat64",
    "Data/PassiveTreeExpansionSkills.dat64",
    "Data/PassiveTreeExpansionSpecialSkills.dat64",

    # Crafting and modifiers
    "Data/CostTypes.dat64",
    "Data/Mods.dat64",
    "Data/ActiveSkills.dat64",
    "Data/Essences.dat64",
    "Data/CraftingBenchOptions.dat64",
    "Data/PantheonPanelLayout.dat64",

    # Item bases
    "Data/WeaponTypes.dat64",
    "Data/ArmourTypes.dat64",
    "Data/ShieldTypes.dat64",
    "Data/Flasks.dat64",
    "Data/ComponentCharges.dat64",
    "Data/ComponentAttributeRequirements.dat64",
    "Data/BaseItemTypes.dat64",

    # Stats and passives
    "Data/Stats.dat64",
    "Data/AlternatePassiveSkills.dat64",
    "Data/AlternatePassiveAdditions.dat64",

    # Monsters and totems
    "Data/DefaultMonsterStats.dat64",
    "Data/SkillTotemVariations.dat64",
    "Data/MonsterVarieties.dat64",
    "Data/MonsterMapDifficulty.dat64",
    "Data/MonsterMapBossDifficulty.dat64",

    # Skills and gems
    "Data/GrantedEffects.dat64",
    "Data/SkillTotems.dat64",
    "Data/GrantedEffectStatSetsPerLevel.dat64",
    "Data/GrantedEffectsPerLevel.dat64",
    "Data/GrantedEffectQualityStats.dat64",
    "Data/SkillGems.dat64",
    "Data/ItemExperiencePerLevel.dat64",
    "Data/Tags.dat64",
    "Data/ActiveSkillType.dat64",
    "Data/ItemClasses.dat64",
    "Data/GrantedEffectStatSets.dat64",
)
