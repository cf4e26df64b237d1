"""Domain definition exports."""

from .hero_def import HeroDef, HeroSkill
from .skill_def import EMPTY_SKILL, SKILL_CATEGORIES, SkillDef, SkillStatChange
from .structure_def import STRUCTURE_CATEGORIES, StructureDef, StructureHolder, StructureLevel

__all__ = [
    "EMPTY_SKILL",
    "HeroDef",
    "HeroSkill",
    "SKILL_CATEGORIES",
    "STRUCTURE_CATEGORIES",
    "SkillDef",
    "SkillStatChange",
    "StructureDef",
    "StructureHolder",
    "StructureLevel",
]
