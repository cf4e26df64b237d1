"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SKILL_CATEGORIES: Tuple[str, ...] = (
    "weapons",
    "assists",
    "specials",
    "a_skills",
    "b_skills",
    "c_skills",
    "seals",
)


@dataclass(frozen=True, slots=True)
class SkillStatChange:
    hp: int = 0
    atk: int = 0
    spd: int = 0
    def_: int = 0
    res: int = 0


@dataclass(frozen=True, slots=True)
class SkillDef:
    """Describes a skill of any category.

    Category-specific fields stay ``None`` where they do not apply, e.g.
    ``damage`` outside of weapons. ``include``/``exclude`` hold the raw hero
    restriction objects as loaded.
    """

    name: str
    category: str
    effect: str
    sp_cost: int | None = None
    icon: str | None = None
    damage: int | None = None
    range: int | None = None
    weapon_type: str | None = None
    color_type: str | None = None
    exclusive: Tuple[str, ...] = ()
    prev: Tuple[str, ...] = ()
    include: Tuple[dict, ...] = ()
    exclude: Tuple[dict, ...] = ()
    last: bool = False
    stats: SkillStatChange | None = None


EMPTY_SKILL = SkillDef(name="-", category="", effect="", icon="")
