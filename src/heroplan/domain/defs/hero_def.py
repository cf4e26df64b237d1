"""Hero definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from heroplan.domain.stats import StatReference


@dataclass(frozen=True, slots=True)
class HeroSkill:
    name: str
    rarity: int


@dataclass(frozen=True, slots=True)
class HeroDef:
    """Describes a playable hero as listed in the catalog."""

    name: str
    title: str
    release_date: str
    color_type: str
    weapon_type: str
    move_type: str
    skills: Tuple[HeroSkill, ...]
    stats: Tuple[StatReference, ...]
    short_name: str | None = None
    limited: bool = False
    tt_rewards: bool = False
    ghb: bool = False

    @property
    def display_name(self) -> str:
        return self.short_name or self.name
