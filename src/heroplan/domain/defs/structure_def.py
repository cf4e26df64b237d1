"""Structure definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from heroplan.core.types import CostType

STRUCTURE_CATEGORIES: Tuple[str, ...] = (
    "offensive",
    "defensive",
    "traps",
    "ornaments",
    "resources",
)


@dataclass(frozen=True, slots=True)
class StructureLevel:
    level: int
    cost: int
    effect: str


@dataclass(frozen=True, slots=True)
class StructureDef:
    """Describes a buildable structure."""

    name: str
    levels: Tuple[StructureLevel, ...] = ()
    effect: str = ""
    tier_lock: int = 0
    removable: bool = True
    cost_type: CostType = "stones"
    exclusive: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class StructureHolder:
    """All structures grouped by category."""

    offensive: Tuple[StructureDef, ...] = field(default_factory=tuple)
    defensive: Tuple[StructureDef, ...] = field(default_factory=tuple)
    traps: Tuple[StructureDef, ...] = field(default_factory=tuple)
    ornaments: Tuple[StructureDef, ...] = field(default_factory=tuple)
    resources: Tuple[StructureDef, ...] = field(default_factory=tuple)

    def all_of(self, category: str) -> Tuple[StructureDef, ...]:
        if category not in STRUCTURE_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)
