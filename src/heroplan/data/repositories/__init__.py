"""Repository exports."""

from .heroes_repo import HeroesRepository
from .skills_repo import SkillsRepository
from .structures_repo import StructuresRepository

__all__ = [
    "HeroesRepository",
    "SkillsRepository",
    "StructuresRepository",
]
