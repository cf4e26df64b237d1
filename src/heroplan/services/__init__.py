"""Service layer exports."""

from .errors import HeroNotFoundError
from .merge_planner import MergePlan, MergePlanner

__all__ = [
    "HeroNotFoundError",
    "MergePlan",
    "MergePlanner",
]
