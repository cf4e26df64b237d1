"""Merge planning for catalog heroes."""
from __future__ import annotations

from dataclasses import dataclass

from heroplan.data.repositories import HeroesRepository
from heroplan.domain.defs import HeroDef
from heroplan.domain.merge import compute_merge_bonus, merge_priority
from heroplan.domain.stats import StatBlock, StatName, apply_bonus, resolve_stats
from heroplan.services.errors import HeroNotFoundError

MAX_MERGES = 10


@dataclass(frozen=True, slots=True)
class MergePlan:
    hero: HeroDef
    merges: int
    boon: StatName | None
    bane: StatName | None
    priority: tuple[StatName, ...]
    bonus: StatBlock
    base_stats: StatBlock
    final_stats: StatBlock


class MergePlanner:
    """Apply merge bonuses to heroes looked up by name."""

    def __init__(self, *, heroes_repo: HeroesRepository) -> None:
        self._heroes_repo = heroes_repo

    def get_hero(self, name: str) -> HeroDef:
        try:
            return self._heroes_repo.get(name)
        except KeyError as exc:
            raise HeroNotFoundError(name) from exc

    def merge_bonus(self, name: str, merges: int, flaw: StatName | str | None = None) -> StatBlock:
        hero = self.get_hero(name)
        return compute_merge_bonus(hero.stats[0], merges, flaw)

    def plan(
        self,
        name: str,
        merges: int,
        *,
        boon: StatName | None = None,
        bane: StatName | None = None,
    ) -> MergePlan:
        """Return level-40 stats for the given IVs with the merge bonus applied.

        The bane doubles as the flawed stat of the first-merge rule.
        """
        hero = self.get_hero(name)
        reference = hero.stats[0]
        bonus = compute_merge_bonus(reference, merges, bane)
        base_stats = resolve_stats(reference.level40, boon=boon, bane=bane)
        return MergePlan(
            hero=hero,
            merges=merges,
            boon=boon,
            bane=bane,
            priority=merge_priority(reference.level1),
            bonus=bonus,
            base_stats=base_stats,
            final_stats=apply_bonus(base_stats, bonus),
        )
