"""Stat models shared by hero definitions and merge calculations."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Union

from heroplan.core.types import IVVariant


class StatName(str, Enum):
    """The five hero stats in canonical order."""

    HP = "hp"
    ATK = "atk"
    SPD = "spd"
    DEF = "def"
    RES = "res"

    @property
    def field_name(self) -> str:
        # ``def`` is a keyword, so the dataclass attribute carries a trailing underscore.
        return "def_" if self is StatName.DEF else self.value


STAT_ORDER: tuple[StatName, ...] = tuple(StatName)


@dataclass(frozen=True, slots=True)
class StatVariant:
    """A stat whose value depends on the hero's individual values."""

    bane: int
    neutral: int
    boon: int

    def pick(self, variant: IVVariant = "neutral") -> int:
        if variant == "bane":
            return self.bane
        if variant == "boon":
            return self.boon
        return self.neutral


StatValue = Union[int, StatVariant]


@dataclass(frozen=True, slots=True)
class StatBlock:
    """Stat values at one (rarity, level) checkpoint, or a bonus vector."""

    hp: StatValue
    atk: StatValue
    spd: StatValue
    def_: StatValue
    res: StatValue

    @classmethod
    def zero(cls) -> StatBlock:
        return cls(hp=0, atk=0, spd=0, def_=0, res=0)

    @classmethod
    def from_mapping(cls, values: Mapping[StatName, StatValue]) -> StatBlock:
        """Build a block from a mapping that covers every stat exactly once."""
        missing = [stat.value for stat in STAT_ORDER if stat not in values]
        if missing:
            raise ValueError(f"Stat block is missing stats: {missing}")
        return cls(**{stat.field_name: values[stat] for stat in STAT_ORDER})

    def get(self, stat: StatName) -> StatValue:
        return getattr(self, stat.field_name)

    def value(self, stat: StatName, variant: IVVariant = "neutral") -> int:
        """Return the numeric value of ``stat`` under the given IV variant."""
        raw = self.get(stat)
        if isinstance(raw, StatVariant):
            return raw.pick(variant)
        return raw

    def items(self) -> Iterator[tuple[StatName, StatValue]]:
        for stat in STAT_ORDER:
            yield stat, self.get(stat)

    def total(self) -> int:
        return sum(self.value(stat) for stat in STAT_ORDER)

    def as_dict(self) -> dict[str, int]:
        """Neutral values keyed by stat name."""
        return {stat.value: self.value(stat) for stat in STAT_ORDER}


@dataclass(frozen=True, slots=True)
class StatReference:
    """The canonical stat checkpoints of one hero."""

    level1: StatBlock
    level40: StatBlock
    level1_4: StatBlock | None = None
    level40_4: StatBlock | None = None


def resolve_stats(
    block: StatBlock,
    *,
    boon: StatName | None = None,
    bane: StatName | None = None,
) -> StatBlock:
    """Collapse variant fields to plain integers for a boon/bane pair."""
    if boon is not None and boon == bane:
        raise ValueError("Boon and bane must be different stats.")
    resolved: dict[StatName, StatValue] = {}
    for stat in STAT_ORDER:
        variant: IVVariant = "neutral"
        if stat == boon:
            variant = "boon"
        elif stat == bane:
            variant = "bane"
        resolved[stat] = block.value(stat, variant)
    return StatBlock.from_mapping(resolved)


def apply_bonus(base: StatBlock, bonus: StatBlock) -> StatBlock:
    """Add ``bonus`` to the neutral values of ``base`` field by field."""
    return StatBlock.from_mapping(
        {stat: base.value(stat) + bonus.value(stat) for stat in STAT_ORDER}
    )
