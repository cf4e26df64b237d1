"""Merge bonus allocation."""
from __future__ import annotations

import logging

from heroplan.domain.errors import InvalidMergeInputError
from heroplan.domain.stats import STAT_ORDER, StatBlock, StatName, StatReference, StatVariant

logger = logging.getLogger(__name__)

POINTS_PER_MERGE = 2
FIRST_MERGE_EXTRA_POSITIONS = (0, 1, 2)


def merge_priority(level1: StatBlock) -> tuple[StatName, ...]:
    """Return the stats ordered weakest first.

    Ties keep the canonical order hp, atk, spd, def, res.
    """
    return tuple(
        sorted(STAT_ORDER, key=lambda stat: (level1.value(stat), STAT_ORDER.index(stat)))
    )


def compute_merge_bonus(
    stats: StatReference,
    merge_count: int,
    flawed_stat: StatName | str | None = None,
) -> StatBlock:
    """Return the cumulative bonus granted by merges ``1..merge_count``.

    Every merge adds one point to each of the next two stats of the
    weakest-first priority list, wrapping around after five. The first merge
    also compensates the unit: three extra points to the three weakest stats
    when it has no flaw, otherwise the neutral/bane gap of the flawed stat at
    level 40.
    """
    if isinstance(merge_count, bool) or not isinstance(merge_count, int):
        raise InvalidMergeInputError(f"Merge count must be an integer, got {merge_count!r}.")
    if merge_count < 0:
        raise InvalidMergeInputError(f"Merge count must be non-negative, got {merge_count}.")
    flaw = _coerce_flaw(flawed_stat)
    flaw_delta = _flaw_delta(stats.level40, flaw) if flaw is not None else 0

    order = merge_priority(stats.level1)
    bonus = {stat: 0 for stat in STAT_ORDER}
    for index in range(merge_count):
        for offset in range(POINTS_PER_MERGE):
            bonus[order[(POINTS_PER_MERGE * index + offset) % len(order)]] += 1
        if index == 0:
            if flaw is None:
                for position in FIRST_MERGE_EXTRA_POSITIONS:
                    bonus[order[position]] += 1
            else:
                bonus[flaw] += flaw_delta

    result = StatBlock.from_mapping(bonus)
    logger.debug(
        "Merge bonus for +%d (flaw=%s, order=%s): %s",
        merge_count,
        flaw.value if flaw is not None else None,
        [stat.value for stat in order],
        result.as_dict(),
    )
    return result


def _coerce_flaw(flawed_stat: StatName | str | None) -> StatName | None:
    if flawed_stat is None or isinstance(flawed_stat, StatName):
        return flawed_stat
    try:
        return StatName(flawed_stat)
    except ValueError as exc:
        raise InvalidMergeInputError(
            f"Unknown flawed stat {flawed_stat!r}; expected one of {[s.value for s in STAT_ORDER]}."
        ) from exc


def _flaw_delta(level40: StatBlock, flaw: StatName) -> int:
    raw = level40.get(flaw)
    if not isinstance(raw, StatVariant):
        raise InvalidMergeInputError(
            f"Stat '{flaw.value}' has no IV variance at level 40 and cannot be flawed."
        )
    return raw.neutral - raw.bane
