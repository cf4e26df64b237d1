"""Command line interface for merge planning and catalog inspection."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from heroplan.data.catalog_client import CatalogClient
from heroplan.data.errors import DataError
from heroplan.data.repositories import HeroesRepository, SkillsRepository, StructuresRepository
from heroplan.domain.defs import SKILL_CATEGORIES, STRUCTURE_CATEGORIES
from heroplan.domain.stats import STAT_ORDER, StatName
from heroplan.services import HeroNotFoundError, MergePlan, MergePlanner
from heroplan.services.merge_planner import MAX_MERGES
from heroplan.settings import Settings, configure_logging, load_settings

logger = logging.getLogger(__name__)

_STAT_CHOICES = [stat.value for stat in STAT_ORDER]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the selected command and return the exit code."""
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.debug)
    parser = _build_parser()
    args = parser.parse_args(argv)
    client = CatalogClient(settings.catalog_url) if settings.catalog_url else None
    try:
        if args.command == "merge":
            return _run_merge(args, settings, client)
        return _run_catalog(settings, client)
    except (DataError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1
    except HeroNotFoundError as exc:
        print(f"Error: unknown hero {exc.args[0]!r}")
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="heroplan", description="Hero merge planner.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Show merge bonuses for a hero.")
    merge.add_argument("name", help="Unique hero name as listed in the catalog.")
    merge.add_argument("--merges", type=int, default=MAX_MERGES, choices=range(MAX_MERGES + 1), metavar="N")
    merge.add_argument("--flaw", "--bane", dest="bane", choices=_STAT_CHOICES, default=None)
    merge.add_argument("--boon", choices=_STAT_CHOICES, default=None)

    subparsers.add_parser("catalog", help="Load every catalog document and print a summary.")
    return parser


def _run_merge(args: argparse.Namespace, settings: Settings, client: CatalogClient | None) -> int:
    planner = MergePlanner(heroes_repo=HeroesRepository(base_path=settings.data_dir, client=client))
    plan = planner.plan(
        args.name,
        args.merges,
        boon=StatName(args.boon) if args.boon else None,
        bane=StatName(args.bane) if args.bane else None,
    )
    for line in format_plan(plan):
        print(line)
    return 0


def _run_catalog(settings: Settings, client: CatalogClient | None) -> int:
    heroes = HeroesRepository(base_path=settings.data_dir, client=client).all()
    skills = SkillsRepository(base_path=settings.data_dir, client=client).by_category()
    structures = StructuresRepository(base_path=settings.data_dir, client=client).holder()
    logger.debug("Catalog loaded from %s", client.base_url if client else settings.data_dir)
    print(f"Heroes: {len(heroes)}")
    for category in SKILL_CATEGORIES:
        print(f"Skills ({category}): {len(skills[category])}")
    for category in STRUCTURE_CATEGORIES:
        print(f"Structures ({category}): {len(structures.all_of(category))}")
    return 0


def format_plan(plan: MergePlan) -> list[str]:
    ivs = []
    if plan.boon is not None:
        ivs.append(f"+{plan.boon.value}")
    if plan.bane is not None:
        ivs.append(f"-{plan.bane.value}")
    header = f"{plan.hero.name}: {plan.hero.title} +{plan.merges}"
    if ivs:
        header += f" ({' '.join(ivs)})"
    lines = [header, "Merge order: " + ", ".join(stat.value for stat in plan.priority)]
    for stat in STAT_ORDER:
        base = plan.base_stats.value(stat)
        bonus = plan.bonus.value(stat)
        lines.append(f"  {stat.value:<3} {base:>3} +{bonus:<2} = {plan.final_stats.value(stat)}")
    lines.append(f"  BST {plan.base_stats.total():>3} +{plan.bonus.total():<2} = {plan.final_stats.total()}")
    return lines
