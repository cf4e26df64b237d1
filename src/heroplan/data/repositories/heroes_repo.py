"""Heroes repository."""
from __future__ import annotations

from typing import Dict, Iterable, List

from heroplan.data.errors import DataValidationError
from heroplan.data.repositories.base import RepositoryBase
from heroplan.domain.defs import HeroDef, HeroSkill
from heroplan.domain.stats import STAT_ORDER, StatBlock, StatReference, StatValue, StatVariant

_HERO_FIELDS = {"name", "title", "releaseDate", "colorType", "weaponType", "moveType", "skills", "stats"}
_HERO_OPTIONAL_FIELDS = {"shortName", "limited", "ttRewards", "ghb"}
_REFERENCE_FIELDS = {"level1", "level40"}
_REFERENCE_OPTIONAL_FIELDS = {"level1_4", "level40_4"}


class HeroesRepository(RepositoryBase[HeroDef]):
    """Loads and validates hero definitions keyed by their unique name."""

    def __init__(self, base_path=None, client=None) -> None:
        super().__init__("heroes.json", base_path, client)

    def _load_raw(self) -> object:
        raw = self._read_document()
        if not isinstance(raw, list):
            raise DataValidationError("Expected top-level list in heroes.json")
        return raw

    def _build(self, raw: object) -> Dict[str, HeroDef]:
        heroes: Dict[str, HeroDef] = {}
        for index, payload in enumerate(raw):
            hero_data = self._require_mapping(payload, f"hero #{index}")
            name = self._require_str(hero_data.get("name"), f"hero #{index} name")
            context = f"hero '{name}'"
            if name in heroes:
                raise DataValidationError(f"Duplicate {context}.")
            self._assert_exact_fields(hero_data, _HERO_FIELDS, context, optional_fields=_HERO_OPTIONAL_FIELDS)

            short_name = hero_data.get("shortName")
            heroes[name] = HeroDef(
                name=name,
                short_name=self._require_str(short_name, f"{context} shortName") if short_name is not None else None,
                title=self._require_str(hero_data["title"], f"{context} title"),
                release_date=self._require_str(hero_data["releaseDate"], f"{context} releaseDate"),
                color_type=self._require_str(hero_data["colorType"], f"{context} colorType"),
                weapon_type=self._require_str(hero_data["weaponType"], f"{context} weaponType"),
                move_type=self._require_str(hero_data["moveType"], f"{context} moveType"),
                limited=self._require_bool(hero_data.get("limited", False), f"{context} limited"),
                tt_rewards=self._require_bool(hero_data.get("ttRewards", False), f"{context} ttRewards"),
                ghb=self._require_bool(hero_data.get("ghb", False), f"{context} ghb"),
                skills=self._parse_skills(hero_data["skills"], context),
                stats=self._parse_stat_references(hero_data["stats"], context),
            )
        return heroes

    def get_many(self, names: Iterable[str]) -> list[HeroDef]:
        """Return the heroes matching ``names`` in catalog order; unknown names are skipped."""
        wanted = set(names)
        self._ensure_loaded()
        assert self._definitions is not None
        return [hero for hero in self._definitions.values() if hero.name in wanted]

    @staticmethod
    def has_skill(hero: HeroDef, skill_name: str, rarity: int = 5) -> bool:
        """Return True if ``hero`` learns ``skill_name`` at ``rarity`` stars or below."""
        return any(skill.name == skill_name and skill.rarity <= rarity for skill in hero.skills)

    def find_with_skill(self, skill_name: str, rarity: int = 5) -> list[HeroDef]:
        return [hero for hero in self.all() if self.has_skill(hero, skill_name, rarity)]

    def _parse_skills(self, raw_value: object, context: str) -> tuple[HeroSkill, ...]:
        skills: List[HeroSkill] = []
        for index, entry in enumerate(self._require_list(raw_value, f"{context} skills")):
            skill_context = f"{context} skills[{index}]"
            mapping = self._require_mapping(entry, skill_context)
            self._assert_exact_fields(mapping, {"name", "rarity"}, skill_context)
            rarity = self._require_int(mapping["rarity"], f"{skill_context} rarity")
            if not 1 <= rarity <= 5:
                raise DataValidationError(f"{skill_context} rarity must be between 1 and 5.")
            skills.append(HeroSkill(name=self._require_str(mapping["name"], f"{skill_context} name"), rarity=rarity))
        return tuple(skills)

    def _parse_stat_references(self, raw_value: object, context: str) -> tuple[StatReference, ...]:
        references: List[StatReference] = []
        for index, entry in enumerate(self._require_list(raw_value, f"{context} stats")):
            ref_context = f"{context} stats[{index}]"
            mapping = self._require_mapping(entry, ref_context)
            self._assert_exact_fields(
                mapping, _REFERENCE_FIELDS, ref_context, optional_fields=_REFERENCE_OPTIONAL_FIELDS
            )
            references.append(
                StatReference(
                    level1=self._parse_stat_block(mapping["level1"], f"{ref_context} level1"),
                    level40=self._parse_stat_block(mapping["level40"], f"{ref_context} level40"),
                    level1_4=self._parse_optional_block(mapping.get("level1_4"), f"{ref_context} level1_4"),
                    level40_4=self._parse_optional_block(mapping.get("level40_4"), f"{ref_context} level40_4"),
                )
            )
        if not references:
            raise DataValidationError(f"{context} stats must not be empty.")
        return tuple(references)

    def _parse_optional_block(self, raw_value: object, context: str) -> StatBlock | None:
        if raw_value is None:
            return None
        return self._parse_stat_block(raw_value, context)

    def _parse_stat_block(self, raw_value: object, context: str) -> StatBlock:
        mapping = self._require_mapping(raw_value, context)
        self._assert_exact_fields(mapping, {stat.value for stat in STAT_ORDER}, context)
        return StatBlock.from_mapping(
            {stat: self._parse_stat_value(mapping[stat.value], f"{context}.{stat.value}") for stat in STAT_ORDER}
        )

    def _parse_stat_value(self, raw_value: object, context: str) -> StatValue:
        if isinstance(raw_value, list):
            if len(raw_value) != 3:
                raise DataValidationError(f"{context} must list exactly [bane, neutral, boon].")
            bane, neutral, boon = (self._require_int(value, context) for value in raw_value)
            return StatVariant(bane=bane, neutral=neutral, boon=boon)
        return self._require_int(raw_value, context)
