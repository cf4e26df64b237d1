"""Skills repository."""
from __future__ import annotations

from typing import Dict, List

from heroplan.data.errors import DataReferenceError, DataValidationError
from heroplan.data.repositories.base import RepositoryBase
from heroplan.domain.defs import SKILL_CATEGORIES, SkillDef, SkillStatChange

SKILL_FILES: Dict[str, str] = {
    "weapons": "skills_weapon.json",
    "assists": "skills_assist.json",
    "specials": "skills_special.json",
    "a_skills": "skills_a.json",
    "b_skills": "skills_b.json",
    "c_skills": "skills_c.json",
    "seals": "skills_seal.json",
}

_OPTIONAL_FIELDS = {
    "spCost",
    "icon",
    "damage",
    "range",
    "weaponType",
    "colorType",
    "exclusive",
    "prev",
    "include",
    "exclude",
    "last",
    "stats",
}
_STAT_CHANGE_KEYS = {"hp", "atk", "spd", "def", "res"}


class SkillsRepository(RepositoryBase[SkillDef]):
    """Loads skills of every category, one document per category.

    Definitions are keyed ``"<category>:<name>"`` since the same name can
    appear in more than one category (e.g. an A skill and its seal).
    """

    def __init__(self, base_path=None, client=None) -> None:
        super().__init__(SKILL_FILES["weapons"], base_path, client)

    def _load_raw(self) -> object:
        raw: Dict[str, object] = {}
        for category in SKILL_CATEGORIES:
            filename = SKILL_FILES[category]
            document = self._read_document(filename)
            if not isinstance(document, list):
                raise DataValidationError(f"Expected top-level list in {filename}")
            raw[category] = document
        return raw

    def _build(self, raw: object) -> Dict[str, SkillDef]:
        skills: Dict[str, SkillDef] = {}
        for category, entries in raw.items():
            for index, payload in enumerate(entries):
                skill = self._parse_skill(payload, category, index)
                key = _key(category, skill.name)
                if key in skills:
                    raise DataValidationError(f"Duplicate skill '{skill.name}' in {category}.")
                skills[key] = skill
        for skill in skills.values():
            for prev_name in skill.prev:
                if _key(skill.category, prev_name) not in skills:
                    raise DataReferenceError(
                        f"{skill.category} skill '{skill.name}' requires unknown skill '{prev_name}'."
                    )
        return skills

    def get_skill(self, skill_name: str, category: str) -> SkillDef | None:
        """Return the named skill of ``category`` or None if it is not listed."""
        self._check_category(category)
        self._ensure_loaded()
        assert self._definitions is not None
        return self._definitions.get(_key(category, skill_name))

    def all_of(self, category: str) -> tuple[SkillDef, ...]:
        """Return the skills of one category in catalog order."""
        self._check_category(category)
        self._ensure_loaded()
        assert self._definitions is not None
        return tuple(skill for skill in self._definitions.values() if skill.category == category)

    def by_category(self) -> Dict[str, tuple[SkillDef, ...]]:
        return {category: self.all_of(category) for category in SKILL_CATEGORIES}

    @staticmethod
    def _check_category(category: str) -> None:
        if category not in SKILL_CATEGORIES:
            raise KeyError(category)

    def _parse_skill(self, payload: object, category: str, index: int) -> SkillDef:
        skill_data = self._require_mapping(payload, f"{category}[{index}]")
        name = self._require_str(skill_data.get("name"), f"{category}[{index}] name")
        context = f"{category} skill '{name}'"
        self._assert_exact_fields(skill_data, {"name", "effect"}, context, optional_fields=_OPTIONAL_FIELDS)
        if category == "weapons":
            for required in ("spCost", "damage", "range", "weaponType"):
                if required not in skill_data:
                    raise DataValidationError(f"{context} missing fields: ['{required}']")

        return SkillDef(
            name=name,
            category=category,
            effect=self._require_str(skill_data["effect"], f"{context} effect"),
            sp_cost=self._optional_int(skill_data.get("spCost"), f"{context} spCost"),
            icon=self._optional_str(skill_data.get("icon"), f"{context} icon"),
            damage=self._optional_int(skill_data.get("damage"), f"{context} damage"),
            range=self._optional_int(skill_data.get("range"), f"{context} range"),
            weapon_type=self._optional_str(skill_data.get("weaponType"), f"{context} weaponType"),
            color_type=self._optional_str(skill_data.get("colorType"), f"{context} colorType"),
            exclusive=tuple(self._require_str_list(skill_data.get("exclusive", []), f"{context} exclusive")),
            prev=tuple(self._require_str_list(skill_data.get("prev", []), f"{context} prev")),
            include=self._parse_restrictors(skill_data.get("include", []), f"{context} include"),
            exclude=self._parse_restrictors(skill_data.get("exclude", []), f"{context} exclude"),
            last=self._require_bool(skill_data.get("last", False), f"{context} last"),
            stats=self._parse_stat_change(skill_data.get("stats"), f"{context} stats"),
        )

    def _optional_int(self, value: object, context: str) -> int | None:
        return None if value is None else self._require_int(value, context)

    def _optional_str(self, value: object, context: str) -> str | None:
        return None if value is None else self._require_str(value, context)

    def _parse_restrictors(self, value: object, context: str) -> tuple[dict, ...]:
        restrictors: List[dict] = []
        for entry in self._require_list(value, context):
            restrictors.append(dict(self._require_mapping(entry, f"{context} entry")))
        return tuple(restrictors)

    def _parse_stat_change(self, value: object, context: str) -> SkillStatChange | None:
        if value is None:
            return None
        mapping = self._require_mapping(value, context)
        unknown = set(mapping.keys()) - _STAT_CHANGE_KEYS
        if unknown:
            raise DataValidationError(f"{context} has unknown stats: {sorted(unknown)}")
        return SkillStatChange(
            hp=self._require_int(mapping.get("hp", 0), f"{context}.hp"),
            atk=self._require_int(mapping.get("atk", 0), f"{context}.atk"),
            spd=self._require_int(mapping.get("spd", 0), f"{context}.spd"),
            def_=self._require_int(mapping.get("def", 0), f"{context}.def"),
            res=self._require_int(mapping.get("res", 0), f"{context}.res"),
        )


def _key(category: str, name: str) -> str:
    return f"{category}:{name}"
