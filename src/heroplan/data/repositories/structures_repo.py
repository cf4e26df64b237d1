"""Structures repository."""
from __future__ import annotations

from typing import Dict, List

from heroplan.data.errors import DataValidationError
from heroplan.data.repositories.base import RepositoryBase
from heroplan.domain.defs import STRUCTURE_CATEGORIES, StructureDef, StructureHolder, StructureLevel

VALID_COST_TYPES = {"dew", "stones"}


class StructuresRepository(RepositoryBase[StructureDef]):
    """Loads structures grouped by category from a single document."""

    def __init__(self, base_path=None, client=None) -> None:
        super().__init__("structures.json", base_path, client)
        self._holder: StructureHolder | None = None

    def _build(self, raw: object) -> Dict[str, StructureDef]:
        unknown = set(raw.keys()) - set(STRUCTURE_CATEGORIES)
        if unknown:
            raise DataValidationError(f"structures.json has unknown categories: {sorted(unknown)}")
        structures: Dict[str, StructureDef] = {}
        grouped: Dict[str, tuple[StructureDef, ...]] = {}
        for category in STRUCTURE_CATEGORIES:
            parsed: List[StructureDef] = []
            for index, payload in enumerate(self._require_list(raw.get(category, []), category)):
                structure = self._parse_structure(payload, f"{category}[{index}]")
                if structure.name in structures:
                    raise DataValidationError(f"Duplicate structure '{structure.name}'.")
                structures[structure.name] = structure
                parsed.append(structure)
            grouped[category] = tuple(parsed)
        self._holder = StructureHolder(**grouped)
        return structures

    def holder(self) -> StructureHolder:
        self._ensure_loaded()
        assert self._holder is not None
        return self._holder

    def all_of(self, category: str) -> tuple[StructureDef, ...]:
        return self.holder().all_of(category)

    def _parse_structure(self, payload: object, position: str) -> StructureDef:
        data = self._require_mapping(payload, f"structure {position}")
        name = self._require_str(data.get("name"), f"structure {position} name")
        context = f"structure '{name}'"
        self._assert_exact_fields(
            data,
            {"name"},
            context,
            optional_fields={"levels", "effect", "tierLock", "removable", "costType", "exclusive"},
        )
        levels = tuple(
            self._parse_level(entry, f"{context} levels[{index}]")
            for index, entry in enumerate(self._require_list(data.get("levels", []), f"{context} levels"))
        )
        effect = self._require_str(data.get("effect", ""), f"{context} effect")
        if not levels and not effect:
            raise DataValidationError(f"{context} needs either levels or an effect.")
        return StructureDef(
            name=name,
            levels=levels,
            effect=effect,
            tier_lock=self._require_int(data.get("tierLock", 0), f"{context} tierLock"),
            removable=self._require_bool(data.get("removable", True), f"{context} removable"),
            cost_type=self._require_literal(data.get("costType", "stones"), VALID_COST_TYPES, f"{context} costType"),
            exclusive=tuple(self._require_str_list(data.get("exclusive", []), f"{context} exclusive")),
        )

    def _parse_level(self, payload: object, context: str) -> StructureLevel:
        data = self._require_mapping(payload, context)
        self._assert_exact_fields(data, {"level", "cost", "effect"}, context)
        return StructureLevel(
            level=self._require_int(data["level"], f"{context} level"),
            cost=self._require_int(data["cost"], f"{context} cost"),
            effect=self._require_str(data["effect"], f"{context} effect"),
        )
