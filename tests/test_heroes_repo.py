import json
from pathlib import Path

import pytest

from heroplan.data.errors import DataLoadError, DataValidationError
from heroplan.data.repositories import HeroesRepository
from heroplan.domain.stats import StatName, StatVariant


def test_heroes_repo_loads_defs() -> None:
    repo = HeroesRepository()
    hero = repo.get("Alfonse")

    assert hero.title == "Prince of Askr"
    assert hero.weapon_type == "sword"
    assert hero.stats[0].level1.value(StatName.HP) == 19
    assert hero.stats[0].level40.get(StatName.HP) == StatVariant(bane=40, neutral=43, boon=46)
    assert hero.stats[0].level40_4 is not None


def test_heroes_repo_all_sorted_by_name() -> None:
    names = [hero.name for hero in HeroesRepository().all()]

    assert names == sorted(names)
    assert "Sharena" in names


def test_heroes_repo_optional_flags_default_false(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "heroes.json", [_hero("Plain")])
    hero = HeroesRepository(base_path=definitions_dir).get("Plain")

    assert hero.limited is False
    assert hero.ghb is False
    assert hero.short_name is None
    assert hero.display_name == "Plain"
    assert hero.stats[0].level1_4 is None


def test_heroes_repo_get_many_skips_unknown(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "heroes.json", [_hero("B"), _hero("A"), _hero("C")])
    repo = HeroesRepository(base_path=definitions_dir)

    assert [hero.name for hero in repo.get_many(["C", "B", "Z"])] == ["B", "C"]


def test_heroes_repo_find_with_skill_respects_rarity(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    low = _hero("Low", skills=[{"name": "Moonbow", "rarity": 3}])
    high = _hero("High", skills=[{"name": "Moonbow", "rarity": 5}])
    _write_json(definitions_dir / "heroes.json", [low, high])
    repo = HeroesRepository(base_path=definitions_dir)

    assert [hero.name for hero in repo.find_with_skill("Moonbow")] == ["High", "Low"]
    assert [hero.name for hero in repo.find_with_skill("Moonbow", rarity=4)] == ["Low"]
    assert repo.find_with_skill("Luna") == []
    assert HeroesRepository.has_skill(repo.get("High"), "Moonbow", rarity=4) is False


def test_heroes_repo_get_missing_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "heroes.json", [_hero("A")])

    with pytest.raises(KeyError):
        HeroesRepository(base_path=definitions_dir).get("Nobody")


def test_heroes_repo_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        HeroesRepository(base_path=_make_definitions_dir(tmp_path)).all()


def test_heroes_repo_rejects_object_document(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "heroes.json", {"A": _hero("A")})

    with pytest.raises(DataValidationError):
        HeroesRepository(base_path=definitions_dir).all()


def test_heroes_repo_rejects_duplicate_names(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "heroes.json", [_hero("A"), _hero("A")])

    with pytest.raises(DataValidationError):
        HeroesRepository(base_path=definitions_dir).all()


@pytest.mark.parametrize(
    "level1",
    [
        {"hp": 18, "atk": 8, "spd": 8, "def": 7},
        {"hp": 18, "atk": 8, "spd": 8, "def": 7, "res": 6, "luck": 3},
        {"hp": 18, "atk": 8, "spd": "8", "def": 7, "res": 6},
        {"hp": 18, "atk": 8, "spd": [7, 8], "def": 7, "res": 6},
        {"hp": 18, "atk": True, "spd": 8, "def": 7, "res": 6},
    ],
)
def test_heroes_repo_rejects_malformed_stat_blocks(tmp_path: Path, level1: dict) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    hero = _hero("A")
    hero["stats"][0]["level1"] = level1
    _write_json(definitions_dir / "heroes.json", [hero])

    with pytest.raises(DataValidationError):
        HeroesRepository(base_path=definitions_dir).all()


def test_heroes_repo_rejects_unknown_hero_fields(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    hero = _hero("A")
    hero["favorite"] = True
    _write_json(definitions_dir / "heroes.json", [hero])

    with pytest.raises(DataValidationError):
        HeroesRepository(base_path=definitions_dir).all()


def test_heroes_repo_rejects_empty_stats(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    hero = _hero("A")
    hero["stats"] = []
    _write_json(definitions_dir / "heroes.json", [hero])

    with pytest.raises(DataValidationError):
        HeroesRepository(base_path=definitions_dir).all()


def _hero(name: str, skills: list | None = None) -> dict:
    return {
        "name": name,
        "title": "Tester",
        "releaseDate": "2017-02-02",
        "colorType": "red",
        "weaponType": "sword",
        "moveType": "infantry",
        "skills": skills if skills is not None else [{"name": "Iron Sword", "rarity": 1}],
        "stats": [
            {
                "level1": {"hp": 18, "atk": 8, "spd": 8, "def": 7, "res": 6},
                "level40": {
                    "hp": [40, 43, 46],
                    "atk": [30, 33, 36],
                    "spd": [29, 32, 35],
                    "def": [22, 25, 28],
                    "res": 22,
                },
            }
        ],
    }


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir
