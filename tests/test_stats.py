import pytest

from heroplan.domain.stats import (
    STAT_ORDER,
    StatBlock,
    StatName,
    StatVariant,
    apply_bonus,
    resolve_stats,
)


def _level40() -> StatBlock:
    return StatBlock(
        hp=StatVariant(bane=40, neutral=43, boon=46),
        atk=StatVariant(bane=32, neutral=35, boon=38),
        spd=StatVariant(bane=22, neutral=25, boon=28),
        def_=StatVariant(bane=29, neutral=32, boon=35),
        res=17,
    )


def test_stat_order_is_canonical() -> None:
    assert [stat.value for stat in STAT_ORDER] == ["hp", "atk", "spd", "def", "res"]


def test_value_reads_scalars_and_variants() -> None:
    block = _level40()

    assert block.value(StatName.HP) == 43
    assert block.value(StatName.HP, "bane") == 40
    assert block.value(StatName.HP, "boon") == 46
    assert block.value(StatName.RES, "boon") == 17


def test_get_maps_def_to_attribute() -> None:
    block = _level40()

    assert block.get(StatName.DEF) == StatVariant(bane=29, neutral=32, boon=35)
    assert StatName("def").field_name == "def_"


def test_from_mapping_requires_every_stat() -> None:
    with pytest.raises(ValueError):
        StatBlock.from_mapping({StatName.HP: 1, StatName.ATK: 2})


def test_stat_block_is_immutable() -> None:
    block = StatBlock.zero()

    with pytest.raises(AttributeError):
        block.hp = 3  # type: ignore[misc]


def test_resolve_stats_applies_boon_and_bane() -> None:
    resolved = resolve_stats(_level40(), boon=StatName.ATK, bane=StatName.SPD)

    assert resolved.as_dict() == {"hp": 43, "atk": 38, "spd": 22, "def": 32, "res": 17}
    assert resolved.total() == 152


def test_resolve_stats_rejects_same_boon_and_bane() -> None:
    with pytest.raises(ValueError):
        resolve_stats(_level40(), boon=StatName.HP, bane=StatName.HP)


def test_apply_bonus_adds_fieldwise() -> None:
    base = resolve_stats(_level40())
    bonus = StatBlock(hp=1, atk=2, spd=3, def_=4, res=5)

    assert apply_bonus(base, bonus).as_dict() == {"hp": 44, "atk": 37, "spd": 28, "def": 36, "res": 22}
