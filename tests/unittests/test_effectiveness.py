# ABOUTME: Unit tests for dual-type effectiveness and defensive classification.
# ABOUTME: Tests dual multipliers, display buckets, defensive profiles, and the dual-type chart.

import polars as pl
import pytest

from typecoverage.analysis.effectiveness import (
    DefensiveCategory,
    classify_defensive,
    defensive_profile,
    dual_effectiveness,
    dual_type_chart,
    dual_type_chart_frame,
    get_immunities,
    get_neutral,
    get_resistances,
    get_weaknesses,
)
from typecoverage.utils.type_chart import TYPES, PokeType, UnknownTypeError, lookup

DUAL_MULTIPLIERS = {0.0, 0.25, 0.5, 1.0, 2.0, 4.0}


class TestDualEffectiveness:
    """Tests for dual_effectiveness function."""

    def test_single_type_matches_lookup(self) -> None:
        """Without a second type the result is the single multiplier."""
        for atk_type in TYPES:
            for def_type in TYPES:
                assert dual_effectiveness(atk_type, def_type) == lookup(atk_type, def_type).multiplier

    def test_ice_vs_fire_dragon(self) -> None:
        """Ice vs Fire/Dragon = 0.5x * 2x = 1x."""
        assert dual_effectiveness(PokeType.ICE, PokeType.FIRE, PokeType.DRAGON) == 1.0

    def test_fighting_vs_ghost(self) -> None:
        """Fighting vs Ghost = 0x."""
        assert dual_effectiveness(PokeType.FIGHTING, PokeType.GHOST, None) == 0.0

    def test_4x_effective(self) -> None:
        """Rock vs Fire/Flying = 4x."""
        assert dual_effectiveness("Rock", "Fire", "Flying") == 4.0

    def test_025x_effective(self) -> None:
        """Fighting vs Poison/Flying = 0.25x."""
        assert dual_effectiveness("Fighting", "Poison", "Flying") == 0.25

    def test_dual_type_immunity(self) -> None:
        """Fighting vs Poison/Ghost = 0x (Ghost immunity)."""
        assert dual_effectiveness("Fighting", "Poison", "Ghost") == 0.0

    def test_dual_type_cancels_out(self) -> None:
        """Fire vs Grass/Water = 1x (2x * 0.5x)."""
        assert dual_effectiveness("Fire", "Grass", "Water") == 1.0

    def test_monotype_not_doubled(self) -> None:
        """Water vs Fire/Fire = 2x (NOT 4x)."""
        assert dual_effectiveness("Water", "Fire", "Fire") == 2.0

    def test_monotype_resistance_not_doubled(self) -> None:
        """Fire vs Fire/Fire = 0.5x (NOT 0.25x)."""
        assert dual_effectiveness("Fire", "Fire", "Fire") == 0.5

    def test_duplicate_given_as_name_and_member(self) -> None:
        """A duplicate given once as a name and once as a member still counts once."""
        assert dual_effectiveness("Water", PokeType.FIRE, "Fire") == 2.0

    def test_duplicate_defender_is_noop(self) -> None:
        """Supplying the same defending type twice equals supplying it once."""
        for atk_type in TYPES:
            for def_type in TYPES:
                assert dual_effectiveness(atk_type, def_type, def_type) == dual_effectiveness(atk_type, def_type, None)

    def test_multiplier_range(self) -> None:
        """Every attacker/defender/defender triple lands in the dual range."""
        for atk_type in TYPES:
            for def_type1 in TYPES:
                for def_type2 in TYPES:
                    assert dual_effectiveness(atk_type, def_type1, def_type2) in DUAL_MULTIPLIERS

    def test_order_of_defending_types_irrelevant(self) -> None:
        """Swapping the defending types gives the same result."""
        assert dual_effectiveness("Ground", "Electric", "Flying") == dual_effectiveness("Ground", "Flying", "Electric")

    @pytest.mark.parametrize(
        ("atk_type", "def_type1", "def_type2"),
        [
            ("Fyre", "Grass", None),
            ("Fire", "Grsas", None),
            ("Fire", "Grass", "Watr"),
            ("fire", "Grass", None),
        ],
    )
    def test_unknown_type_fails_fast(self, atk_type: str, def_type1: str, def_type2: str | None) -> None:
        """Unknown types raise instead of defaulting to neutral."""
        with pytest.raises(UnknownTypeError):
            dual_effectiveness(atk_type, def_type1, def_type2)


class TestClassifyDefensive:
    """Tests for classify_defensive function."""

    @pytest.mark.parametrize(
        ("multiplier", "expected", "symbol"),
        [
            (4.0, DefensiveCategory.QUADRUPLE_WEAK, "4×"),
            (2.0, DefensiveCategory.WEAK, "2×"),
            (1.0, DefensiveCategory.NEUTRAL, ""),
            (0.5, DefensiveCategory.RESISTED, "½"),
            (0.25, DefensiveCategory.QUADRUPLE_RESISTED, "¼"),
            (0.0, DefensiveCategory.IMMUNE, "0"),
        ],
    )
    def test_buckets(self, multiplier: float, expected: DefensiveCategory, symbol: str) -> None:
        """Each dual multiplier maps to exactly one bucket and symbol."""
        category = classify_defensive(multiplier)
        assert category == expected
        assert category.symbol == symbol

    @pytest.mark.parametrize("multiplier", [3.0, 8.0, 0.125, -1.0, 1.5])
    def test_out_of_range_rejected(self, multiplier: float) -> None:
        """Values dual_effectiveness never produces are rejected."""
        with pytest.raises(ValueError, match="Not a type effectiveness multiplier"):
            classify_defensive(multiplier)

    def test_total_over_dual_results(self) -> None:
        """Every result of dual_effectiveness can be classified."""
        for atk_type in TYPES:
            for def_type in TYPES:
                classify_defensive(dual_effectiveness(atk_type, def_type, PokeType.FLYING))

    def test_buckets_are_distinct(self) -> None:
        """The six buckets cover the six dual multipliers one-to-one."""
        assert {classify_defensive(m) for m in DUAL_MULTIPLIERS} == set(DefensiveCategory)


class TestDefensiveLists:
    """Tests for weakness, resistance, immunity, and neutral lists."""

    def test_fire_weaknesses(self) -> None:
        """Fire is weak to Water, Ground, Rock."""
        assert set(get_weaknesses("Fire")) == {PokeType.WATER, PokeType.GROUND, PokeType.ROCK}

    def test_steel_fairy_weaknesses(self) -> None:
        """Steel/Fairy is weak to Fire and Ground only."""
        assert set(get_weaknesses("Steel", "Fairy")) == {PokeType.FIRE, PokeType.GROUND}

    def test_electric_monotype(self) -> None:
        """Electric is only weak to Ground."""
        assert get_weaknesses(PokeType.ELECTRIC) == [PokeType.GROUND]

    def test_steel_resistances(self) -> None:
        """Steel has many resistances."""
        expected = {
            PokeType.NORMAL,
            PokeType.GRASS,
            PokeType.ICE,
            PokeType.FLYING,
            PokeType.PSYCHIC,
            PokeType.BUG,
            PokeType.ROCK,
            PokeType.DRAGON,
            PokeType.STEEL,
            PokeType.FAIRY,
        }
        assert set(get_resistances("Steel")) == expected

    def test_resistances_exclude_immunities(self) -> None:
        """Ghost's immunities are not listed as resistances."""
        resistances = get_resistances("Ghost")
        assert PokeType.NORMAL not in resistances
        assert PokeType.FIGHTING not in resistances

    def test_ghost_immunities(self) -> None:
        """Ghost is immune to Normal and Fighting."""
        assert set(get_immunities("Ghost")) == {PokeType.NORMAL, PokeType.FIGHTING}

    def test_no_immunities(self) -> None:
        """Fire has no immunities."""
        assert get_immunities("Fire") == []

    def test_neutral_excludes_other_categories(self) -> None:
        """Neutral should not include weaknesses or resistances."""
        neutral = get_neutral("Fire")
        assert PokeType.NORMAL in neutral
        assert PokeType.WATER not in neutral
        assert PokeType.GRASS not in neutral

    @pytest.mark.parametrize("pokemon_type", TYPES)
    def test_lists_partition_all_types(self, pokemon_type: PokeType) -> None:
        """Every attacking type falls in exactly one list."""
        lists = [
            get_weaknesses(pokemon_type),
            get_resistances(pokemon_type),
            get_immunities(pokemon_type),
            get_neutral(pokemon_type),
        ]
        combined = [t for group in lists for t in group]
        assert len(combined) == 18
        assert set(combined) == set(TYPES)


class TestDefensiveProfile:
    """Tests for defensive_profile function."""

    def test_profile_structure(self) -> None:
        """Should return dict with expected keys."""
        profile = defensive_profile("Fire")
        assert set(profile.keys()) == {
            "immunities",
            "resistances",
            "neutral",
            "weaknesses",
            "immunity_count",
            "resistance_count",
            "neutral_count",
            "weakness_count",
            "categories",
        }

    def test_steel_fairy_profile(self) -> None:
        """Steel/Fairy is immune to Dragon and Poison."""
        profile = defensive_profile("Steel", "Fairy")
        assert profile["immunities"] == [PokeType.POISON, PokeType.DRAGON]
        assert profile["immunity_count"] == 2
        assert profile["weakness_count"] == 2
        assert profile["categories"][PokeType.BUG] == DefensiveCategory.QUADRUPLE_RESISTED

    def test_quadruple_weakness_counted_as_weakness(self) -> None:
        """Rock vs Fire/Flying is a 4x weakness."""
        profile = defensive_profile("Fire", "Flying")
        assert PokeType.ROCK in profile["weaknesses"]
        assert profile["categories"][PokeType.ROCK] == DefensiveCategory.QUADRUPLE_WEAK

    def test_all_types_categorized(self) -> None:
        """All attacking types should be in exactly one category."""
        profile = defensive_profile("Water", "Ground")
        total = (
            profile["immunity_count"] + profile["resistance_count"] + profile["neutral_count"] + profile["weakness_count"]
        )
        assert total == 18
        assert len(profile["categories"]) == 18

    def test_subset_of_attacking_types(self) -> None:
        """Should work with a subset of attacking types."""
        profile = defensive_profile("Fire", None, ["Fire", "Water", "Grass"])
        assert profile["weaknesses"] == [PokeType.WATER]
        assert profile["resistances"] == [PokeType.FIRE, PokeType.GRASS]
        assert len(profile["categories"]) == 3


class TestDualTypeChart:
    """Tests for dual_type_chart and its DataFrame rendering."""

    def test_monotype_chart_matches_lookup(self) -> None:
        """Without a secondary type the chart is the base table."""
        chart = dual_type_chart()
        for atk_type in TYPES:
            for def_type in TYPES:
                assert chart[atk_type][def_type] == lookup(atk_type, def_type).multiplier

    def test_secondary_applied_to_every_column(self) -> None:
        """A secondary Flying type is combined into each defender column."""
        chart = dual_type_chart(PokeType.FLYING)
        assert chart[PokeType.ELECTRIC][PokeType.GROUND] == 0.0
        assert chart[PokeType.ICE][PokeType.GRASS] == 4.0
        assert chart[PokeType.GROUND][PokeType.STEEL] == 0.0

    def test_secondary_same_as_column_not_doubled(self) -> None:
        """The column equal to the secondary type is treated as a monotype."""
        chart = dual_type_chart("Flying")
        assert chart[PokeType.ROCK][PokeType.FLYING] == 2.0

    def test_unknown_secondary_raises(self) -> None:
        """An unknown secondary type fails fast."""
        with pytest.raises(UnknownTypeError):
            dual_type_chart("Sound")

    def test_frame_shape(self) -> None:
        """One row per attacker, an attacker column plus one column per defender."""
        frame = dual_type_chart_frame()
        assert frame.shape == (18, 19)
        assert frame.columns[0] == "attacker"
        assert frame.columns[1:] == [t.value for t in TYPES]
        assert frame["attacker"].to_list() == [t.value for t in TYPES]

    def test_frame_values(self) -> None:
        """Frame cells match dual_effectiveness."""
        frame = dual_type_chart_frame("Dragon")
        ice_row = frame.filter(pl.col("attacker") == "Ice")
        assert ice_row["Fire"].item() == 1.0
        assert ice_row["Flying"].item() == 4.0
