# ABOUTME: Dual-type effectiveness calculations and defensive display classification.
# ABOUTME: Builds weakness/resistance profiles and the attacker x defender dual-type chart.

from collections.abc import Iterable
from enum import Enum
from typing import Any

import polars as pl

from typecoverage.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    RESISTANCE_THRESHOLD,
    SUPER_EFFECTIVE_THRESHOLD,
    TYPES,
    PokeType,
    as_type,
    lookup,
)


class DefensiveCategory(str, Enum):
    """Display bucket for a defending Pokemon's multiplier against an attacking type."""

    QUADRUPLE_WEAK = "quadruple weak"
    WEAK = "weak"
    NEUTRAL = "neutral"
    RESISTED = "resisted"
    QUADRUPLE_RESISTED = "quadruple resisted"
    IMMUNE = "immune"

    @property
    def symbol(self) -> str:
        """Short chart label; neutral cells are left blank."""
        return _DEFENSIVE_SYMBOLS[self]


_DEFENSIVE_SYMBOLS: dict[DefensiveCategory, str] = {
    DefensiveCategory.QUADRUPLE_WEAK: "4×",
    DefensiveCategory.WEAK: "2×",
    DefensiveCategory.NEUTRAL: "",
    DefensiveCategory.RESISTED: "½",
    DefensiveCategory.QUADRUPLE_RESISTED: "¼",
    DefensiveCategory.IMMUNE: "0",
}

_DEFENSIVE_BY_MULTIPLIER: dict[float, DefensiveCategory] = {
    4.0: DefensiveCategory.QUADRUPLE_WEAK,
    2.0: DefensiveCategory.WEAK,
    1.0: DefensiveCategory.NEUTRAL,
    0.5: DefensiveCategory.RESISTED,
    0.25: DefensiveCategory.QUADRUPLE_RESISTED,
    0.0: DefensiveCategory.IMMUNE,
}


def dual_effectiveness(
    atk_type: PokeType | str,
    def_type1: PokeType | str,
    def_type2: PokeType | str | None = None,
) -> float:
    """Calculate type effectiveness multiplier against a mono- or dual-type defender.

    Args:
        atk_type: The attacking type (e.g., "Fire").
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

    Raises:
        UnknownTypeError: If any given type is not one of the 18 types.

    Note:
        If def_type1 == def_type2, the multiplier is calculated only once
        (e.g., Water vs Fire/Fire = 2x, NOT 4x).
    """
    multiplier = lookup(atk_type, def_type1).multiplier

    # Only apply second type if it exists AND is different from the first
    if def_type2 is not None and as_type(def_type2) != as_type(def_type1):
        multiplier *= lookup(atk_type, def_type2).multiplier

    return multiplier


def classify_defensive(multiplier: float) -> DefensiveCategory:
    """Classify a dual-type multiplier into its defensive display bucket.

    Args:
        multiplier: One of 0, 0.25, 0.5, 1, 2, or 4.

    Returns:
        The matching DefensiveCategory.

    Raises:
        ValueError: If the multiplier is not a value dual_effectiveness can produce.
    """
    category = _DEFENSIVE_BY_MULTIPLIER.get(multiplier)
    if category is None:
        raise ValueError(f"Not a type effectiveness multiplier: {multiplier}")
    return category


def get_weaknesses(def_type1: PokeType | str, def_type2: PokeType | str | None = None) -> list[PokeType]:
    """Return types that are super effective (>=2x) against the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if dual_effectiveness(atk_type, def_type1, def_type2) >= SUPER_EFFECTIVE_THRESHOLD
    ]


def get_resistances(def_type1: PokeType | str, def_type2: PokeType | str | None = None) -> list[PokeType]:
    """Return types that are resisted (<=0.5x, excluding 0x) by the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if IMMUNITY_VALUE < dual_effectiveness(atk_type, def_type1, def_type2) <= RESISTANCE_THRESHOLD
    ]


def get_immunities(def_type1: PokeType | str, def_type2: PokeType | str | None = None) -> list[PokeType]:
    """Return types that the defender is immune to (0x effectiveness)."""
    return [
        atk_type for atk_type in TYPES if dual_effectiveness(atk_type, def_type1, def_type2) == IMMUNITY_VALUE
    ]


def get_neutral(def_type1: PokeType | str, def_type2: PokeType | str | None = None) -> list[PokeType]:
    """Return types at neutral (1x) effectiveness against the defender."""
    return [
        atk_type for atk_type in TYPES if dual_effectiveness(atk_type, def_type1, def_type2) == NEUTRAL_VALUE
    ]


def defensive_profile(
    def_type1: PokeType | str,
    def_type2: PokeType | str | None = None,
    attacking_types: Iterable[PokeType | str] = TYPES,
) -> dict[str, Any]:
    """Group attacking types by how the defender takes them.

    Args:
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.
        attacking_types: Attacking types to evaluate. Defaults to all 18.

    Returns:
        Dictionary containing:
        - immunities: Types the defender is immune to.
        - resistances: Types the defender takes at 0.5x or 0.25x.
        - neutral: Types with neutral effectiveness.
        - weaknesses: Types the defender takes at 2x or 4x.
        - immunity_count, resistance_count, neutral_count, weakness_count
        - categories: Mapping of each attacking type to its DefensiveCategory.
    """
    buckets: dict[str, list[PokeType]] = {"immunities": [], "resistances": [], "neutral": [], "weaknesses": []}
    categories: dict[PokeType, DefensiveCategory] = {}

    for raw_type in attacking_types:
        atk_type = as_type(raw_type)
        category = classify_defensive(dual_effectiveness(atk_type, def_type1, def_type2))
        categories[atk_type] = category

        if category == DefensiveCategory.IMMUNE:
            buckets["immunities"].append(atk_type)
        elif category in (DefensiveCategory.RESISTED, DefensiveCategory.QUADRUPLE_RESISTED):
            buckets["resistances"].append(atk_type)
        elif category == DefensiveCategory.NEUTRAL:
            buckets["neutral"].append(atk_type)
        else:
            buckets["weaknesses"].append(atk_type)

    return {
        **buckets,
        "immunity_count": len(buckets["immunities"]),
        "resistance_count": len(buckets["resistances"]),
        "neutral_count": len(buckets["neutral"]),
        "weakness_count": len(buckets["weaknesses"]),
        "categories": categories,
    }


def dual_type_chart(secondary: PokeType | str | None = None) -> dict[PokeType, dict[PokeType, float]]:
    """Build the full attacker x defender chart, optionally adding a shared secondary defending type.

    Args:
        secondary: Secondary type applied to every defender column, or None for monotypes.

    Returns:
        Nested dict: chart[attacking_type][defending_type] = multiplier.
    """
    return {
        atk_type: {def_type: dual_effectiveness(atk_type, def_type, secondary) for def_type in TYPES}
        for atk_type in TYPES
    }


def dual_type_chart_frame(secondary: PokeType | str | None = None) -> pl.DataFrame:
    """Render dual_type_chart as a DataFrame.

    Args:
        secondary: Secondary type applied to every defender column, or None for monotypes.

    Returns:
        DataFrame with an "attacker" column followed by one Float64 column per
        defending type, one row per attacking type in chart order.
    """
    chart = dual_type_chart(secondary)
    schema: dict[str, Any] = {"attacker": pl.String, **{def_type.value: pl.Float64 for def_type in TYPES}}
    rows = [
        {"attacker": atk_type.value, **{def_type.value: value for def_type, value in row.items()}}
        for atk_type, row in chart.items()
    ]
    return pl.DataFrame(rows, schema=schema)
