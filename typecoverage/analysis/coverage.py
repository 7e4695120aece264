# ABOUTME: Team offensive coverage analysis for a roster's selected moves.
# ABOUTME: Finds the best multiplier each member and the team reach against every defending type.

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

import polars as pl

from typecoverage.analysis.dataclasses import MalformedMoveContributionError, MoveContribution, Roster
from typecoverage.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    TYPES,
    PokeType,
    lookup,
)

logger = logging.getLogger(__name__)

# Threshold for 4x effectiveness (2x * 2x)
SUPER_EFFECTIVE_4X_THRESHOLD = 4.0

TEAM_ROW_LABEL = "Team"


class CoverageCategory(str, Enum):
    """Display bucket for the best multiplier a roster reaches against a defending type."""

    QUADRUPLE_SUPER_EFFECTIVE = "quadruple super effective"
    SUPER_EFFECTIVE = "super effective"
    NEUTRAL = "neutral"
    RESISTED = "resisted"
    NO_COVERAGE = "no coverage"


def classify_coverage(multiplier: float) -> CoverageCategory:
    """Classify a coverage multiplier into its display bucket.

    Args:
        multiplier: Best multiplier against a defending type.

    Returns:
        - >= 4 -> QUADRUPLE_SUPER_EFFECTIVE
        - >= 2 -> SUPER_EFFECTIVE
        - == 0 -> NO_COVERAGE
        - between 0 and 1 -> RESISTED
        - otherwise -> NEUTRAL

    Raises:
        ValueError: If the multiplier is negative.
    """
    if multiplier < IMMUNITY_VALUE:
        raise ValueError(f"Not a type effectiveness multiplier: {multiplier}")

    if multiplier >= SUPER_EFFECTIVE_4X_THRESHOLD:
        return CoverageCategory.QUADRUPLE_SUPER_EFFECTIVE
    if multiplier >= SUPER_EFFECTIVE_THRESHOLD:
        return CoverageCategory.SUPER_EFFECTIVE
    if multiplier == IMMUNITY_VALUE:
        return CoverageCategory.NO_COVERAGE
    if multiplier < NEUTRAL_VALUE:
        return CoverageCategory.RESISTED
    return CoverageCategory.NEUTRAL


def coverage_symbol(multiplier: float) -> str:
    """Short coverage chart label for a multiplier; neutral cells are left blank."""
    category = classify_coverage(multiplier)

    if category == CoverageCategory.QUADRUPLE_SUPER_EFFECTIVE:
        return "4×"
    if category == CoverageCategory.SUPER_EFFECTIVE:
        return "2×"
    if category == CoverageCategory.NO_COVERAGE:
        return "✕"
    if category == CoverageCategory.RESISTED:
        return "¼" if multiplier <= 0.25 else "½"
    return ""


def _damaging_move_types(moves: Sequence[MoveContribution]) -> list[PokeType]:
    """Resolve the attacking types of a member's damaging moves.

    Status moves are dropped. Moves with an unknown type are logged and dropped,
    which scores them as 0x against everything.
    """
    move_types: list[PokeType] = []
    for move in moves:
        if not move.is_damaging:
            continue
        try:
            move_types.append(move.resolve_type())
        except MalformedMoveContributionError as e:
            logger.warning("Ignoring move with unknown type %r in coverage analysis", e.value)
    return move_types


def member_offensive_coverage(moves: Sequence[MoveContribution]) -> dict[PokeType, float]:
    """Best multiplier one roster member reaches against each single defending type.

    Args:
        moves: The member's selected moves.

    Returns:
        Dict mapping each of the 18 defending types to the member's best multiplier.
        A member without damaging moves scores 0 everywhere.
    """
    move_types = _damaging_move_types(moves)

    if not move_types:
        return dict.fromkeys(TYPES, IMMUNITY_VALUE)

    return {
        def_type: max(lookup(atk_type, def_type).multiplier for atk_type in move_types) for def_type in TYPES
    }


def _best_per_type(member_rows: Sequence[Mapping[PokeType, float]]) -> dict[PokeType, float]:
    """Column-wise max over member coverage rows."""
    return {def_type: max((row[def_type] for row in member_rows), default=IMMUNITY_VALUE) for def_type in TYPES}


def team_offensive_coverage(roster: Roster) -> dict[PokeType, float]:
    """Best multiplier any roster member reaches against each single defending type.

    Each defending type is evaluated on its own; dual-type enemies are not simulated.

    Args:
        roster: List of members, each a list of selected moves.

    Returns:
        Dict mapping each of the 18 defending types to the team's best multiplier.
        An empty roster scores 0 everywhere.
    """
    return _best_per_type([member_offensive_coverage(moves) for moves in roster])


def uncovered_types(coverage: Mapping[PokeType, float]) -> list[PokeType]:
    """Return defending types the team cannot hit super effectively.

    Args:
        coverage: Result of team_offensive_coverage.

    Returns:
        Defending types whose best multiplier is below 2x, in chart order.
    """
    return [def_type for def_type in TYPES if coverage.get(def_type, IMMUNITY_VALUE) < SUPER_EFFECTIVE_THRESHOLD]


def coverage_frame(roster: Roster, member_names: Sequence[str] | None = None) -> pl.DataFrame:
    """Per-member coverage matrix with a final team row.

    Args:
        roster: List of members, each a list of selected moves.
        member_names: Display names for the members. Defaults to "Member 1", "Member 2", ...

    Returns:
        DataFrame with a "member" column followed by one Float64 column per
        defending type. The last row, labelled "Team", holds the team's best multipliers.

    Raises:
        ValueError: If member_names does not match the roster length.
    """
    if member_names is None:
        member_names = [f"Member {i}" for i in range(1, len(roster) + 1)]
    elif len(member_names) != len(roster):
        raise ValueError(f"Got {len(member_names)} member names for {len(roster)} roster members")

    schema: dict[str, Any] = {"member": pl.String, **{def_type.value: pl.Float64 for def_type in TYPES}}

    member_rows = [member_offensive_coverage(moves) for moves in roster]

    rows: list[dict[str, Any]] = []
    for name, coverage in zip(member_names, member_rows, strict=True):
        rows.append({"member": name, **{def_type.value: value for def_type, value in coverage.items()}})

    team_coverage = _best_per_type(member_rows)
    rows.append({"member": TEAM_ROW_LABEL, **{def_type.value: value for def_type, value in team_coverage.items()}})

    return pl.DataFrame(rows, schema=schema)
