# ABOUTME: Analysis package for type matchup calculations.
# ABOUTME: Contains dual-type effectiveness, defensive profiles, and team offensive coverage.

from typecoverage.analysis.coverage import (
    CoverageCategory,
    classify_coverage,
    coverage_frame,
    coverage_symbol,
    member_offensive_coverage,
    team_offensive_coverage,
    uncovered_types,
)
from typecoverage.analysis.dataclasses import (
    MalformedMoveContributionError,
    MoveCategory,
    MoveContribution,
    Roster,
    parse_category,
)
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

__all__ = [
    "CoverageCategory",
    "DefensiveCategory",
    "MalformedMoveContributionError",
    "MoveCategory",
    "MoveContribution",
    "Roster",
    "classify_coverage",
    "classify_defensive",
    "coverage_frame",
    "coverage_symbol",
    "defensive_profile",
    "dual_effectiveness",
    "dual_type_chart",
    "dual_type_chart_frame",
    "get_immunities",
    "get_neutral",
    "get_resistances",
    "get_weaknesses",
    "member_offensive_coverage",
    "parse_category",
    "team_offensive_coverage",
    "uncovered_types",
]
