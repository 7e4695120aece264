"""ABOUTME: Data classes for team coverage analysis.
ABOUTME: Contains MoveCategory, MoveContribution, and the Roster alias."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from typecoverage.utils.type_chart import PokeType, UnknownTypeError, parse_type


class MalformedMoveContributionError(UnknownTypeError):
    """A roster move whose attacking type is not one of the 18 types."""


class MoveCategory(str, Enum):
    """Damage category of a move."""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"

    def __str__(self) -> str:
        return self.value


def parse_category(raw: object) -> MoveCategory:
    """Normalize free-text move category input (e.g. "status", "Physical") to a MoveCategory.

    Raises:
        ValueError: If the text is not a known category.
    """
    if isinstance(raw, MoveCategory):
        return raw
    if isinstance(raw, str):
        key = raw.strip().lower()
        for category in MoveCategory:
            if category.value.lower() == key:
                return category
    raise ValueError(f"Unknown move category: {raw!r}")


@dataclass(frozen=True)
class MoveContribution:
    """A selected move as seen by coverage analysis.

    Attributes:
        move_type: Attacking type of the move. Raw upstream text is accepted as-is
            and only resolved when the move is scored.
        category: Physical, Special, or Status. Category text such as "status" is
            normalized on construction.

    Raises:
        ValueError: If the category is not a known move category.
    """

    move_type: PokeType | str
    category: MoveCategory

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", parse_category(self.category))

    @property
    def is_damaging(self) -> bool:
        """Whether the move deals direct damage (Physical or Special)."""
        return self.category != MoveCategory.STATUS

    def resolve_type(self) -> PokeType:
        """Return the attacking type as a PokeType.

        Raises:
            MalformedMoveContributionError: If the move type is not one of the 18 types.
        """
        try:
            return parse_type(self.move_type)
        except UnknownTypeError:
            raise MalformedMoveContributionError(self.move_type) from None


# A roster is a list of members, each a list of the member's selected moves.
Roster = Sequence[Sequence[MoveContribution]]
