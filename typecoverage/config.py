"""ABOUTME: Configuration loaders for roster files.
ABOUTME: Handles loading, validating, and converting roster YAML files for coverage analysis."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from typecoverage.analysis.dataclasses import MoveCategory, MoveContribution, parse_category
from typecoverage.settings import settings


class MoveConfig(BaseModel):
    """A single selected move of a roster member."""

    name: str | None = None
    type: str
    category: MoveCategory

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: object) -> MoveCategory:
        return parse_category(value)

    def to_contribution(self) -> MoveContribution:
        """Convert to the MoveContribution used by coverage analysis.

        The type is passed through untouched so that unknown types are handled
        by the analysis instead of rejecting the whole file.
        """
        return MoveContribution(move_type=self.type, category=self.category)


class MemberConfig(BaseModel):
    """A roster member and its selected moves."""

    name: str
    moves: list[MoveConfig] = Field(default_factory=list)

    @field_validator("moves")
    @classmethod
    def _check_move_count(cls, value: list[MoveConfig]) -> list[MoveConfig]:
        if len(value) > settings.MAX_MOVES_PER_MEMBER:
            raise ValueError(f"A member can have at most {settings.MAX_MOVES_PER_MEMBER} moves, got {len(value)}")
        return value


class RosterConfig(BaseModel):
    """A team roster as read from a roster file."""

    members: list[MemberConfig]

    @field_validator("members")
    @classmethod
    def _check_member_count(cls, value: list[MemberConfig]) -> list[MemberConfig]:
        if len(value) > settings.MAX_ROSTER_SIZE:
            raise ValueError(f"A roster can have at most {settings.MAX_ROSTER_SIZE} members, got {len(value)}")
        return value

    def get_member_names(self) -> list[str]:
        """Return member names in roster order."""
        return [member.name for member in self.members]

    def to_roster(self) -> list[list[MoveContribution]]:
        """Return the roster as nested move contributions, one list per member."""
        return [[move.to_contribution() for move in member.moves] for member in self.members]


def load_roster(config_path: Path) -> RosterConfig:
    """Load a roster from a YAML file.

    Args:
        config_path: Path to the roster file.

    Returns:
        Parsed RosterConfig object.

    Raises:
        FileNotFoundError: If the roster file doesn't exist.
        pydantic.ValidationError: If the roster file is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Roster file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    return RosterConfig.model_validate(raw_config)
