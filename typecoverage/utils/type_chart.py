# ABOUTME: Pokemon type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Holds the read-only attacker x defender matrix and single-matchup lookups.

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0


class UnknownTypeError(ValueError):
    """Raised when a value is not one of the eighteen known types."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown type: {value!r}")


class PokeType(str, Enum):
    """One of the eighteen elemental types."""

    NORMAL = "Normal"
    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    ICE = "Ice"
    FIGHTING = "Fighting"
    POISON = "Poison"
    GROUND = "Ground"
    FLYING = "Flying"
    PSYCHIC = "Psychic"
    BUG = "Bug"
    ROCK = "Rock"
    GHOST = "Ghost"
    DRAGON = "Dragon"
    STEEL = "Steel"
    DARK = "Dark"
    FAIRY = "Fairy"

    def __str__(self) -> str:
        return self.value


class Effectiveness(Enum):
    """Qualitative result of a single attacker vs defender matchup."""

    IMMUNE = 0.0
    RESISTED = 0.5
    NEUTRAL = 1.0
    SUPER_EFFECTIVE = 2.0

    @property
    def multiplier(self) -> float:
        """Numeric damage multiplier for this matchup."""
        return float(self.value)


TYPES: tuple[PokeType, ...] = tuple(PokeType)

_TYPES_BY_KEY: dict[str, PokeType] = {t.value.lower(): t for t in PokeType}

_X = Effectiveness.IMMUNE
_R = Effectiveness.RESISTED
_N = Effectiveness.NEUTRAL
_S = Effectiveness.SUPER_EFFECTIVE

# Rows are attacking types, columns are defending types, both in TYPES order.
# fmt: off
_CHART_ROWS: tuple[tuple[Effectiveness, ...], ...] = (
    #  Nor Fir Wat Gra Ele Ice Fig Poi Gro Fly Psy Bug Roc Gho Dra Ste Dar Fai
    (_N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _R, _X, _N, _R, _N, _N),  # Normal
    (_N, _R, _R, _S, _N, _S, _N, _N, _N, _N, _N, _S, _R, _N, _R, _S, _N, _N),  # Fire
    (_N, _S, _R, _R, _N, _N, _N, _N, _S, _N, _N, _N, _S, _N, _R, _N, _N, _N),  # Water
    (_N, _R, _S, _R, _N, _N, _N, _R, _S, _R, _N, _R, _S, _N, _R, _R, _N, _N),  # Grass
    (_N, _N, _S, _R, _R, _N, _N, _N, _X, _S, _N, _N, _N, _N, _R, _N, _N, _N),  # Electric
    (_N, _R, _R, _S, _N, _R, _N, _N, _S, _S, _N, _N, _N, _N, _S, _R, _N, _N),  # Ice
    (_S, _N, _N, _N, _N, _S, _N, _R, _N, _R, _R, _R, _S, _X, _N, _S, _S, _R),  # Fighting
    (_N, _N, _N, _S, _N, _N, _N, _R, _R, _N, _N, _N, _R, _R, _N, _X, _N, _S),  # Poison
    (_N, _S, _N, _R, _S, _N, _N, _S, _N, _X, _N, _R, _S, _N, _N, _S, _N, _N),  # Ground
    (_N, _N, _N, _S, _R, _N, _S, _N, _N, _N, _N, _S, _R, _N, _N, _R, _N, _N),  # Flying
    (_N, _N, _N, _N, _N, _N, _S, _S, _N, _N, _R, _N, _N, _N, _N, _R, _X, _N),  # Psychic
    (_N, _R, _N, _S, _N, _N, _R, _R, _N, _R, _S, _N, _N, _R, _N, _R, _S, _R),  # Bug
    (_N, _S, _N, _N, _N, _S, _R, _N, _R, _S, _N, _S, _N, _N, _N, _R, _N, _N),  # Rock
    (_X, _N, _N, _N, _N, _N, _N, _N, _N, _N, _S, _N, _N, _S, _N, _N, _R, _N),  # Ghost
    (_N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _N, _S, _R, _N, _X),  # Dragon
    (_N, _R, _R, _N, _R, _S, _N, _N, _N, _N, _N, _N, _S, _N, _N, _R, _N, _S),  # Steel
    (_N, _N, _N, _N, _N, _N, _R, _N, _N, _N, _S, _N, _N, _S, _N, _N, _R, _R),  # Dark
    (_N, _R, _N, _N, _N, _N, _S, _R, _N, _N, _N, _N, _N, _N, _S, _R, _S, _N),  # Fairy
)
# fmt: on


def _build_chart(
    rows: Sequence[Sequence[Effectiveness]],
) -> Mapping[PokeType, Mapping[PokeType, Effectiveness]]:
    """Build the read-only nested chart from the row literal.

    Args:
        rows: One row per attacking type, each with one entry per defending type.

    Returns:
        Read-only mapping of attacking type to defending type to effectiveness.

    Raises:
        ValueError: If the grid does not cover every attacker/defender pair.
    """
    if len(rows) != len(TYPES):
        raise ValueError(f"Type chart has {len(rows)} rows, expected {len(TYPES)}")

    chart: dict[PokeType, Mapping[PokeType, Effectiveness]] = {}
    for atk_type, row in zip(TYPES, rows, strict=True):
        if len(row) != len(TYPES):
            raise ValueError(f"Type chart row for {atk_type} has {len(row)} entries, expected {len(TYPES)}")
        chart[atk_type] = MappingProxyType(dict(zip(TYPES, row, strict=True)))

    return MappingProxyType(chart)


# 18x18 effectiveness matrix: EFFECTIVENESS[attacking_type][defending_type]
EFFECTIVENESS: Mapping[PokeType, Mapping[PokeType, Effectiveness]] = _build_chart(_CHART_ROWS)


def as_type(value: PokeType | str) -> PokeType:
    """Convert an exact type name to its PokeType member.

    Args:
        value: A PokeType, or a string equal to a type's title-case name.

    Returns:
        The matching PokeType.

    Raises:
        UnknownTypeError: If the value does not exactly name one of the 18 types.
    """
    if isinstance(value, PokeType):
        return value
    try:
        return PokeType(value)
    except ValueError:
        raise UnknownTypeError(value) from None


def parse_type(raw: object) -> PokeType:
    """Normalize free-text type input (any casing, surrounding whitespace) to a PokeType.

    Examples:
        >>> parse_type("fire")
        <PokeType.FIRE: 'Fire'>
        >>> parse_type("  GHOST ")
        <PokeType.GHOST: 'Ghost'>

    Raises:
        UnknownTypeError: If the text does not name one of the 18 types.
    """
    if isinstance(raw, PokeType):
        return raw
    if not isinstance(raw, str):
        raise UnknownTypeError(raw)

    poke_type = _TYPES_BY_KEY.get(raw.strip().lower())
    if poke_type is None:
        raise UnknownTypeError(raw)
    return poke_type


def lookup(atk_type: PokeType | str, def_type: PokeType | str) -> Effectiveness:
    """Look up how effective one attacking type is against one defending type.

    Args:
        atk_type: The attacking type (e.g., PokeType.FIRE or "Fire").
        def_type: The defending type.

    Returns:
        The qualitative effectiveness of the matchup.

    Raises:
        UnknownTypeError: If either argument is not one of the 18 types.
    """
    return EFFECTIVENESS[as_type(atk_type)][as_type(def_type)]
