# ABOUTME: Utils package for typecoverage utility functions.
# ABOUTME: Contains the type chart and its lookup helpers.

from typecoverage.utils.type_chart import (
    EFFECTIVENESS,
    TYPES,
    Effectiveness,
    PokeType,
    UnknownTypeError,
    as_type,
    lookup,
    parse_type,
)

__all__ = [
    "EFFECTIVENESS",
    "TYPES",
    "Effectiveness",
    "PokeType",
    "UnknownTypeError",
    "as_type",
    "lookup",
    "parse_type",
]
