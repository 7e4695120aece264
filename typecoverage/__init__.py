"""ABOUTME: Type effectiveness engine for Pokemon team building.
ABOUTME: Type chart lookups, dual-type multipliers, and team offensive coverage."""

__version__ = "0.1.0"
