"""Puzzle registry and shared loading hooks."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type

from ..core.config import Config


PUZZLE_REGISTRY: Dict[str, Type[Config]] = {}


def register_puzzle(cls: Type[Config]) -> Type[Config]:
    if cls.from_mapping.__func__ is Config.from_mapping.__func__:
        raise TypeError(f"{cls.__name__} must define from_mapping to be registered")
    PUZZLE_REGISTRY[cls.name] = cls
    return cls


def build_puzzle(data: Mapping[str, Any]) -> Config:
    """Build an initial configuration from a mapping with a ``puzzle`` key."""
    kind = str(data.get("puzzle", "")).lower()
    if kind not in PUZZLE_REGISTRY:
        available = ", ".join(sorted(PUZZLE_REGISTRY))
        raise ValueError(f"Unknown puzzle: {kind!r}. Available: {available}")
    return PUZZLE_REGISTRY[kind].from_mapping(data)


# Import puzzle modules to register them
from . import queens, trunks  # noqa: E402,F401
