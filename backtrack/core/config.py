"""Configuration contract shared by every searchable puzzle state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping


class Config(ABC):
    """A snapshot of partial progress toward a solution.

    Concrete configurations are immutable: ``successors`` always builds new
    snapshots and never touches ``self``.
    """
    name: str = "config"

    @abstractmethod
    def successors(self) -> List["Config"]:
        """Every extension of this state by exactly one placement.

        The result is not filtered for validity; the search engine prunes
        with ``is_valid``. An empty list means there is nothing left to try.
        """

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the most recent placement is consistent.

        Earlier placements are assumed to have been validated already, so
        only the newest one needs checking.
        """

    @abstractmethod
    def is_goal(self) -> bool:
        """Whether this state is a complete solution. Goal implies valid."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build an initial configuration from a puzzle description mapping."""
        raise NotImplementedError(f"{cls.__name__} cannot be loaded from a mapping")
