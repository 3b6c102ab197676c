"""Packing suitcases into a trunk, largest first, with optional rotation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple

from ..core.config import Config
from . import register_puzzle

EMPTY = "-"

Grid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Suitcase:
    width: int
    height: int
    name: str

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def rotated(self) -> "Suitcase":
        return Suitcase(self.height, self.width, self.name)


@register_puzzle
@dataclass(frozen=True)
class TrunkConfig(Config):
    """Trunk grid plus the suitcases still waiting to be packed.

    ``remaining`` is sorted ascending by area, so the next suitcase to place
    is always the last one.
    """
    width: int
    height: int
    grid: Grid
    remaining: Tuple[Suitcase, ...]

    name = "trunk"

    @classmethod
    def new(cls, width: int, height: int, suitcases: Iterable[Suitcase]) -> "TrunkConfig":
        """Empty trunk holding ``suitcases`` in processing order.

        Larger suitcases are packed first; among equal areas the one listed
        earlier goes first.
        """
        indexed = list(enumerate(suitcases))
        indexed.sort(key=lambda t: (t[1].area, -t[0]))
        grid = tuple(tuple(EMPTY for _ in range(width)) for _ in range(height))
        return cls(width, height, grid, tuple(s for _, s in indexed))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TrunkConfig":
        width = int(data["width"])
        height = int(data["height"])
        if width < 1 or height < 1:
            raise ValueError(f"trunk must be at least 1x1, got {width}x{height}")
        suitcases = []
        seen = set()
        for entry in data.get("suitcases", []):
            s = Suitcase(int(entry["width"]), int(entry["height"]), str(entry["name"]))
            if s.width < 1 or s.height < 1:
                raise ValueError(f"suitcase {s.name!r} must be at least 1x1")
            if len(s.name) != 1 or s.name.isspace():
                raise ValueError(f"suitcase label {s.name!r} must be a single character")
            if s.name in (EMPTY, "#"):
                raise ValueError(f"suitcase label {s.name!r} is reserved")
            if s.name in seen:
                raise ValueError(f"suitcase label {s.name!r} is used more than once")
            seen.add(s.name)
            suitcases.append(s)
        return cls.new(width, height, suitcases)

    def will_fit(self, suitcase: Suitcase, x: int, y: int) -> bool:
        """Whether ``suitcase`` fits with its top-left corner at column x, row y."""
        if x + suitcase.width > self.width or y + suitcase.height > self.height:
            return False
        return all(
            self.grid[r][c] == EMPTY
            for r in range(y, y + suitcase.height)
            for c in range(x, x + suitcase.width)
        )

    def place(self, suitcase: Suitcase, x: int, y: int) -> "TrunkConfig":
        """Copy of this trunk with ``suitcase`` stamped in and dropped from the queue."""
        rows = range(y, y + suitcase.height)
        cols = range(x, x + suitcase.width)
        grid = tuple(
            tuple(suitcase.name if r in rows and c in cols else cell for c, cell in enumerate(line))
            for r, line in enumerate(self.grid)
        )
        return TrunkConfig(self.width, self.height, grid, self.remaining[:-1])

    def successors(self) -> List["TrunkConfig"]:
        if not self.remaining:
            return []

        suitcase = self.remaining[-1]
        orientations = [suitcase] if suitcase.is_square else [suitcase, suitcase.rotated()]

        result = []
        for y in range(self.height):
            for x in range(self.width):
                for candidate in orientations:
                    if self.will_fit(candidate, x, y):
                        result.append(self.place(candidate, x, y))
        return result

    def is_valid(self) -> bool:
        # will_fit already refused every overlapping or out-of-bounds placement
        return True

    def is_goal(self) -> bool:
        # Empty cells may remain once every suitcase is packed
        return not self.remaining

    def empty_cells(self) -> int:
        return sum(cell == EMPTY for line in self.grid for cell in line)

    def placed_area(self) -> int:
        return self.width * self.height - self.empty_cells()

    def __str__(self) -> str:
        return "\n".join("".join(line) for line in self.grid)
