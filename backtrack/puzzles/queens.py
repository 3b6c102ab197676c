"""N-Queens placement, one column at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple

from ..core.config import Config
from ..settings import CFG
from . import register_puzzle

Board = Tuple[Tuple[bool, ...], ...]


@register_puzzle
@dataclass(frozen=True)
class QueensConfig(Config):
    """Board of queens plus the position of the most recently placed one."""
    board: Board
    row: int
    col: int

    name = "queens"

    @classmethod
    def new(cls, row: int = 0, col: int = 0, size: int = CFG.QUEENS_SIZE) -> "QueensConfig":
        """Start a board of ``size`` x ``size`` with a single queen at (row, col)."""
        board = tuple(
            tuple(r == row and c == col for c in range(size))
            for r in range(size)
        )
        return cls(board, row, col)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "QueensConfig":
        size = int(data.get("size", CFG.QUEENS_SIZE))
        row = int(data.get("row", 0))
        col = int(data.get("col", 0))
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"start ({row}, {col}) is off a {size}x{size} board")
        return cls.new(row, col, size)

    @property
    def size(self) -> int:
        return len(self.board)

    def place(self, row: int, col: int) -> "QueensConfig":
        """Copy of this board with one more queen at (row, col)."""
        board = tuple(
            line[:col] + (True,) + line[col + 1:] if r == row else line
            for r, line in enumerate(self.board)
        )
        return QueensConfig(board, row, col)

    def queens(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r, line in enumerate(self.board)
            for c, occupied in enumerate(line)
            if occupied
        ]

    def successors(self) -> List["QueensConfig"]:
        n = self.size
        new_col = (self.col + 1) % n
        # Wrapping around is only allowed while the left-most column is empty
        if new_col == 0 and any(line[0] for line in self.board):
            return []
        return [self.place(r, new_col) for r in range(n)]

    def is_valid(self) -> bool:
        n = self.size
        row, col = self.row, self.col

        for r in range(n):
            if r != row and self.board[r][col]:
                return False

        for c in range(n):
            if c != col and self.board[row][c]:
                return False

        for r in range(n):
            if r == row:
                continue
            offset = r - row
            for c in (col + offset, col - offset):
                if 0 <= c < n and self.board[r][c]:
                    return False

        return True

    def is_goal(self) -> bool:
        if not self.is_valid():
            return False
        return all(any(line) for line in self.board)

    def __str__(self) -> str:
        return "\n".join(
            " ".join("Q" if occupied else "-" for occupied in line)
            for line in self.board
        )
