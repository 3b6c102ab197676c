"""Depth-first backtracking search over :class:`Config` states."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TypeVar

from .config import Config

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Config)


@dataclass
class SearchStats:
    """Counters describing one traversal.

    Attributes:
        nodes: Configurations examined by ``solve``
        pruned: Successors rejected by ``is_valid``
        backtracks: Subtrees exhausted without reaching a goal
    """
    nodes: int = 0
    pruned: int = 0
    backtracks: int = 0

    def __str__(self) -> str:
        return f"nodes={self.nodes} pruned={self.pruned} backtracks={self.backtracks}"


def solve(config: C, stats: Optional[SearchStats] = None) -> Optional[C]:
    """Search depth-first from ``config`` for the first goal configuration.

    Invalid successors are pruned before recursing into them, and the first
    goal found is returned without looking at the remaining siblings.

    Returns:
        The goal configuration, or ``None`` when the search space below
        ``config`` holds no solution.
    """
    solution = _search(config, stats)
    if solution is None:
        logger.debug("search exhausted without a solution (%s)", stats or "no stats")
    return solution


def _search(config: C, stats: Optional[SearchStats]) -> Optional[C]:
    if stats is not None:
        stats.nodes += 1

    if config.is_goal():
        logger.debug("goal reached: %s", type(config).__name__)
        return config

    for child in config.successors():
        if not child.is_valid():
            if stats is not None:
                stats.pruned += 1
            continue

        solution = _search(child, stats)
        if solution is not None:
            return solution

    if stats is not None:
        stats.backtracks += 1
    return None
