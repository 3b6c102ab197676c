from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..core.config import Config
from ..puzzles import build_puzzle
from ..puzzles.trunks import TrunkConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class PuzzleFormatError(ValueError):
    """A puzzle file that cannot be turned into an initial configuration."""

    def __init__(self, message: str, source: str = "<string>", line: int | None = None):
        self.source = source
        self.line = line
        where = f"{source}:{line}" if line is not None else source
        super().__init__(f"{where}: {message}")


def _ints(fields: List[str], source: str, lineno: int) -> List[int]:
    try:
        return [int(f) for f in fields]
    except ValueError as exc:
        raise PuzzleFormatError(f"expected integers, got {' '.join(fields)!r}", source, lineno) from exc


def parse_trunk(text: str, source: str = "<string>") -> TrunkConfig:
    """Parse the plain trunk format.

    The first line holds ``width height``; every following line holds
    ``label width height`` for one suitcase. Blank lines and lines starting
    with ``#`` are ignored.
    """
    data: Dict[str, Any] = {"puzzle": "trunk", "suitcases": []}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if "width" not in data:
            if len(fields) != 2:
                raise PuzzleFormatError("header must be 'width height'", source, lineno)
            data["width"], data["height"] = _ints(fields, source, lineno)
            continue
        if len(fields) != 3:
            raise PuzzleFormatError("suitcase line must be 'label width height'", source, lineno)
        width, height = _ints(fields[1:], source, lineno)
        data["suitcases"].append({"name": fields[0], "width": width, "height": height})

    if "width" not in data:
        raise PuzzleFormatError("missing 'width height' header", source)

    try:
        trunk = TrunkConfig.from_mapping(data)
    except ValueError as exc:
        raise PuzzleFormatError(str(exc), source) from exc
    logger.debug("parsed %dx%d trunk with %d suitcases from %s",
                 trunk.width, trunk.height, len(trunk.remaining), source)
    return trunk


def load_trunk(path: str | Path) -> TrunkConfig:
    """Load a trunk description in the plain text format."""
    path = Path(path)
    return parse_trunk(path.read_text(encoding="utf-8"), str(path))


def load_puzzle(path: str | Path) -> Config:
    """Load any puzzle file: YAML by suffix, otherwise the plain trunk format."""
    path = Path(path)
    if path.suffix.lower() not in YAML_SUFFIXES:
        return load_trunk(path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PuzzleFormatError(f"invalid YAML: {exc}", str(path)) from exc

    if not isinstance(data, dict):
        raise PuzzleFormatError("expected a mapping at the top level", str(path))

    try:
        config = build_puzzle(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise PuzzleFormatError(f"bad {data.get('puzzle', 'puzzle')} description: {exc}", str(path)) from exc
    logger.debug("loaded %s puzzle from %s", config.name, path)
    return config
