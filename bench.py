"""Benchmark the trunk solver on the sample inputs.

Each trunk file is read once up front so that only ``solve`` is timed.
Every file is then solved ``--repeat`` times and the best and mean wall
times are reported, together with whether a packing exists::

    python bench.py
    python bench.py --repeat 50 data/default-1.txt data/3-3-cannot.txt
"""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

from backtrack.core.backtracker import SearchStats, solve
from backtrack.io.parser import load_trunk
from backtrack.puzzles.trunks import TrunkConfig
from backtrack.settings import CFG


@dataclass
class BenchResult:
    name: str
    solved: bool
    nodes: int
    best_sec: float
    mean_sec: float


def bench_trunk(name: str, trunk: TrunkConfig, repeat: int) -> BenchResult:
    """Time ``solve`` on ``trunk`` ``repeat`` times."""
    stats = SearchStats()
    solved = solve(trunk, stats) is not None

    timings: List[float] = []
    for _ in range(repeat):
        start = time.perf_counter()
        solve(trunk)
        timings.append(time.perf_counter() - start)

    return BenchResult(
        name=name,
        solved=solved,
        nodes=stats.nodes,
        best_sec=min(timings),
        mean_sec=sum(timings) / len(timings),
    )


def _sample_files(data_dir: Path) -> List[Path]:
    return sorted(data_dir.glob("*.txt"))


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time the trunk solver on sample inputs.")
    parser.add_argument("files", nargs="*", type=Path, help="Trunk files; every *.txt under --data-dir if omitted")
    parser.add_argument("--data-dir", type=Path, default=Path(CFG.DATA_DIR), help="Directory of sample trunks")
    parser.add_argument("--repeat", type=int, default=CFG.BENCH_REPEAT, help="Timed runs per file")
    args = parser.parse_args(argv)

    if args.repeat < 1:
        raise SystemExit("--repeat must be at least 1")

    files = args.files or _sample_files(args.data_dir)
    if not files:
        raise SystemExit(f"No trunk files found in {args.data_dir}")

    trunks = [(path.name, load_trunk(path)) for path in files]

    print(f"{'file':<24} {'solved':>6} {'nodes':>8} {'best ms':>10} {'mean ms':>10}")
    for name, trunk in trunks:
        r = bench_trunk(name, trunk, args.repeat)
        print(f"{r.name:<24} {'yes' if r.solved else 'no':>6} {r.nodes:>8} "
              f"{r.best_sec * 1000:>10.3f} {r.mean_sec * 1000:>10.3f}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
