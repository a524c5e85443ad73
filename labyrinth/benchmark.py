"""Repeated generate-and-analyze runs with per-generator summaries."""

from __future__ import annotations

import csv
import logging
import random
import statistics
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .analyzer import analyze
from .base import PathLike
from .generator import GeneratorAlgorithm, generate, resolve_generator

logger = logging.getLogger(__name__)

METRICS = (
    "wall_ratio",
    "straight_line_distance",
    "bfs_path_length",
    "dfs_path_length",
    "astar_path_length",
    "bfs_steps",
    "dfs_steps",
    "astar_steps",
    "bfs_duration_ms",
    "dfs_duration_ms",
    "astar_duration_ms",
    "path_efficiency",
    "complexity",
)


def run_single(
    rows: int,
    cols: int,
    algorithm: Union[GeneratorAlgorithm, str],
    seed: int,
) -> Dict[str, object]:
    choice = resolve_generator(algorithm)
    grid = generate(rows, cols, choice, seed)
    result: Dict[str, object] = {"algorithm": choice.value, "seed": seed}
    result.update(analyze(grid).to_dict())
    return result


def run_benchmark(
    rows: int,
    cols: int,
    *,
    algorithms: Optional[Sequence[Union[GeneratorAlgorithm, str]]] = None,
    runs: int = 10,
    seed: Optional[int] = None,
) -> List[Dict[str, object]]:
    """Analyze ``runs`` fresh mazes per generator; seeds are drawn from ``seed``."""

    if runs < 1:
        raise ValueError("runs must be at least 1")
    choices = [resolve_generator(a) for a in (algorithms or list(GeneratorAlgorithm))]
    rng = random.Random(seed)
    rows_out: List[Dict[str, object]] = []
    for choice in choices:
        for index in range(runs):
            run_seed = rng.getrandbits(64)
            rows_out.append(run_single(rows, cols, choice, run_seed))
            logger.debug("%s run %d/%d done (seed=%d)", choice.value, index + 1, runs, run_seed)
    return rows_out


def aggregate_results(rows: Iterable[Dict[str, object]], group_by: str = "algorithm") -> List[Dict[str, object]]:
    """Summarize each metric as avg/min/max/stdev per group.

    Undefined ratios (``None``) are left out of their metric's summary.
    """

    grouped: Dict[object, List[Dict[str, object]]] = {}
    for row in rows:
        grouped.setdefault(row[group_by], []).append(row)

    def agg_stat(values: List[float]) -> Dict[str, Optional[float]]:
        if not values:
            return {"avg": None, "min": None, "max": None, "stdev": None}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0.0,
        }

    summary: List[Dict[str, object]] = []
    for key, items in grouped.items():
        entry: Dict[str, object] = {group_by: key, "count": len(items)}
        for metric in METRICS:
            values = [item[metric] for item in items if item.get(metric) is not None]
            for stat_name, value in agg_stat(values).items():
                entry[f"{metric}_{stat_name}"] = value
        entry["solvable_rate"] = sum(1 for item in items if item["solvable"]) / len(items)
        summary.append(entry)
    return summary


def write_csv(path: PathLike, rows: Sequence[Dict[str, object]]) -> Optional[Path]:
    if not rows:
        return None
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return target


__all__ = ["METRICS", "aggregate_results", "run_benchmark", "run_single", "write_csv"]
