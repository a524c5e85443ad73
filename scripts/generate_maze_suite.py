#!/usr/bin/env python3
"""Generate mazes with every generator and sort metadata by difficulty."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from labyrinth.dataset import MazeDatasetGenerator
from labyrinth.generator import GeneratorAlgorithm


def _difficulty(record: dict) -> float:
    """Shortest route length weighted by how far depth-first search strays from it."""

    stats = record["stats"]
    complexity = stats.get("complexity") or 1.0
    return stats["bfs_path_length"] * complexity


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=5, help="Mazes per generator")
    parser.add_argument("--rows", type=int, default=21)
    parser.add_argument("--cols", type=int, default=21)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/maze_suite"),
        help="Directory to write maze assets",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="Optional path for the difficulty-sorted metadata JSON",
    )
    parser.add_argument("--cell-size", type=int, default=16, help="Pixel size of one cell")
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    records: List[dict] = []
    for offset, algorithm in enumerate(GeneratorAlgorithm):
        generator = MazeDatasetGenerator(
            output_dir=args.output_dir / algorithm.value,
            rows=args.rows,
            cols=args.cols,
            algorithm=algorithm,
            cell_size=args.cell_size,
            seed=None if args.seed is None else args.seed + offset,
        )
        for index in range(1, args.count + 1):
            record = generator.create_random_record().to_dict()
            record["difficulty"] = _difficulty(record)
            records.append(record)
            print(f"[{algorithm.value} {index}/{args.count}] generated {record['id']} (difficulty={record['difficulty']:.2f})")

    records.sort(key=lambda item: (item["difficulty"], item["id"]))

    metadata_path = args.metadata or (args.output_dir / "mazes.json")
    metadata_path.parent.mkdir(parents=True, exist_ok=True)
    metadata_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    print(f"Wrote {len(records)} mazes to {metadata_path}")


if __name__ == "__main__":
    main()
