"""Command line entry point: ``labyrinth <command> ...``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analyzer import MazeAnalyzer
from .benchmark import aggregate_results, run_benchmark, write_csv
from .dataset import MazeDatasetGenerator
from .errors import MazeError
from .generator import GeneratorAlgorithm, generate
from .render import render_grid, save_image
from .solver import SolverAlgorithm, solve
from .textio import load_grid, save_grid

GENERATOR_CHOICES = [member.value for member in GeneratorAlgorithm]
SOLVER_CHOICES = [member.value for member in SolverAlgorithm]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="labyrinth", description="Generate, solve and analyze grid mazes")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    gen = commands.add_parser("generate", help="Generate a maze and print or save it as text")
    gen.add_argument("rows", type=int)
    gen.add_argument("cols", type=int)
    gen.add_argument("--algorithm", choices=GENERATOR_CHOICES, default=GeneratorAlgorithm.RECURSIVE_BACKTRACKING.value)
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--output", type=Path, default=None, help="Write the maze here instead of stdout")

    sol = commands.add_parser("solve", help="Solve a maze text file")
    sol.add_argument("maze", type=Path)
    sol.add_argument("--algorithm", choices=SOLVER_CHOICES, default=SolverAlgorithm.BFS.value)
    sol.add_argument("--output", type=Path, default=None, help="Write the solved maze text here")
    sol.add_argument("--json", action="store_true", help="Print the full result as JSON")

    ana = commands.add_parser("analyze", help="Compare all solvers on a maze text file")
    ana.add_argument("maze", type=Path)
    ana.add_argument("--runs", action="store_true", help="Also list each solver run")

    ren = commands.add_parser("render", help="Render a maze text file to an image")
    ren.add_argument("maze", type=Path)
    ren.add_argument("output", type=Path)
    ren.add_argument("--cell-size", type=int, default=16)
    ren.add_argument("--solver", choices=SOLVER_CHOICES, default=None, help="Overlay this solver's route")

    data = commands.add_parser("dataset", help="Generate a batch of mazes with images and metadata")
    data.add_argument("count", type=int, help="Number of mazes to generate")
    data.add_argument("--output-dir", type=Path, default=Path("data/mazes"), help="Where to save assets")
    data.add_argument("--rows", type=int, default=15)
    data.add_argument("--cols", type=int, default=15)
    data.add_argument("--algorithm", choices=GENERATOR_CHOICES, default=GeneratorAlgorithm.RECURSIVE_BACKTRACKING.value)
    data.add_argument("--solver", choices=SOLVER_CHOICES, default=SolverAlgorithm.BFS.value)
    data.add_argument("--cell-size", type=int, default=16)
    data.add_argument("--no-images", action="store_true", help="Skip PNG rendering")
    data.add_argument("--seed", type=int, default=None)

    bench = commands.add_parser("benchmark", help="Analyze many generated mazes per generator")
    bench.add_argument("--rows", type=int, default=25)
    bench.add_argument("--cols", type=int, default=25)
    bench.add_argument("--runs", type=int, default=10, help="Runs per generator")
    bench.add_argument("--algorithms", nargs="*", choices=GENERATOR_CHOICES, default=GENERATOR_CHOICES)
    bench.add_argument("--seed", type=int, default=None)
    bench.add_argument("--out-dir", type=Path, default=None, help="Also write raw and summary CSV files here")

    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    if args.command == "generate":
        grid = generate(args.rows, args.cols, args.algorithm, args.seed)
        if args.output is not None:
            save_grid(grid, args.output)
            print(f"Wrote {grid.rows}x{grid.cols} maze to {args.output}")
        else:
            print(grid.to_text())

    elif args.command == "solve":
        result = solve(load_grid(args.maze), args.algorithm)
        if args.output is not None:
            save_grid(result.grid, args.output)
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(result.grid.to_text())
            status = "found" if result.found else "no path"
            print(f"{result.algorithm}: {status}, steps={result.steps}, path_length={result.path_length}")

    elif args.command == "analyze":
        analyzer = MazeAnalyzer(load_grid(args.maze))
        payload = analyzer.analyze().to_dict()
        if args.runs:
            payload["runs"] = [run.to_dict() for run in analyzer.runs.values()]
        print(json.dumps(payload, indent=2))

    elif args.command == "render":
        grid = load_grid(args.maze)
        result = solve(grid, args.solver) if args.solver else None
        image = render_grid(
            result.grid if result is not None else grid,
            cell_size=args.cell_size,
            solution=result,
        )
        save_image(image, args.output)
        print(f"Wrote {args.output}")

    elif args.command == "dataset":
        generator = MazeDatasetGenerator(
            output_dir=args.output_dir,
            rows=args.rows,
            cols=args.cols,
            algorithm=args.algorithm,
            solver=args.solver,
            cell_size=args.cell_size,
            render_images=not args.no_images,
            seed=args.seed,
        )
        metadata_path = generator.output_dir / "mazes.json"
        records = generator.generate_dataset(args.count, metadata_path=metadata_path)
        print(f"Wrote {len(records)} mazes to {metadata_path}")

    elif args.command == "benchmark":
        raw = run_benchmark(args.rows, args.cols, algorithms=args.algorithms, runs=args.runs, seed=args.seed)
        summary = aggregate_results(raw)
        if args.out_dir is not None:
            write_csv(args.out_dir / "raw_results.csv", raw)
            write_csv(args.out_dir / "summary.csv", summary)
        print(json.dumps(summary, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        _run(args)
    except (MazeError, FileNotFoundError) as exc:
        print(f"labyrinth: error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
