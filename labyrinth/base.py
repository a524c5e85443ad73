"""Output layout, seed stream and metadata file shared by maze batch builders."""

from __future__ import annotations

import json
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar, Union

from .errors import MetadataMismatch

PathLike = Union[str, Path]
RecordT = TypeVar("RecordT")

logger = logging.getLogger(__name__)


class AbstractDatasetGenerator(ABC, Generic[RecordT]):
    """Base class for builders that write mazes and their solutions to disk.

    Unsolved grids and their images go to ``<output_dir>/mazes``, solved ones
    to ``<output_dir>/solutions``. Every record gets its own 64-bit seed drawn
    from a single ``random.Random(seed)``, so a batch repeats exactly when the
    builder seed does. Seeds handed out so far are kept in :attr:`seeds`.

    Records must provide ``to_dict()``. The metadata file is one JSON list and
    every entry in it has to agree with :meth:`settings`, so batches built with
    different generators or sizes are never mixed in one file.
    """

    maze_subdir = "mazes"
    solution_subdir = "solutions"

    def __init__(self, output_dir: PathLike, *, seed: Optional[int] = None) -> None:
        self.output_dir = Path(output_dir)
        self.maze_dir = self.output_dir / self.maze_subdir
        self.solution_dir = self.output_dir / self.solution_subdir
        for directory in (self.maze_dir, self.solution_dir):
            directory.mkdir(parents=True, exist_ok=True)
        self.seed = seed
        self.seeds: List[int] = []
        self._rng = random.Random(seed)

    @abstractmethod
    def create_record(self, *, record_id: Optional[str] = None, seed: Optional[int] = None) -> RecordT:
        """Build one maze from ``seed`` (drawn from the batch stream when omitted)."""

    @abstractmethod
    def settings(self) -> Dict[str, Any]:
        """Serialized record fields that every record of this builder shares."""

    def create_random_record(self) -> RecordT:
        return self.create_record()

    def next_seed(self, seed: Optional[int] = None) -> int:
        if seed is None:
            seed = self._rng.getrandbits(64)
        self.seeds.append(seed)
        return seed

    def asset_paths(self, record_id: str) -> Dict[str, Path]:
        return {
            "maze": self.maze_dir / f"{record_id}.txt",
            "solution": self.solution_dir / f"{record_id}_solution.txt",
            "puzzle_image": self.maze_dir / f"{record_id}_puzzle.png",
            "solution_image": self.solution_dir / f"{record_id}_solution.png",
        }

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[RecordT]:
        if count < 0:
            raise ValueError("count must not be negative")
        records = [self.create_random_record() for _ in range(count)]
        if metadata_path is not None:
            self.write_metadata(records, metadata_path, append=append)
        return records

    def check_record(self, payload: Dict[str, Any]) -> None:
        """Raise :class:`MetadataMismatch` if ``payload`` was built with other settings."""

        for field, expected in self.settings().items():
            actual = payload.get(field)
            if actual != expected:
                raise MetadataMismatch(payload.get("id"), field, expected, actual)

    def write_metadata(
        self,
        records: Iterable[RecordT],
        metadata_path: PathLike,
        *,
        append: bool = True,
    ) -> Path:
        path = Path(metadata_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        existing: List[Dict[str, Any]] = []
        if append and path.exists():
            existing = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(existing, list):
                raise ValueError(f"Metadata file {path} must hold a list of records")
        payload = [record.to_dict() for record in records]
        for item in existing + payload:
            self.check_record(item)
        path.write_text(json.dumps(existing + payload, indent=2), encoding="utf-8")
        logger.info("Wrote %d new records to %s (%d total)", len(payload), path, len(existing) + len(payload))
        return path

    def relativize_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.output_dir).as_posix()
        except ValueError:
            return path.as_posix()


__all__ = [
    "AbstractDatasetGenerator",
    "PathLike",
]
