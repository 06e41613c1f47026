from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence, Tuple

from .errors import DirectoryNotFoundError, OverlappingDirectoriesError


def reject_overlapping(roots: Sequence[Path]) -> None:
    # A root inside another root would be walked twice
    for i, inner in enumerate(roots):
        for j, outer in enumerate(roots):
            if i != j and inner.is_relative_to(outer):
                raise OverlappingDirectoriesError(
                    f"Directory {inner} is inside {outer}, terminating."
                )


def _resolve_directories(dirs: Iterable[str | Path]) -> Tuple[Path, ...]:
    resolved = []
    for d in dirs:
        p = Path(d).expanduser().resolve()
        if not p.exists() or not p.is_dir():
            raise DirectoryNotFoundError(f"Directory not found: {d}, terminating.")
        resolved.append(p)
    # Drop repeats so one directory is not flattened twice in a job
    unique = tuple(dict.fromkeys(resolved))
    reject_overlapping(unique)
    return unique


@dataclass(slots=True)
class Config:
    directories: Tuple[Path, ...]
    what_if: bool = False
    delete_sub_directories: bool = False
    # Ask before renaming/moving; never asked in what-if mode
    confirm: bool = False
    progress: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args) -> "Config":  # args: argparse.Namespace
        if getattr(args, "directories", None):
            raw = list(args.directories)
        elif getattr(args, "directory", None):
            raw = [args.directory]
        else:
            raw = [Path.cwd()]

        return cls(
            directories=_resolve_directories(raw),
            what_if=bool(getattr(args, "what_if", False)),
            delete_sub_directories=bool(getattr(args, "delete_sub_directories", False)),
            confirm=bool(getattr(args, "confirm", False)),
            progress=bool(getattr(args, "progress", False)),
            log_level=str(getattr(args, "log_level", "WARNING")).upper(),
        )
