from __future__ import annotations

import logging
import os
import uuid
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, FrozenSet, Iterable, Sequence, Tuple

from .scanner import Discovery, SourceFile


logger = logging.getLogger("flatfolders")

TokenFactory = Callable[[], str]


@dataclass(frozen=True, slots=True)
class FileMapping:
    old_path: Path
    new_path: Path


@dataclass(frozen=True, slots=True)
class Job:
    roots: Tuple[Path, ...]
    files: Tuple[SourceFile, ...]
    # Colliding base names, case-folded
    duplicates: FrozenSet[str]
    mappings: Tuple[FileMapping, ...]
    sub_directory_count: int

    @property
    def duplicate_file_count(self) -> int:
        return sum(1 for f in self.files if f.base_name.casefold() in self.duplicates)


def new_unique_suffix() -> str:
    return str(uuid.uuid4())


def find_collisions(files: Iterable[SourceFile]) -> FrozenSet[str]:
    counts = Counter(f.base_name.casefold() for f in files)
    return frozenset(name for name, n in counts.items() if n > 1)


def unique_name(base_name: str, token: str) -> str:
    stem, ext = os.path.splitext(base_name)
    return f"{stem}_{token}{ext}"


def plan_moves(
    files: Sequence[SourceFile],
    duplicates: FrozenSet[str],
    make_token: TokenFactory = new_unique_suffix,
) -> Tuple[FileMapping, ...]:
    mappings = []
    for f in files:
        if f.base_name.casefold() in duplicates:
            # Fresh token per file, even within one collision group
            name = unique_name(f.base_name, make_token())
        else:
            name = f.base_name
        mappings.append(FileMapping(old_path=f.full_path, new_path=f.root / name))
    return tuple(mappings)


def build_job(
    roots: Sequence[Path],
    discovery: Discovery,
    make_token: TokenFactory = new_unique_suffix,
) -> Job:
    duplicates = find_collisions(discovery.files)
    mappings = plan_moves(discovery.files, duplicates, make_token)
    if duplicates:
        logger.debug("Colliding file names: %s", ", ".join(sorted(duplicates)))
    return Job(
        roots=tuple(roots),
        files=discovery.files,
        duplicates=duplicates,
        mappings=mappings,
        sub_directory_count=discovery.sub_directory_count,
    )
