from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from .errors import MoveError
from .planner import FileMapping, Job


logger = logging.getLogger("flatfolders")


def move_file(mapping: FileMapping) -> bool:
    """Move one file to its planned location.

    Returns False when the file already sits at its target. An existing
    target is never overwritten.
    """
    if mapping.old_path == mapping.new_path:
        return False
    if mapping.new_path.exists():
        raise MoveError(f"Cannot move {mapping.old_path}: {mapping.new_path} already exists", mapping.old_path)
    try:
        shutil.move(str(mapping.old_path), str(mapping.new_path))
    except OSError as e:
        raise MoveError(f"Failed to move {mapping.old_path} -> {mapping.new_path}: {e}", mapping.old_path) from e
    logger.debug("%s -> %s", mapping.old_path, mapping.new_path)
    return True


def delete_sub_directories(roots: Iterable[Path]) -> int:
    removed = 0
    for root in roots:
        for child in sorted(root.iterdir()):
            if not child.is_dir() or child.is_symlink():
                continue
            try:
                shutil.rmtree(child)
            except OSError as e:
                raise MoveError(f"Failed to delete {child}: {e}", child) from e
            logger.debug("Deleted %s", child)
            removed += 1
    return removed


def execute(job: Job, delete_sub_dirs: bool = False, progress: bool = False) -> int:
    moved = 0
    for mapping in tqdm(job.mappings, total=len(job.mappings), desc="Moving", unit="file", disable=not progress):
        if move_file(mapping):
            moved += 1

    if delete_sub_dirs:
        removed = delete_sub_directories(job.roots)
        logger.debug("Deleted %d sub-directories", removed)

    logger.debug("Moved %d of %d files", moved, len(job.mappings))
    return moved
