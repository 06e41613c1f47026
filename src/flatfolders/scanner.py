from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from .config import reject_overlapping
from .errors import NoFilesFoundError, ScanError


logger = logging.getLogger("flatfolders")


@dataclass(frozen=True, slots=True)
class SourceFile:
    root: Path
    full_path: Path
    base_name: str


@dataclass(frozen=True, slots=True)
class Discovery:
    files: Tuple[SourceFile, ...]
    sub_directory_count: int


def _raise_scan_error(err: OSError) -> None:
    raise ScanError(f"Failed to scan {err.filename}: {err}") from err


def _walk_root(root: Path) -> Tuple[List[SourceFile], int]:
    files: List[SourceFile] = []
    sub_dirs = 0
    # Unreadable directories raise through onerror
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_scan_error):
        sub_dirs += len(dirnames)
        for name in filenames:
            p = Path(dirpath) / name
            try:
                is_file = p.is_file()
            except OSError as e:
                raise ScanError(f"Failed to scan {p}: {e}") from e
            if is_file:
                files.append(SourceFile(root=root, full_path=p, base_name=name))

    # Deterministic ordering within a root
    files.sort(key=lambda f: str(f.full_path).lower())
    return files, sub_dirs


def discover(roots: Sequence[Path]) -> Discovery:
    reject_overlapping(roots)
    files: List[SourceFile] = []
    sub_directory_count = 0
    for root in roots:
        root_files, root_dirs = _walk_root(root)
        logger.debug("Found %d files in %d sub-directories of %s", len(root_files), root_dirs, root)
        files.extend(root_files)
        sub_directory_count += root_dirs

    if not files:
        raise NoFilesFoundError("No files found, terminating.")

    return Discovery(files=tuple(files), sub_directory_count=sub_directory_count)
