from __future__ import annotations

from pathlib import Path


class FlattenError(Exception):
    """Base error for flatfolders. Every subclass terminates the run."""


class DirectoryNotFoundError(FlattenError):
    pass


class NoFilesFoundError(FlattenError):
    pass


class ScanError(FlattenError):
    pass


class MoveError(FlattenError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class OverlappingDirectoriesError(FlattenError):
    pass
