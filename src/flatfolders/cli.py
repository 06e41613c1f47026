from __future__ import annotations

import argparse
import logging
from logging import Logger

from rich.logging import RichHandler

from .config import Config
from .errors import FlattenError
from .host import Host, console_host
from .runner import run


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="flatfolders",
        description=(
            "Move files from all sub-directories into their parent directory. "
            "Files with duplicate names get a guid appended to make them unique."
        ),
    )
    target = p.add_mutually_exclusive_group()
    target.add_argument("-d", "--directory", type=str, default=None, help="Parent directory to flatten (defaults to the current directory)")
    target.add_argument("--directories", type=str, nargs="+", default=None, help="Several parent directories to flatten in one job")
    p.add_argument("-w", "--what-if", action="store_true", help="Show the planned moves but do not modify files")
    p.add_argument("-s", "--delete-sub-directories", action="store_true", help="Delete all sub-directories once every file has been moved")
    p.add_argument("-c", "--confirm", action="store_true", help="Ask for confirmation before renaming and moving files")
    p.add_argument("--progress", action="store_true", help="Show a progress bar while moving files")
    p.add_argument("--log-level", type=str, default="WARNING", help="Logging level: DEBUG/INFO/WARN/ERROR")
    return p


def _setup_logging(level: str) -> Logger:
    lvl = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=lvl,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_level=True)],
    )
    logger = logging.getLogger("flatfolders")
    logger.setLevel(lvl)
    return logger


def main(argv: list[str] | None = None, host: Host | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    host = host or console_host()
    try:
        cfg = Config.from_args(args)
        return run(cfg, host)
    except FlattenError as e:
        host.fail(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
