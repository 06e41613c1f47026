from __future__ import annotations

import logging

from .config import Config
from .host import Host, console_host
from .mover import execute
from .planner import Job, TokenFactory, build_job, new_unique_suffix
from .reporter import build_report, plural
from .scanner import discover


logger = logging.getLogger("flatfolders")


def _confirmed(job: Job, config: Config, host: Host) -> bool:
    if job.duplicates:
        header = (
            f"{job.duplicate_file_count} files with the same name were found. "
            "These files will have a guid appended to the file name to make them unique."
        )
        if not host.prompt_yes_no(header, "Are you happy to continue?"):
            return False

    header = (
        f"You are about to move {plural(len(job.files), 'file', 'files')} from "
        f"{plural(job.sub_directory_count, 'sub-directory', 'sub-directories')} into "
        f"{plural(len(job.roots), 'parent directory', 'parent directories')}"
    )
    if config.delete_sub_directories:
        header += " and delete all sub-directories"
    return host.prompt_yes_no(header, "Are you sure you want to continue?")


def run(config: Config, host: Host | None = None, make_token: TokenFactory = new_unique_suffix) -> int:
    host = host or console_host()

    discovery = discover(config.directories)
    job = build_job(config.directories, discovery, make_token)
    logger.debug(
        "Planned %d moves (%d colliding names) across %d parent directories",
        len(job.mappings),
        len(job.duplicates),
        len(job.roots),
    )

    if config.what_if:
        for line in build_report(job, config.delete_sub_directories):
            host.emit_result(line)
        return 0

    if config.confirm and not _confirmed(job, config, host):
        logger.debug("Cancelled by user, nothing moved")
        return 1

    execute(job, delete_sub_dirs=config.delete_sub_directories, progress=config.progress)
    return 0
