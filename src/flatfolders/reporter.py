from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence, Tuple

from .planner import Job


OLD_HEADER = "Old file"
NEW_HEADER = "New file"
CAPTION = "The following file moves would be made:"


def plural(count: int, singular: str, plural_form: str) -> str:
    return f"{count} {singular if count == 1 else plural_form}"


def placeholder(index: int) -> str:
    return f"[Parent {index}]"


def abbreviate(path: Path | str, placeholders: Sequence[Tuple[str, str]]) -> str:
    text = str(path)
    for root, token in placeholders:
        if text == root:
            return token
        # Leading prefix only, so a "/" root leaves inner separators alone
        prefix = root if root.endswith(os.sep) else root + os.sep
        if text.startswith(prefix):
            return token + os.sep + text[len(prefix):]
    return text


def summary_line(job: Job, delete_sub_directories: bool = False) -> str:
    line = (
        f"{plural(len(job.files), 'file', 'files')} would be moved from "
        f"{plural(job.sub_directory_count, 'sub-directory', 'sub-directories')} into "
        f"{plural(len(job.roots), 'parent directory', 'parent directories')}"
    )
    if delete_sub_directories:
        line += " and all sub-directories would be deleted"
    return line


def _table(rows: List[Tuple[str, str]]) -> List[str]:
    old_w = max([len(OLD_HEADER)] + [len(o) for o, _ in rows])
    new_w = max([len(NEW_HEADER)] + [len(n) for _, n in rows])
    border = "=" * (old_w + new_w + 7)
    out = [
        border,
        f"| {OLD_HEADER:<{old_w}} | {NEW_HEADER:<{new_w}} |",
        f"|{'-' * (old_w + 2)}|{'-' * (new_w + 2)}|",
    ]
    out.extend(f"| {o:<{old_w}} | {n:<{new_w}} |" for o, n in rows)
    out.append(border)
    return out


def build_report(job: Job, delete_sub_directories: bool = False) -> List[str]:
    """Render the what-if report for a planned job as a list of lines.

    Root directories are shown once in a legend and abbreviated to their
    ``[Parent <i>]`` placeholder at the start of every table cell. Longer
    roots are tried first so a nested root wins over its ancestor.
    """
    legend = [(str(root), placeholder(i)) for i, root in enumerate(job.roots)]
    by_length = sorted(legend, key=lambda item: len(item[0]), reverse=True)

    rows = [(abbreviate(m.old_path, by_length), abbreviate(m.new_path, by_length)) for m in job.mappings]

    lines = ["", summary_line(job, delete_sub_directories), "", CAPTION, ""]
    lines.extend(f"{token} = {root}" for root, token in legend)
    lines.append("")
    lines.extend(_table(rows))
    lines.append("")
    return lines
