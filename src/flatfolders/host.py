from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, NoReturn

from rich.console import Console
from rich.prompt import Confirm


logger = logging.getLogger("flatfolders")


@dataclass(slots=True)
class Host:
    """Capabilities the runner needs from whatever is driving it."""

    emit_result: Callable[[Any], None]
    prompt_yes_no: Callable[[str, str], bool]
    fail: Callable[[str], NoReturn]


def _fail(message: str) -> NoReturn:
    logger.error(message)
    raise SystemExit(1)


def console_host(console: Console | None = None) -> Host:
    # Plain output: report lines contain "[Parent 0]" which must not be read as markup
    console = console or Console(markup=False, highlight=False, soft_wrap=True, emoji=False)

    def emit_result(value: Any) -> None:
        console.print(value)

    def prompt_yes_no(header: str, question: str) -> bool:
        console.print(header)
        return Confirm.ask(question, console=console, default=True)

    return Host(emit_result=emit_result, prompt_yes_no=prompt_yes_no, fail=_fail)
