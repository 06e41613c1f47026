import io
import logging

import pytest
from rich.console import Console

from flatfolders import host


def make_console(buf):
    return Console(file=buf, markup=False, highlight=False, soft_wrap=True, width=40)


def test_emit_result_prints_placeholders_verbatim():
    buf = io.StringIO()
    h = host.console_host(make_console(buf))

    h.emit_result("[Parent 0] = /a/very/long/path/that/is/wider/than/the/console")
    h.emit_result("")

    assert buf.getvalue() == "[Parent 0] = /a/very/long/path/that/is/wider/than/the/console\n\n"


def test_prompt_yes_no_shows_header_and_asks(monkeypatch):
    buf = io.StringIO()
    asked = []

    def fake_ask(question, console=None, default=None):
        asked.append((question, default))
        return False

    monkeypatch.setattr(host.Confirm, "ask", fake_ask)
    h = host.console_host(make_console(buf))

    assert h.prompt_yes_no("About to move 3 files", "Continue?") is False
    assert buf.getvalue() == "About to move 3 files\n"
    assert asked == [("Continue?", True)]


def test_fail_logs_and_exits(caplog):
    h = host.console_host(make_console(io.StringIO()))

    with caplog.at_level(logging.ERROR, logger="flatfolders"):
        with pytest.raises(SystemExit) as exc:
            h.fail("No files found, terminating.")

    assert exc.value.code == 1
    assert "No files found, terminating." in caplog.text
