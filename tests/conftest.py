from pathlib import Path

import pytest

from flatfolders.host import Host

LAYOUT = {
    "a": {
        "a": ["Duplicate.txt", "X.txt"],
        "b": ["Duplicate.txt", "Y.txt"],
        "c": ["Z.txt"],
    },
    "b": {
        "a": ["Duplicate.txt", "W.txt"],
        "b": ["V.txt"],
    },
    "c": {},
}


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    for parent, subs in LAYOUT.items():
        (root / parent).mkdir()
        for sub, files in subs.items():
            (root / parent / sub).mkdir()
            for name in files:
                (root / parent / sub / name).write_text(f"{parent}/{sub}/{name}")
    return root


def snapshot(*roots: Path) -> list[tuple[str, bytes]]:
    out = []
    for root in roots:
        for p in sorted(root.rglob("*")):
            out.append((str(p), p.read_bytes() if p.is_file() else b"<dir>"))
    return out


class FakeHost:
    def __init__(self, answers=None):
        self.emitted: list = []
        self.prompts: list[tuple[str, str]] = []
        self.answers = list(answers or [])

    def emit_result(self, value):
        self.emitted.append(value)

    def prompt_yes_no(self, header, question):
        self.prompts.append((header, question))
        return self.answers.pop(0) if self.answers else True

    def fail(self, message):
        self.emitted.append(message)
        raise SystemExit(1)

    def as_host(self) -> Host:
        return Host(emit_result=self.emit_result, prompt_yes_no=self.prompt_yes_no, fail=self.fail)


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def tokens():
    n = iter(range(1, 10_000))
    return lambda: f"00000000-0000-0000-0000-{next(n):012d}"
