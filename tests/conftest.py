from pathlib import Path

import pytest

FILES = [
    "dir/foo",
    "dir/bar",
    "outer/inner/readme.md",
    ".dot.txt",
    "a.txt",
    "b.txt",
    "c.txt",
    "readme.md",
]


@pytest.fixture
def filetree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory with FILES, used as the current working directory"""
    for file in FILES:
        path = tmp_path / file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    monkeypatch.chdir(tmp_path)
    return tmp_path
