import os

import pytest

from shellcomp.args import Args
from shellcomp.predict_files import (
    FilesPredictor,
    Mode,
    dirs,
    files,
    fix_path_form,
    match_file,
)

DIRS = {
    "*": {
        "di": ["dir/"],
        "dir": ["dir/"],
        "dir/": ["dir/"],
        "./di": ["./dir/"],
        "./dir": ["./dir/"],
        "./dir/": ["./dir/"],
        "": ["./", "dir/", "outer/"],
        ".": ["./", "./dir/", "./outer/"],
        "./": ["./", "./dir/", "./outer/"],
    },
    "*.md": {
        "ou": ["outer/", "outer/inner/"],
        "outer": ["outer/", "outer/inner/"],
        "outer/": ["outer/", "outer/inner/"],
        "./ou": ["./outer/", "./outer/inner/"],
        "./outer": ["./outer/", "./outer/inner/"],
        "./outer/": ["./outer/", "./outer/inner/"],
    },
    "dir": {
        "di": ["dir/"],
        "dir": ["dir/"],
        "dir/": ["dir/"],
        "./di": ["./dir/"],
        "./dir": ["./dir/"],
        "./dir/": ["./dir/"],
    },
}

FILES = {
    "*.txt": {
        "": ["./", "dir/", "outer/", "a.txt", "b.txt", "c.txt", ".dot.txt"],
        "./dir/": ["./dir/"],
    },
    "*": {
        "./dir/f": ["./dir/foo"],
        "./dir/foo": ["./dir/foo"],
        "dir": ["dir/", "dir/foo", "dir/bar"],
        "di": ["dir/", "dir/foo", "dir/bar"],
        "dir/": ["dir/", "dir/foo", "dir/bar"],
        "./dir": ["./dir/", "./dir/foo", "./dir/bar"],
        "./dir/": ["./dir/", "./dir/foo", "./dir/bar"],
        "./di": ["./dir/", "./dir/foo", "./dir/bar"],
    },
    "*.md": {
        "": ["./", "dir/", "outer/", "readme.md"],
        ".": ["./", "./dir/", "./outer/", "./readme.md"],
        "./": ["./", "./dir/", "./outer/", "./readme.md"],
        "outer/i": ["outer/inner/", "outer/inner/readme.md"],
    },
    "foo": {
        "./dir/": ["./dir/", "./dir/foo"],
        "./d": ["./dir/", "./dir/foo"],
    },
}


def _cases(table):
    return [(p, arg, want) for p, args in table.items() for arg, want in args.items()]


@pytest.mark.parametrize("pattern, arg, want", _cases(DIRS))
def test_complete_dirs(filetree, pattern, arg, want):
    got = dirs(pattern).predict(Args.make((), arg))
    assert sorted(got) == sorted(want)


@pytest.mark.parametrize("pattern, arg, want", _cases(FILES))
def test_complete_files(filetree, pattern, arg, want):
    got = files(pattern).predict(Args.make((), arg))
    assert sorted(got) == sorted(want)


def test_complete_files_properties(filetree):
    predictor = files("*.txt")
    for arg in ["", "./", "d", "./d", "dir/", "outer/", "outer/inner/"]:
        got = predictor.predict(Args.make((), arg))
        assert got == predictor.predict(Args.make((), arg))
        for path in got:
            if os.path.isdir(path):
                assert path.endswith("/")
            else:
                assert path.endswith(".txt")
            if arg.startswith("./"):
                assert path.startswith("./")
            elif path != "./":
                assert not path.startswith("./")


def test_complete_files_hidden(filetree):
    assert files().predict(Args.make((), ".d")) == [".dot.txt"]
    assert files().predict(Args.make((), "./.d")) == ["./.dot.txt"]


def test_complete_files_empty_pattern(filetree):
    got = FilesPredictor("", Mode.files).predict(Args.make((), "r"))
    assert got == ["readme.md"]


def test_complete_files_missing_directory(filetree):
    assert files().predict(Args.make((), "nope/x")) == []
    assert files().predict(Args.make((), "dir/..")) == []


def test_complete_files_absolute(filetree):
    prefix = str(filetree / "di")
    got = files().predict(Args.make((), prefix))
    assert sorted(got) == sorted(
        [str(filetree / "dir") + "/", str(filetree / "dir/foo"), str(filetree / "dir/bar")]
    )


def test_complete_files_unreadable_directory(filetree, monkeypatch):
    def fail(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(os, "scandir", fail)
    assert files().predict(Args.make((), "")) == ["./"]


@pytest.mark.parametrize(
    "path, prefix, want",
    [
        ("./", "", True),
        ("./", ".", True),
        ("./dir/", ".", True),
        ("dir/", "./d", True),
        ("./dir/", "d", True),
        ("dir/", "o", False),
        ("./", "./d", False),
    ],
)
def test_match_file(path, prefix, want):
    assert match_file(path, prefix) is want


def test_fix_path_form(filetree):
    assert fix_path_form("", ".") == "./"
    assert fix_path_form("", "./dir") == "dir/"
    assert fix_path_form("./", "dir") == "./dir/"
    assert fix_path_form(".", "a.txt") == "./a.txt"
    assert fix_path_form(str(filetree), "a.txt") == str(filetree / "a.txt")


def test_repr():
    assert repr(files("*.md")) == "files('*.md')"
    assert repr(dirs()) == "dirs('*')"
