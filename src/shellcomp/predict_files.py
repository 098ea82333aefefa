"""
Completion of paths on the local filesystem.

Only the directory the token points into is listed. Sub directories are
always offered, so that the user can descend into them, files only when
they match the glob pattern. When a single directory is the only match,
its content is listed too.
"""

from __future__ import annotations

import enum
import fnmatch
import logging
import os
from dataclasses import dataclass
from typing import List

from .args import Args

log = logging.getLogger(__name__)


class Mode(enum.Enum):
    files = enum.auto()
    """Files matching the pattern and all directories"""
    dirs = enum.auto()
    """Only directories"""


def _trim_dot_slash(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def match_file(path: str, prefix: str) -> bool:
    """Return true if path is a completion of prefix"""
    # Special case for current directory completion.
    if path == "./" and prefix in ("", "."):
        return True
    if prefix == "." and path.startswith("."):
        return True
    return _trim_dot_slash(path).startswith(_trim_dot_slash(prefix))


def fix_dir_path(path: str) -> str:
    """Directories end with a slash"""
    if os.path.isdir(path) and not path.endswith("/"):
        path += "/"
    return path


def fix_path_form(last: str, path: str) -> str:
    """Write path in the same form the user wrote last"""
    abspath = os.path.abspath(path)
    if os.path.isabs(last):
        return fix_dir_path(abspath)
    rel = os.path.relpath(abspath)
    if rel != "." and (last == "." or last.startswith("./")):
        rel = "./" + rel
    return fix_dir_path(rel)


def directory(last: str) -> str:
    """The directory that last points into"""
    if os.path.isdir(last):
        return fix_path_form(last, last)
    dirname = os.path.dirname(last)
    if dirname and os.path.isdir(dirname):
        return fix_path_form(last, dirname)
    return "./"


@dataclass(frozen=True, repr=False)
class FilesPredictor:
    pattern: str = "*"
    """Glob matched against file names. Empty matches everything"""
    mode: Mode = Mode.files

    def match_name(self, name: str) -> bool:
        return not self.pattern or fnmatch.fnmatchcase(name, self.pattern)

    def listdir(self, dir: str) -> List[str]:
        """List entries of dir that could be completed"""
        ret: List[str] = []
        try:
            with os.scandir(dir) as it:
                for entry in it:
                    try:
                        isdir = entry.is_dir()
                    except OSError:
                        isdir = False
                    if isdir or (self.mode == Mode.files and self.match_name(entry.name)):
                        ret.append(os.path.join(dir, entry.name))
        except OSError as e:
            log.debug(f"Could not list {dir!r}: {e}")
        return sorted(ret)

    def predict_once(self, last: str) -> List[str]:
        if last.endswith("/.."):
            return []
        dir = directory(last)
        paths = [fix_path_form(last, x) for x in [*self.listdir(dir), dir]]
        return [x for x in paths if match_file(x, last)]

    def __repr__(self):
        return f"{self.mode.name}({self.pattern!r})"

    def predict(self, args: Args) -> List[str]:
        ret = self.predict_once(args.last)
        # Only one directory matched. Show what is inside.
        if len(ret) == 1 and os.path.isdir(ret[0]):
            ret = self.predict_once(ret[0])
        return ret


def files(pattern: str = "*") -> FilesPredictor:
    return FilesPredictor(pattern, Mode.files)


def dirs(pattern: str = "*") -> FilesPredictor:
    return FilesPredictor(pattern, Mode.dirs)
