"""
Find out which element of the grammar the cursor is at.

Completed tokens are consumed from left to right like a parser would do it:
sub commands descend, flags eat their values and everything else fills the
next positional argument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .args import Args
from .grammar import Command, Flag, visible_flags
from .predict import Predictor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveCommand:
    """The cursor may be at a sub command or a flag of command"""

    command: Command
    only_args: bool = False
    """Flags ended with --, nothing but positional arguments follow"""


@dataclass(frozen=True)
class FlagValue:
    """The cursor is at the value of flag"""

    command: Command
    flag: Flag


@dataclass(frozen=True)
class Positional:
    """The cursor is at positional argument number index of command"""

    command: Command
    index: int
    only_args: bool = False


Target = Union[ActiveCommand, FlagValue, Positional]

###############################################################################


def find_flag(flags: Sequence[Flag], name: str, short: bool) -> Optional[Flag]:
    for flag in flags:
        if (flag.short if short else flag.name) == name:
            return flag
    return None


def consume_flag(flags: Sequence[Flag], token: str) -> Optional[Flag]:
    """
    Resolve a token starting with a dash.
    Return the flag that takes the next token as its value, if any.
    Unknown flags are assumed to take no value.
    """
    if token.startswith("--"):
        name, eq, _ = token[2:].partition("=")
        flag = find_flag(flags, name, short=False)
        if flag is None:
            log.debug(f"Unknown flag {token!r}")
        return flag if flag and flag.takes_value and not eq else None
    cluster = token[1:]
    for i, char in enumerate(cluster):
        flag = find_flag(flags, char, short=True)
        if flag is None:
            log.debug(f"Unknown flag -{char} in {token!r}")
        elif flag.takes_value:
            # The rest of the cluster is the value, -ofile or -o=file.
            return None if cluster[i + 1 :] else flag
    return None


def is_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def positional_index(flags: Sequence[Flag], tokens: Sequence[str]) -> int:
    """Count positional arguments in tokens, skipping flags and their values"""
    index = 0
    pending: Optional[Flag] = None
    only_args = False
    for token in tokens:
        if pending:
            pending = None
        elif only_args:
            index += 1
        elif token == "--":
            only_args = True
        elif is_flag(token):
            pending = consume_flag(flags, token)
        else:
            index += 1
    return index


def locate_path(root: Command, tokens: Sequence[str]) -> Tuple[Tuple[Command, ...], Target]:
    path: Tuple[Command, ...] = (root,)
    index = 0
    pending: Optional[Flag] = None
    only_args = False
    for token in tokens:
        cmd = path[-1]
        if pending:
            pending = None
            continue
        if not only_args:
            if token == "--":
                only_args = True
                continue
            if is_flag(token):
                pending = consume_flag(visible_flags(path), token)
                continue
            child = cmd.find_command(token)
            if child:
                path = (*path, child)
                index = 0
                continue
        index += 1
    cmd = path[-1]
    target: Target
    if pending:
        target = FlagValue(cmd, pending)
    elif cmd.args:
        target = Positional(cmd, index, only_args)
    else:
        target = ActiveCommand(cmd, only_args)
    return path, target


def locate_args(root: Command, args: Args) -> Tuple[Args, Tuple[Command, ...], Target]:
    """
    Locate the cursor in the grammar. Returns args as the predictors should
    see them: --flag=value under the cursor is split into the flag and its
    value, unless a value is pending or flags were ended with --.
    """
    path, target = locate_path(root, args.completed)
    split = args.split_last_equal()
    if split is not args and not isinstance(target, FlagValue) and not target.only_args:
        args = split
        path, target = locate_path(root, args.completed)
    log.debug(
        f"command={' '.join(c.name for c in path)} target={type(target).__name__}"
        f" flag={getattr(target, 'flag', None)} index={getattr(target, 'index', None)}"
    )
    return args, path, target


def locate(root: Command, args: Args) -> Target:
    """Return the element of the grammar the cursor is at"""
    return locate_args(root, args)[2]


###############################################################################


class PositionalPredictor:
    """Delegate to the predictor of the positional argument the cursor is at"""

    def __init__(self, predictors: Sequence[Optional[Predictor]], flags: Sequence[Flag] = ()):
        self.predictors: List[Optional[Predictor]] = list(predictors)
        self.flags: List[Flag] = list(flags)

    def predict(self, args: Args) -> List[str]:
        index = positional_index(self.flags, args.completed)
        if index >= len(self.predictors):
            return []
        predictor = self.predictors[index]
        return predictor.predict(args) if predictor else []
