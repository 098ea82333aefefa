"""
Completion driver: from the command line to the printed candidates.

A completion request must never show an error to the user typing in the
shell, so any failure ends up as no candidates.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Callable, List, Mapping, Optional, Union

from .args import Args, parse_line
from .common_base import COMP_LINE, COMP_POINT
from .grammar import Command, visible_flags
from .predict import NOTHING, Predictor
from .walker import FlagValue, Positional, Target, locate_args

log = logging.getLogger(__name__)


def _predict_with(predictor: Optional[Predictor], args: Args) -> List[str]:
    return (predictor or NOTHING).predict(args)


def _names(path, args: Args) -> List[str]:
    """Names of sub commands, and flags when the user started typing one"""
    cmd: Command = path[-1]
    ret = [x.name for x in cmd.commands if not x.hidden]
    if args.last.startswith("-"):
        ret += [n for f in visible_flags(path) if not f.hidden for n in f.names()]
    return ret


def candidates(path, target: Target, args: Args) -> List[str]:
    """All candidates for the located cursor position, not filtered"""
    if isinstance(target, FlagValue):
        return _predict_with(target.flag.predictor, args)
    # After -- there are no more flags nor sub commands.
    ret = [] if target.only_args else _names(path, args)
    if isinstance(target, Positional) and target.index < len(target.command.args):
        ret += _predict_with(target.command.args[target.index].predictor, args)
    return ret


def predict(root: Command, args: Args) -> List[str]:
    """Candidates for args starting with the token under the cursor"""
    if not args.all:
        return []
    try:
        args, path, target = locate_args(root, args)
        options = candidates(path, target, args)
    except Exception as e:
        log.debug(f"Completion failed: {e}", exc_info=True)
        return []
    ret = list(dict.fromkeys(x for x in options if x.startswith(args.last)))
    log.debug(f"candidates={ret}")
    return ret


def run(
    root: Command,
    line: str,
    point: Union[int, str, None] = None,
    writer: Optional[IO[str]] = None,
    exit: Callable[[int], object] = sys.exit,
):
    """Print candidates for line with cursor at point, one per line, and exit"""
    writer = writer or sys.stdout
    for x in predict(root, parse_line(line, point)):
        writer.write(f"{x}\n")
    writer.flush()
    exit(0)


def run_environ(
    root: Command,
    environ: Optional[Mapping[str, str]] = None,
    writer: Optional[IO[str]] = None,
    exit: Callable[[int], object] = sys.exit,
) -> bool:
    """
    Complete when started by bash complete -C, that is when COMP_LINE is set.
    Return False when not completing.
    """
    environ = os.environ if environ is None else environ
    line = environ.get(COMP_LINE)
    if line is None:
        return False
    run(root, line, environ.get(COMP_POINT), writer=writer, exit=exit)
    return True
