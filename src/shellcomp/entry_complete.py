import logging
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

import click
import clickdc

from . import complete
from .common_base import COMP_LINE, COMP_POINT
from .config import load_application
from .predict import GrammarError

log = logging.getLogger(__name__)


@dataclass
class Args:
    line: Optional[str] = clickdc.option(
        "-l",
        envvar=COMP_LINE,
        default=None,
        help=f"The command line to complete. [default: ${COMP_LINE}]",
    )
    point: Optional[str] = clickdc.option(
        "-p",
        envvar=COMP_POINT,
        default=None,
        help=f"Cursor offset in the command line. [default: ${COMP_POINT} or end of line]",
    )
    grammar: str = clickdc.argument()
    words: Tuple[str, ...] = clickdc.argument(
        nargs=-1, type=click.UNPROCESSED, metavar="[COMMAND WORD PREVIOUS]"
    )


@click.command(
    "complete",
    context_settings=dict(allow_interspersed_args=False),
    help="""
    Print completions of a command line, one per line.

    Meant to be registered with bash 'complete -C', bash then passes the command
    line and the cursor position in COMP_LINE and COMP_POINT environment variables.
    GRAMMAR is a yaml file describing the commands, flags and arguments of the
    completed program. Bash also passes the command name, the word being completed
    and the previous word, they are ignored. Options have to precede GRAMMAR.

    \b
    Example:
        complete -C 'shellcomp complete ~/myapp.yaml' myapp
        shellcomp complete --line 'myapp foo --b' ~/myapp.yaml
    """,
)
@clickdc.adddc("args", Args)
def cli(args: Args):
    log.debug(f"ARGS={args}")
    if args.line is None:
        raise click.UsageError(f"Nothing to complete, {COMP_LINE} is not set and --line not given")
    try:
        app = load_application(args.grammar)
    except GrammarError as e:
        raise click.ClickException(str(e)) from e
    complete.run(
        app,
        args.line,
        args.point,
        writer=sys.stdout,
        exit=click.get_current_context().exit,
    )
