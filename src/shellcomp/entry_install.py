import logging
import os
from dataclasses import dataclass

import click
import clickdc

from .common_base import shell_completion
from .config import load_application
from .predict import GrammarError

log = logging.getLogger(__name__)


@dataclass
class Args:
    dryrun: bool = clickdc.option(
        "-n", help="Only print the commands instead of executing them"
    )
    grammar: str = clickdc.argument()
    prog: str = clickdc.argument()


@click.command(
    "install",
    help="""
    Install bash completion of program PROG described by GRAMMAR yaml file.
    The completion script is written to the bash-completion user directory.
    """,
)
@clickdc.adddc("args", Args)
def cli(args: Args):
    if "\n" in args.grammar:
        raise click.BadParameter("has to be a file", param_hint="GRAMMAR")
    try:
        load_application(args.grammar)
    except GrammarError as e:
        raise click.ClickException(str(e)) from e
    grammar = os.path.abspath(args.grammar)
    if args.dryrun:
        shell_completion.print(grammar, args.prog)
    else:
        shell_completion.install(grammar, args.prog)
