import logging
from dataclasses import dataclass
from typing import List, Optional

import click
import clickdc
import yaml

from .config import load_config
from .grammar import Application
from .mytabulate import mytabulate
from .predict import GrammarError, Predictor

log = logging.getLogger(__name__)


def describe(predictor: Optional[Predictor]) -> str:
    return repr(predictor) if predictor else "-"


def grammar_table(app: Application) -> List[List[str]]:
    rows: List[List[str]] = []
    for path in app.walk():
        cmd = path[-1]
        name = " ".join(c.name for c in path)
        rows.append([name, "command", ",".join(cmd.aliases) or "-", cmd.help])
        for flag in cmd.flags:
            completion = "bool" if flag.is_flag else describe(flag.predictor)
            rows.append(["", str(flag), completion, flag.help])
        for arg in cmd.args:
            rows.append(["", f"<{arg.name}>", describe(arg.predictor), arg.help])
    return rows


@dataclass
class Args:
    dump: bool = clickdc.option(help="Print the grammar as yaml with all defaults filled")
    grammar: str = clickdc.argument()


@click.command(
    "check",
    help="""
    Check the grammar in GRAMMAR yaml file and print what gets completed where.
    Exits with nonzero status when the grammar is invalid.
    """,
)
@clickdc.adddc("args", Args)
def cli(args: Args):
    try:
        config = load_config(args.grammar)
        app = config.to_application()
    except GrammarError as e:
        raise click.ClickException(str(e)) from e
    if args.dump:
        print(yaml.safe_dump(config.asdict(), sort_keys=False), end="")
    else:
        print(mytabulate(grammar_table(app), ["COMMAND", "ELEMENT", "COMPLETION", "HELP"]))
