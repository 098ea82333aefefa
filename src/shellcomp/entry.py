#!/usr/bin/env python3
import click

from .common_click import (
    CONTEXT_SETTINGS,
    EPILOG,
    init_logging,
    logging_options,
    version_option,
)
from .lazygroup import LazyGroup

subcommands = """
    check
    complete
    install
    """.split()


@click.command(
    "shellcomp",
    cls=LazyGroup,
    lazy_subcommands={cmd: f"{__package__}.entry_{cmd}.cli" for cmd in subcommands},
    help="""
    Complete command lines of any program from a yaml description of its grammar.

    \b
    Example:
        complete -C 'shellcomp complete ~/myapp.yaml' myapp
    """,
    epilog=EPILOG,
    context_settings=CONTEXT_SETTINGS,
)
@logging_options()
@version_option()
def cli(verbose: int, quiet: int):
    init_logging(verbose - quiet)


def main():
    cli(max_content_width=9999)


if __name__ == "__main__":
    main()
