"""click setup shared by shellcomp commands"""

import logging
import os
import sys
from typing import Mapping, Optional

import click

from .common_base import composed

EPILOG = "Licensed under GNU GPL version 3 or later."

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

LOG_ENV = "SHELLCOMP_LOG"
"""Base log level name, for completion started by bash where -v can't be given"""
LOGFILE_ENV = "SHELLCOMP_LOGFILE"
"""Log to this file instead of stderr"""
LOG_FORMAT = "%(levelname)s %(name)s:%(funcName)s:%(lineno)d: %(message)s"


def log_level(verbosity: int = 0, environ: Optional[Mapping[str, str]] = None) -> int:
    """Level from $SHELLCOMP_LOG, WARNING by default, moved by 10 per -v or -q"""
    environ = os.environ if environ is None else environ
    level = logging.getLevelName(environ.get(LOG_ENV, "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    return min(max(logging.DEBUG, level - 10 * verbosity), logging.CRITICAL + 10)


def init_logging(verbosity: int = 0, environ: Optional[Mapping[str, str]] = None):
    # Bash shows stderr of complete -C commands over the prompt,
    # only warnings are printed unless asked for.
    environ = os.environ if environ is None else environ
    logfile = environ.get(LOGFILE_ENV)
    logging.basicConfig(
        level=log_level(verbosity, environ),
        format=LOG_FORMAT,
        **(dict(filename=logfile) if logfile else dict(stream=sys.stderr)),
    )


def logging_options():
    return composed(
        click.option(
            "-v",
            "--verbose",
            count=True,
            help=f"More logging, repeat for even more. The base level is ${LOG_ENV} or WARNING.",
        ),
        click.option("-q", "--quiet", count=True, help="Less logging"),
    )


def version_option():
    return click.version_option(
        package_name="shellcomp",
        message="%(prog)s, version %(version)s",
        help="Print program version then exit.",
    )
