"""
Grammar description in a yaml file.

    name: myApp
    predictors:
      things: [thing1, thing2]
      docs: {files: "*.md"}
    commands:
      - name: foo
        flags:
          - {name: bar, predictor: things}
          - {name: baz, is_flag: true}
        args:
          - {name: readme, predictor: docs}
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

import yaml

from .datadict import DataDict, DataDictError
from .grammar import Application, Arg, Command, Flag
from .predict import GrammarError, Predictor, Predictors, SetPredictor
from .predict_files import dirs, files

log = logging.getLogger(__name__)


class ConfigError(GrammarError):
    pass


class PredictorConfig(DataDict):
    """Exactly one of the keys is set"""

    values: Optional[List[str]] = None
    """Fixed set of strings"""
    files: Optional[str] = None
    """Files matching this glob and directories"""
    dirs: Optional[str] = None
    """Directories matching this glob"""

    def __post_init__(self):
        given = [k for k, v in self.items() if v is not None]
        if len(given) != 1:
            raise DataDictError(
                f"predictor needs exactly one of values, files or dirs, got: {', '.join(given) or 'none'}"
            )

    def to_predictor(self) -> Predictor:
        if self.files is not None:
            return files(self.files)
        if self.dirs is not None:
            return dirs(self.dirs)
        assert self.values is not None
        return SetPredictor(*self.values)


class FlagConfig(DataDict):
    name: str
    short: Optional[str] = None
    is_flag: bool = False
    predictor: Optional[str] = None
    enum: Optional[List[str]] = None
    hidden: bool = False
    help: str = ""

    def to_flag(self) -> Flag:
        return Flag(**self.asdict())


class ArgConfig(DataDict):
    name: str
    predictor: Optional[str] = None
    enum: Optional[List[str]] = None
    help: str = ""

    def to_arg(self) -> Arg:
        return Arg(**self.asdict())


class CommandConfig(DataDict):
    name: str
    aliases: List[str] = []
    hidden: bool = False
    help: str = ""
    flags: List[FlagConfig] = []
    args: List[ArgConfig] = []
    commands: List[CommandConfig] = []

    def command_kwargs(self):
        return dict(
            name=self.name,
            aliases=list(self.aliases),
            hidden=self.hidden,
            help=self.help,
            flags=[x.to_flag() for x in self.flags],
            args=[x.to_arg() for x in self.args],
            commands=[x.to_command() for x in self.commands],
        )

    def to_command(self) -> Command:
        return Command(**self.command_kwargs())


class Config(CommandConfig):
    """Configuration of the root command"""

    help_flag: bool = True
    """Add --help flag to the root command"""
    predictors: Dict[str, Union[List[str], PredictorConfig]] = {}
    """Named predictors that flags and arguments can refer to"""

    def registry(self) -> Predictors:
        return {
            name: SetPredictor(*x) if isinstance(x, list) else x.to_predictor()
            for name, x in self.predictors.items()
        }

    def to_application(self) -> Application:
        return Application(
            **self.command_kwargs(),
            predictors=self.registry(),
            help_flag=self.help_flag,
        )


def parse_config(configstr: str) -> Config:
    try:
        tmp = yaml.safe_load(configstr)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse grammar: {e}") from e
    if not isinstance(tmp, dict):
        raise ConfigError(f"Grammar has to be a mapping, got: {type(tmp).__name__}")
    try:
        return Config(tmp, where=str(tmp.get("name", "grammar")))
    except DataDictError as e:
        raise ConfigError(str(e)) from e


def load_config(grammar: str) -> Config:
    """Load grammar from a file, or from the string itself if it has a newline"""
    if "\n" in grammar:
        configstr = grammar
    else:
        try:
            with open(grammar) as f:
                configstr = f.read()
        except OSError as e:
            raise ConfigError(f"Could not read grammar {grammar!r}: {e.strerror}") from e
    return parse_config(configstr)


def load_application(grammar: str) -> Application:
    app = load_config(grammar).to_application()
    log.debug(f"Loaded grammar {grammar!r}")
    return app
