"""
Description of the command line grammar that gets completed.

The grammar is built once, before completion, with plain dataclasses or from
a configuration file, see config.py. Building an Application checks the
whole tree and resolves predictors referenced by name, so completion itself
never fails on a bad grammar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .predict import (
    GrammarError,
    Predictor,
    PredictorRef,
    Predictors,
    SetPredictor,
    default_predictors,
    resolve_predictor,
)

log = logging.getLogger(__name__)


@dataclass
class Flag:
    name: str
    """Long name, used as --name"""
    short: Optional[str] = None
    """Single character, used as -s"""
    is_flag: bool = False
    """Boolean flag, takes no value"""
    predictor: PredictorRef = None
    enum: Optional[List[str]] = None
    hidden: bool = False
    help: str = ""

    @property
    def takes_value(self) -> bool:
        return not self.is_flag

    def names(self) -> List[str]:
        return [f"--{self.name}", *([f"-{self.short}"] if self.short else [])]

    def __str__(self):
        return "/".join(self.names())


@dataclass
class Arg:
    """Positional argument"""

    name: str
    predictor: PredictorRef = None
    enum: Optional[List[str]] = None
    help: str = ""


@dataclass
class Command:
    name: str
    commands: List[Command] = field(default_factory=list)
    flags: List[Flag] = field(default_factory=list)
    args: List[Arg] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
    hidden: bool = False
    help: str = ""

    def find_command(self, name: str) -> Optional[Command]:
        """Child command with exactly this name or alias"""
        for cmd in self.commands:
            if name == cmd.name or name in cmd.aliases:
                return cmd
        return None

    def walk(self, path: Tuple[Command, ...] = ()) -> Iterator[Tuple[Command, ...]]:
        """Yield paths from the root to every command in the tree"""
        path = (*path, self)
        yield path
        for cmd in self.commands:
            yield from cmd.walk(path)


def visible_flags(path: Tuple[Command, ...]) -> List[Flag]:
    """Flags usable in the last command of path, including inherited ones"""
    return [f for cmd in reversed(path) for f in cmd.flags]


def _resolve(
    where: str,
    predictor: PredictorRef,
    enum: Optional[List[str]],
    registry: Mapping[str, Predictor],
) -> Optional[Predictor]:
    if enum is not None:
        if predictor is not None:
            raise GrammarError(f"{where}: enum and predictor are mutually exclusive")
        return SetPredictor(*enum)
    return resolve_predictor(predictor, registry, where)


def _resolved(
    cmd: Command, where: str, registry: Mapping[str, Predictor]
) -> Tuple[List[Command], List[Flag], List[Arg]]:
    """Copies of sub commands, flags and args of cmd with predictors resolved"""
    commands: List[Command] = []
    for child in cmd.commands:
        subs, flags, args = _resolved(child, f"{where} {child.name}", registry)
        commands.append(replace(child, commands=subs, flags=flags, args=args))
    flags = [
        replace(
            f,
            predictor=_resolve(f"{where} --{f.name}", f.predictor, f.enum, registry),
            enum=None,
        )
        for f in cmd.flags
    ]
    args = [
        replace(
            a,
            predictor=_resolve(f"{where} <{a.name}>", a.predictor, a.enum, registry),
            enum=None,
        )
        for a in cmd.args
    ]
    return commands, flags, args


@dataclass
class Application(Command):
    """The root command of the completed program"""

    predictors: Predictors = field(default_factory=dict)
    """Named predictors available to the grammar, besides the default ones"""
    help_flag: bool = True
    """Add --help to the root command"""

    def __post_init__(self):
        self.build()

    def registry(self) -> Predictors:
        return {**default_predictors(), **self.predictors}

    def build(self):
        """
        Validate the grammar and resolve predictors referenced by name.
        The application keeps resolved copies, objects given by the caller
        are not modified and can be shared between applications.
        """
        if self.help_flag and not any(f.name == "help" for f in self.flags):
            self.flags = [
                *self.flags,
                Flag("help", is_flag=True, help="Show context-sensitive help."),
            ]
        for path in self.walk():
            cmd = path[-1]
            where = " ".join(c.name for c in path)
            names: Dict[str, str] = {}
            for child in cmd.commands:
                for name in [child.name, *child.aliases]:
                    if not name or name.startswith("-"):
                        raise GrammarError(f"{where}: invalid command name {name!r}")
                    if name in names:
                        raise GrammarError(f"{where}: duplicate command name {name!r}")
                    names[name] = child.name
            seen: Dict[str, Flag] = {}
            for flag in visible_flags(path):
                if not flag.name or flag.name.startswith("-"):
                    raise GrammarError(f"{where}: invalid flag name {flag.name!r}")
                if flag.short is not None and (
                    len(flag.short) != 1 or flag.short in "-= "
                ):
                    raise GrammarError(
                        f"{where} --{flag.name}: short name must be a single character, got {flag.short!r}"
                    )
                for name in flag.names():
                    if name in seen:
                        raise GrammarError(f"{where}: duplicate flag {name}")
                    seen[name] = flag
        self.commands, self.flags, self.args = _resolved(self, self.name, self.registry())
        log.debug(f"Built grammar of {self.name}")
        return self
