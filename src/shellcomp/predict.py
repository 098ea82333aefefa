"""
Predictors produce the candidate strings for a position on the command line.

A predictor does not need to filter its output by the token under the cursor,
the driver keeps only the candidates starting with it.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from typing_extensions import Protocol, runtime_checkable

from .args import Args
from .common_base import andjoin


class GrammarError(ValueError):
    """The grammar description can't be used for completion"""


@runtime_checkable
class Predictor(Protocol):
    def predict(self, args: Args) -> List[str]: ...


###############################################################################


class SetPredictor:
    """Predict a fixed set of strings"""

    def __init__(self, *values: str):
        self.values: List[str] = list(values)

    def predict(self, args: Args) -> List[str]:
        return list(self.values)

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(map(repr, self.values))})"


class NoopPredictor:
    def predict(self, args: Args) -> List[str]:
        return []

    def __repr__(self):
        return f"{self.__class__.__name__}()"


NOTHING = NoopPredictor()


class FuncPredictor:
    """Adapt a function taking Args to a predictor"""

    def __init__(self, func: Callable[[Args], Iterable[str]]):
        self.func = func

    def predict(self, args: Args) -> List[str]:
        return list(self.func(args))

    def __repr__(self):
        return f"{self.__class__.__name__}({getattr(self.func, '__name__', self.func)})"


class OrPredictor:
    """Union of predictions of other predictors"""

    def __init__(self, *predictors: Predictor):
        self.predictors = predictors

    def predict(self, args: Args) -> List[str]:
        return [x for p in self.predictors for x in p.predict(args)]

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(map(repr, self.predictors))})"


###############################################################################

Predictors = Dict[str, Predictor]
"""Registry of predictors referenced by name in the grammar"""

PredictorRef = Union[str, Predictor, None]


def default_predictors() -> Predictors:
    from .predict_files import dirs, files

    return {
        "files": files(),
        "dirs": dirs(),
        "none": NOTHING,
    }


def resolve_predictor(
    ref: PredictorRef, registry: Mapping[str, Predictor], where: str
) -> Optional[Predictor]:
    """Turn a predictor reference from the grammar into a predictor"""
    if ref is None or isinstance(ref, Predictor):
        return ref
    if isinstance(ref, str):
        try:
            return registry[ref]
        except KeyError:
            known = andjoin(sorted(registry)) or "none"
            raise GrammarError(
                f"{where}: unknown predictor {ref!r}, known predictors: {known}"
            ) from None
    raise GrammarError(f"{where}: {ref!r} is not a predictor")
