from __future__ import annotations

import copy
from typing import Any, ChainMap, Dict, Type, Union, get_type_hints

from typing_extensions import get_args, get_origin


class DataDictError(ValueError):
    pass


def all_annotations(cls) -> ChainMap[str, Type]:
    """
    Returns a dictionary-like ChainMap that includes annotations for all
    attributes defined in cls or inherited from superclasses.
    Also resolve runtime type hints - https://peps.python.org/pep-0563/
    """
    return ChainMap(*(get_type_hints(c) for c in cls.__mro__ if c is not object))


def _typename(dsttype: Any) -> str:
    return getattr(dsttype, "__name__", None) or str(dsttype).replace("typing.", "")


def _init_value(where: str, dsttype: Any, srcval: Any):
    """Convert srcval to dsttype or raise DataDictError"""

    def fail(*reasons: str):
        return DataDictError(
            f"{where}: expected {_typename(dsttype)}, got {type(srcval).__name__} {srcval!r}"
            + "".join(f"\n  {x}" for x in reasons)
        )

    dstorigin = get_origin(dsttype)
    if dsttype is Any:
        return srcval
    elif dstorigin is list:
        if not isinstance(srcval, list):
            raise fail()
        return [
            _init_value(f"{where}[{i}]", get_args(dsttype)[0], x)
            for i, x in enumerate(srcval)
        ]
    elif dstorigin is dict:
        if not isinstance(srcval, dict):
            raise fail()
        ktype, vtype = get_args(dsttype)
        return {
            _init_value(where, ktype, k): _init_value(f"{where}.{k}", vtype, v)
            for k, v in srcval.items()
        }
    elif dstorigin is Union:
        if srcval is None and type(None) in get_args(dsttype):
            return None
        reasons = []
        for t in get_args(dsttype):
            if t is type(None):
                continue
            try:
                return _init_value(where, t, srcval)
            except DataDictError as e:
                reasons.append(str(e))
        raise fail(*reasons)
    elif isinstance(dsttype, type) and issubclass(dsttype, DataDict):
        if isinstance(srcval, dsttype):
            return srcval
        if not isinstance(srcval, dict):
            raise fail()
        return dsttype(srcval, where=where)
    elif dsttype is str:
        # Yaml reads 1 and yes as int and bool, names are strings anyway.
        if isinstance(srcval, (str, int, float)) and not isinstance(srcval, bool):
            return str(srcval)
        raise fail()
    elif isinstance(dsttype, type):
        if not isinstance(srcval, dsttype):
            raise fail()
    return srcval


def _asdict_value(val: Any):
    if isinstance(val, list):
        return [_asdict_value(x) for x in val]
    elif isinstance(val, dict):
        return {k: _asdict_value(v) for k, v in val.items()}
    elif isinstance(val, DataDict):
        return val.asdict()
    return val


class DataDict:
    """
    Data dictionary - a mix between dataclass and AttrDict.
    Constructed from a dictionary, like the one returned by yaml.safe_load,
    with nested DataDict objects constructed from type hints.
    Unknown keys, missing keys without a default and values of wrong type
    raise DataDictError.
    """

    def __init__(self, data: Union[Dict[str, Any], None] = None, where: str = ""):
        data = dict(data or {})
        where = where or self.__class__.__name__
        annotations = all_annotations(self.__class__)
        unknown = sorted(str(k) for k in data if k not in annotations)
        if unknown:
            raise DataDictError(f"{where}: unknown keys: {', '.join(unknown)}")
        for akey, atype in annotations.items():
            if akey in data:
                self.__dict__[akey] = _init_value(f"{where}.{akey}", atype, data[akey])
            elif hasattr(self.__class__, akey):
                # Copy default values from class.
                self.__dict__[akey] = copy.deepcopy(getattr(self.__class__, akey))
            else:
                raise DataDictError(f"{where}: missing required key {akey!r}")
        self.__post_init__()

    def __post_init__(self):
        pass

    def __getitem__(self, k):
        return self.__dict__[k]

    def get(self, k, v=None):
        return self.__dict__.get(k, v)

    def __contains__(self, k):
        return k in self.__dict__

    def keys(self):
        return self.__dict__.keys()

    def items(self):
        return self.__dict__.items()

    def asdict(self) -> Dict[str, Any]:
        """Convert datadict to a dictionary"""
        return {k: _asdict_value(v) for k, v in self.__dict__.items()}

    def __repr__(self):
        data = " ".join(f"{k}={self.__dict__[k]!r}" for k in sorted(self.__dict__))
        return f"{self.__class__.__name__}({data})"

    def __eq__(self, o):
        if self.__class__ == o.__class__:
            return self.__dict__ == o.__dict__
        else:
            return False
