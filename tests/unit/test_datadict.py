from typing import Any, Dict, List, Optional, Union

import pytest

from shellcomp.datadict import DataDict, DataDictError


class Simple(DataDict):
    var: int


class Collect(DataDict):
    alist: List[Simple]
    adict: Dict[str, Simple] = {}
    aopt: Optional[Simple] = None
    name: str = "default"
    either: Union[List[str], Simple, None] = None
    anything: Any = None


def test_datadict_simple():
    a = Simple({"var": 123})
    assert a.var == 123
    assert a["var"] == 123
    assert "var" in a
    assert a.asdict() == {"var": 123}
    assert str(a) == "Simple(var=123)"
    assert a == Simple({"var": 123})
    assert a != Simple({"var": 124})


def test_datadict_collect():
    b = Collect(
        {
            "alist": [{"var": 1}, {"var": 2}],
            "adict": {"x": {"var": 3}},
            "aopt": {"var": 5},
            "name": 7,
            "either": {"var": 6},
        }
    )
    assert b.alist == [Simple({"var": 1}), Simple({"var": 2})]
    assert b.adict == {"x": Simple({"var": 3})}
    assert b.aopt == Simple({"var": 5})
    assert b.name == "7"
    assert b.either == Simple({"var": 6})
    assert b.asdict() == {
        "alist": [{"var": 1}, {"var": 2}],
        "adict": {"x": {"var": 3}},
        "aopt": {"var": 5},
        "name": "7",
        "either": {"var": 6},
        "anything": None,
    }


def test_datadict_defaults_are_copied():
    a = Collect({"alist": []})
    a.adict["x"] = Simple({"var": 1})
    assert Collect({"alist": []}).adict == {}
    assert Collect({"alist": [], "either": ["a"]}).either == ["a"]


@pytest.mark.parametrize(
    "data, match",
    [
        ({}, "missing required key 'alist'"),
        ({"alist": [], "other": 1}, "unknown keys: other"),
        ({"alist": {}}, r"Collect.alist: expected"),
        ({"alist": [{"var": "x"}]}, r"alist\[0\].var: expected int"),
        ({"alist": [], "name": True}, "Collect.name: expected str"),
        ({"alist": [], "aopt": 5}, "Collect.aopt: expected"),
    ],
)
def test_datadict_errors(data, match):
    with pytest.raises(DataDictError, match=match):
        Collect(data)
