import logging
import shlex

import pytest

from shellcomp.common_base import andjoin, quotearr, shell_completion
from shellcomp.common_click import log_level
from shellcomp.mytabulate import mytabulate


def test_andjoin():
    assert andjoin([]) == ""
    assert andjoin([1]) == "1"
    assert andjoin([1, 2]) == "1 and 2"
    assert andjoin([1, 2, 3]) == "1, 2 and 3"
    assert andjoin([1, 2, 3, 4]) == "1, 2, 3 and 4"


def test_quotearr():
    assert quotearr(["a", "b c"]) == "a 'b c'"


def test_mytabulate():
    assert mytabulate([]) == ""
    assert mytabulate([["a", "bbb", "c"], ["dd", "e"]]) == "a  bbb c\ndd e"
    assert mytabulate([["x", "y"]], ["LONG", "H"]) == "LONG H\nx    y"


def test_shell_completion_install_script():
    script = shell_completion.install_script("/tmp/my app.yaml", "myapp")
    assert script[0] == f"mkdir -vp {shell_completion.DIR}"
    line = "complete -C " + shlex.quote("shellcomp complete '/tmp/my app.yaml'") + " myapp"
    assert shlex.split(script[1]) == ["echo", line, ">", f"{shell_completion.DIR}/myapp"]


@pytest.mark.parametrize(
    "environ, verbosity, want",
    [
        ({}, 0, logging.WARNING),
        ({}, 1, logging.INFO),
        ({}, 5, logging.DEBUG),
        ({}, -1, logging.ERROR),
        ({}, -9, logging.CRITICAL + 10),
        ({"SHELLCOMP_LOG": "debug"}, 0, logging.DEBUG),
        ({"SHELLCOMP_LOG": "ERROR"}, 1, logging.WARNING),
        ({"SHELLCOMP_LOG": "nope"}, 0, logging.WARNING),
    ],
)
def test_log_level(environ, verbosity, want):
    assert log_level(verbosity, environ) == want
