# Only basic import functions, so that completion starts as fast as possible.
import shlex
import subprocess
import sys
from typing import Any, Iterable, List

COMP_LINE = "COMP_LINE"
COMP_POINT = "COMP_POINT"


def quotearr(cmd: List[str]):
    return " ".join(shlex.quote(x) for x in cmd)


def composed(*decs):
    """Merge decorators into one decorator"""

    def deco(f):
        for dec in reversed(decs):
            f = dec(f)
        return f

    return deco


def andjoin(arr: Iterable[Any], fin: str = " and ") -> str:
    arr = list(arr)
    if not len(arr):
        return ""
    if len(arr) == 1:
        return str(arr[0])
    return ", ".join(str(x) for x in arr[:-1]) + fin + str(arr[-1])


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


class shell_completion:
    """Bash glue for programs completed with `complete -C`"""

    DIR = "~/.local/share/bash-completion/completions"

    @staticmethod
    def complete_command(grammar: str) -> str:
        """The command bash executes on each completion request"""
        return quotearr(["shellcomp", "complete", grammar])

    @staticmethod
    def install_script(grammar: str, prog: str) -> List[str]:
        script: List[str] = []
        script.append(f"mkdir -vp {shell_completion.DIR}")
        line = f"complete -C {shlex.quote(shell_completion.complete_command(grammar))} {shlex.quote(prog)}"
        script.append(
            f"echo {shlex.quote(line)} > {shell_completion.DIR}/{shlex.quote(prog)}"
        )
        return script

    @staticmethod
    def install(grammar: str, prog: str):
        for line in shell_completion.install_script(grammar, prog):
            eprint(f"+ {line}")
            subprocess.check_call(["bash", "-c", line])

    @staticmethod
    def print(grammar: str, prog: str):
        print("Bash exports COMP_LINE and COMP_POINT to commands registered with complete -C.")
        print("To complete in the current shell, execute the following:")
        print(f"   complete -C {shlex.quote(shell_completion.complete_command(grammar))} {shlex.quote(prog)}")
        print("For bash-completion, execute the following:")
        for line in shell_completion.install_script(grammar, prog):
            print(f"   {line}")
