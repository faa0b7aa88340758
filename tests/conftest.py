import io
from typing import Tuple

import pytest

from bfi.brainfuck import BrainfuckInterpreter
from bfi.console import Console


def make_interpreter(program: str, stdin: str = "") -> Tuple[BrainfuckInterpreter, io.StringIO]:
    """Interpreter wired to in-memory streams; returns (interpreter, stdout buffer)."""
    out = io.StringIO()
    console = Console(io.StringIO(stdin), out)
    return BrainfuckInterpreter(program, console), out


@pytest.fixture
def run_bf():
    def _run(program: str, stdin: str = "") -> Tuple[BrainfuckInterpreter, str]:
        itp, out = make_interpreter(program, stdin)
        itp.execute()
        return itp, out.getvalue()
    return _run
