import logging

__version__ = "0.1.0"

from bfi.brainfuck import BrainfuckInterpreter, EngineState, MEM_SIZE
from bfi.console import Console
from bfi.errors import (
    EmptyInputLineError,
    EngineFinishedError,
    ExecutionError,
    InputReadError,
    InvalidTokenError,
    OutputWriteError,
    UnmatchedLoopCloseError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
