"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right (wraps around the tape)
    <   Move the pointer to the left (wraps around the tape)
    +   Increment the memory cell at the pointer (255 wraps to 0)
    -   Decrement the memory cell at the pointer (0 wraps to 255)
    .   Output the character signified by the cell at the pointer
    ,   Read a line of input and store its first byte in the cell at the pointer
    [   Remember this position as a loop start
    ]   Jump back to the last loop start if the cell at the pointer is nonzero

Spaces, tabs and newlines are no-ops. Every other character is an error;
there is no comment syntax.

Loop starts are pushed unconditionally, so a loop body always runs at least
once, even when the cell is already 0 on entry. Brackets are resolved while
running rather than in a separate pass.
"""

import enum
import logging
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from bfi.console import Console
from bfi.errors import (
    EmptyInputLineError,
    EngineFinishedError,
    ExecutionError,
    InvalidTokenError,
    UnmatchedLoopCloseError,
)

logger = logging.getLogger(__name__)

MEM_SIZE = 4000
CELL_MODULUS = 256
NOOP_TOKENS = "\n\t "
COMMAND_TOKENS = "><+-,.[]"


class EngineState(enum.Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAILED = "failed"


class BrainfuckInterpreter:
    def __init__(self, tokens: Iterable[str], console: Optional[Console] = None):
        self.memory = np.zeros(MEM_SIZE, dtype=np.uint8)
        self.current_value = 0
        self.pointer = 0
        self.instruction_pointer = 0
        self.tokens = tuple(tokens)
        self.loop_starts: List[int] = []
        self.console = console if console is not None else Console()
        self.state = EngineState.RUNNING

        self._dispatch: Dict[str, Callable[[], None]] = {
            '>': self.increment_pointer,
            '<': self.decrement_pointer,
            '+': self.increment_value,
            '-': self.decrement_value,
            ',': self.input_char,
            '.': self.output_char,
            '[': self.push_loop_marker,
            ']': self.close_loop,
        }
        for token in NOOP_TOKENS:
            self._dispatch[token] = self._noop

    def execute(self) -> None:
        """Run the program until the instruction stream is exhausted.

        Raises ExecutionError (or a subclass) on the first failure. Output
        written before the failure stays written.
        """
        logger.debug("executing %d tokens", len(self.tokens))
        while self.step():
            pass

    def step(self) -> bool:
        """Dispatch a single instruction. Returns False once the program halts."""
        if self.state is not EngineState.RUNNING:
            raise EngineFinishedError(self.state.value)

        try:
            if self.instruction_pointer < len(self.tokens):
                token = self.tokens[self.instruction_pointer]
                handler = self._dispatch.get(token)
                if handler is None:
                    raise InvalidTokenError(self.instruction_pointer, token)
                handler()
                self.instruction_pointer += 1
            if self.instruction_pointer >= len(self.tokens):
                self._halt()
                return False
        except ExecutionError as e:
            self.state = EngineState.FAILED
            logger.debug("execution failed at index %d: %s", self.instruction_pointer, e)
            raise
        return True

    def _halt(self) -> None:
        self.console.newline()
        self.state = EngineState.HALTED
        logger.debug("halted after reaching index %d", self.instruction_pointer)

    def _noop(self) -> None:
        pass

    # Pointer manipulation

    def increment_pointer(self) -> None:
        self.pointer = (self.pointer + 1) % MEM_SIZE
        self.current_value = self.get_current_value()

    def decrement_pointer(self) -> None:
        self.pointer = (self.pointer - 1) % MEM_SIZE
        self.current_value = self.get_current_value()

    # Value manipulation

    def increment_value(self) -> None:
        self.memory[self.pointer] = (int(self.memory[self.pointer]) + 1) % CELL_MODULUS

    def decrement_value(self) -> None:
        self.memory[self.pointer] = (int(self.memory[self.pointer]) - 1) % CELL_MODULUS

    def get_current_value(self) -> int:
        return int(self.memory[self.pointer])

    def input_current_value(self, value: int) -> None:
        self.memory[self.pointer] = value % CELL_MODULUS

    # Loop handling

    def push_loop_marker(self) -> None:
        self.loop_starts.append(self.instruction_pointer)

    def pop_loop_marker(self) -> None:
        if self.loop_starts:
            self.loop_starts.pop()

    def jumpto_last_marker(self) -> None:
        # The caller's increment moves past the '[' so it is not pushed again.
        if not self.loop_starts:
            raise UnmatchedLoopCloseError(self.instruction_pointer)
        self.instruction_pointer = self.loop_starts[-1]

    def close_loop(self) -> None:
        if self.get_current_value() == 0:
            self.pop_loop_marker()
        else:
            self.jumpto_last_marker()

    # I/O

    def output_char(self) -> None:
        self.console.write_char(self.get_current_value())

    def input_char(self) -> None:
        line = self.console.read_line()
        if not line:
            raise EmptyInputLineError(self.instruction_pointer)
        self.input_current_value(line[0])

    def memory_snapshot(self, start: int = 0, stop: Optional[int] = None) -> List[int]:
        """Return tape cells [start, stop) as plain ints."""
        return self.memory[start:stop].tolist()
