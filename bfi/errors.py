"""Exceptions raised by the Brainfuck execution engine."""

from typing import Optional


class ExecutionError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidTokenError(ExecutionError):
    def __init__(self, index: int, token: str):
        super().__init__(f"Invalid token {token!r} at index: {index}")
        self.index = index
        self.token = token


class UnmatchedLoopCloseError(ExecutionError):
    def __init__(self, index: int):
        super().__init__(f"No marker tokens in tokens. null loop jump at index: {index}")
        self.index = index


class InputReadError(ExecutionError):
    def __init__(self, cause: Optional[BaseException] = None):
        message = "Error in reading input"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class EmptyInputLineError(ExecutionError):
    def __init__(self, index: int):
        super().__init__(f"Empty input line read at index: {index}")
        self.index = index


class EngineFinishedError(ExecutionError):
    def __init__(self, state: str):
        super().__init__(f"Interpreter already {state}; create a new one to run again")
        self.state = state


class OutputWriteError(ExecutionError):
    def __init__(self, cause: BaseException):
        super().__init__(f"Error in writing output: {cause}")
        self.cause = cause
