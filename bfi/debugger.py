#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Runs a Brainfuck program one instruction at a time, displaying the state of
the memory tape, the jump stack and the program position after each step.
"""

from typing import Iterable, Optional, TextIO

from bfi.brainfuck import BrainfuckInterpreter, NOOP_TOKENS
from bfi.console import Console


class BrainfuckDebugger(BrainfuckInterpreter):
    """Brainfuck interpreter that prints its state after every step."""

    def __init__(self, tokens: Iterable[str], console: Optional[Console] = None,
                 show_memory_range: int = 10, trace_stream: Optional[TextIO] = None,
                 show_noops: bool = False):
        super().__init__(tokens, console)
        self.show_memory_range = show_memory_range
        self.trace_stream = trace_stream
        self.show_noops = show_noops
        self.step_count = 0

    def _print(self, *args) -> None:
        print(*args, file=self.trace_stream)

    def execute(self) -> None:
        self._print("🐛 BRAINFUCK DEBUGGER")
        self._print(f"Program: {''.join(self.tokens)!r}")
        self._print("=" * 80)
        self._show_state("INITIAL")
        super().execute()
        self._print(f"\n🎯 Halted after {self.step_count} steps")

    def step(self) -> bool:
        if self.instruction_pointer >= len(self.tokens):
            return super().step()

        position = self.instruction_pointer
        cmd = self.tokens[position]
        noop = cmd in NOOP_TOKENS
        before = self.get_current_value()
        if not noop:
            self.step_count += 1

        running = super().step()

        if noop and not self.show_noops:
            return running
        self._print(f"\nStep {self.step_count}: Execute {cmd!r} at position {position}")
        self._print(f"  {self._describe(cmd, position, before)}")
        self._show_state(f"AFTER STEP {self.step_count}")
        return running

    def _describe(self, cmd: str, position: int, before: int) -> str:
        if cmd == '>':
            return f"Move pointer right → position {self.pointer}"
        if cmd == '<':
            return f"Move pointer left → position {self.pointer}"
        if cmd == '+':
            return f"Increment cell[{self.pointer}] → {self.get_current_value()}"
        if cmd == '-':
            return f"Decrement cell[{self.pointer}] → {self.get_current_value()}"
        if cmd == '.':
            return f"Output cell[{self.pointer}] = {before} → {chr(before)!r}"
        if cmd == ',':
            return f"Read input → cell[{self.pointer}] = {self.get_current_value()}"
        if cmd == '[':
            return f"Loop start: push position {position}"
        if cmd == ']':
            if before == 0:
                return f"Loop end: cell[{self.pointer}] = 0, exit loop"
            return f"Loop end: cell[{self.pointer}] ≠ 0, jump back to position {self.instruction_pointer - 1}"
        return "No-op"

    def _show_state(self, label: str) -> None:
        """Show current state of memory, pointer, and program."""
        self._print(f"\n{label}:")

        # Window of program text around the instruction pointer
        lo = max(0, self.instruction_pointer - 20)
        hi = min(len(self.tokens), self.instruction_pointer + 21)
        program_display = ""
        for i in range(lo, hi):
            cmd = self.tokens[i]
            shown = cmd if cmd not in NOOP_TOKENS else "·"
            if i == self.instruction_pointer:
                program_display += f"[{shown}]"
            else:
                program_display += shown
        self._print(f"Program:  {program_display}")

        # Show memory tape (focused around pointer)
        start = max(0, self.pointer - self.show_memory_range // 2)
        end = min(len(self.memory), start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []

        for i, value in enumerate(self.memory_snapshot(start, end), start=start):
            memory_vals.append(f"{value:3d}")
            memory_ptrs.append(" ^ " if i == self.pointer else "   ")
            memory_addrs.append(f"{i:3d}")

        self._print("Memory:   [" + "|".join(memory_vals) + "]")
        self._print("Pointer:   " + " ".join(memory_ptrs))
        self._print("Address:   " + " ".join(memory_addrs))
        self._print(f"Loops:    {self.loop_starts}")
