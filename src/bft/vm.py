from __future__ import annotations

from typing import BinaryIO, Dict, Tuple

import numpy as np

from .errors import AlreadyExecutedError, make_bounds_error, make_read_error
from .instructions import (
    Comment,
    Decrement,
    Increment,
    Input,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
)
from .program import Program, validate
from .state import MachineState, MachineStatus

DEFAULT_CELLS = 30000


class VirtualMachine:
    """Executes a validated ``Program`` over a byte tape.

    The tape is a numpy ``uint8`` array. It never grows to the left; it grows
    to the right one cell at a time when ``extensible`` is set, otherwise
    moving past the last cell is an error. A machine runs its program at most
    once: the streams are borrowed for a single ``interpret`` call.
    """

    def __init__(self, program: Program, cells: int = 0, extensible: bool = False, *, trace: bool = False):
        if cells < 0:
            raise ValueError(f"cell count must be >= 0, got {cells}")
        self.program = program
        self.extensible = bool(extensible)
        self.tape = np.zeros(cells or DEFAULT_CELLS, dtype=np.uint8)
        self.state = MachineState(is_tracing=trace)
        # unbalanced programs raise BracketMismatchError here
        self._jump_table: Dict[int, int] = validate(program)

    # ===== Introspection =====

    @property
    def can_grow(self) -> bool:
        return self.extensible

    @property
    def cells(self) -> np.ndarray:
        view = self.tape.view()
        view.flags.writeable = False
        return view

    @property
    def size(self) -> int:
        return int(self.tape.shape[0])

    @property
    def head(self) -> int:
        return self.state.head

    @property
    def ip(self) -> int:
        return self.state.ip

    @property
    def status(self) -> MachineStatus:
        return self.state.status

    @property
    def current_cell(self) -> int:
        return int(self.tape[self.state.head])

    # ===== Execution =====

    def interpret(self, input_stream: BinaryIO, output_stream: BinaryIO) -> None:
        """Run the program to completion.

        Raises ``AlreadyExecutedError`` without touching the tape if this
        machine has already been started, and propagates the first
        ``ExecutionError`` raised by an instruction. After an error the tape,
        head and instruction pointer are left as they were when it occurred.
        """
        if self.state.started:
            raise AlreadyExecutedError(
                message=f"AlreadyExecutedError: {self.program.filename} was already run on this machine "
                        f"(status {self.state.status.name})"
            )

        while self.step(input_stream, output_stream):
            pass

    def step(self, input_stream: BinaryIO, output_stream: BinaryIO) -> bool:
        """Execute a single instruction.

        Returns True while there are instructions left to run.
        """
        state = self.state
        if state.finished:
            return False
        state.status = MachineStatus.RUNNING

        if state.ip >= len(self.program):
            state.status = MachineStatus.HALTED
            return False

        ins = self.program[state.ip]
        state.steps += 1
        if not isinstance(ins, Comment):
            state.add_trace(
                f"{state.ip:6d} {ins.symbol} {ins.position:>8s} head={state.head} cell={self.current_cell}"
            )

        try:
            if isinstance(ins, MoveRight):
                self.move_right()
            elif isinstance(ins, MoveLeft):
                self.move_left()
            elif isinstance(ins, Increment):
                self.tape[state.head] = np.uint8((self.current_cell + 1) % 256)
                state.ip += 1
            elif isinstance(ins, Decrement):
                self.tape[state.head] = np.uint8((self.current_cell - 1) % 256)
                state.ip += 1
            elif isinstance(ins, Output):
                self.output_byte(output_stream)
            elif isinstance(ins, Input):
                self.input_byte(input_stream)
            elif isinstance(ins, LoopStart):
                if self.current_cell == 0:
                    state.ip = self._jump_table[state.ip] + 1
                else:
                    state.ip += 1
            elif isinstance(ins, LoopEnd):
                if self.current_cell != 0:
                    state.ip = self._jump_table[state.ip] + 1
                else:
                    state.ip += 1
            else:
                state.ip += 1
        except Exception:
            state.status = MachineStatus.FAILED
            raise

        if state.ip >= len(self.program):
            state.status = MachineStatus.HALTED
            return False
        return True

    # ===== Single operations =====

    def move_right(self) -> None:
        state = self._start()
        if state.head >= self.size - 1:
            if not self.extensible:
                line, column = self._position()
                raise make_bounds_error(
                    message=f"head cannot move past the last cell ({self.size} cells)",
                    ip=state.ip,
                    line=line,
                    column=column,
                    head=state.head,
                )
            self.tape = np.concatenate((self.tape, np.zeros(1, dtype=np.uint8)))
        state.head += 1
        state.ip += 1

    def move_left(self) -> None:
        state = self._start()
        if state.head == 0:
            line, column = self._position()
            raise make_bounds_error(
                message="head cannot move left of cell 0",
                ip=state.ip,
                line=line,
                column=column,
                head=state.head,
            )
        state.head -= 1
        state.ip += 1

    def output_byte(self, output_stream: BinaryIO) -> None:
        """Write the current cell to ``output_stream`` and flush it."""
        self._start()
        output_stream.write(bytes((self.current_cell,)))
        output_stream.flush()
        self.state.ip += 1

    def input_byte(self, input_stream: BinaryIO) -> None:
        """Read exactly one byte from ``input_stream`` into the current cell."""
        self._start()
        data = input_stream.read(1)
        if not data:
            line, column = self._position()
            raise make_read_error(
                message="end of input while reading a byte",
                ip=self.state.ip,
                line=line,
                column=column,
            )
        self.tape[self.state.head] = np.uint8(data[0])
        self.state.ip += 1

    def _start(self) -> MachineState:
        # any single operation counts as the one run this machine gets
        if self.state.status is MachineStatus.READY:
            self.state.status = MachineStatus.RUNNING
        return self.state

    def _position(self) -> Tuple[int, int]:
        if not self.program:
            return 1, 1
        # past the end: report the last instruction
        ins = self.program[min(self.state.ip, len(self.program) - 1)]
        return ins.line, ins.column
