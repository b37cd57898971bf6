from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .lexer import parse
from .program import Program
from .vm import VirtualMachine


@dataclass(frozen=True)
class RunOptions:
    cells: int = 0
    extensible: bool = False
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    cells: Tuple[int, ...] = field(repr=False)
    head: int
    steps: int
    trace: List[str] = field(default_factory=list, repr=False)


def run_program(program: Program, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    vm = VirtualMachine(program, cells=opts.cells, extensible=opts.extensible, trace=opts.trace)
    stdout = io.BytesIO()
    vm.interpret(io.BytesIO(input_data), stdout)
    return RunResult(
        output=stdout.getvalue(),
        cells=tuple(int(b) for b in vm.cells),
        head=vm.head,
        steps=vm.state.steps,
        trace=list(vm.state.trace),
    )


def run_string(
    source: str,
    input_data: bytes = b"",
    *,
    options: Optional[RunOptions] = None,
    filename: str = "<string>",
) -> RunResult:
    return run_program(parse(filename, source), input_data, options=options)


def run_file(
    path: str | Path,
    input_data: bytes = b"",
    *,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_program(Program.from_file(path, encoding=encoding), input_data, options=options)
