
from .api import RunOptions, RunResult, run_file, run_program, run_string
from .errors import (
    AlreadyExecutedError,
    BFError,
    BracketMismatchError,
    ExecutionError,
    ReadError,
    TapeBoundsError,
)
from .instructions import (
    Comment,
    Decrement,
    Increment,
    Input,
    Instruction,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
)
from .lexer import parse, tokenize
from .program import Program, validate
from .state import MachineState, MachineStatus
from .vm import DEFAULT_CELLS, VirtualMachine

__all__ = [
    'AlreadyExecutedError',
    'BFError',
    'BracketMismatchError',
    'Comment',
    'DEFAULT_CELLS',
    'Decrement',
    'ExecutionError',
    'Increment',
    'Input',
    'Instruction',
    'LoopEnd',
    'LoopStart',
    'MachineState',
    'MachineStatus',
    'MoveLeft',
    'MoveRight',
    'Output',
    'Program',
    'ReadError',
    'RunOptions',
    'RunResult',
    'TapeBoundsError',
    'VirtualMachine',
    'parse',
    'run_file',
    'run_program',
    'run_string',
    'tokenize',
    'validate',
]
