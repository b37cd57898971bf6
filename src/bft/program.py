from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from .errors import make_bracket_error
from .instructions import Instruction, LoopEnd, LoopStart


@dataclass(frozen=True)
class Program:
    """An immutable, position-annotated instruction stream.

    Comments are kept alongside the eight code instructions so that
    diagnostics can point at exact source positions; they are no-ops when
    executed. ``str(program)`` renders the code symbols only.
    """

    filename: str
    instructions: Tuple[Instruction, ...]
    source: str = field(default='', repr=False, compare=False)

    @classmethod
    def from_string(cls, source: str, filename: str = '<string>') -> 'Program':
        from .lexer import parse

        return parse(filename, source)

    @classmethod
    def from_file(cls, path: str | Path, *, encoding: str = 'utf-8') -> 'Program':
        p = Path(path)
        return cls.from_string(p.read_text(encoding=encoding), filename=str(p))

    @property
    def source_file(self) -> str:
        return self.filename

    def validate(self) -> Dict[int, int]:
        return validate(self)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __str__(self) -> str:
        return ''.join(ins.symbol for ins in self)


def validate(program: Program) -> Dict[int, int]:
    """Check that every bracket is paired and resolve the pairs.

    Returns a jump table mapping the index of each ``[`` to the index of its
    ``]`` and vice versa. Raises ``BracketMismatchError`` pointing at the
    stray ``]``, or at the innermost ``[`` left open at the end.
    """
    stack: List[int] = []
    jump_table: Dict[int, int] = {}

    for pos, ins in enumerate(program):
        if isinstance(ins, LoopStart):
            stack.append(pos)
        elif isinstance(ins, LoopEnd):
            if not stack:
                raise make_bracket_error(
                    message=f"unmatched closing bracket at line {ins.line}, column {ins.column}",
                    filename=program.filename,
                    source=program.source,
                    line=ins.line,
                    column=ins.column,
                )
            start = stack.pop()
            jump_table[start] = pos
            jump_table[pos] = start

    if stack:
        ins = program.instructions[stack.pop()]
        raise make_bracket_error(
            message=f"unmatched opening bracket at line {ins.line}, column {ins.column}",
            filename=program.filename,
            source=program.source,
            line=ins.line,
            column=ins.column,
        )

    return jump_table
