from __future__ import annotations

from typing import List

from .instructions import Instruction, from_char
from .program import Program


def tokenize(source: str) -> List[Instruction]:
    """Map every character of ``source`` to an instruction.

    Nothing is dropped: characters outside the instruction set (line breaks
    included) become ``Comment`` instructions so that positions stay exact.
    Lines and columns are 1-based; the column restarts after every line break
    (``\\n``, ``\\r\\n`` or a lone ``\\r``).
    """
    out: List[Instruction] = []
    line = 1
    column = 1
    for i, ch in enumerate(source):
        out.append(from_char(ch, line, column))
        # "\r\n" breaks once, on its "\n"
        if ch == '\n' or (ch == '\r' and source[i + 1:i + 2] != '\n'):
            line += 1
            column = 1
        else:
            column += 1
    return out


def parse(filename: str, source: str) -> Program:
    return Program(filename=filename, instructions=tuple(tokenize(source)), source=source)
