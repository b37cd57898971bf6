from __future__ import annotations

import re

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * max(0, column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'bracket':
        if 'unmatched closing' in msg:
            return 'Every "]" needs an earlier "[" on the same nesting level. Remove it or add the missing "[".'
        if 'unmatched opening' in msg:
            return 'Every "[" needs a later "]". Check for a missing "]" at the end of the loop body.'
        return None
    if kind == 'runtime':
        if 'left of cell 0' in msg:
            return 'The tape only extends to the right; the head cannot move left of the first cell.'
        if 'past the last cell' in msg:
            return 'Run with --extensible to let the tape grow, or raise --cells.'
        if 'end of input' in msg:
            return 'The program reads more bytes than were supplied on stdin.'
        return None
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BracketMismatchError(BFError):
    filename: str
    line: int
    column: int
    context: str


@dataclass
class ExecutionError(BFError):
    ip: int
    line: int
    column: int


@dataclass
class TapeBoundsError(ExecutionError):
    head: int


@dataclass
class ReadError(ExecutionError):
    pass


@dataclass
class AlreadyExecutedError(BFError):
    pass


def make_bracket_error(*, message: str, filename: str, source: str, line: int, column: int) -> BracketMismatchError:
    lines = re.split(r'\r\n|\r|\n', source)
    ctx = _build_context(lines, line, column)
    hint = _hint_for(message, kind='bracket')
    hint_block = f"\nHint: {hint}" if hint else ""
    return BracketMismatchError(
        message=f"BracketError: {message} in {filename}\n{ctx}{hint_block}",
        filename=filename,
        line=line,
        column=column,
        context=ctx,
    )


def make_bounds_error(*, message: str, ip: int, line: int, column: int, head: int) -> TapeBoundsError:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return TapeBoundsError(
        message=f"TapeBoundsError: {message} (instruction {ip}, line {line}, column {column}){hint_block}",
        ip=ip,
        line=line,
        column=column,
        head=head,
    )


def make_read_error(*, message: str, ip: int, line: int, column: int) -> ReadError:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return ReadError(
        message=f"ReadError: {message} (instruction {ip}, line {line}, column {column}){hint_block}",
        ip=ip,
        line=line,
        column=column,
    )
