from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Type, Union


# ---------------- Instruction variants ----------------
@dataclass(frozen=True)
class _Positioned:
    line: int    # 1-based
    column: int  # 1-based, resets on each line

    symbol: ClassVar[str] = ''

    @property
    def position(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class MoveRight(_Positioned):
    symbol: ClassVar[str] = '>'


@dataclass(frozen=True)
class MoveLeft(_Positioned):
    symbol: ClassVar[str] = '<'


@dataclass(frozen=True)
class Increment(_Positioned):
    symbol: ClassVar[str] = '+'


@dataclass(frozen=True)
class Decrement(_Positioned):
    symbol: ClassVar[str] = '-'


@dataclass(frozen=True)
class Output(_Positioned):
    symbol: ClassVar[str] = '.'


@dataclass(frozen=True)
class Input(_Positioned):
    symbol: ClassVar[str] = ','


@dataclass(frozen=True)
class LoopStart(_Positioned):
    symbol: ClassVar[str] = '['


@dataclass(frozen=True)
class LoopEnd(_Positioned):
    symbol: ClassVar[str] = ']'


@dataclass(frozen=True)
class Comment(_Positioned):
    char: str


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopStart, LoopEnd, Comment]

BF_OPS: Dict[str, Type[_Positioned]] = {
    cls.symbol: cls
    for cls in (MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopStart, LoopEnd)
}


def from_char(ch: str, line: int, column: int) -> Instruction:
    cls = BF_OPS.get(ch)
    if cls is None:
        return Comment(line, column, ch)
    return cls(line, column)
