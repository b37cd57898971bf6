from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class MachineStatus(Enum):
    READY = auto()    # constructed, interpret() not called yet
    RUNNING = auto()
    HALTED = auto()   # ran off the end of the program
    FAILED = auto()   # stopped on an execution error


@dataclass
class MachineState:
    head: int = 0
    ip: int = 0
    steps: int = 0
    status: MachineStatus = MachineStatus.READY
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    @property
    def started(self) -> bool:
        return self.status is not MachineStatus.READY

    @property
    def finished(self) -> bool:
        return self.status in (MachineStatus.HALTED, MachineStatus.FAILED)

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
