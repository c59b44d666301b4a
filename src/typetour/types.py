"""Supporting types for the tour: an enum, a mutable record, an interface.

All three are reference types: binding a second name to an instance shares
the instance, it never copies it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, TextIO, runtime_checkable


class Day(Enum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def is_weekend(self) -> bool:
        return self in (Day.SATURDAY, Day.SUNDAY)

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Person:
    """Mutable record; equality is identity, as for any plain object."""

    name: str
    age: int


@runtime_checkable
class Greeter(Protocol):
    def greet(self, audience: str) -> None:
        ...


class ConsoleGreeter:
    """Greeter that prints ``Hello, <audience>!``.

    Without an explicit ``stream`` it writes to whatever ``sys.stdout`` is at
    call time, so redirected output is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def greet(self, audience: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(f"Hello, {audience}!", file=stream)
