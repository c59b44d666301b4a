"""A console tour of primitive and reference type semantics.

The tour prints fixed-width integer ranges and overflow, IEEE-754 special
values, UTF-16 code units, boxing and identity, array aliasing, enums and
interfaces. The helpers behind it are public so the same semantics can be
checked directly.
"""

from __future__ import annotations

from .boxing import IntegerBox, unbox
from .exceptions import (
    CodeUnitError,
    LossyConversionError,
    NullReferenceError,
    TypeTourError,
    UnsupportedWidthError,
)
from .numeric import (
    add,
    divide,
    int_range,
    multiply,
    narrow,
    nearly_equal,
    promote,
    subtract,
    truncate,
    widen,
    wrap,
)
from .types import ConsoleGreeter, Day, Greeter, Person

__all__ = [
    "CodeUnitError",
    "ConsoleGreeter",
    "Day",
    "Greeter",
    "IntegerBox",
    "LossyConversionError",
    "NullReferenceError",
    "Person",
    "TypeTourError",
    "UnsupportedWidthError",
    "add",
    "divide",
    "int_range",
    "multiply",
    "narrow",
    "nearly_equal",
    "promote",
    "subtract",
    "truncate",
    "unbox",
    "widen",
    "wrap",
]

__version__ = "0.1.0"
