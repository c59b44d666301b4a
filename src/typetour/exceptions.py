"""Exception hierarchy for typetour.

All package-specific exceptions inherit from :class:`TypeTourError` so that
callers can catch a single base class. Overflow, precision loss, NaN and
infinity are ordinary values in this package and never raise.
"""

from __future__ import annotations


class TypeTourError(Exception):
    """Base exception for all typetour operations."""


class UnsupportedWidthError(TypeTourError, ValueError):
    """Raised when a bit width has no matching fixed-width type."""

    def __init__(self, message: str, *, bits: int | None = None) -> None:
        super().__init__(message)
        self.bits = bits


class LossyConversionError(TypeTourError, ValueError):
    """Raised when a widening conversion is asked to drop bits.

    Narrowing is always explicit: use :func:`typetour.numeric.narrow`.
    """

    def __init__(
        self,
        message: str,
        *,
        source_bits: int | None = None,
        target_bits: int | None = None,
    ) -> None:
        super().__init__(message)
        self.source_bits = source_bits
        self.target_bits = target_bits


class CodeUnitError(TypeTourError, ValueError):
    """Raised when a value is not a valid UTF-16 code unit or surrogate half."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class NullReferenceError(TypeTourError):
    """Raised when an absent box is unboxed."""
