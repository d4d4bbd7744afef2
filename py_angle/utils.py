"""Result record and best-effort numeric parsing.

Parsing helpers never raise on malformed text; they hand back a `Result` that
either carries the parsed value or a human-readable reason.

Examples:
    >>> string_to_number('13')
    Result(value=13, error=None)
    >>> string_to_number('13.2')
    Result(value=13.2, error=None)
    >>> string_to_number('Marty McFly').error
    'Unable to convert value to number'
"""
from __future__ import annotations

from typing import Any, Optional, Type

from typing_extensions import NamedTuple

__all__ = (
    'Result',
    'string_to_integer',
    'string_to_float',
    'string_to_number',
)


class Result(NamedTuple):
    """Outcome of an operation that may fail without raising.

    Attributes:
        value: Produced value, None on failure.
        error: Failure reason, None on success.

    Examples:
        >>> Result.success(3).ok
        True
        >>> Result.failure("nope").unwrap()
        Traceback (most recent call last):
        ...
        ValueError: nope
    """

    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> Result:
        return cls(value, None)

    @classmethod
    def failure(cls, error: str) -> Result:
        return cls(None, error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self, exc_type: Type[Exception] = ValueError) -> Any:
        """Return the value or raise `exc_type` with the failure reason."""
        if self.error is not None:
            raise exc_type(self.error)
        return self.value


def string_to_integer(value: str) -> Result:
    """Convert a string to an integer without raising.

    Examples:
        >>> string_to_integer('13')
        Result(value=13, error=None)
        >>> string_to_integer('13.2').error
        'Unable to convert value to integer'
    """
    try:
        return Result.success(int(value))
    except (TypeError, ValueError):
        return Result.failure("Unable to convert value to integer")


def string_to_float(value: str) -> Result:
    """Convert a string to a float without raising.

    Integer text is not a float and is rejected; use `string_to_number` to accept both.

    Examples:
        >>> string_to_float('13.2')
        Result(value=13.2, error=None)
        >>> string_to_float('13').error
        'Unable to convert value to float'
        >>> string_to_float('thirteen').error
        'Unable to convert value to float'
    """
    if string_to_integer(value).ok:
        return Result.failure("Unable to convert value to float")
    try:
        return Result.success(float(value))
    except (TypeError, ValueError):
        return Result.failure("Unable to convert value to float")


def string_to_number(value: str) -> Result:
    """Convert a string to an int when it is integral, to a float otherwise."""
    for convert in (string_to_integer, string_to_float):
        if (result := convert(value)).ok:
            return result
    return Result.failure("Unable to convert value to number")
