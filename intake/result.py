"""Decode results — success or failure as values rather than unwinding.

Lets the parser compose the legacy decode with its fallback by looking
at the primary outcome instead of nesting ``try`` blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from core.errors import OrderParseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Decoded(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failed:
    error: OrderParseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


DecodeResult = Union[Decoded[T], Failed]


def attempt(fn: Callable[[], T]) -> DecodeResult[T]:
    """Run *fn*, capturing an :class:`OrderParseError` as a ``Failed`` value.

    Anything that is not an ``OrderParseError`` is a bug and propagates.
    """
    try:
        return Decoded(fn())
    except OrderParseError as exc:
        return Failed(exc)
