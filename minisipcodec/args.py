"""Iteration over the values and ``key=value`` parameters of a header value."""

from __future__ import annotations

import enum
from typing import Iterator, Optional, Tuple

from .message import SipError


class ArgKind(enum.IntEnum):
    """What a single step of an :class:`ArgIterator` produced."""

    NONE = 0
    VALUE = 1
    ARG = 2


class ArgIterator:
    """Walk a header value such as ``SIP/2.0/UDP a;branch=x,SIP/2.0/TCP b``.

    A step produces either a value (the text before the first ``;``) or a
    ``key=value`` parameter that belongs to the current value. A ``,`` ends
    the current value so that the next ``;`` produces a new one.
    """

    def __init__(self, text: str) -> None:
        if text is None:
            raise SipError("`text` cannot be None")
        self._text = text
        self._pos = 0
        self.value: Optional[str] = None
        self.arg_key: Optional[str] = None
        self.arg_value: Optional[str] = None

    @property
    def remaining(self) -> str:
        """The part of the text that has not been consumed yet."""
        return self._text[self._pos :]

    def advance(self) -> ArgKind:
        """Move to the next value or parameter and tell which one was found."""
        self.arg_key = None
        self.arg_value = None

        text = self._text
        start = self._pos
        key_end: Optional[int] = None

        for index, char in enumerate(text[start:], start):
            if char == ";":
                if self.value is None:
                    return self._emit_value(index, 1)
                if key_end is not None:
                    return self._emit_arg(key_end, index, 1)
            elif char == "=":
                if self.value is not None and key_end is None:
                    key_end = index
                    self.arg_key = text[start:index]
            elif char == ",":
                if self.value is not None:
                    self.value = None
                    if key_end is not None:
                        return self._emit_arg(key_end, index, 1)

        end = len(text)
        if self.value is None:
            return self._emit_value(end, 0)
        if key_end is not None:
            return self._emit_arg(key_end, end, 0)
        return ArgKind.NONE

    def __iter__(self) -> Iterator[Tuple[ArgKind, str, Optional[str]]]:
        """Yield ``(VALUE, value, None)`` and ``(ARG, key, value)`` items."""
        while kind := self.advance():
            if kind is ArgKind.VALUE:
                yield kind, self.value or "", None
            else:
                yield kind, self.arg_key or "", self.arg_value

    def _emit_value(self, end: int, skip: int) -> ArgKind:
        self.value = self._text[self._pos : end]
        self._pos = end + skip
        return ArgKind.VALUE

    def _emit_arg(self, key_end: int, end: int, skip: int) -> ArgKind:
        value = self._text[key_end + 1 : end]
        if value.endswith(","):
            value = value[:-1]
        if value.endswith(";"):
            value = value[:-1]
        self.arg_value = value
        self._pos = end + skip
        return ArgKind.ARG