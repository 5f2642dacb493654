"""Lazy code point views over UTF-8 input."""

from __future__ import annotations

import operator
from array import array
from typing import Any, Iterable, Iterator, Optional

from .decoder import Decoder

# memoryview formats holding one narrow character per item
_CHAR_FORMATS = ("b", "c")


def reinterpret_chars(source: Iterable[Any]) -> Iterator[int]:
    """Yield each narrow character of ``source`` as its unsigned byte pattern.

    A narrow character is a one-character ``str`` in U+0000..U+00FF, a
    one-byte ``bytes`` object, or a signed int in -128..127. The bit pattern
    is kept as is, so -1 becomes 0xFF; nothing is re-encoded.
    """
    for char in source:
        if isinstance(char, str):
            value = ord(char)
            if value > 0xFF:
                raise ValueError(f"Not a narrow character: {char!r}")
            yield value
        elif isinstance(char, (bytes, bytearray)):
            if len(char) != 1:
                raise ValueError(f"Expected a single byte, got {char!r}")
            yield char[0]
        else:
            value = operator.index(char)
            if not -0x80 <= value <= 0x7F:
                raise ValueError(f"Signed character out of range: {value}")
            yield value & 0xFF


class DecodeIterator:
    """Cursor exposing one decoded code point at a time.

    Construction already pulls the first code point, so :attr:`current` is
    valid as soon as :attr:`at_end` is false. Each :meth:`advance` first
    drains the decoder's pending output before pulling more bytes, so no
    code point is lost when one byte produces two.
    """

    def __init__(self, source: Iterable[int]) -> None:
        self._bytes = iter(source)
        self._exhausted = False
        self._decoder = Decoder()
        self._code: Optional[int] = None
        self._has_last_error = False
        self._pull()

    @property
    def at_end(self) -> bool:
        return self._exhausted and not self._has_last_error

    @property
    def current(self) -> int:
        if self.at_end or self._code is None:
            raise IndexError("No code point past the end of the input")
        return self._code

    def advance(self) -> None:
        if self.at_end:
            return
        if self._has_last_error:
            # the concluding replacement was the last value
            self._has_last_error = False
            return
        code = self._decoder.fetch()
        if code is not None:
            self._code = code
            return
        self._pull()

    def _pull(self) -> None:
        for byte in self._bytes:
            code = self._decoder.decode(byte)
            if code is not None:
                self._code = code
                return
        self._exhausted = True
        code = self._decoder.check_last_error()
        if code is not None:
            self._has_last_error = True
            self._code = code

    def __iter__(self) -> DecodeIterator:
        return self

    def __next__(self) -> int:
        if self.at_end:
            raise StopIteration
        code = self.current
        self.advance()
        return code


class DecodeView:
    """Iterable of the code points encoded in a UTF-8 byte iterable.

    Nothing is decoded until iteration starts. Every call to ``iter()`` gets
    a fresh decoder, so a view over bytes, a bytearray or a list can be
    walked more than once; a view over a one-shot iterator cannot.
    """

    def __init__(self, source: Iterable[Any], chars: bool = False) -> None:
        self.source = source
        self.chars = chars

    def __iter__(self) -> DecodeIterator:
        if self.chars:
            return DecodeIterator(reinterpret_chars(self.source))
        return DecodeIterator(self.source)

    def __repr__(self) -> str:
        kind = "chars" if self.chars else "bytes"
        return f"{type(self).__name__}({self.source!r}, {kind})"


class Decode:
    """Adapter building a :class:`DecodeView`, as ``decode(data)`` or ``data | decode``.

    ``str`` input, ``array('b')`` and memoryviews of signed or char format are
    treated as narrow characters and reinterpreted bit for bit; anything else
    is taken as unsigned bytes.
    """

    def __call__(self, source: Iterable[Any]) -> DecodeView:
        if isinstance(source, str):
            return DecodeView(source, chars=True)
        if isinstance(source, array) and source.typecode == "b":
            return DecodeView(memoryview(source).cast("B"))
        if isinstance(source, memoryview) and source.format in _CHAR_FORMATS:
            return DecodeView(source.cast("B"))
        return DecodeView(source)

    def chars(self, source: Iterable[Any]) -> DecodeView:
        """Decode an iterable of narrow characters."""
        return DecodeView(source, chars=True)

    def __ror__(self, source: Iterable[Any]) -> DecodeView:
        return self(source)


decode = Decode()
