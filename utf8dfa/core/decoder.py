"""UTF-8 decoder driven one byte at a time."""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .tables import (
    CHAR_CLASSES,
    REPLACEMENT_CHARACTER,
    State,
    next_state,
    start_byte_payload,
)

DATA_MASK = 0x3F
DATA_SHIFT = 6


class Pending(Enum):
    """Secondary output left behind by the last decoded byte."""

    NOTHING = "nothing"
    CODE_POINT = "code_point"
    ERROR = "error"


@dataclass
class Decoder:
    """Hoehrmann DFA decoder that substitutes U+FFFD for ill-formed input.

    Every maximal subpart in error yields one replacement character: when a
    so far legal subpart is interrupted by an unexpected byte, the subpart is
    replaced and decoding restarts at the interrupting byte. A stream ending
    inside a multi-byte sequence yields one concluding replacement, reported
    by :meth:`check_last_error`.

    Because the interrupting byte may itself complete a code point (or be in
    error on its own), one byte can produce two outputs. Whenever
    :meth:`decode` returns a value, :meth:`fetch` must be called once to
    collect the possible second one.
    """

    state: State = State.START
    code: int = 0
    pending: Pending = Pending.NOTHING

    def __post_init__(self) -> None:
        self.state = State(self.state)
        if self.state == State.ERROR:
            raise ValueError("A decoder cannot rest in the error state")
        self.pending = Pending(self.pending)

    def decode(self, byte: int) -> Optional[int]:
        """Consume one byte and return the code point it completes, if any."""
        byte = operator.index(byte)
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"Byte out of range: {byte}")

        char_class = CHAR_CLASSES[byte]
        self.pending = Pending.NOTHING
        new_state = next_state(self.state, char_class)

        if new_state == State.ERROR:
            if self.state == State.START:  # single byte in error
                return REPLACEMENT_CHARACTER
            self.state = next_state(State.START, char_class)
            if self.state == State.ERROR:  # interrupted by a byte in error
                self.state = State.START
                self.pending = Pending.ERROR
            elif self.state == State.START:  # interrupted by a single-byte code point
                self.code = start_byte_payload(byte, char_class)
                self.pending = Pending.CODE_POINT
            else:  # interrupted by a multi-byte start byte
                self.code = start_byte_payload(byte, char_class)
            return REPLACEMENT_CHARACTER

        if self.state == State.START:
            self.code = start_byte_payload(byte, char_class)
        else:
            self.code = (self.code << DATA_SHIFT) | (byte & DATA_MASK)
        self.state = new_state

        if self.state == State.START:
            return self.code
        return None

    def fetch(self) -> Optional[int]:
        """Return the extra code point left by the last byte, then clear it."""
        pending = self.pending
        self.pending = Pending.NOTHING
        if pending is Pending.CODE_POINT:
            return self.code
        if pending is Pending.ERROR:
            return REPLACEMENT_CHARACTER
        return None

    def check_last_error(self) -> Optional[int]:
        """Return U+FFFD if the input so far ends inside a multi-byte sequence.

        Meant to be called once the input is over. The decoder is left
        untouched, so calling it early or repeatedly is harmless.
        """
        if self.state != State.START:
            return REPLACEMENT_CHARACTER
        return None

    def feed(self, chunk: Iterable[int]) -> Iterator[int]:
        """Decode every byte of ``chunk``, yielding both outputs of each byte.

        The end of ``chunk`` is not treated as the end of the input.
        """
        for byte in chunk:
            code = self.decode(byte)
            if code is None:
                continue
            yield code
            extra = self.fetch()
            if extra is not None:
                yield extra

    def reset(self) -> None:
        self.state = State.START
        self.code = 0
        self.pending = Pending.NOTHING
