"""Chunked UTF-8 decoding to text."""

import codecs
from typing import Tuple

from .decoder import Decoder
from .tables import NUM_FSM_ROWS, State

_STATE_BITS = 4


class StreamDecoder(codecs.IncrementalDecoder):
    """Incremental decoder feeding arbitrary chunks through the UTF-8 DFA.

    Multi-byte sequences may be split anywhere across chunks. Nothing is
    buffered: the partial code point lives in the DFA accumulator, which is
    what :meth:`getstate` reports. Ill-formed input is always replaced with
    U+FFFD, whatever ``errors`` says.
    """

    def __init__(self, errors: str = "replace") -> None:
        super().__init__(errors)
        self._decoder = Decoder()

    def decode(self, input: bytes, final: bool = False) -> str:
        out = [chr(code) for code in self._decoder.feed(input)]
        if final:
            last = self._decoder.check_last_error()
            if last is not None:
                out.append(chr(last))
            self._decoder.reset()
        return "".join(out)

    def push(self, chunk: bytes) -> str:
        """Decode one chunk; an incomplete tail waits for the next chunk."""
        return self.decode(chunk)

    def finish(self) -> str:
        """Close the stream, replacing a truncated final sequence."""
        return self.decode(b"", final=True)

    def reset(self) -> None:
        self._decoder.reset()

    def getstate(self) -> Tuple[bytes, int]:
        state = self._decoder.state
        if state == State.START:
            # the accumulator only matters mid-sequence
            return b"", 0
        return b"", (self._decoder.code << _STATE_BITS) | state

    def setstate(self, state: Tuple[bytes, int]) -> None:
        buffered, flag = state
        if buffered:
            raise ValueError(f"StreamDecoder keeps no byte buffer, got {buffered!r}")
        raw_state = flag & ((1 << _STATE_BITS) - 1)
        if raw_state >= NUM_FSM_ROWS:
            raise ValueError(f"Invalid decoder state flag: {flag}")
        self._decoder.reset()
        self._decoder.state = State(raw_state)
        self._decoder.code = flag >> _STATE_BITS


def decode_text(data: bytes) -> str:
    """Decode a complete UTF-8 buffer to text."""
    return StreamDecoder().decode(data, final=True)
