"""Constant tables driving the UTF-8 state machine.

The byte classes and the state layout are those of Bjoern Hoehrmann's DFA
(https://bjoern.hoehrmann.de/utf-8/decoder/dfa/). For any byte, its class is
all the decoder needs to know to handle it in every state.
"""

from enum import IntEnum
from typing import Tuple

REPLACEMENT_CHARACTER = 0xFFFD

NUM_CLASSES = 12
NUM_FSM_ROWS = 8

CHAR_CLASSES: Tuple[int, ...] = (
    (0x0,) * 0x80  # 00..7f
    + (0x1,) * 0x10  # 80..8f
    + (0x9,) * 0x10  # 90..9f
    + (0x7,) * 0x20  # a0..bf
    + (0x8,) * 0x02  # c0..c1
    + (0x2,) * 0x1E  # c2..df
    + (0xA,)  # e0
    + (0x3,) * 0x0C  # e1..ec
    + (0x4,)  # ed
    + (0x3,) * 0x02  # ee..ef
    + (0xB,)  # f0
    + (0x6,) * 0x03  # f1..f3
    + (0x5,)  # f4
    + (0x8,) * 0x0B  # f5..ff
)


class State(IntEnum):
    """Decoder states; NEXTn means more continuation bytes are expected."""

    START = 0
    NEXT1 = 1
    NEXT2 = 2
    NEXT3 = 3
    NEXT4 = 4
    NEXT5 = 5
    NEXT6 = 6
    NEXT7 = 7
    ERROR = 8


_S = State.START
_E = State.ERROR
_1 = State.NEXT1
_2 = State.NEXT2
_3 = State.NEXT3
_4 = State.NEXT4
_5 = State.NEXT5
_6 = State.NEXT6
_7 = State.NEXT7

# One row per non-error state, one column per byte class. Transitions out of
# ERROR are not stored: the decoder resolves them by re-reading the byte from
# START.
TRANSITIONS: Tuple[State, ...] = (
    _S, _E, _1, _2, _4, _7, _6, _E, _E, _E, _3, _5,  # START
    _E, _S, _E, _E, _E, _E, _E, _S, _E, _S, _E, _E,  # NEXT1
    _E, _1, _E, _E, _E, _E, _E, _1, _E, _1, _E, _E,  # NEXT2
    _E, _E, _E, _E, _E, _E, _E, _1, _E, _E, _E, _E,  # NEXT3
    _E, _1, _E, _E, _E, _E, _E, _E, _E, _1, _E, _E,  # NEXT4
    _E, _E, _E, _E, _E, _E, _E, _2, _E, _2, _E, _E,  # NEXT5
    _E, _2, _E, _E, _E, _E, _E, _2, _E, _2, _E, _E,  # NEXT6
    _E, _2, _E, _E, _E, _E, _E, _E, _E, _E, _E, _E,  # NEXT7
)

assert len(CHAR_CLASSES) == 0x100
assert len(TRANSITIONS) == NUM_FSM_ROWS * NUM_CLASSES


def next_state(state: State, char_class: int) -> State:
    """Return the state reached from ``state`` on a byte of ``char_class``."""
    return TRANSITIONS[state * NUM_CLASSES + char_class]


def start_byte_payload(byte: int, char_class: int) -> int:
    """Return the data bits carried by a start byte."""
    return byte & (0xFF >> char_class)
