"""Core modules for the utf8dfa decoder."""

from . import codec  # noqa: F401
from .conformance import ConformanceCase, ConformanceRunner, random_cases  # noqa: F401
from .decoder import Decoder, Pending  # noqa: F401
from .stream import StreamDecoder, decode_text  # noqa: F401
from .tables import REPLACEMENT_CHARACTER, State  # noqa: F401
from .vectors import STRESS_CASES  # noqa: F401
from .view import Decode, DecodeIterator, DecodeView, decode, reinterpret_chars  # noqa: F401
