"""Codec registration exposing the DFA decoder as ``utf-8-dfa``.

Importing this module registers a search function with :mod:`codecs`, after
which ``data.decode("utf-8-dfa")``, ``open(path, encoding="utf-8-dfa")`` and
``codecs.open`` decode through the DFA. Encoding is left to the interpreter's
own UTF-8 codec.
"""

import codecs
import logging
from typing import Optional, Tuple

from .decoder import Decoder
from .stream import StreamDecoder, decode_text

logger = logging.getLogger(__name__)

CODEC_NAME = "utf-8-dfa"
_NAMES = ("utf_8_dfa", "utf8_dfa")


# Codec APIs


class Codec(codecs.Codec):

    def decode(self, input: bytes, errors: str = "strict") -> Tuple[str, int]:
        return decode_text(input), len(input)

    def encode(self, input: str, errors: str = "strict") -> Tuple[bytes, int]:
        return codecs.utf_8_encode(input, errors)


class IncrementalEncoder(codecs.IncrementalEncoder):

    def encode(self, input: str, final: bool = False) -> bytes:
        return codecs.utf_8_encode(input, self.errors)[0]


class StreamReader(Codec, codecs.StreamReader):
    """Reader keeping a partial sequence in the DFA between reads.

    Every byte handed to :meth:`decode` is consumed. Once the stream is
    exhausted, a sequence left unfinished is replaced by one U+FFFD.
    """

    def __init__(self, stream, errors: str = "strict") -> None:
        super().__init__(stream, errors)
        self._decoder = Decoder()

    def decode(self, input: bytes, errors: str = "strict") -> Tuple[str, int]:
        return "".join(chr(code) for code in self._decoder.feed(input)), len(input)

    def read(self, size: int = -1, chars: int = -1, firstline: bool = False) -> str:
        text = super().read(size, chars, firstline)
        if size == 0 or chars == 0:
            return text
        if text and (size >= 0 or chars >= 0):
            return text
        # the stream is exhausted: either everything was read or nothing was left
        last = self._decoder.check_last_error()
        self._decoder.reset()
        if last is None:
            return text
        return text + chr(last)

    def reset(self) -> None:
        super().reset()
        self._decoder.reset()


class StreamWriter(Codec, codecs.StreamWriter):
    pass


# encodings module API


def normalize_encoding(encoding: str) -> str:
    return encoding.strip().lower().replace("-", "_").replace(" ", "_")


def getregentry() -> codecs.CodecInfo:
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=StreamDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def search_function(encoding: str) -> Optional[codecs.CodecInfo]:
    if normalize_encoding(encoding) not in _NAMES:
        return None
    logger.debug("codec lookup %r resolved to %s", encoding, CODEC_NAME)
    return getregentry()


codecs.register(search_function)
