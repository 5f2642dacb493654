# Chunked decoding to text.
# Run: pytest -q

import io

import pytest

from utf8dfa.core import StreamDecoder, decode_text


def run_chunks(chunks):
    decoder = StreamDecoder()
    out = []
    for chunk in chunks:
        out.append(decoder.push(chunk))
    out.append(decoder.finish())
    return "".join(out)


def test_ascii_split():
    assert run_chunks([b"Hel", b"lo ", b"Wor", b"ld"]) == "Hello World"


def test_multibyte_split():
    # U+00E9 split between chunks
    assert run_chunks([b"\xC3", b"\xA9"]) == "é"


def test_four_byte_split_one_byte_per_chunk():
    assert run_chunks([b"\xF0", b"\x9F", b"\x98", b"\x80"]) == "\U0001F600"


def test_incomplete_tail_waits_for_next_chunk():
    decoder = StreamDecoder()
    assert decoder.push(b"a\xE2\x82") == "a"
    assert decoder.push(b"\xAC") == "€"
    assert decoder.finish() == ""


def test_overlong_rejected():
    # overlong "/" is two ill-formed subparts
    assert run_chunks([b"\xC0\xAF"]) == "��"


def test_surrogate_rejected():
    assert run_chunks([b"\xED\xA0", b"\x80"]) == "���"


def test_noncharacter_passes_through():
    assert run_chunks([b"\xEF\xBF\xBE"]) == "\ufffe"


def test_lone_continuation_mid_text():
    assert run_chunks([b"a\x80b"]) == "a�b"


def test_truncated_at_end():
    # E2 82 AC with the last byte missing
    assert run_chunks([b"\xE2\x82"]) == "�"


def test_interruption_across_chunks():
    assert run_chunks([b"\xF4\x8F", b"\xBF", b'"']) == '�"'


def test_finish_resets_for_reuse():
    decoder = StreamDecoder()
    assert decoder.push(b"\xC2") == ""
    assert decoder.finish() == "�"
    assert decoder.push(b"ok") == "ok"
    assert decoder.finish() == ""


def test_getstate_round_trip():
    decoder = StreamDecoder()
    assert decoder.getstate() == (b"", 0)
    decoder.push(b"\xF0\x90")
    state = decoder.getstate()
    assert state[0] == b""
    assert state[1] != 0

    other = StreamDecoder()
    other.setstate(state)
    assert other.push(b"\x8D\x88") == "\U00010348"


def test_setstate_rejects_buffered_bytes():
    decoder = StreamDecoder()
    with pytest.raises(ValueError):
        decoder.setstate((b"\xC2", 0))
    with pytest.raises(ValueError):
        decoder.setstate((b"", 0xF))


def test_decode_text_whole_buffer():
    assert decode_text(b"\xC2\x20\xF4\x90\x80\x80\x22") == "� ����\""


def test_text_wrapper_uses_stream_decoder():
    raw = io.BytesIO("naïve €".encode("utf-8") + b"\xff")
    wrapper = io.TextIOWrapper(raw, encoding="utf-8-dfa")
    assert wrapper.read() == "naïve €�"
