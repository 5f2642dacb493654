"""Named decoder stress vectors.

Most come from Markus Kuhn's UTF-8 decoder capability and stress test
(https://www.cl.cam.ac.uk/~mgk25/ucs/examples/UTF-8-test.txt). That document
predates the restriction of UTF-8 to four bytes and uses an older notion of
maximal subpart, so the expected outputs here often carry more replacement
characters than it lists: the current rules reject bytes as early as
possible, which makes maximal subparts shorter.
"""

from typing import List

from .conformance import ConformanceCase
from .tables import REPLACEMENT_CHARACTER

R = REPLACEMENT_CHARACTER

STRESS_CASES: List[ConformanceCase] = [
    ConformanceCase("empty", b"", []),
    ConformanceCase(
        "mixed-lengths",
        b"ab$\xc2\xa3\xd0\x98\xe0\xa4\xb9\xe2\x82\xac\xed\x95\x9c\xf0\x90\x8d\x88",
        [0x61, 0x62, 0x24, 0xA3, 0x418, 0x939, 0x20AC, 0xD55C, 0x10348],
    ),
    # 2.1 / 2.2 first and last code point of each length
    ConformanceCase("first-of-each-length", b"\x00\xc2\x80\xe0\xa0\x80\xf0\x90\x80\x80", [0x0, 0x80, 0x800, 0x10000]),
    ConformanceCase("last-of-each-length", b"\x7f\xdf\xbf\xef\xbf\xbf\xf4\x8f\xbf\xbf", [0x7F, 0x7FF, 0xFFFF, 0x10FFFF]),
    # 2.3 other boundaries
    ConformanceCase("around-surrogates", b"\xed\x9f\xbf\xee\x80\x80\xef\xbf\xbd", [0xD7FF, 0xE000, 0xFFFD]),
    ConformanceCase("beyond-max-4-byte", b"\xf4\x90\x80\x80\x22", [R, R, R, R, 0x22]),
    ConformanceCase("interrupted-max-4-byte", b"\xf4\x8f\xbf\x22", [R, 0x22]),
    ConformanceCase("interrupted-by-2-byte", b"\xf4\x8f\xbf\xc2\xa3", [R, 0xA3]),
    ConformanceCase("interrupted-by-4-byte", b"\xf4\x8f\xbf\xf0\x90\x8d\x88", [R, 0x10348]),
    # 3.1 unexpected continuation bytes
    ConformanceCase("unexpected-continuations", b"\x80\xbf\x80\xbf\x8c\x94\xa1\xb5", [R] * 8),
    # 3.2 lonely start bytes
    ConformanceCase("invalid-2-byte-starts", b"\xc0\x20\xc1\x20", [R, 0x20, R, 0x20]),
    ConformanceCase("lonely-2-byte-starts", b"\xc2\x20\xdf\x20", [R, 0x20, R, 0x20]),
    ConformanceCase("lonely-3-byte-starts", b"\xe0\x20\xe8\x20\xef\x20", [R, 0x20, R, 0x20, R, 0x20]),
    ConformanceCase("lonely-4-byte-starts", b"\xf0\x20\xf4\x20\xf5\x20\xf7\x20", [R, 0x20, R, 0x20, R, 0x20, R, 0x20]),
    # 3.3 sequences with the last continuation byte missing
    ConformanceCase("interrupted-3-byte", b"\xe0\xa0\x22\xef\xbf\x22", [R, 0x22, R, 0x22]),
    ConformanceCase("interrupted-4-byte", b"\xf0\x90\x80\x22", [R, 0x22]),
    ConformanceCase("overlong-3-byte-prefix", b"\xe0\x80\x22", [R, R, 0x22]),
    ConformanceCase("invalid-4-byte-prefix", b"\xf0\x80\x80\x22\xf7\xbf\xbf\x22", [R, R, R, 0x22, R, R, R, 0x22]),
    # 3.5 impossible bytes
    ConformanceCase("impossible-bytes", b"\xfe\xff\xfe\xfe\xff\xff", [R] * 6),
    # 4.1 / 4.2 overlong forms
    ConformanceCase("overlong-slash", b"\xc0\xaf\xe0\x80\xaf\xf0\x80\x80\xaf", [R] * 9),
    ConformanceCase("max-overlong", b"\xc1\xbf\xe0\x9f\xbf\xf0\x8f\xbf\xbf", [R] * 9),
    # 5.1 surrogates
    ConformanceCase("surrogate-low-edge", b"\xed\xa0\x80", [R, R, R]),
    ConformanceCase("surrogate-high-edge", b"\xed\xbf\xbf", [R, R, R]),
    # 5.3 non-characters are valid scalars
    ConformanceCase(
        "non-characters",
        b"\xef\xbf\xbe\xef\xbf\xbf\xef\xb7\x90\xef\xb7\xaf\xf0\x9f\xbf\xbe\xf4\x8f\xbf\xbf",
        [0xFFFE, 0xFFFF, 0xFDD0, 0xFDEF, 0x1FFFE, 0x10FFFF],
    ),
    # truncated input
    ConformanceCase("truncated-2-byte", b"\xc2", [R]),
    ConformanceCase("truncated-4-byte", b"\xf0\x90\x80", [R]),
    ConformanceCase("truncated-after-ascii", b"\x24\xc2", [0x24, R]),
]
