"""Conformance runner cross-checking the DFA decoder against a reference."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .view import DecodeView

logger = logging.getLogger(__name__)

Reference = Callable[[bytes], List[int]]

MIN_LENGTH = 1
MAX_LENGTH = 300


@dataclass
class ConformanceCase:
    """A named byte vector, with its expected code points when they are known."""

    name: str
    data: bytes
    expected: Optional[List[int]] = None


def python_reference(data: bytes) -> List[int]:
    """Code points produced by the interpreter's own UTF-8 decoder."""
    return [ord(char) for char in data.decode("utf-8", "replace")]


def random_cases(
    count: int,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
    seed: Optional[int] = None,
) -> List[ConformanceCase]:
    rng = random.Random(seed)
    cases = []
    for index in range(count):
        length = rng.randint(min_length, max_length)
        data = bytes(rng.getrandbits(8) for _ in range(length))
        cases.append(ConformanceCase(f"random-{index}", data))
    return cases


def format_code_points(codes: Iterable[int]) -> str:
    return " ".join(f"U+{code:04X}" for code in codes) or "(none)"


class ConformanceRunner:
    """Decode each case and compare it against its expectation or the reference.

    Cases without an ``expected`` list are checked against ``reference``,
    which defaults to the interpreter's UTF-8 decoder in replace mode.
    """

    def __init__(self, reference: Optional[Reference] = None) -> None:
        self.reference = reference or python_reference

    def run(self, cases: Iterable[ConformanceCase], notes: Optional[str] = None) -> Dict[str, object]:
        """Check every case.

        Returns the aggregated result payload.
        """
        aggregated: Dict[str, object] = {
            "notes": notes or "",
            "tests": {"passed": 0, "failed": 0},
            "cases": [],
        }
        tally: Dict[str, int] = aggregated["tests"]

        for case in cases:
            payload = self.check(case)
            aggregated["cases"].append(payload)
            if payload["passed"]:
                tally["passed"] += 1
                continue
            tally["failed"] += 1
            logger.warning(
                "mismatch %s input=%s expected=%s actual=%s",
                case.name,
                payload["input"],
                format_code_points(payload["expected"]),
                format_code_points(payload["actual"]),
            )
        logger.info("conformance run done passed=%d failed=%d", tally["passed"], tally["failed"])
        return aggregated

    def check(self, case: ConformanceCase) -> Dict[str, object]:
        actual = list(DecodeView(case.data))
        if case.expected is not None:
            source = "expected"
            expected = list(case.expected)
        else:
            source = "reference"
            expected = self.reference(case.data)
        return {
            "case": case.name,
            "input": case.data.hex(" "),
            "source": source,
            "expected": expected,
            "actual": actual,
            "passed": actual == expected,
        }

    @staticmethod
    def failures(aggregated: Dict[str, object]) -> List[Dict[str, object]]:
        return [case for case in aggregated["cases"] if not case["passed"]]
