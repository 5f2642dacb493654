"""Tables and conformance harness tests."""

import logging

from utf8dfa.core import (
    STRESS_CASES,
    ConformanceCase,
    ConformanceRunner,
    State,
    random_cases,
)
from utf8dfa.core.conformance import format_code_points
from utf8dfa.core.tables import CHAR_CLASSES, TRANSITIONS, next_state, start_byte_payload


def test_char_classes_by_range():
    expected = {
        range(0x00, 0x80): 0,
        range(0x80, 0x90): 1,
        range(0x90, 0xA0): 9,
        range(0xA0, 0xC0): 7,
        range(0xC0, 0xC2): 8,
        range(0xC2, 0xE0): 2,
        range(0xE0, 0xE1): 10,
        range(0xE1, 0xED): 3,
        range(0xED, 0xEE): 4,
        range(0xEE, 0xF0): 3,
        range(0xF0, 0xF1): 11,
        range(0xF1, 0xF4): 6,
        range(0xF4, 0xF5): 5,
        range(0xF5, 0x100): 8,
    }
    for byte_range, char_class in expected.items():
        for byte in byte_range:
            assert CHAR_CLASSES[byte] == char_class, hex(byte)


def test_transition_table_has_no_error_row():
    assert len(TRANSITIONS) == 8 * 12
    assert State.ERROR not in {next_state(State.START, c) for c in (0, 2, 3, 4, 5, 6, 10, 11)}
    assert next_state(State.NEXT4, 9) is State.NEXT1
    assert next_state(State.NEXT4, 7) is State.ERROR
    assert next_state(State.NEXT7, 1) is State.NEXT2
    assert next_state(State.NEXT5, 1) is State.ERROR


def test_start_byte_payload_masks():
    assert start_byte_payload(0x41, 0) == 0x41
    assert start_byte_payload(0xDF, 2) == 0x1F
    assert start_byte_payload(0xE0, 10) == 0
    assert start_byte_payload(0xED, 4) == 0xD
    assert start_byte_payload(0xF4, 5) == 0x4


def test_stress_cases_all_pass():
    runner = ConformanceRunner()
    summary = runner.run(STRESS_CASES)
    failed = [case["case"] for case in summary["cases"] if not case["passed"]]
    assert failed == []
    assert summary["tests"]["passed"] == len(STRESS_CASES)


def test_stress_cases_agree_with_interpreter():
    runner = ConformanceRunner()
    reference_cases = [ConformanceCase(case.name, case.data) for case in STRESS_CASES]
    summary = runner.run(reference_cases)
    assert summary["tests"]["failed"] == 0
    assert all(case["source"] == "reference" for case in summary["cases"])


def test_random_cases_are_reproducible():
    first = random_cases(5, seed=7)
    second = random_cases(5, seed=7)
    assert [case.data for case in first] == [case.data for case in second]
    assert all(1 <= len(case.data) <= 300 for case in first)


def test_fuzz_run_matches_reference():
    runner = ConformanceRunner()
    summary = runner.run(random_cases(200, max_length=48, seed=99))
    assert summary["tests"] == {"passed": 200, "failed": 0}


def test_runner_reports_mismatch_in_memory(caplog):
    runner = ConformanceRunner()
    cases = [
        ConformanceCase("ok", b"\xc2\xa3", [0xA3]),
        ConformanceCase("wrong-expectation", b"\xc2\x20", [0x20]),
    ]
    with caplog.at_level(logging.WARNING, logger="utf8dfa.core.conformance"):
        summary = runner.run(cases, notes="unit")

    assert summary["notes"] == "unit"
    assert summary["tests"] == {"passed": 1, "failed": 1}
    failures = ConformanceRunner.failures(summary)
    assert [case["case"] for case in failures] == ["wrong-expectation"]
    assert failures[0]["actual"] == [0xFFFD, 0x20]
    assert failures[0]["input"] == "c2 20"
    assert "mismatch wrong-expectation" in caplog.text
    assert "U+FFFD U+0020" in caplog.text


def test_runner_does_not_touch_the_filesystem(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ConformanceRunner().run(STRESS_CASES[:3])
    assert list(tmp_path.iterdir()) == []


def test_format_code_points():
    assert format_code_points([0x41, 0x10348]) == "U+0041 U+10348"
    assert format_code_points([]) == "(none)"


def test_custom_reference():
    runner = ConformanceRunner(reference=lambda data: [0xFFFD])
    summary = runner.run([ConformanceCase("lone-start", b"\xe2")])
    assert summary["tests"]["passed"] == 1


