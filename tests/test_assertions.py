"""Tests for the assertion recorder."""

import math

import pytest

from tinyunit.assertions import AssertionRecorder, Comparison, Negated


@pytest.fixture
def recorder():
    return AssertionRecorder()


def only(recorder) -> Comparison:
    assert len(recorder.records) == 1
    return recorder.records[0]


# --- truthiness ---


@pytest.mark.parametrize("value", [1, "x", [0], True, 0.5])
def test_ok_passes_for_truthy(recorder, value):
    recorder.ok(value, "truthy")
    record = only(recorder)
    assert record.passed is True
    assert record.expected is True
    assert record.actual == value
    assert record.message == "truthy"


@pytest.mark.parametrize("value", [0, "", [], None, False])
def test_ok_fails_for_falsy(recorder, value):
    recorder.ok(value)
    assert only(recorder).passed is False


def test_not_ok(recorder):
    recorder.not_ok(0)
    recorder.not_ok("text")
    assert [r.passed for r in recorder.records] == [True, False]
    assert recorder.records[0].expected is False


def test_ok_on_value_with_ambiguous_truth_does_not_raise(recorder):
    class Ambiguous:
        def __bool__(self):
            raise ValueError("ambiguous")

    recorder.ok(Ambiguous())
    assert only(recorder).passed is False


def test_is_true_requires_the_true_singleton(recorder):
    recorder.is_true(True)
    recorder.is_true(1)
    recorder.is_true("true")
    assert [r.passed for r in recorder.records] == [True, False, False]


def test_is_false_requires_the_false_singleton(recorder):
    recorder.is_false(False)
    recorder.is_false(0)
    recorder.is_false(None)
    assert [r.passed for r in recorder.records] == [True, False, False]


# --- equality ---


def test_equal_and_strict_equal_on_number_and_numeric_string(recorder):
    recorder.equal(5, "5")
    recorder.strict_equal(5, "5")
    recorder.not_equal(5, "5")
    recorder.not_strict_equal(5, "5")
    assert [r.passed for r in recorder.records] == [True, False, False, True]


def test_equal_records_expected_and_actual(recorder):
    recorder.equal(4, 4, "basic")
    assert only(recorder) == Comparison(
        expected=4, actual=4, passed=True, message="basic"
    )


def test_equal_none_only_matches_none(recorder):
    recorder.equal(None, None)
    recorder.equal(None, 0)
    recorder.equal("", None)
    assert [r.passed for r in recorder.records] == [True, False, False]


def test_strict_equal_treats_int_and_float_as_one_kind(recorder):
    recorder.strict_equal(2, 2.0)
    recorder.strict_equal(True, 1)
    assert [r.passed for r in recorder.records] == [True, False]


def test_negated_expectations_are_labelled(recorder):
    recorder.not_equal(1, 2)
    recorder.not_strict_equal(1, "1")
    expected = [r.expected for r in recorder.records]
    assert expected == [Negated(2), Negated("1")]
    assert str(expected[0]) == "NOT 2"
    assert str(expected[1]) == "NOT '1'"


# --- NaN ---


def test_is_nan_cases(recorder):
    recorder.is_nan(math.nan)
    recorder.is_nan("not-a-number-string")
    recorder.is_nan(math.inf)
    assert [r.passed for r in recorder.records] == [True, True, False]
    assert math.isnan(recorder.records[0].expected)


def test_is_not_nan(recorder):
    recorder.is_not_nan("42")
    recorder.is_not_nan("abc")
    assert [r.passed for r in recorder.records] == [True, False]
    assert str(recorder.records[0].expected) == "NOT NaN"


# --- ordering ---


def test_records_keep_call_order_without_dedup(recorder):
    recorder.equal(1, 1, "first")
    recorder.equal(1, 1, "first")
    recorder.ok(False, "third")
    assert [r.message for r in recorder.records] == ["first", "first", "third"]


def test_recorders_are_independent():
    a = AssertionRecorder()
    b = AssertionRecorder()
    a.ok(True)
    assert b.records == []


def test_comparison_to_dict_uses_display_values(recorder):
    recorder.not_equal(math.nan, 3, "msg")
    assert only(recorder).to_dict() == {
        "expected": "NOT 3",
        "actual": "NaN",
        "passed": True,
        "message": "msg",
    }


# --- assertions never raise ---


def test_huge_int_assertions_record_results(recorder):
    recorder.is_nan(10**400)
    recorder.is_not_nan(10**400)
    recorder.equal(10**400, "1")
    assert [r.passed for r in recorder.records] == [False, True, False]


def test_raising_eq_records_a_failed_comparison(recorder):
    class RaisingEq:
        def __eq__(self, other):
            raise RuntimeError("no eq")

        __hash__ = object.__hash__

    recorder.equal(RaisingEq(), 1)
    recorder.not_strict_equal(RaisingEq(), 1)
    assert [r.passed for r in recorder.records] == [False, True]


def test_raising_bool_records_a_failed_ok(recorder):
    class RaisingBool:
        def __bool__(self):
            raise RuntimeError("no bool")

    recorder.ok(RaisingBool())
    recorder.not_ok(RaisingBool())
    assert [r.passed for r in recorder.records] == [False, True]
