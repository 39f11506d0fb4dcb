"""Tests for the test registry."""

import pytest

from tinyunit.case import TestCase
from tinyunit.registry import DEFAULT_MODULE, TestRegistry


def test_default_module_is_common():
    registry = TestRegistry()
    assert registry.current_module == DEFAULT_MODULE == "Common"


def test_module_labels_are_sticky():
    registry = TestRegistry()
    registry.set_module("Shipping")
    registry.add_test("a", lambda a: None)
    registry.add_test("b", lambda a: None)
    registry.set_module("Billing")
    registry.add_test("c", lambda a: None)

    assert [c.module for c in registry] == ["Shipping", "Shipping", "Billing"]


@pytest.mark.parametrize("label", [123, "", None, ["x"]])
def test_invalid_module_labels_are_ignored(label):
    registry = TestRegistry()
    registry.set_module("Shipping")
    registry.set_module(label)
    assert registry.current_module == "Shipping"


def test_add_test_appends_in_order_and_returns_case():
    registry = TestRegistry()
    first = registry.add_test("same", lambda a: None)
    second = registry.add_test("same", lambda a: None)

    assert isinstance(first, TestCase)
    assert registry.cases == [first, second]
    assert registry.position(first) == 1
    assert registry.position(second) == 2
    assert len(registry) == 2


def test_position_of_unregistered_case_raises():
    registry = TestRegistry()
    with pytest.raises(ValueError):
        registry.position(TestCase("stray", lambda a: None, module="Common"))


def test_hooks_are_overwritten_not_accumulated():
    registry = TestRegistry()
    first = lambda i: None  # noqa: E731
    second = lambda i: None  # noqa: E731
    registry.set_before_each(first)
    registry.set_before_each(second)
    registry.set_after_each(first)
    registry.set_after_each(None)

    assert registry.before_each is second
    assert registry.after_each is None


def test_pending_lists_cases_not_yet_run():
    registry = TestRegistry()
    done = registry.add_test("done", lambda a: None)
    todo = registry.add_test("todo", lambda a: None)
    done.perform()
    assert registry.pending() == [todo]
