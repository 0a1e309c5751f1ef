"""Plain-assert helpers for pytest and unittest suites."""

from __future__ import annotations

from typing import Any

from .base import Matcher


def assert_matches(subject: Any, matcher: Matcher) -> None:
    """Fail with the matcher's failure message unless it matches subject."""
    if not matcher.matches(subject):
        raise AssertionError(matcher.failure_message or f"Expected to {matcher.description}")


def assert_does_not_match(subject: Any, matcher: Matcher) -> None:
    """Fail with the matcher's negated failure message if it matches subject."""
    if matcher.matches(subject):
        raise AssertionError(matcher.negated_failure_message or f"Did not expect to {matcher.description}")
