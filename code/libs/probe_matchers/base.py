"""
Assertion protocol shared by every matcher.

A matcher is configured through chained qualifier calls, evaluated once with
``matches(subject)``, and then asked for its messages. Expectation outcomes
travel back as a MatchResult; builder misuse raises ConfigurationError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from . import logging as log
from .errors import MatcherError, is_recoverable


class Matcher(Protocol):
    """Transport-free matcher protocol."""

    def matches(self, subject: Any) -> bool:
        ...

    @property
    def failure_message(self) -> str | None:
        ...

    @property
    def negated_failure_message(self) -> str | None:
        ...

    @property
    def description(self) -> str:
        ...


@dataclass(frozen=True)
class MatchResult:
    passed: bool
    message: str


class MatcherBase:
    """Reporting state and evaluation wrapper for concrete matchers."""

    def __init__(self):
        self.result: MatchResult | None = None

    @property
    def description(self) -> str:
        raise NotImplementedError

    @property
    def failure_message(self) -> str | None:
        if self.result is None or self.result.passed:
            return None
        return self.result.message

    @property
    def negated_failure_message(self) -> str | None:
        if self.result is None or not self.result.passed:
            return None
        return self.result.message

    # Legacy names kept for callers written against older runners.
    @property
    def failure_message_for_should(self) -> str | None:
        return self.failure_message

    @property
    def failure_message_for_should_not(self) -> str | None:
        return self.negated_failure_message

    def evaluate(self, subject: Any) -> MatchResult:
        """Return the outcome for subject. Subclasses implement this."""
        raise NotImplementedError

    def matches(self, subject: Any) -> bool:
        log.bind(matcher=type(self).__name__)
        try:
            try:
                self.result = self.evaluate(subject)
            except MatcherError as e:
                if not is_recoverable(e.code):
                    log.warn("matcher.raised", code=e.code, error=e.message)
                    raise
                self.result = MatchResult(False, e.message)
            log.debug("matcher.evaluated", description=self.description, passed=self.result.passed)
            return self.result.passed
        finally:
            log.clear()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description}>"
