"""
Exclusion sweep matcher.

Asserts that an attribute cannot take a blacklist of values and, for a
range, that the values just outside the range are still accepted::

    ensure_exclusion_of("supported_os").in_array(["Mac", "Linux"])
    ensure_exclusion_of("floors_with_enemies").in_range(5, 8)
    ensure_exclusion_of("weapon").in_array(["pistol", "stick"]).with_message("You chose a puny weapon")

Range mode runs a four-point sweep in fixed order:
  1. min - 1 is allowed (skipped when min == 0)
  2. min is disallowed
  3. max + 1 is allowed
  4. max is disallowed
Proving only the endpoints would not tell an excluded range apart from an
attribute that rejects everything.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List

from . import logging as log
from .base import MatchResult, MatcherBase
from .conf import get_setting
from .entities import as_entity
from .errors import ConfigurationError
from .probe import ExpectedMessage, ValueProbe


def ensure_exclusion_of(attribute: str) -> "ExclusionMatcher":
    return ExclusionMatcher(attribute)


class ExclusionMatcher(MatcherBase):
    def __init__(self, attribute: str):
        super().__init__()
        self.attribute = attribute
        self.array: List[Any] | None = None
        self.minimum: int | None = None
        self.maximum: int | None = None
        self._expected_message: ExpectedMessage | None = None

    # ---- qualifiers ---------------------------------------------------------

    def in_array(self, values: Iterable[Any]) -> "ExclusionMatcher":
        if self.minimum is not None:
            raise ConfigurationError("in_array and in_range are mutually exclusive")
        self.array = list(values)
        if not self.array:
            raise ConfigurationError("in_array needs at least one value")
        return self

    def in_range(self, minimum: int | range, maximum: int | None = None) -> "ExclusionMatcher":
        """Accept ``in_range(5, 8)`` or ``in_range(range(5, 9))``; both are 5..8 inclusive."""
        if self.array is not None:
            raise ConfigurationError("in_array and in_range are mutually exclusive")
        if isinstance(minimum, range):
            if maximum is not None or minimum.step != 1 or len(minimum) == 0:
                raise ConfigurationError(f"in_range needs a non-empty range with step 1, got {minimum!r}")
            minimum, maximum = minimum.start, minimum[-1]
        if maximum is None:
            raise ConfigurationError("in_range needs both a minimum and a maximum")
        for bound in (minimum, maximum):
            if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
                raise ConfigurationError(f"in_range bounds must be integers, got {bound!r}")
        if minimum > maximum:
            raise ConfigurationError(f"in_range minimum {minimum} is greater than maximum {maximum}")
        self.minimum, self.maximum = minimum, maximum
        return self

    def with_message(self, message: ExpectedMessage | None) -> "ExclusionMatcher":
        if message is not None:
            self._expected_message = message
        return self

    # ---- reporting ----------------------------------------------------------

    @property
    def expected_message(self) -> ExpectedMessage:
        if self._expected_message is None:
            return get_setting("DEFAULT_EXCLUSION_MESSAGE")
        return self._expected_message

    @property
    def description(self) -> str:
        return f"ensure exclusion of {self.attribute} in {self._inspect_values()}"

    def _inspect_values(self) -> str:
        if self.minimum is not None:
            return f"{self.minimum}..{self.maximum}"
        return repr(self.array)

    # ---- evaluation ---------------------------------------------------------

    def evaluate(self, subject: Any) -> MatchResult:
        if self.array is None and self.minimum is None:
            raise ConfigurationError(f"{self.attribute}: configure in_array or in_range before matching")
        log.bind(attribute=self.attribute)
        probe = ValueProbe(as_entity(subject))
        if self.minimum is not None:
            passed = self._sweep_range(probe)
        else:
            passed = self._sweep_array(probe)
        if passed:
            return MatchResult(True, f"Did not expect to {self.description}")
        return MatchResult(False, probe.last_message or f"Expected to {self.description}")

    def _sweep_array(self, probe: ValueProbe) -> bool:
        return all(probe.disallows_value(self.attribute, value, self.expected_message) for value in self.array)

    def _sweep_range(self, probe: ValueProbe) -> bool:
        expected = self.expected_message
        return (
            self._allows_lower_value(probe, expected)
            and probe.disallows_value(self.attribute, self.minimum, expected)
            and probe.allows_value(self.attribute, self.maximum + 1, expected)
            and probe.disallows_value(self.attribute, self.maximum, expected)
        )

    def _allows_lower_value(self, probe: ValueProbe, expected: ExpectedMessage) -> bool:
        # min - 1 may be outside the domain (e.g. negative) when the range starts at 0
        return self.minimum == 0 or probe.allows_value(self.attribute, self.minimum - 1, expected)
