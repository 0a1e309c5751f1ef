"""
Value probe: one mutate-then-validate cycle against a subject.

A probe assigns a candidate value to an attribute, runs the subject's
validation and reads back the errors reported for that attribute. The
subject is left mutated; nothing is rolled back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable, Pattern, Protocol, Union, runtime_checkable

from . import logging as log
from .conf import credential_fields, error_code_aliases
from .errors import CouldNotMutateAttribute, CouldNotSetPasswordError

ExpectedMessage = Union[str, Pattern[str]]


class Cardinality(Enum):
    SINGLE = auto()
    MANY = auto()


@dataclass(frozen=True)
class ErrorSignature:
    """One validation error as reported by the host framework."""

    code: str | None
    message: str

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class ValidatedEntity(Protocol):
    """Capabilities a subject must expose to be probed."""

    def set(self, attribute: str, value: Any) -> None:
        """Assign value; raise CouldNotMutateAttribute if the subject refuses it."""
        ...

    def run_validation(self) -> None:
        ...

    def errors_for(self, attribute: str) -> list[ErrorSignature]:
        ...

    def association_cardinality(self, attribute: str) -> Cardinality | None:
        ...


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one probe."""

    attribute: str
    value: Any
    expected: ExpectedMessage
    errors: tuple[ErrorSignature, ...] = field(default_factory=tuple)
    matched: bool = False

    @property
    def rejected(self) -> bool:
        return bool(self.errors)

    @property
    def disallows(self) -> bool:
        return self.rejected and self.matched

    @property
    def allows(self) -> bool:
        return not self.matched


def error_matches(error: ErrorSignature, expected: ExpectedMessage) -> bool:
    """
    Check a single reported error against the expected message.

    A compiled pattern is searched in the message text. A string matches the
    error code (including configured aliases of a symbolic kind) or the
    literal message.
    """
    if isinstance(expected, re.Pattern):
        return expected.search(error.message) is not None
    if error.code is not None and error.code in error_code_aliases(expected):
        return True
    return error.message == expected


def inspect_expected(expected: ExpectedMessage) -> str:
    if isinstance(expected, re.Pattern):
        return f"/{expected.pattern}/"
    return repr(expected)


def inspect_errors(errors: Iterable[ErrorSignature]) -> str:
    errors = list(errors)
    if not errors:
        return "no errors"
    return "; ".join(f"{e.message!r} ({e.code})" if e.code else repr(e.message) for e in errors)


class ValueProbe:
    """Runs disallow/allow probes against one entity."""

    def __init__(self, entity: ValidatedEntity):
        self.entity = entity
        self.last_outcome: ProbeOutcome | None = None
        self.last_message: str | None = None

    def probe(self, attribute: str, value: Any, expected: ExpectedMessage) -> ProbeOutcome:
        """
        Assign, validate and classify.

        A refused assignment propagates as CouldNotMutateAttribute, or as
        CouldNotSetPasswordError when the attribute is a credential field.
        """
        try:
            self.entity.set(attribute, value)
        except CouldNotMutateAttribute as e:
            if attribute in credential_fields() and not isinstance(e, CouldNotSetPasswordError):
                raise CouldNotSetPasswordError.create(e.model, attribute) from e
            raise
        self.entity.run_validation()
        errors = tuple(self.entity.errors_for(attribute))
        outcome = ProbeOutcome(
            attribute=attribute,
            value=value,
            expected=expected,
            errors=errors,
            matched=any(error_matches(e, expected) for e in errors),
        )
        self.last_outcome = outcome
        log.debug(
            "probe.completed",
            attribute=attribute,
            value=log.redact_value(attribute, value),
            rejected=outcome.rejected,
            matched=outcome.matched,
        )
        return outcome

    def disallows_value(self, attribute: str, value: Any, expected: ExpectedMessage) -> bool:
        outcome = self.probe(attribute, value, expected)
        if outcome.disallows:
            self.last_message = (
                f"Did not expect errors to include {inspect_expected(expected)} "
                f"when {attribute} is set to {value!r}, got errors: {inspect_errors(outcome.errors)}"
            )
            return True
        self.last_message = (
            f"Expected errors to include {inspect_expected(expected)} "
            f"when {attribute} is set to {value!r}, got {inspect_errors(outcome.errors)}"
        )
        return False

    def allows_value(self, attribute: str, value: Any, expected: ExpectedMessage) -> bool:
        # Only the expected error counts; unrelated errors on the attribute are fine.
        outcome = self.probe(attribute, value, expected)
        if outcome.allows:
            self.last_message = (
                f"Expected errors to include {inspect_expected(expected)} "
                f"when {attribute} is set to {value!r}, got {inspect_errors(outcome.errors)}"
            )
            return True
        self.last_message = (
            f"Did not expect errors to include {inspect_expected(expected)} "
            f"when {attribute} is set to {value!r}, got errors: {inspect_errors(outcome.errors)}"
        )
        return False
