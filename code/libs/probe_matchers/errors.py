"""
Canonical error codes for probe matchers.

These codes give a stable interface for callers and tests. Conditions that
mean "the expectation was not met" are caught at the matcher boundary and
turned into a failure message; configuration mistakes and blocked credential
fields are raised to the caller.
"""

from __future__ import annotations

# Probe errors
ERR_MUTATION_BLOCKED = "ERR_MUTATION_BLOCKED"
ERR_CREDENTIAL_BLOCKED = "ERR_CREDENTIAL_BLOCKED"
ERR_UNSUPPORTED_SUBJECT = "ERR_UNSUPPORTED_SUBJECT"

# Routing errors
ERR_ROUTING = "ERR_ROUTING"
ERR_ASSERTION = "ERR_ASSERTION"

# Builder misuse
ERR_CONFIGURATION = "ERR_CONFIGURATION"

# Whether a matcher converts the condition into a failed match.
RECOVERABLE = {
    ERR_MUTATION_BLOCKED: True,  # reported as a failure message
    ERR_ROUTING: True,  # router could not recognize or generate
    ERR_ASSERTION: True,  # round-trip mismatch
    ERR_CREDENTIAL_BLOCKED: False,  # user-actionable, raised
    ERR_UNSUPPORTED_SUBJECT: False,  # programmer error
    ERR_CONFIGURATION: False,  # programmer error
}


def is_recoverable(code: str) -> bool:
    """Check if an error code is turned into a failed match instead of raised."""
    return RECOVERABLE.get(code, False)


class MatcherError(Exception):
    """Base class for every condition raised by this package."""

    code = "ERR_MATCHER"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class CouldNotMutateAttribute(MatcherError):
    """The subject refused a candidate value before validation could run."""

    code = ERR_MUTATION_BLOCKED

    def __init__(self, model: type, attribute: str, value=None, reason: str | None = None):
        self.model = model
        self.attribute = attribute
        self.value = value
        self.reason = reason
        text = f"Expected {model.__name__} to allow {attribute} to be set to {value!r}, but it could not be set"
        if reason:
            text = f"{text} ({reason})"
        super().__init__(text)


class CouldNotSetPasswordError(CouldNotMutateAttribute):
    """
    A credential field could not be cleared.

    This usually means the field is derived, e.g. a ``password`` property
    backed by a digest column, so the presence check has nothing to clear.
    """

    code = ERR_CREDENTIAL_BLOCKED

    @classmethod
    def create(cls, model: type, attribute: str = "password") -> "CouldNotSetPasswordError":
        return cls(model, attribute)

    def __init__(self, model: type, attribute: str = "password", value=None, reason: str | None = None):
        super().__init__(model, attribute, value, reason)
        self.message = (
            f"The validation failed because your {model.__name__} model declares "
            f"`{attribute}` as a derived attribute without a settable backing field. "
            f"Presence of {attribute} cannot be tested by clearing it directly; "
            f"validate presence of the backing field instead."
        )
        self.args = (self.message,)


class UnsupportedSubject(MatcherError, TypeError):
    """The subject cannot be probed (not a model, form, or entity)."""

    code = ERR_UNSUPPORTED_SUBJECT


class RoutingFailure(MatcherError):
    """The router could not recognize a path or generate one from a description."""

    code = ERR_ROUTING


class AssertionFailure(MatcherError, AssertionError):
    """Generic "expected X, got Y" raised by a routing context."""

    code = ERR_ASSERTION


class ConfigurationError(MatcherError, ValueError):
    """A matcher was used with an invalid qualifier combination."""

    code = ERR_CONFIGURATION
