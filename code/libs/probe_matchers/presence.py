"""
Presence matcher.

    validate_presence_of("arms")
    validate_presence_of("legs").with_message("Robot has no legs")

The blank probe value depends on the attribute: an empty list for to-many
associations, ``None`` for everything else.
"""

from __future__ import annotations

from typing import Any

from . import logging as log
from .base import MatchResult, MatcherBase
from .conf import get_setting
from .entities import as_entity
from .probe import Cardinality, ExpectedMessage, ValidatedEntity, ValueProbe


def validate_presence_of(attribute: str) -> "PresenceMatcher":
    return PresenceMatcher(attribute)


def blank_value_for(entity: ValidatedEntity, attribute: str) -> Any:
    if entity.association_cardinality(attribute) is Cardinality.MANY:
        return []
    return None


class PresenceMatcher(MatcherBase):
    def __init__(self, attribute: str):
        super().__init__()
        self.attribute = attribute
        self._expected_message: ExpectedMessage | None = None

    def with_message(self, message: ExpectedMessage | None) -> "PresenceMatcher":
        if message is not None:
            self._expected_message = message
        return self

    @property
    def expected_message(self) -> ExpectedMessage:
        if self._expected_message is None:
            return get_setting("DEFAULT_PRESENCE_MESSAGE")
        return self._expected_message

    @property
    def description(self) -> str:
        return f"require {self.attribute} to be set"

    def evaluate(self, subject: Any) -> MatchResult:
        log.bind(attribute=self.attribute)
        entity = as_entity(subject)
        probe = ValueProbe(entity)
        # credential fields raise CouldNotSetPasswordError from the probe
        if probe.disallows_value(self.attribute, blank_value_for(entity, self.attribute), self.expected_message):
            return MatchResult(True, f"Did not expect to {self.description}")
        return MatchResult(False, probe.last_message)
