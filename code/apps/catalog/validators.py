from __future__ import annotations

from typing import Any, Iterable

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible


@deconstructible
class ExclusionValidator:
    """Reject any value in a blacklist."""

    code = "exclusion"
    message = "%(value)s is reserved."

    def __init__(self, values: Iterable[Any], message: str | None = None):
        self.values = list(values)
        if message is not None:
            self.message = message

    def __call__(self, value: Any) -> None:
        if value in self.values:
            raise ValidationError(self.message, code=self.code, params={"value": value})

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ExclusionValidator)
            and self.values == other.values
            and self.message == other.message
        )
