"""
Django collaborators for the value probe.

``as_entity`` wraps whatever the caller passed as the subject:
  - a model instance -> ModelEntity (full_clean, error_dict codes)
  - a form instance  -> FormEntity (rebinds the form with probed data)
  - anything already implementing ValidatedEntity is used unchanged
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

from django import forms
from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import models

from .errors import CouldNotMutateAttribute, UnsupportedSubject
from .probe import Cardinality, ErrorSignature, ValidatedEntity


def _signatures(errors: List[ValidationError]) -> List[ErrorSignature]:
    out = []
    for err in errors:
        # a ValidationError from error_dict/as_data wraps a single message
        for message in err.messages:
            out.append(ErrorSignature(code=getattr(err, "code", None), message=str(message)))
    return out


class ModelEntity:
    """Probe a Django model instance through ``full_clean``."""

    def __init__(self, instance: models.Model, *, validate_unique: bool = False):
        self.instance = instance
        self.validate_unique = validate_unique
        self._errors: Dict[str, List[ValidationError]] = {}

    @property
    def model(self) -> type:
        return type(self.instance)

    def set(self, attribute: str, value: Any) -> None:
        try:
            setattr(self.instance, attribute, value)
        except (AttributeError, TypeError, ValueError) as e:
            # read-only properties, many-to-many managers, FK type checks
            raise CouldNotMutateAttribute(self.model, attribute, value, reason=str(e)) from e

    def run_validation(self) -> None:
        self._errors = {}
        try:
            self.instance.full_clean(validate_unique=self.validate_unique)
        except ValidationError as e:
            self._errors = dict(e.error_dict) if hasattr(e, "error_dict") else {}

    def errors_for(self, attribute: str) -> List[ErrorSignature]:
        return _signatures(self._errors.get(attribute, []))

    def association_cardinality(self, attribute: str) -> Cardinality | None:
        try:
            f = self.instance._meta.get_field(attribute)
        except FieldDoesNotExist:
            return None
        if not f.is_relation:
            return None
        if f.many_to_many or f.one_to_many:
            return Cardinality.MANY
        return Cardinality.SINGLE


class FormEntity:
    """
    Probe a Django form.

    Forms are immutable once bound, so every validation run rebinds a copy of
    the caller's form to the probed data. The copy keeps whatever the form was
    constructed with (``instance``, ``initial``, ``files``, custom keywords and
    any field changes made in ``__init__``), so the form class is never called
    again. The original form instance is left untouched and ``form`` holds the
    latest rebound copy. A ModelForm's ``instance`` is shared with the copies
    and is left mutated by validation.
    """

    def __init__(self, form: forms.BaseForm):
        self.form_class = type(form)
        self.prefix = form.prefix
        self.original = form
        self.form = form
        self.data: Dict[str, Any] = {}
        for name in form.fields:
            value = form[name].value()
            if value is not None:
                self.data[form.add_prefix(name)] = value

    @property
    def model(self) -> type:
        return self.form_class

    def set(self, attribute: str, value: Any) -> None:
        f = self.form.fields.get(attribute)
        if f is None:
            raise CouldNotMutateAttribute(self.model, attribute, value, reason="no such form field")
        if f.disabled:
            # disabled fields ignore submitted data
            raise CouldNotMutateAttribute(self.model, attribute, value, reason="field is disabled")
        key = self.form.add_prefix(attribute)
        if value is None:
            self.data.pop(key, None)
        else:
            self.data[key] = value

    def _rebind(self) -> forms.BaseForm:
        form = copy.copy(self.original)
        form.is_bound = True
        form.data = dict(self.data)
        form.fields = copy.deepcopy(self.original.fields)
        # bound fields and errors cached on the original point back at it
        form._bound_fields_cache = {}
        form._errors = None
        return form

    def run_validation(self) -> None:
        self.form = self._rebind()
        self.form.full_clean()

    def errors_for(self, attribute: str) -> List[ErrorSignature]:
        return _signatures(self.form.errors.as_data().get(attribute, []))

    def association_cardinality(self, attribute: str) -> Cardinality | None:
        f = self.form.fields.get(attribute)
        if isinstance(f, (forms.MultipleChoiceField, forms.ModelMultipleChoiceField)):
            return Cardinality.MANY
        if isinstance(f, forms.ModelChoiceField):
            return Cardinality.SINGLE
        return None


def as_entity(subject: Any) -> ValidatedEntity:
    """Wrap a subject so the value probe can drive it."""
    if isinstance(subject, models.Model):
        return ModelEntity(subject)
    if isinstance(subject, forms.BaseForm):
        return FormEntity(subject)
    if isinstance(subject, ValidatedEntity):
        return subject
    raise UnsupportedSubject(
        f"cannot probe {type(subject).__name__}: expected a model instance, a form, "
        "or an object with set/run_validation/errors_for/association_cardinality"
    )
