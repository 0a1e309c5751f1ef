"""
Probe matchers for Django models, forms and URLconfs.

Matchers mutate or probe a subject and report pass/fail with a readable
explanation:

    assert_matches(Game(), ensure_exclusion_of("floors").in_range(5, 8))
    assert_matches(Robot(), validate_presence_of("arms"))
    assert_matches(PostsView, route("get", "/posts/1").to(action="show", id=1))
"""

from .assertions import assert_does_not_match, assert_matches
from .base import MatchResult, Matcher, MatcherBase
from .entities import FormEntity, ModelEntity, as_entity
from .errors import (
    AssertionFailure,
    ConfigurationError,
    CouldNotMutateAttribute,
    CouldNotSetPasswordError,
    MatcherError,
    RoutingFailure,
    UnsupportedSubject,
)
from .exclusion import ExclusionMatcher, ensure_exclusion_of
from .presence import PresenceMatcher, validate_presence_of
from .probe import Cardinality, ErrorSignature, ProbeOutcome, ValidatedEntity, ValueProbe
from .routers import DjangoRouter, DjangoRoutingContext
from .routing import RouteMatcher, RouteParams, Router, RouterContext, route

__all__ = [
    "assert_matches",
    "assert_does_not_match",
    "ensure_exclusion_of",
    "validate_presence_of",
    "route",
    "ExclusionMatcher",
    "PresenceMatcher",
    "RouteMatcher",
    "RouteParams",
    "Matcher",
    "MatcherBase",
    "MatchResult",
    "ValueProbe",
    "ProbeOutcome",
    "ValidatedEntity",
    "ErrorSignature",
    "Cardinality",
    "ModelEntity",
    "FormEntity",
    "as_entity",
    "Router",
    "RouterContext",
    "DjangoRouter",
    "DjangoRoutingContext",
    "MatcherError",
    "CouldNotMutateAttribute",
    "CouldNotSetPasswordError",
    "UnsupportedSubject",
    "RoutingFailure",
    "AssertionFailure",
    "ConfigurationError",
]
