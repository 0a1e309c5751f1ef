"""
Route round-trip matcher.

Checks that a request resolves to a controller, action and params, and that
the same description generates the same request::

    route("get", "/posts").to(action="index")
    route("get", "/posts/1").to("posts#show", id=1)
    route("get", "/posts/1").to(controller="posts", action="show", id=1).in_context(ctx)

When the expected description has no controller, it is inferred from the
subject the matcher is evaluated against (a view class, a string, or anything
with a ``controller_path``). Keep routing tests that are not about one view
explicit about the controller.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Protocol, Tuple

from . import logging as log
from .base import MatchResult, MatcherBase
from .errors import AssertionFailure, ConfigurationError, RoutingFailure

RouteDescription = Dict[str, str]

_VIEW_SUFFIXES = ("ViewSet", "View", "Controller")


class Router(Protocol):
    def recognize(self, method: str, path: str) -> RouteDescription:
        """Resolve a request; raise RoutingFailure when nothing matches."""
        ...

    def generate(self, description: Mapping[str, str]) -> Tuple[str, str]:
        """Build (method, path) for a description; raise RoutingFailure when impossible."""
        ...


class RouterContext(Protocol):
    def assert_routing(self, request: Mapping[str, str], expected: Mapping[str, str]) -> None:
        """Recognize and generate; raise AssertionFailure on mismatch."""
        ...


class RouteParams:
    """Normalize ``to(...)`` arguments into a flat string description."""

    def __init__(self, args: tuple, kwargs: Mapping[str, Any]):
        self.args = args
        self.kwargs = kwargs

    def normalize(self) -> RouteDescription:
        params: Dict[str, Any] = {}
        for arg in self.args:
            if isinstance(arg, str):
                params.update(self._controller_and_action(arg))
            elif isinstance(arg, Mapping):
                params.update(arg)
            else:
                raise ConfigurationError(f"route target must be 'controller#action' or a mapping, got {arg!r}")
        params.update(self.kwargs)
        return {str(k): str(v) for k, v in params.items() if v is not None}

    @staticmethod
    def _controller_and_action(target: str) -> Dict[str, str]:
        controller, sep, action = target.partition("#")
        if not sep or not controller or not action:
            raise ConfigurationError(f"route target must look like 'controller#action', got {target!r}")
        return {"controller": controller, "action": action}


def underscore(name: str) -> str:
    """PostCommentsView -> post_comments"""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


def controller_path(subject: Any) -> str | None:
    """Best guess at the controller a subject stands for, or None."""
    if subject is None:
        return None
    if isinstance(subject, str):
        return subject or None
    path = getattr(subject, "controller_path", None)
    if callable(path):
        path = path()
    if path:
        return str(path)
    cls = subject if isinstance(subject, type) else type(subject)
    name = cls.__name__
    for suffix in _VIEW_SUFFIXES:
        if name.endswith(suffix) and name != suffix:
            return underscore(name[: -len(suffix)])
    return None


def route(method: str, path: str, context: RouterContext | None = None) -> "RouteMatcher":
    return RouteMatcher(method, path, context)


class RouteMatcher(MatcherBase):
    def __init__(self, method: str, path: str, context: RouterContext | None = None):
        super().__init__()
        self.method = method.lower()
        self.path = path
        self.context = context
        self.params: RouteDescription | None = None

    def to(self, *args: Any, **params: Any) -> "RouteMatcher":
        self.params = RouteParams(args, params).normalize()
        return self

    def in_context(self, context: RouterContext) -> "RouteMatcher":
        self.context = context
        return self

    @property
    def description(self) -> str:
        return self._describe(self.params)

    def _describe(self, params: RouteDescription | None) -> str:
        return f"route {self.method.upper()} {self.path} to/from {params!r}"

    def evaluate(self, subject: Any) -> MatchResult:
        if self.params is None:
            raise ConfigurationError(f"route {self.method.upper()} {self.path}: call to(...) before matching")
        expected = self._expected_for(subject)
        log.bind(method=self.method.upper(), path=self.path)
        try:
            self._get_context().assert_routing({"method": self.method, "path": self.path}, expected)
        except (RoutingFailure, AssertionFailure) as e:
            log.debug("route.mismatch", code=e.code, error=e.message)
            return MatchResult(False, e.message)
        return MatchResult(True, f"Didn't expect to {self._describe(expected)}")

    def _expected_for(self, subject: Any) -> RouteDescription:
        """Configured params plus the controller guessed from this subject."""
        expected = dict(self.params)
        if "controller" not in expected:
            guessed = controller_path(subject)
            if guessed:
                expected["controller"] = guessed
        return expected

    def _get_context(self) -> RouterContext:
        if self.context is None:
            from .routers import DjangoRoutingContext

            self.context = DjangoRoutingContext()
        return self.context
