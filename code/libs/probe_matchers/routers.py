"""
Django URLconf as a round-trip router.

Descriptions map onto URL names: ``controller`` is the URL namespace,
``action`` the pattern name, and every other key a URL kwarg. A pattern
without a namespace recognizes to a description without a controller.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from django.urls import NoReverseMatch, Resolver404, resolve, reverse

from . import logging as log
from .errors import AssertionFailure, RoutingFailure
from .routing import RouteDescription, Router


def _allowed_methods(func: Any) -> set[str] | None:
    """Methods a resolved view answers to, or None when it cannot be told."""
    actions = getattr(func, "actions", None)
    if actions:
        # viewset routers bind method -> action on the view function
        allowed = {m.lower() for m in actions}
    else:
        view_class = getattr(func, "view_class", None)
        if view_class is None:
            return None
        allowed = {m for m in view_class.http_method_names if hasattr(view_class, m)}
    if "get" in allowed:
        # View.setup() answers HEAD with get() when no head() is defined
        allowed.add("head")
    return allowed


class DjangoRouter:
    """Router backed by ``django.urls.resolve`` and ``reverse``."""

    def __init__(self, urlconf: str | None = None):
        self.urlconf = urlconf

    def recognize(self, method: str, path: str) -> RouteDescription:
        method = method.lower()
        try:
            match = resolve(path, urlconf=self.urlconf)
        except Resolver404 as e:
            raise RoutingFailure(f'No route matches [{method.upper()}] "{path}"') from e
        allowed = _allowed_methods(match.func)
        if allowed is not None and method not in allowed:
            raise RoutingFailure(f'No route matches [{method.upper()}] "{path}"')
        description: Dict[str, str] = {}
        if match.namespace:
            description["controller"] = match.namespace
        if match.url_name:
            description["action"] = match.url_name
        description.update({str(k): str(v) for k, v in match.kwargs.items()})
        return description

    def generate(self, description: Mapping[str, str]) -> Tuple[str, str]:
        params = dict(description)
        controller = params.pop("controller", None)
        action = params.pop("action", None)
        method = params.pop("method", "get")
        if not action:
            raise RoutingFailure(f"No route matches {dict(description)!r}: missing action")
        viewname = f"{controller}:{action}" if controller else action
        try:
            path = reverse(viewname, urlconf=self.urlconf, kwargs=params or None)
        except NoReverseMatch as e:
            raise RoutingFailure(f"No route matches {dict(description)!r}") from e
        return method, path


def _difference(left: Mapping[str, str], right: Mapping[str, str]) -> Dict[str, Any]:
    keys = set(left) | set(right)
    return {k: (left.get(k), right.get(k)) for k in sorted(keys) if left.get(k) != right.get(k)}


class DjangoRoutingContext:
    """Recognize-then-generate check, failing with AssertionFailure on any mismatch."""

    def __init__(self, router: Router | None = None, *, urlconf: str | None = None):
        self.router = router or DjangoRouter(urlconf=urlconf)

    def assert_recognizes(self, expected: Mapping[str, str], request: Mapping[str, str]) -> None:
        recognized = self.router.recognize(request["method"], request["path"])
        if recognized != dict(expected):
            raise AssertionFailure(
                f"The recognized options <{recognized!r}> did not match <{dict(expected)!r}>, "
                f"difference: <{_difference(recognized, expected)!r}>"
            )

    def assert_generates(self, expected_path: str, description: Mapping[str, str]) -> None:
        _, generated = self.router.generate(description)
        if generated != expected_path:
            raise AssertionFailure(f"The generated path <{generated!r}> did not match <{expected_path!r}>")

    def assert_routing(self, request: Mapping[str, str], expected: Mapping[str, str]) -> None:
        self.assert_recognizes(expected, request)
        self.assert_generates(request["path"], expected)
        log.debug("route.round_trip", method=request["method"], path=request["path"])
