"""Route round-trip matcher against the catalog URLconf."""

import pytest

from apps.catalog.views import PostDetailView, PostsView
from libs.probe_matchers import DjangoRouter, DjangoRoutingContext, RoutingFailure, assert_matches, route


pytestmark = pytest.mark.integration

LEGACY = "apps.catalog.legacy_urls"


class TestDjangoRouter:
    def test_recognize_namespaced_route(self):
        assert DjangoRouter().recognize("GET", "/posts/1") == {"controller": "posts", "action": "show", "id": "1"}

    def test_recognize_unknown_path(self):
        with pytest.raises(RoutingFailure, match=r'No route matches \[GET\] "/nope"'):
            DjangoRouter().recognize("get", "/nope")

    def test_recognize_unhandled_method(self):
        with pytest.raises(RoutingFailure, match=r"\[POST\]"):
            DjangoRouter().recognize("post", "/posts/1")

    def test_head_served_by_get_handler(self):
        """PostsView defines only get(); Django answers HEAD with it."""
        assert DjangoRouter().recognize("head", "/posts") == {"controller": "posts", "action": "index"}
        assert_matches(None, route("head", "/posts/1").to("posts#show", id=1))

    def test_function_view_accepts_any_method(self):
        assert DjangoRouter().recognize("patch", "/archive/2020")["year"] == "2020"

    def test_route_without_namespace(self):
        assert DjangoRouter().recognize("get", "/health/") == {"action": "health"}
        assert DjangoRouter().generate({"action": "health"}) == ("get", "/health/")

    def test_generate(self):
        assert DjangoRouter().generate({"controller": "posts", "action": "show", "id": "1"}) == ("get", "/posts/1")

    def test_generate_unknown(self):
        with pytest.raises(RoutingFailure):
            DjangoRouter().generate({"controller": "posts", "action": "edit", "id": "1"})

    def test_generate_without_action(self):
        with pytest.raises(RoutingFailure, match="missing action"):
            DjangoRouter().generate({"controller": "posts"})

    def test_legacy_urlconf_generates_json_suffix(self):
        router = DjangoRouter(urlconf=LEGACY)

        assert router.recognize("get", "/posts/1") == {"controller": "posts", "action": "show", "id": "1"}
        assert router.generate({"controller": "posts", "action": "show", "id": "1"}) == ("get", "/posts/1.json")


class TestRouteMatcher:
    def test_index_with_controller_from_view_name(self):
        assert_matches(PostsView, route("get", "/posts").to(action="index"))

    def test_show_with_explicit_controller_path(self):
        assert_matches(PostDetailView, route("get", "/posts/1").to(action="show", id=1))

    def test_show_with_controller_hash_action(self):
        assert_matches(None, route("get", "/posts/1").to("posts#show", id=1))

    def test_delete_is_routed(self):
        assert_matches(None, route("delete", "/posts/1").to("posts#show", id=1))

    def test_wrong_params(self):
        matcher = route("get", "/posts/1").to("posts#show", id=2)

        assert not matcher.matches(None)
        assert matcher.failure_message.startswith("The recognized options")

    def test_unknown_path(self):
        matcher = route("get", "/missing").to("posts#index")

        assert not matcher.matches(None)
        assert matcher.failure_message == 'No route matches [GET] "/missing"'

    def test_generation_differs(self):
        """GET /posts/1 recognizes as posts:show but regenerates /posts/1.json."""
        matcher = route("get", "/posts/1").to("posts#show", id=1).in_context(DjangoRoutingContext(urlconf=LEGACY))

        assert not matcher.matches(None)
        assert matcher.failure_message == "The generated path <'/posts/1.json'> did not match <'/posts/1'>"

    def test_urlconf_override_via_settings(self, settings):
        settings.ROOT_URLCONF = LEGACY

        assert not route("get", "/posts/1").to("posts#show", id=1).matches(None)
