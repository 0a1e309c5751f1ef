"""
URLconf whose ``posts:show`` does not round-trip.

``/posts/1`` resolves to posts:show, but reverse() picks the last pattern
with that name and generates ``/posts/1.json``.
"""

from django.urls import include, path

from . import views

posts_patterns = (
    [
        path("posts/<id>", views.PostDetailView.as_view(), name="show"),
        path("posts/<id>.json", views.PostDetailView.as_view(), name="show"),
    ],
    "posts",
)

urlpatterns = [
    path("", include(posts_patterns)),
]
