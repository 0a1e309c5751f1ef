from django.urls import path

from . import views

app_name = "posts"

urlpatterns = [
    path("posts", views.PostsView.as_view(), name="index"),
    path("posts/<int:id>", views.PostDetailView.as_view(), name="show"),
    path("archive/<int:year>", views.archive, name="archive"),
]
