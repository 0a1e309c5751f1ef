from django.http import JsonResponse
from django.urls import include, path


def health_check(request):
    """Health check endpoint."""
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("health/", health_check, name="health"),
    path("", include("apps.catalog.urls")),
]
