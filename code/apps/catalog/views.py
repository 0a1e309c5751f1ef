from django.http import JsonResponse
from django.views import View


class PostsView(View):
    def get(self, request):
        return JsonResponse({"posts": []})


class PostDetailView(View):
    controller_path = "posts"

    def get(self, request, id):
        return JsonResponse({"id": id})

    def delete(self, request, id):
        return JsonResponse({}, status=204)


def archive(request, year):
    return JsonResponse({"year": year})
