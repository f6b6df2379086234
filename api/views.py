from django.http import JsonResponse


def index(request):
    return JsonResponse({"message": "Fresh API running", "docs": "/api/docs/"})
