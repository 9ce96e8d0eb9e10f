import logging

from django.http import Http404, HttpResponse, JsonResponse
from django.views import View

from .conf import get_setting
from .exceptions import FormkitError
from .registry import get_preview, preview_names

logger = logging.getLogger(__name__)


class PreviewsEnabledMixin:
    def dispatch(self, request, *args, **kwargs):
        if not get_setting("PREVIEWS_ENABLED"):
            raise Http404("Form previews are disabled")
        return super().dispatch(request, *args, **kwargs)


class PreviewView(PreviewsEnabledMixin, View):
    http_method_names = ["get"]

    def get(self, request, preview_name):
        preview = get_preview(preview_name)
        if not preview:
            logger.warning(f"Form preview '{preview_name}' is not registered")
            return JsonResponse({"error": "Preview not found"}, status=404)
        try:
            form = preview()
            if request.GET.get("format") == "json":
                return JsonResponse(form.definition())
            return HttpResponse(form.render(request=request))
        except FormkitError as e:
            logger.exception(f"Error rendering form preview '{preview_name}'")
            return JsonResponse({"error": str(e)}, status=400)


class PreviewIndexView(PreviewsEnabledMixin, View):
    http_method_names = ["get"]

    def get(self, request):
        return JsonResponse({"previews": preview_names()})
