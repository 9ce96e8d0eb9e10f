from django.urls import path

from .views import PreviewIndexView, PreviewView

app_name = "formkit"

urlpatterns = [
    path("formkit/previews/", PreviewIndexView.as_view(), name="preview_index"),
    path(
        "formkit/previews/<str:preview_name>/",
        PreviewView.as_view(),
        name="preview"
    ),
]
