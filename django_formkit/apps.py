import logging

from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules

logger = logging.getLogger(__name__)


class DjangoFormkitConfig(AppConfig):
    name = "django_formkit"
    verbose_name = "Django Formkit"
    label = "django_formkit"

    def ready(self):
        from . import components, registry  # noqa: F401  registers the built-in input types
        from .conf import get_setting

        registry.load_input_types(get_setting("INPUT_TYPES"))
        autodiscover_modules("formkit_previews")
        logger.debug(
            f"Formkit ready with {len(registry.input_types())} input types "
            f"and {len(registry.preview_names())} previews"
        )
