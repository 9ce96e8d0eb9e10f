from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    "TEMPLATE_PACK": "formkit",
    "AUTO_ID": "id_%s",
    "ERROR_CSS_CLASS": "is-invalid",
    "INPUT_TYPES": {},
    "PREVIEWS_ENABLED": None,
}


def get_setting(name: str) -> Any:
    """Read one FORMKIT setting, falling back to the package default."""
    user_settings = getattr(settings, "FORMKIT", None) or {}
    value = user_settings.get(name, DEFAULTS[name])
    if name == "PREVIEWS_ENABLED" and value is None:
        return settings.DEBUG
    return value


def template_path(template_name: str) -> str:
    return f"{get_setting('TEMPLATE_PACK')}/{template_name}"
