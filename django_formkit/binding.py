"""
Read-only access to the model a form is bound to.

Everything the components show (values, labels, hints, choices, errors)
is looked up here, so a component never touches the model directly.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from django.core.exceptions import NON_FIELD_ERRORS, FieldDoesNotExist, ValidationError
from django.forms.utils import pretty_name
from django.utils.text import camel_case_to_spaces, capfirst

from .conf import get_setting


def param_key(model) -> str:
    """Name used for the form's id: `_meta.model_name`, else the snake-cased class name."""
    meta = getattr(model, "_meta", None)
    if meta is not None and getattr(meta, "model_name", None):
        return meta.model_name
    return camel_case_to_spaces(type(model).__name__).replace(" ", "_")


def html_name(name: str, prefix: Optional[str] = None) -> str:
    return f"{prefix}-{name}" if prefix else name


def auto_id(html_name: str) -> str:
    return get_setting("AUTO_ID") % html_name


def model_field(model, name: str):
    meta = getattr(model, "_meta", None)
    if meta is None:
        return None
    try:
        return meta.get_field(name)
    except FieldDoesNotExist:
        return None


def field_value(model, name: str) -> Any:
    if isinstance(model, Mapping):
        return model.get(name)
    return getattr(model, name, None)


def field_label(model, name: str):
    field = model_field(model, name)
    verbose_name = getattr(field, "verbose_name", None)
    if verbose_name:
        return capfirst(verbose_name)
    return pretty_name(name)


def field_help_text(model, name: str):
    field = model_field(model, name)
    return getattr(field, "help_text", None) or None


def field_choices(model, name: str) -> Optional[List]:
    """Model field choices as Django (value, label) pairs, or None."""
    field = model_field(model, name)
    choices = getattr(field, "choices", None)
    return list(choices) if choices else None


def collect_errors(model, errors=None) -> Dict[str, List[str]]:
    """
    Normalise the error collection into {attribute: [message, ...]}.

    `errors` wins over `model.errors`. Accepts a mapping of messages
    (a form's ErrorDict included) or a ValidationError.
    """
    if errors is None and not isinstance(model, Mapping):
        errors = getattr(model, "errors", None)
    if not errors:
        return {}

    if isinstance(errors, ValidationError):
        if hasattr(errors, "error_dict"):
            errors = errors.message_dict
        else:
            errors = {NON_FIELD_ERRORS: errors.messages}

    if not isinstance(errors, Mapping):
        raise TypeError(f"errors must be a mapping or a ValidationError, not {type(errors).__name__}")

    collected = {}
    for name, messages in errors.items():
        if isinstance(messages, str):
            messages = [messages]
        collected[name] = [str(message) for message in messages]
    return collected
