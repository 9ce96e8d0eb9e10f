import logging
from collections import namedtuple
from typing import Any, Dict, List, Optional

from django.db.models import Choices
from django.forms.utils import flatatt
from django.template.loader import render_to_string
from django.utils.formats import localize_input

from formkit_ui import Forms, normalize_collection, swap_choices

from . import binding
from .conf import get_setting, template_path
from .exceptions import MissingCollection
from .registry import register_input_type

logger = logging.getLogger(__name__)

TEXT_INPUT_TYPES = (
    "text", "email", "password", "number", "date", "datetime-local",
    "time", "url", "tel", "search", "color",
)

BUTTON_TYPES = ("submit", "reset", "button")

Option = namedtuple("Option", ["label", "value", "id", "checked"])


def merge_attrs(original: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Combine two attribute dicts, appending to `class` rather than replacing it."""
    merged = original.copy()
    for attr, value in updates.items():
        if attr == "class" and merged.get(attr) and value:
            merged[attr] = f"{merged[attr]} {value}".strip()
        else:
            merged[attr] = value
    return merged


class Component:
    """
    Base for everything that renders through a template.

    Subclasses set `template_name` and extend `get_context_data()`.
    """
    template_name: Optional[str] = None

    def __init__(self, template_name: Optional[str] = None):
        if template_name is not None:
            self.template_name = template_name

    def get_template_names(self) -> List[str]:
        if self.template_name is None:
            raise NotImplementedError(f"{type(self).__name__} must define template_name")
        return [template_path(self.template_name)]

    def get_context_data(self) -> Dict[str, Any]:
        return {"component": self}

    def render(self, request=None):
        return render_to_string(self.get_template_names(), self.get_context_data(), request=request)

    def definition(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.render()


# --- Inputs ---

@register_input_type("input")
class InputComponent(Component):
    """A bare input bound to one model attribute: name, id and value only."""
    template_name = "input.html"
    default_type = "text"

    def __init__(
        self,
        model,
        name: str,
        *,
        type: Optional[str] = None,
        prefix: Optional[str] = None,
        errors=None,
        template_name: Optional[str] = None,
        **attrs,
    ):
        super().__init__(template_name=template_name)
        self.model = model
        self.name = name
        self.type = type
        self.prefix = prefix
        self._errors = errors
        self.attrs = attrs

    @property
    def input_type(self) -> str:
        if self.type is None or self.type == "input":
            return self.default_type
        return self.type

    @property
    def html_name(self) -> str:
        return binding.html_name(self.name, self.prefix)

    @property
    def auto_id(self) -> str:
        return binding.auto_id(self.html_name)

    @property
    def value(self) -> Any:
        # Read on every access so rendering reflects the model as it is now.
        return binding.field_value(self.model, self.name)

    def format_value(self, value) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(localize_input(value))

    def build_attrs(self) -> Dict[str, Any]:
        attrs = {"type": self.input_type, "name": self.html_name, "id": self.auto_id}
        value = self.format_value(self.value)
        if value is not None:
            attrs["value"] = value
        return merge_attrs(attrs, self.attrs)

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["attrs"] = flatatt(self.build_attrs())
        return context

    def definition(self) -> Dict[str, Any]:
        return Forms.Input(self.input_type, self.html_name, self.auto_id, self.value)


@register_input_type("hidden")
class HiddenFieldComponent(InputComponent):
    default_type = "hidden"

    @property
    def input_type(self) -> str:
        return "hidden"


@register_input_type(*TEXT_INPUT_TYPES)
class TextFieldComponent(InputComponent):
    """
    An input with its label, hint and validation errors.

    `label` and `hint` default to the model field's verbose name and help
    text; pass False to leave either out.
    """
    template_name = "text_field.html"

    def __init__(self, model, name: str, *, label=None, hint=None, **kwargs):
        super().__init__(model, name, **kwargs)
        self._label = label
        self._hint = hint

    @property
    def input_type(self) -> str:
        # Tags outside the HTML input types (custom registrations) render as text.
        if self.type in TEXT_INPUT_TYPES:
            return self.type
        return self.default_type

    @property
    def label(self):
        if self._label is False:
            return None
        if self._label is not None:
            return self._label
        return binding.field_label(self.model, self.name)

    @property
    def hint(self):
        if self._hint is False:
            return None
        if self._hint is not None:
            return self._hint
        return binding.field_help_text(self.model, self.name)

    @property
    def errors(self) -> List[str]:
        return binding.collect_errors(self.model, self._errors).get(self.name, [])

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def hint_id(self) -> str:
        return f"{self.auto_id}_hint"

    @property
    def errors_id(self) -> str:
        return f"{self.auto_id}_errors"

    def feedback_attrs(self) -> Dict[str, Any]:
        described_by = []
        if self.hint:
            described_by.append(self.hint_id)
        attrs = {}
        if self.has_errors:
            described_by.append(self.errors_id)
            attrs["class"] = get_setting("ERROR_CSS_CLASS")
            attrs["aria-invalid"] = "true"
        if described_by:
            attrs["aria-describedby"] = " ".join(described_by)
        return attrs

    def build_attrs(self) -> Dict[str, Any]:
        return merge_attrs(super().build_attrs(), self.feedback_attrs())

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context.update({
            "label": self.label,
            "hint": self.hint,
            "errors": self.errors,
        })
        return context

    def definition(self) -> Dict[str, Any]:
        return Forms.TextField(
            self.input_type, self.html_name, self.auto_id, self.value,
            label=self.label, hint=self.hint, errors=self.errors,
        )


@register_input_type("textarea")
class TextAreaFieldComponent(TextFieldComponent):
    template_name = "text_area.html"

    @property
    def input_type(self) -> str:
        return "textarea"

    def build_attrs(self) -> Dict[str, Any]:
        attrs = merge_attrs({"name": self.html_name, "id": self.auto_id}, self.attrs)
        return merge_attrs(attrs, self.feedback_attrs())

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["content"] = self.format_value(self.value) or ""
        return context


@register_input_type("checkbox")
class CheckBoxFieldComponent(TextFieldComponent):
    template_name = "check_box.html"

    @property
    def input_type(self) -> str:
        return "checkbox"

    @property
    def checked(self) -> bool:
        return bool(self.value)

    def build_attrs(self) -> Dict[str, Any]:
        attrs = {"type": "checkbox", "name": self.html_name, "id": self.auto_id}
        value = self.value
        # Booleans carry their state in `checked`, anything else keeps its value.
        if not (value is None or value == "" or isinstance(value, bool)):
            attrs["value"] = self.format_value(value)
        attrs["checked"] = self.checked
        attrs = merge_attrs(attrs, self.attrs)
        return merge_attrs(attrs, self.feedback_attrs())


# --- Collections ---

class CollectionComponent(TextFieldComponent):
    """
    A choice input whose options come from `collection`, or from the
    model field's choices when no collection is given.
    """

    def __init__(self, model, name: str, *, collection=None, **kwargs):
        super().__init__(model, name, **kwargs)
        self.collection = collection

    def choices(self) -> List:
        collection = self.collection
        if isinstance(collection, type) and issubclass(collection, Choices):
            return swap_choices(collection.choices)
        if collection is not None:
            return normalize_collection(collection)

        model_choices = binding.field_choices(self.model, self.name)
        if model_choices is None:
            raise MissingCollection(
                f"Input '{self.name}' needs a collection: the model field defines no choices"
            )
        logger.debug(f"Using model field choices for input '{self.name}'")
        return swap_choices(model_choices)

    @property
    def options(self) -> List[Option]:
        current = self.value
        options = []
        for index, (label, value) in enumerate(self.choices()):
            checked = current is not None and str(value) == str(current)
            options.append(Option(label, value, f"{self.auto_id}_{index}", checked))
        return options

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["options"] = self.options
        return context

    def definition(self) -> Dict[str, Any]:
        return Forms.Collection(
            self.input_type, self.html_name, self.auto_id,
            [{"label": o.label, "value": o.value, "checked": o.checked} for o in self.options],
            value=self.value, label=self.label, hint=self.hint, errors=self.errors,
        )


@register_input_type("radio")
class RadioButtonFieldComponent(CollectionComponent):
    template_name = "radio_buttons.html"

    @property
    def input_type(self) -> str:
        return "radio"

    def build_attrs(self) -> Dict[str, Any]:
        # Attributes for the wrapping fieldset; each radio gets its own below.
        attrs = merge_attrs({"id": self.auto_id, "class": "formkit-field formkit-field-radio"}, self.attrs)
        return merge_attrs(attrs, self.feedback_attrs())

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["radios"] = [
            (option, flatatt({
                "type": "radio",
                "name": self.html_name,
                "id": option.id,
                "value": "" if option.value is None else str(option.value),
                "checked": option.checked,
            }))
            for option in context["options"]
        ]
        return context


@register_input_type("select")
class SelectFieldComponent(CollectionComponent):
    template_name = "select.html"

    def __init__(self, model, name: str, *, include_blank=False, **kwargs):
        super().__init__(model, name, **kwargs)
        self.include_blank = include_blank

    @property
    def input_type(self) -> str:
        return "select"

    @property
    def blank_label(self) -> Optional[str]:
        if self.include_blank is True:
            return ""
        return self.include_blank or None

    def build_attrs(self) -> Dict[str, Any]:
        attrs = merge_attrs({"name": self.html_name, "id": self.auto_id}, self.attrs)
        return merge_attrs(attrs, self.feedback_attrs())

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["include_blank"] = self.include_blank not in (False, None)
        context["blank_label"] = self.blank_label or ""
        return context


# --- Buttons ---

class ButtonComponent(Component):
    template_name = "button.html"

    def __init__(self, value: str = "Submit", type: str = "submit", template_name: Optional[str] = None, **attrs):
        super().__init__(template_name=template_name)
        if type not in BUTTON_TYPES:
            raise ValueError(f"Button type must be one of {', '.join(BUTTON_TYPES)}, not '{type}'")
        self.value = value
        self.type = type
        self.attrs = attrs

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context["value"] = self.value
        context["attrs"] = flatatt(merge_attrs({"type": self.type}, self.attrs))
        return context

    def definition(self) -> Dict[str, Any]:
        return Forms.Button(self.value, self.type)
