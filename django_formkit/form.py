import logging
from typing import Any, Callable, Dict, List, Optional

from django.core.exceptions import NON_FIELD_ERRORS
from django.forms.utils import flatatt
from django.template.loader import render_to_string

from formkit_ui import Forms

from . import binding
from .components import ButtonComponent, Component, InputComponent, merge_attrs
from .registry import get_component_class

logger = logging.getLogger(__name__)

FORM_METHODS = ("get", "post")


class FormComponent(Component):
    """
    Collects the inputs and buttons of one form bound to a model.

    Each `input()` / `button()` call stores a factory; components are built
    from those factories whenever `inputs` / `buttons` are read, so every
    render sees the model's current state.

        form = FormComponent(subscriber, action="/subscribe/")
        form.input("email", type="email", hint="We never share it")
        form.input("plan", type="radio", collection={"Free": "free", "Pro": "pro"})
        form.button("Subscribe")
        html = form.render(request)
    """
    template_name = "form.html"

    def __init__(
        self,
        model,
        *,
        action: str = "",
        method: str = "post",
        prefix: Optional[str] = None,
        errors=None,
        template_name: Optional[str] = None,
        **attrs,
    ):
        super().__init__(template_name=template_name)
        method = method.lower()
        if method not in FORM_METHODS:
            raise ValueError(f"Form method must be 'get' or 'post', not '{method}'")
        self.model = model
        self.action = action
        self.method = method
        self.prefix = prefix
        self._errors = errors
        self.attrs = attrs
        self._input_factories: List[Callable[[], InputComponent]] = []
        self._button_factories: List[Callable[[], ButtonComponent]] = []

    # --- Declaration ---

    def input(
        self,
        name: str,
        type: str = "text",
        *,
        hint: Optional[str] = None,
        label: Optional[str] = None,
        collection=None,
        **options,
    ) -> "FormComponent":
        # Fail at declaration time rather than halfway through a render.
        get_component_class(type)

        def factory():
            return self.build_input(name, type, hint=hint, label=label, collection=collection, **options)

        self._input_factories.append(factory)
        return self

    def hidden(self, name: str, **options) -> "FormComponent":
        return self.input(name, "hidden", **options)

    def button(self, value: str = "Submit", type: str = "submit", **attrs) -> "FormComponent":
        # Validate the type eagerly, like input().
        ButtonComponent(value, type, **attrs)

        def factory():
            return ButtonComponent(value, type, **attrs)

        self._button_factories.append(factory)
        return self

    def build_input(
        self,
        name: str,
        type: str = "text",
        *,
        hint: Optional[str] = None,
        label: Optional[str] = None,
        collection=None,
        **options,
    ) -> InputComponent:
        """Build the component for one field without recording it."""
        component_class = get_component_class(type)
        descriptor = {"hint": hint, "label": label, "collection": collection}
        # Only pass what was given, so bare inputs don't see them as HTML attributes.
        options.update({key: value for key, value in descriptor.items() if value is not None})
        return component_class(
            self.model, name, type=type, prefix=self.prefix, errors=self._errors, **options
        )

    # --- Built components ---

    @property
    def inputs(self) -> List[InputComponent]:
        return [factory() for factory in self._input_factories]

    @property
    def buttons(self) -> List[ButtonComponent]:
        return [factory() for factory in self._button_factories]

    @property
    def errors(self) -> Dict[str, List[str]]:
        return binding.collect_errors(self.model, self._errors)

    @property
    def non_field_errors(self) -> List[str]:
        return self.errors.get(NON_FIELD_ERRORS, [])

    @property
    def form_id(self) -> str:
        key = binding.param_key(self.model)
        return f"{self.prefix}-{key}_form" if self.prefix else f"{key}_form"

    def build_attrs(self) -> Dict[str, Any]:
        attrs = {"id": self.form_id, "action": self.action, "method": self.method}
        return merge_attrs(attrs, self.attrs)

    def get_context_data(self) -> Dict[str, Any]:
        context = super().get_context_data()
        context.update({
            "attrs": flatatt(self.build_attrs()),
            "method": self.method,
            "non_field_errors": self.non_field_errors,
            "inputs": self.inputs,
            "buttons": self.buttons,
            "body": None,
        })
        return context

    def render(self, request=None, body=None):
        """
        Render the form. `body`, when given, replaces the declared inputs
        and buttons (the `{% formkit %}` block tag passes its contents here).
        """
        context = self.get_context_data()
        context["body"] = body
        logger.debug(
            f"Rendering form '{self.form_id}' with {len(context['inputs'])} inputs "
            f"and {len(context['buttons'])} buttons"
        )
        return render_to_string(self.get_template_names(), context, request=request)

    def definition(self) -> Dict[str, Any]:
        return Forms.Form(
            self.action,
            self.method,
            [component.definition() for component in self.inputs],
            [button.definition() for button in self.buttons],
            errors=self.non_field_errors,
            form_id=self.form_id,
        )
