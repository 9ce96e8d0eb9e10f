"""Template tags for declaring forms in templates: {% load formkit %}."""

from django import template
from django.template.base import token_kwargs

from ..components import ButtonComponent
from ..exceptions import FormkitError
from ..form import FormComponent

register = template.Library()

FORM_CONTEXT_KEY = "formkit_form"


def _request(context):
    return getattr(context, "request", None)


class FormNode(template.Node):
    def __init__(self, model, kwargs, nodelist):
        self.model = model
        self.kwargs = kwargs
        self.nodelist = nodelist

    def render(self, context):
        model = self.model.resolve(context)
        kwargs = {key: value.resolve(context) for key, value in self.kwargs.items()}
        form = FormComponent(model, **kwargs)
        with context.push({FORM_CONTEXT_KEY: form}):
            body = self.nodelist.render(context)
        return form.render(request=_request(context), body=body)


@register.tag("formkit")
def do_formkit(parser, token):
    """
    Wrap the block in a form bound to a model.

    Usage:
        {% formkit subscriber action="/subscribe/" %}
            {% formkit_input "email" type="email" hint="We never share it" %}
            {% formkit_button "Subscribe" %}
        {% endformkit %}
    """
    bits = token.split_contents()
    tag_name = bits.pop(0)
    if not bits:
        raise template.TemplateSyntaxError(f"'{tag_name}' tag requires a model argument")
    model = parser.compile_filter(bits.pop(0))
    kwargs = token_kwargs(bits, parser)
    if bits:
        raise template.TemplateSyntaxError(
            f"'{tag_name}' tag only takes keyword arguments after the model, got '{' '.join(bits)}'"
        )
    nodelist = parser.parse(("endformkit",))
    parser.delete_first_token()
    return FormNode(model, kwargs, nodelist)


@register.simple_tag(takes_context=True)
def formkit_input(context, name, type="text", **options):
    """
    Render one field of the enclosing {% formkit %} form.

    Usage:
        {% formkit_input "plan" type="radio" collection=plans label="Your plan" %}
    """
    form = context.get(FORM_CONTEXT_KEY)
    if form is None:
        raise FormkitError("formkit_input must be used inside a {% formkit %} block")
    return form.build_input(name, type, **options).render(request=_request(context))


@register.simple_tag(takes_context=True)
def formkit_button(context, value="Submit", type="submit", **attrs):
    return ButtonComponent(value, type, **attrs).render(request=_request(context))


@register.simple_tag(takes_context=True)
def formkit_field(context, model, name, type="text", prefix=None, errors=None, **options):
    """
    Render a single field outside of a form block.

    Usage:
        {% formkit_field subscriber "newsletter" type="checkbox" %}
    """
    form = FormComponent(model, prefix=prefix, errors=errors)
    return form.build_input(name, type, **options).render(request=_request(context))


@register.simple_tag(takes_context=True)
def render_component(context, component):
    return component.render(request=_request(context))
