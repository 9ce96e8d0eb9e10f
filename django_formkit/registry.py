import logging
from typing import Callable, Dict, List, Optional, Type

from .exceptions import UnknownInputType

logger = logging.getLogger(__name__)

# Input type tag -> component class
input_components = {}

# Preview name -> callable returning a FormComponent
previews = {}

def register_input_type(*type_tags):
    """
    Register a component class for one or more input type tags.

    Used as a class decorator:

        @register_input_type("phone")
        class PhoneFieldComponent(TextFieldComponent):
            @property
            def input_type(self):
                return "tel"
    """
    if not type_tags:
        raise ValueError("register_input_type() needs at least one type tag")

    def decorator(component_class):
        for type_tag in type_tags:
            previous = input_components.get(type_tag)
            if previous is not None and previous is not component_class:
                logger.debug(
                    f"Input type '{type_tag}' now renders with {component_class.__name__} "
                    f"instead of {previous.__name__}"
                )
            input_components[type_tag] = component_class
        return component_class

    return decorator

def get_component_class(type_tag: str) -> Type:
    component_class = input_components.get(type_tag)
    if component_class is None:
        raise UnknownInputType(type_tag)
    return component_class

def input_types() -> List[str]:
    return sorted(input_components)

def register_preview(name: str):
    """Register a callable returning a FormComponent under a preview name."""

    def decorator(func: Callable):
        previews[name] = func
        logger.debug(f"Registered form preview '{name}'")
        return func

    return decorator

def get_preview(name: str) -> Optional[Callable]:
    return previews.get(name)

def preview_names() -> List[str]:
    return sorted(previews)

def load_input_types(dotted_paths: Dict[str, str]):
    """Register component classes named by dotted import path."""
    from django.utils.module_loading import import_string

    for type_tag, dotted_path in dotted_paths.items():
        register_input_type(type_tag)(import_string(dotted_path))
        logger.info(f"Loaded input type '{type_tag}' from {dotted_path}")
