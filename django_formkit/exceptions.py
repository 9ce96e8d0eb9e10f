class FormkitError(Exception):
    """Base class for errors raised while building form components."""


class UnknownInputType(FormkitError):
    """No component class is registered for an input type tag."""

    def __init__(self, type_tag):
        self.type_tag = type_tag
        super().__init__(f"No form component registered for input type '{type_tag}'")


class MissingCollection(FormkitError):
    """A choice input has neither a collection nor model field choices."""
