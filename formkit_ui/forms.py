from typing import Any, Dict, List, Optional

# --- Utility Functions and Base Structure ---

from .utils import component_definition

# --- Forms Classes ---

class Forms:
    """
    Defines definitions for forms, their inputs and buttons.
    """
    CATEGORY = "Forms"

    @staticmethod
    def Form(
        action: str,
        method: str,
        inputs: List[Dict[str, Any]],
        buttons: List[Dict[str, Any]],
        errors: Optional[List[str]] = None,
        form_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """A form wrapping its input and button definitions."""
        return component_definition(Forms.CATEGORY, "Form", {
            "id": form_id,
            "action": action,
            "method": method, # 'get' or 'post'
            "errors": errors or [], # non-field errors
            "inputs": inputs,
            "buttons": buttons
        })

    @staticmethod
    def Input(type: str, name: str, id: str, value: Any = None) -> Dict[str, Any]:
        """A bare input bound to one model attribute."""
        return component_definition(Forms.CATEGORY, "Input", {
            "type": type,
            "name": name,
            "id": id,
            "value": value
        })

    @staticmethod
    def TextField(
        type: str,
        name: str,
        id: str,
        value: Any = None,
        label: Optional[str] = None,
        hint: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """An input with its label, hint and validation feedback."""
        return component_definition(Forms.CATEGORY, "Text field", {
            "type": type,
            "name": name,
            "id": id,
            "value": value,
            "label": label,
            "hint": hint,
            "errors": errors or []
        })

    @staticmethod
    def Collection(
        type: str,
        name: str,
        id: str,
        options: List[Dict[str, Any]],
        value: Any = None,
        label: Optional[str] = None,
        hint: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """A choice input (radio buttons, select) with its options."""
        return component_definition(Forms.CATEGORY, "Collection", {
            "type": type, # 'radio' or 'select'
            "name": name,
            "id": id,
            "value": value,
            "label": label,
            "hint": hint,
            "errors": errors or [],
            "options": options # [{"label": "Pro", "value": "pro", "checked": True}]
        })

    @staticmethod
    def Button(value: str = 'Submit', type: str = 'submit') -> Dict[str, Any]:
        """A form button."""
        return component_definition(Forms.CATEGORY, "Button", {
            "value": value,
            "type": type # 'submit', 'reset', 'button'
        })
