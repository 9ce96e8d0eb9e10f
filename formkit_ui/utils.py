from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

# --- Utility Functions and Base Structure ---

def component_definition(
    category: str,
    component_type: str,
    props: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Standard structure for component definitions sent to the frontend.
    The frontend layer (React/Vue/etc.) maps 'component_type' to a specific
    visual component and applies the 'props'.
    """
    return {
        "category": category,
        "component_type": component_type,
        "props": props
    }


def normalize_collection(collection: Optional[Any]) -> List[Tuple[Any, Any]]:
    """
    Turn a collection argument into a list of (label, value) pairs.

    Accepts a mapping of label -> value, an iterable of (label, value)
    pairs, or an iterable of plain items (each used as label and value).
    """
    if collection is None:
        return []
    if isinstance(collection, str):
        raise TypeError("collection must be a mapping or an iterable of options, not str")
    if isinstance(collection, Mapping):
        return [(label, value) for label, value in collection.items()]

    pairs = []
    for item in collection:
        if isinstance(item, (list, tuple)):
            if len(item) != 2:
                raise ValueError(f"Collection option {item!r} must be a (label, value) pair")
            pairs.append((item[0], item[1]))
        else:
            pairs.append((item, item))
    return pairs


def swap_choices(choices: Iterable[Tuple[Any, Any]]) -> List[Tuple[Any, Any]]:
    """Convert Django-style (value, label) choices into (label, value) pairs."""
    return [(label, value) for value, label in choices]
