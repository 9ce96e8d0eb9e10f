from .forms import Forms
from .utils import component_definition, normalize_collection, swap_choices

__all__ = ["Forms", "component_definition", "normalize_collection", "swap_choices"]
