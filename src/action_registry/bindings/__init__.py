"""Key-to-action binding registry."""

from .models import (
    ActionList,
    BindingTable,
    KeyBinding,
    RegistryStats,
    coerce_binding,
    is_action_list,
    normalize_actions,
)
from .registry import ActionRegistry, InvalidBindingError

__all__ = [
    "ActionList",
    "ActionRegistry",
    "BindingTable",
    "InvalidBindingError",
    "KeyBinding",
    "RegistryStats",
    "coerce_binding",
    "is_action_list",
    "normalize_actions",
]
