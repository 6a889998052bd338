"""In-memory registry mapping input keys to named actions."""

from .bindings import ActionRegistry, InvalidBindingError, KeyBinding, RegistryStats

__all__ = [
    "ActionRegistry",
    "InvalidBindingError",
    "KeyBinding",
    "RegistryStats",
    "bindings",
    "runtime",
]

__version__ = "0.1.0"
