"""Types describing the binding table and read-only views over it."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass
from typing import Any, MutableMapping

ActionList = list[str]
BindingTable = MutableMapping[str, Any]


def normalize_actions(action_or_actions: str | Iterable[str]) -> ActionList:
    """Return a fresh action list.

    A bare string is one action name, never a sequence of characters.
    """

    if isinstance(action_or_actions, str):
        return [action_or_actions]
    return list(action_or_actions)


def coerce_binding(value: Any) -> Any:
    """Like ``normalize_actions`` but leaves non-iterables (``None``) alone."""

    if isinstance(value, (str, Iterable)):
        return normalize_actions(value)
    return value


def is_action_list(value: object) -> bool:
    return isinstance(value, MutableSequence)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Detached view of one key and its actions."""

    key: str
    actions: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(self.actions))

    def __contains__(self, action: object) -> bool:
        return action in self.actions


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    key_count: int
    action_count: int
    revision: int


__all__ = [
    "ActionList",
    "BindingTable",
    "KeyBinding",
    "RegistryStats",
    "coerce_binding",
    "is_action_list",
    "normalize_actions",
]
