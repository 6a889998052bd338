"""Registry tracking which actions every input key triggers."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from action_registry.runtime.telemetry import record_event, span

from .models import (
    ActionList,
    BindingTable,
    KeyBinding,
    RegistryStats,
    coerce_binding,
    is_action_list,
    normalize_actions,
)


class InvalidBindingError(TypeError):
    """Raised when a stored binding is not a list of actions."""

    def __init__(self, key: str, value: object):
        super().__init__(
            f"Binding {value!r} for key {key!r} is not a list. "
            "All bindings must be a list of actions!"
        )
        self.key = key
        self.value = value


class ActionRegistry:
    """Keeps track of every input key and the actions tied to it.

    Bindings map a key identifier to an ordered list of action names::

        ActionRegistry({
            "A": ["Jump", "Crouch"],
            " ": ["TrickOne"],
        })

    Action names can be anything as long as they are used consistently, since
    several keys may trigger the same action. Key identifiers are expected to
    follow the DOM ``KeyboardEvent.key`` values
    (https://developer.mozilla.org/en-US/docs/Web/API/KeyboardEvent/key/Key_Values);
    they are not validated.

    A mapping passed at construction is adopted as-is, not copied, so later
    changes to it show through the registry and vice versa.
    """

    def __init__(
        self,
        bindings: Optional[BindingTable] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self._bindings: BindingTable = {} if bindings is None else bindings
        self._logger_name = logger_name
        self._revision = 0
        record_event(
            "bindings::adopted",
            level="debug",
            data={"keys": len(self._bindings)},
            logger_name=logger_name,
        )

    @property
    def bindings(self) -> BindingTable:
        return self._bindings

    def revision(self) -> int:
        return self._revision

    def add_bind_key_to(
        self, key_value: str, action_or_actions: str | Iterable[str]
    ) -> ActionList:
        """Append one action, or several, to the actions bound to ``key_value``.

        Unbound keys start from an empty list. Existing actions are kept and
        duplicates are not filtered out.
        """

        with span(
            "bindings::add_bind_key_to",
            logger_name=self._logger_name,
            component="bindings",
            metadata={"key": key_value},
        ) as handle:
            binding = self._bindings.get(key_value)
            if binding and not is_action_list(binding):
                handle.add_metadata("invalid_value", binding)
                raise InvalidBindingError(key_value, binding)

            actions = normalize_actions(action_or_actions)
            if not is_action_list(binding):
                binding = []
                self._bindings[key_value] = binding
            binding.extend(actions)
            self._touch()
            return binding

    def set_binding_to(self, key_value: str, action_array: str | Iterable[str]) -> None:
        """Replace whatever is bound to ``key_value`` with ``action_array``.

        Strings and iterables are stored as a fresh list. Anything else,
        ``None`` included, is stored untouched.
        """

        with span(
            "bindings::set_binding_to",
            logger_name=self._logger_name,
            component="bindings",
            metadata={"key": key_value},
        ):
            self._bindings[key_value] = coerce_binding(action_array)
            self._touch()

    def get_actions_for_key(self, key_value: str) -> Optional[ActionList]:
        """Return the live list bound to ``key_value``, or ``None``.

        Lists come back as stored, empty ones included. Mutating the returned
        list changes the registry; use ``snapshot`` or ``iter_bindings`` for
        detached copies. Malformed values from an adopted mapping are returned
        as-is unless they are falsy.
        """

        value = self._bindings.get(key_value)
        if is_action_list(value):
            return value
        return value or None

    def is_bound(self, key_value: str) -> bool:
        return self.get_actions_for_key(key_value) is not None

    def unbind(self, key_value: str) -> Optional[Any]:
        with span(
            "bindings::unbind",
            logger_name=self._logger_name,
            component="bindings",
            metadata={"key": key_value},
        ):
            if key_value not in self._bindings:
                return None
            removed = self._bindings.pop(key_value)
            self._touch()
            return removed

    def keys_for_action(self, action: str) -> tuple[str, ...]:
        return tuple(
            binding.key for binding in self.iter_bindings() if action in binding
        )

    def iter_bindings(self) -> Iterator[KeyBinding]:
        for key, value in self._bindings.items():
            if is_action_list(value):
                yield KeyBinding(key=key, actions=tuple(value))

    def snapshot(self) -> dict[str, ActionList]:
        return {binding.key: list(binding.actions) for binding in self.iter_bindings()}

    def stats(self) -> RegistryStats:
        actions: set[str] = set()
        for binding in self.iter_bindings():
            actions.update(binding.actions)
        return RegistryStats(
            key_count=len(self._bindings),
            action_count=len(actions),
            revision=self._revision,
        )

    def __contains__(self, key_value: object) -> bool:
        return isinstance(key_value, str) and self.is_bound(key_value)

    def __len__(self) -> int:
        return len(self._bindings)

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "ActionRegistry",
    "InvalidBindingError",
]
