"""Interfaces the host game engine provides to this package.

The engine owns sessions, hook dispatch, settings persistence and page
rendering. This package only sees it through these protocols, so any object
with matching methods can be passed in.
"""

from typing import Any, Protocol, runtime_checkable


class _NoValue:
    """Marker for a stat line added without a value."""

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE: Any = _NoValue()


@runtime_checkable
class SettingsSource(Protocol):
    """Host settings store for this module."""

    def get_setting(self, name: str) -> Any:
        """Return the stored value, or None if the setting is not set."""
        ...


@runtime_checkable
class StatsPanel(Protocol):
    """Host character-stats panel."""

    def add_stat_line(self, label: str, value: Any = NO_VALUE) -> None:
        """Append a line.

        A line added without a value is a section header. An explicit None
        is a value line with an empty value.
        """
        ...


@runtime_checkable
class HookDispatcher(Protocol):
    """Host-mediated hook dispatch.

    The host chains every registered provider for ``name`` and returns the
    final merged arguments.
    """

    def dispatch_hook(self, name: str, args: dict) -> Any:
        ...


@runtime_checkable
class HookRegistrar(Protocol):
    """Registers this module for an inbound host event."""

    def add_hook(self, name: str) -> None:
        ...
