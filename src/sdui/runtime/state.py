"""
State stores for interactive widgets.

Two implementations:
- EphemeralStateStore: every bind returns a fresh cell seeded from the
  document, so a rebuild resets the value (default).
- MemoryStateStore: values survive rebuilds, keyed by node identity.

Both hand out the same StateCell type, so builders don't know which
store the host chose.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from sdui.specs.state import Listener, StateCell

logger = logging.getLogger(__name__)


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class StateStore(Protocol):
    """Owns the values of interactive widgets across rebuilds."""

    def bind(self, key: str, initial: Any) -> StateCell:
        """Return the cell for ``key``, seeding it with ``initial`` if needed."""
        ...


# =============================================================================
# Ephemeral store
# =============================================================================


class EphemeralStateStore:
    """
    Store that keeps nothing.

    Each bind creates a new cell seeded from the document. Toggling a
    checkbox changes only the widget instance in hand.
    """

    def bind(self, key: str, initial: Any) -> StateCell:
        return StateCell(key, initial)


# =============================================================================
# Memory store
# =============================================================================


class MemoryStateStore:
    """
    In-memory store keyed by node identity.

    The first bind of a key seeds it from the document; later binds return
    the remembered value.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._listeners: list[Listener] = [self._remember]

    def _remember(self, key: str, value: Any) -> None:
        self._values[key] = value
        logger.debug(f"State {key} = {value!r}")

    def bind(self, key: str, initial: Any) -> StateCell:
        if key not in self._values:
            self._values[key] = initial
        return StateCell(key, self._values[key], self._listeners)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(key, value)`` on every change."""
        self._listeners.append(listener)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()
