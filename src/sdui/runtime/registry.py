"""Node registry: maps node type tags to builder functions.

The registry is the only dispatch mechanism of the interpreter:
- Exact, case-sensitive tag matching
- Re-registering a tag replaces the previous builder
- Lookup of an unknown tag returns None

Registration must not be interleaved with an in-flight render pass on
the same interpreter. The registry does no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from sdui.core.errors import RegistryError
from sdui.runtime.fields import NodeConfig
from sdui.specs.widgets import Widget

if TYPE_CHECKING:
    from sdui.runtime.actions import ActionDispatcher
    from sdui.runtime.images import ImageLoader
    from sdui.runtime.state import StateStore

logger = logging.getLogger(__name__)


# =============================================================================
# Builder interface
# =============================================================================


@runtime_checkable
class Composer(Protocol):
    """The part of the interpreter that builders are allowed to call."""

    state: StateStore
    actions: ActionDispatcher
    images: ImageLoader | None

    def render_node(self, config: Any) -> Widget | None:
        """Render one node config; never raises."""
        ...

    def render_children(self, configs: Any) -> list[Widget]:
        """Render a sequence of node configs in order, dropping absent results."""
        ...

    def render_child(self, config: NodeConfig, field: str = "child") -> Widget | None:
        """Render the single child stored under ``field``, if any."""
        ...

    def node_key(self, config: NodeConfig) -> str:
        """Stable identity of the node currently being built."""
        ...


Builder = Callable[[NodeConfig, Composer], Widget | None]


# =============================================================================
# Registry
# =============================================================================


class NodeRegistry:
    """Registry of node builders keyed by type tag."""

    def __init__(self) -> None:
        self._builders: dict[str, Builder] = {}

    def register(self, node_type: str, builder: Builder) -> None:
        """Register (or replace) the builder for ``node_type``."""
        if not isinstance(node_type, str) or not node_type:
            raise RegistryError(f"Node type must be a non-empty string, got {node_type!r}")
        if not callable(builder):
            raise RegistryError(f"Builder for '{node_type}' is not callable")

        if node_type in self._builders:
            logger.debug(f"Replacing builder for node type: {node_type}")
        self._builders[node_type] = builder

    def lookup(self, node_type: str) -> Builder | None:
        """Get the builder for ``node_type``, or None if unknown."""
        return self._builders.get(node_type)

    def unregister(self, node_type: str) -> bool:
        """Remove a builder. Returns False if the tag was not registered."""
        return self._builders.pop(node_type, None) is not None

    def types(self) -> Sequence[str]:
        """All registered tags, sorted."""
        return sorted(self._builders)

    def __contains__(self, node_type: object) -> bool:
        return node_type in self._builders

    def __len__(self) -> int:
        return len(self._builders)
