"""Interpreter: turns node configs into widget trees.

The interpreter owns a NodeRegistry seeded with the default builders and
is the single failure-containment boundary of a render pass:

- missing/invalid ``type``        -> inline ErrorWidget
- unregistered ``type``           -> inline ErrorWidget naming the tag
- builder raises                  -> inline ErrorWidget with the details
- builder returns None            -> None (nothing to show, not an error)

Faults are recovered at the node that caused them, so siblings and
ancestors render normally.

Usage:
    interpreter = Interpreter()
    widget = interpreter.render_node({"type": "text", "text": "Hello"})
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sdui.core.errors import json_type_name
from sdui.runtime.actions import ActionDispatcher
from sdui.runtime.fields import NodeConfig
from sdui.runtime.images import ImageLoader
from sdui.runtime.registry import Builder, NodeRegistry
from sdui.runtime.state import EphemeralStateStore, StateStore
from sdui.specs.widgets import ErrorWidget, Widget

logger = logging.getLogger(__name__)


class Interpreter:
    """Registry-driven renderer for SDUI documents."""

    def __init__(
        self,
        registry: NodeRegistry | None = None,
        *,
        state: StateStore | None = None,
        actions: ActionDispatcher | None = None,
        images: ImageLoader | None = None,
        register_defaults: bool = True,
    ):
        """
        Initialize the interpreter.

        Args:
            registry: Registry to use; a new one is created if omitted
            state: Store for interactive widget values (ephemeral by default)
            actions: Dispatcher for button actions
            images: Optional loader consulted by the image builder
            register_defaults: Seed the registry with the default builders
        """
        self.registry = registry if registry is not None else NodeRegistry()
        self.state: StateStore = state if state is not None else EphemeralStateStore()
        self.actions = actions if actions is not None else ActionDispatcher()
        self.images = images
        self._path: list[str] = []

        if register_defaults:
            from sdui.runtime.builders import DEFAULT_BUILDERS

            for node_type, builder in DEFAULT_BUILDERS.items():
                if node_type not in self.registry:
                    self.registry.register(node_type, builder)

    def register(self, node_type: str, builder: Builder) -> None:
        """Register a custom builder. Last registration for a tag wins."""
        self.registry.register(node_type, builder)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_node(self, config: Any) -> Widget | None:
        """
        Render a single node config.

        Never raises. Returns an ErrorWidget for structural, dispatch and
        builder faults, and None when the builder had nothing to render.
        """
        if not isinstance(config, Mapping):
            message = f"malformed node config: expected object, got {json_type_name(config)}"
            logger.warning(message)
            return ErrorWidget(message=message)

        node_type = config.get("type")
        if not isinstance(node_type, str) or not node_type:
            logger.warning("Widget config missing type field")
            return ErrorWidget(message="missing type field")

        builder = self.registry.lookup(node_type)
        if builder is None:
            logger.warning(f"Unknown widget type: {node_type}")
            return ErrorWidget(message=f"unknown widget type: {node_type}")

        with self._segment(node_type):
            try:
                return builder(config, self)
            except Exception as e:
                details = str(e) or type(e).__name__
                logger.warning(f"Error parsing widget {self.node_key(config)}: {details}")
                logger.debug("Builder traceback", exc_info=True)
                return ErrorWidget(message=f"parse error: {details}")

    def render_children(self, configs: Any) -> list[Widget]:
        """
        Render a sequence of node configs, preserving order.

        Elements that are not objects are dropped silently, as are nodes
        whose builder returned None.
        """
        if not isinstance(configs, (list, tuple)):
            return []

        widgets: list[Widget] = []
        for index, config in enumerate(configs):
            if not isinstance(config, Mapping):
                logger.debug(f"Skipping non-object child at index {index}: {config!r}")
                continue
            with self._segment(str(index)):
                widget = self.render_node(config)
            if widget is not None:
                widgets.append(widget)
        return widgets

    def render_child(self, config: NodeConfig, field: str = "child") -> Widget | None:
        """Render the single child node stored under ``field``."""
        child_config = config.get(field)
        if child_config is None:
            return None
        if not isinstance(child_config, Mapping):
            logger.debug(f"Ignoring non-object '{field}': {child_config!r}")
            return None
        with self._segment(field):
            return self.render_node(child_config)

    # =========================================================================
    # Node identity
    # =========================================================================

    def node_key(self, config: NodeConfig) -> str:
        """
        Stable identity of the node being built.

        An explicit ``id`` wins; otherwise the node's path in the tree,
        e.g. ``column/1/checkbox``.
        """
        node_id = config.get("id")
        if isinstance(node_id, str) and node_id:
            return node_id
        return "/".join(self._path)

    @contextmanager
    def _segment(self, name: str) -> Iterator[None]:
        self._path.append(name)
        try:
            yield
        finally:
            self._path.pop()
