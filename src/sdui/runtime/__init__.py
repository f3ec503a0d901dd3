"""
SDUI runtime.

- interpreter: render_node / render_children with failure containment
- registry: node type -> builder mapping
- builders: default builder set
- style_resolver: JSON values -> style primitives
- state, actions, images: collaborators injected into the interpreter
"""

from sdui.runtime.actions import ActionDispatcher, LogAction, SnackbarAction
from sdui.runtime.images import AssetImageLoader, ImageLoader
from sdui.runtime.interpreter import Interpreter
from sdui.runtime.registry import Builder, Composer, NodeRegistry
from sdui.runtime.state import EphemeralStateStore, MemoryStateStore, StateStore

__all__ = [
    "Interpreter",
    "NodeRegistry",
    "Builder",
    "Composer",
    "ActionDispatcher",
    "LogAction",
    "SnackbarAction",
    "ImageLoader",
    "AssetImageLoader",
    "StateStore",
    "EphemeralStateStore",
    "MemoryStateStore",
]
