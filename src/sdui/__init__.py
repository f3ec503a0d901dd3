"""
SDUI - Server-Driven UI interpreter.

Renders a user interface described by a JSON document (a tree of typed
nodes) into an immutable widget tree.

This package provides:
- Interpreter: registry-driven rendering with inline error nodes
- Style resolution: JSON values -> colors, insets, alignment, fonts
- Widgets: the renderable tree handed to a presentation layer
- Shell: document loading and a rich/typer command-line host
"""

__version__ = "0.1.0"

from sdui.runtime.interpreter import Interpreter
from sdui.runtime.registry import NodeRegistry
from sdui.specs.widgets import ErrorWidget, Widget, walk

__all__ = ["Interpreter", "NodeRegistry", "Widget", "ErrorWidget", "walk", "__version__"]
