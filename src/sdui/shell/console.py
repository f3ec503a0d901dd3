"""
Rich console presentation of rendered widget trees.

Used by the ``sdui render`` command to show a document's widget tree,
plus the host-level fallback and error views.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from sdui.specs.widgets import ErrorWidget, Widget

console = Console()

STYLES = {
    "kind": Style(color="bright_cyan", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "muted": Style(color="bright_black"),
    "title": Style(color="bright_white", bold=True),
}

# Structure is drawn by the tree itself
_STRUCTURAL_FIELDS = {"kind", "child", "children", "error_placeholder"}


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, dict):
        return "(" + ", ".join(f"{k}={_format_value(v)}" for k, v in value.items()) + ")"
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return repr(value)


def widget_properties(widget: Widget) -> dict[str, Any]:
    """Non-default, non-structural properties of a widget, as JSON values."""
    return widget.model_dump(mode="json", exclude_defaults=True, exclude=_STRUCTURAL_FIELDS)


def widget_label(widget: Widget) -> Text:
    """One-line description of a widget for tree display."""
    if isinstance(widget, ErrorWidget):
        return Text(f"✗ {widget.message}", style=STYLES["error"])

    label = Text(widget.kind, style=STYLES["kind"])
    props = widget_properties(widget)
    if props:
        rendered = " ".join(f"{name}={_format_value(value)}" for name, value in props.items())
        label.append(f" {rendered}", style=STYLES["muted"])
    return label


def widget_tree(widget: Widget, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the widget tree."""
    node = Tree(widget_label(widget)) if tree is None else tree.add(widget_label(widget))
    for child in widget.child_widgets():
        widget_tree(child, node)
    return node


def widget_to_dict(widget: Widget) -> dict[str, Any]:
    """JSON-friendly summary of a widget tree."""
    data: dict[str, Any] = {"kind": widget.kind, **widget_properties(widget)}
    children = [widget_to_dict(child) for child in widget.child_widgets()]
    if children:
        data["children"] = children
    return data


def print_widget_tree(widget: Widget, title: str | None = None) -> None:
    tree = widget_tree(widget)
    if title:
        console.print(Text(title, style=STYLES["title"]))
    console.print(tree)


def print_fallback() -> None:
    """Host fallback view: the document produced nothing to show."""
    console.print(
        Panel(
            Text("UI configuration could not be loaded.", style=STYLES["muted"]),
            title="⚠ Fallback UI",
            border_style="yellow",
        )
    )


def print_load_error(message: str) -> None:
    """Host error view: the document could not be loaded at all."""
    console.print(
        Panel(
            Text(message, style=STYLES["muted"]),
            title="✗ Error Loading UI",
            border_style="red",
        )
    )
