"""
Builders for interactive widgets: textField, checkbox, dropdown.

Builders only seed values. The cell they bind comes from the
interpreter's state store, keyed by node identity, and the store decides
whether a value survives the next rebuild.
"""

from __future__ import annotations

import logging

from sdui.runtime.fields import NodeConfig, get_bool, get_list, get_str
from sdui.runtime.registry import Composer
from sdui.specs.widgets import Checkbox, Dropdown, TextField, Widget

logger = logging.getLogger(__name__)


def build_text_field(config: NodeConfig, composer: Composer) -> Widget | None:
    """Text input; changes are observed (logged) but not stored."""
    key = composer.node_key(config)

    def on_changed(value: str) -> None:
        logger.info(f"TextField {key} changed: {value}")

    return TextField(
        label=get_str(config, "label"),
        hint=get_str(config, "hint"),
        on_changed=on_changed,
    )


def build_checkbox(config: NodeConfig, composer: Composer) -> Widget | None:
    label = get_str(config, "label")
    initial = get_bool(config, "value")
    cell = composer.state.bind(composer.node_key(config), bool(initial))

    def on_changed(value: bool) -> None:
        cell.set(bool(value))
        logger.info(f"Checkbox {label or 'unnamed'} changed to: {cell.value}")

    return Checkbox(label=label, state=cell, on_changed=on_changed)


def build_dropdown(config: NodeConfig, composer: Composer) -> Widget | None:
    """Select box; the first option is the initial selection."""
    options = get_list(config, "options")
    if not options:
        return None

    label = get_str(config, "label")
    choices = tuple(str(option) for option in options)
    cell = composer.state.bind(composer.node_key(config), choices[0])
    if cell.value not in choices:
        cell.set(choices[0])

    def on_changed(value: str) -> None:
        if value not in choices:
            logger.warning(f"Dropdown {label or 'unnamed'} ignoring unknown option: {value}")
            return
        cell.set(value)
        logger.info(f"Dropdown {label or 'unnamed'} changed to: {value}")

    return Dropdown(options=choices, label=label, state=cell, on_changed=on_changed)
