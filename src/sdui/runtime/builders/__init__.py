"""
Default node builders.

Each builder has the signature ``(config, composer) -> Widget | None`` and
is registered under its node type tag by the interpreter.
"""

from sdui.runtime.builders.basic import (
    build_button,
    build_icon,
    build_image,
    build_rich_text,
    build_text,
)
from sdui.runtime.builders.interactive import build_checkbox, build_dropdown, build_text_field
from sdui.runtime.builders.layout import (
    build_card,
    build_center,
    build_column,
    build_container,
    build_row,
    build_sized_box,
)
from sdui.runtime.builders.lists import build_divider, build_list_view
from sdui.runtime.registry import Builder

DEFAULT_BUILDERS: dict[str, Builder] = {
    # Basic widgets
    "text": build_text,
    "richText": build_rich_text,
    "button": build_button,
    "image": build_image,
    "icon": build_icon,
    # Layout widgets
    "column": build_column,
    "row": build_row,
    "container": build_container,
    "center": build_center,
    "sizedBox": build_sized_box,
    "card": build_card,
    # Interactive widgets
    "textField": build_text_field,
    "checkbox": build_checkbox,
    "dropdown": build_dropdown,
    # List widgets
    "listView": build_list_view,
    # Other widgets
    "divider": build_divider,
}

__all__ = ["DEFAULT_BUILDERS"]
