"""
Builders for listView and divider.
"""

from __future__ import annotations

from sdui.runtime.fields import NodeConfig, get_bool, get_list
from sdui.runtime.registry import Composer
from sdui.runtime.style_resolver import parse_color, parse_dimension
from sdui.specs.widgets import Divider, ListView, Widget


def build_list_view(config: NodeConfig, composer: Composer) -> Widget | None:
    children = get_list(config, "children")
    if children is None:
        return None

    shrink_wrap = get_bool(config, "shrinkWrap")
    return ListView(
        children=tuple(composer.render_children(children)),
        shrink_wrap=bool(shrink_wrap),
    )


def build_divider(config: NodeConfig, composer: Composer) -> Widget | None:
    return Divider(
        height=parse_dimension(config.get("height")),
        thickness=parse_dimension(config.get("thickness")),
        color=parse_color(config.get("color")),
    )
