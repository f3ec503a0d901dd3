"""
Builders for layout widgets: column, row, container, center, sizedBox, card.

Multi-child containers return None when ``children`` is missing; an empty
list is a valid, empty container. Single-child wrappers always render,
with or without a child.
"""

from __future__ import annotations

from sdui.runtime.fields import NodeConfig, get_list, get_number
from sdui.runtime.registry import Composer
from sdui.runtime.style_resolver import (
    parse_border_radius,
    parse_color,
    parse_cross_axis_alignment,
    parse_dimension,
    parse_edge_insets,
    parse_main_axis_alignment,
)
from sdui.specs.style import CrossAxisAlignment, EdgeInsets, MainAxisAlignment, or_default
from sdui.specs.widgets import Card, Center, Column, Container, Flex, Padding, Row, SizedBox, Widget

# Card defaults
DEFAULT_CARD_ELEVATION = 1.0
DEFAULT_CARD_PADDING = EdgeInsets.all(8.0)


def _build_flex(config: NodeConfig, composer: Composer, flex_cls: type[Flex]) -> Widget | None:
    children = get_list(config, "children")
    if children is None:
        return None

    return flex_cls(
        children=tuple(composer.render_children(children)),
        main_axis_alignment=or_default(
            parse_main_axis_alignment(config.get("mainAxisAlignment")),
            MainAxisAlignment.START,
        ),
        cross_axis_alignment=or_default(
            parse_cross_axis_alignment(config.get("crossAxisAlignment")),
            CrossAxisAlignment.CENTER,
        ),
    )


def build_column(config: NodeConfig, composer: Composer) -> Widget | None:
    return _build_flex(config, composer, Column)


def build_row(config: NodeConfig, composer: Composer) -> Widget | None:
    return _build_flex(config, composer, Row)


def build_container(config: NodeConfig, composer: Composer) -> Widget | None:
    return Container(
        child=composer.render_child(config),
        width=parse_dimension(config.get("width")),
        height=parse_dimension(config.get("height")),
        padding=parse_edge_insets(config.get("padding")),
        margin=parse_edge_insets(config.get("margin")),
        color=parse_color(config.get("color")),
        border_radius=parse_border_radius(config.get("borderRadius")),
    )


def build_center(config: NodeConfig, composer: Composer) -> Widget | None:
    return Center(child=composer.render_child(config))


def build_sized_box(config: NodeConfig, composer: Composer) -> Widget | None:
    return SizedBox(
        child=composer.render_child(config),
        width=parse_dimension(config.get("width")),
        height=parse_dimension(config.get("height")),
    )


def build_card(config: NodeConfig, composer: Composer) -> Widget | None:
    elevation = get_number(config, "elevation")
    padding = or_default(parse_edge_insets(config.get("padding")), DEFAULT_CARD_PADDING)

    return Card(
        elevation=elevation if elevation is not None else DEFAULT_CARD_ELEVATION,
        margin=parse_edge_insets(config.get("margin")),
        child=Padding(padding=padding, child=composer.render_child(config)),
    )
