"""
Builders for basic widgets: text, richText, button, image, icon.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sdui.runtime.fields import NodeConfig, get_list, get_str
from sdui.runtime.registry import Composer
from sdui.runtime.style_resolver import (
    parse_box_fit,
    parse_color,
    parse_dimension,
    parse_text_align,
    parse_text_style,
)
from sdui.specs.style import TextAlign, or_default
from sdui.specs.widgets import (
    Button,
    Icon,
    IconGlyph,
    Image,
    ImageSource,
    RichText,
    Text,
    TextSpan,
    Widget,
    image_placeholder,
)

logger = logging.getLogger(__name__)

_ICON_GLYPHS: dict[str, IconGlyph] = {
    glyph.value: glyph
    for glyph in IconGlyph
    if glyph not in (IconGlyph.HELP_OUTLINE, IconGlyph.ERROR)
}


def build_text(config: NodeConfig, composer: Composer) -> Widget | None:
    text = get_str(config, "text")
    if text is None:
        return None

    return Text(
        text=text,
        style=parse_text_style(config.get("style")),
        text_align=parse_text_align(config.get("textAlign")),
    )


def build_rich_text(config: NodeConfig, composer: Composer) -> Widget | None:
    """Concatenate styled spans; spans without text are skipped."""
    spans = get_list(config, "spans")
    if not spans:
        return None

    text_spans: list[TextSpan] = []
    for span in spans:
        if not isinstance(span, Mapping):
            continue
        text = span.get("text")
        if not isinstance(text, str):
            continue
        text_spans.append(TextSpan(text=text, style=parse_text_style(span.get("style"))))

    return RichText(
        spans=tuple(text_spans),
        text_align=or_default(parse_text_align(config.get("textAlign")), TextAlign.START),
    )


def build_button(config: NodeConfig, composer: Composer) -> Widget | None:
    text = get_str(config, "text")
    if text is None:
        return None

    action = config.get("action")
    dispatcher = composer.actions

    def on_pressed() -> None:
        dispatcher.dispatch(action)

    return Button(text=text, on_pressed=on_pressed)


def build_image(config: NodeConfig, composer: Composer) -> Widget | None:
    """
    Image from ``url`` (preferred) or ``asset``.

    When the interpreter has an image loader and it rejects the source,
    the placeholder is returned in place of the image.
    """
    url = get_str(config, "url")
    asset = get_str(config, "asset")
    if url is not None:
        source = ImageSource("url", url)
    elif asset is not None:
        source = ImageSource("asset", asset)
    else:
        return None

    width = parse_dimension(config.get("width"))
    height = parse_dimension(config.get("height"))
    placeholder = image_placeholder(width, height)

    if composer.images is not None and not composer.images.can_load(source):
        return placeholder

    return Image(
        source=source,
        width=width,
        height=height,
        fit=parse_box_fit(config.get("fit")),
        error_placeholder=placeholder,
    )


def build_icon(config: NodeConfig, composer: Composer) -> Widget | None:
    name = get_str(config, "icon")
    if name is None:
        return None

    glyph = _ICON_GLYPHS.get(name.lower())
    if glyph is None:
        logger.info(f"Unmapped icon name: {name}, using help_outline")
        glyph = IconGlyph.HELP_OUTLINE

    return Icon(
        glyph=glyph,
        size=parse_dimension(config.get("size")),
        color=parse_color(config.get("color")),
    )
