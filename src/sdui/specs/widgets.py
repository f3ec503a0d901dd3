"""
Widget types produced by node builders.

Widgets are the renderable objects of SDUI: an immutable tree handed to a
presentation layer. They own their children and carry no reference back
to the node config that produced them.

Callbacks and state cells are excluded from serialization and from
equality: two widgets are equal when they render the same content.

Example:
    Column(
        children=(
            Text(text="Hello"),
            Button(text="Go", on_pressed=lambda: None),
        )
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    computed_field,
    field_serializer,
)

from sdui.specs.state import StateCell
from sdui.specs.style import (
    ERROR_RED,
    PLACEHOLDER_GREY,
    UNSET,
    BorderRadius,
    BoxFit,
    Color,
    CrossAxisAlignment,
    EdgeInsets,
    MainAxisAlignment,
    Maybe,
    TextAlign,
    TextStyle,
)


def _noop(*_args: Any) -> None:
    return None


# =============================================================================
# Base
# =============================================================================


class Widget(BaseModel):
    """Base class for all renderable objects."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str = "widget"

    def child_widgets(self) -> tuple[Widget, ...]:
        """Composed child widgets, in layout order."""
        return ()

    def _content(self) -> tuple[Any, ...]:
        return tuple(
            getattr(self, name) for name, info in type(self).model_fields.items() if not info.exclude
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._content() == other._content()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._content()))

    @field_serializer("color", "border_color", when_used="json", check_fields=False)
    def _serialize_color(self, value: Maybe[Color]) -> str | None:
        return None if value is UNSET else str(value)


class SingleChildWidget(Widget):
    """Widget wrapping zero or one child."""

    child: SerializeAsAny[Widget] | None = None

    def child_widgets(self) -> tuple[Widget, ...]:
        return (self.child,) if self.child is not None else ()


def walk(widget: Widget) -> Iterator[Widget]:
    """Yield ``widget`` and all descendants, depth-first in layout order."""
    yield widget
    for child in widget.child_widgets():
        yield from walk(child)


# =============================================================================
# Basic widgets
# =============================================================================


class IconGlyph(StrEnum):
    """Icons known to the default icon builder."""

    STAR = "star"
    FAVORITE = "favorite"
    HOME = "home"
    PERSON = "person"
    SETTINGS = "settings"
    SEARCH = "search"
    ADD = "add"
    REMOVE = "remove"
    EDIT = "edit"
    DELETE = "delete"
    CHECK = "check"
    CLOSE = "close"
    MENU = "menu"
    ARROW_BACK = "arrow_back"
    ARROW_FORWARD = "arrow_forward"
    HELP_OUTLINE = "help_outline"
    ERROR = "error"


class Text(Widget):
    kind: Literal["text"] = "text"

    text: str = ""
    style: Maybe[TextStyle] = UNSET
    text_align: Maybe[TextAlign] = UNSET


@dataclass(frozen=True)
class TextSpan:
    """Styled run of text inside a RichText."""

    text: str
    style: Maybe[TextStyle] = UNSET


class RichText(Widget):
    kind: Literal["richText"] = "richText"

    spans: tuple[TextSpan, ...] = ()
    text_align: TextAlign = TextAlign.START

    @computed_field  # type: ignore[prop-decorator]
    @property
    def plain_text(self) -> str:
        return "".join(span.text for span in self.spans)


class Button(Widget):
    kind: Literal["button"] = "button"

    text: str = ""
    on_pressed: Callable[[], None] = Field(default=_noop, exclude=True, repr=False)


class Icon(Widget):
    kind: Literal["icon"] = "icon"

    glyph: IconGlyph = IconGlyph.HELP_OUTLINE
    size: Maybe[float] = UNSET
    color: Maybe[Color] = UNSET


@dataclass(frozen=True)
class ImageSource:
    """Where an image comes from: a network URL or a bundled asset path."""

    kind: str  # "url" | "asset"
    location: str

    def __str__(self) -> str:
        return f"{self.kind}:{self.location}"


# =============================================================================
# Layout widgets
# =============================================================================


class Container(SingleChildWidget):
    kind: Literal["container"] = "container"

    width: Maybe[float] = UNSET
    height: Maybe[float] = UNSET
    padding: Maybe[EdgeInsets] = UNSET
    margin: Maybe[EdgeInsets] = UNSET
    color: Maybe[Color] = UNSET
    border_radius: Maybe[BorderRadius] = UNSET


class Image(Widget):
    """
    Image from a URL or asset.

    ``error_placeholder`` is what the presentation layer shows when loading
    fails after the tree was built.
    """

    kind: Literal["image"] = "image"

    source: ImageSource = Field(default_factory=lambda: ImageSource("asset", ""))
    width: Maybe[float] = UNSET
    height: Maybe[float] = UNSET
    fit: Maybe[BoxFit] = UNSET
    error_placeholder: Container | None = None


class Flex(Widget):
    """Shared shape of Column and Row."""

    children: tuple[SerializeAsAny[Widget], ...] = ()
    main_axis_alignment: MainAxisAlignment = MainAxisAlignment.START
    cross_axis_alignment: CrossAxisAlignment = CrossAxisAlignment.CENTER

    def child_widgets(self) -> tuple[Widget, ...]:
        return self.children


class Column(Flex):
    kind: Literal["column"] = "column"


class Row(Flex):
    kind: Literal["row"] = "row"


class Center(SingleChildWidget):
    kind: Literal["center"] = "center"


class SizedBox(SingleChildWidget):
    kind: Literal["sizedBox"] = "sizedBox"

    width: Maybe[float] = UNSET
    height: Maybe[float] = UNSET


class Padding(SingleChildWidget):
    kind: Literal["padding"] = "padding"

    padding: EdgeInsets = Field(default_factory=EdgeInsets)


class Card(SingleChildWidget):
    kind: Literal["card"] = "card"

    elevation: float = 1.0
    margin: Maybe[EdgeInsets] = UNSET


# =============================================================================
# Interactive widgets
# =============================================================================


class TextField(Widget):
    kind: Literal["textField"] = "textField"

    label: str | None = None
    hint: str | None = None
    on_changed: Callable[[str], None] = Field(default=_noop, exclude=True, repr=False)


class Checkbox(Widget):
    """
    Checkbox whose value lives in a state cell owned by the host's store.

    ``value`` reads the cell; ``on_changed`` writes it.
    """

    kind: Literal["checkbox"] = "checkbox"

    label: str | None = None
    state: StateCell | None = Field(default=None, exclude=True, repr=False)
    on_changed: Callable[[bool], None] = Field(default=_noop, exclude=True, repr=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def value(self) -> bool:
        return bool(self.state.value) if self.state is not None else False


class Dropdown(Widget):
    kind: Literal["dropdown"] = "dropdown"

    options: tuple[str, ...] = ()
    label: str | None = None
    state: StateCell | None = Field(default=None, exclude=True, repr=False)
    on_changed: Callable[[str], None] = Field(default=_noop, exclude=True, repr=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def selected(self) -> str | None:
        if self.state is None:
            return self.options[0] if self.options else None
        return self.state.value


# =============================================================================
# Lists and decoration
# =============================================================================


class ListView(Widget):
    kind: Literal["listView"] = "listView"

    children: tuple[SerializeAsAny[Widget], ...] = ()
    shrink_wrap: bool = False

    def child_widgets(self) -> tuple[Widget, ...]:
        return self.children


class Divider(Widget):
    kind: Literal["divider"] = "divider"

    height: Maybe[float] = UNSET
    thickness: Maybe[float] = UNSET
    color: Maybe[Color] = UNSET


# =============================================================================
# Error node
# =============================================================================


class ErrorWidget(Widget):
    """
    Inline error marker substituted for a node that could not be built.

    Presented as a small red-bordered box with an error icon and the message.
    """

    kind: Literal["error"] = "error"

    message: str = ""
    padding: EdgeInsets = Field(default_factory=lambda: EdgeInsets.all(8.0))
    border_color: Color = ERROR_RED
    border_radius: BorderRadius = Field(default_factory=lambda: BorderRadius(4.0))
    icon_size: float = 16.0
    font_size: float = 12.0


def image_placeholder(width: Maybe[float], height: Maybe[float]) -> Container:
    """Fixed-size grey box with an error icon, shown when an image fails."""
    return Container(
        width=width if width is not UNSET else 100.0,
        height=height if height is not UNSET else 100.0,
        color=PLACEHOLDER_GREY,
        child=Icon(glyph=IconGlyph.ERROR, color=ERROR_RED),
    )
