"""
SDUI widget, style and state types.

- style: resolved style primitives and the UNSET marker
- widgets: renderable widget tree produced by builders
- state: state cells for interactive widgets
"""

from sdui.specs.state import StateCell
from sdui.specs.style import (
    NAMED_COLORS,
    UNSET,
    BorderRadius,
    BoxFit,
    Color,
    CrossAxisAlignment,
    EdgeInsets,
    FontStyle,
    FontWeight,
    MainAxisAlignment,
    Maybe,
    TextAlign,
    TextStyle,
    Unset,
    is_set,
    or_default,
)
from sdui.specs.widgets import (
    Button,
    Card,
    Center,
    Checkbox,
    Column,
    Container,
    Divider,
    Dropdown,
    ErrorWidget,
    Flex,
    Icon,
    IconGlyph,
    Image,
    ImageSource,
    ListView,
    Padding,
    RichText,
    Row,
    SingleChildWidget,
    SizedBox,
    Text,
    TextField,
    TextSpan,
    Widget,
    image_placeholder,
    walk,
)

__all__ = [
    # Style
    "UNSET",
    "Unset",
    "Maybe",
    "is_set",
    "or_default",
    "NAMED_COLORS",
    "Color",
    "TextAlign",
    "MainAxisAlignment",
    "CrossAxisAlignment",
    "EdgeInsets",
    "BorderRadius",
    "BoxFit",
    "FontWeight",
    "FontStyle",
    "TextStyle",
    # State
    "StateCell",
    # Widgets
    "Widget",
    "SingleChildWidget",
    "walk",
    "ErrorWidget",
    "Text",
    "TextSpan",
    "RichText",
    "Button",
    "Image",
    "ImageSource",
    "image_placeholder",
    "Icon",
    "IconGlyph",
    "Flex",
    "Column",
    "Row",
    "Container",
    "Center",
    "SizedBox",
    "Padding",
    "Card",
    "TextField",
    "Checkbox",
    "Dropdown",
    "ListView",
    "Divider",
]
