"""
Document loading and one-shot rendering for host applications.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sdui.core.errors import DocumentLoadError, json_type_name
from sdui.runtime.interpreter import Interpreter
from sdui.specs.widgets import ErrorWidget, Widget, walk

logger = logging.getLogger(__name__)


@dataclass
class RenderOutcome:
    """Result of rendering a document once."""

    widget: Widget | None
    errors: list[str] = field(default_factory=list)

    @property
    def fallback(self) -> bool:
        """True when the host must show its own fallback view."""
        return self.widget is None

    @property
    def ok(self) -> bool:
        return self.widget is not None and not self.errors


def load_document(path: Path) -> dict[str, Any]:
    """
    Load a UI document from a JSON file.

    Raises:
        DocumentLoadError: If the file is missing, is not valid JSON, or
            its root value is not an object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"cannot read document: {e.strerror or e}", path) from e
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"document is not valid UTF-8: {e.reason}", path) from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", path) from e

    if not isinstance(document, dict):
        raise DocumentLoadError(
            f"document root must be an object, got {json_type_name(document)}", path
        )

    logger.debug(f"Loaded UI document from {path}")
    return document


def render_document(document: Any, interpreter: Interpreter | None = None) -> RenderOutcome:
    """Render a decoded document and collect inline error messages."""
    interpreter = interpreter or Interpreter()
    widget = interpreter.render_node(document)
    if widget is None:
        logger.info("Document rendered no widget, host fallback required")
        return RenderOutcome(widget=None)

    errors = [node.message for node in walk(widget) if isinstance(node, ErrorWidget)]
    if errors:
        logger.warning(f"Document rendered with {len(errors)} inline error(s)")
    return RenderOutcome(widget=widget, errors=errors)
