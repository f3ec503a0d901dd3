"""
Host shell: load a document, render it once, present the result.
"""

from sdui.shell.loader import RenderOutcome, load_document, render_document

__all__ = ["RenderOutcome", "load_document", "render_document"]
