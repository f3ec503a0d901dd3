"""CLI host shell for SDUI documents.

``sdui render DOCUMENT``  Render a JSON UI document and print its widget tree.
``sdui types``            List the registered node types.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from sdui import __version__
from sdui.core.errors import DocumentLoadError, ManifestError
from sdui.core.manifest import SduiManifest, StateMode, load_manifest
from sdui.runtime import AssetImageLoader, EphemeralStateStore, Interpreter, MemoryStateStore

app = typer.Typer(help="Server-driven UI interpreter", no_args_is_help=True)

# Exit codes
EXIT_LOAD_ERROR = 1
EXIT_INLINE_ERRORS = 2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_interpreter(manifest: SduiManifest) -> Interpreter:
    """Create an interpreter wired with the collaborators the settings ask for."""
    state = MemoryStateStore() if manifest.render.state == StateMode.MEMORY else EphemeralStateStore()
    images = None
    if manifest.render.assets_dir is not None:
        images = AssetImageLoader(manifest.render.assets_dir)
    return Interpreter(state=state, images=images)


def _load_settings(config: Path | None) -> SduiManifest:
    from sdui.shell.console import print_load_error

    try:
        manifest = load_manifest(config)
    except ManifestError as e:
        print_load_error(str(e))
        raise typer.Exit(code=EXIT_LOAD_ERROR)
    configure_logging(manifest.log_level())
    return manifest


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sdui {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Render UI documents described as trees of typed JSON nodes."""


@app.command(name="render")
def render_command(
    document: Path = typer.Argument(..., help="Path to the JSON UI document"),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to sdui.toml (default: ./sdui.toml if present)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the widget tree as JSON"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 2 if the tree contains inline error nodes",
    ),
) -> None:
    """Render a UI document and print the resulting widget tree."""
    from sdui.shell import load_document, render_document
    from sdui.shell.console import print_fallback, print_load_error, print_widget_tree, widget_to_dict

    manifest = _load_settings(config)

    try:
        data = load_document(document)
    except DocumentLoadError as e:
        print_load_error(str(e))
        raise typer.Exit(code=EXIT_LOAD_ERROR)

    outcome = render_document(data, build_interpreter(manifest))

    if outcome.widget is None:
        if as_json:
            typer.echo(json.dumps({"widget": None, "errors": []}))
        else:
            print_fallback()
        raise typer.Exit(code=0)

    if as_json:
        payload = {"widget": widget_to_dict(outcome.widget), "errors": outcome.errors}
        typer.echo(json.dumps(payload, indent=2))
    else:
        print_widget_tree(outcome.widget, title=str(document))
        if outcome.errors:
            typer.echo(f"\n{len(outcome.errors)} inline error node(s)")

    if strict and outcome.errors:
        raise typer.Exit(code=EXIT_INLINE_ERRORS)


@app.command(name="types")
def types_command() -> None:
    """List the node types the interpreter can render."""
    interpreter = Interpreter()
    for node_type in interpreter.registry.types():
        typer.echo(node_type)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
