"""Shared pytest fixtures for SDUI tests."""

from pathlib import Path

import pytest

from sdui.runtime import Interpreter, MemoryStateStore

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def interpreter() -> Interpreter:
    """Return an interpreter with the default builders and ephemeral state."""
    return Interpreter()


@pytest.fixture
def memory_store() -> MemoryStateStore:
    return MemoryStateStore()


@pytest.fixture
def stateful_interpreter(memory_store: MemoryStateStore) -> Interpreter:
    """Return an interpreter whose widget state survives rebuilds."""
    return Interpreter(state=memory_store)


@pytest.fixture
def example_document_path() -> Path:
    """Return path to the bundled example UI document."""
    return EXAMPLES_DIR / "ui_config.json"
