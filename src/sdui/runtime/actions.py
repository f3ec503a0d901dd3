"""
Button actions.

A button's ``action`` object is dispatched by its ``type``:

    {"type": "log", "message": "hi"}
    {"type": "snackbar", "message": "Saved"}

Unknown action types are logged and ignored; pressing a button never
raises into the presentation layer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# Action models
# =============================================================================


class LogAction(BaseModel):
    """
    Log action - write the message to the log.

    Example:
        LogAction(message="Button pressed")
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["log"] = "log"
    message: str | None = Field(default=None, description="Message to log")


class SnackbarAction(BaseModel):
    """
    Snackbar action - ask the host to show a transient message.

    Example:
        SnackbarAction(message="Saved")
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["snackbar"] = "snackbar"
    message: str | None = Field(default=None, description="Message to show")


ActionHandler = Callable[[Any], None]


# =============================================================================
# Dispatcher
# =============================================================================


def _log_snackbar(message: str) -> None:
    logger.info(f"Snackbar: {message}")


class ActionDispatcher:
    """
    Validates and executes button actions.

    Hosts can show snackbars by passing ``on_snackbar`` and can add their
    own action kinds with ``register``.
    """

    def __init__(self, on_snackbar: Callable[[str], None] | None = None):
        self.on_snackbar = on_snackbar or _log_snackbar
        self._handlers: dict[str, tuple[type[BaseModel], ActionHandler]] = {}
        self.register("log", LogAction, self._handle_log)
        self.register("snackbar", SnackbarAction, self._handle_snackbar)

    def register(self, action_type: str, model: type[BaseModel], handler: ActionHandler) -> None:
        """Register (or replace) the model and handler for ``action_type``."""
        self._handlers[action_type] = (model, handler)

    def dispatch(self, action: Any) -> None:
        """Run an action object from a node config."""
        if not isinstance(action, Mapping):
            logger.info("Button pressed with no action")
            return

        action_type = action.get("type")
        entry = self._handlers.get(action_type) if isinstance(action_type, str) else None
        if entry is None:
            logger.warning(f"Unknown action type: {action_type}")
            return

        model, handler = entry
        try:
            parsed = model.model_validate(dict(action))
        except ValidationError as e:
            logger.warning(f"Invalid {action_type} action: {e.error_count()} error(s): {e}")
            return

        try:
            handler(parsed)
        except Exception as e:
            logger.warning(f"Action {action_type} failed: {str(e) or type(e).__name__}")
            logger.debug("Action handler traceback", exc_info=True)

    def _handle_log(self, action: LogAction) -> None:
        logger.info(f"Button pressed: {action.message or 'No message'}")

    def _handle_snackbar(self, action: SnackbarAction) -> None:
        self.on_snackbar(action.message or "Button pressed")
