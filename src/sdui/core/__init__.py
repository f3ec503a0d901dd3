"""
SDUI core: error types and host settings.
"""

from sdui.core.errors import (
    DocumentLoadError,
    ManifestError,
    NodeFieldError,
    RegistryError,
    SduiError,
)

__all__ = [
    "SduiError",
    "NodeFieldError",
    "RegistryError",
    "DocumentLoadError",
    "ManifestError",
]
