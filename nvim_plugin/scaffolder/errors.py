"""Exceptions raised while scaffolding a plugin.

Every failure surfaces as a :class:`GenerationError` subclass whose message
names the path that failed, so the wizard can show it to the user as-is.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for all scaffolding failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class InvalidPluginNameError(GenerationError):
    """Raised when a plugin name cannot be used as a directory name."""


class DirectoryCreationError(GenerationError):
    """Raised when a directory of the plugin layout cannot be created."""


class TemplateReadError(GenerationError):
    """Raised when a bundled template is missing or unreadable."""


class TemplateRenderError(GenerationError):
    """Raised when a template references an unknown variable or is malformed."""


class FileWriteError(GenerationError):
    """Raised when rendered content cannot be written to disk."""
