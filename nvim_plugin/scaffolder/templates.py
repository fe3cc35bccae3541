"""Jinja2 template rendering for plugin scaffolding.

Provides the TemplateRenderer class which loads the bundled Jinja2 templates
from the ``nvim_plugin/scaffolder/templates/`` directory and renders them
with a plugin's template context.  Rendering is strict: a placeholder that
is not bound in the context fails instead of rendering as an empty string.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from .errors import TemplateReadError, TemplateRenderError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateId(str, Enum):
    """The four bundled templates, valued by their path in the template dir."""

    INIT_LUA = "lua/plugin_name/init.lua.j2"
    PLUGIN_LUA = "plugin/plugin.lua.j2"
    README = "README.md.j2"
    HELP_DOC = "doc/plugin.txt.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for plugin scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context mapping that
    holds the derived plugin variables (name, var_name, date, ...).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    # -- Loading -----------------------------------------------------------

    def load(self, template_path: str | TemplateId) -> str:
        """Return the raw source of a template.

        Raises:
            TemplateReadError: If the template does not exist or cannot be
                read.
        """
        path = _template_key(template_path)
        try:
            source, _, _ = self.env.loader.get_source(self.env, path)
        except TemplateNotFound as exc:
            raise TemplateReadError(
                f"failed to read template file {path}: template not found",
                path,
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(
                f"failed to read template file {path}: {exc}", path
            ) from exc
        return source

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str | TemplateId, context: Mapping[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Template id, or a path relative to the template
                directory (e.g. ``"README.md.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered template content.

        Raises:
            TemplateReadError: If the template cannot be located or read.
            TemplateRenderError: If the template is malformed or references
                a variable missing from *context*.
        """
        path = _template_key(template_path)
        try:
            template = self.env.get_template(path)
        except TemplateNotFound as exc:
            raise TemplateReadError(
                f"failed to read template file {path}: template not found",
                path,
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(
                f"failed to parse template {path}: {exc.message} (line {exc.lineno})",
                path,
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(
                f"failed to read template file {path}: {exc}", path
            ) from exc

        try:
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(
                f"failed to execute template {path}: {exc}", path
            ) from exc

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        try:
            template = self.env.from_string(template_string)
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(f"failed to render inline template: {exc}") from exc

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths.

        Paths are relative to the template root directory and use forward
        slashes.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )


def _template_key(template_path: str | TemplateId) -> str:
    if isinstance(template_path, TemplateId):
        return template_path.value
    return template_path
