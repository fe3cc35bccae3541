"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` (plugin name + description) and generates a
Neovim plugin skeleton::

    <output_dir>/<name>/
        lua/<name>/init.lua
        plugin/<name>.lua
        README.md
        doc/<name>.txt

Generation is fail-fast: the first directory or file that cannot be created
aborts the run.  Files written before the failure are left on disk; there is
no rollback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import (
    DirectoryCreationError,
    FileWriteError,
    InvalidPluginNameError,
    TemplateReadError,
    TemplateRenderError,
)
from .templates import TemplateId, TemplateRenderer

logger = logging.getLogger(__name__)

_DIR_MODE = 0o755

# Characters that would make ``<output_dir>/<name>`` escape its parent or
# fail on every platform.
_FORBIDDEN_NAME_CHARS = ("/", "\\", "\x00")


# ---------------------------------------------------------------------------
# Request and context models
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """The answers collected by the wizard, frozen at confirmation time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Plugin name (directory and module name)")
    description: str = Field(default="", description="One-line plugin description")


class TemplateContext(BaseModel):
    """Variables substituted into the plugin templates."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    date: str = Field(..., description="Generation date as YYYY-MM-DD")
    var_name: str = Field(..., description="Lua-safe identifier derived from name")
    capitalized_cmd: str = Field(..., description="User command name")
    header_title: str
    underline: str
    doc_header: str

    @classmethod
    def from_request(
        cls, request: ScaffoldRequest, today: date | None = None
    ) -> "TemplateContext":
        """Derive every template variable from *request*.

        Args:
            request: The confirmed plugin name and description.
            today: Date stamped into the templates. Defaults to the current
                local date.
        """
        today = today or datetime.now().date()
        header_title = header_title_of(request.name)
        return cls(
            name=request.name,
            description=request.description,
            date=today.strftime("%Y-%m-%d"),
            var_name=var_name_of(request.name),
            capitalized_cmd=capitalized_cmd_of(request.name),
            header_title=header_title,
            underline=underline_of(request.name),
            doc_header=header_title + ".TXT",
        )


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratedLayout:
    """Directories and files produced for one plugin name."""

    root: Path
    directories: tuple[Path, ...]
    files: tuple[tuple[TemplateId, Path], ...]

    @classmethod
    def for_name(cls, name: str, output_dir: str | Path = ".") -> "GeneratedLayout":
        root = Path(output_dir) / name
        return cls(
            root=root,
            directories=(
                root / "lua" / name,
                root / "plugin",
                root / "doc",
            ),
            files=(
                (TemplateId.INIT_LUA, root / "lua" / name / "init.lua"),
                (TemplateId.PLUGIN_LUA, root / "plugin" / f"{name}.lua"),
                (TemplateId.README, root / "README.md"),
                (TemplateId.HELP_DOC, root / "doc" / f"{name}.txt"),
            ),
        )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class PluginGenerator:
    """Renders the plugin templates for one ``ScaffoldRequest``."""

    def __init__(
        self,
        request: ScaffoldRequest,
        renderer: TemplateRenderer | None = None,
        today: date | None = None,
    ) -> None:
        self.request = request
        self.renderer = renderer or TemplateRenderer()
        self.today = today

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the plugin skeleton.

        Args:
            output_dir: Parent directory where the plugin folder will be
                created.  A subdirectory named after the plugin is created
                inside it.

        Returns:
            Path to the generated plugin root.

        Raises:
            GenerationError: The first failure encountered; see
                :mod:`nvim_plugin.scaffolder.errors` for the subclasses.
        """
        validate_plugin_name(self.request.name)

        layout = GeneratedLayout.for_name(self.request.name, output_dir)
        context = TemplateContext.from_request(self.request, self.today)

        # 1. Root first so its failure is reported on its own
        _make_dir(layout.root, "failed to create plugin directory")

        # 2. lua/<name>, plugin, doc
        for directory in layout.directories:
            _make_dir(directory, f"failed to create directory {directory}")

        # 3. Render and write every file
        values = context.model_dump()
        for template_id, output_path in layout.files:
            try:
                content = self.renderer.render(template_id, values)
            except (TemplateReadError, TemplateRenderError) as exc:
                raise type(exc)(
                    f"failed to render template for {output_path}: {exc}", output_path
                ) from exc
            _write_file(output_path, content)
            logger.debug("Wrote %s from %s", output_path, template_id.value)

        logger.info("Generated plugin %r at %s", self.request.name, layout.root)
        return layout.root


def generate_plugin(
    name: str,
    description: str,
    output_dir: str | Path = ".",
    *,
    today: date | None = None,
) -> Path:
    """Create a new Neovim plugin called *name* under *output_dir*.

    Convenience wrapper around :class:`PluginGenerator`.
    """
    request = ScaffoldRequest(name=name, description=description)
    return PluginGenerator(request, today=today).generate(output_dir)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def validate_plugin_name(name: str) -> None:
    """Reject names that cannot be used as a single directory component.

    Only path-hostile names are rejected; any other character is passed
    through to the file system and templates unchanged.

    Raises:
        InvalidPluginNameError: If *name* is empty, ``.`` or ``..``, or
            contains a path separator or NUL byte.
    """
    if not name:
        raise InvalidPluginNameError("invalid plugin name: name must not be empty")
    if name in (".", ".."):
        raise InvalidPluginNameError(f"invalid plugin name {name!r}: reserved path name")
    for char in _FORBIDDEN_NAME_CHARS:
        if char in name:
            raise InvalidPluginNameError(
                f"invalid plugin name {name!r}: must not contain {char!r}"
            )


def var_name_of(name: str) -> str:
    """Convert ``my-plugin`` to the Lua-safe ``my_plugin``."""
    return name.replace("-", "_")


def capitalized_cmd_of(name: str) -> str:
    """Upper-case the first character only: ``my-plugin`` -> ``My-plugin``."""
    if not name:
        return ""
    return name[0].upper() + name[1:]


def header_title_of(name: str) -> str:
    return name.upper()


def underline_of(name: str) -> str:
    """Return a run of ``=`` as long as the upper-cased header title."""
    return "=" * len(header_title_of(name))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_dir(path: Path, message: str) -> None:
    try:
        path.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create %s: %s", path, exc)
        raise DirectoryCreationError(f"{message}: {exc}", path) from exc
    logger.debug("Created directory %s", path)


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        raise FileWriteError(f"failed to write file {path}: {exc}", path) from exc
