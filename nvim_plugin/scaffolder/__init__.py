"""nvim-plugin scaffolder -- renders a Neovim plugin skeleton to disk.

This module takes a plugin name and description, derives the template
variables, and writes the four bundled templates into a fresh
``<name>/`` directory tree.

Quick usage::

    from nvim_plugin.scaffolder import generate_plugin

    root = generate_plugin("my-plugin", "A test plugin", output_dir="/tmp")
"""

from nvim_plugin.scaffolder.errors import (
    DirectoryCreationError,
    FileWriteError,
    GenerationError,
    InvalidPluginNameError,
    TemplateReadError,
    TemplateRenderError,
)
from nvim_plugin.scaffolder.generator import (
    GeneratedLayout,
    PluginGenerator,
    ScaffoldRequest,
    TemplateContext,
    generate_plugin,
)
from nvim_plugin.scaffolder.templates import TemplateId, TemplateRenderer

__all__ = [
    "DirectoryCreationError",
    "FileWriteError",
    "GeneratedLayout",
    "GenerationError",
    "InvalidPluginNameError",
    "PluginGenerator",
    "ScaffoldRequest",
    "TemplateContext",
    "TemplateId",
    "TemplateReadError",
    "TemplateRenderError",
    "TemplateRenderer",
    "generate_plugin",
]
