"""nvim-plugin -- an interactive generator for Neovim plugin skeletons.

The package is split in two:

* :mod:`nvim_plugin.wizard` -- the name/description/confirm state machine.
* :mod:`nvim_plugin.scaffolder` -- renders the templates to disk.
"""

__version__ = "0.1.0"
