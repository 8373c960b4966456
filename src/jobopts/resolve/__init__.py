# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The `jobopts resolve` command.

`resolve` binds the command-line flags to raw job options, resolves them with
`ResolvedJobOptions.load` and prints the resulting request using
`ResolvedPresenter` or as YAML.
"""

from .cli import resolve
from .presenter import ResolvedPresenter

__all__ = ["resolve", "ResolvedPresenter"]
