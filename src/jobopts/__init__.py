# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Options for submitting jobs to a job service.

This package defines the options a client needs to launch a remote job (the
job service endpoint, the job name, the worker container image, experimental
runner features and a few flags) together with the rules used to fill in the
options the user did not specify. The `jobopts resolve` command exposes the
same logic on the command line.
"""

from .jobopts import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "options",
    "request",
    "resolve",
]
