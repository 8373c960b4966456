# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout jobopts.

Every recoverable error derives from `JobOptsError` and carries the exit code
used by jobopts commands to report the failure.
"""

from jobopts.core.config import CFG


class JobOptsError(Exception):
    """Common exception type for all recoverable jobopts errors."""

    exit_code = CFG.exit_codes.default


class MissingRequiredOptionError(JobOptsError):
    """
    Raised when an option without a default value has not been specified.

    The message tells the user which option is missing and how to provide it.
    """

    def __init__(self, option: str, flag: str, description: str | None = None):
        """
        Args:
            option (str): Name of the missing option.
            flag (str): Syntax used to provide the option, e.g. `--endpoint=<endpoint>`.
            description (str | None): Human-readable description of the option.
                Defaults to the option name.
        """
        self.option = option
        self.flag = flag
        super().__init__(f"No {description or option} specified. Use {flag}.")
