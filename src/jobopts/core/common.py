# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Helper functions shared across jobopts.
"""

import os
import re
from collections.abc import Mapping

from rich.console import Console

# matches `$VAR` and `${VAR}`
_ENV_VAR_PATTERN = re.compile(r"\$(?:\{(?P<braced>[^}]*)\}|(?P<plain>\w+))")


def split_comma_list(string: str | None) -> list[str]:
    """
    Split a comma-separated string into a list of tokens.

    The split is literal: tokens are not stripped, empty tokens produced by
    adjacent, leading or trailing commas are kept, and duplicates are preserved.

    Args:
        string (str | None): The comma-separated string. If None or empty,
            an empty list is returned.

    Returns:
        list[str]: Tokens in the order in which they appear in the string.
    """
    if not string:
        return []

    return string.split(",")


def expand_env_vars(template: str, env: Mapping[str, str] | None = None) -> str:
    """
    Replace `$VAR` and `${VAR}` occurrences in `template` with their values.

    Unlike `os.path.expandvars`, variables that are not defined expand to an empty string.

    Args:
        template (str): The string to expand.
        env (Mapping[str, str] | None): Variables to use. Defaults to `os.environ`.

    Returns:
        str: The expanded string.
    """
    env = os.environ if env is None else env
    return _ENV_VAR_PATTERN.sub(
        lambda m: env.get(m.group("braced") or m.group("plain"), ""), template
    )


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
) -> int:
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int | None): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int | None): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width.
    """
    width = console.size.width // factor
    if min_width is not None:
        width = max(width, min_width)
    if max_width is not None:
        width = min(width, max_width)

    return width
