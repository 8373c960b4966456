# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Sources of the identity of the user submitting a job.

The identity is used to build the default worker container image.
"""

import os
from typing import Protocol

from jobopts.core.config import CFG


class UserIdentity(Protocol):
    """Capability providing the name of the current user."""

    def getUser(self) -> str: ...


class EnvUserIdentity:
    """
    Read the user name from an environment variable.

    The variable is read on every call. If it is not set, an empty string is returned.
    """

    def __init__(self, var: str | None = None):
        self._var = var or CFG.env_vars.user

    def getUser(self) -> str:
        return os.environ.get(self._var, "")

    def __repr__(self) -> str:
        return f"EnvUserIdentity(var={self._var!r})"


class StaticUserIdentity:
    """Always return the same user name."""

    def __init__(self, user: str):
        self._user = user

    def getUser(self) -> str:
        return self._user

    def __repr__(self) -> str:
        return f"StaticUserIdentity(user={self._user!r})"
