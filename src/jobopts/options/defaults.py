# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Computation of default values for job options that were not specified.
"""

import os
import time
from collections.abc import Callable

from jobopts.core.common import expand_env_vars
from jobopts.core.config import CFG

from .identity import EnvUserIdentity, UserIdentity

# Template variable replaced by the name of the submitting user.
USER_PLACEHOLDER = "USER"

# Source of the disambiguating part of generated job names.
Clock = Callable[[], int]


def default_job_name(clock: Clock | None = None) -> str:
    """
    Generate a job name from the configured prefix and the current time.

    Args:
        clock (Clock | None): Function returning the current time in nanoseconds.
            Defaults to `time.time_ns`.

    Returns:
        str: The generated job name, e.g. `go-job-1700000000000000000`.
    """
    clock = clock or time.time_ns
    return f"{CFG.defaults.job_name_prefix}{clock()}"


def default_container_image(identity: UserIdentity | None = None) -> str:
    """
    Build the development container image for the current user.

    The configured template is expanded against the environment. The `$USER`
    placeholder always refers to the user provided by `identity`, whichever
    environment variable the identity reads. If the user is unknown, the
    corresponding part of the image reference is left empty.

    Args:
        identity (UserIdentity | None): Source of the user name.
            Defaults to reading the user from the environment.

    Returns:
        str: The container image reference.
    """
    identity = identity or EnvUserIdentity()
    env = dict(os.environ)
    env[USER_PLACEHOLDER] = identity.getUser()
    return expand_env_vars(CFG.defaults.container_image_template, env)
