# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Shared options for job submission.

`JobOptions` holds the raw values provided by the user and resolves missing
ones lazily: the first call to `getJobName` or `getContainerImage` computes a
default and stores it, so that all later calls return the same value.

The module-level `OPTIONS` instance is the record used by the whole process.
It is not synchronized. Resolve the defaults once, from a single thread,
before handing the options to concurrent consumers, or use
`ResolvedJobOptions` instead.
"""

import logging
from dataclasses import fields

from jobopts.core.common import split_comma_list
from jobopts.core.error import JobOptsError, MissingRequiredOptionError
from jobopts.core.logger import get_logger

from .defaults import Clock, default_container_image, default_job_name
from .identity import UserIdentity
from .raw import RawJobOptions, normalize_option_name

logger = get_logger(__name__)


class JobOptions:
    """
    Mutable job options with lazily computed defaults.
    """

    endpoint: str
    job_name: str
    container_image: str
    experiments: str
    async_: bool
    internal_java_runner: str

    def __init__(
        self,
        identity: UserIdentity | None = None,
        clock: Clock | None = None,
        **raw,
    ):
        """
        Args:
            identity (UserIdentity | None): Source of the user name used for
                the default container image. Defaults to the environment.
            clock (Clock | None): Source of the time used for generated job names.
                Defaults to `time.time_ns`.
            **raw: Initial raw option values (see `RawJobOptions`).
        """
        self._identity = identity
        self._clock = clock
        self.reset()
        self.update(**raw)

    def reset(self) -> None:
        """Set all options back to their unspecified values."""
        for f in fields(RawJobOptions):
            setattr(self, f.name, f.default)

    def update(self, **raw) -> None:
        """
        Assign raw option values.

        None values are ignored.

        Raises:
            JobOptsError: If an unknown option is provided.
        """
        known = {f.name for f in fields(RawJobOptions)}
        for key, value in raw.items():
            name = normalize_option_name(key)
            if name not in known:
                raise JobOptsError(f"Unknown job option '{key}'.")
            if value is not None:
                setattr(self, name, value)

    def toRaw(self) -> RawJobOptions:
        """Return a snapshot of the current raw values."""
        return RawJobOptions(
            **{f.name: getattr(self, f.name) for f in fields(RawJobOptions)}
        )

    def getEndpoint(self) -> str:
        """
        Return the job service endpoint.

        Raises:
            MissingRequiredOptionError: If no endpoint has been specified.
        """
        if not self.endpoint:
            raise MissingRequiredOptionError(
                "endpoint", "--endpoint=<endpoint>", "job service endpoint"
            )
        return self.endpoint

    def getJobName(self) -> str:
        """
        Return the specified job name or, if not present, a generated one.

        The generated name is stored and returned by all subsequent calls.
        """
        if not self.job_name:
            self.job_name = default_job_name(self._clock)
        return self.job_name

    def getContainerImage(self, log: logging.Logger | None = None) -> str:
        """
        Return the specified worker container image or, if not present,
        the development image of the current user.

        The default image is stored and returned by all subsequent calls.

        Args:
            log (logging.Logger | None): Logger used to report that the default
                image was chosen. Defaults to the logger of this module.
        """
        if not self.container_image:
            self.container_image = default_container_image(self._identity)
            (log or logger).info(
                f"No container image specified. Using dev image: '{self.container_image}'."
            )
        return self.container_image

    def getExperiments(self) -> list[str]:
        """
        Return the experiments to enable in the runner.

        The raw comma-separated value is split on every call and never stored.
        """
        return split_comma_list(self.experiments)

    def hasExperiment(self, name: str) -> bool:
        """Check whether the experiment `name` is enabled."""
        return name in self.getExperiments()

    def getAsync(self) -> bool:
        """Return True if the submission should not wait for job completion."""
        return self.async_

    def getInternalJavaRunner(self) -> str:
        """Return the Java runner class. Legacy."""
        return self.internal_java_runner

    def __repr__(self) -> str:
        values = ", ".join(
            f"{f.name}={getattr(self, f.name)!r}" for f in fields(RawJobOptions)
        )
        return f"JobOptions({values})"


# Job options shared by the whole process.
OPTIONS = JobOptions()
