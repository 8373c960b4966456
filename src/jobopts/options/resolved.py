# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Fully resolved, immutable job options.

`ResolvedJobOptions.load` computes every default exactly once and validates
required options, so the result can be shared freely between threads and
passed explicitly to the code building the submission request.
"""

import logging
from dataclasses import dataclass
from typing import Self

from jobopts.core.common import split_comma_list
from jobopts.core.error import MissingRequiredOptionError
from jobopts.core.logger import get_logger

from .defaults import Clock, default_container_image, default_job_name
from .identity import UserIdentity
from .job_options import JobOptions
from .raw import RawJobOptions

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedJobOptions:
    """
    Job options with all defaults applied.
    """

    # Address of the job service.
    endpoint: str
    # Name of the job.
    job_name: str
    # Location of the worker container image.
    container_image: str
    # Experiments to enable in the runner.
    experiments: tuple[str, ...] = ()
    # Do not wait for job completion.
    async_: bool = False
    # Java class needed by Java runners. Legacy.
    internal_java_runner: str = ""
    # Whether the job name was generated.
    default_job_name: bool = False
    # Whether the container image was synthesized for the current user.
    default_container_image: bool = False

    @classmethod
    def load(
        cls,
        raw: RawJobOptions,
        identity: UserIdentity | None = None,
        clock: Clock | None = None,
        log: logging.Logger | None = None,
    ) -> Self:
        """
        Resolve raw job options.

        Args:
            raw (RawJobOptions): Options as provided by the user.
            identity (UserIdentity | None): Source of the user name used for
                the default container image. Defaults to the environment.
            clock (Clock | None): Source of the time used for generated job names.
                Defaults to `time.time_ns`.
            log (logging.Logger | None): Logger used to report that the default
                container image was chosen. Defaults to the logger of this module.

        Returns:
            ResolvedJobOptions: The resolved options.

        Raises:
            MissingRequiredOptionError: If no endpoint is specified.
        """
        if not raw.endpoint:
            raise MissingRequiredOptionError(
                "endpoint", "--endpoint=<endpoint>", "job service endpoint"
            )

        job_name = raw.job_name or default_job_name(clock)

        container_image = raw.container_image
        if not container_image:
            container_image = default_container_image(identity)
            (log or logger).info(
                f"No container image specified. Using dev image: '{container_image}'."
            )

        return cls(
            endpoint=raw.endpoint,
            job_name=job_name,
            container_image=container_image,
            experiments=tuple(split_comma_list(raw.experiments)),
            async_=raw.async_,
            internal_java_runner=raw.internal_java_runner,
            default_job_name=not raw.job_name,
            default_container_image=not raw.container_image,
        )

    @classmethod
    def fromJobOptions(
        cls, options: JobOptions, log: logging.Logger | None = None
    ) -> Self:
        """
        Resolve the current state of mutable job options.

        The defaults are resolved through the accessors of `options`, so they are
        also stored in `options` and both objects report the same values.

        Raises:
            MissingRequiredOptionError: If no endpoint is specified.
        """
        endpoint = options.getEndpoint()
        had_job_name = bool(options.job_name)
        had_container_image = bool(options.container_image)

        return cls(
            endpoint=endpoint,
            job_name=options.getJobName(),
            container_image=options.getContainerImage(log),
            experiments=tuple(options.getExperiments()),
            async_=options.getAsync(),
            internal_java_runner=options.getInternalJavaRunner(),
            default_job_name=not had_job_name,
            default_container_image=not had_container_image,
        )

    def hasExperiment(self, name: str) -> bool:
        """Check whether the experiment `name` is enabled."""
        return name in self.experiments

    def toDict(self) -> dict[str, object]:
        """
        Return the resolved option values as a dict.

        Keys use the option names (`async` instead of `async_`).
        """
        return {
            "endpoint": self.endpoint,
            "job_name": self.job_name,
            "container_image": self.container_image,
            "experiments": list(self.experiments),
            "async": self.async_,
            "internal_java_runner": self.internal_java_runner,
        }
