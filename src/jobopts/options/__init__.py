# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Options needed to submit a job.

`RawJobOptions` stores the values exactly as the user provided them.

`JobOptions` is the mutable, process-wide holder of these values. Its accessors
resolve omitted options lazily and store the computed defaults, so that a job
name or a container image never changes once it has been read. The global
instance is available as `OPTIONS`.

`ResolvedJobOptions` is the immutable alternative: `ResolvedJobOptions.load`
validates the options and computes all defaults at once.

The default container image depends on the user submitting the job, which is
provided by a `UserIdentity` (by default read from the environment).
"""

from .identity import EnvUserIdentity, StaticUserIdentity, UserIdentity
from .job_options import OPTIONS, JobOptions
from .raw import RawJobOptions
from .resolved import ResolvedJobOptions

__all__ = [
    "OPTIONS",
    "EnvUserIdentity",
    "JobOptions",
    "RawJobOptions",
    "ResolvedJobOptions",
    "StaticUserIdentity",
    "UserIdentity",
]
