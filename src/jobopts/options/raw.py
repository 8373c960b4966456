# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Self

from jobopts.core.error import JobOptsError


@dataclass
class RawJobOptions:
    """
    Job options exactly as provided by the user.

    Empty strings mean that the option was not specified.
    """

    # Address of the job service.
    endpoint: str = ""
    # Name of the job.
    job_name: str = ""
    # Location of the worker container image.
    container_image: str = ""
    # Comma-separated list of experiments to enable in the runner.
    experiments: str = ""
    # Do not wait for job completion.
    async_: bool = False
    # Java class needed by Java runners. Legacy.
    internal_java_runner: str = ""

    @classmethod
    def fromDict(cls, data: Mapping[str, object]) -> Self:
        """
        Construct raw options from a mapping of option names to values.

        Keys may use the flag spelling (`async`, `job-name`). Values that are
        None are treated as unspecified.

        Raises:
            JobOptsError: If the mapping contains an unknown option.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = normalize_option_name(key)
            if name not in known:
                raise JobOptsError(f"Unknown job option '{key}'.")
            if value is not None:
                values[name] = value

        return cls(**values)

    def toDict(self) -> dict[str, object]:
        """Return all fields as a dict."""
        return asdict(self)


def normalize_option_name(name: str) -> str:
    """
    Convert an option name as written on the command line to the attribute name.

    Examples:
        `--job-name` -> `job_name`, `async` -> `async_`.
    """
    name = name.lstrip("-").replace("-", "_")
    return "async_" if name == "async" else name
