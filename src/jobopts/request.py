# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Description of a job-submission request.

`JobRequest` receives the resolved options explicitly, so several requests
with different options can be built in one process.
"""

import yaml

from jobopts.options import ResolvedJobOptions


class JobRequest:
    """
    Submission request built from resolved job options.
    """

    def __init__(self, options: ResolvedJobOptions):
        """
        Args:
            options (ResolvedJobOptions): Options of the job to submit.
        """
        self._options = options

    @property
    def options(self) -> ResolvedJobOptions:
        return self._options

    def toDict(self) -> dict[str, object]:
        """
        Return the request as a dict.

        The legacy Java runner class is only included if it is specified.
        """
        data = self._options.toDict()
        if not data["internal_java_runner"]:
            del data["internal_java_runner"]
        return data

    def toYaml(self) -> str:
        """Return the request as a YAML document."""
        return yaml.safe_dump(self.toDict(), default_flow_style=False, sort_keys=False)
