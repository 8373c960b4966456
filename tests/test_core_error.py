# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from jobopts.core.config import CFG
from jobopts.core.error import JobOptsError, MissingRequiredOptionError


def test_missing_required_option_is_jobopts_error():
    error = MissingRequiredOptionError("endpoint", "--endpoint=<endpoint>")

    assert isinstance(error, JobOptsError)
    assert error.exit_code == CFG.exit_codes.default


def test_missing_required_option_message_names_option_and_flag():
    error = MissingRequiredOptionError(
        "endpoint", "--endpoint=<endpoint>", "job service endpoint"
    )

    assert error.option == "endpoint"
    assert error.flag == "--endpoint=<endpoint>"
    assert (
        str(error)
        == "No job service endpoint specified. Use --endpoint=<endpoint>."
    )


def test_missing_required_option_message_defaults_to_option_name():
    with pytest.raises(MissingRequiredOptionError, match="No job_name specified"):
        raise MissingRequiredOptionError("job_name", "--job_name=<name>")
