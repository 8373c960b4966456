# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import dataclasses
from unittest.mock import MagicMock, patch

import pytest

from jobopts.core.error import MissingRequiredOptionError
from jobopts.options.identity import StaticUserIdentity
from jobopts.options.job_options import JobOptions
from jobopts.options.raw import RawJobOptions
from jobopts.options.resolved import ResolvedJobOptions

IDENTITY = StaticUserIdentity("alice")


def _load(raw: RawJobOptions, log=None) -> ResolvedJobOptions:
    return ResolvedJobOptions.load(
        raw, identity=IDENTITY, clock=lambda: 7, log=log or MagicMock()
    )


def test_load_missing_endpoint_raises():
    with pytest.raises(MissingRequiredOptionError, match="--endpoint=<endpoint>"):
        _load(RawJobOptions())


def test_load_explicit_values_win():
    log = MagicMock()
    resolved = _load(
        RawJobOptions(
            endpoint="localhost:8099",
            job_name="my-job",
            container_image="gcr.io/project/worker:1.0",
            experiments="a,b",
            async_=True,
            internal_java_runner="org.example.Runner",
        ),
        log,
    )

    assert resolved == ResolvedJobOptions(
        endpoint="localhost:8099",
        job_name="my-job",
        container_image="gcr.io/project/worker:1.0",
        experiments=("a", "b"),
        async_=True,
        internal_java_runner="org.example.Runner",
        default_job_name=False,
        default_container_image=False,
    )
    log.info.assert_not_called()


def test_load_computes_defaults():
    log = MagicMock()
    resolved = _load(RawJobOptions(endpoint="localhost:8099"), log)

    assert resolved.job_name == "go-job-7"
    assert resolved.container_image == "alice-docker-apache.bintray.io/beam/go:latest"
    assert resolved.experiments == ()
    assert resolved.async_ is False
    assert resolved.default_job_name
    assert resolved.default_container_image
    log.info.assert_called_once()
    assert resolved.container_image in log.info.call_args.args[0]


def test_load_is_deterministic():
    raw = RawJobOptions(endpoint="localhost:8099")
    assert _load(raw) == _load(raw)


def test_load_does_not_modify_raw():
    raw = RawJobOptions(endpoint="localhost:8099")
    _load(raw)
    assert raw == RawJobOptions(endpoint="localhost:8099")


def test_load_uses_module_logger_by_default():
    with patch("jobopts.options.resolved.logger") as mock_logger:
        ResolvedJobOptions.load(
            RawJobOptions(endpoint="localhost:8099"), identity=IDENTITY
        )

    mock_logger.info.assert_called_once()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", ()),
        ("a,b,c", ("a", "b", "c")),
        ("a,,b", ("a", "", "b")),
        ("a,", ("a", "")),
    ],
)
def test_load_experiments(raw, expected):
    resolved = _load(RawJobOptions(endpoint="localhost:8099", experiments=raw))
    assert resolved.experiments == expected


def test_resolved_options_are_frozen():
    resolved = _load(RawJobOptions(endpoint="localhost:8099"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        resolved.job_name = "other"  # type: ignore[misc]


def test_has_experiment():
    resolved = _load(RawJobOptions(endpoint="localhost:8099", experiments="x,y"))

    assert resolved.hasExperiment("x")
    assert not resolved.hasExperiment("z")


def test_to_dict():
    resolved = _load(
        RawJobOptions(endpoint="localhost:8099", job_name="job", experiments="a")
    )

    assert resolved.toDict() == {
        "endpoint": "localhost:8099",
        "job_name": "job",
        "container_image": "alice-docker-apache.bintray.io/beam/go:latest",
        "experiments": ["a"],
        "async": False,
        "internal_java_runner": "",
    }


def test_from_job_options_shares_defaults():
    options = JobOptions(identity=IDENTITY, clock=lambda: 11, endpoint="host:1")
    log = MagicMock()

    resolved = ResolvedJobOptions.fromJobOptions(options, log)

    assert resolved.job_name == options.job_name == "go-job-11"
    assert resolved.container_image == options.container_image
    assert resolved.default_job_name
    assert resolved.default_container_image
    log.info.assert_called_once()


def test_from_job_options_explicit_values():
    options = JobOptions(
        endpoint="host:1",
        job_name="named",
        container_image="image:1",
        experiments="a,",
    )

    resolved = ResolvedJobOptions.fromJobOptions(options, MagicMock())

    assert resolved.job_name == "named"
    assert resolved.container_image == "image:1"
    assert resolved.experiments == ("a", "")
    assert not resolved.default_job_name
    assert not resolved.default_container_image


def test_from_job_options_missing_endpoint_does_not_resolve_defaults():
    options = JobOptions()

    with pytest.raises(MissingRequiredOptionError):
        ResolvedJobOptions.fromJobOptions(options, MagicMock())

    assert options.job_name == ""
    assert options.container_image == ""
