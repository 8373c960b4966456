# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup
from rich.console import Console

from jobopts.core.config import CFG
from jobopts.core.error import JobOptsError
from jobopts.core.logger import get_logger
from jobopts.options import RawJobOptions, ResolvedJobOptions
from jobopts.request import JobRequest
from jobopts.resolve.presenter import ResolvedPresenter

logger = get_logger(__name__)


@click.command(
    short_help="Resolve the options of a job submission.",
    help=f"""
Resolve the options needed to submit a job to a job service and print them.

Options that are not specified are filled in with their defaults:
the job name is generated from the current time and the container image
is the development image of the current user (taken from '{CFG.env_vars.user}').
""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@optgroup.group(f"{click.style('Job options', fg='yellow')}")
@optgroup.option(
    "--endpoint",
    type=str,
    default=None,
    help="Job service endpoint. Required.",
)
@optgroup.option(
    "--job_name",
    "--job-name",
    "job_name",
    type=str,
    default=None,
    help=f"Job name. Defaults to '{CFG.defaults.job_name_prefix}<time in ns>'.",
)
@optgroup.option(
    "--container_image",
    "--container-image",
    "container_image",
    type=str,
    default=None,
    help="Location of the worker container image. Defaults to the development image of the current user.",
)
@optgroup.option(
    "--experiments",
    type=str,
    default=None,
    help="Comma-separated list of experiments to enable in the runner.",
)
@optgroup.option(
    "--async",
    "async_",
    is_flag=True,
    default=False,
    help="Do not wait for job completion.",
)
@optgroup.option(
    "--internal_java_runner",
    "--internal-java-runner",
    "internal_java_runner",
    type=str,
    default=None,
    help="Internal Java runner class. Legacy.",
)
@optgroup.group(f"{click.style('Output', fg='yellow')}")
@optgroup.option(
    "--format",
    "output_format",
    type=click.Choice(["panel", "yaml"], case_sensitive=False),
    default="panel",
    show_default=True,
    help="Format in which to print the resolved options.",
)
def resolve(output_format: str, **kwargs) -> NoReturn:
    """
    Resolve the job options specified on the command line and print them.
    """
    try:
        options = ResolvedJobOptions.load(RawJobOptions.fromDict(kwargs), log=logger)
        request = JobRequest(options)

        if output_format.lower() == "yaml":
            click.echo(request.toYaml(), nl=False)
        else:
            console = Console()
            console.print(ResolvedPresenter(request).createPanel(console))
        sys.exit(0)
    except JobOptsError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
