# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jobopts.core.common import get_panel_width
from jobopts.core.config import CFG
from jobopts.request import JobRequest


class ResolvedPresenter:
    """
    Presentation layer for resolved job options.
    """

    def __init__(self, request: JobRequest):
        """
        Args:
            request (JobRequest): The request whose options should be displayed.
        """
        self._request = request

    def createPanel(self, console: Console | None = None) -> Group:
        """
        Create a panel listing the resolved options of the job.

        Args:
            console (Console | None): Optional Rich console.
                If not provided, a new Console is created.

        Returns:
            Group: A Rich Group containing the panel.
        """
        console = console or Console()
        settings = CFG.presenter.resolved_panel

        panel = Panel(
            self._createOptionsTable(),
            title=Text(
                f"JOB: {self._request.options.job_name}",
                style=settings.title_style,
                justify="center",
            ),
            border_style=settings.border_style,
            padding=(1, 2),
            width=get_panel_width(console, 2, settings.min_width, settings.max_width),
        )

        return Group(Text(""), panel, Text(""))

    def _createOptionsTable(self) -> Table:
        """
        Create a table with the resolved option values.

        Returns:
            Table: A Rich table with key-value pairs of job options.
        """
        options = self._request.options

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style=CFG.presenter.key_style)
        table.add_column(
            justify="left", overflow="fold", style=CFG.presenter.value_style
        )

        table.add_row("Endpoint:", Text(options.endpoint))

        table.add_row("Job name:", Text(options.job_name))
        if options.default_job_name:
            table.add_row("", Text("generated", style=CFG.presenter.notes_style))

        table.add_row("Container image:", Text(options.container_image))
        if options.default_container_image:
            table.add_row(
                "", Text("dev image of the current user", style=CFG.presenter.notes_style)
            )

        table.add_row(
            "Experiments:",
            Text(", ".join(options.experiments) or CFG.presenter.empty_value),
        )
        table.add_row("Async:", Text("yes" if options.async_ else "no"))

        if options.internal_java_runner:
            table.add_row("Java runner:", Text(options.internal_java_runner))

        return table
