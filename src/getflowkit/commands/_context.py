"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes report emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from getflowkit.output.formatters import format_report
from getflowkit.output.report import Report

if TYPE_CHECKING:
    from getflowkit.config.settings import GetFlowKitSettings
    from getflowkit.core.errors import SupportsDomainError
    from getflowkit.core.result import Result

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: GetFlowKitSettings) -> None:
        self.settings = settings

        from getflowkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        logger.debug("Loaded settings from %s", settings.config_path or "defaults")

    def emit(
        self,
        op: str,
        result: Result[Any, SupportsDomainError],
        *,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Format and output *result* with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        report = Report.from_result(op, result, data=data)
        output = format_report(report, json_output=self.settings.json_output)
        if report.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
