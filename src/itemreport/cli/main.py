"""
Main CLI entry point for itemreport.

Provides commands for rendering a report from an items file, previewing
which items a user can see, and listing the available formats.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

import click

from itemreport import __version__
from itemreport.api import load_items
from itemreport.cli.output import (
    print_error,
    print_info,
    print_items_table,
    print_success,
    print_warning,
)
from itemreport.core.aggregator import calculate_total
from itemreport.core.exceptions import ItemReportError
from itemreport.core.models import ReportFormat, Role, User
from itemreport.logging import LOG_LEVELS, configure_logging, get_logger
from itemreport.reports.generator import ReportGenerator

logger = get_logger(__name__)

user_option = click.option(
    "--user", "-u", "user_name",
    required=True,
    help="Display name of the user the report is for.",
)
role_option = click.option(
    "--role", "-r",
    required=True,
    help="Role of the user (ADMIN or USER; anything else sees no items).",
)


def _make_user(user_name: str, role: str) -> User:
    user = User(name=user_name, role=Role.parse(role))
    if user.role is Role.UNKNOWN:
        print_warning(f"Role '{role}' is not recognized; no items will be visible.")
    return user


@click.group()
@click.version_option(version=__version__, prog_name="itemreport")
@click.option(
    "--log-level",
    envvar="ITEMREPORT_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Logging verbosity (logs go to stderr).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Item Report - render role-filtered item reports.

    Admins see every item with high-value items flagged as priority.
    Users see only low-value items. Other roles see nothing.
    """
    ctx.ensure_object(dict)
    configure_logging(level=log_level.lower())
    ctx.obj["generator"] = ReportGenerator()


@cli.command()
@click.argument("items_file", type=click.File("r", encoding="utf-8"))
@user_option
@role_option
@click.option(
    "--format", "-f", "report_format",
    envvar="ITEMREPORT_FORMAT",
    type=click.Choice([fmt.value for fmt in ReportFormat], case_sensitive=False),
    default=ReportFormat.CSV.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the report to a file instead of stdout.",
)
@click.pass_context
def render(
    ctx: click.Context,
    items_file: TextIO,
    user_name: str,
    role: str,
    report_format: str,
    output: Optional[str],
) -> None:
    """Render a report from ITEMS_FILE.

    ITEMS_FILE is a JSON list of objects with id, name and value keys.
    Use '-' to read from stdin.

    \b
    Examples:
        itemreport render items.json -u Bob -r ADMIN
        itemreport render items.json -u Bob -r ADMIN -f html -o report.html
        cat items.json | itemreport render - -u Carol -r USER
    """
    generator: ReportGenerator = ctx.obj["generator"]

    try:
        items = load_items(items_file)
        user = _make_user(user_name, role)
        report = generator.generate_report(report_format, user, items)
    except ItemReportError as e:
        print_error(str(e))
        sys.exit(1)

    if output:
        try:
            Path(output).write_text(report + "\n", encoding="utf-8")
        except OSError as e:
            print_error(f"Cannot write report to {output}: {e.strerror or e}")
            sys.exit(1)

        logger.debug("Report written to %s", output)
        print_success(f"Report written to {output}")
    else:
        click.echo(report)


@cli.command()
@click.argument("items_file", type=click.File("r", encoding="utf-8"))
@user_option
@role_option
@click.pass_context
def preview(ctx: click.Context, items_file: TextIO, user_name: str, role: str) -> None:
    """Show which items in ITEMS_FILE a user can see.

    \b
    Examples:
        itemreport preview items.json -u Carol -r USER
    """
    generator: ReportGenerator = ctx.obj["generator"]

    try:
        items = load_items(items_file)
    except ItemReportError as e:
        print_error(str(e))
        sys.exit(1)

    user = _make_user(user_name, role)
    visible = generator.policy.visible_items(user, items)

    if not visible:
        print_info(f"No items visible to {user.name}.")
        return

    print_items_table(user, visible, calculate_total(visible))


@cli.command()
@click.pass_context
def formats(ctx: click.Context) -> None:
    """List the available report formats."""
    generator: ReportGenerator = ctx.obj["generator"]

    for name in generator.available_formats():
        click.echo(name)


if __name__ == "__main__":
    cli()
