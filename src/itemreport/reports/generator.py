"""
Report generator for producing item reports.

Provides the ReportGenerator class that resolves the requested format,
applies the role policy, computes the total and assembles the document.
"""

import logging
from collections.abc import Iterable

from itemreport.core.aggregator import calculate_total
from itemreport.core.exceptions import UnsupportedFormatError
from itemreport.core.models import Item, ReportFormat, User
from itemreport.core.policy import RolePolicy
from itemreport.reports.builder import build_report
from itemreport.reports.formatters import CSVFormatter, Formatter, HTMLFormatter

logger = logging.getLogger(__name__)


def _format_key(report_type: ReportFormat | str) -> str:
    if isinstance(report_type, ReportFormat):
        return report_type.value
    return str(report_type).upper()


class ReportGenerator:
    """Generate item reports for a user in a requested format.

    Holds the registry of formatters. The registry is filled at
    construction (and through ``add_formatter`` during setup) and only
    read afterwards, so one generator can be shared between callers.
    """

    def __init__(
        self,
        formatters: dict[ReportFormat | str, Formatter] | None = None,
        policy: RolePolicy | None = None,
    ):
        """Initialize the report generator.

        Args:
            formatters: Extra formatters to register, keyed by format.
                Entries override the built-in formatters.
            policy: Role policy to filter items with.
        """
        self.policy = policy or RolePolicy()

        # Formatters
        self.formatters: dict[str, Formatter] = {
            ReportFormat.CSV.value: CSVFormatter(),
            ReportFormat.HTML.value: HTMLFormatter(),
        }

        for key, formatter in (formatters or {}).items():
            self.add_formatter(key, formatter)

    def generate_report(
        self,
        report_type: ReportFormat | str,
        user: User,
        items: Iterable[Item],
    ) -> str:
        """Generate a report of the items visible to ``user``.

        Args:
            report_type: Output format ('CSV', 'HTML' or a registered key).
            user: User the report is rendered for.
            items: All candidate items, in display order.

        Returns:
            The formatted report.

        Raises:
            UnsupportedFormatError: If no formatter is registered for
                ``report_type``. Nothing is rendered in that case.
        """
        formatter = self.get_formatter(report_type)

        items = list(items)
        visible = self.policy.visible_items(user, items)
        total = calculate_total(visible)

        logger.debug(
            "Rendering %s report for %s: %d of %d items visible, total %s",
            _format_key(report_type),
            user,
            len(visible),
            len(items),
            total,
        )

        return build_report(formatter, user, visible, total)

    def get_formatter(self, report_type: ReportFormat | str) -> Formatter:
        """Return the formatter registered for ``report_type``.

        Raises:
            UnsupportedFormatError: If the format is not registered.
        """
        formatter = self.formatters.get(_format_key(report_type))
        if formatter is None:
            raise UnsupportedFormatError(str(report_type), self.available_formats())

        return formatter

    def add_formatter(self, report_type: ReportFormat | str, formatter: Formatter) -> None:
        """Register a formatter, replacing any existing one for the key.

        Args:
            report_type: Format key; strings are upper-cased.
            formatter: Formatter instance.
        """
        key = _format_key(report_type)
        self.formatters[key] = formatter
        logger.info("Registered %s formatter for %s", type(formatter).__name__, key)

    def available_formats(self) -> list[str]:
        """Return the registered format keys in registration order."""
        return list(self.formatters)
