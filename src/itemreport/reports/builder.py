"""
Report assembly.

Drives a formatter over already-filtered items and joins the fragments
into the final document.
"""

from collections.abc import Sequence

from itemreport.core.models import Item, Number, User
from itemreport.reports.formatters import Formatter


def build_report(
    formatter: Formatter,
    user: User,
    items: Sequence[Item],
    total: Number,
) -> str:
    """Assemble a report from header, item rows and footer.

    Args:
        formatter: Formatter producing the text fragments.
        user: User the report is rendered for.
        items: Visible items, rendered in the given order.
        total: Total to show in the footer.

    Returns:
        The complete document with surrounding whitespace stripped.
    """
    parts = [formatter.header(user.name)]
    parts.extend(formatter.row(item, user.name, item.priority) for item in items)
    parts.append(formatter.footer(total))

    return "".join(parts).strip()
