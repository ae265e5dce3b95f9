"""
itemreport

Renders role-filtered item reports as CSV or HTML. Admins see every item
with high-value items flagged; regular users see low-value items only;
anyone else sees an empty report.

Quick Start:
    >>> from itemreport import Item, User, generate_report
    >>> items = [Item(1, "A", 1500), Item(2, "B", 200)]
    >>> report = generate_report("HTML", User("Bob", "ADMIN"), items)
    >>> "<h3>Total: 1700</h3>" in report
    True
"""

__version__ = "0.1.0"

# High-level API (recommended for most users)
from itemreport.api import generate_report, load_items

# Core components (for advanced usage)
from itemreport.core.aggregator import calculate_total

# Exceptions
from itemreport.core.exceptions import (
    InputFileError,
    ItemReportError,
    UnsupportedFormatError,
    ValidationError,
)

# Data models
from itemreport.core.models import Item, ReportFormat, Role, User
from itemreport.core.policy import PRIORITY_THRESHOLD, USER_VALUE_LIMIT, RolePolicy
from itemreport.reports.formatters import CSVFormatter, Formatter, HTMLFormatter
from itemreport.reports.generator import ReportGenerator

__all__ = [
    # Version
    "__version__",
    # High-level API
    "generate_report",
    "load_items",
    # Models
    "Item",
    "ReportFormat",
    "Role",
    "User",
    # Core
    "ReportGenerator",
    "RolePolicy",
    "calculate_total",
    "PRIORITY_THRESHOLD",
    "USER_VALUE_LIMIT",
    # Formatters
    "Formatter",
    "CSVFormatter",
    "HTMLFormatter",
    # Exceptions
    "ItemReportError",
    "UnsupportedFormatError",
    "ValidationError",
    "InputFileError",
]
