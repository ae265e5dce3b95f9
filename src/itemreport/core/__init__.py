"""
Core module for itemreport.

Contains data models, the role policy, total computation, validation
and exceptions.
"""

from itemreport.core.aggregator import calculate_total
from itemreport.core.exceptions import (
    InputFileError,
    ItemReportError,
    UnsupportedFormatError,
    ValidationError,
)
from itemreport.core.models import Item, ReportFormat, Role, User
from itemreport.core.policy import (
    PRIORITY_THRESHOLD,
    USER_VALUE_LIMIT,
    RolePolicy,
    visible_items,
)

__all__ = [
    # Models
    "Item",
    "ReportFormat",
    "Role",
    "User",
    # Policy
    "RolePolicy",
    "visible_items",
    "PRIORITY_THRESHOLD",
    "USER_VALUE_LIMIT",
    # Aggregation
    "calculate_total",
    # Exceptions
    "ItemReportError",
    "UnsupportedFormatError",
    "ValidationError",
    "InputFileError",
]
