"""
High-level programmatic API for itemreport.

This module provides simple functions for common operations.
For more control, use ReportGenerator directly.

Example:
    from itemreport import Item, User, generate_report

    items = [Item(1, "A", 1500), Item(2, "B", 200)]
    print(generate_report("CSV", User("Bob", "ADMIN"), items))
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, TextIO

from itemreport.core.exceptions import InputFileError
from itemreport.core.models import Item, ReportFormat, User
from itemreport.core.validation import validate_item_records
from itemreport.reports.generator import ReportGenerator

# Shared generator; its formatter registry is never modified after import
_default_generator = ReportGenerator()


def generate_report(
    report_type: ReportFormat | str,
    user: User,
    items: Iterable[Item | Mapping[str, Any]],
) -> str:
    """Generate a report of the items visible to a user.

    Args:
        report_type: Output format, "CSV" or "HTML".
        user: User the report is rendered for.
        items: Items to report on. Plain mappings with ``id``, ``name``
            and ``value`` keys are accepted as well.

    Returns:
        The formatted report.

    Raises:
        UnsupportedFormatError: If the format is unknown.

    Example:
        >>> from itemreport import User, generate_report
        >>> print(generate_report("CSV", User("Carol", "USER"),
        ...                       [{"id": 2, "name": "B", "value": 200}]))
        ID,NOME,VALOR,USUARIO
        2,B,200,Carol
        <BLANKLINE>
        Total,,
        200,,
    """
    records = [item if isinstance(item, Item) else Item.from_dict(item) for item in items]
    return _default_generator.generate_report(report_type, user, records)


def load_items(source: str | Path | TextIO) -> list[Item]:
    """Load and validate items from a JSON document.

    Args:
        source: Path to a JSON file, or an open text stream.

    Returns:
        List of validated items.

    Raises:
        InputFileError: If the document cannot be read or is not JSON.
        ValidationError: If any record is malformed.
    """
    if isinstance(source, (str, Path)):
        name = str(source)
    else:
        name = getattr(source, "name", "<stream>")

    try:
        if isinstance(source, (str, Path)):
            data = json.loads(Path(source).read_text(encoding="utf-8"))
        else:
            data = json.load(source)
    except OSError as e:
        raise InputFileError(str(name), details=e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise InputFileError(str(name), details=f"Invalid JSON: {e}") from e

    return validate_item_records(data)
