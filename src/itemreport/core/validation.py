"""
Input validation utilities for itemreport.

Items handed to the library as ``Item`` objects are trusted. Records coming
from outside (JSON files read by the CLI) are checked here before they are
turned into ``Item`` and ``User`` objects.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any

from itemreport.core.exceptions import ValidationError
from itemreport.core.models import Item

REQUIRED_ITEM_FIELDS = ("id", "name", "value")

# Maximum length of an item or user name
MAX_NAME_LENGTH = 256


def validate_name(name: Any, field: str = "name") -> str:
    """Validate a display name.

    Args:
        name: Name to validate.
        field: Field name used in error messages.

    Returns:
        The name unchanged.

    Raises:
        ValidationError: If the name is not a non-empty printable string.
    """
    if not isinstance(name, str) or not name:
        raise ValidationError(field, repr(name), "Name must be a non-empty string")

    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            field, name[:50] + "...", f"Name exceeds {MAX_NAME_LENGTH} character limit"
        )

    # Check for null bytes or control characters
    if any(ord(c) < 32 or ord(c) == 127 for c in name):
        raise ValidationError(field, repr(name), "Name contains invalid control characters")

    return name


def validate_item_record(record: Any, index: int | None = None) -> Item:
    """Validate a raw item mapping and convert it to an Item.

    Args:
        record: Decoded JSON object describing one item.
        index: Position of the record in its source, for error messages.

    Returns:
        The validated Item.

    Raises:
        ValidationError: If a field is missing or has the wrong type.
    """
    where = "item" if index is None else f"items[{index}]"

    if not isinstance(record, Mapping):
        raise ValidationError(where, repr(record), "Item must be an object")

    for key in REQUIRED_ITEM_FIELDS:
        if key not in record:
            raise ValidationError(f"{where}.{key}", "", f"Missing required field '{key}'")

    item_id = record["id"]
    if isinstance(item_id, bool) or not isinstance(item_id, (int, str)):
        raise ValidationError(f"{where}.id", repr(item_id), "Id must be an integer or string")

    validate_name(record["name"], field=f"{where}.name")

    value = record["value"]
    # bool is a Real subclass but never a meaningful value
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{where}.value", repr(value), "Value must be a number")

    # priority is derived by the role policy, never taken from input
    return Item(id=item_id, name=record["name"], value=value)


def validate_item_records(records: Any) -> list[Item]:
    """Validate a list of raw item mappings.

    Raises:
        ValidationError: If ``records`` is not a list or any record is invalid.
    """
    if not isinstance(records, list):
        raise ValidationError("items", type(records).__name__, "Expected a list of items")

    return [validate_item_record(record, index) for index, record in enumerate(records)]
