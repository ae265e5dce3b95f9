"""
Core data models for itemreport.

This module defines the data structures used throughout itemreport for
representing report items, the requesting user and the output formats.
"""

from dataclasses import dataclass, replace
from enum import Enum

Number = int | float


class Role(Enum):
    """Authorization role of the user requesting a report."""

    ADMIN = "ADMIN"  # Sees every item, high-value items flagged as priority
    USER = "USER"  # Sees low-value items only
    UNKNOWN = "UNKNOWN"  # Anything else, sees nothing

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role":
        """Map a raw role value to a Role.

        Unrecognized and missing values map to UNKNOWN rather than failing.
        """
        if isinstance(value, Role):
            return value
        if value in (cls.ADMIN.value, cls.USER.value):
            return cls(value)
        return cls.UNKNOWN


class ReportFormat(Enum):
    """Output formats with a built-in formatter."""

    CSV = "CSV"
    HTML = "HTML"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Item:
    """A reportable record."""

    id: int | str
    name: str
    value: Number
    priority: bool = False

    def __str__(self) -> str:
        flag = " [PRIORITY]" if self.priority else ""
        return f"{self.id}: {self.name} = {self.value}{flag}"

    def with_priority(self, priority: bool = True) -> "Item":
        """Return a copy of this item with the priority flag set to ``priority``."""
        return replace(self, priority=priority)

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Create from a plain mapping (e.g. a decoded JSON object).

        Any ``priority`` key is ignored; the flag is only set by the role policy.
        """
        return cls(
            id=data["id"],
            name=data["name"],
            value=data["value"],
        )


@dataclass(frozen=True)
class User:
    """The user a report is rendered for."""

    name: str
    role: Role = Role.UNKNOWN

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role.parse(self.role))

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"
