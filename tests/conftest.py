"""
Pytest fixtures and configuration for itemreport tests.

Provides sample items, users and items files for unit testing.
"""

import json
import logging
from pathlib import Path

import pytest

from itemreport.core.models import Item, Role, User
from itemreport.reports.generator import ReportGenerator

# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def sample_items() -> list[Item]:
    """Create the two-item collection used by the reference scenarios."""
    return [
        Item(id=1, name="A", value=1500),
        Item(id=2, name="B", value=200),
    ]


@pytest.fixture
def mixed_items() -> list[Item]:
    """Create items straddling both thresholds."""
    return [
        Item(id=1, name="Low", value=100),
        Item(id=2, name="AtLimit", value=500),
        Item(id=3, name="AboveLimit", value=501),
        Item(id=4, name="AtThreshold", value=1000),
        Item(id=5, name="AboveThreshold", value=1001),
        Item(id=6, name="Zero", value=0),
    ]


@pytest.fixture
def admin_user() -> User:
    """Create an ADMIN user."""
    return User(name="Bob", role=Role.ADMIN)


@pytest.fixture
def regular_user() -> User:
    """Create a USER user."""
    return User(name="Carol", role=Role.USER)


@pytest.fixture
def guest_user() -> User:
    """Create a user with an unrecognized role."""
    return User(name="Dave", role="GUEST")


@pytest.fixture
def generator() -> ReportGenerator:
    """Create a report generator with the built-in formatters."""
    return ReportGenerator()


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def items_file(tmp_path: Path) -> Path:
    """Write the reference items to a JSON file."""
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "A", "value": 1500},
                {"id": 2, "name": "B", "value": 200},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def invalid_items_file(tmp_path: Path) -> Path:
    """Write an items file with a record missing its value."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"id": 1, "name": "A"}]), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("itemreport")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
