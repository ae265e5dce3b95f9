"""
Role-based visibility policy for report items.

Decides which items a user may see and which of them are flagged as
priority, based solely on the user's role:

- ADMIN sees every item; items worth more than PRIORITY_THRESHOLD are
  returned as priority-annotated copies.
- USER sees only items worth at most USER_VALUE_LIMIT, unannotated.
- Any other role sees nothing.

Input order is always preserved and input items are never mutated.
"""

import logging
from collections.abc import Iterable

from itemreport.core.models import Item, Role, User

logger = logging.getLogger(__name__)

# Highest value a USER may see (inclusive)
USER_VALUE_LIMIT = 500

# Values strictly above this are flagged as priority for ADMIN viewers
PRIORITY_THRESHOLD = 1000


class RolePolicy:
    """Filter and annotate items according to the viewer's role."""

    def visible_items(self, user: User, items: Iterable[Item]) -> list[Item]:
        """Return the items visible to ``user``, in input order.

        Args:
            user: The user the report is rendered for.
            items: Items to filter.

        Returns:
            A new list of copies; the priority flag on each copy is set
            here, whatever the input item carried.
        """
        role = Role.parse(user.role)

        if role is Role.ADMIN:
            visible = self._admin_items(items)
        elif role is Role.USER:
            visible = self._user_items(items)
        else:
            logger.debug("Role %s has no item visibility", role)
            visible = []

        return visible

    def _admin_items(self, items: Iterable[Item]) -> list[Item]:
        return [
            item.with_priority(item.value > PRIORITY_THRESHOLD) for item in items
        ]

    def _user_items(self, items: Iterable[Item]) -> list[Item]:
        return [
            item.with_priority(False) for item in items if item.value <= USER_VALUE_LIMIT
        ]


def visible_items(user: User, items: Iterable[Item]) -> list[Item]:
    """Shortcut for ``RolePolicy().visible_items(user, items)``."""
    return RolePolicy().visible_items(user, items)
