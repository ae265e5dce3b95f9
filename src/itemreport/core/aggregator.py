"""
Total computation over report items.
"""

from collections.abc import Iterable

from itemreport.core.models import Item, Number


def calculate_total(items: Iterable[Item]) -> Number:
    """Sum the ``value`` of every item; an empty sequence totals 0.

    Pass the already-filtered items: the total must match the rendered rows.
    """
    return sum((item.value for item in items), 0)
