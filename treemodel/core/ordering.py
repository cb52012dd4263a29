"""Comparator-based ordering of sibling nodes.

Both the builder (sorting freshly parsed children) and the node (inserting
a child into an already sorted list) go through this module, so the two
paths always agree on where equal elements end up: after the ones already
present.
"""

from functools import cmp_to_key
from typing import Any, List, Sequence

from ..config import Comparator


def sort_by_model(nodes: List[Any], comparator: Comparator) -> List[Any]:
    """Return nodes sorted by comparing their models.

    Python's sort is stable, so nodes whose models compare equal keep
    their original relative order.

    Args:
        nodes: Nodes to sort (not modified)
        comparator: Three-way comparison over raw records

    Returns:
        New sorted list of nodes
    """
    key = cmp_to_key(comparator)
    return sorted(nodes, key=lambda node: key(node.model))


def find_insert_index(siblings: Sequence[Any], model: Any, comparator: Comparator) -> int:
    """Find where a model belongs among already sorted siblings.

    Binary search for the first sibling that compares strictly greater
    than ``model``; inserting there places the new node after every
    sibling it ties with, matching what a stable sort would produce.

    Args:
        siblings: Sibling nodes already in comparator order
        model: Record of the node being inserted
        comparator: Three-way comparison over raw records

    Returns:
        Index in ``siblings`` to insert at
    """
    low, high = 0, len(siblings)
    while low < high:
        mid = (low + high) // 2
        if comparator(model, siblings[mid].model) < 0:
            high = mid
        else:
            low = mid + 1
    return low
