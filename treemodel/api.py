"""High-level API for treemodel.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API (TreeModel and
Node) for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, MutableMapping, Optional

from .builder import TreeModel
from .config import Comparator, DEFAULT_CHILDREN_FIELD_NAME
from .core.node import Node, StrategyLike


def parse(
    record: MutableMapping,
    children_field_name: str = DEFAULT_CHILDREN_FIELD_NAME,
    comparator: Optional[Comparator] = None,
) -> Node:
    """Parse a record into a node tree without keeping a builder around.

    Args:
        record: Root record, possibly holding nested child records
        children_field_name: Record field holding nested records
        comparator: Optional three-way comparison ordering children

    Returns:
        Root node

    Example:
        >>> root = parse({'id': 1, 'children': [{'id': 11}]})
        >>> root.children[0].model
        {'id': 11}
    """
    builder = TreeModel(children_field_name=children_field_name, comparator=comparator)
    return builder.parse(record)


def traverse_tree(root: Node, strategy: StrategyLike = None) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: 'pre' (default), 'post' or 'breadth'

    Yields:
        Nodes of the subtree in traversal order

    Example:
        >>> for node in traverse_tree(root, strategy='breadth'):
        ...     print(node.model['id'])
    """
    yield from root.iter_nodes(strategy)


def count_nodes(root: Node) -> int:
    """Count nodes in a subtree, root included."""
    count = 0
    for _ in root.iter_nodes():
        count += 1
    return count


def find_nodes(
    root: Node,
    predicate: Callable[[Node], Any],
    strategy: StrategyLike = None,
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Lazy counterpart of ``Node.all``.

    Args:
        root: Starting node for traversal
        predicate: Function that returns True for matching nodes
        strategy: Traversal order, pre-order by default

    Yields:
        Nodes that match the predicate
    """
    for node in root.iter_nodes(strategy):
        if predicate(node):
            yield node


def get_leaf_nodes(root: Node, strategy: StrategyLike = None) -> Iterator[Node]:
    """Get all leaf nodes (nodes with no children) in a subtree."""
    for node in root.iter_nodes(strategy):
        if not node.has_children():
            yield node


def get_tree_paths(root: Node) -> Iterator[List[Node]]:
    """Get paths from the tree root to each node of the subtree.

    Paths start at the root of the whole tree, not at ``root``, matching
    ``Node.get_path``.

    Yields:
        Lists of nodes, in pre-order of their last element
    """
    for node in root.iter_nodes():
        yield node.get_path()


def get_tree_stats(root: Node) -> Dict[str, Any]:
    """Get statistics about a subtree.

    Depths are relative to ``root``.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    # Level by level, so the depth is just the loop counter
    level = [root]
    depth = 0
    while level:
        stats['depths'][depth] = len(level)
        stats['total_nodes'] += len(level)
        stats['max_depth'] = depth

        next_level = []
        for node in level:
            if node.has_children():
                next_level.extend(node.children)
            else:
                stats['leaf_nodes'] += 1

        level = next_level
        depth += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
