"""Node: the linked-tree unit of treemodel.

A Node wraps one caller-owned record (its ``model``) and links it to a
parent and an ordered list of children. The node tree and the records stay
mirrored: every structural change made through a Node is also applied to
the ``children`` field of the underlying records.
"""

import logging
from typing import Any, Callable, Iterator, List, Mapping, MutableMapping, Optional, Sequence, Union

from ..config import TreeModelConfig, WalkStrategy
from .ordering import find_insert_index
from .traverser import create_traverser

logger = logging.getLogger(__name__)

StrategyLike = Union[WalkStrategy, str, None]
Predicate = Callable[['Node'], Any]


def _identity_index(items: Sequence[Any], target: Any) -> int:
    """Position of ``target`` in ``items`` compared by identity, not equality."""
    for index, item in enumerate(items):
        if item is target:
            return index
    raise ValueError(f"{target!r} is not in the sequence")


class Node:
    """A node in a tree parsed from nested records.

    Attributes:
        config: Configuration of the builder that produced this node
        model: The exact record this node was built from (not a copy)
        parent: Owning node, or None for a root
        children: Child nodes in order, each owned by this node only

    Nodes compare by identity. Two nodes wrapping equal records are still
    different nodes.
    """

    def __init__(self, config: TreeModelConfig, model: MutableMapping[str, Any]):
        self.config = config
        self.model = model
        self.parent: Optional['Node'] = None
        self.children: List['Node'] = []

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(model={self.model!r})"

    # Structure queries

    def is_root(self) -> bool:
        return self.parent is None

    def has_children(self) -> bool:
        return len(self.children) > 0

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for a root)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def get_path(self) -> List['Node']:
        """Get the nodes from the root down to this node (included).

        Returns:
            List starting at the current root and ending with this node
        """
        path = []
        current: Optional[Node] = self
        while current is not None:
            path.append(current)
            current = current.parent
        path.reverse()
        return path

    def get_index(self) -> int:
        """Position of this node among its siblings (0 for a root)."""
        if self.parent is None:
            return 0
        return _identity_index(self.parent.children, self)

    # Traversal and search

    def iter_nodes(self, strategy: StrategyLike = None) -> Iterator['Node']:
        """Iterate over this node and its descendants.

        Args:
            strategy: 'pre' (default), 'post' or 'breadth'

        Returns:
            Lazy iterator over nodes in traversal order

        Raises:
            UnknownStrategyError: If strategy is not recognized
        """
        return create_traverser(strategy).traverse(self)

    def walk(self,
             options_or_callback: Union[Mapping[str, Any], Callable[['Node'], Any]],
             callback: Optional[Callable[['Node'], Any]] = None,
             *,
             strategy: StrategyLike = None) -> None:
        """Call ``callback`` for every node of this subtree.

        Can be called as ``walk(callback, strategy='post')`` or, with an
        options mapping first, as ``walk({'strategy': 'post'}, callback)``.
        The traversal stops as soon as the callback returns ``False``;
        any other result (``None`` included) continues it.

        Args:
            options_or_callback: Callback, or options mapping when
                ``callback`` is given
            callback: Callback when options come first
            strategy: 'pre' (default), 'post' or 'breadth'

        Raises:
            UnknownStrategyError: If strategy is not recognized. Raised
                before any node is visited.
        """
        if callback is None:
            callback = options_or_callback
        elif strategy is None:
            strategy = (options_or_callback or {}).get('strategy')

        for node in self.iter_nodes(strategy):
            if callback(node) is False:
                logger.debug("Walk stopped early at %r", node)
                return

    def all(self, predicate: Predicate, strategy: StrategyLike = None) -> List['Node']:
        """Find every node of this subtree matching a predicate.

        Args:
            predicate: Called with each node, truthy result means match
            strategy: Traversal order of the result, pre-order by default

        Returns:
            Matching nodes in traversal order (may include this node)
        """
        return [node for node in self.iter_nodes(strategy) if predicate(node)]

    def first(self, predicate: Predicate, strategy: StrategyLike = None) -> Optional['Node']:
        """Find the first node of this subtree matching a predicate.

        Stops traversing at the first match.

        Returns:
            The matching node, or None
        """
        for node in self.iter_nodes(strategy):
            if predicate(node):
                return node
        return None

    # Mutation

    def add_child(self, child: 'Node') -> 'Node':
        """Attach a node as a child of this node.

        With a comparator configured the child is inserted after every
        existing child that does not compare greater than it; otherwise
        it is appended. A child that already has a parent is detached
        from it first.

        Args:
            child: Node to attach, typically produced by ``parse``

        Returns:
            The attached child

        Raises:
            TypeError: If child is not a Node
            ValueError: If child is this node or one of its ancestors
        """
        return self._attach(child, None)

    def add_child_at_index(self, child: 'Node', index: int) -> 'Node':
        """Attach a node as a child at an explicit position.

        Raises:
            ValueError: If a comparator is configured
            IndexError: If index is outside 0..len(children)
        """
        if self.config.is_ordered:
            raise ValueError("Cannot add child at index when using a comparator function.")

        available = len(self.children)
        if isinstance(child, Node) and child.parent is self:
            available -= 1
        if not 0 <= index <= available:
            raise IndexError(f"Invalid child index {index}, expected 0..{available}.")

        return self._attach(child, index)

    def set_index(self, index: int) -> 'Node':
        """Move this node to another position among its siblings.

        Raises:
            ValueError: If the parent keeps children sorted by a comparator
            IndexError: If index is out of range
        """
        if self.parent is None:
            if index != 0:
                raise IndexError("Invalid index for a root node, only 0 is allowed.")
            return self

        parent = self.parent
        if parent.config.is_ordered:
            raise ValueError("Cannot set node index when using a comparator function.")

        siblings = parent.children
        if not 0 <= index < len(siblings):
            raise IndexError(f"Invalid index {index}, expected 0..{len(siblings) - 1}.")

        old_index = self.get_index()
        siblings.insert(index, siblings.pop(old_index))

        models = parent.model[parent.config.children_field_name]
        models.insert(index, models.pop(_identity_index(models, self.model)))
        return self

    def drop(self) -> 'Node':
        """Detach this node (and its subtree) from its parent.

        The subtree is left intact and becomes an independent tree rooted
        at this node. Dropping a root does nothing.

        Returns:
            This node
        """
        parent = self.parent
        if parent is None:
            return self

        del parent.children[_identity_index(parent.children, self)]

        models = parent.model[parent.config.children_field_name]
        del models[_identity_index(models, self.model)]

        self.parent = None
        logger.debug("Dropped %r from %r", self, parent)
        return self

    def _attach(self, child: 'Node', index: Optional[int]) -> 'Node':
        if not isinstance(child, Node):
            raise TypeError(f"Child must be a Node, got {type(child).__name__}")
        if any(node is child for node in self.get_path()):
            raise ValueError("Cannot add a node to itself or to one of its descendants.")

        if child.parent is not None:
            child.drop()

        if index is None:
            if self.config.is_ordered:
                index = find_insert_index(self.children, child.model, self.config.comparator)
            else:
                index = len(self.children)

        field_name = self.config.children_field_name
        if self.model.get(field_name) is None:
            self.model[field_name] = []

        self.children.insert(index, child)
        self.model[field_name].insert(index, child.model)
        child.parent = self

        logger.debug("Attached %r to %r at index %d", child, self, index)
        return child
