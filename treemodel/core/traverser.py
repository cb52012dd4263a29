"""Tree traversal strategies for treemodel.

Traversers implement the different orders in which a node tree can be
walked. They are lazy generators: a consumer that stops pulling nodes
(``walk`` seeing a ``False`` callback result, ``first`` finding a match)
stops the traversal on the spot, with no remaining siblings or subtrees
visited.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, Iterator, List, Tuple, Type, Union

from ..config import UnknownStrategyError, WalkStrategy, parse_strategy

if TYPE_CHECKING:
    from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers only rely on a node's ``children`` list, so they see the
    tree exactly as it is linked at the moment each node is reached.
    """

    strategy: WalkStrategy

    @abstractmethod
    def traverse(self, root: 'Node') -> Iterator['Node']:
        """Traverse the subtree starting at root.

        Args:
            root: Starting node for traversal (always included)

        Yields:
            Nodes in the order defined by the strategy
        """
        pass


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children left to right.
    """

    strategy = WalkStrategy.PRE

    def traverse(self, root: 'Node') -> Iterator['Node']:
        """Traverse tree depth-first, pre-order.

        Uses an explicit stack, so depth is not bounded by the recursion
        limit.
        """
        stack: List['Node'] = [root]

        while stack:
            node = stack.pop()
            # Yield parent first (pre-order)
            yield node

            # Reversed so the leftmost child is popped next
            stack.extend(reversed(node.children))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent: the deepest leftmost node comes first
    and every parent follows its whole subtree.
    """

    strategy = WalkStrategy.POST

    def traverse(self, root: 'Node') -> Iterator['Node']:
        """Traverse tree depth-first, post-order.

        Each stack entry pairs a node with an iterator over its remaining
        children; a node is yielded once that iterator is exhausted.
        """
        stack: List[Tuple['Node', Iterator['Node']]] = [(root, iter(root.children))]

        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                # All children done, yield parent (post-order)
                stack.pop()
                yield node
            else:
                stack.append((child, iter(child.children)))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    Queue based, so arbitrarily deep trees do not grow the call stack.
    """

    strategy = WalkStrategy.BREADTH

    def traverse(self, root: 'Node') -> Iterator['Node']:
        """Traverse tree breadth-first."""
        queue: Deque['Node'] = deque([root])

        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)


_TRAVERSERS: Dict[WalkStrategy, Type[TreeTraverser]] = {
    WalkStrategy.PRE: DepthFirstPreOrderTraverser,
    WalkStrategy.POST: DepthFirstPostOrderTraverser,
    WalkStrategy.BREADTH: BreadthFirstTraverser,
}


def create_traverser(strategy: Union[WalkStrategy, str, None] = None) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: 'pre' (default), 'post', 'breadth' or a WalkStrategy

    Returns:
        TreeTraverser instance

    Raises:
        UnknownStrategyError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()


__all__ = [
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'UnknownStrategyError',
    'create_traverser',
]
