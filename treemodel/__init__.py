"""treemodel - Linked trees from plain nested records.

treemodel turns hierarchical data (dicts holding their child dicts in a
"children" field) into a tree of linked nodes that can be walked,
searched, reordered and edited while the original records stay in sync.

    from treemodel import TreeModel

    tree = TreeModel()
    root = tree.parse({'id': 1, 'children': [{'id': 11}, {'id': 12}]})
    root.walk(lambda node: print(node.model['id']), strategy='breadth')
"""

__version__ = "0.1.0"

from .config import TreeModelConfig, WalkStrategy, UnknownStrategyError
from .builder import TreeModel, InvalidModelError
from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .api import (
    parse,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Builder and config
    'TreeModel',
    'TreeModelConfig',
    'WalkStrategy',
    # Core
    'Node',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    # Errors
    'InvalidModelError',
    'UnknownStrategyError',
    # API
    'parse',
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_paths',
    'get_tree_stats',
]
