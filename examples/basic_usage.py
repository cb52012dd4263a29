#!/usr/bin/env python3
"""
Basic usage of treemodel.

This example demonstrates:
- Parsing nested records into a node tree
- Walking the tree with each strategy and stopping early
- Searching, path reconstruction and editing
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treemodel import TreeModel, get_tree_stats


def build_org_chart():
    """Parse a small org chart, ordering reports by name."""
    tree = TreeModel(
        children_field_name='reports',
        comparator=lambda a, b: (a['name'] > b['name']) - (a['name'] < b['name']),
    )
    root = tree.parse({
        'name': 'Grace',
        'reports': [
            {'name': 'Linus', 'reports': [{'name': 'Ken'}]},
            {'name': 'Barbara', 'reports': [{'name': 'Edsger'}, {'name': 'Donald'}]},
        ],
    })
    return tree, root


def main():
    tree, root = build_org_chart()

    for strategy in ('pre', 'post', 'breadth'):
        names = [node.model['name'] for node in root.iter_nodes(strategy)]
        print(f"{strategy:>8}: {', '.join(names)}")

    # Stop as soon as we reach Edsger
    visited = []

    def visit(node):
        visited.append(node.model['name'])
        if node.model['name'] == 'Edsger':
            return False

    root.walk(visit, strategy='breadth')
    print(f"Visited until Edsger: {visited}")

    ken = root.first(lambda node: node.model['name'] == 'Ken')
    print("Path to Ken:", " -> ".join(node.model['name'] for node in ken.get_path()))

    # Move Ken under Barbara; the records follow
    barbara = root.first(lambda node: node.model['name'] == 'Barbara')
    barbara.add_child(ken)
    print("Barbara's reports:", [report['name'] for report in barbara.model['reports']])

    # Hire someone new and let go of Linus' team
    root.add_child(tree.parse({'name': 'Alan'}))
    linus = root.first(lambda node: node.model['name'] == 'Linus').drop()
    print("Grace's reports:", [report['name'] for report in root.model['reports']])
    print("Linus now leads:", linus.model)

    stats = get_tree_stats(root)
    print(f"Total nodes: {stats['total_nodes']}, max depth: {stats['max_depth']}")


if __name__ == "__main__":
    main()
