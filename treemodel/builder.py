"""TreeModel: turns nested records into linked Node trees.

Records are plain mutable mappings (usually dicts) that may hold their
nested child records in a list under a configurable field name::

    tree = TreeModel()
    root = tree.parse({'id': 1, 'children': [{'id': 11}, {'id': 12}]})
    root.first(lambda node: node.model['id'] == 12).get_path()

Parsing mutates the records in place: when a comparator is configured,
every children list is rewritten in comparator order so that the records
and the node tree always agree.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, List, Mapping, Optional

from .config import Comparator, TreeModelConfig
from .core.node import Node
from .core.ordering import sort_by_model

logger = logging.getLogger(__name__)


class InvalidModelError(TypeError):
    """Raised when a record (or a nested child record) is not a mapping."""

    def __init__(self, model: Any = None):
        self.model = model
        super().__init__("Model must be of type object.")


class TreeModel:
    """Configured factory for node trees.

    A TreeModel is immutable once created and can parse any number of
    records. Every node it produces carries its configuration, so
    ``add_child`` and ``drop`` keep using the same children field and
    ordering.

    Example:
        >>> tree = TreeModel(children_field_name='deps',
        ...                  comparator=lambda a, b: b['id'] - a['id'])
        >>> root = tree.parse({'id': 1, 'deps': [{'id': 11}, {'id': 12}]})
        >>> [child.model['id'] for child in root.children]
        [12, 11]
    """

    def __init__(self,
                 config: Optional[TreeModelConfig] = None,
                 *,
                 children_field_name: Optional[str] = None,
                 comparator: Optional[Comparator] = None):
        """Create a builder.

        Args:
            config: Complete configuration; keyword options override it
            children_field_name: Record field holding nested records
            comparator: Three-way comparison used to order children

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        config = config or TreeModelConfig()
        if children_field_name is not None or comparator is not None:
            config = TreeModelConfig(
                children_field_name=(children_field_name
                                     if children_field_name is not None
                                     else config.children_field_name),
                comparator=comparator if comparator is not None else config.comparator,
            )

        config_errors = config.validate()
        if config_errors:
            raise ValueError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config

    @classmethod
    def configure(cls, options: Optional[Mapping[str, Any]] = None) -> 'TreeModel':
        """Create a builder from an options mapping.

        Recognized options are ``children_field_name`` (or
        ``childrenFieldName``) and ``comparator`` (or ``modelComparatorFn``).

        Raises:
            ValueError: On unknown options or invalid values
        """
        return cls(TreeModelConfig.from_options(options))

    def parse(self, record: MutableMapping) -> Node:
        """Build a node tree from a record and its nested children.

        The whole record graph is validated before any node is linked or
        any children list is reordered.

        Args:
            record: Mapping, optionally holding child records in a list
                under the configured children field (a None value there
                means no children and is left as is)

        Returns:
            Root node wrapping ``record``

        Raises:
            InvalidModelError: If the record or any nested child is not a
                mutable mapping, or a children field is not a list
        """
        self._validate(record)
        root = self._build(record)
        logger.debug("Parsed tree rooted at %r", root)
        return root

    def _validate(self, record: Any) -> None:
        field_name = self.config.children_field_name
        pending: List[Any] = [record]

        while pending:
            current = pending.pop()
            if not isinstance(current, MutableMapping):
                raise InvalidModelError(current)

            # Missing and None both mean "no children"
            nested = current.get(field_name)
            if nested is None:
                continue
            if not isinstance(nested, (list, tuple)):
                raise InvalidModelError(nested)
            pending.extend(nested)

    def _build(self, record: MutableMapping) -> Node:
        field_name = self.config.children_field_name
        root = Node(self.config, record)
        pending: List[Node] = [root]

        # Explicit stack, so record depth is not bounded by the recursion limit
        while pending:
            node = pending.pop()
            nested = node.model.get(field_name)
            if nested is None:
                continue

            children = [Node(self.config, child) for child in nested]
            if self.config.comparator is not None:
                children = sort_by_model(children, self.config.comparator)

            for child in children:
                child.parent = node
            node.children = children

            models = [child.model for child in children]
            if isinstance(nested, list):
                nested[:] = models
            else:
                node.model[field_name] = models

            pending.extend(children)

        return root
