"""Configuration system for treemodel.

This module defines how users specify the shape of their records (which
field holds the nested children) and how siblings are ordered, plus the
traversal strategies understood by the walking engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union


# Comparator over raw records: negative => a before b
Comparator = Callable[[Any, Any], int]

DEFAULT_CHILDREN_FIELD_NAME = "children"

# Option keys accepted by TreeModel.configure(), including the camelCase
# spellings used by record producers outside Python.
_OPTION_ALIASES = {
    'children_field_name': 'children_field_name',
    'childrenFieldName': 'children_field_name',
    'childrenPropertyName': 'children_field_name',
    'comparator': 'comparator',
    'modelComparatorFn': 'comparator',
}


class WalkStrategy(Enum):
    """How to walk the tree."""
    PRE = "pre"           # Parent before children (default)
    POST = "post"         # Children before parent
    BREADTH = "breadth"   # Level by level


class UnknownStrategyError(ValueError):
    """Raised when a walk is requested with an unrecognized strategy."""

    def __init__(self, strategy: Any):
        self.strategy = strategy
        super().__init__(
            "Unknown tree walk strategy. "
            "Valid strategies are 'pre' [default], 'post' and 'breadth'."
        )


@dataclass(frozen=True)
class TreeModelConfig:
    """Immutable configuration shared by a builder and every node it creates.

    Nodes keep a reference to the config they were parsed with so that
    later mutations (``add_child``, ``drop``) read and write the same
    children field and honour the same ordering.
    """

    children_field_name: str = DEFAULT_CHILDREN_FIELD_NAME
    comparator: Optional[Comparator] = None

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> 'TreeModelConfig':
        """Create a config from an options mapping.

        Args:
            options: Mapping using snake_case or camelCase option names.
                Missing options fall back to defaults.

        Returns:
            TreeModelConfig instance

        Raises:
            ValueError: If an option name is not recognized, or the same
                option is given under two spellings
        """
        if not options:
            return cls()

        unknown = sorted(key for key in options if key not in _OPTION_ALIASES)
        if unknown:
            raise ValueError(
                f"Unknown tree model option(s): {', '.join(unknown)}. "
                f"Choose from: {', '.join(_OPTION_ALIASES.keys())}"
            )

        kwargs: Dict[str, Any] = {}
        given_as: Dict[str, str] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES[key]
            if name in kwargs:
                raise ValueError(
                    f"Option {name!r} given twice, as {given_as[name]!r} and {key!r}"
                )
            kwargs[name] = value
            given_as[name] = key

        return cls(**kwargs)

    @property
    def is_ordered(self) -> bool:
        """True when children are kept sorted by a comparator."""
        return self.comparator is not None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.children_field_name, str):
            errors.append("children_field_name must be a string")
        elif not self.children_field_name:
            errors.append("children_field_name cannot be empty")

        if self.comparator is not None and not callable(self.comparator):
            errors.append("comparator must be callable or None")

        return errors


def parse_strategy(strategy: Union[WalkStrategy, str, None]) -> WalkStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum, string or None (default pre-order)

    Returns:
        WalkStrategy enum value

    Raises:
        UnknownStrategyError: If the strategy is not recognized
    """
    if strategy is None:
        return WalkStrategy.PRE
    if isinstance(strategy, WalkStrategy):
        return strategy

    if isinstance(strategy, str):
        try:
            return WalkStrategy(strategy)
        except ValueError:
            pass

    raise UnknownStrategyError(strategy)
