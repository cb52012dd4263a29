"""Unit tests for TreeModelConfig, option parsing and strategy parsing."""

import dataclasses
import unittest
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treemodel import TreeModel, TreeModelConfig, WalkStrategy, UnknownStrategyError
from treemodel.config import parse_strategy


def by_id(a, b):
    return a['id'] - b['id']


class TestTreeModelConfig(unittest.TestCase):

    def test_defaults(self):
        config = TreeModelConfig()
        self.assertEqual(config.children_field_name, 'children')
        self.assertIsNone(config.comparator)
        self.assertFalse(config.is_ordered)
        self.assertEqual(config.validate(), [])

    def test_config_is_immutable(self):
        config = TreeModelConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.children_field_name = 'deps'

    def test_from_snake_case_options(self):
        config = TreeModelConfig.from_options({'children_field_name': 'deps', 'comparator': by_id})
        self.assertEqual(config.children_field_name, 'deps')
        self.assertIs(config.comparator, by_id)
        self.assertTrue(config.is_ordered)

    def test_from_camel_case_options(self):
        config = TreeModelConfig.from_options({'childrenFieldName': 'deps', 'modelComparatorFn': by_id})
        self.assertEqual(config.children_field_name, 'deps')
        self.assertIs(config.comparator, by_id)

    def test_missing_options_use_defaults(self):
        self.assertEqual(TreeModelConfig.from_options(None), TreeModelConfig())
        self.assertEqual(TreeModelConfig.from_options({}), TreeModelConfig())
        self.assertEqual(
            TreeModelConfig.from_options({'comparator': by_id}).children_field_name,
            'children'
        )

    def test_unknown_option(self):
        with self.assertRaises(ValueError) as ctx:
            TreeModelConfig.from_options({'childrenField': 'deps'})
        self.assertIn('childrenField', str(ctx.exception))

    def test_same_option_under_two_spellings(self):
        with self.assertRaises(ValueError) as ctx:
            TreeModelConfig.from_options({'comparator': by_id, 'modelComparatorFn': by_id})
        self.assertIn("'comparator' given twice", str(ctx.exception))

        with self.assertRaises(ValueError):
            TreeModel.configure({'children_field_name': 'deps', 'childrenFieldName': 'deps'})

    def test_validate_reports_every_problem(self):
        config = TreeModelConfig(children_field_name='', comparator=42)
        errors = config.validate()
        self.assertEqual(errors, [
            "children_field_name cannot be empty",
            "comparator must be callable or None",
        ])

    def test_validate_non_string_field_name(self):
        config = TreeModelConfig(children_field_name=3)
        self.assertEqual(config.validate(), ["children_field_name must be a string"])


class TestConfigure(unittest.TestCase):

    def test_configure_without_options(self):
        tree = TreeModel.configure()
        self.assertEqual(tree.config, TreeModelConfig())

    def test_configure_is_side_effect_free(self):
        options = {'childrenFieldName': 'deps'}
        first = TreeModel.configure(options)
        second = TreeModel.configure(options)

        self.assertIsNot(first, second)
        self.assertEqual(options, {'childrenFieldName': 'deps'})

    def test_configure_rejects_invalid_values(self):
        with self.assertRaises(ValueError) as ctx:
            TreeModel.configure({'children_field_name': '', 'comparator': 'x'})
        self.assertIn("Invalid configuration", str(ctx.exception))


@pytest.mark.parametrize("value,expected", [
    (None, WalkStrategy.PRE),
    ('pre', WalkStrategy.PRE),
    ('post', WalkStrategy.POST),
    ('breadth', WalkStrategy.BREADTH),
    (WalkStrategy.POST, WalkStrategy.POST),
])
def test_parse_strategy(value, expected):
    assert parse_strategy(value) is expected


@pytest.mark.parametrize("value", ['bfs', 'Pre', '', 3, object()])
def test_parse_unknown_strategy(value):
    with pytest.raises(UnknownStrategyError) as excinfo:
        parse_strategy(value)
    assert excinfo.value.strategy is value
    assert "Valid strategies are 'pre' [default], 'post' and 'breadth'." in str(excinfo.value)


if __name__ == "__main__":
    unittest.main()
