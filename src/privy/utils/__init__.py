"""Leaf helpers for test authors: tolerance assertions, strings, resources."""

from privy.utils.ensure import are_equal_with_tolerance
from privy.utils.resources import (
    extract_resource_as_lines,
    extract_resource_as_text,
    list_resources,
)
from privy.utils.strings import is_nothing, is_something, split_lines

__all__ = [
    "are_equal_with_tolerance",
    "extract_resource_as_lines",
    "extract_resource_as_text",
    "list_resources",
    "is_nothing",
    "is_something",
    "split_lines",
]
