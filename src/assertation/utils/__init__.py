"""
Utility modules for the assertation engine.

This package contains shared helpers used by the rule leaves and the
structured validator: loose value coercion, nested path access and
constants.
"""

from .coercion import is_numeric, length, loose_compare, loose_equals, to_text
from .paths import get_path, set_path, split_path

__all__ = [
    "is_numeric",
    "length",
    "loose_compare",
    "loose_equals",
    "to_text",
    "get_path",
    "set_path",
    "split_path",
]
