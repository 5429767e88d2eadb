"""
Rule leaves and the machinery that dispatches to them.

Importing this package registers every built-in validator and transformer
in default_registry.
"""

from . import transformers, validators
from .expression import apply_rules, parse_rules
from .registry import RuleRegistry, default_registry
from .structured import apply_assoc_rules

__all__ = [
    "RuleRegistry",
    "default_registry",
    "apply_rules",
    "parse_rules",
    "apply_assoc_rules",
    "transformers",
    "validators",
]
