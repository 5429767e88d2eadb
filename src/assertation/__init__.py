"""
assertation - fluent value validation and sanitization.

Build chains of checks and transformations over a value, either fluently
or from rule expressions such as "req;asTrim;lgte,3|null", and get back the
validated value or per-attribute error messages.
"""

__version__ = "0.1.0"

from .assertion import Assert
from .chain import RuleChain
from .config import AssertConfig
from .domain.model import Check, RuleExpression, RuleGroup, RuleStep
from .exceptions import (
    AssertationException,
    InvalidContainerException,
    InvalidRuleArgumentException,
    InvalidValueException,
    RuleNotFoundException,
    ValidationException,
)
from .rules import RuleRegistry, default_registry, parse_rules
from .translation import CatalogTranslator, NullTranslator, Translator

__all__ = [
    "__version__",
    # Main API
    "Assert",
    "RuleChain",
    "AssertConfig",
    # Rules
    "RuleRegistry",
    "default_registry",
    "parse_rules",
    "Check",
    "RuleExpression",
    "RuleGroup",
    "RuleStep",
    # Translation
    "Translator",
    "CatalogTranslator",
    "NullTranslator",
    # Exceptions
    "AssertationException",
    "ValidationException",
    "InvalidValueException",
    "RuleNotFoundException",
    "InvalidRuleArgumentException",
    "InvalidContainerException",
]
