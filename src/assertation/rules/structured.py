"""
Structured validation of keyed containers.

Applies a mapping of attribute path -> rule expression(s) to a mutable
mapping, one attribute at a time, writing transformed values back into
the container.
"""

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, List, Mapping, Tuple, Union

from loguru import logger

from assertation.exceptions import InvalidContainerException
from assertation.rules.expression import apply_rules
from assertation.utils.constants import ErrorMessages, RuleSyntax
from assertation.utils.paths import get_path, set_path

if TYPE_CHECKING:
    from assertation.chain import RuleChain

AttributeRules = Union[str, List[str], Tuple[str, ...]]


def split_attribute(attribute: str) -> Tuple[str, bool]:
    """Strip the sensitive marker; returns (path, sensitive)."""
    if attribute.startswith(RuleSyntax.SENSITIVE_PREFIX):
        return attribute[len(RuleSyntax.SENSITIVE_PREFIX) :], True
    return attribute, False


def apply_attribute_rules(
    node: "RuleChain", attribute: str, value: Any, rules: AttributeRules, sensitive: bool
) -> "RuleChain":
    """
    Build a fresh node for one attribute and run its rules.

    A list of expressions is a list of whole-expression alternatives.
    """
    builder = node.clone(
        value,
        parent=node.parent,
        attribute=attribute,
        sensitive=sensitive,
        inherit_checks=False,
        original=value,
    )

    if isinstance(rules, (list, tuple)):
        expressions = [str(rule) for rule in rules]
    else:
        expressions = [str(rules)]

    for index, expression in enumerate(expressions):
        if index > 0:
            builder = builder.or_()
        builder = apply_rules(builder, expression)

    return builder


def apply_assoc_rules(
    node: "RuleChain", rules: Mapping[str, AttributeRules]
) -> "RuleChain":
    """
    Validate every attribute of the node's mapping value.

    Raises:
        InvalidContainerException: If the node's value is not a mutable mapping
        ValidationException: At the first attribute that fails
    """
    container = node.value
    if not isinstance(container, MutableMapping):
        raise InvalidContainerException(
            ErrorMessages.NOT_A_CONTAINER,
            context={"value_type": type(container).__name__},
        )

    for raw_attribute, attribute_rules in rules.items():
        attribute, sensitive = split_attribute(raw_attribute)
        current = get_path(attribute, container)

        builder = apply_attribute_rules(
            node, attribute, current, attribute_rules, sensitive
        )
        changed = builder.validate().get()

        if changed != current or type(changed) is not type(current):
            logger.debug(f"Writing back transformed value for '{attribute}'")
            set_path(attribute, container, changed)

    return node
