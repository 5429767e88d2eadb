"""
The rule chain: one node of a validation/transformation tree.

A node ties a value to the checks evaluated against it and to an optional
parent: the alternative to fall back on when this chain fails. Validators
append to the node's checks and return the node; transformers and or_()
return new nodes, so a node never sees the effects of its descendants.

    chain = Assert().value("  Bob  ")
    name = chain.rules("req;asTrim;lgte,2").validate().get()   # "Bob"
"""

from functools import partial
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from assertation.domain.model import Check
from assertation.exceptions import InvalidValueException, ValidationException
from assertation.rules.expression import apply_rules
from assertation.rules.structured import AttributeRules, apply_assoc_rules
from assertation.utils.constants import Defaults

if TYPE_CHECKING:
    from assertation.assertion import Assert

_UNSET = object()


class RuleChain:
    """
    A node of the rule chain tree.

    Args:
        context: The Assert context (translator, throw-early flag, registry)
        value: The current working value
        attribute: Name used in error messages and structured validation
        sensitive: Keep the raw value out of message contexts
        parent: Alternative branch this chain falls back on
        checks: Audit trail inherited from the chain this node continues
        original: The pristine value this chain was seeded with
    """

    def __init__(
        self,
        context: "Assert",
        value: Any,
        attribute: Optional[str] = None,
        sensitive: bool = False,
        parent: Optional["RuleChain"] = None,
        checks: Optional[List[Check]] = None,
        original: Any = _UNSET,
    ) -> None:
        self._context = context
        self._value = value
        self._original = value if original is _UNSET else original
        self._attribute = attribute
        self._sensitive = sensitive
        self._parent = parent
        self._checks: List[Check] = list(checks) if checks else []

    def clone(
        self,
        value: Any,
        parent: Optional["RuleChain"] = None,
        attribute: Optional[str] = None,
        sensitive: Optional[bool] = None,
        inherit_checks: bool = True,
        original: Any = _UNSET,
    ) -> "RuleChain":
        """
        Create a new node carrying value.

        Unset overrides inherit from this node. With inherit_checks the new
        node continues this chain and starts from a copy of its checks.
        """
        return type(self)(
            self._context,
            value,
            attribute=attribute if attribute is not None else self._attribute,
            sensitive=sensitive if sensitive is not None else self._sensitive,
            parent=parent if parent is not None else self._parent,
            checks=self._checks if inherit_checks else None,
            original=self._original if original is _UNSET else original,
        )

    # Accessors

    @property
    def context(self) -> "Assert":
        return self._context

    @property
    def value(self) -> Any:
        return self._value

    @property
    def attribute(self) -> Optional[str]:
        return self._attribute

    @property
    def sensitive(self) -> bool:
        return self._sensitive

    @property
    def parent(self) -> Optional["RuleChain"]:
        return self._parent

    @property
    def checks(self) -> Tuple[Check, ...]:
        return tuple(self._checks)

    def expression_errors(self) -> List[str]:
        """Messages of this node's own failed checks, parents excluded."""
        return [check.message for check in self._checks if not check.passed]

    def expression_has_errors(self) -> bool:
        return any(not check.passed for check in self._checks)

    # Tree-wide queries

    def valid(self) -> bool:
        """True when this node, or any alternative up the parent chain, is clean."""
        node: Optional[RuleChain] = self
        while node is not None:
            if not node.expression_has_errors():
                return True
            node = node._parent
        return False

    def errors(self) -> List[str]:
        """
        Every error of the tree when it is invalid, nothing otherwise.

        Own errors come first, followed by each parent's errors in order.
        """
        if self.valid():
            return []

        errors: List[str] = []
        node: Optional[RuleChain] = self
        while node is not None:
            errors.extend(node.expression_errors())
            node = node._parent
        return errors

    def has_errors(self) -> bool:
        return not self.valid()

    def get(self) -> Any:
        """Value of the nearest clean branch, or None when there is none."""
        node: Optional[RuleChain] = self
        while node is not None:
            if not node.expression_has_errors():
                return node._value
            node = node._parent
        return None

    def get_original(self) -> Any:
        """The value this chain was seeded with, before any transformation."""
        return self._original

    def validate(self) -> "RuleChain":
        """
        Raise when the tree is invalid, otherwise return self.

        Raises:
            ValidationException: Keyed by attribute ("general" when unset)
        """
        if self.valid():
            return self

        errors = self.errors()
        attribute = (
            self._attribute if self._attribute is not None else Defaults.GENERAL_ATTRIBUTE
        )
        message = (
            self._context.translate(
                Defaults.VALIDATE_MESSAGE_KEY,
                {"attribute": attribute, "errors": errors},
            )
            or Defaults.VALIDATE_MESSAGE
        )

        logger.warning(f"Validation failed for '{attribute}' with {len(errors)} error(s)")
        raise ValidationException(message, {attribute: errors})

    # Building

    def or_(self) -> "RuleChain":
        """Start an alternative branch from the pristine value."""
        return self.clone(self.get_original(), parent=self, inherit_checks=False)

    def check(
        self,
        condition: Any,
        message: Optional[str] = None,
        rule_name: str = "check",
        context: Optional[Mapping[str, Any]] = None,
    ) -> "RuleChain":
        """
        Record the outcome of an assertion on this node.

        Failed checks resolve their message through the translator, keyed
        by message or, when no message is given, by rule_name.

        Raises:
            InvalidValueException: On failure when the context throws early
        """
        passed = bool(condition)
        if not message:
            message = rule_name

        if not passed:
            message_context: Dict[str, Any] = {
                "rule": rule_name,
                "result": passed,
                "value": None if self._sensitive else self._value,
                "attribute": self._attribute,
                "sensitive": self._sensitive,
                **(context or {}),
            }
            translated = self._context.translate(message, message_context)
            prefix = f"{self._attribute}: " if self._attribute else ""
            message = prefix + (translated if translated is not None else message)

            if self._context.should_throw_early():
                raise InvalidValueException(
                    message, context={"rule": rule_name, "attribute": self._attribute}
                )

        self._checks.append(Check(passed=passed, message=message))
        return self

    def apply(self, rule_name: str, *args, **kwargs) -> "RuleChain":
        """
        Apply a registered validator or transformer by name.

        Raises:
            RuleNotFoundException: If the name is not registered
        """
        return self._context.registry.process(rule_name, self, *args, **kwargs)

    def rules(self, expression: str) -> "RuleChain":
        """Apply a rule expression such as "req;asTrim|null"."""
        return apply_rules(self, expression)

    def assoc_rules(self, rules: Mapping[str, AttributeRules]) -> "RuleChain":
        """Validate the attributes of a mapping value, writing back transformations."""
        return apply_assoc_rules(self, rules)

    def __getattr__(self, name: str):
        # Only reached for names that are not real attributes
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._context.registry:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute or rule '{name}'"
            )
        return partial(self.apply, name)

    def __repr__(self) -> str:
        value = "[FILTERED]" if self._sensitive else repr(self._value)
        return (
            f"RuleChain(value={value}, attribute={self._attribute!r}, "
            f"checks={len(self._checks)}, valid={self.valid()})"
        )
