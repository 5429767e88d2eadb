"""
Rule registry mapping rule names to handler functions.

Validators and transformers share a single lookup table keyed by the name
used in rule expressions ("gte", "asTrim"). Each handler receives the
current RuleChain node followed by the rule's positional arguments and
returns the resulting node.
"""

import inspect
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional

from assertation.exceptions import RuleNotFoundException
from assertation.utils.constants import ErrorMessages

if TYPE_CHECKING:
    from assertation.chain import RuleChain

RuleHandler = Callable[..., "RuleChain"]


class RuleRegistry:
    """
    Registry for rule handlers.

    Built once at import time by the validators and transformers modules;
    contexts that need extra rules work on a copy().
    """

    def __init__(self):
        self._handlers: Dict[str, RuleHandler] = {}
        self._arity: Dict[str, Optional[int]] = {}

    def register(
        self, name: str, handler: RuleHandler, aliases: Iterable[str] = ()
    ) -> None:
        """
        Register a handler under a rule name.

        Args:
            name: The name used in rule expressions
            handler: Callable taking (node, *args)
            aliases: Additional names resolving to the same handler
        """
        arity = _positional_arity(handler)
        for key in (name, *aliases):
            self._handlers[key] = handler
            self._arity[key] = arity

    def rule(self, name: str, *aliases: str) -> Callable[[RuleHandler], RuleHandler]:
        """Decorator form of register()."""

        def decorator(handler: RuleHandler) -> RuleHandler:
            self.register(name, handler, aliases)
            return handler

        return decorator

    def get_handler(self, name: str) -> Optional[RuleHandler]:
        return self._handlers.get(name)

    def max_arguments(self, name: str) -> Optional[int]:
        """Positional arguments the rule accepts after the node; None if unbounded."""
        return self._arity.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def process(self, name: str, node: "RuleChain", *args, **kwargs) -> "RuleChain":
        """
        Apply the named rule to a node.

        Raises:
            RuleNotFoundException: If no handler is registered under name
        """
        handler = self.get_handler(name)

        if handler is None:
            raise RuleNotFoundException(
                ErrorMessages.RULE_NOT_FOUND.format(name=name),
                context={"rule": name},
            )

        return handler(node, *args, **kwargs)

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)
        self._arity.pop(name, None)

    def clear(self) -> None:
        """Clear all registered handlers."""
        self._handlers.clear()
        self._arity.clear()

    def copy(self) -> "RuleRegistry":
        registry = RuleRegistry()
        registry._handlers = dict(self._handlers)
        registry._arity = dict(self._arity)
        return registry

    def get_registered_names(self) -> List[str]:
        """Get a list of all registered rule names, aliases included."""
        return list(self._handlers.keys())


def _positional_arity(handler: RuleHandler) -> Optional[int]:
    parameters = list(inspect.signature(handler).parameters.values())[1:]
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
        return None
    return sum(
        p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        for p in parameters
    )


default_registry = RuleRegistry()
