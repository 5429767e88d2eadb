"""
The Assert validation context.

An Assert instance carries what every node of a validation needs: the
translator for failure messages, the throw-early flag and the rule
registry. It also seeds new chains.

    validator = Assert()
    data = {"name": "  Bob  ", "age": 21}
    validator.assoc(data, {"name": "req;asTrim", "age": "req;gte,18"})
    data["name"]   # "Bob"
"""

from typing import Any, Mapping, Optional
from uuid import uuid4

from assertation.chain import RuleChain
from assertation.config import AssertConfig
from assertation.observability.context import ctx_validation_id
from assertation.rules import RuleRegistry, default_registry
from assertation.rules.structured import AttributeRules
from assertation.translation import CatalogTranslator, Translator


class Assert:
    """
    Validation context shared by every node of a chain.

    Args:
        translator: Renders failure messages; English defaults when None
        throw_early: Raise at the first failing check instead of accumulating
        registry: Rule table; the built-in rules when None
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        throw_early: bool = False,
        registry: Optional[RuleRegistry] = None,
    ):
        self.translator = translator if translator is not None else CatalogTranslator()
        self.throw_early = throw_early
        self.registry = registry if registry is not None else default_registry

    @classmethod
    def from_config(cls, config: Optional[AssertConfig] = None) -> "Assert":
        """Build a context from configuration (environment when None)."""
        config = config or AssertConfig.from_env()

        if config.messages_file:
            translator = CatalogTranslator.from_yaml(config.messages_file, config.locale)
        else:
            translator = CatalogTranslator()

        return cls(translator=translator, throw_early=config.throw_early)

    def should_throw_early(self) -> bool:
        return self.throw_early

    def translate(self, key: str, context: Optional[Mapping[str, Any]] = None):
        return self.translator.translate(key, context)

    def value(
        self, value: Any, attribute: Optional[str] = None, sensitive: bool = False
    ) -> RuleChain:
        """Seed a new chain for value."""
        ctx_validation_id.set(uuid4().hex[:8])
        return RuleChain(self, value, attribute=attribute, sensitive=sensitive)

    def assoc(self, data: Any, rules: Mapping[str, AttributeRules]) -> RuleChain:
        """Validate a mapping attribute by attribute, writing back transformations."""
        return self.value(data).assoc_rules(rules)
