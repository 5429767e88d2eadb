"""Tests for the rule registry."""

import pytest

from assertation import Assert
from assertation.exceptions import RuleNotFoundException
from assertation.rules import RuleRegistry, default_registry


@pytest.fixture
def registry():
    return RuleRegistry()


def _always_fail(node):
    return node.check(False, "always fails", "alwaysFail")


class TestRuleRegistry:
    """Test suite for RuleRegistry."""

    def test_should_register_handler_with_aliases(self, registry):
        """Should resolve the name and every alias to the same handler."""
        # Act
        registry.register("alwaysFail", _always_fail, aliases=("always_fail",))

        # Assert
        assert "alwaysFail" in registry
        assert registry.get_handler("always_fail") is _always_fail
        assert sorted(registry.get_registered_names()) == ["alwaysFail", "always_fail"]

    def test_should_register_with_decorator(self, registry):
        """Should register through the rule() decorator."""

        @registry.rule("shout", "as_shout")
        def shout(node):
            return node.clone(str(node.value).upper())

        assert registry.get_handler("shout") is shout
        assert "as_shout" in registry

    def test_should_raise_for_unknown_rule(self, registry, validator):
        """Should raise RuleNotFoundException carrying the rule name."""
        with pytest.raises(RuleNotFoundException) as exc_info:
            registry.process("missing", validator.value(1))

        assert exc_info.value.context == {"rule": "missing"}

    def test_should_report_positional_arity(self):
        """Should know how many positional arguments each rule takes."""
        assert default_registry.max_arguments("req") == 0
        assert default_registry.max_arguments("gte") == 2
        assert default_registry.max_arguments("between") == 3
        assert default_registry.max_arguments("in") is None
        assert default_registry.max_arguments("asDecimal") is None
        assert default_registry.max_arguments("unknown") is None

    def test_should_unregister_and_clear(self, registry):
        """Should forget handlers on unregister() and clear()."""
        registry.register("a", _always_fail)
        registry.register("b", _always_fail)

        registry.unregister("a")
        assert "a" not in registry

        registry.clear()
        assert registry.get_registered_names() == []

    def test_copy_should_be_independent(self):
        """Should leave the source untouched when the copy changes."""
        extended = default_registry.copy()

        extended.register("alwaysFail", _always_fail)

        assert "alwaysFail" in extended
        assert "alwaysFail" not in default_registry
        assert "gte" in extended

    def test_custom_rule_should_be_usable_on_chains(self):
        """Should expose custom rules as methods and in expressions."""
        # Arrange
        extended = default_registry.copy()
        extended.register("alwaysFail", _always_fail)
        validator = Assert(registry=extended)

        # Act
        node = validator.value(1).rules("int;alwaysFail")

        # Assert
        assert node.errors() == ["always fails"]
        assert validator.value(1).alwaysFail().valid() is False
