"""
Exception hierarchy for the assertation engine.

This module provides a structured approach to error handling with:
- Clear inheritance hierarchy
- Context preservation for debugging
- Proper exception chaining
- Sensitive data filtering for logging

Two disjoint families live here. Validation failures (ValidationException,
InvalidValueException) describe bad input data. Everything else describes
misuse of the API and is never downgraded to a validation failure.
"""

import re
from typing import Any, Dict, List, Optional, Set


class AssertationException(Exception):
    """
    Base exception class for all assertation errors.

    Args:
        message: Human-readable error description
        context: Additional context information for debugging
        original_exception: The original exception that caused this error (for chaining)
    """

    # Sensitive keys that should be filtered from context when logging
    _SENSITIVE_KEYS: Set[str] = {
        "password",
        "passwd",
        "pwd",
        "secret",
        "api_key",
        "token",
        "auth",
        "authorization",
        "credential",
        "card_number",
        "cvv",
        "cpf",
        "cnpj",
    }

    # Patterns for sensitive data in string values
    _SENSITIVE_PATTERNS: List[str] = [
        r"password=[\w\-_]+",
        r"://[^:]+:[^@]+@",  # URLs with credentials
        r"Bearer\s+[\w\-_\.]+",  # Bearer tokens
        r"\b\d{13,19}\b",  # Card numbers
    ]

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception

        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Return the error message."""
        return self.message

    def __repr__(self) -> str:
        """Return a detailed representation of the exception."""
        class_name = self.__class__.__name__
        context_info = f", context={self.context}" if self.context else ""
        return f"{class_name}('{self.message}'{context_info})"

    def get_sanitized_context(self) -> Dict[str, Any]:
        """
        Get context with sensitive information filtered out.

        Returns:
            Dictionary with sensitive values replaced with '[FILTERED]'
        """
        if not self.context:
            return {}

        sanitized = {}
        for key, value in self.context.items():
            if self._is_sensitive_key(key):
                sanitized[key] = "[FILTERED]"
            elif isinstance(value, str) and self._contains_sensitive_data(value):
                sanitized[key] = self._filter_sensitive_patterns(value)
            else:
                sanitized[key] = value

        return sanitized

    def _is_sensitive_key(self, key: str) -> bool:
        """Check if a key is considered sensitive."""
        return key.lower() in self._SENSITIVE_KEYS

    def _contains_sensitive_data(self, value: str) -> bool:
        """Check if a string value contains sensitive patterns."""
        for pattern in self._SENSITIVE_PATTERNS:
            if re.search(pattern, value, re.IGNORECASE):
                return True
        return False

    def _filter_sensitive_patterns(self, value: str) -> str:
        """Filter sensitive patterns from a string value."""
        filtered_value = value
        for pattern in self._SENSITIVE_PATTERNS:
            filtered_value = re.sub(
                pattern, "[FILTERED]", filtered_value, flags=re.IGNORECASE
            )
        return filtered_value


# Validation Exceptions
class ValidationException(AssertationException):
    """
    Exception raised by RuleChain.validate() when a chain is invalid.

    Carries a mapping from attribute name (or "general" for anonymous
    chains) to the ordered list of error messages.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ) -> None:
        self.errors: Dict[str, List[str]] = errors or {}
        context = {**(context or {}), "errors": self.errors}
        super().__init__(message, context=context, original_exception=original_exception)


class InvalidValueException(AssertationException, ValueError):
    """
    Exception raised at the first failing check when throw-early mode is on.

    Common contexts:
    - rule: The rule that failed
    - attribute: The attribute being validated, if any
    """

    pass


# Rule Exceptions
class RuleException(AssertationException):
    """Base class for rule registry and rule expression errors."""

    pass


class RuleNotFoundException(RuleException, LookupError):
    """
    Exception raised when a rule expression references an unknown rule.

    Common contexts:
    - rule: The unresolvable rule name
    """

    pass


class InvalidRuleArgumentException(RuleException):
    """
    Exception raised when a rule receives an argument it cannot interpret.

    Common contexts:
    - rule: The rule name
    - argument: The offending argument
    """

    pass


class InvalidContainerException(AssertationException, TypeError):
    """
    Exception raised when structured rules are applied to a non-mapping value.

    Common contexts:
    - value_type: Type name of the value that was given
    """

    pass


# Configuration Exceptions
class ConfigurationException(AssertationException):
    """Base class for configuration-related exceptions."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """
    Exception raised when configuration values are invalid.

    Common contexts:
    - config_key: The configuration key with invalid value
    - value: The invalid value
    """

    pass


class TranslationException(ConfigurationException):
    """
    Exception raised when a message catalog cannot be loaded.

    Common contexts:
    - path: The catalog file
    - locale: The requested locale
    """

    pass


__all__ = [
    # Base exception
    "AssertationException",
    # Validation exceptions
    "ValidationException",
    "InvalidValueException",
    # Rule exceptions
    "RuleException",
    "RuleNotFoundException",
    "InvalidRuleArgumentException",
    "InvalidContainerException",
    # Configuration exceptions
    "ConfigurationException",
    "InvalidConfigurationException",
    "TranslationException",
]
