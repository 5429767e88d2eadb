"""
Message translation for failed checks.

A failed check hands its message key (the rule name, or a caller-supplied
message) and a context dict to a Translator. The translator returns the
rendered message, or None when it has no template for the key, in which
case the caller falls back to the raw key.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from assertation.exceptions import TranslationException
from assertation.utils.constants import Defaults, ErrorMessages

DEFAULT_MESSAGES: Dict[str, str] = {
    Defaults.VALIDATE_MESSAGE_KEY: Defaults.VALIDATE_MESSAGE,
    # Comparison
    "eq": "must be equal to {x}",
    "seq": "must be identical to {x}",
    "between": "must be between {x} and {y}",
    "gt": "must be greater than {x}",
    "gte": "must be greater than or equal to {x}",
    "lt": "must be less than {x}",
    "lte": "must be less than or equal to {x}",
    "in": "must be one of: {x}",
    # Length
    "lbetween": "must be between {x} and {y} characters long",
    "lgt": "must be longer than {x} characters",
    "lgte": "must be at least {x} characters long",
    "llt": "must be shorter than {x} characters",
    "llte": "must be at most {x} characters long",
    # Types
    "array": "must be an array",
    "string": "must be a string",
    "boolean": "must be a boolean",
    "integer": "must be an integer",
    "numeric": "must be numeric",
    "float": "must be a float",
    "null": "must be null",
    "req": "is required",
    "date": "must be a date",
    # Formats
    "email": "must be a valid email address",
    "ip": "must be a valid IP address",
    "ipv4": "must be a valid IPv4 address",
    "ipv6": "must be a valid IPv6 address",
    "domain": "must be a valid domain name",
    "url": "must be a valid URL",
    "digits": "must contain only digits",
    "alpha": "must contain only letters",
    "alphanumeric": "must contain only letters and digits",
    "currency": "must be a valid currency code",
    "country2": "must be a valid two-letter country code",
    "country3": "must be a valid three-letter country code",
    # Transformers that can fail
    "asJsonEncode": "must be JSON encodable",
    "asJsonDecode": "must be valid JSON",
    "asDecimal": "must be a decimal number",
    "asCardNumber": "must be a valid card number",
    "asCpf": "must be a valid CPF",
    "asCnpj": "must be a valid CNPJ",
}


class _FormatContext(dict):
    """Leaves unknown placeholders untouched instead of raising KeyError."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class Translator(ABC):
    """
    Abstract base class for message translators.

    Translators receive the message key and a context that always holds
    rule, result, value (None for sensitive attributes), attribute and
    sensitive, plus rule-specific fields such as x and y.
    """

    @abstractmethod
    def translate(
        self, key: str, context: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        """
        Render the message for key.

        Args:
            key: Message key, usually a rule name
            context: Values available to the template

        Returns:
            The rendered message, or None when no template exists
        """
        pass


class NullTranslator(Translator):
    """Translator without templates; callers always fall back to the key."""

    def translate(
        self, key: str, context: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        return None


class CatalogTranslator(Translator):
    """
    Translator backed by a key -> template mapping.

    Templates use str.format placeholders: "must be between {x} and {y}".
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self.messages: Dict[str, str] = dict(
            DEFAULT_MESSAGES if messages is None else messages
        )

    def translate(
        self, key: str, context: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        template = self.messages.get(key)
        if template is None:
            return None
        return template.format_map(_FormatContext(context or {}))

    @classmethod
    def from_yaml(
        cls,
        path: str,
        locale: Optional[str] = None,
        fallback: Optional[Mapping[str, str]] = None,
    ) -> "CatalogTranslator":
        """
        Load a message catalog from a YAML file.

        The file is either a flat mapping of keys to templates, or a mapping
        of locales to such mappings when locale is given. Keys missing from
        the file are taken from fallback (DEFAULT_MESSAGES by default).

        Raises:
            TranslationException: If the file is missing or malformed
        """
        catalog_path = Path(path)
        if not catalog_path.is_file():
            raise TranslationException(
                ErrorMessages.CATALOG_NOT_FOUND.format(path=path),
                context={"path": path},
            )

        try:
            with open(catalog_path, "r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise TranslationException(
                ErrorMessages.CATALOG_INVALID,
                context={"path": path},
                original_exception=e,
            )

        if locale is not None:
            if locale not in data:
                raise TranslationException(
                    ErrorMessages.LOCALE_NOT_FOUND.format(locale=locale, path=path),
                    context={"path": path, "locale": locale},
                )
            data = data[locale]

        if not isinstance(data, dict):
            raise TranslationException(
                ErrorMessages.CATALOG_INVALID, context={"path": path}
            )

        messages = dict(DEFAULT_MESSAGES if fallback is None else fallback)
        messages.update({str(key): str(value) for key, value in data.items()})

        logger.debug(f"Loaded {len(data)} messages from {path}")
        return cls(messages)
