"""
Scalar validators.

Each validator computes a predicate over the node's current value and
records it through RuleChain.check(); none of them changes the value.
Arguments coming from rule expressions are strings, so comparisons go
through the loose helpers in utils.coercion.
"""

import ipaddress
import re
from datetime import date
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email

from assertation.exceptions import InvalidRuleArgumentException
from assertation.rules.registry import default_registry as registry
from assertation.utils.coercion import (
    is_numeric,
    length,
    loose_compare,
    loose_equals,
    to_bool,
    to_int,
    to_text,
)
from assertation.utils.constants import (
    COUNTRY_ALPHA2_CODES,
    COUNTRY_ALPHA3_CODES,
    CURRENCY_CODES,
    ErrorMessages,
)

if TYPE_CHECKING:
    from assertation.chain import RuleChain

DOMAIN_PATTERN = re.compile(
    r"(?=.{1,253}$)(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\.?"
)


def _int_argument(rule: str, value: Any) -> int:
    number = to_int(value)
    if number is None:
        raise InvalidRuleArgumentException(
            ErrorMessages.INVALID_INTEGER_ARGUMENT.format(rule=rule, value=value),
            context={"rule": rule, "argument": value},
        )
    return number


def _compares(node: "RuleChain", x: Any, *accepted: int) -> bool:
    return loose_compare(node.value, x) in accepted


################################################################################
# Comparison
################################################################################


@registry.rule("eq")
def eq(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    return node.check(loose_equals(node.value, x), message, "eq", {"x": x})


@registry.rule("seq")
def seq(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    """Strict equality: same type and same value."""
    value = node.value
    return node.check(
        type(value) is type(x) and value == x, message, "seq", {"x": x}
    )


@registry.rule("between")
def between(
    node: "RuleChain", x: Any, y: Any, message: Optional[str] = None
) -> "RuleChain":
    return node.check(
        _compares(node, x, 0, 1) and _compares(node, y, -1, 0),
        message,
        "between",
        {"x": x, "y": y},
    )


@registry.rule("gt")
def gt(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    return node.check(_compares(node, x, 1), message, "gt", {"x": x})


@registry.rule("gte")
def gte(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    return node.check(_compares(node, x, 0, 1), message, "gte", {"x": x})


@registry.rule("lt")
def lt(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    return node.check(_compares(node, x, -1), message, "lt", {"x": x})


@registry.rule("lte")
def lte(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    return node.check(_compares(node, x, -1, 0), message, "lte", {"x": x})


@registry.rule("in", "oneOf", "one_of")
def in_(node: "RuleChain", *choices: Any, strict: bool = False) -> "RuleChain":
    """
    Set membership.

    Accepts either the choices as positional arguments ("in,a,b,c") or a
    single list/tuple/set of choices when called directly.
    """
    if len(choices) == 1 and isinstance(choices[0], (list, tuple, set, frozenset)):
        choices = tuple(choices[0])

    value = node.value
    if to_bool(strict):
        found = any(type(value) is type(choice) and value == choice for choice in choices)
    else:
        found = any(loose_equals(value, choice) for choice in choices)

    return node.check(
        found, None, "in", {"x": ", ".join(to_text(choice) for choice in choices)}
    )


################################################################################
# Length
################################################################################


@registry.rule("lbetween")
def lbetween(
    node: "RuleChain", x: Any, y: Any, message: Optional[str] = None
) -> "RuleChain":
    size = length(node.value)
    low, high = _int_argument("lbetween", x), _int_argument("lbetween", y)
    return node.check(low <= size <= high, message, "lbetween", {"x": low, "y": high})


@registry.rule("lgt")
def lgt(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    limit = _int_argument("lgt", x)
    return node.check(length(node.value) > limit, message, "lgt", {"x": limit})


@registry.rule("lgte")
def lgte(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    limit = _int_argument("lgte", x)
    return node.check(length(node.value) >= limit, message, "lgte", {"x": limit})


@registry.rule("llt")
def llt(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    limit = _int_argument("llt", x)
    return node.check(length(node.value) < limit, message, "llt", {"x": limit})


@registry.rule("llte")
def llte(node: "RuleChain", x: Any, message: Optional[str] = None) -> "RuleChain":
    limit = _int_argument("llte", x)
    return node.check(length(node.value) <= limit, message, "llte", {"x": limit})


################################################################################
# Types
################################################################################


@registry.rule("array")
def array(node: "RuleChain") -> "RuleChain":
    return node.check(isinstance(node.value, (list, tuple, dict)), None, "array")


@registry.rule("string", "str")
def string(node: "RuleChain") -> "RuleChain":
    return node.check(isinstance(node.value, str), None, "string")


@registry.rule("boolean", "bool")
def boolean(node: "RuleChain") -> "RuleChain":
    return node.check(isinstance(node.value, bool), None, "boolean")


@registry.rule("integer", "int")
def integer(node: "RuleChain") -> "RuleChain":
    value = node.value
    return node.check(
        isinstance(value, int) and not isinstance(value, bool), None, "integer"
    )


@registry.rule("numeric")
def numeric(node: "RuleChain") -> "RuleChain":
    return node.check(is_numeric(node.value), None, "numeric")


@registry.rule("float")
def float_(node: "RuleChain") -> "RuleChain":
    return node.check(isinstance(node.value, float), None, "float")


@registry.rule("null")
def null(node: "RuleChain") -> "RuleChain":
    return node.check(node.value is None, None, "null")


@registry.rule("req")
def req(node: "RuleChain") -> "RuleChain":
    return node.check(node.value is not None, None, "req")


@registry.rule("date")
def date_(node: "RuleChain") -> "RuleChain":
    # datetime is a subclass of date
    return node.check(isinstance(node.value, date), None, "date")


################################################################################
# Formats
################################################################################


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _ip_version(value: Any) -> Optional[int]:
    if not isinstance(value, str):
        return None
    try:
        return ipaddress.ip_address(value).version
    except ValueError:
        return None


def _is_url(value: Any) -> bool:
    if not isinstance(value, str) or any(char.isspace() for char in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if not parsed.scheme or not re.fullmatch(r"[A-Za-z][A-Za-z0-9+.-]*", parsed.scheme):
        return False
    if parsed.scheme in ("mailto", "news", "file"):
        return bool(parsed.path or parsed.netloc)
    return bool(parsed.netloc)


@registry.rule("email")
def email(node: "RuleChain") -> "RuleChain":
    return node.check(_is_email(node.value), None, "email")


@registry.rule("ip")
def ip(node: "RuleChain") -> "RuleChain":
    return node.check(_ip_version(node.value) is not None, None, "ip")


@registry.rule("ipv4")
def ipv4(node: "RuleChain") -> "RuleChain":
    return node.check(_ip_version(node.value) == 4, None, "ipv4")


@registry.rule("ipv6")
def ipv6(node: "RuleChain") -> "RuleChain":
    return node.check(_ip_version(node.value) == 6, None, "ipv6")


@registry.rule("domain")
def domain(node: "RuleChain") -> "RuleChain":
    value = node.value
    return node.check(
        isinstance(value, str) and DOMAIN_PATTERN.fullmatch(value) is not None,
        None,
        "domain",
    )


@registry.rule("url")
def url(node: "RuleChain") -> "RuleChain":
    return node.check(_is_url(node.value), None, "url")


def _pattern(node: "RuleChain", pattern: str, rule_name: str) -> "RuleChain":
    matched = node.value is not None and re.fullmatch(pattern, to_text(node.value))
    return node.check(bool(matched), None, rule_name)


@registry.rule("digits")
def digits(node: "RuleChain") -> "RuleChain":
    return _pattern(node, r"[0-9]+", "digits")


@registry.rule("alpha")
def alpha(node: "RuleChain", including: str = "") -> "RuleChain":
    """Letters and spaces; including is spliced into the character class."""
    return _pattern(node, f"[a-zA-Z{including} ]+", "alpha")


@registry.rule("alphanumeric")
def alphanumeric(node: "RuleChain", including: str = "") -> "RuleChain":
    return _pattern(node, f"[a-zA-Z0-9{including} ]+", "alphanumeric")


def _is_code(value: Any, codes) -> bool:
    return isinstance(value, str) and value in codes


@registry.rule("currency")
def currency(node: "RuleChain") -> "RuleChain":
    return node.check(_is_code(node.value, CURRENCY_CODES), None, "currency")


@registry.rule("country2")
def country2(node: "RuleChain") -> "RuleChain":
    return node.check(_is_code(node.value, COUNTRY_ALPHA2_CODES), None, "country2")


@registry.rule("country3")
def country3(node: "RuleChain") -> "RuleChain":
    return node.check(_is_code(node.value, COUNTRY_ALPHA3_CODES), None, "country3")
