"""
Transformers.

A transformer maps the node's current value to a new value and returns a
new node continuing the same chain (RuleChain.clone). Transformers that
cannot produce a value record a failed check under their own rule name
and hand back the node unchanged.
"""

import json
import math
import re
from decimal import ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Any

from assertation.exceptions import InvalidRuleArgumentException
from assertation.rules import checksums
from assertation.rules.registry import default_registry as registry
from assertation.utils.coercion import to_bool, to_decimal, to_float, to_int, to_text
from assertation.utils.constants import Defaults, ErrorMessages

if TYPE_CHECKING:
    from assertation.chain import RuleChain

ROUNDING_MODES = {
    "1": ROUND_HALF_UP,
    "half_up": ROUND_HALF_UP,
    "2": ROUND_HALF_DOWN,
    "half_down": ROUND_HALF_DOWN,
    "3": ROUND_HALF_EVEN,
    "half_even": ROUND_HALF_EVEN,
}

DECIMAL_PATTERN = re.compile(r"[0-9]*\.[0-9]+|[0-9]+(\.[0-9]+)?")


def _size_argument(rule: str, value: Any) -> int:
    size = to_int(value)
    if size is None:
        raise InvalidRuleArgumentException(
            ErrorMessages.INVALID_INTEGER_ARGUMENT.format(rule=rule, value=value),
            context={"rule": rule, "argument": value},
        )
    return size


################################################################################
# Text
################################################################################


@registry.rule("asTrim", "as_trim")
def as_trim(node: "RuleChain") -> "RuleChain":
    return node.clone(to_text(node.value).strip())


@registry.rule("asUppercase", "as_uppercase")
def as_uppercase(node: "RuleChain") -> "RuleChain":
    return node.clone(to_text(node.value).upper())


@registry.rule("asLowercase", "as_lowercase")
def as_lowercase(node: "RuleChain") -> "RuleChain":
    return node.clone(to_text(node.value).lower())


@registry.rule("asExtract", "as_extract")
def as_extract(node: "RuleChain", char_class: str) -> "RuleChain":
    """Keep only the characters matching the regex character class."""
    return node.clone(re.sub(f"[^{char_class}]", "", to_text(node.value)))


@registry.rule("asDigits", "as_digits")
def as_digits(node: "RuleChain") -> "RuleChain":
    return as_extract(node, "0-9")


@registry.rule("asTruncate", "as_truncate")
def as_truncate(
    node: "RuleChain", size: Any, end: str = Defaults.TRUNCATE_END
) -> "RuleChain":
    """
    Cut the text to size characters, ending with end when it was cut.

    The ending counts towards size: asTruncate("abcdefgh", 6) -> "abc...".
    """
    data = to_text(node.value)
    size = _size_argument("asTruncate", size)

    if len(data) > size:
        size -= len(end)
    else:
        end = ""

    return node.clone(data[: max(size, 0)] + end)


@registry.rule("asLimit", "as_limit")
def as_limit(node: "RuleChain", size: Any) -> "RuleChain":
    return as_truncate(node, size, "")


@registry.rule("asReplace", "as_replace")
def as_replace(node: "RuleChain", x: str, y: str) -> "RuleChain":
    return node.clone(to_text(node.value).replace(x, y))


@registry.rule("asPregReplace", "as_preg_replace", "asRegexReplace")
def as_preg_replace(
    node: "RuleChain", pattern: str, replacement: str, limit: Any = -1
) -> "RuleChain":
    """Regex substitution; a negative limit replaces every match."""
    count = _size_argument("asPregReplace", limit)
    return node.clone(
        re.sub(pattern, replacement, to_text(node.value), count=max(count, 0))
    )


################################################################################
# JSON
################################################################################


@registry.rule("asJsonEncode", "as_json_encode")
def as_json_encode(node: "RuleChain") -> "RuleChain":
    try:
        data = json.dumps(node.value)
    except (TypeError, ValueError):
        return node.check(False, None, "asJsonEncode")

    return node.clone(data)


@registry.rule("asJsonDecode", "as_json_decode")
def as_json_decode(node: "RuleChain") -> "RuleChain":
    try:
        data = json.loads(to_text(node.value))
    except json.JSONDecodeError:
        return node.check(False, None, "asJsonDecode")

    return node.clone(data)


################################################################################
# Numbers
################################################################################


@registry.rule("asRound", "as_round")
def as_round(node: "RuleChain", precision: Any = 0, mode: Any = "half_up") -> "RuleChain":
    """
    Round half away from zero by default. Infinity and NaN pass through.

    mode is half_up, half_down or half_even (or 1, 2, 3).
    """
    places = _size_argument("asRound", precision)
    rounding = ROUNDING_MODES.get(str(mode).lower())
    if rounding is None:
        raise InvalidRuleArgumentException(
            ErrorMessages.INVALID_ROUNDING_MODE.format(mode=mode),
            context={"rule": "asRound", "argument": mode},
        )

    number = to_decimal(node.value)
    if not number.is_finite():
        return node.clone(float(number))

    exponent = Decimal(1).scaleb(-places)
    with localcontext() as context:
        context.prec = max(context.prec, number.adjusted() + places + 1)
        rounded = number.quantize(exponent, rounding=rounding)
    return node.clone(float(rounded))


@registry.rule("asFloor", "as_floor")
def as_floor(node: "RuleChain") -> "RuleChain":
    number = to_float(node.value)
    return node.clone(float(math.floor(number)) if math.isfinite(number) else number)


@registry.rule("asCeil", "as_ceil")
def as_ceil(node: "RuleChain") -> "RuleChain":
    number = to_float(node.value)
    return node.clone(float(math.ceil(number)) if math.isfinite(number) else number)


@registry.rule("asDecimal", "as_decimal")
def as_decimal(node: "RuleChain", *symbols: str) -> "RuleChain":
    """
    Normalize a decimal string to use "." as separator.

    symbols are the accepted decimal separators, "," and "." by default.
    The result stays a string so no precision is lost.
    """
    data = to_text(node.value)
    for symbol in symbols or (",", "."):
        data = data.replace(symbol, ".")

    if not DECIMAL_PATTERN.fullmatch(data):
        return node.check(False, None, "asDecimal")

    return node.clone(data)


################################################################################
# Checksums
################################################################################


@registry.rule("asCardNumber", "as_card_number")
def as_card_number(node: "RuleChain") -> "RuleChain":
    data = checksums.normalize_card_number(to_text(node.value))

    if data is None:
        return node.check(False, None, "asCardNumber")

    return node.clone(data)


@registry.rule("asCpf", "as_cpf")
def as_cpf(node: "RuleChain", formatted: Any = True) -> "RuleChain":
    raw = checksums.normalize_cpf(to_text(node.value))

    if raw is None:
        return node.check(False, None, "asCpf")

    return node.clone(checksums.format_cpf(raw) if to_bool(formatted) else raw)


@registry.rule("asCnpj", "as_cnpj")
def as_cnpj(node: "RuleChain", formatted: Any = True) -> "RuleChain":
    raw = checksums.normalize_cnpj(to_text(node.value))

    if raw is None:
        return node.check(False, None, "asCnpj")

    return node.clone(checksums.format_cnpj(raw) if to_bool(formatted) else raw)
