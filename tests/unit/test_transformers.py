"""Tests for the transformers."""

import math

import pytest

from assertation.exceptions import InvalidRuleArgumentException


class TestTextTransformers:
    """Test suite for the text transformers."""

    def test_should_trim_and_change_case(self, validator):
        """Case and whitespace transformers work on the text form."""
        assert validator.value("  Hi  ").asTrim().value == "Hi"
        assert validator.value("Hi").asUppercase().value == "HI"
        assert validator.value("Hi").asLowercase().value == "hi"

    def test_should_treat_none_as_empty_text(self, validator):
        """None becomes the empty string."""
        assert validator.value(None).asTrim().value == ""

    def test_should_return_new_node_with_inherited_checks(self, validator):
        """A transformer continues the chain on a new node."""
        # Arrange
        source = validator.value(" x ").req()

        # Act
        result = source.asTrim()

        # Assert
        assert result is not source
        assert source.value == " x "
        assert len(result.checks) == 1

    def test_should_extract_character_class(self, validator):
        """asExtract keeps only matching characters."""
        assert validator.value("a1b2").asExtract("a-z").value == "ab"
        assert validator.value("(11) 9-8").asDigits().value == "1198"

    @pytest.mark.parametrize(
        "value, args, expected",
        [
            ("abcdefgh", (6,), "abc..."),
            ("abc", (6,), "abc"),
            ("abcdef", (6,), "abcdef"),
            ("abcdefgh", ("5", "!"), "abcd!"),
            ("abcdefgh", (2,), "..."),
        ],
    )
    def test_should_truncate(self, validator, value, args, expected):
        """The ending counts towards the size."""
        assert validator.value(value).asTruncate(*args).value == expected

    def test_should_limit_without_ending(self, validator):
        assert validator.value("abcdef").asLimit(3).value == "abc"

    def test_should_reject_non_integer_size(self, validator):
        """A non-integer size is a rule error."""
        with pytest.raises(InvalidRuleArgumentException):
            validator.value("abc").asTruncate("x")

    def test_should_replace(self, validator):
        """Plain and regex replacement."""
        assert validator.value("1-2-3").asReplace("-", "").value == "123"
        assert validator.value("a   b  c").asPregReplace(r"\s+", " ").value == "a b c"
        assert (
            validator.value("a   b  c").asPregReplace(r"\s+", " ", 1).value
            == "a b  c"
        )

    def test_should_apply_from_expression(self, validator):
        """String arguments from expressions are converted."""
        assert validator.value("abcdefgh").rules("asTruncate,6").value == "abc..."


class TestJsonTransformers:
    """Test suite for asJsonEncode and asJsonDecode."""

    def test_should_encode(self, validator):
        assert validator.value({"a": 1}).asJsonEncode().value == '{"a": 1}'
        assert validator.value("x").asJsonEncode().value == '"x"'

    def test_should_fail_on_unserializable_value(self, validator):
        """Encoding failures become validation failures on the same node."""
        # Arrange
        node = validator.value(object())

        # Act
        result = node.asJsonEncode()

        # Assert
        assert result is node
        assert result.errors() == ["must be JSON encodable"]

    def test_should_decode(self, validator):
        assert validator.value('{"a": [1, 2]}').asJsonDecode().value == {"a": [1, 2]}

    def test_should_fail_on_invalid_json(self, validator):
        assert validator.value("{bad").asJsonDecode().errors() == [
            "must be valid JSON"
        ]
        assert validator.value(None).asJsonDecode().valid() is False


class TestNumberTransformers:
    """Test suite for asRound, asFloor, asCeil and asDecimal."""

    @pytest.mark.parametrize(
        "value, args, expected",
        [
            (2.5, (), 3.0),
            (-2.5, (), -3.0),
            ("2.345", (2,), 2.35),
            (2.5, (0, "half_even"), 2.0),
            (3.5, ("0", "3"), 4.0),
            (2.5, (0, "half_down"), 2.0),
            (1234, (-2,), 1200.0),
        ],
    )
    def test_should_round(self, validator, value, args, expected):
        """Rounds half away from zero unless another mode is asked for."""
        assert validator.value(value).asRound(*args).value == expected

    def test_should_reject_unknown_rounding_mode(self, validator):
        with pytest.raises(InvalidRuleArgumentException):
            validator.value(1.5).asRound(0, "sideways")

    def test_should_round_large_magnitudes(self, validator):
        """Rounding keeps working past the default decimal precision."""
        node = validator.value(1e27).rules("asRound,2")

        assert node.value == 1e27
        assert node.valid() is True

    @pytest.mark.parametrize("rule", ["asRound", "asFloor", "asCeil"])
    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), "1e999"])
    def test_should_pass_infinity_through(self, validator, rule, value):
        """Infinite input comes back unchanged instead of raising."""
        node = validator.value(value).rules(rule)

        assert math.isinf(node.value)
        assert node.valid() is True

    @pytest.mark.parametrize("rule", ["asRound", "asFloor", "asCeil"])
    def test_should_pass_nan_through(self, validator, rule):
        node = validator.value(float("nan")).rules(rule)

        assert math.isnan(node.value)

    def test_floor_and_ceil(self, validator):
        """Strings are read by their leading number."""
        assert validator.value("3.7").asFloor().value == 3.0
        assert validator.value(3.2).asCeil().value == 4.0
        assert validator.value("abc").asFloor().value == 0.0

    def test_should_normalize_decimal_separator(self, validator):
        """Comma and dot both become a dot; the result stays text."""
        assert validator.value("1,50").asDecimal().value == "1.50"
        assert validator.value("12,5").asDecimal(",").value == "12.5"
        assert validator.value(".5").asDecimal().value == ".5"

    def test_should_fail_on_non_decimal(self, validator):
        assert validator.value("abc").asDecimal().errors() == [
            "must be a decimal number"
        ]
        assert validator.value("1.234,56").asDecimal().valid() is False


class TestChecksumTransformers:
    """Test suite for asCardNumber, asCpf and asCnpj."""

    def test_should_normalize_card_number(self, validator):
        node = validator.value("4532 0151 1283 0366").asCardNumber()

        assert node.value == "4532015112830366"
        assert node.valid() is True

    def test_should_fail_invalid_card_number(self, validator):
        node = validator.value("4532 0151 1283 0367", attribute="card").asCardNumber()

        assert node.errors() == ["card: must be a valid card number"]

    def test_should_format_cpf(self, validator):
        """CPFs are formatted unless asked for raw digits."""
        assert validator.value("11144477735").asCpf().value == "111.444.777-35"
        assert validator.value("111.444.777-35").asCpf(False).value == "11144477735"
        assert validator.value("111.444.777-35").rules("asCpf,0").value == "11144477735"

    def test_should_fail_invalid_cpf(self, validator):
        assert validator.value("111.444.777-36").asCpf().errors() == [
            "must be a valid CPF"
        ]

    def test_should_format_cnpj(self, validator):
        assert (
            validator.value("11222333000181").asCnpj().value == "11.222.333/0001-81"
        )
        assert (
            validator.value("11.222.333/0001-81").as_cnpj("false").value
            == "11222333000181"
        )

    def test_should_fail_invalid_cnpj(self, validator):
        assert validator.value("11222333000182").asCnpj().valid() is False
