"""Tests for message translation."""

import pytest

from assertation import Assert, AssertConfig
from assertation.exceptions import TranslationException, ValidationException
from assertation.translation import (
    DEFAULT_MESSAGES,
    CatalogTranslator,
    NullTranslator,
)


class TestCatalogTranslator:
    """Test suite for CatalogTranslator."""

    def test_should_render_default_template(self):
        """Should render built-in templates with the context."""
        translator = CatalogTranslator()

        assert translator.translate("between", {"x": 1, "y": 5}) == (
            "must be between 1 and 5"
        )

    def test_should_keep_unknown_placeholders(self):
        """Should leave placeholders without a context value untouched."""
        translator = CatalogTranslator({"custom": "{attribute} needs {x}"})

        assert translator.translate("custom", {"x": 3}) == "{attribute} needs 3"

    def test_should_return_none_for_unknown_key(self):
        assert CatalogTranslator().translate("nope") is None

    def test_null_translator_should_never_render(self):
        assert NullTranslator().translate("gte", {"x": 1}) is None

    def test_should_cover_every_failing_rule(self):
        """Should carry a template for every rule that can fail."""
        for key in ("req", "gte", "email", "asJsonDecode", "asCpf", "validate"):
            assert key in DEFAULT_MESSAGES


class TestCatalogFromYaml:
    """Test suite for CatalogTranslator.from_yaml()."""

    def test_should_load_locale_over_defaults(self, catalog_file):
        """Should override templates from the locale and keep the rest."""
        # Act
        translator = CatalogTranslator.from_yaml(str(catalog_file), locale="pt")

        # Assert
        assert translator.translate("gte", {"x": 18}) == "deve ser maior ou igual a 18"
        assert translator.translate("req") == "é obrigatório"
        assert translator.translate("null") == "must be null"

    def test_should_use_given_fallback(self, catalog_file):
        """Should merge over the given fallback instead of the defaults."""
        translator = CatalogTranslator.from_yaml(
            str(catalog_file), locale="en", fallback={}
        )

        assert translator.messages == {
            "gte": "must be at least {x}",
            "validate": "Invalid data",
        }

    def test_should_load_flat_catalog(self, tmp_path):
        """Should accept a flat mapping when no locale is given."""
        path = tmp_path / "flat.yaml"
        path.write_text("req: 'cannot be empty'\n", encoding="utf-8")

        translator = CatalogTranslator.from_yaml(str(path))

        assert translator.translate("req") == "cannot be empty"

    def test_should_raise_for_missing_file(self, tmp_path):
        with pytest.raises(TranslationException):
            CatalogTranslator.from_yaml(str(tmp_path / "missing.yaml"))

    def test_should_raise_for_missing_locale(self, catalog_file):
        with pytest.raises(TranslationException) as exc_info:
            CatalogTranslator.from_yaml(str(catalog_file), locale="de")

        assert exc_info.value.context["locale"] == "de"

    def test_should_raise_for_malformed_yaml(self, tmp_path):
        """Should wrap YAML errors and keep the cause."""
        path = tmp_path / "broken.yaml"
        path.write_text("req: [unclosed\n", encoding="utf-8")

        with pytest.raises(TranslationException) as exc_info:
            CatalogTranslator.from_yaml(str(path))

        assert exc_info.value.original_exception is not None

    def test_should_raise_for_non_mapping_catalog(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- req\n- gte\n", encoding="utf-8")

        with pytest.raises(TranslationException):
            CatalogTranslator.from_yaml(str(path))


class TestAssertTranslation:
    """Test suite for translation through the Assert context."""

    def test_should_translate_failures_from_config(self, catalog_file):
        """Should build a catalog translator from configuration."""
        # Arrange
        config = AssertConfig(messages_file=str(catalog_file), locale="en")
        validator = Assert.from_config(config)

        # Act
        with pytest.raises(ValidationException) as exc_info:
            validator.value(15, attribute="age").gte(18).validate()

        # Assert
        assert str(exc_info.value) == "Invalid data"
        assert exc_info.value.errors == {"age": ["age: must be at least 18"]}

    def test_should_read_config_from_environment(self, monkeypatch, catalog_file):
        monkeypatch.setenv("ASSERTATION_MESSAGES_FILE", str(catalog_file))
        monkeypatch.setenv("ASSERTATION_LOCALE", "pt")

        validator = Assert.from_config()

        assert validator.value(None).req().errors() == ["é obrigatório"]
