"""
Tests for the internationalisation (i18n) module.

Covers:
- t() lookup, fallback, and format-placeholder behaviour
- set_locale() / get_locale() / available_locales()
- Key parity between English and Japanese string tables
"""
from keyscope.i18n import available_locales, get_locale, set_locale, t
from keyscope.lang.en import STRINGS as EN
from keyscope.lang.ja import STRINGS as JA


class TestLocale:
    """Test locale getter / setter."""

    def setup_method(self):
        set_locale("en")

    def test_default_locale_is_en(self):
        assert get_locale() == "en"

    def test_set_locale_ja(self):
        set_locale("ja")
        assert get_locale() == "ja"

    def test_set_locale_invalid_falls_back_to_en(self):
        set_locale("zz")
        assert get_locale() == "en"

    def test_available_locales(self):
        assert available_locales() == ["en", "ja"]


class TestTranslation:
    """Test t() translation function."""

    def setup_method(self):
        set_locale("en")

    def teardown_method(self):
        set_locale("en")

    def test_format_placeholders(self):
        assert t("prompt.error_on_parse_custom_regex", pattern="(") == "Failed to parse custom regex: ("

    def test_active_locale_used(self):
        set_locale("ja")
        assert t("cli.no_files") == JA["cli.no_files"]

    def test_unknown_key_returns_key(self):
        assert t("does.not.exist") == "does.not.exist"

    def test_unknown_key_returns_key_in_ja(self):
        set_locale("ja")
        assert t("does.not.exist") == "does.not.exist"

    def test_missing_placeholder_returns_unformatted(self):
        assert t("cli.saved", other="x") == EN["cli.saved"]

    def test_tables_have_same_keys(self):
        assert set(EN) == set(JA)
