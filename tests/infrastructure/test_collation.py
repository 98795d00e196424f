import pytest

from core import InvalidLocaleError
from infrastructure.collation import build_collator, normalize_locale_name


class TestNormalizeLocaleName:

    @pytest.mark.parametrize("name, expected", [
        ("en", "en"),
        ("en-US", "en-US"),
        ("en_US", "en-US"),
        ("sv-SE", "sv-SE"),
        ("zh-Hant-TW", "zh-Hant-TW"),
        ("es-419", "es-419"),
        ("de-DE-u-co-phonebk", "de-DE-u-co-phonebk"),
    ])
    def test_valid(self, name, expected):
        assert normalize_locale_name(name) == expected

    @pytest.mark.parametrize("name", [
        "",
        "e",
        "en-US-",
        "en US",
        "en-",
        "en--US",
        "12-US",
    ])
    def test_invalid(self, name):
        with pytest.raises(InvalidLocaleError) as exc_info:
            normalize_locale_name(name)
        assert exc_info.value.locale_name == name

    def test_invalid_locale_rejected_before_icu_is_needed(self):
        with pytest.raises(InvalidLocaleError):
            build_collator("not a locale", False)


class TestBuildCollator:

    @pytest.fixture(autouse=True)
    def _icu(self):
        pytest.importorskip("icu")

    def test_default_strength_orders_case(self):
        collator = build_collator("en-US", False)
        assert collator.compare("a", "A") != 0

    def test_case_insensitive(self):
        collator = build_collator("en-US", True)
        assert collator.compare("a", "A") == 0
        assert collator.compare("a", "b") < 0

    def test_accents_still_matter_when_case_insensitive(self):
        collator = build_collator("fr-FR", True)
        assert collator.compare("cote", "côte") != 0
