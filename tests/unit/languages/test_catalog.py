"""
Tests for the supported-language catalog.
"""

from lingua_engine.languages import (
    SUPPORTED_CODES,
    SUPPORTED_LANGUAGES,
    display_name,
    find_matching_language,
    is_supported,
    normalize_code,
    sort_by_display_name,
    validate_codes,
)


class TestCatalogContents:
    """Tests for the static catalog."""

    def test_catalog_has_unique_codes(self):
        """Test every catalog code appears once."""
        codes = [info.code for info in SUPPORTED_LANGUAGES]
        assert len(codes) == len(set(codes))
        assert set(codes) == SUPPORTED_CODES

    def test_regional_variants_present(self):
        """Test script and regional variants are first-class entries."""
        assert is_supported("zh-Hans")
        assert is_supported("zh-Hant")
        assert is_supported("pt-BR")

    def test_unknown_code_not_supported(self):
        """Test codes outside the catalog are rejected."""
        assert not is_supported("xx")
        assert not is_supported("zh")


class TestDisplayName:
    """Tests for display_name."""

    def test_known_code(self):
        """Test catalog codes map to their names."""
        assert display_name("fr") == "French"
        assert display_name("zh-Hans") == "Chinese (Simplified)"

    def test_unknown_code_falls_back_to_code(self):
        """Test unknown codes are returned unchanged."""
        assert display_name("xx") == "xx"


class TestNormalizeCode:
    """Tests for normalize_code."""

    def test_catalog_code_kept(self):
        """Test regional catalog codes are not stripped."""
        assert normalize_code("pt-BR") == "pt-BR"

    def test_region_stripped(self):
        """Test non-catalog regional codes reduce to the base language."""
        assert normalize_code("en-US") == "en"
        assert normalize_code("fr_CA") == "fr"


class TestFindMatchingLanguage:
    """Tests for find_matching_language."""

    def test_exact_match(self):
        assert find_matching_language("es") == "es"

    def test_identifier_chinese_variants(self):
        """Test identifier-style Chinese codes map to script variants."""
        assert find_matching_language("zh-cn") == "zh-Hans"
        assert find_matching_language("zh-tw") == "zh-Hant"
        assert find_matching_language("zh_TW") == "zh-Hant"

    def test_case_insensitive(self):
        assert find_matching_language("ZH-HANS") == "zh-Hans"

    def test_base_prefix(self):
        """Test a bare base language matches the first catalog variant."""
        assert find_matching_language("zh") == "zh-Hans"
        assert find_matching_language("pt") == "pt-BR"

    def test_legacy_codes(self):
        """Test legacy identifier codes map to current catalog codes."""
        assert find_matching_language("iw") == "he"
        assert find_matching_language("nb") == "no"

    def test_regional_code(self):
        assert find_matching_language("en-GB") == "en"

    def test_no_match(self):
        assert find_matching_language("tlh") is None
        assert find_matching_language("") is None


class TestValidateCodes:
    """Tests for validate_codes."""

    def test_drops_unknown_and_duplicates(self):
        """Test unknown codes are dropped and variants deduplicated."""
        assert validate_codes(["en", "xx", "en-US", "zh-cn"]) == ["en", "zh-Hans"]


class TestSortByDisplayName:
    """Tests for sort_by_display_name."""

    def test_sorted_by_name_not_code(self):
        """Test ordering follows display names: German < Spanish < Swedish."""
        assert sort_by_display_name(["sv", "es", "de"]) == ["de", "es", "sv"]

    def test_name_order_differs_from_code_order(self):
        """Test 'el' (Greek) sorts after 'de' (German) and 'fr' (French)."""
        assert sort_by_display_name(["el", "fr", "de"]) == ["fr", "de", "el"]
