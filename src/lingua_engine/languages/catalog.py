"""
Supported-language catalog.

A static, closed list of (code, display name) pairs. Detection results and
language selections outside this catalog are discarded.
"""

from pydantic import BaseModel, ConfigDict, Field


class LanguageInfo(BaseModel):
    """A catalog entry."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Language identifier (e.g., 'en', 'zh-Hans')")
    name: str = Field(..., description="Human-readable display name")


SUPPORTED_LANGUAGES: tuple[LanguageInfo, ...] = (
    # Major languages
    LanguageInfo(code="ar", name="Arabic"),
    LanguageInfo(code="zh-Hans", name="Chinese (Simplified)"),
    LanguageInfo(code="zh-Hant", name="Chinese (Traditional)"),
    LanguageInfo(code="nl", name="Dutch"),
    LanguageInfo(code="en", name="English"),
    LanguageInfo(code="fr", name="French"),
    LanguageInfo(code="de", name="German"),
    LanguageInfo(code="hi", name="Hindi"),
    LanguageInfo(code="id", name="Indonesian"),
    LanguageInfo(code="it", name="Italian"),
    LanguageInfo(code="ja", name="Japanese"),
    LanguageInfo(code="ko", name="Korean"),
    LanguageInfo(code="pl", name="Polish"),
    LanguageInfo(code="pt-BR", name="Portuguese (Brazil)"),
    LanguageInfo(code="ru", name="Russian"),
    LanguageInfo(code="es", name="Spanish"),
    LanguageInfo(code="th", name="Thai"),
    LanguageInfo(code="tr", name="Turkish"),
    LanguageInfo(code="uk", name="Ukrainian"),
    LanguageInfo(code="vi", name="Vietnamese"),
    # Additional European languages
    LanguageInfo(code="cs", name="Czech"),
    LanguageInfo(code="da", name="Danish"),
    LanguageInfo(code="fi", name="Finnish"),
    LanguageInfo(code="el", name="Greek"),
    LanguageInfo(code="he", name="Hebrew"),
    LanguageInfo(code="hu", name="Hungarian"),
    LanguageInfo(code="no", name="Norwegian"),
    LanguageInfo(code="ro", name="Romanian"),
    LanguageInfo(code="sv", name="Swedish"),
    # Additional Asian languages
    LanguageInfo(code="bn", name="Bengali"),
    LanguageInfo(code="ms", name="Malay"),
    LanguageInfo(code="ta", name="Tamil"),
    LanguageInfo(code="te", name="Telugu"),
)

_BY_CODE: dict[str, LanguageInfo] = {info.code: info for info in SUPPORTED_LANGUAGES}

SUPPORTED_CODES: frozenset[str] = frozenset(_BY_CODE)

# Identifier/region variants that do not reduce to a catalog code by prefix
_ALIASES: dict[str, str] = {
    "zh-cn": "zh-Hans",
    "zh-sg": "zh-Hans",
    "zh-tw": "zh-Hant",
    "zh-hk": "zh-Hant",
    "zh-mo": "zh-Hant",
    "iw": "he",
    "nb": "no",
    "nn": "no",
    "in": "id",
}


def is_supported(code: str) -> bool:
    """Return True if the code is an exact catalog entry."""
    return code in _BY_CODE


def display_name(code: str) -> str:
    """Return the catalog display name, or the code itself when unknown."""
    info = _BY_CODE.get(code)
    return info.name if info else code


def normalize_code(code: str) -> str:
    """Normalize a language code to its catalog form.

    Catalog codes (including regional ones like 'pt-BR') are kept as is.
    Anything else is reduced to its base language: 'en-US' -> 'en'.
    """
    if code in _BY_CODE:
        return code
    return code.split("-")[0].split("_")[0]


def find_matching_language(code: str) -> str | None:
    """Find the catalog code matching a (possibly variant) language code.

    Tries an exact match, then the normalized code, then the first catalog
    entry sharing the base language ('zh' -> 'zh-Hans').

    Args:
        code: Language code from an identifier or user input

    Returns:
        Catalog code, or None if nothing matches
    """
    if not code:
        return None

    if code in _BY_CODE:
        return code

    # Identifiers often report lowercase or underscore variants (zh-cn, zh_TW)
    key = code.lower().replace("_", "-")
    if key in _ALIASES:
        return _ALIASES[key]

    lowered = {c.lower(): c for c in _BY_CODE}
    canonical = lowered.get(key)
    if canonical:
        return canonical

    normalized = normalize_code(code).lower()
    if normalized in lowered:
        return lowered[normalized]

    for info in SUPPORTED_LANGUAGES:
        if info.code.lower().split("-")[0] == normalized:
            return info.code

    return None


def validate_codes(codes: list[str]) -> list[str]:
    """Map codes to catalog codes, dropping any that do not match."""
    matched: list[str] = []
    for code in codes:
        found = find_matching_language(code)
        if found is not None and found not in matched:
            matched.append(found)
    return matched


def sort_by_display_name(codes) -> list[str]:
    """Sort language codes alphabetically by display name."""
    return sorted(codes, key=lambda c: (display_name(c), c))
