"""
Romanization systems and the static script -> system table.
"""

from enum import Enum

from lingua_engine.languages import Script


class RomanizationSystem(str, Enum):
    """Romanization systems for converting non-Latin scripts to Latin."""

    PINYIN_WITH_TONES = "pinyin_with_tones"
    PINYIN_WITHOUT_TONES = "pinyin_without_tones"
    ROMAJI_HEPBURN = "romaji_hepburn"
    KOREAN_REVISED = "korean_revised"
    ARABIC_ALA_LC = "arabic_ala_lc"
    CYRILLIC_BGN_PCGN = "cyrillic_bgn_pcgn"
    LATIN_ANY = "latin_any"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def transform_id(self) -> str:
        """ICU transform identifier applied by the transliterator."""
        return _TRANSFORM_IDS[self]

    @property
    def strip_diacritics(self) -> bool:
        """Whether tone marks/accents are stripped in a second pass."""
        return self is RomanizationSystem.PINYIN_WITHOUT_TONES


_DISPLAY_NAMES = {
    RomanizationSystem.PINYIN_WITH_TONES: "Pinyin (with tones)",
    RomanizationSystem.PINYIN_WITHOUT_TONES: "Pinyin (no tones)",
    RomanizationSystem.ROMAJI_HEPBURN: "Romaji (Hepburn)",
    RomanizationSystem.KOREAN_REVISED: "Revised Romanization",
    RomanizationSystem.ARABIC_ALA_LC: "ALA-LC",
    RomanizationSystem.CYRILLIC_BGN_PCGN: "BGN/PCGN",
    RomanizationSystem.LATIN_ANY: "Latin (any script)",
}

_TRANSFORM_IDS = {
    RomanizationSystem.PINYIN_WITH_TONES: "Han-Latin",
    RomanizationSystem.PINYIN_WITHOUT_TONES: "Han-Latin",
    RomanizationSystem.ROMAJI_HEPBURN: "Any-Latin",
    RomanizationSystem.KOREAN_REVISED: "Hangul-Latin",
    RomanizationSystem.ARABIC_ALA_LC: "Arabic-Latin",
    RomanizationSystem.CYRILLIC_BGN_PCGN: "Cyrillic-Latin",
    RomanizationSystem.LATIN_ANY: "Any-Latin",
}

# First entry is the default system for the script. Latin needs none.
SYSTEMS_BY_SCRIPT: dict[Script, tuple[RomanizationSystem, ...]] = {
    Script.LATIN: (),
    Script.CHINESE: (
        RomanizationSystem.PINYIN_WITH_TONES,
        RomanizationSystem.PINYIN_WITHOUT_TONES,
    ),
    Script.JAPANESE: (RomanizationSystem.ROMAJI_HEPBURN,),
    Script.KOREAN: (RomanizationSystem.KOREAN_REVISED,),
    Script.ARABIC: (RomanizationSystem.ARABIC_ALA_LC,),
    Script.CYRILLIC: (RomanizationSystem.CYRILLIC_BGN_PCGN,),
    Script.DEVANAGARI: (RomanizationSystem.LATIN_ANY,),
    Script.THAI: (RomanizationSystem.LATIN_ANY,),
    Script.HEBREW: (RomanizationSystem.LATIN_ANY,),
    Script.GREEK: (RomanizationSystem.LATIN_ANY,),
}


def systems_for(language: str) -> tuple[RomanizationSystem, ...]:
    """Return the romanization systems available for a language."""
    return SYSTEMS_BY_SCRIPT.get(Script.detect(language), ())


def default_system(language: str) -> RomanizationSystem | None:
    """Return the default romanization system, or None for Latin-script languages."""
    systems = systems_for(language)
    return systems[0] if systems else None
