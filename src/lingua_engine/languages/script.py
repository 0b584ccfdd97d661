"""
Writing-system categories used to decide whether romanization applies.
"""

from enum import Enum


class Script(str, Enum):
    """Writing system of a language."""

    LATIN = "latin"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    KOREAN = "korean"
    ARABIC = "arabic"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    THAI = "thai"
    HEBREW = "hebrew"
    GREEK = "greek"

    @property
    def needs_romanization(self) -> bool:
        """Whether this script needs romanization for Latin-alphabet readers."""
        return self is not Script.LATIN

    @property
    def is_rtl(self) -> bool:
        """Whether this script is written right-to-left."""
        return self in (Script.ARABIC, Script.HEBREW)

    @classmethod
    def detect(cls, code: str) -> "Script":
        """Detect the script from a language code.

        Unknown languages default to LATIN.
        """
        identifier = code.lower()

        if identifier.startswith("zh"):
            return cls.CHINESE
        if identifier.startswith("ar"):
            return cls.ARABIC

        base = identifier.split("-")[0]
        return _SCRIPT_BY_LANGUAGE.get(base, cls.LATIN)


_SCRIPT_BY_LANGUAGE: dict[str, Script] = {
    "ja": Script.JAPANESE,
    "ko": Script.KOREAN,
    # Cyrillic-based languages
    "ru": Script.CYRILLIC,
    "uk": Script.CYRILLIC,
    "be": Script.CYRILLIC,
    "bg": Script.CYRILLIC,
    "sr": Script.CYRILLIC,
    "mk": Script.CYRILLIC,
    # Devanagari
    "hi": Script.DEVANAGARI,
    "sa": Script.DEVANAGARI,
    "mr": Script.DEVANAGARI,
    "ne": Script.DEVANAGARI,
    "th": Script.THAI,
    "he": Script.HEBREW,
    "iw": Script.HEBREW,
    "el": Script.GREEK,
}
