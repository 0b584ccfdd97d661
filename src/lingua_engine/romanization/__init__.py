"""
Romanization component.

Exports:
    - Romanizer: Script-to-Latin transliteration with a static system table
    - RomanizationSystem: Supported romanization systems
    - Transliterator: Protocol for the external transform capability
    - create_transliterator: Factory function
"""

from .factory import create_transliterator
from .interface import Transliterator
from .models import SYSTEMS_BY_SCRIPT, RomanizationSystem, default_system, systems_for
from .romanizer import Romanizer, strip_diacritics

__all__ = [
    "create_transliterator",
    "Transliterator",
    "Romanizer",
    "RomanizationSystem",
    "SYSTEMS_BY_SCRIPT",
    "default_system",
    "systems_for",
    "strip_diacritics",
]
