#!/usr/bin/env python3
"""
Lexicon Data Classes
====================
Dictionary entries shared by the lexicon, morphology and syntax engines.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional


NOUN = "noun"
VERB = "verb"
ADJECTIVE = "adjective"

PARTS_OF_SPEECH = (NOUN, VERB, ADJECTIVE)

EXPORT_FIELDS = ("ipa", "roman", "pos", "meaning", "gender")


@dataclass(frozen=True)
class LexicalEntry:
    """
    A dictionary word.

    ipa is stored wrapped in slashes ("/ta/"); roman is the lexicon's
    uniqueness key. pos is noun/verb/adjective for roots and the
    morpheme function label for derived words.
    """
    ipa: str
    roman: str
    pos: str
    meaning: str
    gender: Optional[str] = None

    @property
    def bare_ipa(self) -> str:
        """IPA form without the slash delimiters."""
        if len(self.ipa) >= 2 and self.ipa.startswith('/') and self.ipa.endswith('/'):
            return self.ipa[1:-1]
        return self.ipa

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def wrap_ipa(ipa: str) -> str:
    return f"/{ipa}/"


__all__ = [
    'NOUN',
    'VERB',
    'ADJECTIVE',
    'PARTS_OF_SPEECH',
    'EXPORT_FIELDS',
    'LexicalEntry',
    'wrap_ipa',
]
