#!/usr/bin/env python3
"""
Morphology Engine
=================
Derivational morphology over existing dictionary entries.

Operations:
- Regular derivation: prefix or suffix a morpheme form
- Irregular derivation: replace the last vowel of the root
- Typology: heuristic label for the configured morphology
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .entries import LexicalEntry, wrap_ipa
from .entropy import TrueRandom, get_rng
from .phonology import romanize


# Irregularity rate separating agglutinative from fusional morphology
FUSIONAL_IRREGULARITY = 0.08


@dataclass
class Typology:
    """Heuristic morphological type of a language."""
    type: str
    description: str


class MorphologyEngine:
    """
    Builds derived words from root entries.

    Regular forms drop grammatical gender; irregular forms keep it.
    """

    def __init__(self, rng: TrueRandom = None):
        self.rng = rng or get_rng()

    def derive_regular(self, entry: LexicalEntry, morpheme) -> LexicalEntry:
        """Attach the morpheme form as a prefix or suffix."""
        base_ipa = entry.bare_ipa
        if morpheme.type == 'prefix':
            ipa = morpheme.form + base_ipa
            roman = romanize(morpheme.form) + entry.roman
        else:
            ipa = base_ipa + morpheme.form
            roman = entry.roman + romanize(morpheme.form)

        return LexicalEntry(
            ipa=wrap_ipa(ipa),
            roman=roman,
            pos=morpheme.func,
            meaning=f"{entry.meaning} ({morpheme.func})",
        )

    def derive_irregular(self,
                         entry: LexicalEntry,
                         morpheme,
                         vowels: Sequence[str]) -> Optional[LexicalEntry]:
        """
        Mutate the last vowel of the root to a random vowel.

        Returns None when there is no vowel inventory or the root has
        no vowel to mutate.
        """
        if not vowels:
            return None

        chars = list(entry.bare_ipa)
        vowel_positions = [i for i, c in enumerate(chars) if c in vowels]
        if not vowel_positions:
            return None

        chars[vowel_positions[-1]] = self.rng.choice(vowels)
        ipa = ''.join(chars)

        return LexicalEntry(
            ipa=wrap_ipa(ipa),
            roman=romanize(ipa),
            pos=morpheme.func,
            meaning=f"{entry.meaning} (irregular {morpheme.func})",
            gender=entry.gender,
        )


def classify_typology(morpho) -> Typology:
    """Label the morphology from morpheme count and irregularity."""
    morpheme_count = len(morpho.derivational_morphemes)
    rate = morpho.irregularity_rate

    if morpheme_count == 0:
        return Typology(
            "Isolating",
            "Words are invariant; grammatical relations are shown by word order.",
        )
    if morpheme_count > 2 and rate < FUSIONAL_IRREGULARITY:
        return Typology(
            "Agglutinative",
            "Affixes stack on roots, each carrying a single grammatical function.",
        )
    if rate >= FUSIONAL_IRREGULARITY:
        return Typology(
            "Fusional",
            "Affixes fuse several functions and irregular alternations are common.",
        )
    return Typology(
        "Analytic",
        "Most grammatical functions are carried by particles and word order.",
    )


def adposition_type(morpho) -> str:
    """Postpositional for SOV or postposition case marking."""
    if morpho.word_order == "SOV" or morpho.case_marking == "postposition":
        return "Postpositional"
    return "Prepositional"


__all__ = [
    'Typology',
    'MorphologyEngine',
    'classify_typology',
    'adposition_type',
]
