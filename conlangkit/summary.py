#!/usr/bin/env python3
"""
Grammar Summary
===============
Human-readable overview of a language configuration.

Sections: typology, syntax, morphology, phonology. Each section is a list
of (label, value) pairs; conlangkit.ui renders them.
"""

from typing import Dict, List, Tuple

from conlangkit.generators.morphology import classify_typology, adposition_type


ADJECTIVE_ORDER_LABELS = {"AN": "Adjective + Noun", "NA": "Noun + Adjective"}
GENDER_MODE_LABELS = {"none": "None", "mf": "Masculine/Feminine", "mfn": "Masculine/Feminine/Neuter"}


def build_summary(config) -> Dict[str, List[Tuple[str, str]]]:
    """Summarize typology, syntax, morphology and phonology."""
    phonology = config.phonology
    morpho = config.morpho_syntax
    grammar = config.grammar

    typology = classify_typology(morpho)
    tenses = ', '.join(f"{name}: -{marker}" for name, marker in grammar.tenses.items())
    agreement = "agreement" if morpho.gender_agreement else "no agreement"
    tones = f"Yes ({phonology.tones.count} tones)" if phonology.tones.enabled else "No"

    return {
        'Typology': [
            ("Morphological type", f"{typology.type} - {typology.description}"),
            ("Adpositions", adposition_type(morpho)),
        ],
        'Syntax': [
            ("Basic word order", morpho.word_order),
            ("Adjective order", ADJECTIVE_ORDER_LABELS[morpho.adjective_order]),
        ],
        'Morphology': [
            ("Case marking",
             f"subject: -{grammar.subject_marker}, object: -{grammar.object_marker} ({morpho.case_marking})"),
            ("Plural", f"-{grammar.plural_marker}"),
            ("Verb tenses", tenses),
            ("Grammatical gender", f"{GENDER_MODE_LABELS[morpho.grammatical_gender]} ({agreement})"),
            ("Irregularity", f"{round(morpho.irregularity_rate * 100)}%"),
        ],
        'Phonology': [
            ("Phonemes", f"{len(phonology.consonants)} consonants, {len(phonology.vowels)} vowels"),
            ("Syllable structure", ', '.join(phonology.syllable_structures)),
            ("Tones", tones),
        ],
    }


__all__ = [
    'build_summary',
]
