#!/usr/bin/env python3
"""
Sentence Composer
=================
Builds example sentences from a generated dictionary.

Steps:
- Pick subject, object and verb
- Optionally modify the subject with an adjective (with gender agreement)
- Mark case on subject and object, tense on the verb
- Order the constituents by the configured word order
- Append an English gloss
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Sequence

from .entries import LexicalEntry, NOUN, VERB, ADJECTIVE
from .entropy import TrueRandom, get_rng


INSUFFICIENT_VOCABULARY = "Not enough words in the dictionary."

AGREEMENT_SUFFIXES = MappingProxyType({
    "masculine": "o",
    "feminine": "a",
    "neuter": "e",
})

ADJECTIVE_PROBABILITY = 0.5


@dataclass
class ComposedSentence:
    """A surface sentence with its gloss."""
    surface: str
    gloss: str
    tense: str

    def __str__(self) -> str:
        return f"{self.surface}. ('{self.gloss}')"


class SentenceComposer:
    """
    Composes sentences from a dictionary snapshot.

    The dictionary is only read, never modified.
    """

    def __init__(self, rng: TrueRandom = None):
        self.rng = rng or get_rng()

    def compose(self, dictionary: Sequence[LexicalEntry], morpho, grammar) -> str:
        """
        Compose one sentence.

        Returns INSUFFICIENT_VOCABULARY when there are fewer than two
        distinct nouns or no verb.
        """
        sentence = self.compose_parts(dictionary, morpho, grammar)
        if sentence is None:
            return INSUFFICIENT_VOCABULARY
        return str(sentence)

    def compose_many(self, dictionary: Sequence[LexicalEntry], morpho, grammar, count: int = 3) -> List[str]:
        return [self.compose(dictionary, morpho, grammar) for _ in range(count)]

    def compose_parts(self, dictionary: Sequence[LexicalEntry], morpho, grammar) -> Optional[ComposedSentence]:
        """Compose one sentence, or None if the vocabulary is insufficient."""
        nouns = [w for w in dictionary if w.pos == NOUN]
        verbs = [w for w in dictionary if w.pos == VERB]
        adjectives = [w for w in dictionary if w.pos == ADJECTIVE]

        if len(nouns) < 2 or not verbs:
            return None

        subject = self.rng.choice(nouns)
        # Redrawing until the object differs is the same as drawing from the rest
        objects = [n for n in nouns if n.roman != subject.roman]
        if not objects:
            return None
        obj = self.rng.choice(objects)
        verb = self.rng.choice(verbs)

        subject_phrase = subject.roman
        subject_gloss = subject.meaning

        if adjectives and self.rng.random() > ADJECTIVE_PROBABILITY:
            adjective = self.rng.choice(adjectives)
            adjective_form = self._agree(adjective.roman, subject, morpho)
            if morpho.adjective_order == "AN":
                subject_phrase = f"{adjective_form} {subject.roman}"
            else:
                subject_phrase = f"{subject.roman} {adjective_form}"
            subject_gloss = f"{adjective.meaning} {subject.meaning}"

        constituents = {
            'S': self._mark_case(subject_phrase, grammar.subject_marker, morpho.case_marking),
            'O': self._mark_case(obj.roman, grammar.object_marker, morpho.case_marking),
        }

        tense = self.rng.choice(list(grammar.tenses))
        constituents['V'] = f"{verb.roman}-{grammar.tenses[tense]}"

        surface = ' '.join(constituents[slot] for slot in morpho.word_order)
        gloss = f"The {subject_gloss} {verb.meaning} ({tense}) the {obj.meaning}"
        return ComposedSentence(surface=surface, gloss=gloss, tense=tense)

    @staticmethod
    def _agree(adjective: str, noun: LexicalEntry, morpho) -> str:
        if not morpho.gender_agreement or morpho.grammatical_gender == "none":
            return adjective
        suffix = AGREEMENT_SUFFIXES.get(noun.gender)
        if suffix:
            return f"{adjective}-{suffix}"
        return adjective

    @staticmethod
    def _mark_case(phrase: str, marker: str, case_marking: str) -> str:
        if case_marking == "suffix":
            return f"{phrase}-{marker}"
        if case_marking == "prefix":
            return f"{marker}-{phrase}"
        if case_marking == "postposition":
            return f"{phrase} {marker}"
        return phrase


def generate_sentence(dictionary: Sequence[LexicalEntry], config, rng: TrueRandom = None) -> str:
    """Quick generation function."""
    return SentenceComposer(rng).compose(dictionary, config.morpho_syntax, config.grammar)


__all__ = [
    'INSUFFICIENT_VOCABULARY',
    'AGREEMENT_SUFFIXES',
    'ComposedSentence',
    'SentenceComposer',
    'generate_sentence',
]
