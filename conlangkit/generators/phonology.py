#!/usr/bin/env python3
"""
Phonology Engine
================
Sound system of a generated language.

Features:
- Word synthesis from a phoneme inventory and C/V syllable templates
- Contextual rewrite rules ("n>m / _p") applied in declaration order
- Superscript tone marks
- Fixed IPA -> Latin romanization table
- Loanword assimilation onto the nearest available phonemes

Usage:
    from conlangkit.generators.phonology import PhonologyEngine, romanize

    engine = PhonologyEngine(rng)
    word = engine.synthesize_word(['p', 't', 'k'], ['a', 'i', 'u'], ['CV'])
    romanize('ʃaŋ')  # 'shang'
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from .entropy import TrueRandom, get_rng

logger = logging.getLogger(__name__)


# =============================================================================
# Static Tables
# =============================================================================

# Superscript digits 1-9, indexed by tone - 1
TONE_MARKERS = ("¹", "²", "³", "⁴", "⁵", "⁶", "⁷", "⁸", "⁹")

IPA_TO_ROMAN = MappingProxyType({
    'p': 'p', 't': 't', 'k': 'k', 'b': 'b', 'd': 'd', 'g': 'g', 'm': 'm', 'n': 'n',
    's': 's', 'z': 'z', 'h': 'h', 'r': 'r', 'j': 'y', 'w': 'w', 'a': 'a', 'i': 'i',
    'u': 'u', 'e': 'e', 'o': 'o', 'ʃ': 'sh', 'ʧ': 'ch', 'ʤ': 'j', 'ŋ': 'ng',
    'θ': 'th', 'ð': 'dh',
    **{marker: marker for marker in TONE_MARKERS},
})

# Source letter -> (candidates in preference order, inventory searched)
# C = consonants, V = vowels, CV = consonants then vowels
ASSIMILATION_TABLE = MappingProxyType({
    'p': (('p', 'b', 'f'), 'C'),
    'b': (('b', 'p', 'v'), 'C'),
    't': (('t', 'd', 's'), 'C'),
    'd': (('d', 't', 'z'), 'C'),
    'k': (('k', 'g', 'h', 'x'), 'C'),
    'c': (('k', 'g', 's'), 'C'),
    'g': (('g', 'k', 'ʤ'), 'C'),
    'f': (('f', 'p', 'v'), 'C'),
    'v': (('v', 'b', 'f'), 'C'),
    's': (('s', 'z', 't', 'ʃ'), 'C'),
    'z': (('z', 's', 'd'), 'C'),
    'm': (('m', 'n'), 'C'),
    'n': (('n', 'm', 'ŋ'), 'C'),
    'l': (('l', 'r', 'j'), 'C'),
    'r': (('r', 'l', 'd'), 'C'),
    'h': (('h',), 'C'),
    'j': (('ʤ', 'g', 'z'), 'C'),
    'y': (('j', 'i'), 'CV'),
    'w': (('w', 'u'), 'CV'),
    'q': (('k', 'g'), 'C'),
    'x': (('s', 'z'), 'C'),
    'a': (('a', 'e', 'o'), 'V'),
    'e': (('e', 'i', 'a'), 'V'),
    'i': (('i', 'e', 'u'), 'V'),
    'o': (('o', 'u', 'a'), 'V'),
    'u': (('u', 'o', 'i'), 'V'),
})


def romanize(ipa: str) -> str:
    """Transliterate an IPA string; unmapped characters pass through."""
    return ''.join(IPA_TO_ROMAN.get(char, char) for char in ipa)


# =============================================================================
# Rule Compilation
# =============================================================================

class RuleCompileError(ValueError):
    """A phonological rule could not be turned into a matcher."""


Segment = FrozenSet[str]


@dataclass(frozen=True)
class CompiledRule:
    """
    Rewrite rule reduced to per-position character sets.

    The rule fires at position i when target matches at i, before matches
    the characters ending at i and after matches the characters following
    the target. Contexts are checked but never consumed.
    """
    target: Tuple[Segment, ...]
    replacement: str
    before: Tuple[Segment, ...] = ()
    after: Tuple[Segment, ...] = ()

    def apply(self, word: str) -> str:
        result = []
        width = len(self.target)
        i = 0
        while i < len(word):
            if (_matches_at(self.target, word, i)
                    and _matches_at(self.before, word, i - len(self.before))
                    and _matches_at(self.after, word, i + width)):
                result.append(self.replacement)
                i += width
            else:
                result.append(word[i])
                i += 1
        return ''.join(result)


def _matches_at(segments: Tuple[Segment, ...], word: str, pos: int) -> bool:
    if pos < 0 or pos + len(segments) > len(word):
        return False
    return all(word[pos + offset] in seg for offset, seg in enumerate(segments))


def _parse_segments(text: str, vowel_class: Optional[Segment]) -> Tuple[Segment, ...]:
    """
    Split rule text into segments.

    A segment is a literal character, a bracketed set like [ptk], or
    (when vowel_class is given) V for any vowel.
    """
    segments = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == '[':
            end = text.find(']', i + 1)
            if end == -1:
                raise RuleCompileError(f"unclosed '[' in '{text}'")
            members = text[i + 1:end]
            if not members:
                raise RuleCompileError(f"empty character set in '{text}'")
            if '[' in members:
                raise RuleCompileError(f"nested '[' in '{text}'")
            segments.append(frozenset(members))
            i = end + 1
            continue
        if char == ']':
            raise RuleCompileError(f"unmatched ']' in '{text}'")
        if char == 'V' and vowel_class is not None:
            segments.append(vowel_class)
        else:
            segments.append(frozenset(char))
        i += 1
    return tuple(segments)


@lru_cache(maxsize=256)
def compile_rule(pattern: str, context: str, vowels: Tuple[str, ...]) -> CompiledRule:
    """
    Compile "from>to" plus an optional "before_after" context.

    Raises:
        RuleCompileError: If the pattern or context is malformed
    """
    parts = pattern.split('>')
    if len(parts) != 2:
        raise RuleCompileError(f"expected exactly one '>' in '{pattern}'")
    source, replacement = (p.strip() for p in parts)
    if not source:
        raise RuleCompileError(f"empty match in '{pattern}'")
    target = _parse_segments(source, None)

    context = context.strip()
    if '_' not in context:
        return CompiledRule(target=target, replacement=replacement)
    if context.count('_') > 1:
        raise RuleCompileError(f"more than one '_' in context '{context}'")

    vowel_class = frozenset(''.join(vowels))
    before, after = context.split('_')
    return CompiledRule(
        target=target,
        replacement=replacement,
        before=_parse_segments(before, vowel_class),
        after=_parse_segments(after, vowel_class),
    )


# =============================================================================
# Phonology Engine
# =============================================================================

class PhonologyEngine:
    """
    Synthesizes and transforms word forms.

    All random draws go through the injected random source.
    """

    def __init__(self, rng: TrueRandom = None):
        self.rng = rng or get_rng()

    def synthesize_word(self,
                        consonants: Sequence[str],
                        vowels: Sequence[str],
                        templates: Sequence[str]) -> Optional[str]:
        """
        Build one word from a uniformly chosen syllable template.

        Returns None when the inventory or the template set is empty.
        """
        if not consonants or not vowels or not templates:
            return None

        template = self.rng.choice(templates)
        word = []
        for slot in template:
            if slot == 'C':
                word.append(self.rng.choice(consonants))
            elif slot == 'V':
                word.append(self.rng.choice(vowels))
        return ''.join(word)

    def apply_rules(self, word: str, rules: Iterable, vowels: Sequence[str]) -> str:
        """
        Apply phonological rules in order, each to the previous result.

        Malformed rules are logged and skipped.
        """
        vowels = tuple(vowels)
        for rule in rules:
            try:
                compiled = compile_rule(rule.pattern, rule.context, vowels)
            except RuleCompileError as e:
                logger.warning(f"Skipping invalid phonological rule {rule.pattern!r} / {rule.context!r}: {e}")
                continue
            word = compiled.apply(word)
        return word

    def apply_tone(self, word: str, tones) -> str:
        """Append one random tone mark when tones are enabled."""
        if not tones.enabled:
            return word
        tone = self.rng.randint(1, tones.count)
        return word + TONE_MARKERS[tone - 1]

    def generate_word(self, phonology) -> Optional[str]:
        """Synthesize a word, run the sound rules and add a tone."""
        word = self.synthesize_word(
            phonology.consonants,
            phonology.vowels,
            phonology.syllable_structures,
        )
        if word is None:
            return None
        word = self.apply_rules(word, phonology.phonological_rules, phonology.vowels)
        return self.apply_tone(word, phonology.tones)

    @staticmethod
    def romanize(ipa: str) -> str:
        return romanize(ipa)

    @staticmethod
    def assimilate_loanword(word: str,
                            consonants: Sequence[str],
                            vowels: Sequence[str]) -> str:
        """
        Map a foreign word onto the closest sounds of the inventory.

        Each letter takes the first listed candidate present in the
        inventory, else the inventory's first phoneme. Letters without
        an entry are dropped. With an empty inventory the word is
        returned unchanged.
        """
        if not consonants or not vowels:
            return word
        word = word.lower()

        inventories = {
            'C': list(consonants),
            'V': list(vowels),
            'CV': list(consonants) + list(vowels),
        }
        result = []
        for char in word:
            entry = ASSIMILATION_TABLE.get(char)
            if entry is None:
                continue
            candidates, kind = entry
            result.append(_closest_sound(candidates, inventories[kind]))
        return ''.join(result)


def _closest_sound(candidates: Sequence[str], inventory: Sequence[str]) -> str:
    for candidate in candidates:
        if candidate in inventory:
            return candidate
    return inventory[0] if inventory else ''


__all__ = [
    'TONE_MARKERS',
    'IPA_TO_ROMAN',
    'ASSIMILATION_TABLE',
    'RuleCompileError',
    'CompiledRule',
    'compile_rule',
    'romanize',
    'PhonologyEngine',
]
