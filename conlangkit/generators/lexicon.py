#!/usr/bin/env python3
"""
Lexicon Builder
===============
Builds the dictionary of a generated language.

Pipeline:
1. Pick meanings from semantic fields (no repeats)
2. Mint a unique word form for each meaning
3. Assign part of speech and grammatical gender
4. Derive regular and irregular forms from every configured morpheme
5. Borrow and assimilate a few loanwords

Usage:
    from conlangkit.generators.lexicon import LexiconBuilder

    builder = LexiconBuilder(rng)
    dictionary = builder.generate(config)
"""

import logging
from types import MappingProxyType
from typing import List, Optional, Sequence, Set, Tuple

from .entries import LexicalEntry, NOUN, PARTS_OF_SPEECH, wrap_ipa
from .entropy import TrueRandom, get_rng
from .morphology import MorphologyEngine
from .phonology import PhonologyEngine, romanize

logger = logging.getLogger(__name__)


# =============================================================================
# Semantic Fields
# =============================================================================

SEMANTIC_FIELDS = MappingProxyType({
    'nature': (
        "sun", "moon", "star", "sky", "earth", "sea", "river", "mountain", "tree",
        "flower", "rain", "wind", "snow", "fire", "water", "stone", "cloud",
        "forest", "desert", "island", "valley", "lightning", "sand",
    ),
    'animals': (
        "dog", "cat", "bird", "fish", "horse", "bear", "wolf", "lion", "tiger",
        "snake", "insect", "spider", "eagle", "mouse", "cow", "sheep",
        "monkey", "deer", "fox", "rabbit", "bee", "butterfly",
    ),
    'emotions': (
        "love", "hate", "joy", "sadness", "anger", "fear", "surprise", "hope",
        "pride", "shame", "calm", "anxiety", "courage", "desire", "trust",
        "pity", "envy", "gratitude", "guilt", "curiosity",
    ),
    'actions': (
        "go", "come", "eat", "drink", "sleep", "see", "hear", "speak", "run",
        "walk", "give", "take", "make", "do", "know", "think", "love", "work",
        "play", "sing", "die", "live", "fight", "read", "write",
    ),
    'tools': (
        "knife", "hammer", "axe", "rope", "wheel", "boat", "net", "needle",
        "sword", "shield", "bow", "arrow", "pen", "book", "cup", "pot", "key",
        "clock", "mirror", "lamp", "plow", "cart", "bridge", "road",
    ),
    'society': (
        "person", "man", "woman", "child", "family", "king", "queen", "law",
        "war", "peace", "city", "house", "village", "god", "money", "art",
        "music", "story", "name", "word", "language", "friend", "enemy", "chief",
    ),
    'concepts': (
        "time", "space", "life", "death", "good", "evil", "truth", "lie",
        "beauty", "power", "knowledge", "freedom", "justice", "luck", "dream",
        "soul", "mind", "idea", "change", "order", "chaos", "number",
    ),
    'body': (
        "head", "face", "eye", "ear", "nose", "mouth", "hand", "foot", "heart",
        "blood", "bone", "skin", "hair", "voice", "leg", "arm", "finger", "tooth",
    ),
    'food': (
        "bread", "meat", "fruit", "seed", "salt", "honey", "milk", "egg",
        "root", "leaf", "berry", "grain", "wine", "oil", "cheese", "herb",
    ),
    'places': (
        "home", "market", "temple", "field", "cave", "port", "castle",
        "tower", "wall", "gate", "tomb", "throne", "garden", "lake", "shore",
    ),
})

# Japanese field labels accepted alongside the English keys
SEMANTIC_FIELD_ALIASES = MappingProxyType({
    "自然": "nature", "動物": "animals", "感情": "emotions", "行動": "actions",
    "道具": "tools", "社会": "society", "思考": "concepts", "身体": "body",
    "食物": "food", "場所": "places",
})

LOANWORD_SOURCES = (
    "computer", "internet", "phone", "radio", "television", "music", "art",
    "game", "food", "water",
)

# Attempts to find an unused romanized form before a meaning is dropped
MAX_FORM_ATTEMPTS = 10

DERIVATION_PROBABILITY = 0.5


def resolve_field(name: str) -> Optional[str]:
    """Map a field label to a semantic field key, or None if unknown."""
    key = name.strip()
    if key in SEMANTIC_FIELD_ALIASES:
        return SEMANTIC_FIELD_ALIASES[key]
    key = key.lower()
    if key in SEMANTIC_FIELDS:
        return key
    return None


# =============================================================================
# Lexicon Builder
# =============================================================================

class LexiconBuilder:
    """
    Generates a complete dictionary from a LanguageConfig.

    Every call returns a fresh tuple; nothing is merged with earlier
    results and no entry is modified after it is created.
    """

    def __init__(self, rng: TrueRandom = None):
        self.rng = rng or get_rng()
        self.phonology = PhonologyEngine(self.rng)
        self.morphology = MorphologyEngine(self.rng)

    def generate(self, config) -> Tuple[LexicalEntry, ...]:
        """
        Build the dictionary.

        Returns
        -------
        tuple[LexicalEntry]
            Roots in meaning order, then derived words, then loanwords.
            May hold fewer roots than requested when forms collide or
            the semantic fields run dry.
        """
        romans: Set[str] = set()

        meanings = self.select_meanings(config.lexicon.semantic_fields, config.lexicon.root_count)
        roots = self._build_roots(meanings, config, romans)
        derived = self._derive(roots, config, romans)
        loanwords = self._borrow(config, romans) if config.lexicon.loanwords else []

        logger.debug(
            f"Generated {len(roots)} roots, {len(derived)} derived words, "
            f"{len(loanwords)} loanwords"
        )
        return tuple(roots + derived + loanwords)

    # -------------------------------------------------------------------------
    # Meanings
    # -------------------------------------------------------------------------

    def select_meanings(self, fields: Sequence[str], root_count: int) -> List[str]:
        """
        Walk the fields cyclically, taking one unused meaning per step.

        Unknown field names are used as a meaning themselves. Gives up
        after 2 * root_count steps.
        """
        meanings: List[str] = []
        if not fields or root_count <= 0:
            return meanings

        used: Set[str] = set()
        step = 0
        while len(meanings) < root_count:
            field_name = fields[step % len(fields)]
            key = resolve_field(field_name)

            if key is not None:
                available = [w for w in SEMANTIC_FIELDS[key] if w not in used]
                if available:
                    meaning = self.rng.choice(available)
                    meanings.append(meaning)
                    used.add(meaning)
            elif field_name not in used:
                meanings.append(field_name)
                used.add(field_name)

            step += 1
            if step > root_count * 2 and len(meanings) < root_count:
                logger.debug(f"Semantic fields exhausted after {len(meanings)}/{root_count} meanings")
                break

        return meanings

    # -------------------------------------------------------------------------
    # Roots
    # -------------------------------------------------------------------------

    def _build_roots(self, meanings: List[str], config, romans: Set[str]) -> List[LexicalEntry]:
        phonology = config.phonology
        if not (phonology.consonants and phonology.vowels and phonology.syllable_structures):
            if meanings:
                logger.warning("Cannot synthesize words: phoneme inventory or syllable structures are empty")
            return []

        genders = config.morpho_syntax.genders
        roots = []
        for meaning in meanings:
            form = self._mint_form(phonology, romans)
            if form is None:
                logger.debug(f"Dropped '{meaning}': no unused form after {MAX_FORM_ATTEMPTS} attempts")
                continue
            ipa, roman = form
            romans.add(roman)

            pos = self.rng.choice(PARTS_OF_SPEECH)
            gender = None
            if pos == NOUN and genders:
                gender = self.rng.choice(genders)

            roots.append(LexicalEntry(
                ipa=wrap_ipa(ipa),
                roman=roman,
                pos=pos,
                meaning=meaning,
                gender=gender,
            ))
        return roots

    def _mint_form(self, phonology, romans: Set[str]) -> Optional[Tuple[str, str]]:
        """Generate an (ipa, roman) pair whose roman is not taken yet."""
        for _ in range(MAX_FORM_ATTEMPTS):
            ipa = self.phonology.generate_word(phonology)
            if ipa is None:
                return None
            roman = romanize(ipa)
            if roman not in romans:
                return ipa, roman
        return None

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def _derive(self, roots: List[LexicalEntry], config, romans: Set[str]) -> List[LexicalEntry]:
        morpho = config.morpho_syntax
        vowels = config.phonology.vowels
        derived = []

        for morpheme in morpho.derivational_morphemes:
            for entry in roots:
                if not self.rng.chance(DERIVATION_PROBABILITY):
                    continue
                if self.rng.chance(morpho.irregularity_rate):
                    word = self.morphology.derive_irregular(entry, morpheme, vowels)
                else:
                    word = self.morphology.derive_regular(entry, morpheme)

                if word is None:
                    continue
                if word.roman in romans:
                    logger.debug(f"Skipped derived form '{word.roman}' ({word.meaning}): already in dictionary")
                    continue
                romans.add(word.roman)
                derived.append(word)

        return derived

    # -------------------------------------------------------------------------
    # Loanwords
    # -------------------------------------------------------------------------

    def _borrow(self, config, romans: Set[str]) -> List[LexicalEntry]:
        phonology = config.phonology
        loanwords = []

        for _ in range(config.lexicon.loanword_count):
            source = self.rng.choice(LOANWORD_SOURCES)
            ipa = self.phonology.assimilate_loanword(source, phonology.consonants, phonology.vowels)
            roman = romanize(ipa)
            if not roman or roman in romans:
                continue
            romans.add(roman)
            loanwords.append(LexicalEntry(
                ipa=wrap_ipa(ipa),
                roman=roman,
                pos=NOUN,
                meaning=f"{source} (loanword)",
            ))

        return loanwords


def generate_lexicon(config, rng: TrueRandom = None) -> Tuple[LexicalEntry, ...]:
    """Quick generation function."""
    return LexiconBuilder(rng).generate(config)


__all__ = [
    'SEMANTIC_FIELDS',
    'SEMANTIC_FIELD_ALIASES',
    'LOANWORD_SOURCES',
    'MAX_FORM_ATTEMPTS',
    'resolve_field',
    'LexiconBuilder',
    'generate_lexicon',
]
