#!/usr/bin/env python3
"""
Language Generators
===================
Phonology, lexicon, morphology and syntax engines.

Usage:
    from conlangkit.generators import LexiconBuilder, SentenceComposer

    rng = TrueRandom(seed=7)
    dictionary = LexiconBuilder(rng).generate(config)
    SentenceComposer(rng).compose(dictionary, config.morpho_syntax, config.grammar)
"""

from .entropy import (
    TrueRandom,
    get_rng,
)

from .entries import (
    LexicalEntry,
    NOUN,
    VERB,
    ADJECTIVE,
    PARTS_OF_SPEECH,
    EXPORT_FIELDS,
)

from .phonology import (
    PhonologyEngine,
    RuleCompileError,
    compile_rule,
    romanize,
    IPA_TO_ROMAN,
    TONE_MARKERS,
)

from .morphology import (
    MorphologyEngine,
    Typology,
    classify_typology,
    adposition_type,
)

from .lexicon import (
    LexiconBuilder,
    SEMANTIC_FIELDS,
    LOANWORD_SOURCES,
    generate_lexicon,
)

from .syntax import (
    SentenceComposer,
    ComposedSentence,
    INSUFFICIENT_VOCABULARY,
    generate_sentence,
)

__all__ = [
    # Random source
    'TrueRandom',
    'get_rng',
    # Entries
    'LexicalEntry',
    'NOUN',
    'VERB',
    'ADJECTIVE',
    'PARTS_OF_SPEECH',
    'EXPORT_FIELDS',
    # Phonology
    'PhonologyEngine',
    'RuleCompileError',
    'compile_rule',
    'romanize',
    'IPA_TO_ROMAN',
    'TONE_MARKERS',
    # Morphology
    'MorphologyEngine',
    'Typology',
    'classify_typology',
    'adposition_type',
    # Lexicon
    'LexiconBuilder',
    'SEMANTIC_FIELDS',
    'LOANWORD_SOURCES',
    'generate_lexicon',
    # Syntax
    'SentenceComposer',
    'ComposedSentence',
    'INSUFFICIENT_VOCABULARY',
    'generate_sentence',
]
