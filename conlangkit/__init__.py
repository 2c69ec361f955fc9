#!/usr/bin/env python3
"""
conlangkit - Constructed Language Generator
===========================================

Procedurally generates a constructed language: phoneme inventory,
syllable-structured vocabulary, derivational morphology, loanwords and
example sentences, all driven by a LanguageConfig.

Quick Start
-----------
    from conlangkit import ConlangKit, LanguageConfig

    kit = ConlangKit(LanguageConfig.from_dict({
        'preset': 'japanese',
        'lexicon': {'semantic_fields': ['nature', 'animals'], 'root_count': 40},
    }), seed=42)

    dictionary = kit.generate()
    for sentence in kit.sentences(3):
        print(sentence)

Modules
-------
    conlangkit.generators - Phonology, lexicon, morphology, syntax engines
    conlangkit.config     - Language configuration and presets
    conlangkit.export     - JSON / CSV export
    conlangkit.ui         - Rich terminal rendering

CLI Usage
---------
    python -m conlangkit generate --preset japanese -n 50
    python -m conlangkit romanize "ʃaŋ"
    python -m conlangkit presets
"""

__version__ = "0.1.0"
__author__ = "conlangkit"

import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Ensure parent directory is in path for the top-level settings module
_parent = Path(__file__).parent.parent
if str(_parent) not in sys.path:
    sys.path.insert(0, str(_parent))

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import config

from .config import (
    LanguageConfig,
    PhonologyConfig,
    LexiconConfig,
    MorphoSyntaxConfig,
    GrammarTable,
    ToneConfig,
    PhonologicalRule,
    DerivationalMorpheme,
    load_language_config,
    get_preset,
    list_presets,
    default_config,
)

from .generators import (
    TrueRandom,
    get_rng,
    LexicalEntry,
    PhonologyEngine,
    MorphologyEngine,
    LexiconBuilder,
    SentenceComposer,
    INSUFFICIENT_VOCABULARY,
    romanize,
    generate_lexicon,
    generate_sentence,
)


# =============================================================================
# Main Interface
# =============================================================================

class ConlangKit:
    """
    Main interface for language generation.

    Holds one configuration, one random source and the current
    dictionary. generate() swaps in a complete new dictionary; sentence
    composition always reads the snapshot current at call time.
    """

    def __init__(self, config: LanguageConfig = None, seed: Optional[int] = None):
        self.config = config or default_config()
        self.rng = TrueRandom(seed) if seed is not None else get_rng()
        self._lexicon = LexiconBuilder(self.rng)
        self._composer = SentenceComposer(self.rng)
        self._dictionary: Tuple[LexicalEntry, ...] = ()

    @property
    def dictionary(self) -> Tuple[LexicalEntry, ...]:
        return self._dictionary

    def generate(self, config: LanguageConfig = None) -> Tuple[LexicalEntry, ...]:
        """Generate a new dictionary, replacing the current one."""
        if config is not None:
            self.config = config
        self._dictionary = self._lexicon.generate(self.config)
        return self._dictionary

    def sentence(self) -> str:
        return self._composer.compose(
            self._dictionary, self.config.morpho_syntax, self.config.grammar
        )

    def sentences(self, count: int = 3) -> List[str]:
        return self._composer.compose_many(
            self._dictionary, self.config.morpho_syntax, self.config.grammar, count
        )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Version
    '__version__',
    # Main class
    'ConlangKit',
    # Functions
    'generate_lexicon',
    'generate_sentence',
    'romanize',
    # Config
    'LanguageConfig',
    'PhonologyConfig',
    'LexiconConfig',
    'MorphoSyntaxConfig',
    'GrammarTable',
    'ToneConfig',
    'PhonologicalRule',
    'DerivationalMorpheme',
    'load_language_config',
    'get_preset',
    'list_presets',
    'default_config',
    # Engines
    'TrueRandom',
    'get_rng',
    'LexicalEntry',
    'PhonologyEngine',
    'MorphologyEngine',
    'LexiconBuilder',
    'SentenceComposer',
    'INSUFFICIENT_VOCABULARY',
]
