"""
Tests for ConlangKit Main Class
===============================
Tests for the ConlangKit facade: configuration handling, dictionary
replacement and sentence generation.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlangkit import (
    ConlangKit,
    INSUFFICIENT_VOCABULARY,
    LanguageConfig,
    TrueRandom,
    generate_lexicon,
    generate_sentence,
    romanize,
)


def small_config(root_count=40):
    return LanguageConfig.from_dict({
        'preset': 'japanese',
        'lexicon': {'semantic_fields': ['nature', 'animals', 'actions'], 'root_count': root_count},
    })


class TestConlangKitInit:
    """Tests for ConlangKit initialization."""

    def test_init_default(self):
        """Default config comes from app.yaml."""
        kit = ConlangKit()
        assert kit.config.lexicon.root_count == 100
        assert kit.dictionary == ()

    def test_init_seeded(self):
        kit = ConlangKit(small_config(), seed=5)
        assert kit.rng.seeded
        assert kit.rng.seed == 5


class TestConlangKitGenerate:
    """Tests for ConlangKit.generate()."""

    @pytest.fixture
    def kit(self):
        return ConlangKit(small_config(), seed=21)

    def test_generate_publishes_dictionary(self, kit):
        dictionary = kit.generate()
        assert dictionary
        assert kit.dictionary is dictionary

    def test_generate_replaces(self, kit):
        """A second generate swaps in a new tuple; the old one is untouched."""
        first = kit.generate()
        snapshot = list(first)
        second = kit.generate(small_config(root_count=5))
        assert kit.dictionary is second
        assert list(first) == snapshot
        assert len(second) <= 5
        assert kit.config.lexicon.root_count == 5

    def test_same_seed_same_language(self):
        a = ConlangKit(small_config(), seed=8).generate()
        b = ConlangKit(small_config(), seed=8).generate()
        assert a == b


class TestConlangKitSentences:
    """Tests for sentence generation through the facade."""

    def test_sentinel_before_generate(self):
        kit = ConlangKit(small_config(), seed=1)
        assert kit.sentence() == INSUFFICIENT_VOCABULARY

    def test_sentences_count(self):
        kit = ConlangKit(small_config(), seed=2)
        kit.generate()
        sentences = kit.sentences(4)
        assert len(sentences) == 4
        assert all(isinstance(s, str) for s in sentences)


class TestConvenienceFunctions:
    """Tests for module-level helpers."""

    def test_generate_lexicon(self):
        dictionary = generate_lexicon(small_config(), TrueRandom(seed=4))
        romans = [e.roman for e in dictionary]
        assert len(romans) == len(set(romans))

    def test_generate_sentence(self):
        config = small_config()
        dictionary = generate_lexicon(config, TrueRandom(seed=4))
        sentence = generate_sentence(dictionary, config, TrueRandom(seed=4))
        assert sentence == INSUFFICIENT_VOCABULARY or sentence.endswith("')")

    def test_romanize(self):
        assert romanize('ʃiŋ') == 'shing'
