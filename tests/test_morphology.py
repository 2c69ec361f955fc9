"""
Tests for the Morphology Engine
===============================
Regular and irregular derivation plus typology labels.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlangkit.config import DerivationalMorpheme, MorphoSyntaxConfig
from conlangkit.generators.entries import LexicalEntry
from conlangkit.generators.entropy import TrueRandom
from conlangkit.generators.morphology import (
    MorphologyEngine,
    adposition_type,
    classify_typology,
)


@pytest.fixture
def engine():
    return MorphologyEngine(TrueRandom(seed=1))


@pytest.fixture
def root():
    return LexicalEntry(ipa='/taŋ/', roman='tang', pos='noun', meaning='sun', gender='masculine')


class TestRegularDerivation:
    """Tests for affixation."""

    def test_suffix(self, engine, root):
        word = engine.derive_regular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'))
        assert word.ipa == '/taŋʃi/'
        assert word.roman == 'tangshi'
        assert word.pos == 'agent'
        assert word.meaning == 'sun (agent)'

    def test_prefix(self, engine, root):
        word = engine.derive_regular(root, DerivationalMorpheme('prefix', 'o', 'abstract'))
        assert word.ipa == '/otaŋ/'
        assert word.roman == 'otang'

    def test_gender_dropped(self, engine, root):
        word = engine.derive_regular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'))
        assert word.gender is None

    def test_root_unchanged(self, engine, root):
        engine.derive_regular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'))
        assert root.ipa == '/taŋ/'


class TestIrregularDerivation:
    """Tests for vowel mutation."""

    def test_last_vowel_replaced(self, engine):
        root = LexicalEntry(ipa='/kata/', roman='kata', pos='verb', meaning='go')
        word = engine.derive_irregular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'), ['o'])
        assert word.ipa == '/kato/'
        assert word.roman == 'kato'
        assert word.pos == 'agent'
        assert word.meaning == 'go (irregular agent)'

    def test_gender_kept(self, engine, root):
        word = engine.derive_irregular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'), ['a', 'i'])
        assert word.gender == 'masculine'

    def test_no_vowel_returns_none(self, engine):
        root = LexicalEntry(ipa='/mn/', roman='mn', pos='noun', meaning='hum')
        assert engine.derive_irregular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'), ['a']) is None

    def test_no_vowel_inventory_returns_none(self, engine, root):
        assert engine.derive_irregular(root, DerivationalMorpheme('suffix', 'ʃi', 'agent'), []) is None


class TestTypology:
    """Tests for the typology heuristic."""

    def _morpho(self, count, rate, **kwargs):
        morphemes = [{'type': 'suffix', 'form': f'x{i}', 'func': f'f{i}'} for i in range(count)]
        return MorphoSyntaxConfig(derivational_morphemes=morphemes, irregularity_rate=rate, **kwargs)

    @pytest.mark.parametrize("count,rate,expected", [
        (0, 0.5, 'Isolating'),
        (3, 0.05, 'Agglutinative'),
        (1, 0.08, 'Fusional'),
        (4, 0.2, 'Fusional'),
        (2, 0.05, 'Analytic'),
    ])
    def test_labels(self, count, rate, expected):
        assert classify_typology(self._morpho(count, rate)).type == expected

    def test_adpositions(self):
        assert adposition_type(self._morpho(0, 0, word_order='SOV')) == 'Postpositional'
        assert adposition_type(self._morpho(0, 0, word_order='SVO', case_marking='postposition')) == 'Postpositional'
        assert adposition_type(self._morpho(0, 0, word_order='SVO')) == 'Prepositional'
