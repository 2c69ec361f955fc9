"""
Tests for the Phonology Engine
==============================
Word synthesis, rewrite rules, tones, romanization and loanword
assimilation in conlangkit/generators/phonology.py.
"""

import logging
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlangkit.config import PhonologicalRule, PhonologyConfig, ToneConfig
from conlangkit.generators.entropy import TrueRandom
from conlangkit.generators.phonology import (
    PhonologyEngine,
    RuleCompileError,
    TONE_MARKERS,
    compile_rule,
    romanize,
)


@pytest.fixture
def engine():
    return PhonologyEngine(TrueRandom(seed=42))


class TestSynthesizeWord:
    """Tests for template-driven word synthesis."""

    def test_single_phoneme_inventory(self, engine):
        """One consonant, one vowel and a CV template give exactly 'ta'."""
        assert engine.synthesize_word(['t'], ['a'], ['CV']) == 'ta'

    def test_length_matches_template(self, engine):
        """Every C and V slot contributes one phoneme."""
        for _ in range(50):
            word = engine.synthesize_word(['p', 't', 'k'], ['a', 'i'], ['CVC'])
            assert len(word) == 3
            assert word[0] in 'ptk'
            assert word[1] in 'ai'
            assert word[2] in 'ptk'

    def test_template_chosen_from_set(self, engine):
        """Words only ever follow one of the given templates."""
        lengths = {len(engine.synthesize_word(['t'], ['a'], ['V', 'CVCV'])) for _ in range(50)}
        assert lengths <= {1, 4}

    def test_unknown_template_letters_ignored(self, engine):
        """Letters other than C and V add nothing."""
        assert engine.synthesize_word(['t'], ['a'], ['CVN']) == 'ta'

    @pytest.mark.parametrize("consonants,vowels,templates", [
        ([], ['a'], ['CV']),
        (['t'], [], ['CV']),
        (['t'], ['a'], []),
    ])
    def test_empty_input_returns_none(self, engine, consonants, vowels, templates):
        """Empty inventory or template set yields None."""
        assert engine.synthesize_word(consonants, vowels, templates) is None


class TestPhonologicalRules:
    """Tests for contextual rewrite rules."""

    def test_assimilation_before_p(self, engine):
        """n>m / _p turns 'anpa' into 'ampa'."""
        rules = [PhonologicalRule('n>m', '_p')]
        assert engine.apply_rules('anpa', rules, ['a']) == 'ampa'

    def test_context_not_met(self, engine):
        """The rule leaves other n's alone."""
        rules = [PhonologicalRule('n>m', '_p')]
        assert engine.apply_rules('anta', rules, ['a']) == 'anta'

    def test_no_context_applies_everywhere(self, engine):
        assert engine.apply_rules('nana', [PhonologicalRule('n>m')], ['a']) == 'mama'

    def test_vowel_class_context(self, engine):
        """V in a context stands for any vowel of the language."""
        rules = [PhonologicalRule('t>d', 'V_V')]
        assert engine.apply_rules('atiti', rules, ['a', 'i']) == 'adidi'
        assert engine.apply_rules('tat', rules, ['a', 'i']) == 'tat'

    def test_character_set(self, engine):
        rules = [PhonologicalRule('[ptk]>h')]
        assert engine.apply_rules('pakta', rules, ['a']) == 'hahha'

    def test_matches_do_not_overlap(self, engine):
        """Matches are taken left to right without overlap."""
        assert engine.apply_rules('aaa', [PhonologicalRule('aa>b')], ['a']) == 'ba'

    def test_context_checked_against_rule_input(self, engine):
        """A rewrite does not feed the context of the next site."""
        rules = [PhonologicalRule('n>a', 'a_')]
        assert engine.apply_rules('ann', rules, ['a']) == 'aan'

    def test_rules_apply_in_order(self, engine):
        """Each rule sees the output of the one before."""
        rules = [PhonologicalRule('n>m', '_p'), PhonologicalRule('m>b')]
        assert engine.apply_rules('anpa', rules, ['a']) == 'abpa'

    def test_empty_replacement_deletes(self, engine):
        assert engine.apply_rules('anpa', [PhonologicalRule('n>', '_p')], ['a']) == 'apa'

    def test_malformed_rule_skipped(self, engine, caplog):
        """A broken rule is logged and later rules still run."""
        rules = [PhonologicalRule('n>m>k'), PhonologicalRule('a>o')]
        with caplog.at_level(logging.WARNING):
            assert engine.apply_rules('na', rules, ['a']) == 'no'
        assert 'n>m>k' in caplog.text


class TestCompileRule:
    """Tests for the rule compiler's error handling."""

    @pytest.mark.parametrize("pattern,context", [
        ('nm', ''),
        ('n>m>k', ''),
        ('>m', ''),
        ('[pt>x', ''),
        ('[]>x', ''),
        ('p]>x', ''),
        ('n>m', '_p_'),
        ('n>m', '[a_'),
    ])
    def test_malformed_raises(self, pattern, context):
        with pytest.raises(RuleCompileError):
            compile_rule(pattern, context, ('a',))

    def test_compile_error_is_value_error(self):
        assert issubclass(RuleCompileError, ValueError)


class TestTones:
    """Tests for tone marking."""

    def test_disabled(self, engine):
        assert engine.apply_tone('ta', ToneConfig(enabled=False)) == 'ta'

    def test_single_tone(self, engine):
        assert engine.apply_tone('ta', ToneConfig(enabled=True, count=1)) == 'ta¹'

    def test_marker_in_range(self, engine):
        tones = ToneConfig(enabled=True, count=4)
        for _ in range(30):
            word = engine.apply_tone('ta', tones)
            assert word[-1] in TONE_MARKERS[:4]

    def test_count_coerced_to_int(self, engine):
        """A quoted YAML count still yields a usable tone."""
        tones = ToneConfig(enabled=True, count='3')
        assert tones.count == 3
        assert engine.apply_tone('ta', tones)[-1] in TONE_MARKERS[:3]

    def test_more_than_nine_rejected(self):
        with pytest.raises(ValueError):
            ToneConfig(enabled=True, count=10)

    def test_generate_word_pipeline(self, engine):
        """generate_word synthesizes, rewrites and adds the tone."""
        phonology = PhonologyConfig(
            consonants=['n'],
            vowels=['a'],
            syllable_structures=['CVCV'],
            phonological_rules=['n>m / _a'],
            tones={'enabled': True, 'count': 1},
        )
        assert engine.generate_word(phonology) == 'mama¹'


class TestRomanize:
    """Tests for the IPA -> Latin table."""

    @pytest.mark.parametrize("ipa,expected", [
        ('ta', 'ta'),
        ('ʃaŋ', 'shang'),
        ('ʧiʤo', 'chijo'),
        ('θeð', 'thedh'),
        ('jama', 'yama'),
        ('ta²', 'ta²'),
        ('xɑ', 'xɑ'),
    ])
    def test_table(self, ipa, expected):
        assert romanize(ipa) == expected

    def test_idempotent_on_latin(self):
        word = romanize('banana')
        assert romanize(word) == word == 'banana'

    def test_engine_alias(self):
        assert PhonologyEngine.romanize('ŋa') == 'nga'


class TestAssimilation:
    """Tests for loanword assimilation."""

    def test_phone_identity(self):
        """All of 'phone' exists in the inventory, so nothing changes."""
        result = PhonologyEngine.assimilate_loanword('phone', ['p', 'h', 'n'], ['o', 'e'])
        assert result == 'phone'

    def test_lowercases(self):
        result = PhonologyEngine.assimilate_loanword('PHONE', ['p', 'h', 'n'], ['o', 'e'])
        assert result == 'phone'

    def test_nearest_candidate(self):
        """f falls back to p, x to s."""
        assert PhonologyEngine.assimilate_loanword('fax', ['p', 's'], ['a']) == 'pas'

    def test_fallback_to_first_phoneme(self):
        """No listed candidate available: use the inventory's first phoneme."""
        assert PhonologyEngine.assimilate_loanword('ha', ['t'], ['a']) == 'ta'

    def test_unknown_characters_dropped(self):
        assert PhonologyEngine.assimilate_loanword('a-b 1', ['b'], ['a']) == 'ab'

    def test_glide_searches_vowels(self):
        """w may map onto a vowel when the language has no /w/."""
        assert PhonologyEngine.assimilate_loanword('wa', ['t'], ['a', 'u']) == 'ua'

    def test_empty_inventory_returns_word(self):
        """Nothing to map onto: the word comes back as given."""
        assert PhonologyEngine.assimilate_loanword('Computer', [], ['a']) == 'Computer'
        assert PhonologyEngine.assimilate_loanword('Computer', ['k'], []) == 'Computer'
