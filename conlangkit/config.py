#!/usr/bin/env python3
"""
Configuration Management
========================
Language configuration passed explicitly into every generation call.

Provides:
- Dataclasses for phonology, lexicon, morphosyntax and grammar settings
- Phoneme inventory presets (loaded from configs/presets.yaml)
- YAML loading of complete language descriptions
"""

import math
from dataclasses import dataclass, field, replace, asdict
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

import yaml

from conlangkit.settings import PRESETS_PATH, get_setting


# =============================================================================
# Closed Value Sets
# =============================================================================

WORD_ORDERS = ("SOV", "SVO", "VSO", "VOS", "OVS", "OSV")
ADJECTIVE_ORDERS = ("AN", "NA")
CASE_MARKINGS = ("suffix", "prefix", "postposition")
GENDER_MODES = ("none", "mf", "mfn")
MORPHEME_TYPES = ("prefix", "suffix")

GENDERS_BY_MODE = MappingProxyType({
    "none": (),
    "mf": ("masculine", "feminine"),
    "mfn": ("masculine", "feminine", "neuter"),
})

# Superscript glyphs only exist for the digits 1-9
MAX_TONES = 9

DEFAULT_TENSES = (("past", "ta"), ("present", "ru"), ("future", "lu"))


def _check_choice(value: str, allowed: Tuple[str, ...], name: str) -> None:
    if value not in allowed:
        raise ValueError(
            f"Unknown {name} '{value}'. "
            f"Available: {', '.join(allowed)}"
        )


def _as_tuple(values) -> tuple:
    if values is None:
        return ()
    if isinstance(values, str):
        return tuple(values.split())
    return tuple(values)


# =============================================================================
# Phonology
# =============================================================================

@dataclass(frozen=True)
class ToneConfig:
    """Tone marking: one superscript digit per word when enabled."""
    enabled: bool = False
    count: int = 3

    def __post_init__(self):
        object.__setattr__(self, 'count', int(self.count))
        if not 1 <= self.count <= MAX_TONES:
            raise ValueError(f"tone count must be between 1 and {MAX_TONES}, got {self.count}")


@dataclass(frozen=True)
class PhonologicalRule:
    """
    Contextual rewrite rule.

    pattern is "from>to" (e.g. "n>m"); context marks the rewrite site
    with "_" (e.g. "_p", "V_V"). An empty context applies everywhere.
    """
    pattern: str
    context: str = ""

    @classmethod
    def parse(cls, value) -> 'PhonologicalRule':
        """Build a rule from {from, to} / {pattern, context} or "n>m / _p"."""
        if isinstance(value, PhonologicalRule):
            return value
        if isinstance(value, dict):
            pattern = value.get('pattern', value.get('from', ''))
            context = value.get('context', value.get('to', ''))
            return cls(str(pattern or ''), str(context or ''))
        if isinstance(value, str):
            if '/' in value:
                pattern, context = value.split('/', 1)
                return cls(pattern.strip(), context.strip())
            return cls(value.strip(), '')
        raise ValueError(f"Invalid phonological rule: {value!r}")


@dataclass
class PhonologyConfig:
    """Phoneme inventory, syllable shapes, sound rules and tones."""
    consonants: Tuple[str, ...] = ()
    vowels: Tuple[str, ...] = ()
    syllable_structures: Tuple[str, ...] = ()
    phonological_rules: Tuple[PhonologicalRule, ...] = ()
    tones: ToneConfig = field(default_factory=ToneConfig)

    def __post_init__(self):
        self.consonants = _as_tuple(self.consonants)
        self.vowels = _as_tuple(self.vowels)
        if isinstance(self.syllable_structures, str):
            self.syllable_structures = self.syllable_structures.split(',')
        self.syllable_structures = tuple(
            s.strip().upper() for s in self.syllable_structures if s and s.strip()
        )
        self.phonological_rules = tuple(
            PhonologicalRule.parse(r) for r in (self.phonological_rules or ())
        )
        if isinstance(self.tones, dict):
            self.tones = ToneConfig(**self.tones)


# =============================================================================
# Lexicon
# =============================================================================

@dataclass
class LexiconConfig:
    """Semantic fields to draw meanings from and lexicon size."""
    semantic_fields: Tuple[str, ...] = ()
    root_count: int = 100
    loanwords: bool = False

    def __post_init__(self):
        if isinstance(self.semantic_fields, str):
            self.semantic_fields = self.semantic_fields.split(',')
        self.semantic_fields = tuple(f.strip() for f in self.semantic_fields if f and f.strip())
        self.root_count = int(self.root_count)
        if self.root_count < 0:
            raise ValueError(f"root_count must be >= 0, got {self.root_count}")
        if isinstance(self.loanwords, dict):
            self.loanwords = bool(self.loanwords.get('enabled', False))

    @property
    def loanword_count(self) -> int:
        """Number of loanword draws for this lexicon size."""
        return max(1, math.floor(self.root_count * 0.05))


# =============================================================================
# Morphology & Syntax
# =============================================================================

@dataclass(frozen=True)
class DerivationalMorpheme:
    """Derivational affix; func doubles as the derived part of speech."""
    type: str
    form: str
    func: str

    def __post_init__(self):
        _check_choice(self.type, MORPHEME_TYPES, 'morpheme type')


@dataclass
class MorphoSyntaxConfig:
    """Word order, case marking, gender and derivation settings."""
    word_order: str = "SOV"
    adjective_order: str = "AN"
    case_marking: str = "suffix"
    irregularity_rate: float = 0.05
    grammatical_gender: str = "none"
    gender_agreement: bool = False
    derivational_morphemes: Tuple[DerivationalMorpheme, ...] = ()

    def __post_init__(self):
        self.word_order = str(self.word_order).upper()
        self.adjective_order = str(self.adjective_order).upper()
        _check_choice(self.word_order, WORD_ORDERS, 'word order')
        _check_choice(self.adjective_order, ADJECTIVE_ORDERS, 'adjective order')
        _check_choice(self.case_marking, CASE_MARKINGS, 'case marking')
        _check_choice(self.grammatical_gender, GENDER_MODES, 'grammatical gender')
        self.irregularity_rate = float(self.irregularity_rate)
        if not 0.0 <= self.irregularity_rate <= 1.0:
            raise ValueError(f"irregularity_rate must be within [0, 1], got {self.irregularity_rate}")
        self.derivational_morphemes = tuple(
            m if isinstance(m, DerivationalMorpheme) else DerivationalMorpheme(**m)
            for m in (self.derivational_morphemes or ())
        )

    @property
    def genders(self) -> Tuple[str, ...]:
        """Genders assignable to nouns under the current mode."""
        return GENDERS_BY_MODE[self.grammatical_gender]


@dataclass
class GrammarTable:
    """Case, number and tense markers, constant for a generation session."""
    subject_marker: str = "ga"
    object_marker: str = "wo"
    plural_marker: str = "t"
    tenses: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TENSES))

    def __post_init__(self):
        self.tenses = dict(self.tenses)
        if not self.tenses:
            raise ValueError("grammar table needs at least one tense")


# =============================================================================
# Language Configuration
# =============================================================================

@dataclass
class LanguageConfig:
    """Complete set of tunable parameters for one language."""
    phonology: PhonologyConfig = field(default_factory=PhonologyConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    morpho_syntax: MorphoSyntaxConfig = field(default_factory=MorphoSyntaxConfig)
    grammar: GrammarTable = field(default_factory=GrammarTable)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LanguageConfig':
        """
        Build a config from a plain mapping (e.g. parsed YAML).

        A top-level 'preset' key seeds the phonology section from
        presets.yaml; explicit phonology keys override it.
        """
        data = data or {}
        phonology = {}
        if data.get('preset'):
            phonology.update(get_preset(data['preset']))
        phonology.update(data.get('phonology') or {})
        phonology.pop('description', None)

        try:
            return cls(
                phonology=PhonologyConfig(**phonology),
                lexicon=LexiconConfig(**(data.get('lexicon') or {})),
                morpho_syntax=MorphoSyntaxConfig(**(data.get('morpho_syntax') or {})),
                grammar=GrammarTable(**(data.get('grammar') or {})),
            )
        except TypeError as e:
            raise ValueError(f"Invalid language config: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Plain, YAML/JSON friendly representation."""
        data = asdict(self)
        for section in data.values():
            for key, value in section.items():
                if isinstance(value, tuple):
                    section[key] = list(value)
        return data

    def with_preset(self, name: str) -> 'LanguageConfig':
        """Copy of this config with the phonology inventory of a preset."""
        preset = get_preset(name)
        phonology = PhonologyConfig(
            consonants=preset['consonants'],
            vowels=preset['vowels'],
            syllable_structures=preset['syllable_structures'],
            phonological_rules=self.phonology.phonological_rules,
            tones=self.phonology.tones,
        )
        return replace(self, phonology=phonology)


def load_language_config(path) -> LanguageConfig:
    """Load a language description from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing language config: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Language config must be a mapping: {path}")
    return LanguageConfig.from_dict(data)


# =============================================================================
# Phoneme Presets
# =============================================================================

@lru_cache(maxsize=1)
def load_presets() -> Dict[str, Dict[str, Any]]:
    """Load phoneme inventory presets from presets.yaml."""
    if not PRESETS_PATH.exists():
        return {}
    with open(PRESETS_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def get_preset(name: str) -> Dict[str, Any]:
    """
    Resolve a preset by name.

    Returns:
        Dict with consonants, vowels and syllable_structures lists

    Raises:
        ValueError: If the preset name is not found
    """
    presets = load_presets()
    preset = presets.get(name)
    if preset is None:
        available = ', '.join(sorted(presets.keys()))
        raise ValueError(
            f"Unknown preset '{name}'. "
            f"Available presets: {available}"
        )
    return {
        'consonants': list(preset.get('consonants', [])),
        'vowels': list(preset.get('vowels', [])),
        'syllable_structures': list(preset.get('syllable_structures', [])),
    }


def list_presets() -> dict:
    """List all available presets with descriptions."""
    return {
        name: {
            'description': p.get('description', ''),
            'consonants': len(p.get('consonants', [])),
            'vowels': len(p.get('vowels', [])),
            'syllable_structures': list(p.get('syllable_structures', [])),
        }
        for name, p in load_presets().items()
    }


def default_config(preset: Optional[str] = None) -> LanguageConfig:
    """Language config built from app.yaml generation defaults."""
    preset = preset or get_setting('generation.default_preset', 'japanese')
    return LanguageConfig.from_dict({
        'preset': preset,
        'lexicon': {
            'semantic_fields': get_setting('generation.semantic_fields', []),
            'root_count': get_setting('generation.root_count', 100),
        },
    })


__all__ = [
    'WORD_ORDERS',
    'ADJECTIVE_ORDERS',
    'CASE_MARKINGS',
    'GENDER_MODES',
    'GENDERS_BY_MODE',
    'MORPHEME_TYPES',
    'MAX_TONES',
    'ToneConfig',
    'PhonologicalRule',
    'PhonologyConfig',
    'LexiconConfig',
    'DerivationalMorpheme',
    'MorphoSyntaxConfig',
    'GrammarTable',
    'LanguageConfig',
    'load_language_config',
    'load_presets',
    'get_preset',
    'list_presets',
    'default_config',
]
