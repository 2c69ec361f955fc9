#!/usr/bin/env python3
"""
Export
======
JSON and CSV serialization of a generated language.
"""

import csv
import io
import json
from typing import Any, Dict, Sequence

from conlangkit.generators.entries import EXPORT_FIELDS, LexicalEntry


def language_to_dict(config, dictionary: Sequence[LexicalEntry]) -> Dict[str, Any]:
    """Export layout: settings, phonology, lexicon and grammar markers."""
    data = config.to_dict()
    return {
        'grammar': data['morpho_syntax'],
        'phonology': data['phonology'],
        'lexicon': [entry.to_dict() for entry in dictionary],
        'generated_grammar_details': data['grammar'],
    }


def to_json(config, dictionary: Sequence[LexicalEntry], indent: int = 2) -> str:
    return json.dumps(language_to_dict(config, dictionary), indent=indent, ensure_ascii=False)


def to_csv(dictionary: Sequence[LexicalEntry]) -> str:
    """
    Dictionary as CSV with an ipa,roman,pos,meaning,gender header.

    Every value is quoted; a missing gender is written as "".
    """
    buffer = io.StringIO()
    buffer.write(','.join(EXPORT_FIELDS) + '\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for entry in dictionary:
        writer.writerow([
            entry.ipa,
            entry.roman,
            entry.pos,
            entry.meaning,
            entry.gender or '',
        ])
    return buffer.getvalue()


__all__ = [
    'language_to_dict',
    'to_json',
    'to_csv',
]
