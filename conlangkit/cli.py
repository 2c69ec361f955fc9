#!/usr/bin/env python3
"""
conlangkit CLI
==============
Command-line interface for language generation.

Usage:
    conlangkit generate --preset japanese -n 50
    conlangkit generate --config mylang.yaml --csv -o lexicon.csv
    conlangkit sentences --preset spanish --seed 7 -n 5
    conlangkit romanize "ʃaŋ"
    conlangkit assimilate computer --preset japanese
    conlangkit summary --config mylang.yaml
    conlangkit presets
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent to path
_parent = Path(__file__).parent.parent
if str(_parent) not in sys.path:
    sys.path.insert(0, str(_parent))

from conlangkit import __version__
from conlangkit.settings import get_setting, resolve_path

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def success(self, msg: str):
        if not self.quiet:
            print(f"OK: {msg}")

    def write(self, text: str, path: str = None, default_name: str = None):
        """
        Write text to a file, or to stdout when no path is given.

        A directory path receives default_name inside it.
        """
        if path:
            target = resolve_path(path)
            if target.is_dir() and default_name:
                target = target / default_name
            target.write_text(text, encoding='utf-8')
            self.success(f"Wrote {target}")
        else:
            sys.stdout.write(text)
            if not text.endswith('\n'):
                sys.stdout.write('\n')


def setup_logging(verbose: bool = False):
    level = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def build_config(args):
    """Language config from --config / --preset plus CLI overrides."""
    from dataclasses import replace
    from conlangkit.config import load_language_config, default_config, LexiconConfig

    if getattr(args, 'config', None):
        config = load_language_config(resolve_path(args.config))
        if getattr(args, 'preset', None):
            config = config.with_preset(args.preset)
    else:
        config = default_config(getattr(args, 'preset', None))

    lexicon = config.lexicon
    root_count = getattr(args, 'root_count', None)
    fields = getattr(args, 'fields', None)
    loanwords = getattr(args, 'loanwords', False)
    if root_count is not None or fields or loanwords:
        config = replace(config, lexicon=LexiconConfig(
            semantic_fields=fields if fields else lexicon.semantic_fields,
            root_count=root_count if root_count is not None else lexicon.root_count,
            loanwords=loanwords or lexicon.loanwords,
        ))
    return config


def add_config_arguments(p):
    p.add_argument('--preset', '-p', help='Phoneme inventory preset (see "presets")')
    p.add_argument('--config', '-c', help='Language config YAML file')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate a dictionary and example sentences."""
    from conlangkit import ConlangKit
    from conlangkit.export import to_json, to_csv

    config = build_config(args)
    kit = ConlangKit(config, seed=args.seed)
    dictionary = kit.generate()

    if args.json:
        indent = get_setting('export.json_indent', 2)
        out.write(to_json(config, dictionary, indent=indent), args.output,
                  get_setting('export.json_filename', 'language.json'))
        return 0
    if args.csv:
        out.write(to_csv(dictionary), args.output,
                  get_setting('export.csv_filename', 'lexicon.csv'))
        return 0

    from conlangkit.ui import LanguageView

    view = LanguageView()
    if args.summary:
        view.show_summary(config)
    view.show_dictionary(dictionary)
    count = args.sentences if args.sentences is not None else get_setting('generation.sentence_samples', 3)
    if count > 0:
        view.show_sentences(kit.sentences(count))
    return 0


def cmd_sentences(args, out: Output):
    """Generate a dictionary and print only example sentences."""
    from conlangkit import ConlangKit

    kit = ConlangKit(build_config(args), seed=args.seed)
    kit.generate()
    for sentence in kit.sentences(args.count):
        print(sentence)
    return 0


def cmd_romanize(args, out: Output):
    """Romanize IPA strings."""
    from conlangkit import romanize

    for text in args.text:
        print(romanize(text))
    return 0


def cmd_assimilate(args, out: Output):
    """Assimilate foreign words into a language's phoneme inventory."""
    from conlangkit import PhonologyEngine, romanize

    config = build_config(args)
    phonology = config.phonology
    rows = []
    for word in args.words:
        ipa = PhonologyEngine.assimilate_loanword(word, phonology.consonants, phonology.vowels)
        rows.append({'source': word, 'ipa': f"/{ipa}/", 'roman': romanize(ipa)})

    if args.json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
    else:
        for row in rows:
            print(f"{row['source']:<12} {row['ipa']:<14} {row['roman']}")
    return 0


def cmd_summary(args, out: Output):
    """Show the grammar summary of a language config."""
    from conlangkit.ui import LanguageView

    LanguageView().show_summary(build_config(args))
    return 0


def cmd_presets(args, out: Output):
    """List phoneme inventory presets."""
    from conlangkit import list_presets

    presets = list_presets()
    if args.json:
        print(json.dumps(presets, indent=2, ensure_ascii=False))
        return 0

    out.print("\nPhoneme presets:\n")
    for name, info in presets.items():
        structures = ', '.join(info['syllable_structures'])
        out.print(f"  {name:<10} {info['consonants']:>2}C {info['vowels']:>2}V  [{structures}]  {info['description']}")
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='conlangkit',
        description='conlangkit - Constructed Language Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate --preset japanese -n 50 --summary
  %(prog)s generate --config mylang.yaml --json -o out/
  %(prog)s sentences --preset spanish --seed 7 -n 5
  %(prog)s romanize "ʃaŋ" "θeð"
  %(prog)s assimilate computer phone --preset japanese
  %(prog)s presets
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate a dictionary')
    add_config_arguments(p)
    p.add_argument('-n', '--root-count', type=int, help='Number of root words')
    p.add_argument('--fields', '-f', type=lambda s: [f for f in s.split(',') if f.strip()],
                   help='Comma-separated semantic fields (e.g., nature,animals)')
    p.add_argument('--loanwords', '-l', action='store_true', help='Add assimilated loanwords')
    p.add_argument('--sentences', '-s', type=int, help='Number of example sentences')
    p.add_argument('--summary', action='store_true', help='Show grammar summary')
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument('--json', '-j', action='store_true', help='Export language as JSON')
    fmt.add_argument('--csv', action='store_true', help='Export dictionary as CSV')
    p.add_argument('--output', '-o', help='Output file or directory (with --json/--csv)')

    # --- sentences ---
    p = subparsers.add_parser('sentences', aliases=['sent'], help='Print example sentences')
    add_config_arguments(p)
    p.add_argument('-n', '--count', type=int, default=3, help='Number of sentences (default: 3)')
    p.add_argument('--root-count', type=int, help='Number of root words')

    # --- romanize ---
    p = subparsers.add_parser('romanize', aliases=['rom', 'r'], help='Romanize IPA text')
    p.add_argument('text', nargs='+', help='IPA strings')

    # --- assimilate ---
    p = subparsers.add_parser('assimilate', aliases=['loan'], help='Assimilate foreign words')
    add_config_arguments(p)
    p.add_argument('words', nargs='+', help='Source words')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- summary ---
    p = subparsers.add_parser('summary', help='Show grammar summary')
    add_config_arguments(p)

    # --- presets ---
    p = subparsers.add_parser('presets', help='List phoneme presets')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # Parse
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'sent': 'sentences',
        'rom': 'romanize', 'r': 'romanize',
        'loan': 'assimilate',
    }
    command = cmd_map.get(args.command, args.command)

    setup_logging(args.verbose)
    out = Output(quiet=args.quiet)

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'sentences': cmd_sentences,
        'romanize': cmd_romanize,
        'assimilate': cmd_assimilate,
        'summary': cmd_summary,
        'presets': cmd_presets,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
