#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering of a generated language.

Usage:
    from conlangkit.ui import LanguageView

    view = LanguageView()
    view.show_summary(config)
    view.show_dictionary(dictionary)
    view.show_sentences(sentences)
"""

from typing import Dict, List, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from conlangkit.generators.entries import LexicalEntry
from conlangkit.summary import build_summary


class LanguageView:
    """Renders summaries, dictionaries and sentences to a console."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def show_summary(self, config) -> None:
        self.console.print(self.summary_panel(build_summary(config)))

    def show_dictionary(self, dictionary: Sequence[LexicalEntry]) -> None:
        self.console.print(self.dictionary_table(dictionary))

    def show_sentences(self, sentences: Sequence[str]) -> None:
        self.console.print(self.sentences_panel(sentences))

    def summary_panel(self, summary: Dict[str, List[Tuple[str, str]]]) -> Panel:
        table = Table(box=None, show_header=False, padding=(0, 1))
        table.add_column("Label", style="bold")
        table.add_column("Value")
        for section, items in summary.items():
            table.add_row(f"[cyan]{section}[/cyan]", "")
            for label, value in items:
                table.add_row(f"  {label}", escape(value))
        return Panel(table, title="[bold]Grammar[/bold]", border_style="cyan", box=box.ROUNDED)

    def dictionary_table(self, dictionary: Sequence[LexicalEntry]) -> Table:
        table = Table(title=f"Dictionary ({len(dictionary)} words)", box=box.SIMPLE_HEAVY)
        table.add_column("IPA")
        table.add_column("Roman", style="bold")
        table.add_column("POS")
        table.add_column("Meaning")
        table.add_column("Gender")
        for entry in dictionary:
            table.add_row(
                escape(entry.ipa),
                escape(entry.roman),
                escape(entry.pos),
                escape(entry.meaning),
                entry.gender or "—",
            )
        return table

    def sentences_panel(self, sentences: Sequence[str]) -> Panel:
        body = '\n'.join(escape(s) for s in sentences) if sentences else "(none)"
        return Panel(body, title="[bold]Example sentences[/bold]", border_style="green", box=box.ROUNDED)


__all__ = [
    'LanguageView',
]
