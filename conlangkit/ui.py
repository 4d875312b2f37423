#!/usr/bin/env python3
"""
Terminal Rendering
==================
Rich-based output for generated batches and transition tables.

Flag colors:
- has original: cyan
- duplicated:   yellow
- invalid:      red
"""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from conlangkit.generators.tables import Strategy, TransitionTable
from conlangkit.quality import BatchSummary, CreatedWord

FLAG_STYLES = {
    'has_original': "cyan",
    'is_duplicated': "yellow",
    'is_invalid': "bold red",
}

FLAG_LABELS = {
    'has_original': "original",
    'is_duplicated': "duplicate",
    'is_invalid': "invalid",
}


def _word_text(created: CreatedWord) -> Text:
    # Invalid beats duplicated beats original when picking the color
    for flag in ('is_invalid', 'is_duplicated', 'has_original'):
        if getattr(created, flag):
            return Text(created.word, style=FLAG_STYLES[flag])
    return Text(created.word)


def render_batch(console: Console,
                 created: List[CreatedWord],
                 summary: BatchSummary,
                 hide_flagged: bool = False,
                 title: Optional[str] = None):
    """Print generated words with their flags, then the summary."""
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Word")
    table.add_column("Flags", style="dim")

    for position, item in enumerate(created, start=1):
        flags = [label for flag, label in FLAG_LABELS.items() if getattr(item, flag)]
        if hide_flagged and flags:
            continue
        table.add_row(str(position), _word_text(item), ", ".join(flags))

    console.print(table)
    render_summary(console, summary)


def render_summary(console: Console, summary: BatchSummary):
    line = Text()
    line.append(f"Generated: {summary.total}  ")
    line.append(
        f"original: {summary.has_original_count} ({summary.has_original_percent:.2f}%)  ",
        style=FLAG_STYLES['has_original'],
    )
    line.append(
        f"duplicate: {summary.duplication_count} ({summary.duplication_percent:.2f}%)  ",
        style=FLAG_STYLES['is_duplicated'],
    )
    line.append(
        f"invalid: {summary.invalid_count} ({summary.invalid_percent:.2f}%)",
        style=FLAG_STYLES['is_invalid'],
    )
    console.print(line)


def render_table(console: Console,
                 table: TransitionTable,
                 entries: List[Tuple[str, int]]):
    """Print transition table entries; terminal fragments are marked."""
    out = Table(
        title=f"{table.strategy.value} table (depth {table.depth}, {len(table)} keys)",
        box=box.SIMPLE,
        header_style="bold",
    )
    out.add_column("Key")
    out.add_column("Weight", justify="right")
    out.add_column("End", justify="center", style="dim")

    for key, weight in entries:
        out.add_row(key, str(weight), "$" if len(key) < table.depth else "")

    console.print(out)


def render_strategies(console: Console):
    out = Table(box=box.SIMPLE, header_style="bold")
    out.add_column("Strategy")
    out.add_column("Description")
    for strategy in Strategy:
        out.add_row(strategy.value, strategy.description)
    console.print(out)
