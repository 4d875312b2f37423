#!/usr/bin/env python3
"""
conlangkit CLI
==============
Command-line interface for n-gram word generation.

Usage:
    conlangkit generate lexicon.json -n 50 --strategy headplus
    conlangkit table words.txt --top 20
    conlangkit strategies
"""

import argparse
import json
import logging
import sys

from rich.console import Console

from conlangkit import __version__
from conlangkit.config import get_wordgen_config
from conlangkit.dictionary import load_words
from conlangkit.generators import Strategy, build_model, build_table
from conlangkit.quality import classify, summarize
from conlangkit.settings import get_setting
from conlangkit.ui import render_batch, render_strategies, render_table

logger = logging.getLogger(__name__)

STRATEGIES = [s.value for s in Strategy]


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def json(self, data):
        """Write a JSON document to stdout, even in quiet mode."""
        print(json.dumps(data, indent=2, ensure_ascii=False))


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _config_from_args(args):
    return get_wordgen_config(
        depth=getattr(args, 'depth', None),
        min_length=getattr(args, 'min', None),
        max_length=getattr(args, 'max', None),
        retry_count=getattr(args, 'retries', None),
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words from the given dictionaries."""
    words = load_words(args.sources)
    config = _config_from_args(args)
    strategy = Strategy.from_name(args.strategy)

    count = args.count
    if count is None:
        count = get_setting("wordgen.generate_count")
    if count is None:
        raise ValueError("wordgen.generate_count must be set in app.yaml")
    if count < 0:
        raise ValueError(f"count must not be negative (got {count})")

    logger.debug("Training %s model on %d words", strategy.value, len(words))
    model = build_model(words, config, strategy=strategy, seed=args.seed)
    created = classify(model.generate_batch(count), words, config)
    summary = summarize(created)

    if args.json:
        out.json({
            'strategy': strategy.value,
            'config': config.to_dict(),
            'summary': summary.to_dict(),
            'words': [c.to_dict() for c in created],
        })
        return 0

    if out.quiet:
        for item in created:
            if args.hide_flagged and (item.has_original or item.is_duplicated or item.is_invalid):
                continue
            print(item.word)
        return 0

    render_batch(
        out.console,
        created,
        summary,
        hide_flagged=args.hide_flagged,
        title=f"{count} words, {strategy.value} strategy, {len(words)} training words",
    )
    return 0


def cmd_table(args, out: Output):
    """Show the heaviest transition table entries."""
    words = load_words(args.sources)
    config = _config_from_args(args)
    strategy = Strategy.from_name(args.strategy)
    table = build_table(strategy, words, config)

    limit = args.top
    if limit is None:
        limit = get_setting("ui.max_table_rows")
        if limit is None:
            raise ValueError("ui.max_table_rows must be set in app.yaml")
    entries = table.top(limit)

    if args.json:
        out.json({
            'strategy': strategy.value,
            'depth': table.depth,
            'size': len(table),
            'entries': [{'key': k, 'weight': w} for k, w in entries],
        })
        return 0

    if out.quiet:
        for key, weight in entries:
            print(f"{key}\t{weight}")
        return 0

    render_table(out.console, table, entries)
    return 0


def cmd_strategies(args, out: Output):
    """List the table-building strategies."""
    if out.quiet:
        for strategy in Strategy:
            print(strategy.value)
        return 0
    render_strategies(out.console)
    return 0


# =============================================================================
# Main
# =============================================================================

def _add_model_arguments(p):
    p.add_argument('sources', nargs='+', help='Dictionary files (.json OTM-JSON or plain word lists)')
    p.add_argument('--strategy', '-s', choices=STRATEGIES, default=Strategy.APPEND.value,
                   help='Table-building strategy (default: normal)')
    p.add_argument('--depth', '-k', type=int, help='k-gram length (default from app.yaml)')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='conlangkit',
        description='conlangkit - n-gram word generator for constructed languages',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate lexicon.json -n 50
  %(prog)s generate words.txt -s reverse --min 4 --max 8 --seed 1
  %(prog)s table lexicon.json -s pruned --top 20
  %(prog)s strategies
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Print only the essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    _add_model_arguments(p)
    p.add_argument('-n', '--count', type=int, help='Number of words (default from app.yaml)')
    p.add_argument('--min', type=int, help='Minimal word length')
    p.add_argument('--max', type=int, help='Maximal word length')
    p.add_argument('--retries', '-r', type=int, help='Walks per word before giving up')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')
    p.add_argument('--hide-flagged', action='store_true',
                   help='Hide original, duplicated and invalid words')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- table ---
    p = subparsers.add_parser('table', aliases=['t'], help='Show the transition table')
    _add_model_arguments(p)
    p.add_argument('--top', type=int, help='Number of entries to show')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- strategies ---
    subparsers.add_parser('strategies', help='List table-building strategies')

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        't': 'table',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'table': cmd_table,
        'strategies': cmd_strategies,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.error("Cancelled.")
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
