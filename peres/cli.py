#!/usr/bin/env python3
"""
Peres CLI
=========
Command-line interface for invented-word generation.

Usage:
    peres generate 10
    peres generate 5 --style syllabified --open-seed 7 --closed-seed 8
    peres generate 20 --stats --verbose
    peres roots 5
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from peres import __version__
from peres.generators.word import RENDER_STYLES as _RENDER_STYLES
from peres.settings import get_setting

# =============================================================================
# Constants
# =============================================================================

RENDER_STYLES = list(_RENDER_STYLES)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

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
            print(*args, **kwargs)

    def emit(self, line: str):
        """Print a result line; never suppressed."""
        print(line)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a rich table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def setup_logging(level: str = None):
    """Route log records through rich on stderr."""
    if level is None:
        level = get_setting('logging.level', 'WARNING')
    logging.basicConfig(
        level=str(level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def resolve_count(count) -> int:
    """Word count: default from settings, 1 when absent or non-positive."""
    if count is None:
        count = get_setting('cli.default_count', 1)
    if count is None or count <= 0:
        return 1
    return count


def _pick(value, setting: str, default):
    return value if value is not None else get_setting(setting, default)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words and print accepted ones, marking rejections."""
    from peres.generators import WordGenerator, GenerationStats, load_phonology

    count = resolve_count(args.count)
    style = _pick(args.style, 'cli.style', 'plain')
    rejected_marker = get_setting('cli.rejected_marker', ' -> REJECTED')
    exhausted_marker = get_setting('cli.exhausted_marker', ' -> EXHAUSTED')

    gen = WordGenerator(
        phonology=load_phonology(get_setting('generation.phonology', 'english')),
        open_seed=_pick(args.open_seed, 'generation.seeds.open', 0),
        closed_seed=_pick(args.closed_seed, 'generation.seeds.closed', 1),
        pattern=_pick(args.pattern, 'generation.pattern', ['open', 'closed']),
        max_attempts=_pick(args.max_attempts, 'generation.max_attempts', 1000),
    )

    stats = GenerationStats()
    rows = []
    for i, result in enumerate(gen.generate_many(count), 1):
        stats.record(result)

        if args.verbose:
            if result.exhausted:
                rows.append([i, '-', '-', '-', 'exhausted', result.error])
            else:
                rows.append([
                    i,
                    result.word.render(),
                    result.word.render_segmented(),
                    result.word.render_syllabified(),
                    'accepted' if result.accepted else 'rejected',
                    ', '.join(result.violations) or '-',
                ])
            continue

        if result.exhausted:
            out.emit(f"(no word){exhausted_marker}")
        elif result.accepted:
            out.emit(result.render(style))
        else:
            out.emit(f"{result.render(style)}{rejected_marker}")

    if args.verbose:
        out.table(['#', 'Plain', 'Segmented', 'Syllabified', 'Status', 'Violations'], rows)

    if args.stats:
        out.print(
            f"Generated {stats.generated}, accepted {stats.accepted}, "
            f"rejected {stats.rejected}, exhausted {stats.exhausted} "
            f"(rejection ratio = {100.0 * stats.rejection_ratio:3.1f}%)"
        )

    return 0


def cmd_roots(args, out: Output):
    """Generate root + vowel pattern words."""
    from peres.generators import RootPatternGenerator, DeterministicBitSource

    count = resolve_count(args.count)
    seed = _pick(args.seed, 'roots.seed', 0)

    gen = RootPatternGenerator(bits=DeterministicBitSource(seed))
    for text in gen.generate_many(count):
        out.emit(text)

    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='peres',
        description='Generate pronounceable invented words',
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging level (default: from app.yaml)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('count', nargs='?', type=int, help='Number of words (default: 1)')
    p.add_argument('--style', '-s', choices=RENDER_STYLES, help='Rendering style (default: plain)')
    p.add_argument('--open-seed', type=int, help='Seed for open syllables')
    p.add_argument('--closed-seed', type=int, help='Seed for closed syllables')
    p.add_argument('--pattern', '-p', help='Syllable kinds in order, e.g. open,closed')
    p.add_argument('--max-attempts', type=int, help='Retry cap per syllable')
    p.add_argument('--stats', action='store_true', help='Print acceptance statistics')
    p.add_argument('--verbose', '-v', action='store_true', help='Show all renderings and rule violations')

    # --- roots ---
    p = subparsers.add_parser('roots', aliases=['r'], help='Generate root-pattern words')
    p.add_argument('count', nargs='?', type=int, help='Number of words (default: 1)')
    p.add_argument('--seed', type=int, help='Seed for the root generator')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'r': 'roots',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'roots': cmd_roots,
    }

    try:
        setup_logging(args.log_level)
        return commands[command](args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, FileNotFoundError) as e:
        out.error(str(e))
        if getattr(args, 'verbose', False):
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
