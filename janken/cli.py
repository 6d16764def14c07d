#!/usr/bin/env python3
"""
Headless Janken runner.

Plays one session with the CounterHandSource bot standing in for the player.
No window, no camera - just the simulation, ticked with a fixed dt until the
game ends or the tick limit is reached. Handy for checking a difficulty
table or replaying a seed.

Usage:
    # Seeded run with the default table
    python -m janken --seed 42

    # A sloppier bot on the frantic table, with the preview marker
    python -m janken --seed 7 --accuracy 0.7 --table frantic --preview

    # Table from a file, persisting the high score
    python -m janken --table ./my_table.yaml --high-score-file ./best.json

    # List bundled tables
    python -m janken --list-tables
"""

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from janken import config
from janken.config import GameRules
from janken.difficulty import DifficultyCurve
from janken.high_score import HighScoreStore, InMemoryHighScoreStore, JsonHighScoreStore
from janken.input.sources.scripted import CounterHandSource
from janken.logging import close_sinks, configure_logging, get_logger
from janken.models import DifficultyTable, Phase
from janken.session import GameSession
from janken.table_loader import DifficultyTableLoader

log = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='janken',
        description='Headless Janken session driven by a counter-playing bot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m janken --seed 42
  python -m janken --seed 7 --accuracy 0.7 --table frantic
  python -m janken --list-tables
        """
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for enemy hands and the bot (default: unseeded)'
    )
    parser.add_argument(
        '--dt',
        type=float,
        default=1.0 / 60.0,
        help='Seconds per tick (default: 1/60)'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=60 * 60 * 10,
        help='Stop after this many ticks if the game has not ended (default: 36000)'
    )
    parser.add_argument(
        '--accuracy',
        type=float,
        default=0.9,
        help='Chance the bot shows the winning hand, 0.0 to 1.0 (default: 0.9)'
    )
    parser.add_argument(
        '--table',
        type=str,
        default=None,
        help='Difficulty table name or path to a YAML file (default: built-in classic)'
    )
    parser.add_argument(
        '--preview',
        action='store_true',
        default=config.PREVIEW_ENABLED,
        help='Show the preview marker for the next spawn'
    )
    parser.add_argument(
        '--high-score-file',
        type=str,
        default=None,
        help='JSON file for the high score (default: in-memory only)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        help='Console log level (default: WARNING)'
    )
    parser.add_argument(
        '--list-tables',
        action='store_true',
        help='List bundled difficulty tables and exit'
    )
    return parser


def load_table(name_or_path: str, loader: Optional[DifficultyTableLoader] = None) -> DifficultyTable:
    """Resolve ``--table``: a .yaml path when it looks like one, else a table name."""
    loader = loader if loader is not None else DifficultyTableLoader()
    path = Path(name_or_path)
    if path.suffix in ('.yaml', '.yml') or path.exists():
        if not path.exists():
            raise FileNotFoundError(f"Difficulty table file not found: {path}")
        return loader.load_file(path)
    return loader.load_table(name_or_path)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    if args.list_tables:
        loader = DifficultyTableLoader()
        print("Available difficulty tables:")
        for name in loader.list_available_tables():
            table = loader.load_table(name)
            print(f"  {name:<12} {table.max_level} levels  {table.description}")
        return 0

    if not 0.0 <= args.accuracy <= 1.0:
        parser.error(f"--accuracy must be between 0 and 1, got {args.accuracy}")
    if args.dt <= 0:
        parser.error(f"--dt must be positive, got {args.dt}")

    table = None
    if args.table:
        try:
            table = load_table(args.table)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    rng = random.Random(args.seed)
    bot_rng = random.Random(None if args.seed is None else args.seed + 1)

    rules = GameRules(preview_enabled=args.preview)
    curve = DifficultyCurve(
        table=table,
        defeats_per_level=rules.defeats_per_level,
        base_speed=rules.enemy_base_speed,
        rng=rng,
    )
    high_scores: HighScoreStore
    if args.high_score_file:
        high_scores = JsonHighScoreStore(args.high_score_file)
    else:
        high_scores = InMemoryHighScoreStore()

    session = GameSession(rules=rules, curve=curve, high_scores=high_scores)
    session.hand_source = CounterHandSource(session.registry, accuracy=args.accuracy, rng=bot_rng)

    log.info("Running table '%s' (seed=%s, dt=%.4f, accuracy=%.2f)",
             curve.table.name, args.seed, args.dt, args.accuracy)

    session.start()
    frame = session.snapshot()
    while session.ticks < args.max_ticks and frame.phase == Phase.PLAYING:
        frame = session.tick(args.dt)

    finished = frame.phase == Phase.GAME_OVER
    print("=" * 40)
    print(f"Table:       {curve.table.name}")
    print(f"Seed:        {args.seed}")
    print(f"Ticks:       {session.ticks} ({session.ticks * args.dt:.1f}s)")
    print(f"Result:      {'game over' if finished else 'tick limit reached'}")
    print(f"Score:       {frame.score}")
    print(f"Level:       {frame.difficulty_level}")
    print(f"Defeated:    {frame.defeated_count}")
    print(f"Lives:       {frame.lives}")
    print(f"High score:  {session.high_score}{'  (new record!)' if session.is_new_record else ''}")
    print("=" * 40)
    close_sinks()
    return 0


if __name__ == '__main__':
    sys.exit(main())
