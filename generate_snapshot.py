"""
Generate a synthetic `database.json` stats log.

Simulates announces arriving at random intervals over the last few days
so the dashboard and the snapshot API have something to show.

Usage:
    python generate_snapshot.py --days 3 --announces 2000 --output data/database.json
"""
import argparse
import logging
import os
import random
import sys
from datetime import datetime, timedelta

from config.settings import DEFAULT_DATABASE_PATH
from tracker_stats.schema import StatsSnapshot

logger = logging.getLogger(__name__)


def generate_snapshot(days, announces, torrents, completion_rate=0.3, seed=None, end=None):
    """
    Build a StatsSnapshot with `announces` entries spread over `days`.

    Returns:
        StatsSnapshot ordered by time
    """
    rng = random.Random(seed)
    end = end or datetime.now()
    start = end - timedelta(days=days)
    span = (end - start).total_seconds()

    offsets = sorted(rng.uniform(0, span) for _ in range(announces))

    snapshot = StatsSnapshot(torrents=torrents)
    for offset in offsets:
        snapshot.add_new_connection(
            is_completed=rng.random() < completion_rate,
            at=start + timedelta(seconds=offset),
        )
    return snapshot


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [GENERATOR] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    parser = argparse.ArgumentParser(description="Generate a synthetic tracker stats log")
    parser.add_argument("--days", type=float, default=3, help="Span of history in days")
    parser.add_argument("--announces", type=int, default=2000, help="Number of announces")
    parser.add_argument("--torrents", type=int, default=3, help="Torrent count to report")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", default=str(DEFAULT_DATABASE_PATH), help="Output path")
    args = parser.parse_args()

    snapshot = generate_snapshot(args.days, args.announces, args.torrents, seed=args.seed)

    os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        f.write(snapshot.to_json_string())
    logger.info(f"✅ Wrote {len(snapshot)} entries to {args.output}")


if __name__ == "__main__":
    main()
