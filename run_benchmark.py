"""
Resampler benchmark.

Times `resample` over growing raw logs for every granularity/lookback
pair. The cursor only moves forward, so run time should grow linearly
with the raw log size rather than with log size x grid size.
"""
import argparse
import logging
import os
import sys
import time

import pandas as pd
from tqdm import tqdm

from generate_snapshot import generate_snapshot
from tracker_stats.data_loader import to_raw_log
from tracker_stats.resampler import LOOKBACK_OPTIONS, Granularity, resample

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [BENCHMARK] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

OUTPUT_DIR = "evaluation_results"


def run_benchmark(sizes, repeats=3, seed=42):
    rows = []
    for size in tqdm(sizes, desc="Raw log sizes"):
        snapshot = generate_snapshot(days=3, announces=size, torrents=1, seed=seed)
        raw_log = to_raw_log(snapshot, timezone="UTC")
        now = raw_log['timestamp'].iloc[-1] + pd.Timedelta(minutes=1)

        for granularity in Granularity:
            for lookback in LOOKBACK_OPTIONS:
                timings = []
                for _ in range(repeats):
                    t0 = time.perf_counter()
                    points = resample(raw_log, granularity, lookback, now=now)
                    timings.append(time.perf_counter() - t0)
                rows.append({
                    'raw_entries': size,
                    'granularity': granularity.value,
                    'lookback_hours': lookback,
                    'grid_points': len(points),
                    'best_ms': min(timings) * 1000,
                })
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description="Benchmark the stats resampler")
    parser.add_argument("--sizes", type=int, nargs="+", default=[1_000, 10_000, 100_000])
    parser.add_argument("--repeats", type=int, default=3)
    args = parser.parse_args()

    results = run_benchmark(args.sizes, args.repeats)
    print(results.to_string(index=False))

    os.makedirs(OUTPUT_DIR, exist_ok=True)
    out_path = os.path.join(OUTPUT_DIR, "resampler_benchmark.csv")
    results.to_csv(out_path, index=False)
    logger.info(f"Results saved to {out_path}")


if __name__ == "__main__":
    main()
