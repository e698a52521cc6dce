"""
Hot-path benchmark for update_regret

52 actions (a deck of cards), a fixed skewed reward vector, 1000 updates per
run. Reports per-update time and the process RSS growth, which should stay
flat because updates reuse their buffers.
"""
import argparse
import sys
import time

import numpy as np
import pandas as pd
import psutil

from cfr.errors import RegretError
from cfr.registry import DISPLAY_NAMES, VARIANTS, create_minimizer

NUM_ACTIONS = 52
UPDATES = 1000


def make_rewards(n=NUM_ACTIONS):
    rewards = np.full(n, -100.0)
    rewards[0] = 10.0
    rewards[1] = 50.0
    rewards[n - 1] = 200.0
    return rewards


def bench_update(variant, rewards, rng):
    m = create_minimizer(variant, len(rewards))
    for _ in range(UPDATES):
        m.update_regret(rewards)


def bench_update_best_weight(variant, rewards, rng):
    m = create_minimizer(variant, len(rewards))
    for _ in range(UPDATES):
        m.update_regret(rewards)
    weights = m.best_weight()
    return weights[0] + weights[1] + weights[-1]


def bench_update_sample(variant, rewards, rng):
    m = create_minimizer(variant, len(rewards))
    for _ in range(UPDATES):
        m.update_regret(rewards)
        m.next_action(rng)


CASES = {
    'update': bench_update,
    'update+best_weight': bench_update_best_weight,
    'update+sample': bench_update_sample,
}


def run_benchmarks(variants=None, repeats=5, seed=0):
    process = psutil.Process()
    rewards = make_rewards()
    rng = np.random.default_rng(seed)
    rows = []

    for variant in variants or VARIANTS:
        for case, fn in CASES.items():
            rss_before = process.memory_info().rss / 1024 / 1024
            times = []
            for _ in range(repeats):
                start = time.perf_counter()
                fn(variant, rewards, rng)
                times.append(time.perf_counter() - start)
            rss_after = process.memory_info().rss / 1024 / 1024

            rows.append({
                'variant': DISPLAY_NAMES[variant],
                'case': case,
                'us_per_update': min(times) / UPDATES * 1e6,
                'rss_delta_mb': rss_after - rss_before,
            })
    return pd.DataFrame(rows)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='little-sorry-bench', description=__doc__.strip().splitlines()[0])
    parser.add_argument('--variants', nargs='+', default=None)
    parser.add_argument('--repeats', type=int, default=5)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args(argv)

    try:
        variants = [create_minimizer(v, 1).name for v in args.variants] if args.variants else None
    except RegretError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Benchmarking {NUM_ACTIONS} actions x {UPDATES} updates, best of {args.repeats}...\n")
    results = run_benchmarks(variants, args.repeats, args.seed)
    table = results.pivot_table(index='variant', columns='case', values='us_per_update')
    print(table.to_string(float_format=lambda v: f"{v:8.2f}"))
    print(f"\nRSS growth over all runs: {results['rss_delta_mb'].sum():.2f} MB")
    return 0


if __name__ == '__main__':
    sys.exit(main())
