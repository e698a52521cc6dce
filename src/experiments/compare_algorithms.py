"""
Compare every regret minimizer on rock-paper-scissors self-play

Each (variant, iteration count, repeat) is an independent run, so the grid
is spread over joblib workers. Results are averaged over repeats and printed
as a table; lower is better, Nash = 0.
"""
import argparse
import sys
import time

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from cfr.errors import InvalidParameter, RegretError
from cfr.registry import DISPLAY_NAMES, VARIANTS, get_variant
from games.rps import create_rps
from games.self_play import MODES, SelfPlayRunner
from utils.metrics import max_deviation

DEFAULT_ITERATIONS = (1000, 2500, 5000, 10000, 25000)


def run_algorithm(variant, iterations, seed, mode='sampled'):
    """One self-play run; returns a result row"""
    game = create_rps()
    runner = SelfPlayRunner.for_variant(game, variant, mode=mode)
    rng = np.random.default_rng(seed)

    start = time.perf_counter()
    runner.train(iterations, rng=rng)
    elapsed = time.perf_counter() - start

    x_star, _, _ = game.solve_exact()
    return {
        'variant': DISPLAY_NAMES[variant],
        'iterations': iterations,
        'distance': max_deviation(runner.best_weight(), x_star),
        'exploitability': runner.exploitability(),
        'seconds': elapsed,
    }


def compare(variants=None, iterations=DEFAULT_ITERATIONS, repeats=3, seed=0,
            mode='sampled', n_jobs=1):
    """
    Run the full grid

    Returns:
        DataFrame with one row per run
    """
    variants = [get_variant(v).name for v in (variants or VARIANTS)]
    if repeats < 1:
        raise InvalidParameter(f"repeats must be >= 1, got {repeats}")

    jobs = [(v, n) for v in variants for n in iterations for _ in range(repeats)]
    seeds = np.random.SeedSequence(seed).spawn(len(jobs))

    rows = Parallel(n_jobs=n_jobs)(
        delayed(run_algorithm)(v, n, s, mode) for (v, n), s in zip(jobs, seeds)
    )
    return pd.DataFrame(rows)


def summarize(results: pd.DataFrame, metric='distance') -> pd.DataFrame:
    """Mean of metric per variant (rows) and iteration count (columns)"""
    order = [DISPLAY_NAMES[v] for v in VARIANTS if DISPLAY_NAMES[v] in set(results['variant'])]
    table = results.pivot_table(index='variant', columns='iterations', values=metric, aggfunc='mean')
    return table.reindex(order)


def plot(results: pd.DataFrame, path, metric='distance'):
    """Save a log-log convergence plot"""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    import seaborn as sns

    sns.set_theme(style='whitegrid')
    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(data=results, x='iterations', y=metric, hue='variant',
                 marker='o', errorbar=None, ax=ax)
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('Iterations')
    ax.set_ylabel('Max deviation from Nash' if metric == 'distance' else metric)
    ax.set_title('Rock-paper-scissors self-play')
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='little-sorry-compare',
        description='Compare CFR-family regret minimizers on rock-paper-scissors',
    )
    parser.add_argument('--variants', nargs='+', default=None,
                        help=f"subset of: {', '.join(VARIANTS)}")
    parser.add_argument('--iterations', type=int, nargs='+', default=list(DEFAULT_ITERATIONS))
    parser.add_argument('--repeats', type=int, default=3)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--mode', choices=MODES, default='sampled')
    parser.add_argument('--jobs', type=int, default=1, help='joblib workers (-1 = all cores)')
    parser.add_argument('--csv', default=None, help='write raw results to this CSV file')
    parser.add_argument('--plot', default=None, help='write a convergence figure to this file')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        if any(n < 1 for n in args.iterations):
            raise InvalidParameter(f"--iterations must all be >= 1, got {args.iterations}")
        results = compare(args.variants, args.iterations, args.repeats,
                          args.seed, args.mode, args.jobs)
    except RegretError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("Max deviation from Nash by iteration count (lower is better, Nash = 0.0):\n")
    print(summarize(results).to_string(float_format=lambda v: f"{v:.4f}"))

    if args.csv:
        results.to_csv(args.csv, index=False)
        print(f"\n✅ Saved results to {args.csv}")
    if args.plot:
        plot(results, args.plot)
        print(f"✅ Saved figure to {args.plot}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
