"""
Run one regret minimizer in self-play and print the resulting strategies

    little-sorry-rps --variant dcfr --iterations 10000 --log-every 1000
    little-sorry-rps --game random --actions 5 --mode expected
"""
import argparse
import sys

import numpy as np

from cfr.errors import InvalidParameter, RegretError
from cfr.registry import DISPLAY_NAMES, VARIANTS, get_variant
from games.matrix_game import MatrixGame
from games.rps import create_rps
from games.self_play import MODES, SelfPlayRunner


def build_parser():
    parser = argparse.ArgumentParser(
        prog='little-sorry-rps',
        description='Self-play a zero-sum matrix game with a CFR-family regret minimizer',
    )
    parser.add_argument('--variant', default='cfr+',
                        help=f"one of: {', '.join(VARIANTS)} (default: cfr+)")
    parser.add_argument('--iterations', type=int, default=10000)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--mode', choices=MODES, default='sampled')
    parser.add_argument('--game', choices=('rps', 'random'), default='rps')
    parser.add_argument('--actions', type=int, default=3,
                        help='actions per player for --game random')
    parser.add_argument('--log-every', type=int, default=0,
                        help='print diagnostics every K iterations (0 = only the summary)')
    return parser


def format_strategy(weights):
    return '[' + ', '.join(f"{w:.4f}" for w in weights) + ']'


def run(args):
    variant = get_variant(args.variant)
    if args.iterations < 0:
        raise InvalidParameter(f"--iterations must be >= 0, got {args.iterations}")
    if args.log_every < 0:
        raise InvalidParameter(f"--log-every must be >= 0, got {args.log_every}")
    if args.actions < 1:
        raise InvalidParameter(f"--actions must be >= 1, got {args.actions}")

    rng = np.random.default_rng(args.seed)
    if args.game == 'rps':
        game = create_rps()
    else:
        game = MatrixGame.random(args.actions, rng)

    runner = SelfPlayRunner.for_variant(game, variant.name, mode=args.mode)
    runner.train(args.iterations, rng=rng, log_every=args.log_every)

    x_star, y_star, value = game.solve_exact()
    print(f"\n{DISPLAY_NAMES[variant.name]} after {args.iterations} iterations on {game.name}:")
    print(f"  Player 1 average: {format_strategy(runner.best_weight())}")
    print(f"  Player 2 average: {format_strategy(runner.opponent_best_weight())}")
    print(f"  Exploitability:   {runner.exploitability():.6f}")
    print(f"  Exact equilibrium: {format_strategy(x_star)} / {format_strategy(y_star)} (value {value:.4f})")
    return runner


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except RegretError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
