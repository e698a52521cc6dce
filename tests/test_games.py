"""
Test matrix games, rock-paper-scissors and the self-play driver
"""
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import numpy as np
import pytest

from cfr import CFRPlus, InvalidActionCount, InvalidParameter, RegretError, VanillaCFR
from games import InvalidAction, MatrixGame, RPSAction, SelfPlayRunner, create_rps, create_weighted_rps
from games.rps import NASH, PAYOFF
from utils.metrics import compute_exploitability, compute_nash_conv, max_deviation


def test_rps_action_from_index():
    assert [RPSAction.from_index(i) for i in range(3)] == [
        RPSAction.ROCK, RPSAction.PAPER, RPSAction.SCISSORS,
    ]
    for bad in (-1, 3, 100):
        with pytest.raises(InvalidAction):
            RPSAction.from_index(bad)


def test_rps_action_from_index_rejects_non_integers():
    assert RPSAction.from_index(np.int64(2)) is RPSAction.SCISSORS
    for bad in (1.5, '1', None):
        with pytest.raises(InvalidAction):
            RPSAction.from_index(bad)


def test_sampled_iteration_without_rng():
    runner = SelfPlayRunner.for_variant(create_rps(), 'cfr+')
    for _ in range(5):
        runner.iteration()
    assert runner.t == 5
    assert runner.matcher_one.num_updates == 5
    assert abs(runner.best_weight().sum() - 1.0) < 1e-12


def test_invalid_action_is_regret_error():
    assert issubclass(InvalidAction, RegretError)
    assert issubclass(InvalidAction, ValueError)


def test_rps_rewards():
    # Against rock: rock ties, paper wins, scissors loses
    assert np.array_equal(RPSAction.ROCK.to_reward(), [0.0, 1.0, -1.0])
    assert np.array_equal(RPSAction.PAPER.to_reward(), [-1.0, 0.0, 1.0])
    assert np.array_equal(RPSAction.SCISSORS.to_reward(), [1.0, -1.0, 0.0])


def test_rps_constants_are_read_only():
    with pytest.raises(ValueError):
        PAYOFF[0, 0] = 5.0
    with pytest.raises(ValueError):
        NASH[0] = 1.0
    with pytest.raises(ValueError):
        create_rps().A[0, 0] = 5.0


def test_row_and_column_rewards():
    game = create_rps()
    assert game.num_actions == (3, 3)
    assert np.array_equal(game.row_rewards(RPSAction.ROCK), RPSAction.ROCK.to_reward())
    # Column player facing row paper: rock loses, paper ties, scissors wins
    assert np.array_equal(game.col_rewards(RPSAction.PAPER), [-1.0, 0.0, 1.0])
    with pytest.raises(InvalidAction):
        game.row_rewards(3)
    with pytest.raises(InvalidAction):
        game.col_rewards(-1)


def test_expected_rewards_against_nash_are_zero():
    game = create_rps()
    assert np.allclose(game.expected_row_rewards(NASH), 0.0)
    assert np.allclose(game.expected_col_rewards(NASH), 0.0)
    assert abs(game.value(NASH, NASH)) < 1e-12


def test_solve_exact_rps():
    x, y, v = create_rps().solve_exact()
    assert np.allclose(x, 1.0 / 3.0, atol=1e-6)
    assert np.allclose(y, 1.0 / 3.0, atol=1e-6)
    assert abs(v) < 1e-6


def test_solve_exact_weighted_rps():
    game = create_weighted_rps()
    x, y, v = game.solve_exact()
    print(f"\nWeighted RPS equilibrium: x={x}, y={y}, v={v}")
    assert np.allclose(x, [0.25, 0.5, 0.25], atol=1e-6)
    assert np.allclose(y, [0.25, 0.5, 0.25], atol=1e-6)
    assert abs(v) < 1e-6
    assert compute_exploitability(game, x, y) < 1e-6
    # Cached
    assert game.solve_exact() is game.solve_exact()


def test_solve_exact_non_square():
    game = MatrixGame([[3.0, 1.0], [0.0, 2.0], [-1.0, -1.0]])
    x, y, v = game.solve_exact()
    assert x.shape == (3,)
    assert y.shape == (2,)
    assert abs(v - 1.5) < 1e-6
    assert compute_exploitability(game, x, y) < 1e-6


def test_exploitability():
    game = create_rps()
    assert compute_exploitability(game, NASH, NASH) < 1e-12

    rock = np.array([1.0, 0.0, 0.0])
    # Row gains nothing by deviating from rock vs uniform; column gains 1 by playing paper
    assert abs(compute_exploitability(game, rock, NASH) - 1.0) < 1e-12
    assert abs(compute_nash_conv(game, rock, NASH) - 0.5) < 1e-12
    assert abs(compute_exploitability(game, rock, rock) - 2.0) < 1e-12


def test_max_deviation():
    assert max_deviation([0.5, 0.25, 0.25], NASH) == pytest.approx(1.0 / 6.0)
    assert max_deviation(NASH, NASH) == 0.0


def test_invalid_games():
    with pytest.raises(InvalidParameter):
        MatrixGame([1.0, 2.0, 3.0])
    with pytest.raises(InvalidActionCount):
        MatrixGame([[]])
    with pytest.raises(InvalidActionCount):
        MatrixGame.random(0, np.random.default_rng(0))


def test_random_game():
    game = MatrixGame.random(5, np.random.default_rng(3))
    assert game.num_actions == (5, 5)
    assert np.all(np.abs(game.A) <= 1.0)
    x, y, _ = game.solve_exact()
    assert compute_exploitability(game, x, y) < 1e-6


def test_runner_rejects_mismatched_minimizers():
    game = create_rps()
    with pytest.raises(InvalidParameter):
        SelfPlayRunner(game, VanillaCFR(3), VanillaCFR(4))
    with pytest.raises(InvalidParameter):
        SelfPlayRunner(game, VanillaCFR(2), VanillaCFR(3))


def test_runner_rejects_unknown_mode():
    with pytest.raises(InvalidParameter):
        SelfPlayRunner(create_rps(), VanillaCFR(3), VanillaCFR(3), mode='exact')


def test_runner_sampled_round():
    runner = SelfPlayRunner.for_variant(create_rps(), 'cfr+')
    rng = np.random.default_rng(0)

    runner.run_one(rng)
    runner.update_regret()

    assert runner.t == 1
    assert runner.matcher_one.num_updates == 1
    assert runner.matcher_two.num_updates == 1
    assert abs(runner.best_weight().sum() - 1.0) < 1e-12
    assert abs(runner.opponent_best_weight().sum() - 1.0) < 1e-12


def test_runner_expected_mode_from_nash_stays_put():
    game = create_rps()
    runner = SelfPlayRunner.for_variant(game, 'vanilla', mode='expected')
    runner.train(50)
    assert np.allclose(runner.best_weight(), NASH)
    assert runner.exploitability() < 1e-12


def test_runner_with_matchers_copies():
    template = CFRPlus(3)
    runner = SelfPlayRunner.with_matchers(create_rps(), template)
    assert runner.matcher_one is not template
    assert runner.matcher_one is not runner.matcher_two
    runner.train(10, rng=np.random.default_rng(1))
    assert template.num_updates == 0
    assert runner.matcher_one.num_updates == 10


def test_train_logs_history(capsys):
    runner = SelfPlayRunner.for_variant(create_rps(), 'dcfr', mode='sampled')
    history = runner.train(100, rng=np.random.default_rng(2), log_every=25)
    out = capsys.readouterr().out
    assert [t for t, _ in history] == [25, 50, 75, 100]
    assert all(e > -1e-12 for _, e in history)
    assert 'Iter' in out
    assert 'Complete' in out


def test_train_is_reproducible():
    a = SelfPlayRunner.for_variant(create_rps(), 'pcfr+')
    b = SelfPlayRunner.for_variant(create_rps(), 'pcfr+')
    a.train(200, rng=np.random.default_rng(9))
    b.train(200, rng=np.random.default_rng(9))
    assert np.array_equal(a.best_weight(), b.best_weight())
    assert np.array_equal(a.opponent_best_weight(), b.opponent_best_weight())
