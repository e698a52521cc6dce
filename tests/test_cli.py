"""
Test the command line entry points
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import pandas as pd

from experiments import benchmark, compare_algorithms, run_rps


def test_run_rps_summary(capsys):
    code = run_rps.main(['--variant', 'dcfr', '--iterations', '500', '--seed', '1'])
    out = capsys.readouterr().out
    assert code == 0
    assert 'DCFR after 500 iterations on rps' in out
    assert 'Exploitability' in out
    assert 'Exact equilibrium' in out


def test_run_rps_random_game_expected_mode(capsys):
    code = run_rps.main(['--game', 'random', '--actions', '4', '--mode', 'expected',
                         '--iterations', '200', '--seed', '3', '--log-every', '100'])
    out = capsys.readouterr().out
    assert code == 0
    assert 'Iter' in out
    assert 'random' in out


def test_run_rps_unknown_variant(capsys):
    code = run_rps.main(['--variant', 'cfr++', '--iterations', '10'])
    err = capsys.readouterr().err
    assert code == 2
    assert 'unknown variant' in err


def test_run_rps_invalid_config(capsys):
    assert run_rps.main(['--game', 'random', '--actions', '0']) == 2
    assert run_rps.main(['--iterations', '-5']) == 2
    assert run_rps.main(['--log-every', '-1']) == 2
    assert run_rps.main(['--game', 'rps', '--actions', '0', '--iterations', '10']) == 2
    assert 'error:' in capsys.readouterr().err


def test_compare_grid(tmp_path, capsys):
    csv = tmp_path / 'results.csv'
    fig = tmp_path / 'convergence.png'
    code = compare_algorithms.main([
        '--variants', 'vanilla', 'pcfr+',
        '--iterations', '50', '100',
        '--repeats', '2',
        '--csv', str(csv),
        '--plot', str(fig),
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert 'Vanilla CFR' in out
    assert 'PCFR+' in out

    results = pd.read_csv(csv)
    assert len(results) == 2 * 2 * 2
    assert set(results['iterations']) == {50, 100}
    assert (results['distance'] >= 0.0).all()
    assert fig.exists() and fig.stat().st_size > 0


def test_compare_is_seeded():
    a = compare_algorithms.compare(['cfr+'], iterations=[100], repeats=2, seed=5)
    b = compare_algorithms.compare(['cfr+'], iterations=[100], repeats=2, seed=5)
    assert a['distance'].tolist() == b['distance'].tolist()


def test_compare_summary_table():
    results = compare_algorithms.compare(['linear', 'cfr+'], iterations=[50], repeats=1)
    table = compare_algorithms.summarize(results)
    # Rows follow registry order, not input order
    assert list(table.index) == ['CFR+', 'Linear CFR']
    assert list(table.columns) == [50]


def test_compare_invalid_config():
    assert compare_algorithms.main(['--variants', 'nope', '--iterations', '10']) == 2
    assert compare_algorithms.main(['--iterations', '0']) == 2
    assert compare_algorithms.main(['--iterations', '10', '--repeats', '0']) == 2


def test_benchmark(capsys):
    code = benchmark.main(['--variants', 'cfr+', 'pdcfr+', '--repeats', '1'])
    out = capsys.readouterr().out
    assert code == 0
    assert 'RSS growth' in out
    assert 'update+sample' in out


def test_benchmark_unknown_variant():
    assert benchmark.main(['--variants', 'fast']) == 2


def test_benchmark_rows():
    results = benchmark.run_benchmarks(['vanilla'], repeats=1)
    assert set(results['case']) == set(benchmark.CASES)
    assert (results['us_per_update'] > 0.0).all()
