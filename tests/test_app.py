import pytest

import app


def test_usage_on_wrong_argument_count(capsys, monkeypatch):
    def _no_training(*a, **k):
        raise AssertionError("training must not run")

    monkeypatch.setattr(app, 'run', _no_training)
    assert app.main(['1.0']) == 0
    out = capsys.readouterr().out
    assert 'Usage: linear-perceptron a b c' in out
    assert 'After training' not in out


def test_usage_on_too_many_arguments(capsys):
    assert app.main(['1', '2', '3', '4']) == 0
    assert 'Usage' in capsys.readouterr().out


def test_non_numeric_argument_is_fatal():
    with pytest.raises(ValueError):
        app.main(['1.4', '-5', 'abc'])


def test_full_run_prints_report(capsys, monkeypatch):
    monkeypatch.setenv('PERCEPTRON_SEED', '7')
    assert app.main(['1.4', '-5', '13']) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 5
    assert lines[0].startswith('Initialized, before training Perceptron(bias=0.01, learning_rate=0.0005, weights=[')
    assert lines[1].startswith('After training Perceptron(')
    assert lines[2] == 'Original inequality: 1.40x - 5.00y - 13.00 > 0'
    assert lines[3] == 'The actual slope/intercept form : y = 0.28x - 2.60'
    assert lines[4].startswith('Calculated slope/intercept form : ')


def test_seed_makes_runs_reproducible(capsys, monkeypatch):
    monkeypatch.setenv('PERCEPTRON_SEED', '11')
    app.main(['1', '2', '3'])
    first = capsys.readouterr().out
    app.main(['1', '2', '3'])
    assert capsys.readouterr().out == first


def test_usage_path_ignores_bad_log_level(capsys, monkeypatch):
    monkeypatch.setenv('PERCEPTRON_LOG_LEVEL', 'LOUD')
    assert app.main([]) == 0
    assert 'Usage' in capsys.readouterr().out


def test_bad_log_level_is_reported(monkeypatch):
    monkeypatch.setenv('PERCEPTRON_LOG_LEVEL', 'LOUD')
    with pytest.raises(ValueError, match='PERCEPTRON_LOG_LEVEL'):
        app.main(['1', '2', '3'])


def test_bad_seed_is_reported(monkeypatch):
    monkeypatch.setenv('PERCEPTRON_SEED', 'abc')
    with pytest.raises(ValueError, match='PERCEPTRON_SEED must be an integer'):
        app.main(['1', '2', '3'])


def test_non_finite_argument_is_fatal():
    with pytest.raises(ValueError, match='finite'):
        app.main(['nan', '2', '3'])
