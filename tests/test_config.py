import json
import os

import pytest

from grammar_solver.config import Config


def write_config(tmp_path, cfg):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(cfg))
    return path


def test_load(tmp_path):
    path = write_config(tmp_path, {
        'grammar': 'sentence.txt',
        'symbols': ['<s>', '<np>'],
        'count': '3',
        'seed': 42,
        'check': True,
    })
    config = Config(path)
    assert config.grammar == os.path.join(str(tmp_path), 'sentence.txt')
    assert config.symbols == ['<s>', '<np>']
    assert config.count == 3
    assert config.seed == 42
    assert config.check


def test_defaults(tmp_path):
    config = Config(write_config(tmp_path, {'grammar': 'g.txt', 'count': 1, 'seed': None}))
    assert config.symbols is None
    assert config.seed is None
    assert not config.check


def test_seed_optional(tmp_path):
    config = Config(write_config(tmp_path, {'grammar': 'g.txt', 'count': 1}))
    assert config.seed is None


@pytest.mark.parametrize('cfg', [
    {'count': 1},
    {'grammar': 'g.txt'},
    {'grammar': 'g.txt', 'count': 0},
    {'grammar': 'g.txt', 'count': 1, 'symbols': '<s>'},
    {'grammar': 'g.txt', 'count': 1, 'symbols': ['<s>', '']},
])
def test_invalid(tmp_path, cfg):
    with pytest.raises(AssertionError):
        Config(write_config(tmp_path, cfg))
