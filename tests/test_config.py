import pytest
from src.main.utils.config_loader import load_configs, load_layered_config
from src.main.utils.config import MissingConfigError, InvalidConfigError
from src.main.spoofing.config.validation import validate_detector_config
from src.main.spoofing.detector import load_detector_config


def test_load_configs_merges_in_order(tmp_path):
    base = tmp_path / 'base.yml'
    over = tmp_path / 'over.yml'
    base.write_text("cell_size: 10\nnested:\n  a: 1\n  b: 2\n", encoding='utf-8')
    over.write_text("cell_size: 5\nnested:\n  b: 3\n", encoding='utf-8')
    cfg = load_configs([str(base), str(over)])
    assert cfg['cell_size'] == 5
    assert cfg['nested'] == {'a': 1, 'b': 3}


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_configs([str(tmp_path / 'nope.yml')])


def test_default_detector_config():
    cfg = load_detector_config()
    assert cfg['cell_size'] == 10
    assert cfg['attack_bin'] == 0
    assert cfg['attack_percent'] == 70.0


def test_override_file(tmp_path):
    over = tmp_path / 'local.yml'
    over.write_text("attack_percent: 50.0\nrun_lbp: true\n", encoding='utf-8')
    cfg = load_detector_config([str(over)])
    assert cfg['attack_percent'] == 50.0
    assert cfg['run_lbp'] is True
    assert cfg['threshold_levels'] == 10


def test_validation_errors():
    good = {'cell_size': 10, 'threshold_levels': 10, 'attack_bin': 0, 'attack_percent': 70.0}
    validate_detector_config(good)
    with pytest.raises(MissingConfigError):
        validate_detector_config({k: v for k, v in good.items() if k != 'cell_size'})
    with pytest.raises(InvalidConfigError):
        validate_detector_config(dict(good, attack_bin=26))
    with pytest.raises(InvalidConfigError):
        validate_detector_config(dict(good, threshold_levels=1))


def test_layered_config_skips_empty_overrides(tmp_path):
    base = tmp_path / 'base.yml'
    base.write_text("cell_size: 8\n", encoding='utf-8')
    assert load_layered_config(str(base), [None, '']) == {'cell_size': 8}


def test_non_mapping_file_rejected(tmp_path):
    bad = tmp_path / 'list.yml'
    bad.write_text("- 1\n- 2\n", encoding='utf-8')
    with pytest.raises(InvalidConfigError):
        load_configs([str(bad)])


def test_log_level_validated():
    good = {'cell_size': 10, 'threshold_levels': 10, 'attack_bin': 0, 'attack_percent': 70.0}
    validate_detector_config(dict(good, log_level='debug'))
    with pytest.raises(InvalidConfigError):
        validate_detector_config(dict(good, log_level='LOUD'))
