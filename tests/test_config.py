# tests/test_config.py

import json

import pytest
from weighted_autocompleter.utils.config_manager import DEFAULTS, Config


def test_defaults_in_memory():
    cfg = Config()
    assert cfg["engine"] == "trie"
    assert cfg["max_suggestions"] == 5
    assert dict(cfg.items()) == DEFAULTS


def test_load_overrides(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"engine": "binary", "max_suggestions": 9, "bogus": 1}))
    cfg = Config(str(p))
    assert cfg["engine"] == "binary"
    assert cfg["max_suggestions"] == 9
    assert cfg.get("bogus") is None


def test_bad_json_keeps_defaults(tmp_path, caplog):
    p = tmp_path / "config.json"
    p.write_text("{not json")
    cfg = Config(str(p))
    assert cfg["engine"] == "trie"
    assert "using defaults" in caplog.text


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("max_suggestions", "12")
    assert cfg["max_suggestions"] == 12
    assert json.loads(p.read_text())["max_suggestions"] == 12


def test_set_unknown_key():
    with pytest.raises(KeyError):
        Config().set("theme", "dark")


def test_missing_file_is_not_created(tmp_path):
    p = tmp_path / "config.json"
    Config(str(p))
    assert not p.exists()


@pytest.mark.parametrize("key,val", [
    ("max_suggestions", -3),
    ("max_suggestions", "abc"),
    ("max_suggestions", True),
    ("log_level", "verbose"),
    ("engine", "btree"),
    ("bench_runs", 0),
    ("log_path", 7),
])
def test_invalid_file_value_raises(tmp_path, key, val):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({key: val}))
    with pytest.raises(ValueError) as exc:
        Config(str(p))
    assert key in str(exc.value)


def test_log_level_is_normalised(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"log_level": "debug"}))
    assert Config(str(p))["log_level"] == "DEBUG"


@pytest.mark.parametrize("key,val", [
    ("max_suggestions", "nope"),
    ("max_suggestions", "-1"),
    ("engine", "quantum"),
    ("log_level", "loud"),
])
def test_set_rejects_bad_values(key, val):
    cfg = Config()
    with pytest.raises(ValueError):
        cfg.set(key, val)
    assert cfg[key] == DEFAULTS[key]


def test_set_optional_path(tmp_path):
    cfg = Config()
    cfg.set("log_path", str(tmp_path / "run.log"))
    assert cfg["log_path"].endswith("run.log")
