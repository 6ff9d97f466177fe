# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import importlib
import json
import os

import pytest

from promptify_scoring.engine import score

# Submodules by path: the utils facade re-exports a function named load_config.
LC = importlib.import_module("promptify_scoring.engine.general.utils.load_config")
LOG = importlib.import_module("promptify_scoring.engine.general.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
DataDirNotFound = LC.DataDirNotFound
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via PROMPTIFY_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("PROMPTIFY_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("PROMPTIFY_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("PROMPTIFY_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_cache_hit_until_cleared(tmp_data_dir):
    p = tmp_data_dir / "banned.json"
    p.write_text(json.dumps({"words": ["unfair", "lion"]}), encoding="utf-8")
    st = p.stat()

    out1 = load_config("banned")
    assert out1 == {"words": ["unfair", "lion"]}

    # same mtime → served from cache
    p.write_text(json.dumps({"words": ["changed"]}), encoding="utf-8")
    os.utime(p, ns=(st.st_atime_ns, st.st_mtime_ns))
    assert load_config("banned") == out1

    clear_config_cache()
    assert load_config("banned") == {"words": ["changed"]}


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    # validator output never leaks into the cached dict
    assert load_config("settings", mode="validated_dict") == {"alpha": 1}

    def failing(d: dict) -> dict:
        raise ValueError("bad shape")

    with pytest.raises(ConfigParseError):
        load_config("settings", mode="validated_dict", validator=failing)

    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config("x", mode="nope")  # type: ignore[arg-type]


def test_default_data_dir_walks_up_then_raises(tmp_path, monkeypatch):
    start = tmp_path / "deep" / "er"
    start.mkdir(parents=True)
    (tmp_path / "data").mkdir()
    assert LC._default_data_dir(start) == (tmp_path / "data").resolve()

    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "nope"])
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir(start)


def test_bundled_data_dir_is_found_without_env():
    assert (LC._default_data_dir() / "rounds.json").is_file()


def test_temp_data_dir_restores_env(tmp_path):
    (tmp_path / "one.json").write_text(json.dumps({"v": 1}), encoding="utf-8")
    with LC.temp_data_dir(tmp_path):
        assert os.environ["PROMPTIFY_DATA_DIR"] == str(tmp_path)
        assert load_config("one") == {"v": 1}
    assert "PROMPTIFY_DATA_DIR" not in os.environ


# ---------- log.debug tests ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("nobody listens", topic="scoring")
    assert "nobody listens" not in capsys.readouterr().err


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("PROMPTIFY_DEBUG_TOPICS", "scoring")
    LOG.reload_topics()

    LOG.debug("hello on scoring", topic="scoring")
    LOG.debug("should be silent", topic="rounds")

    captured = capsys.readouterr()
    assert "[scoring][DEBUG] hello on scoring" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("PROMPTIFY_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][INFO] m2" in captured.err


def test_scorer_traces_on_scoring_topic(monkeypatch, capsys):
    monkeypatch.setenv("PROMPTIFY_DEBUG_TOPICS", "scoring")
    LOG.reload_topics()

    score("Life is unfair", "life is unfair", "say that life is unfair")
    assert "flagged (contains)" in capsys.readouterr().err
