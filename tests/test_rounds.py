from __future__ import annotations

import json

import pytest

from promptify_scoring.engine import rounds as R
from promptify_scoring.engine.general.utils import (
    ConfigParseError,
    clear_config_cache,
    temp_data_dir,
)


@pytest.fixture(autouse=True)
def _clean(monkeypatch):
    monkeypatch.delenv("PROMPTIFY_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def test_bundled_catalog_loads():
    rounds = R.load_rounds()
    assert [r.id for r in rounds] == [1, 2, 3]
    phrases = [t.text for t in rounds[0].targets]
    assert phrases == [
        "The cage is out of the lion",
        "Don't use the exact words",
        "That's what she said",
        "Life is unfair",
    ]
    assert all(t.kind == "phrase" for t in rounds[0].targets)


def test_get_target_is_case_insensitive():
    t = R.get_target("1D")
    assert t == R.Target(id="1d", round_id=1, kind="phrase", text="Life is unfair")


def test_art_round_target():
    t = R.get_target("3a")
    assert t.kind == "art"
    assert t.text.splitlines()[1] == "( o.o )"


def test_unknown_target_raises():
    with pytest.raises(R.UnknownTargetError):
        R.get_target("9z")


def test_iter_targets_ids_are_unique():
    ids = [t.id for t in R.iter_targets()]
    assert len(ids) == len(set(ids))
    assert "2a" in ids


@pytest.mark.parametrize(
    "payload",
    [
        {"rounds": []},
        {"rounds": [{"id": 1, "kind": "image", "sub_rounds": []}]},
        {"rounds": [{"id": 1, "kind": "phrase", "sub_rounds": [{"id": "1a"}]}]},
        {
            "rounds": [
                {"id": 1, "kind": "phrase", "sub_rounds": [{"id": "1a", "target": "x"}]},
                {"id": 2, "kind": "art", "sub_rounds": [{"id": "1a", "target": "#"}]},
            ]
        },
    ],
)
def test_malformed_catalog_is_rejected(tmp_path, payload):
    (tmp_path / "rounds.json").write_text(json.dumps(payload), encoding="utf-8")
    with temp_data_dir(tmp_path):
        with pytest.raises(ConfigParseError):
            R.load_rounds()


def test_custom_catalog_via_temp_data_dir(tmp_path):
    payload = {
        "rounds": [
            {"id": 7, "title": "Custom", "kind": "phrase", "sub_rounds": [{"id": "7a", "target": "hello world"}]}
        ]
    }
    (tmp_path / "rounds.json").write_text(json.dumps(payload), encoding="utf-8")
    with temp_data_dir(tmp_path):
        (only,) = R.load_rounds()
        assert only.title == "Custom"
        assert only.description == ""
        assert R.get_target("7a").text == "hello world"
