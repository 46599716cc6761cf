import json

import pytest

from config_loader import Tuning, load_tuning, tuning_from_dict
from settings import GRAVITY, JUMP_FORCE


def write_json(tmp_path, data):
    p = tmp_path / "tuning.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_defaults_come_from_settings():
    t = Tuning()
    assert t.gravity == GRAVITY
    assert t.jump_force == JUMP_FORCE


def test_partial_override(tmp_path):
    t = load_tuning(write_json(tmp_path, {"gravity": 1200, "gap_range": 150.5}))
    assert t.gravity == 1200.0
    assert t.gap_range == 150.5
    assert t.jump_force == JUMP_FORCE


def test_empty_object_is_defaults(tmp_path):
    assert load_tuning(write_json(tmp_path, {})) == Tuning()


@pytest.mark.parametrize("data, match", [
    ([], "must be an object"),
    ({"gravty": 10}, "Unknown tuning keys: gravty"),
    ({"gravity": "heavy"}, "must be a number"),
    ({"gravity": True}, "must be a number"),
    ({"base_traversal_seconds": 0}, "must be positive"),
    ({"gap_range": -1}, "must not be negative"),
])
def test_rejects_bad_data(data, match):
    with pytest.raises(ValueError, match=match):
        tuning_from_dict(data)


@pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan"), 10 ** 400])
def test_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="finite"):
        tuning_from_dict({"gravity": raw})


def test_huge_integer_in_file(tmp_path):
    p = tmp_path / "huge.json"
    p.write_text('{"gravity": 1' + "0" * 400 + "}", encoding="utf-8")
    with pytest.raises(ValueError, match="finite"):
        load_tuning(p)


def test_rejects_invalid_json(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text("{gravity: 1", encoding="utf-8")
    with pytest.raises(ValueError, match="invalid JSON"):
        load_tuning(p)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tuning(tmp_path / "nope.json")
