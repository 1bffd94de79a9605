from pathlib import Path

from returns.result import Failure, Success

from contactkit.utils.load_json import load_json


def test_load_json_success(tmp_path: Path):
    p = tmp_path / "ok.json"
    p.write_text('[{"a": 1}, {"b": 2}]', encoding="utf-8")
    res = load_json(p)
    assert isinstance(res, Success)
    assert res.unwrap() == [{"a": 1}, {"b": 2}]


def test_load_json_failure(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text('{"a": 1,}', encoding="utf-8")  # trailing comma -> invalid JSON
    res = load_json(p)
    assert isinstance(res, Failure)
    assert "Expecting" in res.failure()


def test_load_json_rejects_non_array(tmp_path: Path):
    p = tmp_path / "obj.json"
    p.write_text('{"a": 1}', encoding="utf-8")
    res = load_json(p)
    assert isinstance(res, Failure)
    assert "Expected a JSON array" in res.failure()


def test_load_json_missing_file(tmp_path: Path):
    res = load_json(tmp_path / "missing.json")
    assert isinstance(res, Failure)
