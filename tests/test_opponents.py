import json

import pytest

from cchesstools.errors import ChessError
from cchesstools.opponents import Opponent, load_opponents


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_resolves_engine_relative_to_json(tmp_path):
    config = _write(tmp_path / "opponents.json", [{"name": "Fish", "engine": "engines/fish"}])
    opponents = load_opponents(str(config))
    assert opponents == [
        Opponent(name="Fish", engine_path=str(tmp_path) + "/engines/fish", options={})
    ]


def test_load_accepts_path_objects(tmp_path):
    config = _write(tmp_path / "o.json", [{"name": "A", "engine": "a"}])
    assert load_opponents(config)[0].engine_path == str(tmp_path) + "/a"


def test_options_are_stringified(tmp_path):
    config = _write(
        tmp_path / "o.json",
        [{"name": "A", "engine": "a", "options": {"Threads": "2", "Hash": 64, "Ponder": False}}],
    )
    options = load_opponents(config)[0].options
    assert options == {"Hash": "64", "Ponder": "false", "Threads": "2"}
    assert list(options) == sorted(options)


def test_multiple_entries_keep_order(tmp_path):
    names = ["Zeta", "Alpha", "Mid"]
    config = _write(tmp_path / "o.json", [{"name": n, "engine": n} for n in names])
    assert [o.name for o in load_opponents(config)] == names


def test_path_without_directory(tmp_path, monkeypatch):
    _write(tmp_path / "o.json", [{"name": "A", "engine": "bin/a"}])
    monkeypatch.chdir(tmp_path)
    assert load_opponents("o.json")[0].engine_path == "bin/a"


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(ChessError, match="Cannot open opponents config"):
        load_opponents(missing)


def test_non_array_root_raises(tmp_path):
    config = _write(tmp_path / "o.json", {"name": "A", "engine": "a"})
    with pytest.raises(ChessError, match="must be a JSON array"):
        load_opponents(config)


def test_missing_name_raises(tmp_path):
    config = _write(tmp_path / "o.json", [{"engine": "a"}])
    with pytest.raises(KeyError):
        load_opponents(config)


def test_invalid_json_raises(tmp_path):
    config = tmp_path / "o.json"
    config.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        load_opponents(config)