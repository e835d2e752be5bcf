"""Loading of opponent engine definitions from a JSON file."""

import json
import os
from dataclasses import dataclass, field
from typing import Any

from .errors import ChessError


@dataclass
class Opponent:
    """An external engine to play against."""

    name: str
    engine_path: str
    options: dict[str, str] = field(default_factory=dict)


def _option_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def _option_items(options: Any) -> list[tuple[str, Any]]:
    if isinstance(options, dict):
        return list(options.items())
    if isinstance(options, list):
        return [(str(index), value) for index, value in enumerate(options)]
    return []


def _require_str(entry: dict, key: str) -> str:
    value = entry[key]
    if not isinstance(value, str):
        raise ChessError(f"opponent field '{key}' must be a string")
    return value


def load_opponents(json_path) -> list[Opponent]:
    """Read opponents; engine paths are relative to the JSON file's directory."""
    json_path = os.fspath(json_path)
    try:
        with open(json_path, encoding="utf-8") as handle:
            root = json.load(handle)
    except OSError as exc:
        raise ChessError(f"Cannot open opponents config: {json_path}") from exc

    if not isinstance(root, list):
        raise ChessError("opponents.json must be a JSON array")

    cut = max(json_path.rfind("/"), json_path.rfind("\\"))
    base_dir = json_path[: cut + 1] if cut >= 0 else ""

    opponents = []
    for entry in root:
        name = _require_str(entry, "name")
        engine_path = base_dir + _require_str(entry, "engine")
        options = {
            key: _option_text(value)
            for key, value in sorted(_option_items(entry.get("options")))
        }
        opponents.append(Opponent(name=name, engine_path=engine_path, options=options))
    return opponents