import json
from pathlib import Path
from typing import Any

from returns.result import Failure, Result, Success, safe


def _read_json(file_path: Path) -> Any:
    with file_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _ensure_object_list(data: Any) -> Result[list[dict[str, Any]], str]:
    if not isinstance(data, list):
        return Failure(f"Expected a JSON array, got {type(data).__name__}")
    if not all(isinstance(item, dict) for item in data):
        return Failure("Expected every element of the JSON array to be an object")
    return Success(data)


def load_json(file_path: Path) -> Result[list[dict[str, Any]], str]:
    """Parse a JSON file holding an array of objects."""
    return safe(_read_json)(file_path).alt(str).bind(_ensure_object_list)
