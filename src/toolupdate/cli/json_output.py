"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from pathlib import Path
from typing import Any

from toolupdate.core.output import machine_output


def _serialize_for_json(obj: Any) -> Any:
    """Recursively convert Path objects that appear in plain dict structures.

    For Pydantic models, use model.model_dump(mode='json') first.
    """
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _serialize_for_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return type(obj)(_serialize_for_json(item) for item in obj)
    return obj


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    Routes JSON through machine_output() to ensure correct stream
    separation (data on stdout, human messages on stderr).
    """
    serialized = _serialize_for_json(data)
    machine_output(json.dumps(serialized, indent=2))
