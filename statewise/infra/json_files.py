"""JSON file loaders for state tables and runner configuration.

Responsibilities:
  - Read UTF-8 JSON files, keeping declaration order of objects.
  - Validate tables with the domain validator and config fields by type.

Invariants:
  - The only file I/O in the package; the engine itself never reads files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.domain.table import StateTable, validate_table
from ..core.engine.config import RunnerConfig

_CONFIG_FIELDS = ("default_initial_state", "strategy")


def _read_json(path: Path | str, kind: str) -> Any:
    file_path = Path(path)
    if not file_path.exists():
        raise ValueError(f"{kind} file not found: {file_path}")
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{kind} file is not valid JSON: {file_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"{kind} file could not be read: {file_path}: {exc}") from exc


def _require_str(payload: dict[str, Any], key: str) -> str:
    value = payload[key]
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be str")
    return value


def load_table_file(path: Path | str) -> StateTable:
    payload = _read_json(path, "State table")
    validate_table(payload)
    return payload


def load_runner_config(path: Path | str) -> RunnerConfig:
    payload = _read_json(path, "Runner config")
    if not isinstance(payload, dict):
        raise ValueError("Runner config must be a JSON object")

    unknown = sorted(set(payload) - set(_CONFIG_FIELDS))
    if unknown:
        raise ValueError(f"Unknown runner config fields: {', '.join(unknown)}")

    kwargs = {key: _require_str(payload, key) for key in _CONFIG_FIELDS if key in payload}
    return RunnerConfig(**kwargs)


__all__ = ["load_runner_config", "load_table_file"]
