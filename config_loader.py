# config_loader.py
from __future__ import annotations
from dataclasses import dataclass, fields, replace
import json
import math
from pathlib import Path
from typing import Any, Dict

from settings import GRAVITY, JUMP_FORCE, BASE_TRAVERSAL_SECONDS, GAP_RANGE


@dataclass(frozen=True)
class Tuning:
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    base_traversal_seconds: float = BASE_TRAVERSAL_SECONDS
    gap_range: float = GAP_RANGE


def tuning_from_dict(data: Dict[str, Any]) -> Tuning:
    if not isinstance(data, dict):
        raise ValueError("Tuning JSON must be an object")
    known = {f.name for f in fields(Tuning)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown tuning keys: {', '.join(unknown)}")

    values: Dict[str, float] = {}
    for key, raw in data.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"Tuning value for '{key}' must be a number, got {raw!r}")
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise ValueError(f"Tuning value for '{key}' must be finite")
        values[key] = value

    tuning = replace(Tuning(), **values)
    if tuning.base_traversal_seconds <= 0:
        raise ValueError("'base_traversal_seconds' must be positive")
    if tuning.gap_range < 0:
        raise ValueError("'gap_range' must not be negative")
    return tuning


def load_tuning(path: str | Path) -> Tuning:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{p}: invalid JSON ({exc})") from exc
    return tuning_from_dict(data)
