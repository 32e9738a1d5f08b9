from __future__ import annotations
import json
from pathlib import Path
from typing import Any


def load_dataset(path: str | Path) -> Any:
    """Read an NCM dataset JSON file and return the parsed object unchanged."""
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)
