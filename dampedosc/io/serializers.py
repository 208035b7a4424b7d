"""Save and load session configurations (parameters + window) as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, Union


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save a configuration (dict of plain numbers, as from SimulationSession.to_config) to JSON.
    Missing parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration from JSON."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
