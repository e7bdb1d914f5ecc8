from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tools.principles.validator import REQUIRED_SECTIONS

DEFAULT_CONFIG = Path("catalog.yml")

DEFAULTS: Dict[str, Any] = {
    "docs_dir": "docs/solid",
    "output": None,
    "required_sections": list(REQUIRED_SECTIONS),
    "aliases": {},
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Merge catalog.yml over DEFAULTS.

    A missing default file is fine; a missing explicit path is not.
    """
    cfg = {**DEFAULTS, "aliases": {}}
    if path is None:
        path = DEFAULT_CONFIG
        if not path.exists():
            return cfg
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping")

    required = data.get("required_sections", cfg["required_sections"])
    if not isinstance(required, list) or not all(isinstance(s, str) for s in required):
        raise ValueError(f"{path}: 'required_sections' must be a list of names")
    aliases = data.get("aliases") or {}
    if not isinstance(aliases, dict) or not all(isinstance(v, list) for v in aliases.values()):
        raise ValueError(f"{path}: 'aliases' must map section names to lists")
    if not isinstance(data.get("docs_dir", cfg["docs_dir"]), str):
        raise ValueError(f"{path}: 'docs_dir' must be a path string")
    if not isinstance(data.get("output"), (str, type(None))):
        raise ValueError(f"{path}: 'output' must be a path string")

    cfg.update({k: v for k, v in data.items() if k in ("docs_dir", "output")})
    cfg["required_sections"] = required
    cfg["aliases"] = {str(k): [str(x) for x in v] for k, v in aliases.items()}
    return cfg
