# tableui/config.py
from __future__ import annotations
import os, logging
from typing import Any, Dict, Literal, Optional
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from tableui.errors import SettingsError

log = logging.getLogger(__name__)

Direction = Literal["asc", "desc"]
DIRECTIONS = ("asc", "desc")

CONFIG_ENV = "TABLES_CONFIG"
_ENV_OVERRIDES = {
    "key_field": "TABLES_KEY_FIELD",
    "key_direction": "TABLES_KEY_DIRECTION",
    "default_direction": "TABLES_DEFAULT_DIRECTION",
}

class TableSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key_field: str = "sort"
    key_direction: str = "direction"
    default_direction: Direction = "asc"

def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise SettingsError(path, str(e)) from e
    except yaml.YAMLError as e:
        raise SettingsError(path, f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(path, "top level must be a mapping")
    return data

def load_settings(path: Optional[str] = None) -> TableSettings:
    """
    defaults <- yaml file (explicit path, else $TABLES_CONFIG) <- env overrides.
    A path from the environment that does not exist is skipped.
    """
    values: Dict[str, Any] = {}
    src = path or os.getenv(CONFIG_ENV, "").strip()
    if src:
        if path is None and not os.path.exists(src):
            log.warning("settings file %s not found, using defaults", src)
        else:
            values.update(_read_yaml(src))
    for key, env in _ENV_OVERRIDES.items():
        v = os.getenv(env, "").strip()
        if v:
            values[key] = v
    try:
        return TableSettings(**values)
    except ValidationError as e:
        raise SettingsError(src or "<env>", str(e)) from e

_SETTINGS: Optional[TableSettings] = None

def get_settings() -> TableSettings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
        log.debug("table settings loaded: %s", _SETTINGS.model_dump())
    return _SETTINGS

def reset_settings() -> None:
    global _SETTINGS
    _SETTINGS = None

def normalize_direction(value: Any) -> Optional[Direction]:
    if isinstance(value, str) and value.lower() in DIRECTIONS:
        return value.lower()  # type: ignore[return-value]
    return None

def flip(direction: Direction) -> Direction:
    return "desc" if direction == "asc" else "asc"
