from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .defaults import DEFAULT_COLUMNS, DEFAULT_HEIGHT, DEFAULT_ROWS
from .errors import FileReadError, ParseError

CONFIG_ENV_VAR = "NVIM_HELPER_CONFIG"

YAML_SUFFIXES = (".yaml", ".yml")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    title: str
    width: int


@dataclass(frozen=True)
class Row:
    mode: str = ""
    keybind: str = ""
    action: str = ""

    @property
    def cells(self) -> Tuple[str, str, str]:
        return (self.mode, self.keybind, self.action)


@dataclass
class Config:
    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    height: int = DEFAULT_HEIGHT
    source_path: Optional[Path] = None


def default_columns() -> List[Column]:
    return [Column(title=title, width=width) for title, width in DEFAULT_COLUMNS]


def default_config() -> Config:
    """Return the built-in keybinding table."""
    return Config(
        columns=default_columns(),
        rows=[Row(*cells) for cells in DEFAULT_ROWS],
        height=DEFAULT_HEIGHT,
    )


def pick_config_path(flag_value: Optional[str], env_value: Optional[str]) -> str:
    """Choose the config path: flag first, then environment, else ''.

    Both values are trimmed; an empty result means "use the built-in table".
    """
    path = (flag_value or "").strip()
    if path:
        return path
    return (env_value or "").strip()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_column(index: int, raw: Any, path: Path) -> Column:
    if not isinstance(raw, dict):
        raise ParseError(f"columns[{index}] must be an object", path)

    title = raw.get("title")
    if not isinstance(title, str):
        raise ParseError(f"columns[{index}].title must be a string", path)

    width = raw.get("width")
    if not _is_int(width) or width <= 0:
        raise ParseError(f"columns[{index}].width must be a positive integer", path)

    return Column(title=title, width=width)


def _as_row(index: int, raw: Any, path: Path) -> Row:
    if not isinstance(raw, dict):
        raise ParseError(f"rows[{index}] must be an object", path)

    values: Dict[str, str] = {}
    for key in ("mode", "keybind", "action"):
        value = raw.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ParseError(f"rows[{index}].{key} must be a string", path)
        values[key] = value
    return Row(**values)


def _as_list(data: Dict[str, Any], key: str, path: Path) -> List[Any]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ParseError(f"'{key}' must be an array", path)
    return raw


def _parse(text: str, path: Path) -> Any:
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(text) or {}
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParseError(str(e), path) from e


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load a Config from ``path``, or return the built-in one if no path.

    Raises FileReadError if the file cannot be read and ParseError if the
    content does not describe a config. Missing columns, rows and height
    fall back to the built-in defaults.
    """
    if not path or not str(path).strip():
        logger.debug("No config path given, using built-in keybindings")
        return default_config()

    cfg_path = Path(path).expanduser()
    logger.info("Reading config from %s", cfg_path)
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(str(e), cfg_path) from e
    except UnicodeDecodeError as e:
        raise ParseError(str(e), cfg_path) from e

    data = _parse(text, cfg_path)
    if not isinstance(data, dict):
        raise ParseError("top-level value must be an object", cfg_path)

    columns = [_as_column(i, raw, cfg_path) for i, raw in enumerate(_as_list(data, "columns", cfg_path))]
    rows = [_as_row(i, raw, cfg_path) for i, raw in enumerate(_as_list(data, "rows", cfg_path))]

    height = data.get("height")
    if height is None:
        height = 0
    if not _is_int(height):
        raise ParseError("'height' must be an integer", cfg_path)

    cfg = Config(
        columns=columns or default_columns(),
        rows=rows,
        height=height if height > 0 else DEFAULT_HEIGHT,
        source_path=cfg_path,
    )
    logger.info("Loaded %d rows and %d columns from %s", len(cfg.rows), len(cfg.columns), cfg_path)
    return cfg
