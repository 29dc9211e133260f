"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.map import Coord, Map


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    strategy: str = "breadth_first"
    step_interval: float = 5.0
    tick_rate: float = 10.0
    realtime: bool = False
    max_ticks: int = 10000


@dataclass
class MapConfig:
    """Map dimensions, endpoints and optional weight rows."""

    columns: int = 10
    rows: int = 10
    start: Coord = (0, 0)
    end: Coord = (9, 9)
    tiles: Optional[List[List[float]]] = None

    def build(self) -> Map:
        """Create the :class:`Map` described by this section."""

        if self.tiles is not None:
            tile_map = Map.from_rows(self.tiles)
        else:
            tile_map = Map(self.columns, self.rows)
        tile_map.start_tile = self.start
        tile_map.end_tile = self.end
        return tile_map


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`grid_pathfinder.main.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    map: MapConfig
    logging: LoggingConfig


def _coord(value: Any, default: Coord) -> Coord:
    if value is None:
        return default
    x, y = value
    return (int(x), int(y))


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {})
    search = SearchConfig(
        strategy=str(search_data.get("strategy", "breadth_first")),
        step_interval=float(search_data.get("step_interval", 5.0)),
        tick_rate=float(search_data.get("tick_rate", 10)),
        realtime=bool(search_data.get("realtime", False)),
        max_ticks=int(search_data.get("max_ticks", 10000)),
    )

    map_data = data.get("map", {})
    tiles = map_data.get("tiles")
    if tiles is not None:
        tiles = [[float(w) for w in row] for row in tiles]
        rows = len(tiles)
        columns = len(tiles[0]) if tiles else 0
    else:
        columns = int(map_data.get("columns", 10))
        rows = int(map_data.get("rows", 10))
    map_cfg = MapConfig(
        columns=columns,
        rows=rows,
        start=_coord(map_data.get("start"), (0, 0)),
        end=_coord(map_data.get("end"), (columns - 1, rows - 1)),
        tiles=tiles,
    )

    logging_data = data.get("logging", {})
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, map=map_cfg, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "MapConfig",
    "LoggingConfig",
    "load_config",
]
