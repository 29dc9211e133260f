# grid-pathfinder/grid_pathfinder/main.py
"""Search bootstrap and minimal tick loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Tuple

from .config import CONFIG, Config, load_config
from .core.map import Coord
from .core.time_manager import TimeManager
from .search.pathfinder import PathFinder
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute, single_step

logger = logging.getLogger(__name__)


def configure_logging(config: Config = CONFIG) -> None:
    """Apply the global and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config: Config | str | Path | None = None) -> Tuple[PathFinder, TimeManager]:
    """Build the map, path finder and tick source described by the config.

    ``config`` is a loaded :class:`Config` or a path to a YAML file.
    """

    if isinstance(config, Config):
        cfg = config
    elif config is not None:
        cfg = load_config(Path(config))
    else:
        cfg = CONFIG

    tile_map = cfg.map.build()
    logger.info(
        "[Bootstrap] Map %dx%d, start %s, end %s",
        tile_map.columns,
        tile_map.rows,
        tile_map.start_tile,
        tile_map.end_tile,
    )

    finder = PathFinder(tile_map, cfg.search.strategy, step_interval=cfg.search.step_interval)
    logger.info(
        "[Bootstrap] Strategy %s, step interval %ss",
        finder.strategy.name,
        finder.step_interval,
    )
    tm = TimeManager(cfg.search.tick_rate, realtime=cfg.search.realtime)
    return finder, tm


def run(
    finder: PathFinder,
    tm: TimeManager,
    max_ticks: int = 10000,
    interactive: bool = False,
) -> Tuple[bool, List[Coord]]:
    """Drive ``finder`` with ticks from ``tm`` until it stops or ``max_ticks`` pass."""

    finder.start_search()
    state = {"paused": False, "step": False, "running": True}
    cli_input_thread = start_cli_thread() if interactive else None

    try:
        while state["running"] and tm.tick_counter < max_ticks:
            if interactive:
                cmd = poll_command()
                if cmd:
                    execute(cmd.name, cmd.args, finder, state)
                    if not state["running"]:
                        break

            elapsed = tm.sleep_until_next_tick()
            if state["paused"]:
                if state["step"]:
                    single_step(finder)
                    state["step"] = False
                continue

            finder.advance(elapsed)
            if finder.status.is_terminal and not interactive:
                break
        else:
            if not finder.status.is_terminal:
                logger.warning("[Main] Gave up after %d ticks (status: %s).", tm.tick_counter, finder.status.value)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        if cli_input_thread is not None:
            stop_cli_thread()

    found, path = finder.get_path()
    logger.info(
        "[Main] Finished with status %s after %d steps (%d ticks).",
        finder.status.value,
        finder.total_steps,
        tm.tick_counter,
    )
    return found, path


def main(argv: List[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    interactive = "--interactive" in args
    positional = [a for a in args if not a.startswith("--")]
    config_path = Path(positional[0]) if positional else None

    cfg = load_config(config_path) if config_path is not None else CONFIG
    configure_logging(cfg)

    finder, tm = bootstrap(cfg)
    found, path = run(finder, tm, max_ticks=cfg.search.max_ticks, interactive=interactive)
    if not found:
        print(f"No path found ({finder.status.value}).")
        return 1
    print(" -> ".join(f"({x},{y})" for x, y in path + [finder.map.end_tile]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
