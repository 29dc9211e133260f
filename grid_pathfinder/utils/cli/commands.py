"""Implementations of interactive runner commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

from ..observer import average_step_time

if TYPE_CHECKING:
    from ...search.pathfinder import PathFinder

logger = logging.getLogger(__name__)


def pause(finder: "PathFinder", state: Dict[str, Any]) -> None:
    finder.is_searching = False
    state["paused"] = True
    logger.info("Search paused.")


def resume(finder: "PathFinder", state: Dict[str, Any]) -> None:
    finder.is_searching = True
    state["paused"] = False
    logger.info("Search resumed.")


def step(state: Dict[str, Any]) -> None:
    if state.get("paused", False):
        state["step"] = True
        logger.info("Stepping once.")
    else:
        logger.info("Search is not paused. Use /pause first.")


def single_step(finder: "PathFinder") -> bool:
    """Run one search step on a paused search and pause it again."""
    finder.is_searching = True
    expanded = finder.step()
    if finder.is_searching:
        finder.is_searching = False
    return expanded


def reset(finder: "PathFinder", state: Dict[str, Any]) -> None:
    finder.start_search()
    state["paused"] = False
    logger.info("Search restarted from %s.", finder.map.start_tile)


def status(finder: "PathFinder") -> Dict[str, Any]:
    info = {
        "status": finder.status.value,
        "strategy": finder.strategy.name,
        "total_steps": finder.total_steps,
        "open": len(finder.open_list),
        "closed": len(finder.closed_list),
        "avg_step_ms": None,
    }
    avg = average_step_time()
    if avg is not None:
        info["avg_step_ms"] = round(avg * 1000, 3)
    logger.info("Status: %s", info)
    return info


def path(finder: "PathFinder") -> list:
    found, route = finder.get_path()
    if found:
        logger.info("Path (%d tiles before %s): %s", len(route), finder.map.end_tile, route)
    else:
        logger.info("No path available (status: %s).", finder.status.value)
    return route


def interval(finder: "PathFinder", seconds: str | None) -> None:
    if seconds is None:
        logger.info("Step interval is %ss.", finder.step_interval)
        return
    try:
        finder.step_interval = float(seconds)
    except ValueError as exc:
        logger.error("Invalid step interval '%s': %s", seconds, exc)
        return
    logger.info("Step interval set to %ss.", finder.step_interval)


def help_command() -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                - Show this help message.",
        "  /pause               - Stop stepping the search.",
        "  /resume              - Continue a paused search.",
        "  /step                - Expand one node if paused.",
        "  /reset               - Restart the search from the start tile.",
        "  /status              - Print search progress.",
        "  /path                - Print the path once found.",
        "  /interval [seconds]  - Show or set the step interval.",
        "  /quit                - Exit the application.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], finder: "PathFinder", state: Dict[str, Any]) -> Any:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "help":
        help_command()
    elif cmd_lower == "pause":
        pause(finder, state)
    elif cmd_lower == "resume":
        resume(finder, state)
    elif cmd_lower == "step":
        step(state)
    elif cmd_lower == "reset":
        reset(finder, state)
    elif cmd_lower == "status":
        return_value = status(finder)
    elif cmd_lower == "path":
        return_value = path(finder)
    elif cmd_lower == "interval":
        interval(finder, args[0] if args else None)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = ["execute", "pause", "resume", "step", "single_step", "reset", "status", "path", "interval", "help_command"]
