import logging
from pathlib import Path

import pytest
import yaml

from grid_pathfinder import main as runner
from grid_pathfinder.config import load_config
from grid_pathfinder.core.search_node import SearchStatus
from grid_pathfinder.utils.cli.command_parser import parse_command


def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "search": {"strategy": "astar", "step_interval": 0.1, "tick_rate": 10, "max_ticks": 500},
        "map": {
            "start": [0, 0],
            "end": [2, 0],
            "tiles": [
                [0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0],
            ],
        },
        "logging": {"global_level": "WARNING"},
    }
    for section, values in overrides.items():
        cfg[section].update(values)
    config_file = tmp_path / "cfg.yaml"
    config_file.write_text(yaml.dump(cfg))
    return config_file


def test_bootstrap_builds_finder_from_config(tmp_path):
    finder, tm = runner.bootstrap(_write_config(tmp_path))
    assert finder.strategy.name == "astar"
    assert finder.step_interval == 0.1
    assert finder.map.end_tile == (2, 0)
    assert tm.tick_rate == 10
    assert not tm.realtime


def test_run_finds_path(tmp_path):
    finder, tm = runner.bootstrap(_write_config(tmp_path))
    found, path = runner.run(finder, tm, max_ticks=500)
    assert found
    assert finder.status is SearchStatus.PATH_FOUND
    assert path == [(0, 0), (0, 1), (1, 1), (2, 1)]
    assert finder.total_steps <= tm.tick_counter


def test_run_gives_up_after_max_ticks(tmp_path, caplog):
    finder, tm = runner.bootstrap(_write_config(tmp_path, search={"step_interval": 100.0}))
    with caplog.at_level(logging.WARNING):
        found, path = runner.run(finder, tm, max_ticks=5)
    assert not found
    assert path == []
    assert tm.tick_counter == 5
    assert finder.status is SearchStatus.SEARCHING
    assert "Gave up" in caplog.text


def test_main_prints_path(tmp_path, capsys):
    assert runner.main([str(_write_config(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "(0,0) -> (0,1) -> (1,1) -> (2,1) -> (2,0)"


def test_main_reports_missing_path(tmp_path, capsys):
    config_file = _write_config(
        tmp_path, map={"tiles": [[0.0, 1.0, 0.0], [0.0, 1.0, 0.0]]}
    )
    assert runner.main([str(config_file)]) == 1
    assert "No path found (no_path)" in capsys.readouterr().out


def test_configure_logging_applies_levels(tmp_path):
    config_file = _write_config(
        tmp_path,
        logging={"global_level": "ERROR", "module_levels": {"grid_pathfinder.search": "DEBUG", "bogus": "LOUD"}},
    )
    runner.configure_logging(load_config(config_file))
    assert logging.getLogger().getEffectiveLevel() == logging.ERROR
    assert logging.getLogger("grid_pathfinder.search").level == logging.DEBUG
    assert logging.getLogger("bogus").level == logging.NOTSET


def test_paused_run_steps_once_per_step_command(tmp_path, monkeypatch):
    script = iter(["/pause", "/step", "/quit"])
    monkeypatch.setattr(runner, "start_cli_thread", lambda: None)
    monkeypatch.setattr(runner, "stop_cli_thread", lambda: None)
    monkeypatch.setattr(
        runner, "poll_command", lambda: parse_command(next(script, "/quit"))
    )

    finder, tm = runner.bootstrap(_write_config(tmp_path))
    found, path = runner.run(finder, tm, max_ticks=50, interactive=True)

    assert not found
    assert finder.total_steps == 1
    assert finder.status is SearchStatus.STOPPED
    assert [n.position for n in finder.closed_list] == [(0, 0)]
    assert tm.tick_counter == 2


def test_bootstrap_accepts_loaded_config(tmp_path, monkeypatch):
    cfg = load_config(_write_config(tmp_path))
    monkeypatch.setattr(runner, "load_config", lambda *a, **k: pytest.fail("config loaded twice"))
    finder, _ = runner.bootstrap(cfg)
    assert finder.map.end_tile == (2, 0)


def test_main_loads_config_once(tmp_path, monkeypatch):
    config_file = _write_config(tmp_path)
    calls = []

    def counting_load(path):
        calls.append(path)
        return load_config(path)

    monkeypatch.setattr(runner, "load_config", counting_load)
    assert runner.main([str(config_file)]) == 0
    assert calls == [config_file]
