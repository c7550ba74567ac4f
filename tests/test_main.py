"""Console session tests"""

import pytest

import main
from config import SimulationConfig


@pytest.fixture
def config(tmp_path):
    return SimulationConfig.from_dict({
        'simulation': {
            'logging': {
                'log_file': str(tmp_path / "elevator.txt"),
                'console': False,
                'event_log_jsonl': str(tmp_path / "session.jsonl"),
            },
        }
    })


def scripted(lines):
    feed = iter(lines)

    def _input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return _input


def test_console_session(config, tmp_path, capsys):
    dispatcher = main.run_console(config, input_func=scripted(["5", "3U", "bogus", "O5", "q"]))

    assert dispatcher.visited_floors == {3, 5}
    assert dispatcher.ledger.is_empty()
    assert dispatcher.sensor.overweight is True  # load sensor has not reached its clear time

    out = capsys.readouterr().out
    assert "Ignored: Malformed request 'BOGUS'" in out
    assert "Visited floors: 3, 5" in out

    log_lines = (tmp_path / "elevator.txt").read_text(encoding="utf-8").splitlines()
    assert log_lines[0].endswith("Inside floor 5 request added.")
    assert any(line.endswith("Stopped at floor 3") for line in log_lines)
    assert (tmp_path / "session.jsonl").exists()


def test_console_session_ends_on_eof(config):
    dispatcher = main.run_console(config, input_func=scripted(["2"]))
    assert dispatcher.visited_floors == {2}


def test_previous_log_is_reset(config, tmp_path):
    log_file = tmp_path / "elevator.txt"
    log_file.write_text("stale\n", encoding="utf-8")

    main.run_console(config, input_func=scripted(["Q"]))

    assert not log_file.exists()


def test_main_reports_missing_config(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.yaml")]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_load_config_without_path_uses_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert main.load_config() == SimulationConfig()


@pytest.mark.parametrize("content", [
    "simulation: [1, 2\n",
    "simulation:\n  building: [1, 2]\n",
])
def test_main_reports_malformed_config(tmp_path, capsys, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    assert main.main([str(path)]) == 1
    assert "Configuration error" in capsys.readouterr().err
