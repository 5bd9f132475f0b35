"""Tests for the console entry point."""

import pytest

from haunted_campus import NAME_PROMPT, WELCOME_MESSAGE, main


@pytest.fixture
def scripted_input(monkeypatch, tmp_path):
    def install(lines: list[str]) -> list[str]:
        remaining = list(lines)
        prompts: list[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    for var in ("HAUNTED_STARTING_HEALTH", "HAUNTED_ATTACK_POWER", "HAUNTED_JSON_LOGS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HAUNTED_LOG_LEVEL", "INFO")
    monkeypatch.setenv("HAUNTED_LOG_FILE", str(tmp_path / "haunted.log"))
    return install


def test_blank_name_plays_as_unknown(scripted_input, capsys):
    prompts = scripted_input(["   ", "status", "quit"])
    main()

    out = capsys.readouterr().out
    assert prompts[0] == NAME_PROMPT
    assert WELCOME_MESSAGE in out
    assert "== Haunted Main Entrance ==" in out
    assert "Unknown: health 100, attack 10" in out
    assert "Goodbye" in out


def test_starting_stats_come_from_env(scripted_input, capsys, monkeypatch):
    monkeypatch.setenv("HAUNTED_STARTING_HEALTH", "40")
    scripted_input(["Ada", "status"])
    main()

    assert "Ada: health 40" in capsys.readouterr().out


def test_logs_go_to_configured_file(scripted_input, capsys, tmp_path):
    scripted_input(["Ada", "quit"])
    main()

    out = capsys.readouterr().out
    log = (tmp_path / "haunted.log").read_text()
    assert "player_created" in log
    assert "player_created" not in out


@pytest.mark.parametrize(
    ("var", "value"),
    [
        ("HAUNTED_ATTACK_POWER", "-10"),
        ("HAUNTED_STARTING_HEALTH", "-5"),
        ("HAUNTED_STARTING_HEALTH", "lots"),
    ],
)
def test_bad_stats_report_and_exit(scripted_input, capsys, monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    prompts = scripted_input(["Ada", "attack", "attack"])
    main()

    captured = capsys.readouterr()
    assert prompts == []
    assert captured.out == ""
    assert captured.err.startswith(f"Invalid configuration: {var} must be")
