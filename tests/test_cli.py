"""Tests for the command line interface."""

from __future__ import annotations

import json
import os

import pytest

from windtriangle.cli import main


def test_solve_defaults(tmp_config_dir, capsys):
    main(["--config-dir", str(tmp_config_dir), "solve"])
    out = capsys.readouterr().out
    assert "True airspeed:     438 knots" in out
    assert "Wind correction:   2° right" in out


def test_solve_overrides(tmp_config_dir, capsys):
    main([
        "--config-dir", str(tmp_config_dir), "solve",
        "--ground-speed", "200", "--heading", "0",
        "--wind-speed", "50", "--wind-direction", "0",
    ])
    out = capsys.readouterr().out
    assert "250 knots" in out
    assert "Wind correction:   0°" in out


def test_solve_json(tmp_config_dir, capsys):
    main([
        "--config-dir", str(tmp_config_dir), "solve", "--json",
        "--ground-speed", "200", "--heading", "0",
        "--wind-speed", "50", "--wind-direction", "180",
    ])
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "true_airspeed_kt": 150,
        "wind_correction_deg": 0,
        "ground_speed_kt": 200.0,
    }


def test_solve_rejects_non_numeric(tmp_config_dir):
    with pytest.raises(SystemExit):
        main(["--config-dir", str(tmp_config_dir), "solve", "--heading", "north"])


def test_solve_infinite_heading(tmp_config_dir, capsys):
    """An infinite heading prints a degenerate result instead of failing."""
    main(["--config-dir", str(tmp_config_dir), "solve", "--heading", "inf"])
    out = capsys.readouterr().out
    assert "True airspeed:     -- knots" in out
    assert "Wind correction:   --°" in out


def test_defaults_command(tmp_config_dir, capsys):
    main(["--config-dir", str(tmp_config_dir), "defaults"])
    data = json.loads(capsys.readouterr().out)
    assert data["ground_speed_kt"] == 458
    assert data["true_heading_deg"] == 97.7


def test_serve(tmp_config_dir, monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    # Registered so the variable set by the command is removed afterwards
    monkeypatch.setenv("WINDTRIANGLE_CONFIG_DIR", "")

    main(["--config-dir", str(tmp_config_dir), "serve", "--port", "9000"])

    assert calls == [("windtriangle.api.app:app", {"host": "127.0.0.1", "port": 9000})]
    assert os.environ["WINDTRIANGLE_CONFIG_DIR"] == str(tmp_config_dir)


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
