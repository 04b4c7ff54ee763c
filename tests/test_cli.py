"""Tests for the run_single and run_sweep entry points."""

import json
from pathlib import Path

import pytest

from chaindrive.cli import run_single_main, run_sweep_main

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


def test_run_single_reference(capsys):
    code = run_single_main([])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["is_closed"] is True
    assert out["params"]["teeth"] == [48, 24]
    assert out["losses"]["total_loss"] == pytest.approx(4.028707658511226, rel=1e-12)
    assert out["losses"]["efficiency"] == pytest.approx(0.9828290896987895, rel=1e-12)


def test_run_single_overrides(capsys):
    code = run_single_main(
        ["--front", "50", "--rear", "17", "--cadence-rpm", "90", "--mu", "0.05", "0.05", "0.05"]
    )
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["params"]["teeth"] == [50, 17]
    assert out["params"]["mu"] == [0.05, 0.05, 0.05]


def test_run_single_from_config(capsys):
    code = run_single_main(["--config", str(CONFIG_DIR / "road_endurance.yaml"), "--tension", "500"])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["params"]["t0"] == 500.0
    assert out["params"]["teeth"] == [50, 17]


def test_run_single_invalid_input(capsys):
    code = run_single_main(["--tension", "-5", "--log-level", "error"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    record = json.loads(captured.err.splitlines()[-1])
    assert record["level"] == "ERROR"
    assert record["message"] == "invalid drive input"


def test_run_single_logs_at_info(capsys):
    run_single_main(["--log-level", "info"])
    err = capsys.readouterr().err
    messages = [json.loads(line)["message"] for line in err.splitlines()]
    assert "evaluated operating point" in messages


def test_run_sweep(capsys):
    code = run_sweep_main(["--fronts", "34", "50", "--rears", "11", "25"])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert len(out["records"]) == 4
    assert (out["best"]["front"], out["best"]["rear"]) == (50, 25)


def test_run_sweep_invalid_teeth(capsys):
    code = run_sweep_main(["--fronts", "50", "--rears", "0"])
    assert code == 2
    assert capsys.readouterr().out == ""


def test_run_single_overloaded_drive(tmp_path, capsys):
    path = tmp_path / "overloaded.yaml"
    path.write_text("chain:\n  bushing_radius_m: 0.05\n")

    code = run_single_main(["--config", str(path), "--mu", "0.9", "0.9", "0.9"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "input power" in json.loads(captured.err.splitlines()[-1])["error"]
