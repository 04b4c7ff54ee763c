"""Power closure and breakdown of an evaluated operating point."""

import json

import pytest

from chaindrive import (
    InvalidArgumentError,
    LossBreakdown,
    LossCoefficients,
    Ptotal,
    evaluate_drive,
    η,
)
from chaindrive.core.logging import set_log_level


def test_ledger_matches_formula_module(ref_params):
    ledger = evaluate_drive(ref_params)

    assert ledger.total == Ptotal(*ref_params.as_args())
    assert ledger.efficiency == η(*ref_params.as_args())
    assert ledger.pin_bushing > ledger.offset > 0.0
    assert ledger.roller > 0.0


def test_ledger_closure(ref_params):
    ledger = evaluate_drive(ref_params)

    assert ledger.is_closed
    assert ledger.input_power == pytest.approx(ledger.output_power + ledger.total)
    assert ledger.output_power < ledger.input_power


def test_ledger_uses_supplied_coefficients(ref_params):
    base = evaluate_drive(ref_params)
    no_articulation = evaluate_drive(ref_params, LossCoefficients(articulation_factor=0.0))

    assert no_articulation.pin_bushing == 0.0
    assert no_articulation.offset == base.offset
    assert no_articulation.efficiency > base.efficiency


def test_to_dict_is_json_serializable(ref_params):
    data = evaluate_drive(ref_params).to_dict()

    assert set(data) >= {
        "pin_bushing_loss",
        "offset_loss",
        "roller_loss",
        "total_loss",
        "input_power",
        "output_power",
        "efficiency",
        "model_version",
    }
    json.dumps(data)


def test_summarize_mentions_every_term(ref_params):
    text = evaluate_drive(ref_params).summarize()
    for token in ("P_in", "P_out", "Pin", "Offset", "Roller", "Eff"):
        assert token in text


def test_empty_ledger_is_lossless():
    ledger = LossBreakdown()
    assert ledger.total == 0.0
    assert ledger.efficiency == 1.0
    assert ledger.is_closed


def test_losses_above_input_do_not_close():
    ledger = LossBreakdown(pin_bushing=5.0, input_power=1.0)

    assert not ledger.is_feasible
    assert not ledger.is_closed
    with pytest.raises(InvalidArgumentError):
        ledger.efficiency
    assert "n/a" in ledger.summarize()
    assert ledger.to_dict()["efficiency"] is None


def test_unbalanced_output_does_not_close():
    ledger = LossBreakdown(pin_bushing=1.0, input_power=10.0, output_power=5.0)

    assert ledger.is_feasible
    assert ledger.compute_closure_error() == pytest.approx(4.0)
    assert not ledger.is_closed
    assert ledger.efficiency == pytest.approx(0.9)


def test_evaluate_rejects_overloaded_drive(ref_params):
    with pytest.raises(InvalidArgumentError, match="input power"):
        evaluate_drive(ref_params.replace(mu=(0.9, 0.9, 0.9), rho=0.05))


def test_debug_logging_reports_evaluation(ref_params, capsys):
    set_log_level("DEBUG")
    evaluate_drive(ref_params)

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    messages = [rec["message"] for rec in lines]
    assert "evaluate_drive completed" in messages
    assert "drive evaluated" in messages
    record = lines[messages.index("drive evaluated")]
    assert record["teeth"] == [48, 24]
    assert record["logger"] == "chaindrive.chain.ledger"
