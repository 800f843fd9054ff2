import logging

import pytest

from cashflow_valuation.cli import build_parser, main


def test_pv_discrete_prints_value(capsys):
    rc = main(["pv", "--times", "1", "2", "3", "4", "5", "--amounts"] + ["500000"] * 5 + ["--rate", "0.015"])
    assert rc == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert float(out[0]) == pytest.approx(2391322.4864786887, rel=1e-9)


def test_pv_continuous_with_table(capsys):
    rc = main(["pv", "--times", "1", "--amounts", "1000000", "--rate", "0.015", "--compounding", "continuous", "--table"])
    assert rc == 0
    out = capsys.readouterr().out
    assert float(out.splitlines()[0]) == pytest.approx(985111.9396030627, rel=1e-9)
    assert "discount_factor" in out


def test_bond_by_periods(capsys):
    rc = main(["bond", "--periods", "6", "--coupon", "0.0055", "--principal", "100", "--rate", "0.0075"])
    assert rc == 0
    assert float(capsys.readouterr().out) == pytest.approx(98.83088047394604, rel=1e-9)


def test_bond_by_times_continuous(capsys):
    rc = main(["bond", "--times", "1", "2", "3", "4", "5", "6", "--coupon", "0.0055", "--rate", "0.0075", "--compounding", "continuous"])
    assert rc == 0
    assert float(capsys.readouterr().out) == pytest.approx(98.81451394890486, rel=1e-9)


def test_length_mismatch_returns_error(caplog):
    with caplog.at_level(logging.ERROR):
        rc = main(["pv", "--times", "1", "2", "--amounts", "100", "--rate", "0.01"])
    assert rc == 1
    assert any("Invalid input" in r.getMessage() for r in caplog.records)


def test_empty_bond_schedule_returns_error(caplog):
    with caplog.at_level(logging.ERROR):
        rc = main(["bond", "--periods", "0", "--coupon", "0.01", "--rate", "0.01"])
    assert rc == 1


def test_rate_at_minus_one_warns(caplog):
    with caplog.at_level(logging.WARNING):
        rc = main(["pv", "--times", "0", "--amounts", "100", "--rate", "-1"])
    assert rc == 0
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_bond_requires_schedule():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bond", "--coupon", "0.01", "--rate", "0.01"])


@pytest.mark.parametrize("level", ["bogus", "verbose"])
def test_bad_log_level_exits_with_usage_error(level):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", level, "pv", "--rate", "0.1"])
    assert exc.value.code == 2


def test_log_level_is_case_insensitive(capsys):
    rc = main(["--log-level", "debug", "pv", "--times", "1", "--amounts", "100", "--rate", "0.0"])
    assert rc == 0
    assert float(capsys.readouterr().out) == 100.0


def test_bad_log_level_from_environment_exits_with_usage_error(monkeypatch):
    import cashflow_valuation.cli as cli

    monkeypatch.setattr(cli, "LOG_LEVEL", "BOGUS")
    with pytest.raises(SystemExit) as exc:
        cli.main(["pv", "--rate", "0.1"])
    assert exc.value.code == 2
