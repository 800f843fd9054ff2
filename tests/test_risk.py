import numpy as np
import pytest

from cashflow_valuation.bonds import Bond, price_bond
from cashflow_valuation.portfolio import make_sample_portfolio
from cashflow_valuation.risk import (
    bond_convexity,
    bond_dv01,
    compute_portfolio_convexity,
    compute_portfolio_dv01,
    duration_from_dv01,
    modified_duration,
)
from cashflow_valuation.scenarios import run_rate_scenarios


@pytest.fixture(scope="module")
def rate():
    return 0.015


@pytest.fixture(scope="module")
def portfolio_df():
    """
    Deterministic mini-book (10 names) to test DV01/convexity/duration.
    """
    return make_sample_portfolio(n=10, seed=7)


@pytest.mark.parametrize("compounding", ["discrete", "continuous"])
def test_single_bond_dv01_negative(rate, compounding):
    bond = Bond.from_periods(10, 0.02)
    assert bond_dv01(bond, rate, compounding) < 0.0


def test_zero_coupon_duration_close_to_maturity(rate):
    """
    Continuous compounding: modified duration of a zero-coupon bond is its maturity.
    Discrete: T / (1 + r).
    """
    zcb = Bond.from_periods(8, 0.0)
    assert modified_duration(zcb, rate, "continuous") == pytest.approx(8.0, rel=1e-3)
    assert modified_duration(zcb, rate, "discrete") == pytest.approx(8.0 / (1 + rate), rel=1e-3)


def test_convexity_positive(rate):
    bond = Bond.from_periods(20, 0.03)
    assert bond_convexity(bond, rate) > 0.0


def test_dv01_matches_first_order_from_duration(rate):
    bond = Bond.from_periods(12, 0.01)
    px = price_bond(bond, rate)
    dur = modified_duration(bond, rate)
    assert bond_dv01(bond, rate) == pytest.approx(-dur * px * 1e-4, rel=1e-12)


def test_rate_dv01_sign_sanity(portfolio_df, rate):
    """
    +1bp rate shock => price down => DV01 negative for every long bond.
    """
    dv01 = compute_portfolio_dv01(portfolio_df, rate)
    assert (dv01["dv01"] < 0.0).all(), "DV01 should be negative for long-only bonds"


def test_convexity_positive_sanity(portfolio_df, rate):
    conv = compute_portfolio_convexity(portfolio_df, rate, "continuous")
    assert (conv["convexity"] > -1e-6).mean() > 0.8, "Convexity should be mostly positive"


def test_duration_from_dv01_consistency(portfolio_df, rate):
    dv01 = compute_portfolio_dv01(portfolio_df, rate)
    dur = duration_from_dv01(dv01)
    assert dur["mod_duration"].notna().all()
    assert (dur["mod_duration"] > 0.0).all()

    # duration cannot exceed the longest maturity in periods
    assert (dur["mod_duration"].values <= portfolio_df["periods"].values + 1e-6).all()


def test_rate_scenarios_monotone(portfolio_df, rate):
    per_bond, summary = run_rate_scenarios(portfolio_df, rate, shocks_bp=(-50, -25, 25, 50))

    assert list(summary["scenario"]) == ["PAR_-50bp_PnL", "PAR_-25bp_PnL", "PAR_+25bp_PnL", "PAR_+50bp_PnL"]
    pnl = summary["total_pnl"].values
    assert np.all(np.diff(pnl) < 0.0), "PnL should worsen as rates rise"
    assert pnl[0] > 0.0 > pnl[-1]

    assert len(per_bond) == len(portfolio_df)
    assert per_bond["PAR_+25bp_PnL"].sum() == pytest.approx(summary["total_pnl"].iloc[2])


def test_duplicate_bond_ids_do_not_blow_up_rows(rate):
    book = make_sample_portfolio(n=3, seed=1)
    book.loc[2, "bond_id"] = book.loc[0, "bond_id"]
    with pytest.raises(ValueError):
        compute_portfolio_dv01(book, rate)
    with pytest.raises(ValueError):
        run_rate_scenarios(book, rate)
