#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the projection engine (upsell_calc/engine/logic.py).

Covers the monthly compounding model, final-month aggregates, per-month
revenue identity, and boundary validation.
"""

import math

import pytest

from upsell_calc.engine import (
    InvalidInput,
    UpsellInputs,
    build_inputs,
    monthly_frame,
    project,
    round_half_up,
    summary_dict,
    validate_inputs,
)

# ============================================================================
# Test Data
# ============================================================================

DEFAULT_PARAMS = {
    "current_customers": 1000,
    "average_revenue": 5000,
    "upsell_conversion_rate": 15,
    "upsell_average_value": 2000,
    "growth_rate": 5,
    "timeframe": 12,
}


def make_inputs(**overrides) -> UpsellInputs:
    params = DEFAULT_PARAMS.copy()
    params.update(overrides)
    return build_inputs(**params)


# ============================================================================
# Tests
# ============================================================================


def test_single_month_concrete_scenario():
    """1000 customers, ₹5000 ARPC, 15% × ₹2000 upsell, 5% growth, 1 month."""
    results = project(make_inputs(timeframe=1))

    assert len(results.monthly_data) == 1
    month = results.monthly_data[0]
    assert month.period == 1
    assert month.customers == 1050
    assert month.baseline_revenue == pytest.approx(5_250_000)
    assert month.upsell_revenue == pytest.approx(315_000)
    assert month.total_revenue == pytest.approx(5_565_000)
    assert results.upsell_percentage == pytest.approx(5.66, abs=0.01)


def test_record_count_matches_timeframe():
    for months in (1, 2, 12, 36, 60):
        results = project(make_inputs(timeframe=months))
        assert len(results.monthly_data) == months
        assert [r.period for r in results.monthly_data] == list(range(1, months + 1))


def test_total_is_baseline_plus_upsell_every_month():
    results = project(make_inputs(timeframe=24, growth_rate=7.5, upsell_conversion_rate=22.5))
    for r in results.monthly_data:
        assert r.total_revenue == pytest.approx(r.baseline_revenue + r.upsell_revenue)
    assert results.total_revenue == pytest.approx(results.baseline_revenue + results.upsell_revenue)


def test_aggregate_mirrors_final_month_not_sum():
    results = project(make_inputs())
    last = results.monthly_data[-1]

    assert results.baseline_revenue == last.baseline_revenue
    assert results.upsell_revenue == last.upsell_revenue
    assert results.total_revenue == last.total_revenue
    assert results.total_revenue < sum(r.total_revenue for r in results.monthly_data)


def test_customers_non_decreasing_with_growth():
    results = project(make_inputs(timeframe=60, growth_rate=3.3, current_customers=7))
    customers = [r.customers for r in results.monthly_data]
    assert all(a <= b for a, b in zip(customers, customers[1:]))


def test_each_month_compounds_on_previous_rounded_count():
    results = project(make_inputs(timeframe=60))
    prev = DEFAULT_PARAMS["current_customers"]
    for r in results.monthly_data:
        assert r.customers == round_half_up(prev * 1.05)
        prev = r.customers


def test_rounding_is_half_up_each_month():
    """1050 × 1.05 = 1102.5 must round up to 1103 (not banker's rounding to 1102)."""
    results = project(make_inputs(timeframe=2))
    assert [r.customers for r in results.monthly_data] == [1050, 1103]


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(1102.4) == 1102
    assert round_half_up(0.0) == 0


def test_zero_growth_keeps_customers_constant():
    results = project(make_inputs(growth_rate=0, timeframe=18, current_customers=250))
    assert {r.customers for r in results.monthly_data} == {250}


def test_zero_inputs_give_zero_percentage_not_nan():
    results = project(build_inputs(
        current_customers=0, average_revenue=0, upsell_conversion_rate=0,
        upsell_average_value=0, growth_rate=0, timeframe=1,
    ))
    assert len(results.monthly_data) == 1
    r = results.monthly_data[0]
    assert (r.customers, r.baseline_revenue, r.upsell_revenue, r.total_revenue) == (0, 0, 0, 0)
    assert results.upsell_percentage == 0
    assert not math.isnan(results.upsell_percentage)


def test_project_accepts_mapping():
    from_dict = project(dict(DEFAULT_PARAMS, timeframe=3))
    from_model = project(make_inputs(timeframe=3))
    assert from_dict == from_model


def test_project_is_deterministic():
    assert project(make_inputs()) == project(make_inputs())


def test_timeframe_zero_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc:
        project(make_inputs(timeframe=0))
    assert exc.value.field == "timeframe"


def test_negative_timeframe_raises_invalid_input():
    with pytest.raises(InvalidInput):
        project(make_inputs(timeframe=-3))


def test_timeframe_above_maximum_raises_invalid_input():
    with pytest.raises(InvalidInput):
        project(make_inputs(timeframe=61))


@pytest.mark.parametrize("field,value", [
    ("current_customers", -1),
    ("average_revenue", -0.01),
    ("upsell_average_value", -500),
    ("upsell_conversion_rate", 100.5),
    ("upsell_conversion_rate", -1),
    ("growth_rate", 101),
    ("average_revenue", float("nan")),
    ("upsell_average_value", float("inf")),
])
def test_out_of_range_values_rejected(field, value):
    with pytest.raises(InvalidInput) as exc:
        validate_inputs(make_inputs(**{field: value}))
    assert exc.value.field == field


def test_customer_count_beyond_float_range_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc:
        project(make_inputs(current_customers=10**400, timeframe=1))
    assert exc.value.field == "current_customers"


def test_customer_growth_overflow_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc:
        project(make_inputs(current_customers=10**308, growth_rate=100, timeframe=2))
    assert exc.value.field == "current_customers"


def test_revenue_overflow_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc:
        project(make_inputs(
            current_customers=10,
            average_revenue=1e308,
            upsell_conversion_rate=100,
            upsell_average_value=1e308,
            growth_rate=0,
            timeframe=1,
        ))
    assert exc.value.field == "average_revenue"


def test_non_numeric_value_raises_invalid_input():
    with pytest.raises(InvalidInput) as exc:
        project(dict(DEFAULT_PARAMS, current_customers="many"))
    assert exc.value.field == "current_customers"


def test_missing_field_raises_invalid_input():
    params = DEFAULT_PARAMS.copy()
    del params["timeframe"]
    with pytest.raises(InvalidInput):
        build_inputs(**params)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_monthly_frame_and_summary():
    results = project(make_inputs(timeframe=6))
    f = monthly_frame(results)

    assert list(f.columns) == ["period", "customers", "baseline_revenue", "upsell_revenue", "total_revenue"]
    assert len(f) == 6
    assert f["customers"].tolist() == [r.customers for r in results.monthly_data]

    summary = summary_dict(results)
    assert "monthly_data" not in summary
    assert summary["total_revenue"] == results.total_revenue
