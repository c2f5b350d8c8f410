#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for batch scenario loading (upsell_calc/data/loader.py).
"""

import pandas as pd
import pytest

from upsell_calc.data import load_scenarios, validate_and_prepare_dataset
from upsell_calc.engine import InvalidInput

HEADER = "Scenario,Current Customers,Average Revenue,Upsell Conversion Rate,Upsell Average Value,Growth Rate,Timeframe\n"


def write_csv(tmp_path, body, header=HEADER):
    path = tmp_path / "scenarios.csv"
    path.write_text(header + body, encoding="utf-8")
    return path


def test_load_scenarios(tmp_path):
    path = write_csv(tmp_path, "Base,1000,5000,15,2000,5,12\nAggressive,1000,5000,25,3000,8,24\n")
    scenarios = load_scenarios(path)

    assert [name for name, _ in scenarios] == ["Base", "Aggressive"]
    base = scenarios[0][1]
    assert base.current_customers == 1000
    assert base.upsell_conversion_rate == 15
    assert base.timeframe == 12
    assert scenarios[1][1].timeframe == 24


def test_scenario_column_is_optional(tmp_path):
    header = "current customers,average revenue,upsell conversion rate,upsell average value,growth rate,timeframe\n"
    path = write_csv(tmp_path, "500,1000,10,500,2,6\n", header=header)
    scenarios = load_scenarios(path)
    assert scenarios[0][0] == "Scenario 1"
    assert scenarios[0][1].current_customers == 500


def test_missing_columns(tmp_path):
    path = write_csv(tmp_path, "1000,5000\n", header="Current Customers,Average Revenue\n")
    with pytest.raises(InvalidInput) as exc:
        load_scenarios(path)
    assert "Missing columns" in str(exc.value)


def test_invalid_row_reports_row_number(tmp_path):
    path = write_csv(tmp_path, "Ok,1000,5000,15,2000,5,12\nBroken,1000,5000,15,2000,5,0\n")
    with pytest.raises(InvalidInput) as exc:
        load_scenarios(path)
    assert "Row 2 (Broken)" in str(exc.value)
    assert exc.value.field == "timeframe"


def test_non_numeric_cell_rejected(tmp_path):
    path = write_csv(tmp_path, "Bad,lots,5000,15,2000,5,12\n")
    with pytest.raises(InvalidInput) as exc:
        load_scenarios(path)
    assert "Row 1" in str(exc.value)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidInput):
        load_scenarios(tmp_path / "nope.csv")


def test_empty_dataset():
    with pytest.raises(InvalidInput):
        validate_and_prepare_dataset(pd.DataFrame())
