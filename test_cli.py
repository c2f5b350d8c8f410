#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the interactive / batch command-line calculator (main.py).
"""

import builtins

import pytest

import main
from upsell_calc.engine import build_inputs, project

HEADER = "Scenario,Current Customers,Average Revenue,Upsell Conversion Rate,Upsell Average Value,Growth Rate,Timeframe\n"


def feed(monkeypatch, answers):
    """Answer input() prompts in order; blank once the list runs out."""
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda *_: next(it, ""))


def test_prompt_float_reprompts_out_of_range(monkeypatch, capsys):
    feed(monkeypatch, ["150", "20"])
    assert main.prompt_float("Rate", 15, 0, 100) == 20
    assert "between 0 and 100" in capsys.readouterr().out


def test_prompt_float_default_on_garbage(monkeypatch):
    feed(monkeypatch, ["abc"])
    assert main.prompt_float("Rate", 15, 0, 100) == 15


def test_prompt_int_requires_whole_number(monkeypatch):
    feed(monkeypatch, ["2.5", "3"])
    assert main.prompt_int("Months", 12, 1, 60) == 3


def test_interactive_defaults(monkeypatch, capsys):
    feed(monkeypatch, [])
    main.main([])
    out = capsys.readouterr().out

    assert "--- Summary ---" in out
    assert "Customers after 12 months" in out
    assert main.format_currency(project(build_inputs(**main.DEFAULT_INPUTS)).total_revenue) in out


def test_interactive_saves_csv(monkeypatch, tmp_path, capsys):
    csv_path = tmp_path / "out.csv"
    # how-to? no; six inputs; save csv? yes; path; pdf? no; email? no
    feed(monkeypatch, ["n", "", "", "", "", "", "3", "y", str(csv_path), "n", "n"])
    main.main([])
    assert csv_path.exists()
    assert len(csv_path.read_text().strip().splitlines()) == 4


def test_batch_mode(tmp_path, capsys):
    path = tmp_path / "scenarios.csv"
    path.write_text(HEADER + "Base,1000,5000,15,2000,5,12\nFlat,200,1000,10,500,0,6\n", encoding="utf-8")
    main.main([str(path)])
    out = capsys.readouterr().out

    assert "2 scenario(s)" in out
    assert "Base" in out and "Flat" in out


def test_batch_mode_bad_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main.main([str(tmp_path / "missing.csv")])
    assert exc.value.code == 1
