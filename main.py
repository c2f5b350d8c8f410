#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive SaaS Upsell Revenue Calculator

Monthly projection (per month t = 1..timeframe):
  customers_t = round(customers_{t-1} × (1 + growth/100))
  baseline_t  = customers_t × average_revenue
  upsell_t    = customers_t × (conversion/100) × upsell_value
  total_t     = baseline_t + upsell_t

Summary figures are the FINAL month's values (not cumulative sums).

Usage:
  python main.py                 interactive session
  python main.py scenarios.csv   batch projection of every row in a scenario file
"""

import sys
from typing import List, Optional

from upsell_calc.data.loader import load_scenarios
from upsell_calc.engine.logic import build_inputs, monthly_frame, project
from upsell_calc.engine.schema import InvalidInput, UpsellInputs, UpsellResults
from upsell_calc.report.content import how_to_use_text
from upsell_calc.report.export import export_monthly_csv, save_pdf_report
from upsell_calc.report.formatting import format_currency, format_percentage
from upsell_calc.report.mailer import send_report_email
from upsell_calc.utils.config import (
    DEFAULT_INPUTS, MAX_TIMEFRAME, REPORT_DIR, REPORT_FILENAME, CSV_FILENAME, REPORT_COMPANY_NAME,
)


# ----------------------------- prompt helpers -----------------------------
def prompt_str(msg: str, default: Optional[str] = None) -> str:
    try:
        s = input(f"{msg}{' [' + default + ']' if default is not None else ''}: ").strip()
    except EOFError:
        s = ""
    return s if s else (default or "")

def prompt_float(msg: str, default: float, lo: float = 0.0, hi: Optional[float] = None) -> float:
    """Prompt for a number in [lo, hi]; Enter or an unparseable value keeps the default."""
    while True:
        try:
            s = input(f"{msg} [default {default:g}]: ").strip()
        except EOFError:
            s = ""
        if s == "":
            return default
        try:
            value = float(s)
        except ValueError:
            print("Invalid number. Using default.")
            return default
        if value < lo or (hi is not None and value > hi):
            bounds = f"between {lo:g} and {hi:g}" if hi is not None else f"at least {lo:g}"
            print(f"Value must be {bounds}.")
            continue
        return value

def prompt_int(msg: str, default: int, lo: int = 0, hi: Optional[int] = None) -> int:
    while True:
        value = prompt_float(msg, default, lo, hi)
        if float(value).is_integer():
            return int(value)
        print("Please enter a whole number.")

def prompt_yes(msg: str) -> bool:
    return prompt_str(f"{msg} (y/n)", "n").lower() in ("y", "yes", "1")


# ----------------------------- output -----------------------------
def print_summary(inputs: UpsellInputs, results: UpsellResults) -> None:
    months = len(results.monthly_data)
    final = results.monthly_data[-1]

    print("\n--- Summary ---")
    print(f"Starting customers: {inputs.current_customers:,}")
    print(f"Customers after {months} months: {final.customers:,}")
    print(f"Baseline revenue (month {months}): {format_currency(results.baseline_revenue)}")
    print(f"Upsell revenue (month {months}):   {format_currency(results.upsell_revenue)}"
          f"  [{format_percentage(results.upsell_percentage)} of total revenue]")
    print(f"Total revenue (month {months}):    {format_currency(results.total_revenue)}")

    f = monthly_frame(results)
    print("\nMonthly projection (period, customers, baseline, upsell, total):")
    print(f.to_string(index=False, formatters={
        "baseline_revenue": format_currency,
        "upsell_revenue": format_currency,
        "total_revenue": format_currency,
    }))

def print_batch(rows: List[tuple]) -> None:
    print(f"\n{'Scenario':<24} {'Months':>6} {'Customers':>10} {'Total revenue':>16} {'Upsell %':>9}")
    print("-" * 69)
    for name, inputs, results in rows:
        print(
            f"{name[:24]:<24} {inputs.timeframe:>6} {results.monthly_data[-1].customers:>10,} "
            f"{format_currency(results.total_revenue):>16} {format_percentage(results.upsell_percentage):>9}"
        )


# ----------------------------- flows -----------------------------
def collect_inputs() -> UpsellInputs:
    d = DEFAULT_INPUTS
    print("\n--- Enter your business metrics (press Enter to use default) ---")
    values = {
        "current_customers": prompt_int("Current number of customers", d["current_customers"]),
        "average_revenue": prompt_float("Average revenue per customer (₹)", d["average_revenue"]),
        "upsell_conversion_rate": prompt_float("Upsell conversion rate (%)", d["upsell_conversion_rate"], 0, 100),
        "upsell_average_value": prompt_float("Average upsell value (₹)", d["upsell_average_value"]),
        "growth_rate": prompt_float("Monthly customer growth rate (%)", d["growth_rate"], 0, 100),
        "timeframe": prompt_int("Projection timeframe (months)", d["timeframe"], 1, MAX_TIMEFRAME),
    }
    return build_inputs(**values)

def offer_exports(inputs: UpsellInputs, results: UpsellResults) -> None:
    if prompt_yes("\nSave monthly projection to CSV?"):
        outp = prompt_str("Output CSV path", str(REPORT_DIR / CSV_FILENAME))
        print(f"Saved: {export_monthly_csv(results, outp)}")

    if prompt_yes("Download the analysis as PDF?"):
        company = prompt_str("Company name", REPORT_COMPANY_NAME)
        outp = prompt_str("Output PDF path", str(REPORT_DIR / REPORT_FILENAME))
        print(f"Saved: {save_pdf_report(results, inputs, outp, company_name=company)}")

    if prompt_yes("Email the analysis?"):
        email = prompt_str("Email")
        name = prompt_str("Your name") or None
        company = prompt_str("Company name") or None
        try:
            receipt = send_report_email(email, results, inputs, name=name, company=company)
        except InvalidInput as e:
            print(f"Email not sent: {e}")
            return
        print(f"Analysis sent to {receipt.recipient} (simulated delivery, nothing was transmitted).")

def run_interactive() -> None:
    print("\n=== Upsell Insights Calculator: baseline vs upsell revenue projection ===")
    if prompt_yes("Show how to use this calculator?"):
        print("\n" + how_to_use_text())

    try:
        inputs = collect_inputs()
        results = project(inputs)
    except InvalidInput as e:
        print(f"Projection failed: {e}")
        sys.exit(1)

    print_summary(inputs, results)
    offer_exports(inputs, results)

def run_batch(path: str) -> None:
    try:
        scenarios = load_scenarios(path)
    except InvalidInput as e:
        print(f"Batch failed: {e}")
        sys.exit(1)

    rows = [(name, inputs, project(inputs)) for name, inputs in scenarios]
    print(f"\n=== Batch projection: {len(rows)} scenario(s) from {path} ===")
    print_batch(rows)


# ----------------------------- main -----------------------------
def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        run_batch(argv[0])
    else:
        run_interactive()

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
