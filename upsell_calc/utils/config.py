#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration module: centralize all environment variables and defaults.
Supports easy overrides without modifying code.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# ========== CALCULATOR DEFAULTS ==========
DEFAULT_CURRENT_CUSTOMERS = int(os.getenv("DEFAULT_CURRENT_CUSTOMERS", "1000"))
DEFAULT_AVERAGE_REVENUE = float(os.getenv("DEFAULT_AVERAGE_REVENUE", "5000"))
DEFAULT_UPSELL_CONVERSION_RATE = float(os.getenv("DEFAULT_UPSELL_CONVERSION_RATE", "15"))
DEFAULT_UPSELL_AVERAGE_VALUE = float(os.getenv("DEFAULT_UPSELL_AVERAGE_VALUE", "2000"))
DEFAULT_GROWTH_RATE = float(os.getenv("DEFAULT_GROWTH_RATE", "5"))
DEFAULT_TIMEFRAME = int(os.getenv("DEFAULT_TIMEFRAME", "12"))

# Upper bound on projected months (form input allows 1-60)
MAX_TIMEFRAME = int(os.getenv("MAX_TIMEFRAME", "60"))

DEFAULT_INPUTS = {
    "current_customers": DEFAULT_CURRENT_CUSTOMERS,
    "average_revenue": DEFAULT_AVERAGE_REVENUE,
    "upsell_conversion_rate": DEFAULT_UPSELL_CONVERSION_RATE,
    "upsell_average_value": DEFAULT_UPSELL_AVERAGE_VALUE,
    "growth_rate": DEFAULT_GROWTH_RATE,
    "timeframe": DEFAULT_TIMEFRAME,
}

# ========== REPORT CONFIGURATION ==========
BASE_DIR = Path(__file__).parent.parent.parent.resolve()
REPORT_DIR = Path(os.getenv("REPORT_DIR", str(BASE_DIR / "reports")))
REPORT_COMPANY_NAME = os.getenv("REPORT_COMPANY_NAME", "Your Company Name")
REPORT_FILENAME = os.getenv("REPORT_FILENAME", "SaaS_Upsell_Analysis.pdf")
CSV_FILENAME = os.getenv("CSV_FILENAME", "upsell_monthly_projection.csv")

# Chart colours (baseline, upsell)
BASELINE_COLOR = os.getenv("BASELINE_COLOR", "#245e4f")
UPSELL_COLOR = os.getenv("UPSELL_COLOR", "#7ac9a7")

# ========== EMAIL (SIMULATED) ==========
EMAIL_SENDER = os.getenv("EMAIL_SENDER", "insights@upsell-calculator.example")
EMAIL_SUBJECT = os.getenv("EMAIL_SUBJECT", "Your SaaS Upsell Revenue Analysis")
# Seconds to wait before reporting the simulated send as delivered
EMAIL_SIMULATED_DELAY = float(os.getenv("EMAIL_SIMULATED_DELAY", "0"))

# ========== LOGGING CONFIGURATION ==========
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

# ========== API CONFIGURATION ==========
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_RELOAD = os.getenv("API_RELOAD", "False").lower() == "true"

# ========== SCENARIO CSV MAPPING (for schema validation) ==========
REQUIRED_COLUMNS = [
    "Current Customers", "Average Revenue", "Upsell Conversion Rate",
    "Upsell Average Value", "Growth Rate", "Timeframe",
]

COLUMN_RENAME_MAP = {
    "Current Customers": "current_customers",
    "Average Revenue": "average_revenue",
    "Upsell Conversion Rate": "upsell_conversion_rate",
    "Upsell Average Value": "upsell_average_value",
    "Growth Rate": "growth_rate",
    "Timeframe": "timeframe",
    "Scenario": "scenario",
}

NUMERIC_COLUMNS = [
    "current_customers", "average_revenue", "upsell_conversion_rate",
    "upsell_average_value", "growth_rate", "timeframe",
]

if __name__ == "__main__":
    print("=" * 60)
    print("Configuration Summary")
    print("=" * 60)
    print(f"Default inputs: {DEFAULT_INPUTS}")
    print(f"Max timeframe: {MAX_TIMEFRAME}")
    print(f"Report dir: {REPORT_DIR}")
    print(f"Company name: {REPORT_COMPANY_NAME}")
    print(f"Log Level: {LOG_LEVEL}")
    print(f"API: {API_HOST}:{API_PORT}")
    print("=" * 60)
