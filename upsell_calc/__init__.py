"""Upsell Insights Calculator - Modular Architecture

Modules:
  - upsell_calc.engine: Monthly revenue projection engine
  - upsell_calc.report: Formatting, charts, PDF/CSV export, simulated email
  - upsell_calc.data: Scenario loading for batch projections
  - upsell_calc.utils: Configuration and logging
  - upsell_calc.api: FastAPI server
"""

from . import engine, report, data, utils

__all__ = ["engine", "report", "data", "utils"]
