"""Configuration and logging."""

from .config import (
    DEFAULT_INPUTS, MAX_TIMEFRAME,
    REPORT_DIR, REPORT_COMPANY_NAME, REPORT_FILENAME, CSV_FILENAME,
    BASELINE_COLOR, UPSELL_COLOR,
    EMAIL_SENDER, EMAIL_SUBJECT, EMAIL_SIMULATED_DELAY,
    REQUIRED_COLUMNS, COLUMN_RENAME_MAP, NUMERIC_COLUMNS,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "DEFAULT_INPUTS", "MAX_TIMEFRAME",
    "REPORT_DIR", "REPORT_COMPANY_NAME", "REPORT_FILENAME", "CSV_FILENAME",
    "BASELINE_COLOR", "UPSELL_COLOR",
    "EMAIL_SENDER", "EMAIL_SUBJECT", "EMAIL_SIMULATED_DELAY",
    "REQUIRED_COLUMNS", "COLUMN_RENAME_MAP", "NUMERIC_COLUMNS",
]
