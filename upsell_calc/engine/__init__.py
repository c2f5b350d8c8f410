"""Upsell revenue projection engine."""

from .schema import InvalidInput, UpsellInputs, MonthlyRecord, UpsellResults
from .logic import (
    round_half_up, build_inputs, validate_inputs, project, monthly_frame, summary_dict
)

__all__ = [
    "InvalidInput", "UpsellInputs", "MonthlyRecord", "UpsellResults",
    "round_half_up", "build_inputs", "validate_inputs", "project",
    "monthly_frame", "summary_dict",
]
