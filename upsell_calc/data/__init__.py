"""Scenario loading for batch projections."""

from .loader import load_from_csv, validate_and_prepare_dataset, rows_to_inputs, load_scenarios

__all__ = ["load_from_csv", "validate_and_prepare_dataset", "rows_to_inputs", "load_scenarios"]
