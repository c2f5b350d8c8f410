#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Projection engine: monthly customer growth with baseline vs upsell revenue split.
Growth compounds on the previous month's rounded customer count (discrete model).
"""

import math
from typing import Any, Dict, Mapping, Union

import pandas as pd
from pydantic import ValidationError

from ..utils import get_logger, MAX_TIMEFRAME
from .schema import InvalidInput, MonthlyRecord, UpsellInputs, UpsellResults

logger = get_logger(__name__)

_RATE_FIELDS = ("upsell_conversion_rate", "growth_rate")
_AMOUNT_FIELDS = ("current_customers", "average_revenue", "upsell_average_value")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative values."""
    return int(math.floor(value + 0.5))


def build_inputs(**values: Any) -> UpsellInputs:
    """
    Parse raw values into UpsellInputs.
    
    Raises:
        InvalidInput: If a value is missing or cannot be parsed as the right type
    """
    try:
        return UpsellInputs(**values)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or None
        raise InvalidInput(f"Invalid value for {field}: {err.get('msg')}", field=field)


def validate_inputs(inputs: UpsellInputs) -> None:
    """
    Validate calculator inputs before projecting.
    
    Args:
        inputs: Parsed inputs
    
    Raises:
        InvalidInput: On the first out-of-range or non-finite value
    """
    for name, value in inputs.model_dump().items():
        try:
            finite = math.isfinite(value)
        except OverflowError:
            raise InvalidInput(f"{name} is too large to project", field=name)
        if not finite:
            raise InvalidInput(f"{name} must be a finite number, got {value}", field=name)

    for name in _AMOUNT_FIELDS:
        value = getattr(inputs, name)
        if value < 0:
            raise InvalidInput(f"{name} cannot be negative, got {value}", field=name)

    for name in _RATE_FIELDS:
        value = getattr(inputs, name)
        if value < 0 or value > 100:
            raise InvalidInput(f"{name} must be between 0 and 100, got {value}", field=name)

    if inputs.timeframe < 1 or inputs.timeframe > MAX_TIMEFRAME:
        raise InvalidInput(
            f"timeframe must be between 1 and {MAX_TIMEFRAME} months, got {inputs.timeframe}",
            field="timeframe",
        )


def project(inputs: Union[UpsellInputs, Mapping[str, Any]]) -> UpsellResults:
    """
    Project monthly revenue for the given business metrics.
    
    Each month:
      customers = round(customers × (1 + growth/100))
      baseline  = customers × average_revenue
      upsell    = customers × conversion/100 × upsell_value
      total     = baseline + upsell
    
    Args:
        inputs: UpsellInputs or a mapping of its fields
    
    Returns:
        UpsellResults whose aggregate fields are the final month's values
    
    Raises:
        InvalidInput: If inputs fail validation, or a month's figures overflow float range
    """
    if not isinstance(inputs, UpsellInputs):
        inputs = build_inputs(**dict(inputs))
    validate_inputs(inputs)

    growth_factor = 1.0 + inputs.growth_rate / 100.0
    conversion = inputs.upsell_conversion_rate / 100.0

    monthly_data = []
    customers = inputs.current_customers
    for period in range(1, inputs.timeframe + 1):
        grown = customers * growth_factor
        if not math.isfinite(grown):
            raise InvalidInput(
                f"customer count overflows in month {period}", field="current_customers"
            )
        customers = round_half_up(grown)
        baseline = customers * inputs.average_revenue
        upsell = customers * conversion * inputs.upsell_average_value
        if not math.isfinite(baseline + upsell):
            raise InvalidInput(
                f"revenue for month {period} is too large to represent", field="average_revenue"
            )
        monthly_data.append(MonthlyRecord(
            period=period,
            customers=customers,
            baseline_revenue=baseline,
            upsell_revenue=upsell,
            total_revenue=baseline + upsell,
        ))

    last = monthly_data[-1]
    upsell_pct = (last.upsell_revenue / last.total_revenue) * 100.0 if last.total_revenue else 0.0

    logger.debug(
        f"Projected {inputs.timeframe} months: customers {inputs.current_customers} → "
        f"{last.customers}, final total {last.total_revenue:.2f} (upsell {upsell_pct:.2f}%)"
    )

    return UpsellResults(
        baseline_revenue=last.baseline_revenue,
        upsell_revenue=last.upsell_revenue,
        total_revenue=last.total_revenue,
        upsell_percentage=upsell_pct,
        monthly_data=monthly_data,
    )


def monthly_frame(results: UpsellResults) -> pd.DataFrame:
    """Monthly records as a DataFrame (one row per month, period order)."""
    columns = list(MonthlyRecord.model_fields)
    rows = [r.model_dump() for r in results.monthly_data]
    return pd.DataFrame(rows, columns=columns)


def summary_dict(results: UpsellResults) -> Dict[str, float]:
    """Aggregate figures without the monthly series."""
    return results.model_dump(exclude={"monthly_data"})


if __name__ == "__main__":
    print("Projection engine loaded successfully")
