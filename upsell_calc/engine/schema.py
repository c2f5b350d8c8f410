#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data model for the projection engine: inputs, monthly records, results.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class InvalidInput(ValueError):
    """Raised when calculator inputs are out of range, non-finite or non-numeric."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UpsellInputs(BaseModel):
    """Business metrics entered by the user (one calculation call)."""

    model_config = ConfigDict(frozen=True)

    current_customers: int = Field(..., description="Starting customer count")
    average_revenue: float = Field(..., description="Revenue per customer per month")
    upsell_conversion_rate: float = Field(..., description="Percent of customers who upsell (0-100)")
    upsell_average_value: float = Field(..., description="Incremental revenue per upsold customer")
    growth_rate: float = Field(..., description="Monthly customer growth (percent, 0-100)")
    timeframe: int = Field(..., description="Number of months to project")


class MonthlyRecord(BaseModel):
    """Projection for a single month."""

    period: int
    customers: int
    baseline_revenue: float
    upsell_revenue: float
    total_revenue: float


class UpsellResults(BaseModel):
    """
    Projection result. Top-level revenue fields mirror the final month,
    they are not cumulative sums.
    """

    baseline_revenue: float
    upsell_revenue: float
    total_revenue: float
    upsell_percentage: float
    monthly_data: List[MonthlyRecord]
