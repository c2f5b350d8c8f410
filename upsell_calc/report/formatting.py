#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Display formatting: rupee amounts with Indian digit grouping and percentages.
"""

import math

from ..engine.logic import round_half_up


def _group_indian(digits: str) -> str:
    """Group a digit string as 1,23,45,678 (thousands, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    parts = []
    while len(head) > 2:
        parts.insert(0, head[-2:])
        head = head[:-2]
    if head:
        parts.insert(0, head)
    return ",".join(parts + [tail])


def format_currency(value: float, symbol: str = "₹") -> str:
    """
    Format a number as whole rupees, e.g. 5565000 -> '₹55,65,000'.
    
    Args:
        value: Amount in rupees
        symbol: Currency symbol prefix
    
    Returns:
        Formatted string ('₹0' style, leading '-' for negatives)
    """
    if value is None or not math.isfinite(value):
        return f"{symbol}–"
    amount = round_half_up(abs(value))
    sign = "-" if value < 0 and amount else ""
    return f"{sign}{symbol}{_group_indian(str(amount))}"


def format_percentage(value: float) -> str:
    """Format a value already expressed in percent with at most one decimal (5.66 -> '5.7%')."""
    if value is None or not math.isfinite(value):
        return "–"
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return f"{text}%"


def format_compact(value: float, symbol: str = "₹") -> str:
    """Short axis label in lakh/crore units (₹1.2 Cr, ₹4.5 L)."""
    if abs(value) >= 1e7:
        return f"{symbol}{value / 1e7:.1f} Cr"
    if abs(value) >= 1e5:
        return f"{symbol}{value / 1e5:.1f} L"
    return format_currency(value, symbol)
