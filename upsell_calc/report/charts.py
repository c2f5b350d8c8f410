#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Chart data and rendering: bar-chart bucketing of the monthly series,
baseline/upsell revenue split, and a matplotlib figure of both.
"""

from typing import Any, Dict, List, Optional

import numpy as np
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from ..engine.schema import UpsellResults
from ..utils import BASELINE_COLOR, UPSELL_COLOR
from .formatting import format_compact, format_currency


def chart_points(results: UpsellResults) -> List[Dict[str, Any]]:
    """
    Thin the monthly series for the bar chart.
    
    More than 24 months keeps every third month, more than 12 keeps every
    other month, otherwise all months are kept. Sampling starts at month 1.
    """
    n = len(results.monthly_data)
    if n > 24:
        step = 3
    elif n > 12:
        step = 2
    else:
        step = 1

    return [
        {
            "label": f"Month {r.period}",
            "period": r.period,
            "baseline_revenue": r.baseline_revenue,
            "upsell_revenue": r.upsell_revenue,
        }
        for i, r in enumerate(results.monthly_data)
        if i % step == 0
    ]


def revenue_split(results: UpsellResults) -> List[Dict[str, Any]]:
    """Final-month baseline vs upsell slices for the pie chart."""
    total = results.total_revenue
    slices = [
        ("Baseline Revenue", results.baseline_revenue, BASELINE_COLOR),
        ("Upsell Revenue", results.upsell_revenue, UPSELL_COLOR),
    ]
    return [
        {
            "name": name,
            "value": value,
            "color": color,
            "share": (value / total * 100.0) if total else 0.0,
        }
        for name, value, color in slices
    ]


def render_charts(results: UpsellResults, title: Optional[str] = None) -> Figure:
    """
    Build a figure with the monthly stacked bar chart and the revenue split donut.
    
    Uses a standalone Figure (no pyplot state) so it is safe to call from API workers.
    """
    points = chart_points(results)
    split = revenue_split(results)

    fig = Figure(figsize=(11.69, 8.27))
    ax_bar = fig.add_subplot(1, 2, 1)
    ax_pie = fig.add_subplot(1, 2, 2)

    x = np.arange(len(points))
    baseline = np.array([p["baseline_revenue"] for p in points], dtype=float)
    upsell = np.array([p["upsell_revenue"] for p in points], dtype=float)

    ax_bar.bar(x, baseline, color=BASELINE_COLOR, label="Baseline Revenue")
    ax_bar.bar(x, upsell, bottom=baseline, color=UPSELL_COLOR, label="Upsell Revenue")
    ax_bar.set_xticks(x)
    ax_bar.set_xticklabels([p["label"] for p in points], rotation=45, ha="right", fontsize=8)
    ax_bar.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_compact(v)))
    ax_bar.set_title("Monthly Revenue Projection")
    ax_bar.grid(axis="y", linestyle="--", alpha=0.4)
    ax_bar.legend(loc="upper left")

    values = [s["value"] for s in split]
    if sum(values) > 0:
        ax_pie.pie(
            values,
            labels=[f"{s['name']}: {s['share']:.1f}%" for s in split],
            colors=[s["color"] for s in split],
            startangle=90,
            wedgeprops={"width": 0.3},
        )
    else:
        ax_pie.text(0.5, 0.5, "No revenue to split", ha="center", va="center")
        ax_pie.axis("off")
    ax_pie.set_title(f"Revenue Split ({format_currency(results.total_revenue)})")

    if title:
        fig.suptitle(title)
    fig.tight_layout()
    return fig
