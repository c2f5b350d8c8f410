#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Report export: PDF analysis (summary page + charts page) and monthly CSV.
"""

import io
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from ..engine.logic import monthly_frame
from ..engine.schema import UpsellInputs, UpsellResults
from ..utils import get_logger, REPORT_DIR, REPORT_FILENAME, CSV_FILENAME, REPORT_COMPANY_NAME
from .charts import render_charts
from .formatting import format_currency, format_percentage

logger = get_logger(__name__)

# A4 portrait in inches
_PAGE_SIZE = (8.27, 11.69)


def _summary_sections(
    results: UpsellResults, inputs: UpsellInputs, company_name: str
) -> List[Tuple[Optional[str], List[str]]]:
    months = len(results.monthly_data)
    final = results.monthly_data[-1]
    return [
        (None, [
            f"Prepared for: {company_name}",
            f"Date: {date.today().isoformat()}",
        ]),
        ("Inputs", [
            f"Current customers: {inputs.current_customers:,}",
            f"Average revenue per customer: {format_currency(inputs.average_revenue)}",
            f"Upsell conversion rate: {format_percentage(inputs.upsell_conversion_rate)}",
            f"Average upsell value: {format_currency(inputs.upsell_average_value)}",
            f"Monthly customer growth rate: {format_percentage(inputs.growth_rate)}",
            f"Projection timeframe: {inputs.timeframe} months",
        ]),
        (f"Results (month {months})", [
            f"Customers: {final.customers:,}",
            f"Baseline revenue: {format_currency(results.baseline_revenue)}",
            f"Upsell revenue: {format_currency(results.upsell_revenue)} "
            f"({format_percentage(results.upsell_percentage)} of total)",
            f"Total revenue: {format_currency(results.total_revenue)}",
        ]),
        ("Notes", [
            "Figures are for the final projected month, not cumulative totals.",
            "Customer growth compounds monthly on the previous month's rounded count.",
        ]),
    ]


def _summary_page(results: UpsellResults, inputs: UpsellInputs, company_name: str) -> Figure:
    fig = Figure(figsize=_PAGE_SIZE)
    ax = fig.add_subplot()
    ax.axis("off")
    ax.text(0.02, 0.99, "SaaS Upsell Revenue Analysis", va="top", ha="left",
            fontsize=16, fontweight="bold")
    y = 0.93
    line_height = 0.025
    for heading, lines in _summary_sections(results, inputs, company_name):
        if heading:
            ax.text(0.02, y, heading, va="top", ha="left", fontsize=11, fontweight="bold")
            y -= line_height
        for line in lines:
            ax.text(0.04, y, line, va="top", ha="left", fontsize=10)
            y -= line_height
        y -= line_height  # gap between sections
    return fig


def build_pdf_report(
    results: UpsellResults,
    inputs: UpsellInputs,
    company_name: str = REPORT_COMPANY_NAME,
) -> bytes:
    """
    Render the analysis as a two-page PDF.
    
    Args:
        results: Projection results
        inputs: Inputs the results were computed from
        company_name: Name printed on the summary page
    
    Returns:
        PDF document bytes
    """
    buf = io.BytesIO()
    with PdfPages(buf, metadata={"Title": "SaaS Upsell Revenue Analysis", "Author": company_name}) as pdf:
        pdf.savefig(_summary_page(results, inputs, company_name))
        pdf.savefig(render_charts(results, title=f"{company_name}: {inputs.timeframe}-month projection"))
    data = buf.getvalue()
    logger.info(f"Built PDF report for {company_name} ({len(data):,} bytes)")
    return data


def save_pdf_report(
    results: UpsellResults,
    inputs: UpsellInputs,
    path: Optional[Union[str, Path]] = None,
    company_name: str = REPORT_COMPANY_NAME,
) -> Path:
    """Write the PDF report to disk (defaults to REPORT_DIR/REPORT_FILENAME)."""
    out = Path(path) if path else REPORT_DIR / REPORT_FILENAME
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(build_pdf_report(results, inputs, company_name))
    logger.info(f"Saved PDF report: {out}")
    return out


def export_monthly_csv(results: UpsellResults, path: Optional[Union[str, Path]] = None) -> Path:
    """Write the monthly projection table as CSV."""
    out = Path(path) if path else REPORT_DIR / CSV_FILENAME
    out.parent.mkdir(parents=True, exist_ok=True)
    monthly_frame(results).to_csv(out, index=False)
    logger.info(f"Saved monthly CSV ({len(results.monthly_data)} rows): {out}")
    return out
