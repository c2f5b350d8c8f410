"""Presentation, export and delivery of projection results."""

from .formatting import format_currency, format_percentage, format_compact
from .charts import chart_points, revenue_split, render_charts
from .export import build_pdf_report, save_pdf_report, export_monthly_csv
from .mailer import DeliveryReceipt, validate_email, build_report_message, send_report_email
from .content import get_educational_content, how_to_use_text

__all__ = [
    "format_currency", "format_percentage", "format_compact",
    "chart_points", "revenue_split", "render_charts",
    "build_pdf_report", "save_pdf_report", "export_monthly_csv",
    "DeliveryReceipt", "validate_email", "build_report_message", "send_report_email",
    "get_educational_content", "how_to_use_text",
]
