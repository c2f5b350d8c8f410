#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Simulated email delivery of the PDF analysis.

The message is assembled in full (body + PDF attachment) but never sent;
callers get a DeliveryReceipt with status "simulated".
"""

import re
import time
from datetime import datetime, timezone
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Optional

from pydantic import BaseModel

from ..engine.schema import InvalidInput, UpsellInputs, UpsellResults
from ..utils import (
    get_logger, EMAIL_SENDER, EMAIL_SUBJECT, EMAIL_SIMULATED_DELAY, REPORT_FILENAME,
    REPORT_COMPANY_NAME,
)
from .export import build_pdf_report
from .formatting import format_currency, format_percentage

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class DeliveryReceipt(BaseModel):
    """Outcome of a simulated send."""

    recipient: str
    sender: str
    subject: str
    message_id: str
    attachment_name: str
    attachment_bytes: int
    status: str = "simulated"
    sent_at: datetime


def validate_email(address: str) -> str:
    """Return the trimmed address or raise InvalidInput."""
    address = (address or "").strip()
    if not EMAIL_PATTERN.match(address):
        raise InvalidInput(f"Invalid email address: '{address}'", field="email")
    return address


def build_report_message(
    recipient: str,
    results: UpsellResults,
    inputs: UpsellInputs,
    name: Optional[str] = None,
    company: Optional[str] = None,
) -> EmailMessage:
    """Assemble the analysis email with the PDF report attached."""
    greeting = f"Hi {name}," if name else "Hi,"
    msg = EmailMessage()
    msg["From"] = EMAIL_SENDER
    msg["To"] = recipient
    msg["Subject"] = EMAIL_SUBJECT
    msg["Message-ID"] = make_msgid()
    msg.set_content("\n".join([
        greeting,
        "",
        f"Here is your {inputs.timeframe}-month SaaS upsell revenue projection.",
        "",
        f"Baseline revenue: {format_currency(results.baseline_revenue)}",
        f"Upsell revenue: {format_currency(results.upsell_revenue)} "
        f"({format_percentage(results.upsell_percentage)} of total)",
        f"Total revenue: {format_currency(results.total_revenue)}",
        "",
        "The full analysis is attached as a PDF.",
    ]))
    pdf = build_pdf_report(results, inputs, company_name=company or REPORT_COMPANY_NAME)
    msg.add_attachment(pdf, maintype="application", subtype="pdf", filename=REPORT_FILENAME)
    return msg


def send_report_email(
    recipient: str,
    results: UpsellResults,
    inputs: UpsellInputs,
    name: Optional[str] = None,
    company: Optional[str] = None,
    delay: float = EMAIL_SIMULATED_DELAY,
) -> DeliveryReceipt:
    """
    Simulate emailing the analysis to a recipient.
    
    Args:
        recipient: Destination address
        results: Projection results
        inputs: Inputs the results were computed from
        name: Recipient name for the greeting
        company: Company name printed on the PDF
        delay: Seconds to wait before reporting delivery
    
    Returns:
        DeliveryReceipt describing the message that would have been sent
    
    Raises:
        InvalidInput: If the address is malformed
    """
    recipient = validate_email(recipient)
    msg = build_report_message(recipient, results, inputs, name=name, company=company)

    if delay > 0:
        time.sleep(delay)

    attachment = next(msg.iter_attachments())
    size = len(attachment.get_content())
    logger.info(f"Simulated email to {recipient}: '{msg['Subject']}' with {size:,}-byte attachment")

    return DeliveryReceipt(
        recipient=recipient,
        sender=str(msg["From"]),
        subject=str(msg["Subject"]),
        message_id=str(msg["Message-ID"]),
        attachment_name=attachment.get_filename(),
        attachment_bytes=size,
        sent_at=datetime.now(timezone.utc),
    )
