#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Educational content shown alongside the calculator.
"""

import copy
from typing import Any, Dict

EDUCATIONAL_CONTENT: Dict[str, Any] = {
    "title": "Understanding SaaS Upsell Revenue",
    "what_is_upselling": {
        "heading": "What is SaaS Upselling?",
        "summary": (
            "Upselling is encouraging existing customers to buy a more expensive "
            "plan, more capacity or additional features."
        ),
        "examples": [
            "Upgrading from basic to premium subscription tiers",
            "Adding more user licenses or seats",
            "Purchasing advanced features or add-on modules",
            "Expanding usage across more business units",
        ],
    },
    "why_it_matters": {
        "heading": "Why Upselling Matters for SaaS Growth",
        "summary": (
            "Selling more to customers who already trust the product costs far less "
            "than acquiring new ones, and expansion revenue compounds as the "
            "customer base grows."
        ),
    },
    "key_metrics": [
        {"name": "Upsell Conversion Rate",
         "description": "The percentage of customers who accept upsell offers"},
        {"name": "Average Upsell Value",
         "description": "The average revenue increase from successful upsells"},
        {"name": "Upsell Revenue Percentage",
         "description": "The portion of total revenue coming from upsells"},
        {"name": "Customer Growth Rate",
         "description": "How quickly your customer base is expanding"},
    ],
    "strategies": [
        {"name": "Value-Based Upselling",
         "description": "Tie each offer to a concrete outcome the customer cares about."},
        {"name": "Usage-Triggered Offers",
         "description": "Present upgrades when customers approach plan limits."},
        {"name": "Success-Based Timing",
         "description": "Make offers right after customers hit a milestone with the product."},
        {"name": "Customer Segmentation",
         "description": "Tailor offers to company size, industry and usage patterns."},
        {"name": "Training and Education",
         "description": "Customers who understand advanced features are more likely to pay for them."},
    ],
    "how_to_use": [
        {"step": "Enter your current customer count",
         "detail": "The number of paying customers you currently have"},
        {"step": "Set your average revenue per customer",
         "detail": "Your current monthly or annual revenue per customer"},
        {"step": "Define your upsell conversion rate",
         "detail": "The percentage of customers you expect to successfully upsell"},
        {"step": "Estimate your average upsell value",
         "detail": "The additional revenue per customer from successful upsells"},
        {"step": "Input your expected monthly growth rate",
         "detail": "How quickly your customer base is growing"},
        {"step": "Select your projection timeframe",
         "detail": "How many months into the future to project"},
        {"step": "Calculate and analyze",
         "detail": "Review the revenue breakdown and projections"},
        {"step": "Share or download",
         "detail": "Save your analysis as a PDF or email it to your team"},
    ],
}


def get_educational_content() -> Dict[str, Any]:
    """Return a copy of the educational content (callers may mutate it)."""
    return copy.deepcopy(EDUCATIONAL_CONTENT)


def how_to_use_text() -> str:
    """Numbered how-to steps as plain text (for the CLI)."""
    return "\n".join(
        f"{i}. {s['step']} - {s['detail']}"
        for i, s in enumerate(EDUCATIONAL_CONTENT["how_to_use"], 1)
    )
