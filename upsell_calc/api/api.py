#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI service for the upsell revenue calculator.

Endpoints:
  GET  /projection/{current_customers},{average_revenue},{upsell_conversion_rate},
                   {upsell_average_value},{growth_rate},{timeframe}
  POST /projections        batch of projection requests
  POST /report/pdf         downloadable PDF analysis
  POST /report/email       simulated email delivery of the PDF analysis
  GET  /defaults           default calculator inputs
  GET  /education          educational content

Behavior:
  - Validate inputs at the boundary (InvalidInput -> 400)
  - Run the pure projection engine
  - Return aggregates, monthly records, chart points and display strings
"""

import os
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Path
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel, Field, field_validator

from upsell_calc.engine.logic import build_inputs, project
from upsell_calc.engine.schema import InvalidInput, MonthlyRecord, UpsellInputs, UpsellResults
from upsell_calc.report.charts import chart_points, revenue_split
from upsell_calc.report.content import get_educational_content
from upsell_calc.report.export import build_pdf_report
from upsell_calc.report.formatting import format_currency, format_percentage
from upsell_calc.report.mailer import DeliveryReceipt, send_report_email
from upsell_calc.utils.config import (
    API_HOST,
    API_PORT,
    API_RELOAD,
    DEFAULT_INPUTS,
    MAX_TIMEFRAME,
    REPORT_COMPANY_NAME,
    REPORT_FILENAME,
)
from upsell_calc.utils.logger import get_logger

logger = get_logger(__name__)

API_VERSION = "1.0.0"

# ============================================================================
# FastAPI App Setup
# ============================================================================

app = FastAPI(
    title="Upsell Insights Calculator API",
    description="Project SaaS baseline vs upsell revenue month by month",
    version=API_VERSION,
    openapi_tags=[
        {"name": "Projection", "description": "Monthly revenue projections"},
        {"name": "Reports", "description": "PDF export and simulated email delivery"},
    ],
)


# ============================================================================
# Pydantic Models
# ============================================================================


class ProjectionRequest(BaseModel):
    """Calculator inputs (defaults match the calculator form)."""

    current_customers: int = Field(
        DEFAULT_INPUTS["current_customers"], ge=0, description="Current number of customers"
    )
    average_revenue: float = Field(
        DEFAULT_INPUTS["average_revenue"], ge=0, description="Average revenue per customer (₹)"
    )
    upsell_conversion_rate: float = Field(
        DEFAULT_INPUTS["upsell_conversion_rate"], ge=0, le=100,
        description="Upsell conversion rate (percent, e.g. 15 = 15%)",
    )
    upsell_average_value: float = Field(
        DEFAULT_INPUTS["upsell_average_value"], ge=0, description="Average upsell value (₹)"
    )
    growth_rate: float = Field(
        DEFAULT_INPUTS["growth_rate"], ge=0, le=100,
        description="Monthly customer growth rate (percent, e.g. 5 = 5%)",
    )
    timeframe: int = Field(
        DEFAULT_INPUTS["timeframe"], ge=1, le=MAX_TIMEFRAME,
        description=f"Projection timeframe in months (1-{MAX_TIMEFRAME})",
    )

    def to_inputs(self) -> UpsellInputs:
        return build_inputs(**self.model_dump())


class ChartPoint(BaseModel):
    """Bar-chart point (bucketed month)."""

    label: str
    period: int
    baseline_revenue: float
    upsell_revenue: float


class RevenueSlice(BaseModel):
    """Pie-chart slice of final-month revenue."""

    name: str
    value: float
    color: str
    share: float


class DisplayValues(BaseModel):
    """Pre-formatted strings for the summary cards."""

    baseline_revenue: str
    upsell_revenue: str
    total_revenue: str
    upsell_percentage: str
    months: str


class ProjectionResponse(BaseModel):
    """Complete projection response."""

    calculation_date: date
    inputs: ProjectionRequest

    # Results (final month, not cumulative)
    baseline_revenue: float
    upsell_revenue: float
    total_revenue: float
    upsell_percentage: float
    final_customers: int

    monthly_data: List[MonthlyRecord]
    chart_data: List[ChartPoint]
    revenue_split: List[RevenueSlice]
    display: DisplayValues


class ReportRequest(ProjectionRequest):
    """Projection inputs plus the company name printed on the report."""

    company_name: str = Field(REPORT_COMPANY_NAME, min_length=1, max_length=120)


class EmailRequest(BaseModel):
    """Simulated email delivery request."""

    email: str = Field(..., description="Recipient address")
    name: Optional[str] = Field(None, max_length=120)
    company: Optional[str] = Field(None, max_length=120)
    inputs: ProjectionRequest = Field(default_factory=ProjectionRequest)

    @field_validator("email")
    @classmethod
    def strip_email(cls, v):
        return v.strip()


class ErrorDetail(BaseModel):
    """Error response detail."""

    error_code: str
    error_message: str
    field: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: date.today().isoformat())


# ============================================================================
# Helper Functions
# ============================================================================


def _build_response(inputs: UpsellInputs, results: UpsellResults) -> ProjectionResponse:
    """Attach chart data and display strings to engine results."""
    months = len(results.monthly_data)
    return ProjectionResponse(
        calculation_date=date.today(),
        inputs=ProjectionRequest(**inputs.model_dump()),
        baseline_revenue=results.baseline_revenue,
        upsell_revenue=results.upsell_revenue,
        total_revenue=results.total_revenue,
        upsell_percentage=results.upsell_percentage,
        final_customers=results.monthly_data[-1].customers,
        monthly_data=results.monthly_data,
        chart_data=[ChartPoint(**p) for p in chart_points(results)],
        revenue_split=[RevenueSlice(**s) for s in revenue_split(results)],
        display=DisplayValues(
            baseline_revenue=format_currency(results.baseline_revenue),
            upsell_revenue=format_currency(results.upsell_revenue),
            total_revenue=format_currency(results.total_revenue),
            upsell_percentage=format_percentage(results.upsell_percentage),
            months=f"After {months} month{'' if months == 1 else 's'}",
        ),
    )


def _compute_projection(inputs: UpsellInputs) -> ProjectionResponse:
    """
    Run the engine for validated inputs and build the API response.

    Raises:
        InvalidInput: If inputs fail engine validation
    """
    logger.info(
        f"Projecting: customers={inputs.current_customers}, arpc={inputs.average_revenue}, "
        f"conversion={inputs.upsell_conversion_rate}%, upsell_value={inputs.upsell_average_value}, "
        f"growth={inputs.growth_rate}%, months={inputs.timeframe}"
    )
    results = project(inputs)
    logger.info(
        f"Projection complete: total={results.total_revenue:.2f} "
        f"(upsell {results.upsell_percentage:.2f}%)"
    )
    return _build_response(inputs, results)


class InvalidInputHTTPException(HTTPException):
    """400 response that remembers which input field was rejected."""

    def __init__(self, e: InvalidInput, prefix: str = "Invalid input"):
        super().__init__(status_code=400, detail=f"{prefix}: {str(e)}")
        self.field = e.field


def _invalid(e: InvalidInput) -> HTTPException:
    logger.error(f"Invalid input: {str(e)}")
    return InvalidInputHTTPException(e)


# ============================================================================
# API Endpoints
# ============================================================================


@app.get("/", include_in_schema=False)
def root():
    """Redirect to docs."""
    return RedirectResponse("/docs")


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    logger.info("Health check requested")
    return {
        "status": "ok",
        "service": "Upsell Insights Calculator API",
        "version": API_VERSION,
    }


@app.get("/defaults", response_model=ProjectionRequest, tags=["Projection"])
def defaults():
    """Default calculator inputs."""
    return ProjectionRequest()


@app.get(
    "/projection/{current_customers},{average_revenue},{upsell_conversion_rate},"
    "{upsell_average_value},{growth_rate},{timeframe}",
    response_model=ProjectionResponse,
    tags=["Projection"],
    summary="Project monthly upsell revenue",
    responses={
        200: {"description": "Projection successful"},
        400: {"description": "Invalid input"},
        500: {"description": "Internal server error"},
    },
)
def projection(
    current_customers: int = Path(..., description="Current number of customers"),
    average_revenue: float = Path(..., description="Average revenue per customer (₹)"),
    upsell_conversion_rate: float = Path(..., description="Upsell conversion rate (0-100)"),
    upsell_average_value: float = Path(..., description="Average upsell value (₹)"),
    growth_rate: float = Path(..., description="Monthly growth rate (0-100)"),
    timeframe: int = Path(..., description=f"Months to project (1-{MAX_TIMEFRAME})"),
):
    """
    Project monthly revenue with all inputs in the URL path.

    Rates are percentages (15 = 15%). Range checks are done by the engine so
    out-of-range values return 400 with the offending field.

    **Example:**
    ```
    GET /projection/1000,5000,15,2000,5,12
    ```
    """
    logger.info("=== PROJECTION REQUEST ===")
    try:
        inputs = build_inputs(
            current_customers=current_customers,
            average_revenue=average_revenue,
            upsell_conversion_rate=upsell_conversion_rate,
            upsell_average_value=upsell_average_value,
            growth_rate=growth_rate,
            timeframe=timeframe,
        )
        return _compute_projection(inputs)

    except InvalidInput as e:
        raise _invalid(e)

    except ValueError as e:
        logger.error(f"Value error: {str(e)}")
        raise HTTPException(status_code=400, detail=f"Projection error: {str(e)}")


@app.post("/projections", response_model=List[ProjectionResponse], tags=["Projection"])
def projections_batch(batch: List[ProjectionRequest]):
    """
    Compute projections for a batch of input sets.

    Results are returned in request order.
    """
    logger.info(f"Batch projection request: {len(batch)} item(s)")
    results: List[ProjectionResponse] = []
    for i, item in enumerate(batch):
        try:
            results.append(_compute_projection(item.to_inputs()))
        except InvalidInput as e:
            logger.error(f"Batch item {i} failed: {e}")
            raise InvalidInputHTTPException(e, prefix=f"Invalid input in item {i}")
    return results


@app.post(
    "/report/pdf",
    tags=["Reports"],
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def report_pdf(req: ReportRequest):
    """Download the analysis as a PDF."""
    try:
        inputs = req.to_inputs()
        results = project(inputs)
    except InvalidInput as e:
        raise _invalid(e)

    pdf = build_pdf_report(results, inputs, company_name=req.company_name)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )


@app.post("/report/email", response_model=DeliveryReceipt, tags=["Reports"])
def report_email(req: EmailRequest):
    """Email the analysis (simulated; nothing is sent)."""
    logger.info(f"Email report requested for {req.email}")
    try:
        inputs = req.inputs.to_inputs()
        results = project(inputs)
        return send_report_email(
            req.email, results, inputs, name=req.name, company=req.company
        )
    except InvalidInput as e:
        raise _invalid(e)


@app.get("/education", response_model=Dict[str, Any], tags=["Content"])
def education():
    """Upselling guide and how-to steps."""
    return get_educational_content()


# ============================================================================
# Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Handle HTTP exceptions with structured response."""
    logger.error(f"HTTP Exception: {exc.status_code} - {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorDetail(
            error_code=f"HTTP_{exc.status_code}",
            error_message=str(exc.detail),
            field=getattr(exc, "field", None),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle unexpected exceptions with structured response."""
    logger.error(f"Unhandled exception: {type(exc).__name__}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorDetail(
            error_code="INTERNAL_ERROR",
            error_message=f"Internal server error: {type(exc).__name__}",
        ).model_dump(),
    )


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", str(API_PORT)))
    logger.info(f"Starting Upsell Insights Calculator API on port {port}...")
    uvicorn.run("upsell_calc.api.api:app", host=API_HOST, port=port, reload=API_RELOAD)
