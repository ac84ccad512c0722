"""GET/POST /api/explain - Explain a METAR or TAF report."""

import logging

from fastapi import APIRouter, HTTPException, Query

from ..schemas.explanation import ExplainRequest, ReportExplanation
from ..services.assembler import parse_and_explain

logger = logging.getLogger(__name__)

router = APIRouter()


def _explain(report: str) -> ReportExplanation:
    if not report.strip():
        raise HTTPException(status_code=422, detail="Report text cannot be empty")
    result = parse_and_explain(report)
    if result.error:
        logger.info("Explained report with error: %s", result.error)
    return result


@router.get("/explain", response_model=ReportExplanation)
def get_explain(report: str = Query(..., description="Raw METAR/TAF text")):
    """Explain a report passed as a query parameter."""
    return _explain(report)


@router.post("/explain", response_model=ReportExplanation)
def post_explain(body: ExplainRequest):
    """Explain a report passed in a JSON body."""
    return _explain(body.report)
