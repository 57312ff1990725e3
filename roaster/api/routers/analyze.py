"""Website analysis endpoint.

Routes
------
POST /api/analyze    Body: {"url": "example.com"}    → analyze_url
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from roaster.errors import InternalError, RoasterError, ValidationError
from roaster.pipeline import analyze_url

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    url: Optional[str] = None


class AnalyzeResponse(BaseModel):
    success: bool
    analysis: dict[str, Any]
    roastFeedback: str
    professionalFeedback: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_endpoint(body: AnalyzeRequest, request: Request) -> dict[str, Any]:
    """Fetch the site, extract its signals and return both critiques.

    Fetch problems come back as 400 with the fetch message; anything
    unexpected is logged and reduced to a generic 500.
    """
    if not (body.url or "").strip():
        raise ValidationError("URL is required")

    generator = request.app.state.generator
    try:
        result = analyze_url(body.url, generator)
    except RoasterError:
        raise
    except Exception as exc:
        logger.exception("Analysis of %r failed", body.url)
        raise InternalError("Failed to analyze website") from exc
    return result.as_dict()
