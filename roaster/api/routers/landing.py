"""Landing page generation endpoint.

Routes
------
POST /api/generate-landing    Body: {"name": ..., "description": ..., ...}
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import AliasChoices, BaseModel, Field

from roaster.errors import InternalError, RoasterError
from roaster.landing.models import BusinessInfo
from roaster.pipeline import generate_landing

logger = logging.getLogger(__name__)

router = APIRouter()


class LandingRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    targetCustomer: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("targetCustomer", "target_customer"),
    )
    features: Optional[str] = None
    cta: Optional[str] = None
    contact: Optional[str] = None


class LandingResponse(BaseModel):
    success: bool
    html: str


@router.post("/generate-landing", response_model=LandingResponse)
def generate_landing_endpoint(body: LandingRequest, request: Request) -> dict[str, Any]:
    """Render a landing page; blank optional fields take their defaults."""
    info = BusinessInfo.from_payload(body.model_dump())

    generator = request.app.state.generator
    try:
        html = generate_landing(info, generator)
    except RoasterError:
        raise
    except Exception as exc:
        logger.exception("Landing page generation for %r failed", info.name)
        raise InternalError("Failed to generate landing page") from exc
    return {"success": True, "html": html}
