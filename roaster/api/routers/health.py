"""Health check.

Routes
------
GET /api/health    → {"status": "ok", "mode": ..., "apiConnected": ..., "provider": ...}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request) -> dict[str, Any]:
    generator = request.app.state.generator
    return {
        "status": "ok",
        "mode": generator.mode,
        "apiConnected": generator.connected,
        "provider": generator.name,
    }
