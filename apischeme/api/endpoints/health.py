from __future__ import annotations

from fastapi import APIRouter, Request
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import JSONResponse, Response

router = APIRouter()


@router.get("/health/live")
async def live():
    return {"status": "ok"}


@router.get("/health/ready")
async def ready(request: Request):
    """
    Readiness reflects ability to serve traffic: the scheme must be installed
    and frozen, with at least one wire version registered.
    """
    scheme = getattr(request.app.state, "scheme", None)
    env = request.app.state.settings.env
    problems: list[str] = []

    if scheme is None:
        problems.append("scheme_missing")
    else:
        if not scheme.frozen:
            problems.append("scheme_not_frozen")
        if not scheme.versions():
            problems.append("no_versions_registered")

    if problems:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "env": env, "problems": problems},
        )

    return {"status": "ready", "env": env, "versions": scheme.versions()}


# HTTP request and codec operation counters of this process
@router.get("/metrics", include_in_schema=False)
def prometheus_metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
