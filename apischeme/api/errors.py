from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from apischeme.core.runtime.errors import (
    CodecError,
    DecodeError,
    UnregisteredKindError,
    VersionMismatchError,
)

log = logging.getLogger("apischeme.errors")

_STATUS = {
    DecodeError: (400, "DecodeError"),
    VersionMismatchError: (409, "VersionMismatch"),
    UnregisteredKindError: (422, "UnregisteredKind"),
}


def status_for(exc: CodecError) -> tuple[int, str]:
    for cls in type(exc).__mro__:
        if cls in _STATUS:
            return _STATUS[cls]
    return 400, "CodecError"


def error_payload(reason: str, detail: str, request_id: Optional[str]) -> Dict[str, Any]:
    """Error body shared by the codec handlers and SafeErrorMiddleware."""
    payload: Dict[str, Any] = {"reason": reason, "detail": detail}
    if request_id:
        payload["request_id"] = request_id
    return payload


def codec_error_response(request: Request, exc: CodecError) -> JSONResponse:
    code, reason = status_for(exc)
    rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
    log.warning(
        "codec error reason=%s version=%s kind=%s rid=%s path=%s: %s",
        reason,
        getattr(exc, "version", None) or getattr(exc, "expected", None),
        getattr(exc, "kind", None),
        rid,
        request.url.path,
        exc,
    )
    return JSONResponse(status_code=code, content=error_payload(reason, str(exc), rid))


async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    return codec_error_response(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CodecError, codec_error_handler)
