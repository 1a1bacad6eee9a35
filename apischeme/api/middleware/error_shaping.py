from __future__ import annotations

import logging
import traceback
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from apischeme.api.errors import codec_error_response, error_payload
from apischeme.core.runtime.errors import CodecError

log = logging.getLogger("apischeme.errors")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Outermost guard.

    Codec errors raised outside a route (middleware, dependencies run before
    the handlers) still get their 4xx status and the usual error body.
    Anything else becomes a 500 with the same body shape and no traceback;
    the traceback is logged server-side only.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except CodecError as e:
            return codec_error_response(request, e)
        except Exception as e:
            rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
            log.error(
                "Unhandled error: %s rid=%s path=%s\n%s",
                str(e),
                rid,
                request.url.path,
                traceback.format_exc(),
            )
            return JSONResponse(
                status_code=500,
                content=error_payload("InternalError", "Internal Server Error", rid),
            )
