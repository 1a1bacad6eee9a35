from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apischeme.api.deps import install_scheme
from apischeme.api.endpoints import health, kinds
from apischeme.api.errors import register_exception_handlers
from apischeme.api.middleware.error_shaping import SafeErrorMiddleware
from apischeme.api.middleware.request_context import RequestContextMiddleware
from apischeme.core.objects import build_scheme
from apischeme.core.runtime.scheme import Scheme
from apischeme.core.settings import Settings


def create_app(scheme: Optional[Scheme] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    settings.apply_logging()

    app = FastAPI(
        title="API Scheme Service",
        version="0.1.0",
    )

    # Scheme is built (and frozen) once, before any request can be served
    install_scheme(app, scheme if scheme is not None else build_scheme())
    app.state.settings = settings

    register_exception_handlers(app)

    # ------------------------------------------------------------
    # Middleware stack (ORDER MATTERS)
    # Starlette reverses add_middleware order: the LAST call = OUTERMOST wrapper.
    # Runtime order (outermost -> innermost):
    #   SafeErrorMiddleware -> CORSMiddleware -> RequestContext -> handler
    # ------------------------------------------------------------
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SafeErrorMiddleware)

    app.include_router(health.router)
    app.include_router(kinds.router)

    return app


app = create_app()
