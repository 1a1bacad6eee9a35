from __future__ import annotations

from typing import Dict

from fastapi import HTTPException, Request

from apischeme.core.runtime.codec import Codec, codec_for
from apischeme.core.runtime.scheme import Scheme


def install_scheme(app, scheme: Scheme) -> None:
    """Attach a frozen scheme and one shared codec per version to the app."""
    if not scheme.frozen:
        raise RuntimeError("scheme must be frozen before it is served")
    app.state.scheme = scheme
    app.state.codecs = {v: codec_for(scheme, v) for v in scheme.versions()}


def get_scheme(request: Request) -> Scheme:
    return request.app.state.scheme


def get_codec(version: str, request: Request) -> Codec:
    codecs: Dict[str, Codec] = request.app.state.codecs
    c = codecs.get(version)
    if c is None:
        raise HTTPException(status_code=404, detail=f"API version not found: {version}")
    return c
