from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import Response

from apischeme.api.deps import get_codec, get_scheme
from apischeme.core.runtime.codec import Codec
from apischeme.core.runtime.errors import NotRegisteredError
from apischeme.core.runtime.scheme import Scheme

router = APIRouter(prefix="/api", tags=["scheme"])


def _describe(scheme: Scheme, version: str, kind: str) -> Dict[str, Any]:
    t = scheme.type_for(version, kind)
    canonical = scheme.kind_for(version, t)
    return {
        "kind": kind,
        "canonical": kind == canonical,
        "canonicalKind": canonical,
        "aliases": scheme.aliases_for(version, t),
    }


@router.get("/versions")
def list_versions(scheme: Scheme = Depends(get_scheme)):
    return {"versions": scheme.versions()}


@router.get("/{version}/kinds")
def list_kinds(version: str, scheme: Scheme = Depends(get_scheme)):
    try:
        names = scheme.known_types(version)
    except NotRegisteredError:
        raise HTTPException(status_code=404, detail=f"API version not found: {version}")
    return {
        "version": version,
        "kinds": [_describe(scheme, version, k) for k in names],
    }


@router.get("/{version}/kinds/{kind}")
def get_kind(version: str, kind: str, scheme: Scheme = Depends(get_scheme)):
    if version not in scheme.versions():
        raise HTTPException(status_code=404, detail=f"API version not found: {version}")
    if not scheme.recognizes(version, kind):
        raise HTTPException(status_code=404, detail=f"Kind not found: {kind}")
    return {"version": version, **_describe(scheme, version, kind)}


@router.post("/{version}/normalize")
async def normalize(request: Request, codec: Codec = Depends(get_codec)):
    """
    Decode the raw body with this version's codec and answer with the
    canonical encoding. Alias kinds come back under their canonical name.
    """
    body = await request.body()
    obj = codec.decode(body)
    return Response(content=codec.encode(obj), media_type="application/json")
