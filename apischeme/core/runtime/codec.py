from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple, Union

from pydantic import ValidationError

from apischeme.core.observability.metrics import record_codec

from .errors import (
    DecodeError,
    NotRegisteredError,
    UnregisteredKindError,
    VersionMismatchError,
)
from .object import APIObject, TypeMeta, adapter_for
from .scheme import Scheme

log = logging.getLogger("apischeme.codec")

_HEADER_KEYS = ("apiVersion", "kind")


def _load(data: Union[bytes, str]) -> Dict[str, Any]:
    try:
        obj = json.loads(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"payload is not valid JSON: {e}") from e
    except RecursionError as e:
        raise DecodeError("payload nesting is too deep") from e
    if not isinstance(obj, dict):
        raise DecodeError(f"payload must be a JSON object, got {type(obj).__name__}")
    return obj


def _header(obj: Dict[str, Any]) -> TypeMeta:
    try:
        return TypeMeta.model_validate(obj)
    except ValidationError as e:
        raise DecodeError(f"payload is missing apiVersion/kind metadata: {e.errors()}") from e


def data_version_and_kind(data: Union[bytes, str]) -> Tuple[str, str]:
    """Peek at (apiVersion, kind) without resolving or building a type."""
    meta = _header(_load(data))
    return meta.api_version, meta.kind


class Codec:
    """
    Encodes/decodes APIObjects for exactly one wire version of a Scheme.

    Wire form: a JSON object whose apiVersion and kind keys sit beside the
    object's own fields. Decoding requires the embedded apiVersion to equal
    the codec's version (strict; no cross-version fallback).

    Holds no mutable state, so one instance can be shared by every thread.
    """

    def __init__(self, scheme: Scheme, version: str):
        self._scheme = scheme
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    def __repr__(self) -> str:
        return f"Codec(version={self._version!r})"

    # --- encode ---

    def encode_to_dict(self, obj: APIObject) -> Dict[str, Any]:
        t = type(obj)
        try:
            kind = self._scheme.kind_for(self._version, t)
        except NotRegisteredError:
            record_codec("encode", self._version, "unregistered_kind")
            raise UnregisteredKindError(self._version, type_=t) from None

        fields = adapter_for(t).dump_python(obj, mode="json", by_alias=True, exclude_none=True)
        out: Dict[str, Any] = {"apiVersion": self._version, "kind": kind}
        out.update({k: v for k, v in fields.items() if k not in _HEADER_KEYS})
        record_codec("encode", self._version, "ok")
        return out

    def encode(self, obj: APIObject) -> bytes:
        return json.dumps(self.encode_to_dict(obj), sort_keys=True, separators=(",", ":")).encode("utf-8")

    # --- decode ---

    def decode_from_dict(self, obj: Dict[str, Any]) -> APIObject:
        try:
            meta = _header(obj)
        except DecodeError:
            record_codec("decode", self._version, "malformed")
            raise

        if meta.api_version != self._version:
            record_codec("decode", self._version, "version_mismatch")
            raise VersionMismatchError(self._version, meta.api_version)

        try:
            t = self._scheme.type_for(self._version, meta.kind)
        except NotRegisteredError:
            record_codec("decode", self._version, "unregistered_kind")
            raise UnregisteredKindError(self._version, kind=meta.kind) from None

        body = {k: v for k, v in obj.items() if k not in _HEADER_KEYS}
        try:
            out = adapter_for(t).validate_python(body)
        except ValidationError as e:
            record_codec("decode", self._version, "malformed")
            log.debug("decode failed version=%s kind=%s errors=%s", self._version, meta.kind, e.error_count())
            raise DecodeError(f"invalid {meta.kind} body: {e}") from e
        except RecursionError as e:
            record_codec("decode", self._version, "malformed")
            raise DecodeError(f"{meta.kind} body nesting is too deep") from e

        record_codec("decode", self._version, "ok")
        return out

    def decode(self, data: Union[bytes, str]) -> APIObject:
        try:
            obj = _load(data)
        except DecodeError:
            record_codec("decode", self._version, "malformed")
            raise
        return self.decode_from_dict(obj)


def codec_for(scheme: Scheme, version: str) -> Codec:
    return Codec(scheme, version)
