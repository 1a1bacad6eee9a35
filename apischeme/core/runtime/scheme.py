from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Type

from .errors import (
    ConflictingKindError,
    NotAnAPIObjectError,
    NotRegisteredError,
    SchemeFrozenError,
)
from .object import APIObject, is_api_object_type, is_marshalable, kind_name_of

log = logging.getLogger("apischeme.scheme")


class Scheme:
    """
    Version-scoped table of kind-name <-> type bindings.

    Lifecycle:
      1) built once at startup; version packages call add_known_types /
         add_known_type_with_name (single-threaded)
      2) freeze(); from then on the tables are only read and every lookup
         is safe from any thread

    Duplicate policy:
      - registering the same (version, kind, type) again is a no-op
      - binding a kind that already maps to a different type raises
        ConflictingKindError

    Canonical names:
      - add_known_types always makes the derived name canonical
      - add_known_type_with_name only makes its name canonical when the type
        has no canonical name yet in that version; otherwise it is an alias
    """

    def __init__(self) -> None:
        self._kind_to_type: Dict[str, Dict[str, Type[APIObject]]] = {}
        self._type_to_kind: Dict[str, Dict[Type[APIObject], str]] = {}
        self._frozen = False
        self._lock = threading.Lock()

    # --- lifecycle ---

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Scheme":
        self._frozen = True
        log.info(
            "scheme frozen versions=%s bindings=%s",
            self.versions(),
            sum(len(v) for v in self._kind_to_type.values()),
        )
        return self

    # --- registration ---

    def add_known_types(self, version: str, *types: Type[APIObject]) -> None:
        for t in types:
            self._ensure_registrable(t, "add_known_types")
            kind = kind_name_of(t)
            with self._lock:
                self._bind(version, kind, t)
                self._type_to_kind.setdefault(version, {})[t] = kind

    def add_known_type_with_name(self, version: str, kind: str, t: Type[APIObject]) -> None:
        self._ensure_registrable(t, "add_known_type_with_name")
        if not kind:
            raise ValueError("kind name must be a non-empty string")
        with self._lock:
            self._bind(version, kind, t)
            canonical = self._type_to_kind.setdefault(version, {})
            if t not in canonical:
                canonical[t] = kind

    # --- lookup ---

    def type_for(self, version: str, kind: str) -> Type[APIObject]:
        try:
            return self._kind_to_type[version][kind]
        except KeyError:
            raise NotRegisteredError(version, kind=kind) from None

    def kind_for(self, version: str, t: type) -> str:
        try:
            return self._type_to_kind[version][t]
        except (KeyError, TypeError):
            raise NotRegisteredError(version, type_=t) from None

    def recognizes(self, version: str, kind: str) -> bool:
        return kind in self._kind_to_type.get(version, {})

    def new(self, version: str, kind: str, **fields: Any) -> APIObject:
        return self.type_for(version, kind)(**fields)

    def versions(self) -> List[str]:
        return sorted(self._kind_to_type.keys())

    def known_types(self, version: str) -> Dict[str, Type[APIObject]]:
        if version not in self._kind_to_type:
            raise NotRegisteredError(version)
        return dict(sorted(self._kind_to_type[version].items()))

    def aliases_for(self, version: str, t: type) -> List[str]:
        canonical = self.kind_for(version, t)
        return sorted(
            k for k, bound in self._kind_to_type[version].items()
            if bound is t and k != canonical
        )

    # --- internals ---

    def _ensure_registrable(self, t: Any, operation: str) -> None:
        if self._frozen:
            raise SchemeFrozenError(operation)
        if not is_api_object_type(t):
            raise NotAnAPIObjectError(t)
        if not is_marshalable(t):
            raise NotAnAPIObjectError(t, reason="no field schema can be built for it")

    def _bind(self, version: str, kind: str, t: Type[APIObject]) -> None:
        table = self._kind_to_type.setdefault(version, {})
        existing = table.get(kind)
        if existing is None:
            table[kind] = t
            log.debug("registered version=%s kind=%s type=%s", version, kind, t.__qualname__)
            return
        if existing is not t:
            raise ConflictingKindError(version, kind, existing, t)
        log.debug("duplicate registration ignored version=%s kind=%s", version, kind)
