from __future__ import annotations

from typing import Any, Optional


class SchemeError(Exception):
    pass


# ------------------------------------------------------------
# Registration-time (programmer) errors: raised during init, abort startup
# ------------------------------------------------------------
class RegistrationError(SchemeError):
    pass


class NotAnAPIObjectError(RegistrationError, TypeError):
    def __init__(self, obj: Any, reason: str = "it does not implement APIObject"):
        self.obj = obj
        self.reason = reason
        super().__init__(f"{obj!r} cannot be registered: {reason}")


class ConflictingKindError(RegistrationError):
    def __init__(self, version: str, kind: str, existing: type, incoming: type):
        self.version = version
        self.kind = kind
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"kind {kind!r} in version {version!r} is already bound to "
            f"{existing.__qualname__}; refusing to rebind it to {incoming.__qualname__}"
        )


class SchemeFrozenError(RegistrationError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"scheme is frozen; {operation} is only allowed during initialization")


# ------------------------------------------------------------
# Runtime errors: caused by input, recoverable by the caller
# ------------------------------------------------------------
class CodecError(SchemeError):
    pass


class NotRegisteredError(CodecError, LookupError):
    """Lookup miss in the scheme (unknown kind-name or unregistered type)."""

    def __init__(self, version: str, kind: Optional[str] = None, type_: Optional[type] = None):
        self.version = version
        self.kind = kind
        self.type = type_
        if kind is not None:
            msg = f"no kind {kind!r} is registered for version {version!r}"
        elif type_ is not None:
            msg = f"type {type_.__qualname__} is not registered for version {version!r}"
        else:
            msg = f"version {version!r} is not registered"
        super().__init__(msg)


class UnregisteredKindError(NotRegisteredError):
    """Raised by a codec when the object or payload kind has no binding."""


class VersionMismatchError(CodecError):
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"payload apiVersion {actual!r} does not match codec version {expected!r}")


class DecodeError(CodecError, ValueError):
    """Malformed payload: not JSON, missing metadata, or a body that fails validation."""
