from .codec import Codec, codec_for, data_version_and_kind
from .errors import (
    CodecError,
    ConflictingKindError,
    DecodeError,
    NotAnAPIObjectError,
    NotRegisteredError,
    RegistrationError,
    SchemeError,
    SchemeFrozenError,
    UnregisteredKindError,
    VersionMismatchError,
)
from .object import APIObject, TypeMeta, kind_name_of
from .scheme import Scheme

__all__ = [
    "APIObject",
    "Codec",
    "CodecError",
    "ConflictingKindError",
    "DecodeError",
    "NotAnAPIObjectError",
    "NotRegisteredError",
    "RegistrationError",
    "Scheme",
    "SchemeError",
    "SchemeFrozenError",
    "TypeMeta",
    "UnregisteredKindError",
    "VersionMismatchError",
    "codec_for",
    "data_version_and_kind",
    "kind_name_of",
]
