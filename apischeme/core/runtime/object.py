from functools import lru_cache
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.errors import PydanticSchemaGenerationError


class APIObject:
    """
    Capability marker for anything that may be registered in a Scheme.

    Carries no behavior. A subclass may declare ``KIND`` to pick its wire
    name explicitly (pydantic subclasses annotate it as ``ClassVar[str]``);
    otherwise the class name is used. ``KIND`` is not inherited: every
    registrable class gets its own name.
    """

    KIND: ClassVar[Optional[str]] = None


def is_api_object_type(obj: object) -> bool:
    return isinstance(obj, type) and issubclass(obj, APIObject)


def kind_name_of(cls: type) -> str:
    declared = cls.__dict__.get("KIND")
    if declared:
        return str(declared)
    return cls.__name__


@lru_cache(maxsize=None)
def adapter_for(cls: type) -> TypeAdapter:
    """Field marshaler for a registrable type; raises if pydantic cannot build a schema for it."""
    return TypeAdapter(cls)


def is_marshalable(cls: type) -> bool:
    try:
        adapter_for(cls)
    except PydanticSchemaGenerationError:
        return False
    return True


class TypeMeta(BaseModel):
    """Wire header every payload carries ahead of its fields."""

    model_config = ConfigDict(extra="ignore")

    api_version: str = Field(..., alias="apiVersion", min_length=1)
    kind: str = Field(..., min_length=1)
