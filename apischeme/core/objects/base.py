from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from apischeme.core.runtime.object import APIObject


class WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python; unknown wire fields are dropped
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class WireObject(APIObject, WireModel):
    """Base for every registrable top-level object of a wire version."""
