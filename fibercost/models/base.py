"""Shared pydantic configuration for fibercost value records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueRecord(BaseModel):
    """Immutable record that accepts both snake_case and camelCase keys.

    The estimator UI speaks camelCase (``homesPassed``, ``unitId``); Python
    callers use the field names directly.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
