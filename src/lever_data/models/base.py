"""Shared base for models decoded from Lever API payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class LeverModel(BaseModel):
    """
    Base for all Lever records.
    Wire keys are camelCase; attributes are snake_case and accepted by either name.
    Unknown keys are ignored so new API fields never break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Lever sends null for unset values; treat them as absent so defaults apply.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys, omitting unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
