"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Type, TypeVar, Any

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """
    Base schema for all back-office payloads.

    The remote API speaks camelCase; fields are declared in snake_case and
    accepted under either name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True
    )

    @classmethod
    def from_payload(cls: Type[T], payload: Any) -> T:
        """Create a schema instance from a decoded JSON payload"""
        return cls.model_validate(payload)

    def to_payload(self) -> dict:
        """Dump to the camelCase JSON shape the remote API expects"""
        return self.model_dump(mode="json", by_alias=True)
