# app/system_models/base_schema.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for records exchanged with the clinic API.

    The API speaks camelCase JSON; attributes stay snake_case in Python.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    def to_api(self) -> dict:
        """Serialise for the wire (camelCase, unset optionals dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True)
