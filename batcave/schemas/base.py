"""Wire Model Base — shared Pydantic config for camelCase payloads.

Invariants:
    - Python attributes are snake_case; wire names are camelCase aliases
    - Both forms accepted on input (populate_by_name)
    - Unknown keys are dropped, so server-controlled fields sent by a client
      never reach the validated object
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every Batcave schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_client(self) -> dict:
        """JSON-safe dict with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)

    def column_values(self, **dump_kwargs) -> dict:
        """Attribute-keyed values ready for an ORM constructor or setattr.

        Enums become their stored text; Decimal and datetime pass through.
        """
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in self.model_dump(**dump_kwargs).items()
        }
