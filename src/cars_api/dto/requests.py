"""Request DTOs for API endpoints."""

import json
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from cars_api.entities import CarEntity
from cars_api.exceptions import MalformedInput


class CarPayload(BaseModel):
    """Inbound Car body for create and update.

    String fields may be missing or null here; presence is checked by
    ``cars_api.services.validation.validate`` so that the caller gets a
    field-specific message instead of a schema error.

    Field names are matched case-insensitively by ``parse_car_payload``.
    """

    model_config = ConfigDict(extra="forbid")

    id: UUID | None = Field(None, description="Ignored: ids are assigned by the server")
    manufacture: StrictStr | None = Field(None, description="Manufacturer name")
    year: StrictStr | None = Field(None, description="Model year as text, e.g. '1990'")
    model: StrictStr | None = Field(None, description="Model name")
    color: StrictStr | None = Field(None, description="Paint color")
    is_classic: StrictBool = Field(
        False,
        alias="isclassic",
        description="Classic flag (persisted on update, ignored on create)",
    )

    def to_entity(self, car_id: UUID | None = None, keep_classic: bool = True) -> CarEntity:
        """Build a CarEntity from a validated payload.

        Args:
            car_id: Identifier to use instead of any id in the body
            keep_classic: When False the classic flag is reset to its default
        """
        return CarEntity(
            id=car_id,
            manufacture=self.manufacture or "",
            year=self.year or "",
            model=self.model or "",
            color=self.color or "",
            is_classic=self.is_classic if keep_classic else False,
        )


def parse_car_payload(raw: bytes) -> CarPayload | None:
    """Deserialize a request body into a CarPayload.

    A JSON ``null`` body returns None (the validator reports it as missing).

    Raises:
        MalformedInput: The body is not JSON, not an object, or does not
            match the CarPayload schema
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise MalformedInput(f"Body is not valid JSON: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise MalformedInput(f"Expected a JSON object, got {type(data).__name__}")

    normalized = {str(key).lower(): value for key, value in data.items()}
    try:
        return CarPayload.model_validate(normalized)
    except ValidationError as e:
        raise MalformedInput(str(e)) from e
