"""Required-field validation for inbound Car payloads."""

from cars_api.dto import CarPayload

# Checked in this order; the first failure wins.
REQUIRED_FIELDS = (
    ("manufacture", "Manufacture required"),
    ("year", "Year required"),
    ("model", "Model required"),
    ("color", "Color required"),
)


def validate(payload: CarPayload | None) -> tuple[bool, str | None]:
    """Check that a payload carries all four string fields.

    Args:
        payload: Deserialized body, or None for a JSON ``null`` body

    Returns:
        (True, None) when valid, otherwise (False, reason) for the first
        missing or whitespace-only field
    """
    if payload is None:
        return False, "Body required"

    for field_name, message in REQUIRED_FIELDS:
        value = getattr(payload, field_name)
        if value is None or not value.strip():
            return False, message

    return True, None
