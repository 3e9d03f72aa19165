"""Auto-property backing-field names, as emitted by the C# compiler."""

import re
from typing import Optional

__all__ = ["to_backing_field", "from_backing_field"]

_BACKING_FIELD_RE = re.compile(r"^<(?P<prop>[^<>]+)>k__BackingField$")


def to_backing_field(property_name: str) -> str:
    """
    Backing-field name of an auto-property.

    to_backing_field("Health") → "<Health>k__BackingField"
    """
    return f"<{property_name}>k__BackingField"


def from_backing_field(field_name: str) -> Optional[str]:
    """Property name behind a backing field, or None for any other field name."""
    m = _BACKING_FIELD_RE.match(field_name)
    return m.group("prop") if m else None
