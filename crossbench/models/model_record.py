"""Raw input record schema.

Only the identity fields are validated strictly; benchmark, pricing and
freshness fields stay as extra attributes so that one malformed numeric field
never rejects the whole record.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawModelRecord(BaseModel):
    """A single raw entry handed over by a source."""

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    organization: str | None = Field(default="Unknown")
    modalities: list[str] | None = Field(default=None)

    @field_validator("organization")
    @classmethod
    def default_organization(cls, value: str | None) -> str:
        return value or "Unknown"

    def raw(self, key: str) -> Any:
        """Return an extra field as received, or None when absent."""
        return (self.model_extra or {}).get(key)

    def get_float(self, key: str) -> float | None:
        """Read a numeric field encoded as a number or a numeric string.

        Returns None for absent, null, boolean, non-finite, out-of-range or
        unparsable values.
        """
        value = self.raw(key)
        if value is None or isinstance(value, bool):
            return None
        if not isinstance(value, (int, float, str)):
            return None
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (OverflowError, ValueError):
            return None
        if not math.isfinite(number):
            return None
        return number

    def has(self, key: str) -> bool:
        """True when the field is present and not null."""
        return self.raw(key) is not None
