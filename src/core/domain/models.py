"""Domain models (Pydantic v2).

`Conversion` is the record of one numeral going through the session: what the
user typed, the bases involved and the canonical value in between. The CLI
renders it as text, JSON or a table.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.base import U64_MAX, Base


class Conversion(BaseModel):
    """Result of converting a numeral from one base to another."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(
        ...,
        description="Numeral exactly as it was given.",
    )
    input_base: Base = Field(
        ...,
        description="Base used to read `source`.",
    )
    output_base: Base = Field(
        ...,
        description="Base used to render `output`.",
    )
    value: int = Field(
        ...,
        ge=0,
        le=U64_MAX,
        description="Canonical unsigned 64-bit value.",
    )
    output: str = Field(
        ...,
        min_length=1,
        description="`value` formatted in `output_base`.",
    )

    def in_base(self, base: Base) -> str:
        """Render the same value in any other base."""

        return base.format_value(self.value)
