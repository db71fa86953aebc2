"""Parser configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .structured_data import SortedStructuredData, StructuredData

UnescapePolicy = Literal["rfc", "preserve"]


class ParserConfig(BaseModel):
    """Knobs shared by the RFC 5424 and RFC 3164 parsers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    unescape: UnescapePolicy = Field(
        default="rfc",
        description=(
            "How backslashes inside quoted SD values are decoded. 'rfc' drops the "
            'backslash in front of \\", \\\\ and \\] and keeps any other backslash; '
            "'preserve' returns the value exactly as it appeared on the wire."
        ),
    )
    structured_data: Literal["ordered", "sorted"] = Field(
        default="ordered",
        description="Backing container for parsed structured data.",
    )
    max_line_length: int | None = Field(
        default=None,
        ge=1,
        description="Reject longer lines before scanning them. None disables the check.",
    )

    def new_structured_data(self) -> StructuredData:
        """Create an empty container of the configured kind."""
        if self.structured_data == "sorted":
            return SortedStructuredData()
        return StructuredData()


DEFAULT_CONFIG = ParserConfig()
