"""Pydantic models for conversion settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ConversionOptions(BaseModel):
    """Settings shared by the mapper, the parser and the CLI."""

    parser: Literal["html.parser", "lxml"] = Field(
        "html.parser", description="BeautifulSoup tree builder used to parse markup."
    )
    escape_text: bool = Field(
        True,
        description=(
            "Re-escape text nodes before wrapping them in literal tags. "
            "When false the decoded text is kept as-is."
        ),
    )

    model_config = ConfigDict(extra="forbid", frozen=True)
