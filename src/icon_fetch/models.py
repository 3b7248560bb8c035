"""Data models shared by the core, the stores and the front ends.

Field aliases keep the camelCase JSON layout (``iconUrl``, ``brandIdentity``...)
so persisted history and analysis payloads stay compatible with the browser
storage format and the analysis response schema.
"""

import time

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class LookupRecord(BaseModel):
    """A single successful lookup: canonical domain plus its icon URL."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    domain: str = Field(description="Canonical lowercase domain")
    icon_url: str = Field(alias="iconUrl", description="Favicon URL derived from the domain")
    timestamp: int = Field(description="Creation time in milliseconds since epoch")

    @classmethod
    def create(cls, domain: str, icon_url: str) -> "LookupRecord":
        """
        Create a record stamped with the current time.

        Args:
            domain: Canonical domain
            icon_url: Icon URL built for the domain

        Returns:
            New lookup record
        """
        return cls(domain=domain, icon_url=icon_url, timestamp=int(time.time() * 1000))

    def to_dict(self) -> dict:
        """Serialize to the camelCase storage layout."""
        return self.model_dump(by_alias=True)


class BrandAnalysis(BaseModel):
    """AI-inferred visual brand identity of a domain. Never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    colors: list[str] = Field(description="Hex colors, most relevant first")
    style: str = Field(description="Design style label")
    brand_identity: str = Field(alias="brandIdentity")
    suggested_improvements: str = Field(alias="suggestedImprovements")

    def to_dict(self) -> dict:
        """Serialize using the response schema field names."""
        return self.model_dump(by_alias=True)


HISTORY_ADAPTER = TypeAdapter(list[LookupRecord])
