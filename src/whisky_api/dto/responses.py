"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from whisky_api.entities import WhiskyEntity


class WhiskyResponse(BaseModel):
    """Response DTO for a single whisky.

    Field names are part of the wire contract: id, name, origin.
    """

    id: int | None = Field(..., description="Identifier assigned by the store")
    name: str | None = Field(..., description="Whisky name")
    origin: str | None = Field(..., description="Where the whisky comes from")

    @classmethod
    def from_entity(cls, whisky: WhiskyEntity) -> "WhiskyResponse":
        return cls(id=whisky.id, name=whisky.name, origin=whisky.origin)
