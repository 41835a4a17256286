"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class CreateWhiskyRequest(BaseModel):
    """Request DTO for creating a whisky.

    Unknown properties and wrongly typed fields make the body malformed.
    A client-supplied id is accepted by the decoder and then discarded
    by the handler, the store assigns identity.
    """

    model_config = ConfigDict(extra="forbid")

    id: int | None = Field(None, description="Ignored on create")
    name: str | None = Field(None, description="Whisky name")
    origin: str | None = Field(None, description="Where the whisky comes from")


class UpdateWhiskyRequest(BaseModel):
    """Request DTO for updating a whisky.

    Only name and origin are read; any other key (including id) is ignored.
    Use ``model_fields_set`` to tell a missing key from an explicit null.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(None, description="New whisky name")
    origin: str | None = Field(None, description="New whisky origin")
