"""Request/response schemas for roles."""

from pydantic import BaseModel, ConfigDict, Field


class RoleRead(BaseModel):
    """Role as returned on the wire."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    friendly_name: str = Field(..., alias="friendlyName")


class RoleCreate(BaseModel):
    """Body for POST /roles."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=64, description="Machine key, e.g. ROLE_USER")
    friendly_name: str = Field(
        ...,
        alias="friendlyName",
        min_length=1,
        max_length=128,
        description="Display label, e.g. User",
    )


class RoleRef(BaseModel):
    """
    Role reference inside a user payload.

    Resolved by id when present, otherwise by name. friendlyName is accepted
    so a role object read from the API can be sent back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    name: str | None = None
    friendly_name: str | None = Field(default=None, alias="friendlyName")
