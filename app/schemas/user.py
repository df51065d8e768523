"""Request/response schemas for application users (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.role import RoleRead, RoleRef

# Fields copied by full-replace updates and merged one by one by PATCH.
MUTABLE_USER_FIELDS: tuple[str, ...] = (
    "email",
    "first_name",
    "last_name",
    "password",
    "oauth2_provider",
    "oauth2_id",
)


class UserPayload(BaseModel):
    """Full user object for POST (create) and PUT (replace). roles is optional."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str | None = Field(default=None, alias="firstName", max_length=255)
    last_name: str | None = Field(default=None, alias="lastName", max_length=255)
    email: str = Field(..., min_length=1, max_length=320)
    password: str = Field(..., min_length=1, max_length=255)
    oauth2_provider: str | None = Field(default=None, alias="oauth2Provider", max_length=64)
    oauth2_id: str | None = Field(default=None, alias="oauth2Id", max_length=255)
    roles: list[RoleRef] | None = Field(
        default=None,
        description="Omitted, null or empty: the default role is applied on create.",
    )


class UserPatch(BaseModel):
    """Partial user object for PATCH; null or missing fields leave the stored value as is."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str | None = Field(default=None, alias="firstName", max_length=255)
    last_name: str | None = Field(default=None, alias="lastName", max_length=255)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    password: str | None = Field(default=None, min_length=1, max_length=255)
    oauth2_provider: str | None = Field(default=None, alias="oauth2Provider", max_length=64)
    oauth2_id: str | None = Field(default=None, alias="oauth2Id", max_length=255)


class UserRead(BaseModel):
    """User as returned on the wire."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str
    password: str
    oauth2_provider: str | None = Field(default=None, alias="oauth2Provider")
    oauth2_id: str | None = Field(default=None, alias="oauth2Id")
    roles: list[RoleRead] = Field(default_factory=list)

    @field_validator("roles", mode="before")
    @classmethod
    def order_roles_by_name(cls, v: object) -> object:
        """Role-sets are unordered; emit them sorted by name for stable responses."""
        if isinstance(v, (set, frozenset)):
            return sorted(v, key=lambda role: getattr(role, "name", None) or "")
        return v
