"""User Schemas: create, update and response bodies for /api/v1/users."""

from pydantic import BaseModel, ConfigDict

from orders_api.schemas.common import PartialUpdate


class UserCreate(BaseModel):
    """User creation body. id is always server-assigned."""
    username: str
    email: str


class UserUpdate(PartialUpdate):
    """User update body: any subset of username/email."""
    username: str | None = None
    email: str | None = None


class UserResponse(BaseModel):
    """User as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
