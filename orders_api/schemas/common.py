"""Shared schema pieces."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement body for update/delete endpoints."""
    message: str


class PartialUpdate(BaseModel):
    """Base for PUT bodies: a field is updated only if the client sent it."""

    def changes(self) -> dict:
        """Fields explicitly present in the body; null counts as absent."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
