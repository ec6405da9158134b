"""Schemas for the logged-in user exposed to handlers and templates."""

from pydantic import BaseModel, ConfigDict


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) resolved from the session record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    session_id: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
