"""
Session schemas.
"""
from pydantic import BaseModel

ADMIN_ROLE = "admin"


class SessionUser(BaseModel):
    """Authenticated user as carried by the session token."""
    id: str
    role: str


class Session(BaseModel):
    """Resolved caller session."""
    user: SessionUser

    @property
    def is_admin(self) -> bool:
        return self.user.role == ADMIN_ROLE
