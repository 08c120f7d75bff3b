from datetime import datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["owner", "admin", "publisher", "editor", "viewer"]
UserStatus = Literal["active", "disabled"]

# --- User & Auth ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    display_name: str
    roles: list[RoleType] = Field(default_factory=list)
    status: UserStatus = "active"
    created_at: datetime = Field(default_factory=datetime.utcnow)

class Session(BaseModel):
    id: str  # Token or Session ID
    user_id: UUID
    expires_at: datetime
    created_at: datetime = Field(default_factory=datetime.utcnow)
