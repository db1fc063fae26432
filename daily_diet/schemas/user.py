from pydantic import BaseModel, StrictStr
from typing import List, Optional
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    name: StrictStr


class UserRead(BaseModel):
    id: UUID
    session_id: str
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserListResponse(BaseModel):
    users: List[UserRead] = []


class UserResponse(BaseModel):
    user: Optional[UserRead] = None
