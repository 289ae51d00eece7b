from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime
from typing import Optional
from uuid import UUID


class UserCreate(BaseModel):
    """Schema for registering a profile under the caller's session"""

    name: str = Field(..., min_length=1)
    email: EmailStr


class UserResponse(BaseModel):
    """Schema for a registered profile"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: EmailStr
    created_at: Optional[datetime] = None
