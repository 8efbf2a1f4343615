"""
Authentication schemas
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from .users import UserResponse


class AuthRequest(BaseModel):
    """Login request body"""
    email: EmailStr = Field(..., description="Email")
    password: str = Field(..., min_length=6, description="Password")


class RegisterRequest(AuthRequest):
    """Registration request body"""
    name: Optional[str] = Field(None, max_length=255, description="Display name")


class RefreshRequest(BaseModel):
    """Token refresh request (falls back to the refresh token cookie)"""
    refresh_token: Optional[str] = Field(None, description="Refresh token")


class AuthResponse(BaseModel):
    """Register, login and refresh response"""
    success: bool = True
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token expiration in seconds")
    user: UserResponse
