from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    event_organizer = "event_organizer"
    administrator = "administrator"


def _reject_null(value, info):
    # Optional in a partial update means "may be omitted", not "may be cleared"
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


# ---------------------------------------------------------------- auth

class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class RefreshTokenRequest(BaseModel):
    refresh_token: str

class LoginRequest(BaseModel):
    """Schema for user login request."""
    email: EmailStr
    password: str

# ---------------------------------------------------------------- users

class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str
    role: UserRole = UserRole.event_organizer
    subscription_status: Optional[str] = None
    upload_rate_limit: Optional[int] = Field(default=None, ge=0)

class UserRegister(BaseModel):
    """Public sign-up; the role is always event organizer."""
    username: str = Field(min_length=1)
    email: EmailStr
    password: str

class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    subscription_status: Optional[str] = None
    is_active: Optional[bool] = None
    upload_rate_limit: Optional[int] = Field(default=None, ge=0)

    @field_validator("username", "email", "is_active", "upload_rate_limit")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class UserOut(BaseModel):
    id: int
    username: str
    email: EmailStr
    role: UserRole
    subscription_status: Optional[str]
    is_active: bool
    upload_rate_limit: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class LoginResponse(TokenResponse):
    user: UserOut

# ---------------------------------------------------------------- themes

class EventThemeCreate(BaseModel):
    name: str = Field(min_length=1)
    is_standard: bool = False
    image_url: Optional[str] = None

class EventThemeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    is_standard: Optional[bool] = None
    image_url: Optional[str] = None

    @field_validator("name", "is_standard")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class EventThemeOut(BaseModel):
    id: int
    name: str
    is_standard: bool
    image_url: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True

# ---------------------------------------------------------------- events

class EventCreate(BaseModel):
    name: str = Field(min_length=1)
    topic: Optional[str] = None
    text_color: Optional[str] = None
    theme_id: Optional[int] = None
    custom_theme_image_url: Optional[str] = None
    event_date: datetime
    event_time: Optional[str] = None
    address: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    thank_you_message: Optional[str] = None

class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    topic: Optional[str] = None
    text_color: Optional[str] = None
    theme_id: Optional[int] = None
    custom_theme_image_url: Optional[str] = None
    event_date: Optional[datetime] = None
    event_time: Optional[str] = None
    address: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    thank_you_message: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "event_date", "is_active")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class EventOut(BaseModel):
    id: int
    organizer_id: int
    name: str
    topic: Optional[str]
    text_color: Optional[str]
    theme_id: Optional[int]
    custom_theme_image_url: Optional[str]
    event_date: datetime
    event_time: Optional[str]
    address: Optional[str]
    postcode: Optional[str]
    city: Optional[str]
    thank_you_message: Optional[str]
    qr_code_token: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

# ---------------------------------------------------------------- programs

class EventProgramCreate(BaseModel):
    event_id: int
    topic: str = Field(min_length=1)
    time: str = Field(min_length=1)
    order_index: int

class EventProgramUpdate(BaseModel):
    topic: Optional[str] = Field(default=None, min_length=1)
    time: Optional[str] = Field(default=None, min_length=1)
    order_index: Optional[int] = None

    @field_validator("topic", "time", "order_index")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class ReorderProgramsRequest(BaseModel):
    program_ids: List[int]

class EventProgramOut(BaseModel):
    id: int
    event_id: int
    topic: str
    time: str
    order_index: int
    created_at: datetime

    class Config:
        from_attributes = True

# ---------------------------------------------------------------- contacts

class ContactPersonCreate(BaseModel):
    event_id: int
    name: str = Field(min_length=1)
    phone_number: Optional[str] = None
    email: Optional[EmailStr] = None
    is_contact_person: bool = False

class ContactPersonUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    phone_number: Optional[str] = None
    email: Optional[EmailStr] = None
    is_contact_person: Optional[bool] = None

    @field_validator("name", "is_contact_person")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class ContactPersonOut(BaseModel):
    id: int
    event_id: int
    name: str
    phone_number: Optional[str]
    email: Optional[str]
    is_contact_person: bool
    created_at: datetime

    class Config:
        from_attributes = True

# ---------------------------------------------------------------- uploads

class GuestUploadFile(BaseModel):
    """File metadata a guest submits; the binary already lives in external storage."""
    guest_name: str = Field(min_length=1)
    file_url: str = Field(min_length=1)
    file_name: str = Field(min_length=1)
    file_size: int = Field(ge=0)
    mime_type: str = Field(min_length=1)

class GuestUploadCreate(GuestUploadFile):
    event_id: int
    upload_ip: Optional[str] = None

class GuestUploadUpdate(BaseModel):
    is_favorited: Optional[bool] = None

    @field_validator("is_favorited")
    @classmethod
    def reject_null(cls, value, info):
        return _reject_null(value, info)

class GuestUploadOut(BaseModel):
    id: int
    event_id: int
    guest_name: str
    file_url: str
    file_name: str
    file_size: int
    mime_type: str
    is_favorited: bool
    upload_ip: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True

class UploadDownload(BaseModel):
    file_url: str
    file_name: str

class RateLimitStatus(BaseModel):
    allowed: bool
    remaining: int

# ---------------------------------------------------------------- misc

class DeleteResult(BaseModel):
    success: bool = True
