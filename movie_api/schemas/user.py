from datetime import datetime
from enum import Enum
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")
PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9\s\-()]{6,19}$")


class Role(str, Enum):
    user = "user"
    admin = "admin"


class _UserFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("email", check_fields=False)
    @classmethod
    def normalize_email(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value else value


class UserRegister(_UserFields):
    name: str = Field(..., min_length=2, max_length=50, description="Full name.")
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError(
                "Password must contain at least one lowercase letter, "
                "one uppercase letter, and one number"
            )
        return value


class UserLogin(_UserFields):
    email: EmailStr
    password: str = Field(..., min_length=1, description="Password is required.")


class UserUpdate(_UserFields):
    name: Optional[str] = Field(None, min_length=2, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)
    avatar: Optional[str] = None
    dateOfBirth: Optional[datetime] = None

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not PHONE_PATTERN.match(value):
            raise ValueError("Please provide a valid phone number")
        return value

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)
