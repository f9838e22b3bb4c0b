from pydantic import BaseModel, EmailStr, model_validator
from typing import Optional


class MagicLinkRequest(BaseModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    name: Optional[str] = None

    @model_validator(mode="after")
    def check_contact(self):
        if not self.email and not self.phone:
            raise ValueError("Either email or phone is required")
        return self


class MagicLinkResponse(BaseModel):
    email: str
    message: str


class VerifyOtpRequest(BaseModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    token: str

    @model_validator(mode="after")
    def check_contact(self):
        if not self.email and not self.phone:
            raise ValueError("Either email or phone is required")
        return self


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class Session(BaseModel):
    """The authenticated caller, passed explicitly into every core operation."""

    user_id: str
    email: Optional[str] = None
    access_token: Optional[str] = None
    user_metadata: dict = {}
