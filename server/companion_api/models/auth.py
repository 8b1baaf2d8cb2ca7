"""Authentication request and response models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_PASSWORD_LENGTH = 6


class SignInRequest(BaseModel):
    email: str
    password: str


class SignUpRequest(BaseModel):
    """Registration form, validated the way the sign-up page validates it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    email: str
    password: str
    confirm_password: str = Field(validation_alias="confirmPassword")
    agree_to_terms: bool = Field(default=False, validation_alias="agreeToTerms")
    agree_to_privacy: bool = Field(default=False, validation_alias="agreeToPrivacy")

    @model_validator(mode="after")
    def check_form(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match!")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 6 characters long!")
        if not (self.agree_to_terms and self.agree_to_privacy):
            raise ValueError("Please agree to the terms and privacy policy!")
        return self


class FederatedSignInRequest(BaseModel):
    id_token: str
    provider_id: str = "google.com"


class RestoreSessionRequest(BaseModel):
    id_token: str


class IdentityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    provider_id: str = "password"


class SessionStatus(BaseModel):
    ready: bool
    authenticated: bool
    user: Optional[IdentityOut] = None
