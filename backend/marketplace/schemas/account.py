"""Account Schemas — signup, login and session views.

Invariants:
    - SignupRequest.password must equal confirm_password
    - SignupRequest.password fits the bcrypt input limit (UTF-8 bytes, not chars)
    - Responses never include secrets or hashes

Design Decisions:
    - EmailStr validates shape at the edge; uniqueness is the store's job
    - university is one concrete campus; "All Universities" is a filter, not a home
"""

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from marketplace.core.account import AdminIdentity
from marketplace.core.credentials import MAX_SECRET_BYTES, secret_fits
from marketplace.core.domain_types import University


class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=MAX_SECRET_BYTES)
    confirm_password: str
    postal_code: str = Field(min_length=3, max_length=12)
    university: University

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, v: str) -> str:
        if not secret_fits(v):
            raise ValueError(
                f"password must be at most {MAX_SECRET_BYTES} bytes in UTF-8",
            )
        return v

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("password and confirm_password do not match")
        return self


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=128)


class UserResponse(BaseModel):
    id: str
    email: str
    postal_code: str
    university: str
    created_at: str


class AdminLoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=128)


class AdminResponse(BaseModel):
    id: str
    username: str
    token: str

    @classmethod
    def from_identity(cls, admin: AdminIdentity) -> "AdminResponse":
        return cls(**admin.to_record())


class AdminProfile(BaseModel):
    """Current admin without the session token."""
    id: str
    username: str
