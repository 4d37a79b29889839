"""Pydantic schemas for the login and signup forms."""
from __future__ import annotations
from pydantic import BaseModel, ValidationInfo, field_validator

from eventhub.schemas.forms import is_valid_email, require

MIN_PASSWORD_LENGTH = 6


class LoginForm(BaseModel):
    email: str = ""
    password: str = ""

    model_config = {"validate_default": True}

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str) -> str:
        require(v, "Email is required")
        if not is_valid_email(v):
            raise ValueError("Email is invalid")
        return v

    @field_validator("password")
    @classmethod
    def _password_length(cls, v: str) -> str:
        require(v, "Password is required")
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v


class SignupForm(LoginForm):
    name: str = ""
    confirm_password: str = ""

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        return require(v.strip(), "Name is required")

    @field_validator("confirm_password")
    @classmethod
    def _passwords_match(cls, v: str, info: ValidationInfo) -> str:
        # password is missing from info.data when it failed its own check
        password = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("Passwords do not match")
        return v
