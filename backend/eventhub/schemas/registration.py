"""Pydantic schemas for Registrations."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, field_validator

from eventhub.schemas.forms import is_valid_email, require


class RegistrationCreate(BaseModel):
    """Optional details for a registration; blanks fall back to the anonymous defaults."""

    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None


class RegistrationForm(BaseModel):
    """Form for registering another person for an event."""

    name: str = ""
    email: str = ""
    location: str = ""

    model_config = {"str_strip_whitespace": True, "validate_default": True}

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        return require(v, "Name is required")

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str) -> str:
        require(v, "Email is required")
        if not is_valid_email(v):
            raise ValueError("Please enter a valid email address")
        return v

    @field_validator("location")
    @classmethod
    def _location_required(cls, v: str) -> str:
        return require(v, "Location is required")
