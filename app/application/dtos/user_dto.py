# app/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines the Pydantic DTOs for validation and serialization
of user data: creation, update, output and count reports.
"""

from typing import List, Optional
from pydantic import EmailStr, field_validator, Field

from app.application.dtos.base_dto import CustomBaseModel
from app.shared.utils.datetime_utils import UtcDatetime
from app.application.dtos.group_dto import GroupOutput
from app.shared.utils.input_validation import InputValidator


class UserBase(CustomBaseModel):
    """
    Base schema for user input.

    Holds the attributes shared by creation and update.
    """
    first_name: str = Field(..., description="User's first name.")
    last_name: str = Field(..., description="User's last name.")
    email: EmailStr = Field(..., description="User's email. Must be a valid, unique email.")
    phone_number: Optional[str] = Field(None, description="Optional phone number.")
    group_ids: List[int] = Field(default_factory=list, description="IDs of the groups the user belongs to.")

    @field_validator("first_name", "last_name")
    def validate_names(cls, v):
        """
        Reject blank or oversized names.

        Raises:
            ValueError: If the name is invalid
        """
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v.strip()

    @field_validator("email")
    def validate_email_format(cls, v):
        """
        Validate email format and length.

        Raises:
            ValueError: If the email is invalid
        """
        v = v.strip()
        is_valid, error_msg = InputValidator.validate_email(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("phone_number")
    def validate_phone(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        is_valid, error_msg = InputValidator.validate_phone(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("group_ids")
    def validate_group_ids(cls, v):
        is_valid, error_msg = InputValidator.validate_ids(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserCreate(UserBase):
    """
    Schema for creating a new user.
    New users are always active.
    """


class UserUpdate(UserBase):
    """
    Schema for updating a user.

    Every field is overwritten and `group_ids` replaces the whole membership.
    """
    is_active: bool = Field(True, description="Defines whether the user is active.")


class UserOutput(CustomBaseModel):
    """
    Schema for returning user data, with groups and their permissions.
    """
    id: int = Field(..., description="Unique user identifier.")
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    created_date: UtcDatetime = Field(..., description="Date and time the user was created.")
    modified_date: Optional[UtcDatetime] = Field(None, description="Date and time of the last update.")
    is_active: bool = Field(..., description="Indicates whether the user is active.")
    groups: List[GroupOutput] = Field(default_factory=list)


class UserCountByGroupOutput(CustomBaseModel):
    """
    Number of users in one group.
    """
    group_id: int
    group_name: str
    user_count: int
