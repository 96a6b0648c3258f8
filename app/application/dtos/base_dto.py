# app/application/dtos/base_dto.py

"""
Base class for the application's DTOs.

This module defines CustomBaseModel, which extends Pydantic's BaseModel
with the configuration shared by every DTO of the API.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Custom base model for all the application's DTOs.

    Fields are declared in snake_case and exposed in camelCase
    (firstName, groupIds, ...). Input accepts both spellings and
    ORM objects can be read through attribute access.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
