# app/adapters/outbound/persistence/models/user_model.py

"""
User model.

This module defines the ORM model for the people managed by the system.
Group membership is kept in the user_groups association table
(see user_group_model.UserGroup).
"""

from sqlalchemy import (
    Column,
    Boolean,
    String,
    DateTime,
    Integer,
)
from sqlalchemy.orm import relationship

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utcnow


class User(Base):
    """
    User managed by the system.

    Attributes:
        id: Surrogate integer identifier
        first_name: First name
        last_name: Last name
        email: Email address (unique)
        phone_number: Optional phone number
        created_date: Creation timestamp
        modified_date: Timestamp of the last update, None until the first update
        is_active: Indicates whether the user is active
        user_groups: Association rows linking the user to its groups
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(256), unique=True, nullable=False, index=True)
    phone_number = Column(String(20), nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    modified_date = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Rows are removed by the database (ON DELETE CASCADE) when the user goes away
    user_groups = relationship(
        "UserGroup",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="UserGroup.group_id",
    )

    def __repr__(self) -> str:
        """String representation of the User object."""
        return f"<User(email={self.email}, active={self.is_active})>"
