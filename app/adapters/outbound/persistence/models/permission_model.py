# app/adapters/outbound/persistence/models/permission_model.py

"""
Permission model for access control.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utcnow


class Permission(Base):
    """
    Permission that can be granted to groups.

    Attributes:
        id: Unique permission identifier
        name: Permission name (ex: "Create", "ManageUsers")
        description: Optional free text
        created_date: Creation timestamp
        group_permissions: Grant rows referencing this permission
    """
    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    group_permissions = relationship(
        "GroupPermission",
        back_populates="permission",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation of the Permission object."""
        return f"<Permission(name={self.name})>"
