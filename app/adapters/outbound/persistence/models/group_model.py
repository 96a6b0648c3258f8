# app/adapters/outbound/persistence/models/group_model.py

"""
Group model.

A group bundles permissions and is assigned to users
through the user_groups association table.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utcnow


class Group(Base):
    """
    Group of permissions.

    Attributes:
        id: Unique group identifier
        name: Group name (ex: "Admin", "Manager")
        description: Optional free text
        created_date: Creation timestamp
        user_groups: Membership rows of this group
        group_permissions: Grant rows linking the group to its permissions
    """
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    user_groups = relationship(
        "UserGroup",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    group_permissions = relationship(
        "GroupPermission",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="GroupPermission.permission_id",
    )

    def __repr__(self) -> str:
        """String representation of the Group object."""
        return f"<Group(name={self.name})>"

    @property
    def permissions(self):
        """Permissions granted to the group, in permission id order."""
        return [grant.permission for grant in self.group_permissions]
