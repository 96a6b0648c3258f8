# app/adapters/outbound/persistence/models/group_permission_model.py

from sqlalchemy import Column, ForeignKey, Integer, DateTime
from sqlalchemy.orm import relationship

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utcnow

########################################################################
# Many-to-many association between groups and permissions
########################################################################


class GroupPermission(Base):
    """Grant of a permission to a group, with the date it was granted."""
    __tablename__ = "group_permissions"

    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    permission_id = Column(Integer, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True, index=True)
    granted_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    group = relationship("Group", back_populates="group_permissions")
    permission = relationship("Permission", back_populates="group_permissions")

    def __repr__(self) -> str:
        return f"<GroupPermission(group_id={self.group_id}, permission_id={self.permission_id})>"
