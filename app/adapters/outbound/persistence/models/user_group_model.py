# app/adapters/outbound/persistence/models/user_group_model.py

from sqlalchemy import Column, ForeignKey, Integer, DateTime
from sqlalchemy.orm import relationship

from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utcnow

########################################################################
# Many-to-many association between users and groups
########################################################################


class UserGroup(Base):
    """Membership of a user in a group, with the date the user joined."""
    __tablename__ = "user_groups"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True, index=True)
    joined_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    user = relationship("User", back_populates="user_groups")
    group = relationship("Group", back_populates="user_groups")

    def __repr__(self) -> str:
        return f"<UserGroup(user_id={self.user_id}, group_id={self.group_id})>"
