from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, DateTime, Enum as SAEnum, func
from fitpartner.db import Base

class PartnerStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"

class WorkoutPartner(Base):
    __tablename__ = "workout_partners"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    partner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    status: Mapped[PartnerStatus] = mapped_column(
        SAEnum(PartnerStatus, name="partner_status"),
        nullable=False,
        server_default=PartnerStatus.pending.value,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    partner = relationship("User", foreign_keys=[partner_id])
