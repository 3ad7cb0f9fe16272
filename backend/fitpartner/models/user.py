from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, ForeignKey, Numeric, func, Integer
from fitpartner.db import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    auth_id: Mapped[int] = mapped_column(
        ForeignKey("auth_identities.id", ondelete="CASCADE"), unique=True, index=True, nullable=False
    )
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    username: Mapped[str] = mapped_column(String(60), unique=True, nullable=False)
    height: Mapped[float | None] = mapped_column(Numeric(5, 1), nullable=True)
    weight: Mapped[float | None] = mapped_column(Numeric(5, 1), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    identity = relationship("AuthIdentity", back_populates="profile")
    workouts = relationship("DailyWorkout", back_populates="user", cascade="all, delete-orphan")
