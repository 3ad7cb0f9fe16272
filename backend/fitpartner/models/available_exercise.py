from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String
from fitpartner.db import Base

class AvailableExercise(Base):
    """Exercise catalog used by workout generation. Read-only at runtime."""
    __tablename__ = "available_exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    main_muscle_group: Mapped[str] = mapped_column(String(60), index=True, nullable=False)
    primary_equipment: Mapped[str | None] = mapped_column(String(60), nullable=True)
    grip_style: Mapped[str | None] = mapped_column(String(60), nullable=True)
