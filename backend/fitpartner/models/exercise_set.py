from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Numeric, Boolean, UniqueConstraint
from fitpartner.db import Base

class ExerciseSet(Base):
    __tablename__ = "exercise_sets"
    __table_args__ = (
        UniqueConstraint("exercise_id", "user_id", "set_number", name="uq_exercise_sets_user_number"),
    )
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), index=True
    )
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    exercise = relationship("WorkoutExercise", back_populates="exercise_sets")
