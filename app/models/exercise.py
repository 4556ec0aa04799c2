"""Exercise model - the catalog the program generator draws from."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Exercise(Base):
    """Catalog exercise.

    Ids ascend in insertion order; the catalog is always read ordered by id so
    program generation is reproducible.
    """

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)

    type: Mapped[str] = mapped_column(String(50), nullable=False, default="strength")  # strength, cardio, flexibility
    muscle_group: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    equipment: Mapped[str | None] = mapped_column(String(50), nullable=True)  # bodyweight, dumbbells, barbell, ...
    location: Mapped[str | None] = mapped_column(String(50), nullable=True)  # home, gym, outdoor
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False, default="beginner")
    goal: Mapped[str | None] = mapped_column(String(50), nullable=True)  # optional goal tag
    warnings: Mapped[str | None] = mapped_column(Text, nullable=True)  # matched by excluded keywords
    calories_per_min: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    program_entries: Mapped[list["ProgramExercise"]] = relationship(
        "ProgramExercise", back_populates="exercise", cascade="all, delete-orphan"
    )
