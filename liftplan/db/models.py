"""Database models for preferences, exercises, workouts and sessions."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, Float, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

WORKOUT_TYPE_AUTO = "auto_generated"
WORKOUT_TYPE_USER = "user_created"

SESSION_COMPLETED = "completed"
SESSION_IN_PROGRESS = "in_progress"
SESSION_ABANDONED = "abandoned"


class UserPreferencesRecord(Base):
    """Workout preferences captured by the survey / edit-preferences form."""

    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(50), unique=True, nullable=False)
    goal = Column(String(50))  # lose_weight, gain_muscle, gain_strength, maintain_muscle
    experience_level = Column(String(50))  # novice, experienced, advanced
    workouts_per_week = Column(Integer)
    workout_split = Column(String(100))  # index, archetype label or split style
    sets_per_exercise = Column(Integer)
    rest_time = Column(Integer)  # seconds
    gender_tier = Column(String(20))  # male, female, senior
    survey_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<UserPreferencesRecord(user_id={self.user_id}, goal={self.goal}, days={self.workouts_per_week})>"


class ExerciseRecord(Base):
    """Exercise catalog entry."""

    __tablename__ = "exercises"

    exercise_id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    body_part = Column(String(100))
    target = Column(String(100))  # primary target muscle, e.g. "pectorals"
    equipment = Column(String(100))

    def __repr__(self):
        return f"<ExerciseRecord(exercise_id={self.exercise_id}, name={self.name})>"


class Workout(Base):
    """A single training day, either generated or built by the user."""

    __tablename__ = "workouts"

    workout_id = Column(Integer, primary_key=True)
    user_id = Column(String(50), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    workout_type = Column(String(30), nullable=False, default=WORKOUT_TYPE_USER)
    created_at = Column(DateTime, default=datetime.utcnow)

    sets = relationship(
        "WorkoutSet",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutSet.set_order",
    )

    def __repr__(self):
        return f"<Workout(workout_id={self.workout_id}, title={self.title}, type={self.workout_type})>"


class WorkoutSet(Base):
    """One planned set inside a workout."""

    __tablename__ = "workout_sets"

    workout_set_id = Column(Integer, primary_key=True)
    workout_id = Column(Integer, ForeignKey("workouts.workout_id", ondelete="CASCADE"), nullable=False)
    exercise_id = Column(String(50), nullable=False)
    exercise_name = Column(String(255))  # denormalized for display
    planned_reps = Column(Integer)
    weight = Column(Float)  # plans never prescribe absolute load
    rest_time = Column(Integer)  # seconds
    set_order = Column(Integer, nullable=False)  # 1-based, flat across the workout

    workout = relationship("Workout", back_populates="sets")

    __table_args__ = (Index("ix_workout_sets_workout_order", "workout_id", "set_order"),)

    def __repr__(self):
        return f"<WorkoutSet(workout_id={self.workout_id}, exercise={self.exercise_name}, order={self.set_order})>"


class TrainingSession(Base):
    """A workout attempt. Written by the session tracker, read by the aggregator."""

    __tablename__ = "sessions"

    session_id = Column(Integer, primary_key=True)
    user_id = Column(String(50), nullable=False, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.workout_id", ondelete="SET NULL"), nullable=True)
    status = Column(String(20), nullable=False, default=SESSION_IN_PROGRESS)
    start_time = Column(DateTime, nullable=False)
    duration = Column(Integer)  # seconds

    def __repr__(self):
        return f"<TrainingSession(session_id={self.session_id}, status={self.status}, start={self.start_time})>"
