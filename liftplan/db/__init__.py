"""Database module for the liftplan engine."""

from .database import Database, get_db, close_db
from .models import (
    UserPreferencesRecord,
    ExerciseRecord,
    Workout,
    WorkoutSet,
    TrainingSession,
    WORKOUT_TYPE_AUTO,
    WORKOUT_TYPE_USER,
)
from .gateway import PersistenceGateway, PreferencesStore

__all__ = [
    "Database",
    "get_db",
    "close_db",
    "UserPreferencesRecord",
    "ExerciseRecord",
    "Workout",
    "WorkoutSet",
    "TrainingSession",
    "WORKOUT_TYPE_AUTO",
    "WORKOUT_TYPE_USER",
    "PersistenceGateway",
    "PreferencesStore",
]
