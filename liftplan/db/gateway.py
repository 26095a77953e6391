"""Persistence gateway used by the plan generator and activity aggregator."""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from .database import Database
from .models import (
    UserPreferencesRecord,
    Workout,
    WorkoutSet,
    TrainingSession,
    WORKOUT_TYPE_AUTO,
)
from ..planning.preferences import UserPreferences, Goal, ExperienceLevel, GenderTier

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Transactional access to workouts, sets and sessions.

    Writes go through an explicit transaction (``begin_transaction`` /
    ``commit`` / ``rollback`` or the ``transaction()`` context manager).
    Reads open their own short-lived session.
    """

    def __init__(self, db: Database):
        self.db = db
        self._session: Optional[Session] = None

    # -- transaction boundary -------------------------------------------------

    @property
    def in_transaction(self) -> bool:
        return self._session is not None

    def begin_transaction(self) -> None:
        if self._session is not None:
            raise RuntimeError("A transaction is already open on this gateway")
        self._session = self.db.SessionLocal()

    def commit(self) -> None:
        session = self._require_session()
        try:
            session.commit()
        finally:
            session.close()
            self._session = None

    def rollback(self) -> None:
        if self._session is None:
            return
        try:
            self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @contextmanager
    def transaction(self):
        """Commit on success, roll back everything on any exception."""
        self.begin_transaction()
        try:
            yield self
            self.commit()
        except Exception:
            self.rollback()
            raise

    def _require_session(self) -> Session:
        if self._session is None:
            raise RuntimeError("No open transaction; call begin_transaction() first")
        return self._session

    # -- writes -----------------------------------------------------------------

    def insert_workout(self, user_id: str, title: str, description: Optional[str] = None,
                       workout_type: str = WORKOUT_TYPE_AUTO,
                       created_at: Optional[datetime] = None) -> int:
        """Add a workout row inside the open transaction and return its id."""
        session = self._require_session()
        workout = Workout(
            user_id=user_id,
            title=title,
            description=description,
            workout_type=workout_type,
            created_at=created_at or datetime.utcnow(),
        )
        session.add(workout)
        session.flush()  # assigns workout_id
        return workout.workout_id

    def insert_workout_sets(self, rows: Iterable[Dict]) -> int:
        """Add workout set rows inside the open transaction."""
        session = self._require_session()
        sets = [WorkoutSet(**row) for row in rows]
        session.add_all(sets)
        session.flush()
        return len(sets)

    def delete_auto_generated_workouts(self, user_id: str) -> int:
        """
        Remove every auto-generated workout of a user together with its sets.

        Sessions are kept; those that pointed at a removed workout get
        ``workout_id = None``. User-created workouts are untouched.

        Returns:
            Number of workouts deleted
        """
        with self.db.get_session() as session:
            workouts = (
                session.query(Workout)
                .filter(Workout.user_id == user_id, Workout.workout_type == WORKOUT_TYPE_AUTO)
                .all()
            )
            if not workouts:
                logger.info(f"No auto-generated workouts to delete for user {user_id}")
                return 0

            workout_ids = [w.workout_id for w in workouts]
            detached = (
                session.query(TrainingSession)
                .filter(TrainingSession.workout_id.in_(workout_ids))
                .update({TrainingSession.workout_id: None}, synchronize_session=False)
            )
            for workout in workouts:
                session.delete(workout)  # cascades to workout_sets

        logger.info(f"Deleted {len(workout_ids)} auto-generated workouts for user {user_id} "
                    f"({detached} sessions detached)")
        return len(workout_ids)

    # -- reads ------------------------------------------------------------------

    def list_workouts(self, user_id: str, workout_type: Optional[str] = None) -> List[Workout]:
        with self.db.get_session() as session:
            query = session.query(Workout).filter(Workout.user_id == user_id)
            if workout_type:
                query = query.filter(Workout.workout_type == workout_type)
            return query.order_by(Workout.created_at, Workout.workout_id).all()

    def list_workout_sets(self, workout_ids: Iterable[int]) -> List[WorkoutSet]:
        """All sets of the given workouts in one query, ordered by workout then set_order."""
        ids = list(set(workout_ids))
        if not ids:
            return []
        with self.db.get_session() as session:
            return (
                session.query(WorkoutSet)
                .filter(WorkoutSet.workout_id.in_(ids))
                .order_by(WorkoutSet.workout_id, WorkoutSet.set_order)
                .all()
            )

    def list_sessions(self, user_id: str, status: Optional[str] = None,
                      since: Optional[datetime] = None,
                      until: Optional[datetime] = None) -> List[TrainingSession]:
        """Sessions of a user, optionally limited to ``since <= start_time <= until``."""
        with self.db.get_session() as session:
            query = session.query(TrainingSession).filter(TrainingSession.user_id == user_id)
            if status:
                query = query.filter(TrainingSession.status == status)
            if since is not None:
                query = query.filter(TrainingSession.start_time >= since)
            if until is not None:
                query = query.filter(TrainingSession.start_time <= until)
            return query.order_by(TrainingSession.start_time).all()


class PreferencesStore:
    """Reads and writes the per-user preferences row."""

    def __init__(self, db: Database):
        self.db = db

    def get_preferences(self, user_id: str) -> Optional[UserPreferences]:
        with self.db.get_session() as session:
            record = session.query(UserPreferencesRecord).filter_by(user_id=user_id).first()
            if record is None or not record.workouts_per_week:
                return None
            return UserPreferences(
                goal=Goal.parse(record.goal),
                workouts_per_week=record.workouts_per_week,
                gender_tier=GenderTier(record.gender_tier) if record.gender_tier else GenderTier.MALE,
                experience_level=ExperienceLevel.parse(record.experience_level),
                workout_split=record.workout_split,
                sets_per_exercise=record.sets_per_exercise,
                rest_time=record.rest_time,
            )

    def save_preferences(self, user_id: str, preferences: UserPreferences,
                         survey_completed: bool = True) -> None:
        with self.db.get_session() as session:
            record = session.query(UserPreferencesRecord).filter_by(user_id=user_id).first()
            if record is None:
                record = UserPreferencesRecord(user_id=user_id)
                session.add(record)
            record.goal = preferences.goal.value if preferences.goal else None
            record.experience_level = (
                preferences.experience_level.value if preferences.experience_level else None
            )
            record.workouts_per_week = preferences.workouts_per_week
            record.workout_split = (
                str(preferences.workout_split) if preferences.workout_split is not None else None
            )
            record.sets_per_exercise = preferences.sets_per_exercise
            record.rest_time = preferences.rest_time
            record.gender_tier = preferences.gender_tier.value
            record.survey_completed = survey_completed

    def has_completed_survey(self, user_id: str) -> bool:
        with self.db.get_session() as session:
            record = session.query(UserPreferencesRecord).filter_by(user_id=user_id).first()
            return bool(record and record.survey_completed and record.workouts_per_week)
