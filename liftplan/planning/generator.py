"""
Plan Generator

Turns a user's preferences into persisted, auto-generated workouts: one
workout per split day, one row per planned set.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..db.models import WORKOUT_TYPE_AUTO
from ..errors import PlanPersistenceFailed, ProfileIncomplete
from ..exercises import ExerciseCatalog
from .preferences import UserPreferences, ExperienceLevel, GenderTier
from .registry import PlanRegistry, get_registry
from .splits import SplitArchetype, GOAL_NOTES
from .templates import DayTemplate, DAY_LABELS

logger = logging.getLogger(__name__)


@dataclass
class PlannedSet:
    """One set row ready to be written."""
    exercise_id: str
    exercise_name: str
    planned_reps: int
    rest_time: int
    set_order: int

    def to_row(self, workout_id: int) -> Dict:
        return {
            "workout_id": workout_id,
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "planned_reps": self.planned_reps,
            "weight": None,
            "rest_time": self.rest_time,
            "set_order": self.set_order,
        }


@dataclass
class PlannedDay:
    """A fully resolved training day."""
    day_number: int
    template_name: str
    title: str
    description: str
    sets: List[PlannedSet] = field(default_factory=list)
    skipped_exercises: List[str] = field(default_factory=list)

    @property
    def exercise_names(self) -> List[str]:
        names = []
        for planned in self.sets:
            if not names or names[-1] != planned.exercise_name:
                names.append(planned.exercise_name)
        return names


def workout_title(template: DayTemplate) -> str:
    """Display title, e.g. "Leg Day - Lower A"."""
    label = DAY_LABELS.get(template.family, f"{template.family} Day")
    return f"{label} - {template.name}"


def coaching_note(preferences: UserPreferences) -> str:
    """Goal, experience and tier advice appended to every generated workout."""
    note = GOAL_NOTES.get(preferences.goal, "Stay consistent with your training.")
    if preferences.experience_level == ExperienceLevel.NOVICE:
        note += " Focus on learning proper form before increasing weights."
    elif preferences.experience_level == ExperienceLevel.ADVANCED:
        note += " Consider periodization and advanced techniques like supersets."

    if preferences.gender_tier == GenderTier.SENIOR:
        note += " Prioritize warm-up and mobility work. Listen to your body and allow adequate recovery."
    elif preferences.gender_tier == GenderTier.FEMALE:
        note += " Don't neglect upper body training alongside lower body focus."
    return note


class PlanGenerator:
    """
    Generates and persists training plans.

    Collaborators:
    - registry: validated template/split configuration
    - catalog: exercise catalog used to resolve template exercise names
    - gateway: transactional writer for workouts and sets
    - preferences_source: answers whether the user completed the survey
    """

    def __init__(self,
                 catalog: ExerciseCatalog,
                 gateway=None,
                 preferences_source=None,
                 registry: Optional[PlanRegistry] = None):
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.gateway = gateway
        self.preferences_source = preferences_source
        self.registry = registry or get_registry()

    def select_archetype(self, preferences: UserPreferences) -> SplitArchetype:
        return self.registry.select_archetype(
            preferences.goal, preferences.workouts_per_week, preferences.workout_split
        )

    def build_plan(self, preferences: UserPreferences) -> List[PlannedDay]:
        """
        Resolve preferences into planned days without touching the database.

        Exercises missing from the catalog are logged and skipped; the rest
        of the day is still planned.
        """
        archetype = self.select_archetype(preferences)
        note = coaching_note(preferences)
        days = []

        for day_number, template_name in enumerate(archetype.days, start=1):
            template = self.registry.get_template(template_name)
            prescriptions = self.registry.resolve_day(template_name, preferences.gender_tier)

            day = PlannedDay(
                day_number=day_number,
                template_name=template_name,
                title=workout_title(template),
                description=(
                    f"Auto-generated {template_name} workout (day {day_number} of {len(archetype)}, "
                    f"{archetype.label}). Focus: {', '.join(template.focus)}. {note}"
                ),
            )

            set_order = 1
            for prescription in prescriptions:
                exercise = self.catalog.find_by_name(prescription.exercise_name)
                if exercise is None:
                    self.logger.warning(
                        f"Exercise {prescription.exercise_name!r} not found in catalog; "
                        f"skipping it on {template_name}"
                    )
                    day.skipped_exercises.append(prescription.exercise_name)
                    continue

                set_count = preferences.sets_per_exercise or prescription.set_count
                rest = preferences.rest_time if preferences.rest_time is not None else prescription.rest_seconds

                for _ in range(set_count):
                    day.sets.append(PlannedSet(
                        exercise_id=exercise.id,
                        exercise_name=prescription.exercise_name,
                        planned_reps=prescription.planned_reps,
                        rest_time=rest,
                        set_order=set_order,
                    ))
                    set_order += 1

            days.append(day)

        return days

    def generate_plan(self, user_id: str, preferences: UserPreferences,
                      now: Optional[datetime] = None) -> List[int]:
        """
        Generate a plan and write it in a single transaction.

        Args:
            user_id: Owner of the generated workouts
            preferences: The user's workout preferences
            now: Creation timestamp for the rows (defaults to utcnow)

        Returns:
            Ids of the created workouts, in split order

        Raises:
            ProfileIncomplete: the user has not completed the survey
            UnsupportedFrequency: workouts_per_week has no split archetypes
            PlanPersistenceFailed: the write failed; nothing from this run is kept
        """
        if self.preferences_source is None:
            raise RuntimeError("PlanGenerator needs a preferences source to generate plans")
        if self.gateway is None:
            raise RuntimeError("PlanGenerator needs a persistence gateway to generate plans")
        if not self.preferences_source.has_completed_survey(user_id):
            raise ProfileIncomplete(user_id)

        days = self.build_plan(preferences)
        created_at = now or datetime.utcnow()
        workout_ids = []

        try:
            with self.gateway.transaction() as tx:
                for day in days:
                    workout_id = tx.insert_workout(
                        user_id=user_id,
                        title=day.title,
                        description=day.description,
                        workout_type=WORKOUT_TYPE_AUTO,
                        created_at=created_at,
                    )
                    tx.insert_workout_sets(planned.to_row(workout_id) for planned in day.sets)
                    workout_ids.append(workout_id)
        except SQLAlchemyError as e:
            self.logger.error(f"Plan generation for user {user_id} rolled back: {e}")
            raise PlanPersistenceFailed(f"Could not save generated plan for user {user_id}") from e

        self.logger.info(f"Generated {len(workout_ids)} workouts for user {user_id}")
        return workout_ids
