"""Exercise catalog and template-name resolution."""

import re
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Exercise:
    """Catalog entry (ExerciseDB shape)."""
    id: str
    name: str
    body_part: str
    target: str
    equipment: str


def normalize_exercise_name(name: str) -> str:
    """Normalize a name for comparison: lowercase, no hyphens/parentheses, single spaces."""
    text = name.lower().replace("-", " ")
    text = re.sub(r"\(.*?\)", "", text)
    return re.sub(r"\s+", " ", text).strip()


# Template exercise name -> catalog exercise name
TEMPLATE_NAME_ALIASES: Dict[str, str] = {
    # Chest
    "Barbell bench press": "barbell bench press",
    "Dumbbell bench press": "dumbbell bench press",
    "Incline dumbbell bench press": "incline dumbbell bench press",
    "Decline bench press": "decline barbell bench press",
    "Dumbbell fly": "dumbbell fly",
    "Incline dumbbell fly": "incline dumbbell fly",
    "Pec deck": "pec deck fly",
    "Machine chest press": "chest press machine",
    "Machine fly": "butterfly machine",
    "Machine incline press": "incline chest press machine",

    # Back
    "Bent-over row": "barbell bent over row",
    "Barbell bent-over row": "barbell bent over row",
    "Dumbbell bent-over row": "dumbbell bent over row",
    "One-arm row": "dumbbell one arm row",
    "Seated row": "seated cable row",
    "Front pulldown": "cable lat pulldown",
    "Wide-grip pulldown": "cable wide grip lat pulldown",
    "Assisted pull-up": "assisted pull-up",
    "Face pull": "cable face pull",
    "Machine row": "seated row machine",
    "Machine front pulldown": "lat pulldown machine",
    "Shrug": "barbell shrug",

    # Shoulders
    "Dumbbell shoulder press": "dumbbell shoulder press",
    "Military press": "barbell military press",
    "Lateral raise": "dumbbell lateral raise",
    "Front raise": "dumbbell front raise",
    "Dumbbell front raise": "dumbbell front raise",
    "Seated lateral raise": "seated dumbbell lateral raise",
    "Machine shoulder press": "shoulder press machine",
    "Seated front raise": "seated dumbbell front raise",

    # Arms
    "Barbell curl": "barbell curl",
    "Cable triceps pushdown": "cable triceps pushdown",
    "Rope triceps pushdown": "cable rope triceps pushdown",
    "Alternating curl": "dumbbell alternate bicep curl",
    "French press": "ez barbell lying triceps extension",
    "Hammer curl": "dumbbell hammer curl",
    "Bench triceps dip": "bench dip",
    "Dumbbell curl": "dumbbell bicep curl",

    # Legs
    "Free squat": "barbell squat",
    "Front squat": "barbell front squat",
    "Leg press": "sled leg press",
    "Romanian deadlift": "barbell romanian deadlift",
    "Leg extension": "leg extensions",
    "Leg curl": "lying leg curl",
    "Calf raise": "standing calf raise",
    "Seated calf raise": "seated calf raise",
    "Lunge": "dumbbell lunge",
    "Box squat": "barbell box squat",
    "Light leg press": "sled leg press",
    "Sumo squat": "barbell sumo squat",
    "Dumbbell deadlift": "dumbbell deadlift",
    "Machine glute": "cable glute kickback",
    "Abductor": "cable hip abduction",

    # Core
    "Plank": "plank",
    "Modified plank": "knee plank",
    "Machine crunch": "cable crunch",
}


class ExerciseCatalog:
    """In-memory, name-indexed view of the exercise catalog."""

    def __init__(self, exercises: Iterable[Exercise], aliases: Optional[Dict[str, str]] = None):
        self._by_id: Dict[str, Exercise] = {}
        self._by_name: Dict[str, Exercise] = {}
        for exercise in exercises:
            self._by_id[exercise.id] = exercise
            # First entry wins on duplicate names
            self._by_name.setdefault(normalize_exercise_name(exercise.name), exercise)

        alias_table = TEMPLATE_NAME_ALIASES if aliases is None else aliases
        self._aliases = {
            normalize_exercise_name(k): normalize_exercise_name(v) for k, v in alias_table.items()
        }

    def __len__(self):
        return len(self._by_id)

    def __iter__(self):
        return iter(self._by_id.values())

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    def find_by_name(self, name: str) -> Optional[Exercise]:
        """Exact match on the normalized name, then on the template alias."""
        key = normalize_exercise_name(name)
        exercise = self._by_name.get(key)
        if exercise is None and key in self._aliases:
            exercise = self._by_name.get(self._aliases[key])
        return exercise

    @classmethod
    def from_session(cls, session) -> "ExerciseCatalog":
        """Load the catalog from the exercises table."""
        from .db.models import ExerciseRecord

        records = session.query(ExerciseRecord).order_by(ExerciseRecord.exercise_id).all()
        return cls(
            Exercise(
                id=r.exercise_id,
                name=r.name,
                body_part=r.body_part or "",
                target=r.target or "",
                equipment=r.equipment or "",
            )
            for r in records
        )


def load_catalog(db) -> ExerciseCatalog:
    """Load the catalog through a Database instance."""
    with db.get_session() as session:
        catalog = ExerciseCatalog.from_session(session)
    logger.debug(f"Loaded {len(catalog)} exercises")
    return catalog


def seed_exercise_catalog(db, exercises: Optional[List[Exercise]] = None) -> int:
    """Insert or update catalog rows. Returns the number of rows written."""
    from .db.models import ExerciseRecord
    from .exercise_data import DEFAULT_EXERCISES

    rows = DEFAULT_EXERCISES if exercises is None else exercises
    with db.get_session() as session:
        for exercise in rows:
            session.merge(ExerciseRecord(
                exercise_id=exercise.id,
                name=exercise.name,
                body_part=exercise.body_part,
                target=exercise.target,
                equipment=exercise.equipment,
            ))
    logger.info(f"Seeded {len(rows)} exercises")
    return len(rows)
