"""
Day Template Library

Static per-day exercise prescriptions. Every template carries one ordered
exercise list per gender tier; tiers never borrow each other's lists.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ..config import config
from .preferences import GenderTier


@dataclass(frozen=True)
class ExercisePrescription:
    """One exercise slot of a day template."""
    exercise_name: str
    set_count: int
    rep_min: int
    rep_max: int
    rest_seconds: int

    def __post_init__(self):
        if self.rep_min > self.rep_max:
            raise ValueError(f"{self.exercise_name}: rep_min {self.rep_min} > rep_max {self.rep_max}")
        if self.set_count < 1:
            raise ValueError(f"{self.exercise_name}: set_count must be at least 1")

    @property
    def planned_reps(self) -> int:
        """Representative rep target for a single set (lower midpoint of the range)."""
        return (self.rep_min + self.rep_max) // 2


@dataclass(frozen=True)
class DayTemplate:
    """A named training day, e.g. "Upper A"."""
    name: str
    focus: Tuple[str, ...]
    exercises_by_tier: Mapping[GenderTier, Tuple[ExercisePrescription, ...]]

    @property
    def family(self) -> str:
        """Template name without the A/B variant letter ("Full Body A" -> "Full Body")."""
        head, _, variant = self.name.rpartition(" ")
        return head if head and len(variant) == 1 else self.name


def _template(name: str, focus: List[str], base: Dict[str, list],
              sets: int = config.DEFAULT_SET_COUNT) -> DayTemplate:
    """Build a template from (name, rep_min, rep_max, rest) rows keyed by tier."""
    by_tier = {}
    for tier_name, rows in base.items():
        by_tier[GenderTier(tier_name)] = tuple(
            ExercisePrescription(exercise_name=ex, set_count=sets, rep_min=lo, rep_max=hi, rest_seconds=rest)
            for ex, lo, hi, rest in rows
        )
    return DayTemplate(name=name, focus=tuple(focus), exercises_by_tier=MappingProxyType(by_tier))


REST = config.DEFAULT_REST_SECONDS

UPPER_A = {
    "male": [
        ("Barbell bench press", 8, 10, REST),
        ("Barbell bent-over row", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Front pulldown", 8, 10, REST),
        ("Dumbbell fly", 10, 12, REST),
        ("Barbell curl", 10, 12, REST),
        ("Cable triceps pushdown", 10, 12, REST),
    ],
    "female": [
        ("Dumbbell bench press", 8, 10, REST),
        ("Dumbbell bent-over row", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Front pulldown", 8, 10, REST),
        ("Dumbbell fly", 10, 12, REST),
        ("Barbell curl", 10, 12, REST),
        ("Cable triceps pushdown", 10, 12, REST),
    ],
    "senior": [
        ("Machine chest press", 8, 12, REST),
        ("Machine row", 8, 12, REST),
        ("Dumbbell front raise", 10, 12, REST),
        ("Front pulldown", 8, 12, REST),
        ("Dumbbell curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

UPPER_B = {
    "male": [
        ("Assisted pull-up", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("One-arm row", 8, 10, REST),
        ("Lateral raise", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("French press", 10, 12, REST),
        ("Pec deck", 10, 12, REST),
    ],
    "female": [
        ("Wide-grip pulldown", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Lateral raise", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
        ("Pec deck", 10, 12, REST),
    ],
    "senior": [
        ("Machine front pulldown", 8, 12, REST),
        ("Machine chest press", 8, 12, REST),
        ("Machine row", 8, 12, REST),
        ("Seated lateral raise", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

LOWER_A = {
    "male": [
        ("Free squat", 8, 10, REST),
        ("Leg press", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Leg extension", 10, 12, REST),
        ("Leg curl", 10, 12, REST),
        ("Calf raise", 12, 15, REST),
        ("Lunge", 10, 12, REST),
    ],
    "female": [
        ("Free squat", 8, 10, REST),
        ("Leg press", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Machine glute", 10, 12, REST),
        ("Abductor", 10, 12, REST),
        ("Calf raise", 12, 15, REST),
        ("Lunge", 10, 12, REST),
    ],
    "senior": [
        ("Box squat", 8, 12, REST),
        ("Light leg press", 8, 12, REST),
        ("Dumbbell deadlift", 10, 12, REST),
        ("Leg extension", 10, 12, REST),
        ("Leg curl", 10, 12, REST),
        ("Seated calf raise", 12, 15, REST),
    ],
}

LOWER_B = {
    "male": [
        ("Romanian deadlift", 8, 10, REST),
        ("Front squat", 8, 10, REST),
        ("Leg curl", 10, 12, REST),
        ("Machine glute", 10, 12, REST),
        ("Calf raise", 12, 15, REST),
        ("Plank", 30, 40, REST),  # seconds held
        ("Machine crunch", 12, 15, REST),
    ],
    "female": [
        ("Romanian deadlift", 8, 10, REST),
        ("Sumo squat", 8, 10, REST),
        ("Abductor", 10, 12, REST),
        ("Machine glute", 10, 12, REST),
        ("Calf raise", 12, 15, REST),
        ("Plank", 30, 40, REST),
        ("Machine crunch", 12, 15, REST),
    ],
    "senior": [
        ("Dumbbell deadlift", 10, 12, REST),
        ("Box squat", 8, 12, REST),
        ("Abductor", 10, 12, REST),
        ("Machine glute", 10, 12, REST),
        ("Seated calf raise", 12, 15, REST),
        ("Modified plank", 20, 30, REST),
    ],
}

PUSH_A = {
    "male": [
        ("Barbell bench press", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Lateral raise", 10, 12, REST),
        ("Cable triceps pushdown", 10, 12, REST),
        ("French press", 10, 12, REST),
        ("Dumbbell fly", 10, 12, REST),
    ],
    "female": [
        ("Dumbbell bench press", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Lateral raise", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
        ("Bench triceps dip", 10, 12, REST),
        ("Dumbbell fly", 10, 12, REST),
    ],
    "senior": [
        ("Machine chest press", 8, 12, REST),
        ("Machine incline press", 8, 12, REST),
        ("Machine shoulder press", 8, 12, REST),
        ("Seated lateral raise", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

PUSH_B = {
    "male": [
        ("Decline bench press", 8, 10, REST),
        ("Military press", 8, 10, REST),
        ("Incline dumbbell fly", 10, 12, REST),
        ("Front raise", 10, 12, REST),
        ("Cable triceps pushdown", 10, 12, REST),
        ("Bench triceps dip", 10, 12, REST),
        ("Pec deck", 10, 12, REST),
    ],
    "female": [
        ("Decline bench press", 8, 10, REST),
        ("Military press", 8, 10, REST),
        ("Incline dumbbell fly", 10, 12, REST),
        ("Front raise", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
        ("Bench triceps dip", 10, 12, REST),
        ("Pec deck", 10, 12, REST),
    ],
    "senior": [
        ("Machine chest press", 8, 12, REST),
        ("Machine shoulder press", 8, 12, REST),
        ("Machine fly", 10, 12, REST),
        ("Seated front raise", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

PULL_A = {
    "male": [
        ("Assisted pull-up", 8, 10, REST),
        ("Bent-over row", 8, 10, REST),
        ("Front pulldown", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
    ],
    "female": [
        ("Front pulldown", 8, 10, REST),
        ("Bent-over row", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
        ("Hammer curl", 10, 12, REST),
    ],
    "senior": [
        ("Machine front pulldown", 8, 12, REST),
        ("Machine row", 8, 12, REST),
        ("Dumbbell curl", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
    ],
}

PULL_B = {
    "male": [
        ("One-arm row", 8, 10, REST),
        ("Wide-grip pulldown", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Hammer curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
        ("Shrug", 10, 12, REST),
    ],
    "female": [
        ("One-arm row", 8, 10, REST),
        ("Wide-grip pulldown", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Hammer curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
        ("Shrug", 10, 12, REST),
    ],
    "senior": [
        ("Machine row", 8, 12, REST),
        ("Machine front pulldown", 8, 12, REST),
        ("Dumbbell curl", 10, 12, REST),
        ("Hammer curl", 10, 12, REST),
        ("Face pull", 10, 12, REST),
    ],
}

FULL_BODY_A = {
    "male": [
        ("Barbell bench press", 8, 10, REST),
        ("Free squat", 8, 10, REST),
        ("Bent-over row", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Cable triceps pushdown", 10, 12, REST),
    ],
    "female": [
        ("Dumbbell bench press", 8, 10, REST),
        ("Free squat", 8, 10, REST),
        ("Bent-over row", 8, 10, REST),
        ("Dumbbell shoulder press", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Barbell curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
    "senior": [
        ("Machine chest press", 8, 12, REST),
        ("Box squat", 8, 12, REST),
        ("Machine row", 8, 12, REST),
        ("Machine shoulder press", 8, 12, REST),
        ("Dumbbell deadlift", 10, 12, REST),
        ("Dumbbell curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

FULL_BODY_B = {
    "male": [
        ("Assisted pull-up", 8, 10, REST),
        ("Leg press", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Alternating curl", 10, 12, REST),
        ("French press", 10, 12, REST),
    ],
    "female": [
        ("Front pulldown", 8, 10, REST),
        ("Leg press", 8, 10, REST),
        ("Incline dumbbell bench press", 8, 10, REST),
        ("Seated row", 8, 10, REST),
        ("Romanian deadlift", 8, 10, REST),
        ("Alternating curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
    "senior": [
        ("Machine front pulldown", 8, 12, REST),
        ("Light leg press", 8, 12, REST),
        ("Machine chest press", 8, 12, REST),
        ("Machine row", 8, 12, REST),
        ("Dumbbell deadlift", 10, 12, REST),
        ("Alternating curl", 10, 12, REST),
        ("Rope triceps pushdown", 10, 12, REST),
    ],
}

LEG_FOCUS_A = ["Quads", "Glutes", "Hamstrings", "Calves"]
LEG_FOCUS_B = ["Glutes", "Hamstrings", "Core", "Quads"]

DAY_TEMPLATES: Tuple[DayTemplate, ...] = (
    _template("Upper A", ["Chest", "Shoulders", "Triceps", "Back", "Biceps"], UPPER_A),
    _template("Upper B", ["Back", "Shoulders", "Biceps", "Chest", "Triceps"], UPPER_B),
    _template("Lower A", LEG_FOCUS_A, LOWER_A),
    _template("Lower B", LEG_FOCUS_B, LOWER_B),
    _template("Push A", ["Chest", "Shoulders", "Triceps"], PUSH_A),
    _template("Push B", ["Chest", "Shoulders", "Triceps"], PUSH_B),
    _template("Pull A", ["Back", "Biceps", "Hamstrings"], PULL_A),
    _template("Pull B", ["Back", "Biceps", "Hamstrings"], PULL_B),
    # Legs days reuse the lower-body lists
    _template("Legs A", LEG_FOCUS_A, LOWER_A),
    _template("Legs B", LEG_FOCUS_B, LOWER_B),
    _template("Full Body A", ["Chest", "Legs", "Back", "Shoulders", "Arms"], FULL_BODY_A),
    _template("Full Body B", ["Back", "Legs", "Chest", "Shoulders", "Arms"], FULL_BODY_B),
)

# Title prefix per template family
DAY_LABELS = {
    "Upper": "Upper Body Day",
    "Lower": "Leg Day",
    "Legs": "Leg Day",
    "Push": "Push Day",
    "Pull": "Pull Day",
    "Full Body": "Full Body Day",
}
