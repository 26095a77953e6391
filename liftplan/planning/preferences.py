"""User preference types consumed by the plan generator."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union

from ..config import config


class Goal(Enum):
    """Fitness goal chosen in the survey."""
    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE = "gain_muscle"
    GAIN_STRENGTH = "gain_strength"
    MAINTAIN_MUSCLE = "maintain_muscle"

    @classmethod
    def parse(cls, value) -> Optional["Goal"]:
        """Parse a stored value or a form label ("Gain muscle", "Lose fat").

        Returns None for unknown goals; goal is advisory, so callers fall back
        to the general-purpose split instead of failing.
        """
        if value is None or isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        key = _GOAL_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_GOAL_ALIASES = {
    "lose_fat": "lose_weight",
    "weight_loss": "lose_weight",
    "build_muscle": "gain_muscle",
    "hypertrophy": "gain_muscle",
    "strength": "gain_strength",
    "maintain": "maintain_muscle",
}


class ExperienceLevel(Enum):
    """Training experience. Informational only; does not change the plan."""
    NOVICE = "novice"
    EXPERIENCED = "experienced"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value) -> Optional["ExperienceLevel"]:
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class GenderTier(Enum):
    """Demographic variant selecting which exercise list a template uses."""
    MALE = "male"
    FEMALE = "female"
    SENIOR = "senior"

    @classmethod
    def from_profile(cls, gender: Optional[str], age: Optional[int] = None) -> "GenderTier":
        """Derive the tier from survey answers.

        Age takes precedence: older users get the joint-friendly senior lists
        regardless of gender. "Prefer not to say" uses the male lists.
        """
        if age is not None and age >= config.SENIOR_AGE_THRESHOLD:
            return cls.SENIOR
        if gender and gender.strip().lower() == "female":
            return cls.FEMALE
        return cls.MALE


@dataclass(frozen=True)
class UserPreferences:
    """Read-only snapshot of a user's workout preferences."""
    goal: Optional[Goal]
    workouts_per_week: int
    gender_tier: GenderTier = GenderTier.MALE
    experience_level: Optional[ExperienceLevel] = None
    workout_split: Optional[Union[int, str]] = None
    sets_per_exercise: Optional[int] = None
    rest_time: Optional[int] = None  # seconds

    def __post_init__(self):
        if self.sets_per_exercise is not None and self.sets_per_exercise < 1:
            raise ValueError("sets_per_exercise must be at least 1")
        if self.rest_time is not None and self.rest_time < 0:
            raise ValueError("rest_time cannot be negative")

    @classmethod
    def from_form(cls, goal, workouts_per_week, gender=None, age=None, experience_level=None,
                  workout_split=None, sets_per_exercise=None, rest_time=None,
                  gender_tier=None) -> "UserPreferences":
        """Build preferences from raw form/survey values."""
        if gender_tier is not None:
            tier = gender_tier if isinstance(gender_tier, GenderTier) else GenderTier(str(gender_tier).lower())
        else:
            tier = GenderTier.from_profile(gender, age)

        return cls(
            goal=Goal.parse(goal),
            workouts_per_week=int(workouts_per_week),
            gender_tier=tier,
            experience_level=ExperienceLevel.parse(experience_level),
            workout_split=workout_split or None,
            sets_per_exercise=int(sets_per_exercise) if sets_per_exercise not in (None, "") else None,
            rest_time=config.parse_rest_time(rest_time),
        )
