"""Planning module: preferences, template/split tables and the registry."""

from .preferences import Goal, ExperienceLevel, GenderTier, UserPreferences
from .templates import DayTemplate, ExercisePrescription
from .splits import SplitArchetype
from .registry import PlanRegistry, get_registry

__all__ = [
    "Goal",
    "ExperienceLevel",
    "GenderTier",
    "UserPreferences",
    "DayTemplate",
    "ExercisePrescription",
    "SplitArchetype",
    "PlanRegistry",
    "get_registry",
]
