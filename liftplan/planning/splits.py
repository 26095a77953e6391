"""Split archetypes per weekly frequency and goal-based recommendations."""

from dataclasses import dataclass
from typing import Dict, Tuple

from .preferences import Goal


@dataclass(frozen=True)
class SplitArchetype:
    """Ordered list of day templates making up one training week."""
    label: str
    days: Tuple[str, ...]

    @property
    def style(self) -> str:
        """Split style key as offered by the preferences form."""
        families = {name.rsplit(" ", 1)[0] for name in self.days}
        if families == {"Full Body"}:
            return "full_body"
        if families <= {"Upper", "Lower"}:
            return "upper_lower"
        if families <= {"Push", "Pull", "Legs"}:
            return "push_pull_legs"
        return "hybrid"

    def __len__(self):
        return len(self.days)

    def __iter__(self):
        return iter(self.days)


def _split(label: str, *days: str) -> SplitArchetype:
    return SplitArchetype(label=label, days=tuple(days))


SPLIT_CATALOG: Dict[int, Tuple[SplitArchetype, ...]] = {
    3: (
        _split("Upper/Lower/Full Body", "Upper A", "Lower A", "Full Body A"),
        _split("Push/Pull/Legs", "Push A", "Pull A", "Legs A"),
        _split("3x Full Body", "Full Body A", "Full Body B", "Full Body A"),
        _split("Upper/Lower/Upper", "Upper A", "Lower A", "Upper B"),
    ),
    4: (
        _split("Upper/Lower/Upper/Full Body", "Upper A", "Lower A", "Upper B", "Full Body A"),
        _split("Push/Pull/Legs/Full Body", "Push A", "Pull A", "Legs A", "Full Body A"),
        _split("4x Full Body", "Full Body A", "Full Body B", "Full Body A", "Full Body B"),
        _split("2x Upper/Lower", "Upper A", "Lower A", "Upper B", "Lower B"),
        _split("Push/Legs/Pull/Legs", "Push A", "Legs A", "Pull A", "Legs B"),
    ),
    5: (
        _split("Upper/Lower/Upper/Lower/Full Body", "Upper A", "Lower A", "Upper B", "Lower B", "Full Body A"),
        _split("Upper/Lower/Upper/Lower/Upper", "Upper A", "Lower A", "Upper B", "Lower B", "Upper A"),
        _split("5x Full Body", "Full Body A", "Full Body B", "Full Body A", "Full Body B", "Full Body A"),
        _split("Push/Pull/Legs/Upper/Lower", "Push A", "Pull A", "Legs A", "Upper A", "Lower A"),
    ),
    6: (
        _split("3x Upper/Lower", "Upper A", "Lower A", "Upper B", "Lower B", "Upper A", "Lower A"),
        _split("2x Push/Pull/Legs", "Push A", "Pull A", "Legs A", "Push B", "Pull B", "Legs B"),
        _split("6x Full Body", "Full Body A", "Full Body B", "Full Body A", "Full Body B", "Full Body A", "Full Body B"),
        _split("2x Upper/Lower/Full Body", "Upper A", "Lower A", "Full Body A", "Upper B", "Lower B", "Full Body B"),
        _split("Push/Pull/Legs/Upper/Lower/Full Body", "Push A", "Pull A", "Legs A", "Upper A", "Lower A", "Full Body A"),
    ),
}

# Preferred archetype index per goal and weekly frequency
GOAL_RECOMMENDATIONS: Dict[Goal, Dict[int, int]] = {
    Goal.LOSE_WEIGHT: {3: 0, 4: 0, 5: 0, 6: 3},
    Goal.GAIN_MUSCLE: {3: 1, 4: 3, 5: 3, 6: 1},
    Goal.GAIN_STRENGTH: {3: 0, 4: 3, 5: 1, 6: 0},
    Goal.MAINTAIN_MUSCLE: {3: 2, 4: 2, 5: 0, 6: 3},
}

# Index used when the goal is unknown: the most general-purpose archetype
DEFAULT_ARCHETYPE_INDEX = 0

# Coaching notes appended to generated workout descriptions
GOAL_NOTES: Dict[Goal, str] = {
    Goal.LOSE_WEIGHT: "Prioritize diet and cardio sessions 3-5x/week. Focus on progressive overload with moderate weights.",
    Goal.GAIN_MUSCLE: "Progressively increase weights over time. Aim for 8-12 reps with challenging weights.",
    Goal.GAIN_STRENGTH: "Focus on compound movements with heavy weights. Rest 2-3 minutes between sets.",
    Goal.MAINTAIN_MUSCLE: "Keep consistent with your routine. Focus on movement quality and mind-muscle connection.",
}
