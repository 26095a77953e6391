"""
Muscle Activity Aggregator

Derives a per-muscle training frequency and intensity snapshot from a user's
completed sessions, keyed by the body-silhouette region ids.
"""

import re
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np
import pandas as pd

from ..config import config
from ..db.models import SESSION_COMPLETED
from ..exercises import ExerciseCatalog

logger = logging.getLogger(__name__)


# Every region of the front and back silhouettes
MUSCLE_IDS: Tuple[str, ...] = (
    # Front view
    "head", "shoulders", "chest", "traps", "biceps",
    "obliques_left", "obliques_right", "obliques_lower", "ab_outline",
    "abs_upper_left", "abs_upper_right", "abs_middle_left", "abs_middle_right",
    "abs_lower_left", "abs_lower_right",
    "left_forearm", "left_forearm_outer", "right_forearm", "right_forearm_outer",
    "quads_right_outer", "quads_left_outer", "quads_right_inner", "quads_left_inner",
    "adductors", "left_hand", "right_hand", "left_shin", "right_shin",
    "left_heel", "right_heel",
    # Back view
    "back_head", "back_traps", "back_shoulders", "upper_back_right", "upper_back_right_side",
    "upper_back_left", "upper_back_left_side", "back_triceps", "back_lats", "back_elbows",
    "lower_back", "back_forearm", "back_hands", "back_glutes", "back_quads",
    "back_hamstrings", "back_calves", "back_feet",
)

_ABS = ["abs_upper_left", "abs_upper_right", "abs_middle_left", "abs_middle_right",
        "abs_lower_left", "abs_lower_right", "ab_outline"]
_OBLIQUES = ["obliques_left", "obliques_right", "obliques_lower"]
_FOREARMS = ["left_forearm", "left_forearm_outer", "right_forearm", "right_forearm_outer"]
_QUADS = ["quads_right_outer", "quads_left_outer", "quads_right_inner", "quads_left_inner", "back_quads"]
_SHINS = ["right_shin", "left_shin"]
_UPPER_BACK = ["upper_back_right", "upper_back_left", "upper_back_right_side", "upper_back_left_side"]

# Exercise target keyword -> silhouette regions
TARGET_MUSCLE_MAP: Dict[str, List[str]] = {
    # Chest
    "pectorals": ["chest"],
    "pecs": ["chest"],
    "chest": ["chest"],
    "pectoral": ["chest"],

    # Shoulders
    "delts": ["shoulders", "back_shoulders"],
    "deltoids": ["shoulders", "back_shoulders"],
    "shoulders": ["shoulders", "back_shoulders"],
    "shoulder": ["shoulders", "back_shoulders"],
    "anterior deltoid": ["shoulders"],
    "posterior deltoid": ["back_shoulders"],
    "front delt": ["shoulders"],
    "rear delt": ["back_shoulders"],
    "side delt": ["shoulders", "back_shoulders"],

    # Traps
    "traps": ["traps", "back_traps"],
    "trapezius": ["traps", "back_traps"],

    # Arms
    "biceps": ["biceps"],
    "bicep": ["biceps"],
    "brachialis": ["biceps"],
    "triceps": ["back_triceps"],
    "tricep": ["back_triceps"],
    "forearms": _FOREARMS,
    "forearm": _FOREARMS,
    "brachioradialis": _FOREARMS,
    "grip": _FOREARMS,

    # Core
    "abs": _ABS,
    "abdominals": _ABS,
    "core": _ABS,
    "rectus abdominis": _ABS,
    "obliques": _OBLIQUES,
    "oblique": _OBLIQUES,

    # Legs
    "quads": _QUADS,
    "quadriceps": _QUADS,
    "quad": _QUADS,
    "glutes": ["back_glutes"],
    "glute": ["back_glutes"],
    "gluteus": ["back_glutes"],
    "abductors": ["back_glutes"],
    "hamstrings": ["back_hamstrings"],
    "hamstring": ["back_hamstrings"],
    "calves": ["back_calves"],
    "calf": _SHINS,
    "shins": _SHINS,
    "adductors": ["adductors"],
    "inner thigh": ["adductors"],

    # Back
    "lats": ["back_lats"],
    "latissimus dorsi": ["back_lats"],
    "rhomboids": ["upper_back_right", "upper_back_left"],
    "erector spinae": ["lower_back"],
    "lower back": ["lower_back"],
    "upper back": _UPPER_BACK,
    "mid back": _UPPER_BACK,
}


def _normalize_target(target: str) -> str:
    text = re.sub(r"[^\w\s]", " ", target.lower())
    return re.sub(r"\s+", " ", text).strip()


def map_target_to_muscles(target: Optional[str]) -> Set[str]:
    """Silhouette regions worked by an exercise target such as "pectorals"."""
    if not target:
        return set()
    normalized = _normalize_target(target)
    words = normalized.split(" ")
    matched: Set[str] = set()

    for keyword, muscle_ids in TARGET_MUSCLE_MAP.items():
        if " " in keyword:
            hit = keyword in normalized or all(w in words for w in keyword.split(" "))
        else:
            hit = keyword in words
        if hit:
            matched.update(muscle_ids)

    return matched


def muscle_display_name(muscle_id: str) -> str:
    return muscle_id.replace("_", " ").title()


@dataclass
class MuscleState:
    """Per-region snapshot consumed by the silhouette renderer."""
    id: str
    name: str
    intensity: float
    weekly_frequency: int
    color: str
    is_highlighted: bool = False
    is_selected: bool = False

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "intensity": self.intensity,
            "weekly_frequency": self.weekly_frequency,
            "color": self.color,
            "isHighlighted": self.is_highlighted,
            "isSelected": self.is_selected,
        }


def compute_muscle_states(sessions: Iterable, workout_sets: Iterable, catalog: ExerciseCatalog,
                          saturation_days: Optional[int] = None) -> Dict[str, MuscleState]:
    """
    Pure aggregation over already-loaded rows.

    Args:
        sessions: Completed sessions in the window (need workout_id, start_time)
        workout_sets: Sets of the workouts those sessions reference
        catalog: Exercise catalog used for target-muscle metadata
        saturation_days: Training days at which intensity reaches 1.0

    Returns:
        One MuscleState per known muscle id
    """
    saturation = config.INTENSITY_SATURATION_DAYS if saturation_days is None else saturation_days
    if saturation < 1:
        raise ValueError(f"saturation_days must be at least 1: {saturation}")

    # workout -> muscles it touches
    workout_muscles: Dict[int, Set[str]] = {}
    target_cache: Dict[str, Set[str]] = {}
    for workout_set in workout_sets:
        exercise = catalog.get(workout_set.exercise_id)
        if exercise is None:
            continue
        if exercise.target not in target_cache:
            target_cache[exercise.target] = map_target_to_muscles(exercise.target)
        workout_muscles.setdefault(workout_set.workout_id, set()).update(target_cache[exercise.target])

    records = []
    for session in sessions:
        if session.workout_id is None:
            continue
        day = session.start_time.date()
        for muscle_id in workout_muscles.get(session.workout_id, ()):
            records.append((muscle_id, day))

    if records:
        frame = pd.DataFrame.from_records(records, columns=["muscle_id", "day"])
        counts = frame.groupby("muscle_id")["day"].nunique()
    else:
        counts = pd.Series(dtype="int64")
    frequency = counts.reindex(list(MUSCLE_IDS), fill_value=0).astype("int64")

    intensity = np.clip(frequency.to_numpy(dtype=float) / float(saturation), 0.0, 1.0)

    states = {}
    for muscle_id, days, level in zip(frequency.index, frequency.to_numpy(), intensity):
        states[muscle_id] = MuscleState(
            id=muscle_id,
            name=muscle_display_name(muscle_id),
            intensity=float(level),
            weekly_frequency=int(days),
            color=config.get_intensity_color(int(days)),
        )
    return states


class MuscleActivityAggregator:
    """Reads a user's recent sessions and computes muscle states."""

    def __init__(self, gateway, catalog: ExerciseCatalog):
        self.gateway = gateway
        self.catalog = catalog

    def aggregate_activity(self, user_id: str, window_days: Optional[int] = None,
                           now: Optional[datetime] = None) -> Dict[str, MuscleState]:
        """
        Muscle states for the trailing window.

        Two reads: the completed sessions in the window, then the sets of all
        workouts they reference.
        """
        window = config.ACTIVITY_WINDOW_DAYS if window_days is None else window_days
        if window < 0:
            raise ValueError(f"window_days cannot be negative: {window}")
        until = now or datetime.utcnow()
        since = until - timedelta(days=window)

        sessions = self.gateway.list_sessions(user_id, status=SESSION_COMPLETED, since=since, until=until)
        workout_ids = {s.workout_id for s in sessions if s.workout_id is not None}
        workout_sets = self.gateway.list_workout_sets(workout_ids)

        states = compute_muscle_states(sessions, workout_sets, self.catalog)
        trained = sum(1 for s in states.values() if s.weekly_frequency)
        logger.debug(f"User {user_id}: {len(sessions)} sessions since {since:%Y-%m-%d}, "
                     f"{trained} muscles trained")
        return states
