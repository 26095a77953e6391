"""Analysis module for training-history aggregation."""

from .muscle_activity import (
    MuscleActivityAggregator,
    MuscleState,
    MUSCLE_IDS,
    compute_muscle_states,
    map_target_to_muscles,
)

__all__ = [
    "MuscleActivityAggregator",
    "MuscleState",
    "MUSCLE_IDS",
    "compute_muscle_states",
    "map_target_to_muscles",
]
