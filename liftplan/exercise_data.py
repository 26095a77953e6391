"""Bundled exercise catalog covering every template exercise."""

from .exercises import Exercise

_ROWS = [
    # name, body part, target, equipment
    ("barbell bench press", "chest", "pectorals", "barbell"),
    ("dumbbell bench press", "chest", "pectorals", "dumbbell"),
    ("incline dumbbell bench press", "chest", "pectorals", "dumbbell"),
    ("decline barbell bench press", "chest", "pectorals", "barbell"),
    ("dumbbell fly", "chest", "pectorals", "dumbbell"),
    ("incline dumbbell fly", "chest", "pectorals", "dumbbell"),
    ("pec deck fly", "chest", "pectorals", "leverage machine"),
    ("chest press machine", "chest", "pectorals", "leverage machine"),
    ("butterfly machine", "chest", "pectorals", "leverage machine"),
    ("incline chest press machine", "chest", "pectorals", "leverage machine"),
    ("barbell bent over row", "back", "upper back", "barbell"),
    ("dumbbell bent over row", "back", "upper back", "dumbbell"),
    ("dumbbell one arm row", "back", "upper back", "dumbbell"),
    ("seated cable row", "back", "upper back", "cable"),
    ("cable lat pulldown", "back", "lats", "cable"),
    ("cable wide grip lat pulldown", "back", "lats", "cable"),
    ("assisted pull-up", "back", "lats", "assisted"),
    ("cable face pull", "shoulders", "rear delts", "cable"),
    ("seated row machine", "back", "upper back", "leverage machine"),
    ("lat pulldown machine", "back", "lats", "leverage machine"),
    ("barbell shrug", "back", "traps", "barbell"),
    ("dumbbell shoulder press", "shoulders", "delts", "dumbbell"),
    ("barbell military press", "shoulders", "delts", "barbell"),
    ("dumbbell lateral raise", "shoulders", "delts", "dumbbell"),
    ("dumbbell front raise", "shoulders", "front delt", "dumbbell"),
    ("seated dumbbell lateral raise", "shoulders", "delts", "dumbbell"),
    ("shoulder press machine", "shoulders", "delts", "leverage machine"),
    ("seated dumbbell front raise", "shoulders", "front delt", "dumbbell"),
    ("barbell curl", "upper arms", "biceps", "barbell"),
    ("cable triceps pushdown", "upper arms", "triceps", "cable"),
    ("cable rope triceps pushdown", "upper arms", "triceps", "cable"),
    ("dumbbell alternate bicep curl", "upper arms", "biceps", "dumbbell"),
    ("ez barbell lying triceps extension", "upper arms", "triceps", "ez barbell"),
    ("dumbbell hammer curl", "upper arms", "biceps", "dumbbell"),
    ("bench dip", "upper arms", "triceps", "body weight"),
    ("dumbbell bicep curl", "upper arms", "biceps", "dumbbell"),
    ("barbell squat", "upper legs", "quads", "barbell"),
    ("barbell front squat", "upper legs", "quads", "barbell"),
    ("sled leg press", "upper legs", "quads", "sled machine"),
    ("barbell romanian deadlift", "upper legs", "hamstrings", "barbell"),
    ("leg extensions", "upper legs", "quads", "leverage machine"),
    ("lying leg curl", "upper legs", "hamstrings", "leverage machine"),
    ("standing calf raise", "lower legs", "calves", "leverage machine"),
    ("seated calf raise", "lower legs", "calves", "leverage machine"),
    ("dumbbell lunge", "upper legs", "glutes", "dumbbell"),
    ("barbell box squat", "upper legs", "quads", "barbell"),
    ("barbell sumo squat", "upper legs", "glutes", "barbell"),
    ("dumbbell deadlift", "upper legs", "glutes", "dumbbell"),
    ("cable glute kickback", "upper legs", "glutes", "cable"),
    ("cable hip abduction", "upper legs", "abductors", "cable"),
    ("plank", "waist", "abs", "body weight"),
    ("knee plank", "waist", "abs", "body weight"),
    ("cable crunch", "waist", "abs", "cable"),
]

DEFAULT_EXERCISES = [
    Exercise(id=f"{i:04d}", name=name, body_part=body_part, target=target, equipment=equipment)
    for i, (name, body_part, target, equipment) in enumerate(_ROWS, start=1)
]
