"""Tests for muscle activity aggregation."""

import pytest
from datetime import datetime, timedelta
from types import SimpleNamespace

from liftplan.analysis import (
    MuscleActivityAggregator,
    MUSCLE_IDS,
    compute_muscle_states,
    map_target_to_muscles,
)
from liftplan.config import config
from liftplan.db import Database, PersistenceGateway, TrainingSession, WORKOUT_TYPE_USER
from liftplan.db.models import SESSION_COMPLETED, SESSION_IN_PROGRESS, SESSION_ABANDONED
from liftplan.exercises import seed_exercise_catalog, load_catalog

USER = "user-1"
NOW = datetime(2026, 3, 15, 12, 0)


class TestTargetMapping:
    """Test exercise target to silhouette region mapping."""

    def test_single_keywords(self):
        assert map_target_to_muscles("pectorals") == {"chest"}
        assert map_target_to_muscles("lats") == {"back_lats"}
        assert map_target_to_muscles("delts") == {"shoulders", "back_shoulders"}
        assert map_target_to_muscles("triceps") == {"back_triceps"}

    def test_quads_cover_front_and_back(self):
        muscles = map_target_to_muscles("quads")
        assert len(muscles) == 5
        assert "back_quads" in muscles

    def test_multi_word_target(self):
        """"rear delts" hits the rear shoulder through the single-word delts entry too."""
        assert "back_shoulders" in map_target_to_muscles("rear delts")
        assert map_target_to_muscles("Lower Back") == {"lower_back"}

    def test_whole_word_matching(self):
        """Keywords match words, not fragments ("abs" is not found in "abductors")."""
        assert map_target_to_muscles("abductors") == {"back_glutes"}

    def test_unknown_or_empty_target(self):
        assert map_target_to_muscles("cardiovascular system") == set()
        assert map_target_to_muscles("") == set()
        assert map_target_to_muscles(None) == set()

    def test_all_mapped_regions_are_known(self):
        from liftplan.analysis.muscle_activity import TARGET_MUSCLE_MAP

        known = set(MUSCLE_IDS)
        for muscle_ids in TARGET_MUSCLE_MAP.values():
            assert set(muscle_ids) <= known


class TestComputeMuscleStates:
    """Test the pure aggregation over loaded rows."""

    def setup_method(self):
        """Set up test fixtures."""
        db = Database("sqlite:///:memory:")
        db.create_tables()
        seed_exercise_catalog(db)
        self.catalog = load_catalog(db)
        self.bench = self.catalog.find_by_name("barbell bench press")
        self.squat = self.catalog.find_by_name("barbell squat")

    def _set(self, workout_id, exercise):
        return SimpleNamespace(workout_id=workout_id, exercise_id=exercise.id)

    def _session(self, workout_id, start_time):
        return SimpleNamespace(workout_id=workout_id, start_time=start_time)

    def test_no_sessions_gives_complete_zero_map(self):
        """Every known region is present even with no training."""
        states = compute_muscle_states([], [], self.catalog)

        assert set(states) == set(MUSCLE_IDS)
        assert len(states) == 48
        for state in states.values():
            assert state.weekly_frequency == 0
            assert state.intensity == 0.0
            assert state.color == "#ffffff"

    def test_frequency_counts_distinct_days(self):
        """Two sessions on the same calendar day count once."""
        sets = [self._set(1, self.bench), self._set(1, self.bench)]
        sessions = [
            self._session(1, datetime(2026, 3, 14, 8, 0)),
            self._session(1, datetime(2026, 3, 14, 18, 30)),
        ]
        states = compute_muscle_states(sessions, sets, self.catalog)

        assert states["chest"].weekly_frequency == 1
        assert states["chest"].intensity == pytest.approx(1 / 3)
        assert states["chest"].color == "#ff8080"

    def test_intensity_saturates(self):
        """Frequency above the saturation point keeps intensity at 1.0."""
        sets = [self._set(1, self.squat)]
        sessions = [self._session(1, datetime(2026, 3, 10 + i, 9, 0)) for i in range(5)]
        states = compute_muscle_states(sessions, sets, self.catalog)

        assert states["quads_left_inner"].weekly_frequency == 5
        assert states["quads_left_inner"].intensity == 1.0
        assert states["back_quads"].color == "#990000"
        assert states["chest"].weekly_frequency == 0

    def test_custom_saturation(self):
        sets = [self._set(1, self.bench)]
        sessions = [self._session(1, datetime(2026, 3, 10, 9, 0))]
        states = compute_muscle_states(sessions, sets, self.catalog, saturation_days=2)
        assert states["chest"].intensity == pytest.approx(0.5)

    def test_invalid_saturation_rejected(self):
        with pytest.raises(ValueError):
            compute_muscle_states([], [], self.catalog, saturation_days=0)

    def test_detached_sessions_are_ignored(self):
        """Sessions whose workout was removed contribute nothing."""
        sets = [self._set(1, self.bench)]
        sessions = [self._session(None, datetime(2026, 3, 14, 8, 0))]
        states = compute_muscle_states(sessions, sets, self.catalog)
        assert all(s.weekly_frequency == 0 for s in states.values())

    def test_unknown_exercise_ids_are_ignored(self):
        sets = [SimpleNamespace(workout_id=1, exercise_id="9999")]
        sessions = [self._session(1, datetime(2026, 3, 14, 8, 0))]
        states = compute_muscle_states(sessions, sets, self.catalog)
        assert all(s.weekly_frequency == 0 for s in states.values())

    def test_to_dict(self):
        state = compute_muscle_states([], [], self.catalog)["back_lats"]
        data = state.to_dict()
        assert data["id"] == "back_lats"
        assert data["name"] == "Back Lats"
        assert data["isHighlighted"] is False
        assert data["isSelected"] is False


class TestMuscleActivityAggregator:
    """Test aggregation over persisted sessions."""

    def setup_method(self):
        """Set up test fixtures."""
        self.db = Database("sqlite:///:memory:")
        self.db.create_tables()
        seed_exercise_catalog(self.db)
        self.catalog = load_catalog(self.db)
        self.gateway = PersistenceGateway(self.db)
        self.aggregator = MuscleActivityAggregator(self.gateway, self.catalog)

        bench = self.catalog.find_by_name("barbell bench press")
        pulldown = self.catalog.find_by_name("cable lat pulldown")
        with self.gateway.transaction() as tx:
            self.chest_day = tx.insert_workout(USER, "Chest", workout_type=WORKOUT_TYPE_USER)
            self.back_day = tx.insert_workout(USER, "Back", workout_type=WORKOUT_TYPE_USER)
            tx.insert_workout_sets([
                {"workout_id": self.chest_day, "exercise_id": bench.id, "exercise_name": bench.name,
                 "planned_reps": 9, "rest_time": 120, "set_order": 1},
                {"workout_id": self.chest_day, "exercise_id": bench.id, "exercise_name": bench.name,
                 "planned_reps": 9, "rest_time": 120, "set_order": 2},
                {"workout_id": self.back_day, "exercise_id": pulldown.id, "exercise_name": pulldown.name,
                 "planned_reps": 9, "rest_time": 120, "set_order": 1},
            ])

    def _add_session(self, workout_id, start_time, status=SESSION_COMPLETED, user_id=USER):
        with self.db.get_session() as session:
            session.add(TrainingSession(
                user_id=user_id,
                workout_id=workout_id,
                status=status,
                start_time=start_time,
                duration=3600,
            ))

    def test_three_chest_days_saturate_chest(self):
        """Three completed chest sessions on different days give frequency 3, intensity 1.0."""
        for days_ago in (1, 3, 5):
            self._add_session(self.chest_day, NOW - timedelta(days=days_ago))

        states = self.aggregator.aggregate_activity(USER, now=NOW)

        assert states["chest"].weekly_frequency == 3
        assert states["chest"].intensity == 1.0
        assert states["chest"].color == "#990000"
        assert states["back_lats"].weekly_frequency == 0
        assert len(states) == len(MUSCLE_IDS)

    def test_sessions_outside_window_are_excluded(self):
        self._add_session(self.chest_day, NOW - timedelta(days=2))
        self._add_session(self.chest_day, NOW - timedelta(days=config.ACTIVITY_WINDOW_DAYS + 1))

        states = self.aggregator.aggregate_activity(USER, now=NOW)
        assert states["chest"].weekly_frequency == 1

    def test_custom_window(self):
        self._add_session(self.chest_day, NOW - timedelta(days=10))
        states = self.aggregator.aggregate_activity(USER, window_days=14, now=NOW)
        assert states["chest"].weekly_frequency == 1

    def test_sessions_after_now_are_excluded(self):
        """The window ends at now; later sessions do not count."""
        self._add_session(self.chest_day, NOW + timedelta(days=3))

        states = self.aggregator.aggregate_activity(USER, window_days=7, now=NOW)
        assert states["chest"].weekly_frequency == 0

    def test_zero_window_is_not_replaced_by_default(self):
        """window_days=0 covers only the instant now, not the default week."""
        self._add_session(self.chest_day, NOW - timedelta(days=2))

        states = self.aggregator.aggregate_activity(USER, window_days=0, now=NOW)
        assert states["chest"].weekly_frequency == 0

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError):
            self.aggregator.aggregate_activity(USER, window_days=-1, now=NOW)

    def test_only_completed_sessions_count(self):
        self._add_session(self.chest_day, NOW - timedelta(days=1), status=SESSION_IN_PROGRESS)
        self._add_session(self.back_day, NOW - timedelta(days=2), status=SESSION_ABANDONED)

        states = self.aggregator.aggregate_activity(USER, now=NOW)
        assert all(s.weekly_frequency == 0 for s in states.values())

    def test_other_users_are_ignored(self):
        self._add_session(self.chest_day, NOW - timedelta(days=1), user_id="someone-else")
        states = self.aggregator.aggregate_activity(USER, now=NOW)
        assert states["chest"].weekly_frequency == 0

    def test_mixed_workouts(self):
        self._add_session(self.chest_day, NOW - timedelta(days=1))
        self._add_session(self.back_day, NOW - timedelta(days=1))
        self._add_session(self.back_day, NOW - timedelta(days=4))

        states = self.aggregator.aggregate_activity(USER, now=NOW)
        assert states["chest"].weekly_frequency == 1
        assert states["back_lats"].weekly_frequency == 2
        assert states["back_lats"].intensity == pytest.approx(2 / 3)
        assert states["back_lats"].color == "#ff4444"
        for state in states.values():
            assert 0.0 <= state.intensity <= 1.0
