"""Tests for preference parsing and storage."""

import pytest

from liftplan.config import Config
from liftplan.db import Database, PreferencesStore
from liftplan.planning import Goal, ExperienceLevel, GenderTier, UserPreferences, get_registry


class TestPreferenceParsing:
    """Test form value parsing."""

    def test_goal_parse(self):
        assert Goal.parse("gain_muscle") == Goal.GAIN_MUSCLE
        assert Goal.parse("Gain muscle") == Goal.GAIN_MUSCLE
        assert Goal.parse("Lose fat") == Goal.LOSE_WEIGHT
        assert Goal.parse(Goal.GAIN_STRENGTH) == Goal.GAIN_STRENGTH
        assert Goal.parse("become a wizard") is None
        assert Goal.parse(None) is None

    def test_experience_parse(self):
        assert ExperienceLevel.parse("Novice") == ExperienceLevel.NOVICE
        assert ExperienceLevel.parse("expert") is None

    @pytest.mark.parametrize("gender,age,expected", [
        ("male", 30, GenderTier.MALE),
        ("female", 30, GenderTier.FEMALE),
        ("Female", None, GenderTier.FEMALE),
        ("female", 50, GenderTier.SENIOR),
        ("male", 67, GenderTier.SENIOR),
        ("prefer not to say", 25, GenderTier.MALE),
        (None, None, GenderTier.MALE),
    ])
    def test_gender_tier_from_profile(self, gender, age, expected):
        assert GenderTier.from_profile(gender, age) == expected

    def test_rest_time_parsing(self):
        assert Config.parse_rest_time(None) is None
        assert Config.parse_rest_time("") is None
        assert Config.parse_rest_time(75) == 75
        assert Config.parse_rest_time("60") == 60
        assert Config.parse_rest_time("1-2") == 90
        assert Config.parse_rest_time("2-3 minutes") == 150
        assert Config.parse_rest_time("3+") == 180
        with pytest.raises(ValueError):
            Config.parse_rest_time("forever")

    def test_from_form(self):
        prefs = UserPreferences.from_form(
            goal="Gain strength",
            workouts_per_week="5",
            gender="female",
            age=28,
            experience_level="advanced",
            workout_split="",
            sets_per_exercise="3",
            rest_time="2-3",
        )
        assert prefs.goal == Goal.GAIN_STRENGTH
        assert prefs.workouts_per_week == 5
        assert prefs.gender_tier == GenderTier.FEMALE
        assert prefs.experience_level == ExperienceLevel.ADVANCED
        assert prefs.workout_split is None
        assert prefs.sets_per_exercise == 3
        assert prefs.rest_time == 150

    def test_from_form_explicit_tier_wins(self):
        prefs = UserPreferences.from_form(goal="gain_muscle", workouts_per_week=4,
                                          gender="male", age=70, gender_tier="female")
        assert prefs.gender_tier == GenderTier.FEMALE

    def test_invalid_overrides_rejected(self):
        with pytest.raises(ValueError):
            UserPreferences(goal=Goal.GAIN_MUSCLE, workouts_per_week=4, sets_per_exercise=0)
        with pytest.raises(ValueError):
            UserPreferences(goal=Goal.GAIN_MUSCLE, workouts_per_week=4, rest_time=-1)

    def test_from_form_zero_sets_rejected(self):
        """An explicit 0 is an invalid override, not "use the template"."""
        with pytest.raises(ValueError):
            UserPreferences.from_form(goal="gain_muscle", workouts_per_week=4, sets_per_exercise=0)
        with pytest.raises(ValueError):
            UserPreferences.from_form(goal="gain_muscle", workouts_per_week=4, sets_per_exercise="0")

    def test_from_form_blank_sets_means_no_override(self):
        prefs = UserPreferences.from_form(goal="gain_muscle", workouts_per_week=4, sets_per_exercise="")
        assert prefs.sets_per_exercise is None

    def test_frequency_bounds_come_from_split_catalog(self):
        """Supported weekly frequencies are defined only by the split catalog."""
        assert not hasattr(Config, "MIN_WORKOUTS_PER_WEEK")
        assert not hasattr(Config, "MAX_WORKOUTS_PER_WEEK")
        assert get_registry().supported_frequencies == (3, 4, 5, 6)


class TestPreferencesStore:
    """Test the preferences row round trip."""

    def setup_method(self):
        """Set up test fixtures."""
        self.db = Database("sqlite:///:memory:")
        self.db.create_tables()
        self.store = PreferencesStore(self.db)

    def test_missing_user(self):
        assert self.store.get_preferences("nobody") is None
        assert not self.store.has_completed_survey("nobody")

    def test_round_trip(self):
        prefs = UserPreferences(
            goal=Goal.LOSE_WEIGHT,
            workouts_per_week=6,
            gender_tier=GenderTier.SENIOR,
            experience_level=ExperienceLevel.NOVICE,
            workout_split=2,
            sets_per_exercise=4,
            rest_time=90,
        )
        self.store.save_preferences("u1", prefs)

        loaded = self.store.get_preferences("u1")
        assert loaded.goal == Goal.LOSE_WEIGHT
        assert loaded.workouts_per_week == 6
        assert loaded.gender_tier == GenderTier.SENIOR
        assert loaded.experience_level == ExperienceLevel.NOVICE
        assert loaded.workout_split == "2"
        assert loaded.sets_per_exercise == 4
        assert loaded.rest_time == 90
        assert self.store.has_completed_survey("u1")

    def test_save_updates_existing_row(self):
        self.store.save_preferences("u1", UserPreferences(goal=Goal.GAIN_MUSCLE, workouts_per_week=3))
        self.store.save_preferences("u1", UserPreferences(goal=Goal.GAIN_MUSCLE, workouts_per_week=5))
        assert self.store.get_preferences("u1").workouts_per_week == 5

    def test_incomplete_survey(self):
        prefs = UserPreferences(goal=Goal.GAIN_MUSCLE, workouts_per_week=4)
        self.store.save_preferences("u1", prefs, survey_completed=False)
        assert not self.store.has_completed_survey("u1")
