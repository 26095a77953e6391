"""Tests for split selection, template resolution and registry validation."""

import pytest
from types import MappingProxyType

from liftplan.errors import TemplateNotFound, MissingTierVariant, UnsupportedFrequency, ConfigurationError
from liftplan.planning import PlanRegistry, Goal, GenderTier
from liftplan.planning.splits import SplitArchetype, SPLIT_CATALOG, GOAL_RECOMMENDATIONS
from liftplan.planning.templates import DAY_TEMPLATES, DayTemplate, ExercisePrescription


class TestSplitSelector:
    """Test archetype selection."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = PlanRegistry()

    def test_gain_muscle_four_days_uses_upper_lower(self):
        """Recommended index 3 for gain_muscle at 4 days is 2x Upper/Lower."""
        archetype = self.registry.select_archetype(Goal.GAIN_MUSCLE, 4)
        assert archetype.label == "2x Upper/Lower"
        assert archetype.days == ("Upper A", "Lower A", "Upper B", "Lower B")

    def test_recommendation_table_is_followed(self):
        """Every goal/frequency pair returns the recommended archetype."""
        for goal, table in GOAL_RECOMMENDATIONS.items():
            for frequency, index in table.items():
                chosen = self.registry.select_archetype(goal, frequency)
                assert chosen is self.registry.archetypes_for(frequency)[index]

    def test_unknown_goal_falls_back_to_first_archetype(self):
        """Goal is advisory: unknown goals use index 0 instead of failing."""
        assert self.registry.select_archetype(None, 5) is self.registry.archetypes_for(5)[0]
        assert self.registry.select_archetype("get_flexible", 3) is self.registry.archetypes_for(3)[0]

    def test_goal_labels_are_accepted(self):
        """Form labels parse to goals."""
        assert self.registry.select_archetype("Gain strength", 5).label == "Upper/Lower/Upper/Lower/Upper"

    @pytest.mark.parametrize("frequency", [0, 1, 2, 7, None])
    def test_unsupported_frequency(self, frequency):
        """Frequencies outside 3-6 are rejected."""
        with pytest.raises(UnsupportedFrequency):
            self.registry.select_archetype(Goal.GAIN_MUSCLE, frequency)

    def test_explicit_index_overrides_recommendation(self):
        """An explicit index is used verbatim."""
        chosen = self.registry.select_archetype(Goal.GAIN_MUSCLE, 4, explicit_choice=2)
        assert chosen.label == "4x Full Body"
        assert self.registry.select_archetype(Goal.GAIN_MUSCLE, 4, explicit_choice="4").label == "Push/Legs/Pull/Legs"

    def test_explicit_label_and_style(self):
        """Labels match case-insensitively; styles pick the first archetype of that style."""
        assert self.registry.select_archetype(None, 6, "2x push/pull/legs").days[3] == "Push B"
        assert self.registry.select_archetype(Goal.GAIN_MUSCLE, 3, "full_body").label == "3x Full Body"
        assert self.registry.select_archetype(Goal.LOSE_WEIGHT, 4, "Push Pull Legs").label == "Push/Legs/Pull/Legs"

    def test_invalid_explicit_choice_uses_recommendation(self):
        """A choice that does not exist for the frequency is ignored."""
        assert self.registry.select_archetype(Goal.GAIN_MUSCLE, 4, 9).label == "2x Upper/Lower"
        assert self.registry.select_archetype(Goal.GAIN_MUSCLE, 4, "body_part_split").label == "2x Upper/Lower"

    def test_selection_returns_shared_instance(self):
        """Selection returns a reference into the catalog, not a copy."""
        first = self.registry.select_archetype(Goal.MAINTAIN_MUSCLE, 3)
        second = self.registry.select_archetype(Goal.MAINTAIN_MUSCLE, 3)
        assert first is second


class TestTemplateResolver:
    """Test day template resolution."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = PlanRegistry()

    def test_tiers_have_distinct_lists(self):
        """Each tier returns its own exercise list."""
        male = self.registry.resolve_day("Upper A", GenderTier.MALE)
        female = self.registry.resolve_day("Upper A", GenderTier.FEMALE)
        senior = self.registry.resolve_day("Upper A", GenderTier.SENIOR)

        assert male[0].exercise_name == "Barbell bench press"
        assert female[0].exercise_name == "Dumbbell bench press"
        assert senior[0].exercise_name == "Machine chest press"
        assert len(senior) == 6

    def test_legs_days_reuse_lower_lists(self):
        """Legs A/B carry the same prescriptions as Lower A/B."""
        for tier in GenderTier:
            assert self.registry.resolve_day("Legs A", tier) == self.registry.resolve_day("Lower A", tier)
            assert self.registry.resolve_day("Legs B", tier) == self.registry.resolve_day("Lower B", tier)

    def test_unknown_template(self):
        """Unknown template names raise TemplateNotFound, which is also a KeyError."""
        with pytest.raises(TemplateNotFound):
            self.registry.resolve_day("Arms C", GenderTier.MALE)
        with pytest.raises(KeyError):
            self.registry.resolve_day("Arms C", GenderTier.MALE)

    def test_prescription_defaults(self):
        """Templates prescribe two sets and 120s rest."""
        for template in DAY_TEMPLATES:
            for prescriptions in template.exercises_by_tier.values():
                assert all(p.set_count == 2 and p.rest_seconds == 120 for p in prescriptions)

    def test_planned_reps_is_lower_midpoint(self):
        """Midpoint rounded down."""
        assert ExercisePrescription("Curl", 2, 10, 12, 60).planned_reps == 11
        assert ExercisePrescription("Calf raise", 2, 12, 15, 60).planned_reps == 13
        assert ExercisePrescription("Plank", 2, 30, 40, 60).planned_reps == 35


class TestRegistryValidation:
    """Test load-time integrity checks."""

    def test_shipped_configuration_is_valid(self):
        """Bundled tables pass validation."""
        assert PlanRegistry().validate()

    def test_archetype_referencing_missing_template(self):
        """A dangling template name is a configuration fault at construction."""
        catalog = dict(SPLIT_CATALOG)
        catalog[3] = (SplitArchetype("Broken", ("Upper A", "Arms C", "Lower A")),)
        with pytest.raises(TemplateNotFound):
            PlanRegistry(split_catalog=catalog, recommendations={})

    def test_template_missing_tier(self):
        """A template without a senior list fails validation."""
        upper_a = next(t for t in DAY_TEMPLATES if t.name == "Upper A")
        partial = DayTemplate(
            name="Upper A",
            focus=upper_a.focus,
            exercises_by_tier=MappingProxyType({
                GenderTier.MALE: upper_a.exercises_by_tier[GenderTier.MALE],
                GenderTier.FEMALE: upper_a.exercises_by_tier[GenderTier.FEMALE],
            }),
        )
        templates = [partial if t.name == "Upper A" else t for t in DAY_TEMPLATES]
        with pytest.raises(MissingTierVariant):
            PlanRegistry(templates=templates)

        unchecked = PlanRegistry(templates=templates, validate=False)
        with pytest.raises(MissingTierVariant):
            unchecked.resolve_day("Upper A", GenderTier.SENIOR)

    def test_recommendation_out_of_range(self):
        """Recommendations must point at an existing archetype."""
        with pytest.raises(ConfigurationError):
            PlanRegistry(recommendations={Goal.GAIN_MUSCLE: {3: 7}})

    def test_archetype_length_matches_frequency(self):
        """Each archetype has exactly `frequency` days."""
        registry = PlanRegistry()
        for frequency in registry.supported_frequencies:
            assert all(len(a) == frequency for a in registry.archetypes_for(frequency))
