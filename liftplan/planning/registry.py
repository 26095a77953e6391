"""
Plan Registry

Load-once, read-only view over the day templates, split catalog and goal
recommendations. Cross references are validated when the registry is built,
so request-time lookups can only fail on bad user input.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..errors import MissingTierVariant, TemplateNotFound, UnsupportedFrequency, ConfigurationError
from .preferences import Goal, GenderTier
from .splits import SplitArchetype, SPLIT_CATALOG, GOAL_RECOMMENDATIONS, DEFAULT_ARCHETYPE_INDEX
from .templates import DayTemplate, ExercisePrescription, DAY_TEMPLATES

logger = logging.getLogger(__name__)


class PlanRegistry:
    """Immutable template/split configuration with referential integrity checks."""

    def __init__(self,
                 templates: Iterable[DayTemplate] = DAY_TEMPLATES,
                 split_catalog: Mapping[int, Tuple[SplitArchetype, ...]] = SPLIT_CATALOG,
                 recommendations: Mapping[Goal, Mapping[int, int]] = GOAL_RECOMMENDATIONS,
                 validate: bool = True):
        by_name: Dict[str, DayTemplate] = {}
        for template in templates:
            if template.name in by_name:
                raise ConfigurationError(f"Duplicate day template: {template.name!r}")
            by_name[template.name] = template

        self.templates: Mapping[str, DayTemplate] = MappingProxyType(by_name)
        self.split_catalog: Mapping[int, Tuple[SplitArchetype, ...]] = MappingProxyType(
            {freq: tuple(archetypes) for freq, archetypes in split_catalog.items()}
        )
        self.recommendations: Mapping[Goal, Mapping[int, int]] = MappingProxyType(
            {goal: MappingProxyType(dict(table)) for goal, table in recommendations.items()}
        )

        if validate:
            self.validate()

    @property
    def supported_frequencies(self) -> Tuple[int, ...]:
        return tuple(sorted(self.split_catalog))

    def validate(self) -> bool:
        """Check every cross reference in the configuration.

        Raises:
            TemplateNotFound: an archetype names a template that does not exist
            MissingTierVariant: a template lacks an exercise list for some tier
            ConfigurationError: a recommendation points outside its archetype list
        """
        for template in self.templates.values():
            for tier in GenderTier:
                if not template.exercises_by_tier.get(tier):
                    raise MissingTierVariant(template.name, tier.value)

        for frequency, archetypes in self.split_catalog.items():
            if not archetypes:
                raise ConfigurationError(f"No split archetypes for {frequency} days per week")
            for archetype in archetypes:
                if len(archetype) != frequency:
                    raise ConfigurationError(
                        f"Archetype {archetype.label!r} has {len(archetype)} days, expected {frequency}"
                    )
                for name in archetype.days:
                    if name not in self.templates:
                        raise TemplateNotFound(name)

        for goal, table in self.recommendations.items():
            for frequency, index in table.items():
                archetypes = self.split_catalog.get(frequency)
                if archetypes is None or not 0 <= index < len(archetypes):
                    raise ConfigurationError(
                        f"Recommendation {goal.value}/{frequency} points at missing archetype {index}"
                    )

        logger.debug(f"Plan registry validated: {len(self.templates)} templates, "
                     f"frequencies {self.supported_frequencies}")
        return True

    def archetypes_for(self, frequency: int) -> Tuple[SplitArchetype, ...]:
        """Get the candidate archetypes for a weekly frequency."""
        try:
            return self.split_catalog[frequency]
        except (KeyError, TypeError):
            raise UnsupportedFrequency(frequency) from None

    def select_archetype(self,
                         goal: Optional[Goal],
                         frequency: int,
                         explicit_choice: Optional[Union[int, str]] = None) -> SplitArchetype:
        """
        Pick the split archetype for a user.

        Args:
            goal: Fitness goal (advisory; unknown goals use the default archetype)
            frequency: Workouts per week
            explicit_choice: Archetype index, label or split style chosen by the user

        Returns:
            The registry's own archetype instance
        """
        archetypes = self.archetypes_for(frequency)

        if explicit_choice is not None and explicit_choice != "":
            chosen = self._match_explicit_choice(archetypes, explicit_choice)
            if chosen is not None:
                return chosen
            logger.warning(f"Ignoring split choice {explicit_choice!r}: not available for {frequency} days per week")

        goal = Goal.parse(goal)
        index = DEFAULT_ARCHETYPE_INDEX
        if goal is not None:
            index = self.recommendations.get(goal, {}).get(frequency, DEFAULT_ARCHETYPE_INDEX)
        else:
            logger.info(f"No recognised goal, using default split for {frequency} days per week")

        return archetypes[index]

    @staticmethod
    def _match_explicit_choice(archetypes: Tuple[SplitArchetype, ...],
                               choice: Union[int, str]) -> Optional[SplitArchetype]:
        if isinstance(choice, bool):
            return None
        if isinstance(choice, str) and choice.strip().isdigit():
            choice = int(choice.strip())
        if isinstance(choice, int):
            return archetypes[choice] if 0 <= choice < len(archetypes) else None

        key = choice.strip().lower()
        for archetype in archetypes:
            if archetype.label.lower() == key:
                return archetype
        style = key.replace(" ", "_").replace("-", "_")
        for archetype in archetypes:
            if archetype.style == style:
                return archetype
        return None

    def get_template(self, template_name: str) -> DayTemplate:
        try:
            return self.templates[template_name]
        except KeyError:
            raise TemplateNotFound(template_name) from None

    def resolve_day(self, template_name: str, gender_tier: GenderTier) -> Tuple[ExercisePrescription, ...]:
        """Get the ordered prescriptions of a day template for a tier."""
        template = self.get_template(template_name)
        prescriptions = template.exercises_by_tier.get(GenderTier(gender_tier))
        if not prescriptions:
            raise MissingTierVariant(template_name, GenderTier(gender_tier).value)
        return prescriptions


# Global registry instance
_registry: Optional[PlanRegistry] = None


def get_registry() -> PlanRegistry:
    """Get or build the validated process-wide registry."""
    global _registry
    if _registry is None:
        _registry = PlanRegistry()
    return _registry
