"""Error taxonomy for plan generation and activity aggregation."""


class LiftplanError(Exception):
    """Base class for engine errors."""

    user_message = "Something went wrong."


class ConfigurationError(LiftplanError):
    """Template or split tables are inconsistent. Raised during registry validation."""

    user_message = "The workout catalog is misconfigured."


class TemplateNotFound(ConfigurationError, KeyError):
    """A split archetype references a day template that does not exist."""

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f"Unknown day template: {template_name!r}")

    def __str__(self):
        return self.args[0]


class MissingTierVariant(ConfigurationError):
    """A day template has no exercise list for a gender tier."""

    def __init__(self, template_name: str, tier):
        self.template_name = template_name
        self.tier = tier
        super().__init__(f"Template {template_name!r} has no exercise list for tier {tier}")


class PreconditionError(LiftplanError):
    """Request rejected before anything was written."""


class ProfileIncomplete(PreconditionError):
    """The user has not completed the preferences survey."""

    user_message = "Complete your workout profile first."

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id!r} has not completed the preferences survey")


class UnsupportedFrequency(PreconditionError):
    """No split archetypes exist for the requested weekly frequency."""

    user_message = "Choose between 3 and 6 workouts per week."

    def __init__(self, frequency):
        self.frequency = frequency
        super().__init__(f"Unsupported workouts per week: {frequency!r}")


class PlanPersistenceFailed(LiftplanError):
    """Writing the generated plan failed and the whole run was rolled back."""

    user_message = "Could not save your plan. Try again later."
