"""Command-line interface for the liftplan training engine."""

import logging

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .config import config
from .db import get_db, PersistenceGateway, PreferencesStore, WORKOUT_TYPE_AUTO
from .errors import LiftplanError, PreconditionError, PlanPersistenceFailed
from .exercises import load_catalog, seed_exercise_catalog
from .planning import UserPreferences, GenderTier, get_registry
from .planning.generator import PlanGenerator
from .analysis import MuscleActivityAggregator

console = Console()

user_option = click.option("--user", "user_id", default=config.DEFAULT_USER_ID, help="User id")


def _escape(text) -> str:
    return str(text).replace("[", r"\[").replace("]", r"\]")


@click.group()
@click.option("--log-level", default=config.LOG_LEVEL, help="Logging level")
def cli(log_level):
    """Training plan generation and muscle activity tool."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("init-db")
def init_db():
    """Create database tables."""
    get_db()
    console.print(f"[green]✅ Database ready at {config.DATABASE_URL}[/green]")


@cli.command("seed-exercises")
def seed_exercises():
    """Load the bundled exercise catalog."""
    count = seed_exercise_catalog(get_db())
    console.print(f"[green]✅ Seeded {count} exercises[/green]")


@cli.command("set-preferences")
@user_option
@click.option("--goal", required=True, help="lose_weight, gain_muscle, gain_strength or maintain_muscle")
@click.option("--days", "workouts_per_week", type=int, required=True, help="Workouts per week (3-6)")
@click.option("--gender", default=None, help="Male, Female or 'Prefer not to say'")
@click.option("--age", type=int, default=None, help="Age (50+ selects senior exercises)")
@click.option("--tier", type=click.Choice([t.value for t in GenderTier]), default=None,
              help="Explicit exercise tier, overrides gender/age")
@click.option("--experience", default=None, help="novice, experienced or advanced")
@click.option("--split", "workout_split", default=None, help="Archetype index, label or split style")
@click.option("--sets", "sets_per_exercise", type=int, default=None, help="Sets per exercise override")
@click.option("--rest", "rest_time", default=None, help="Rest override: seconds or 1-2, 2-3, 3+ minutes")
def set_preferences(user_id, goal, workouts_per_week, gender, age, tier, experience,
                    workout_split, sets_per_exercise, rest_time):
    """Store workout preferences and mark the survey complete."""
    try:
        preferences = UserPreferences.from_form(
            goal=goal,
            workouts_per_week=workouts_per_week,
            gender=gender,
            age=age,
            gender_tier=tier,
            experience_level=experience,
            workout_split=workout_split,
            sets_per_exercise=sets_per_exercise,
            rest_time=rest_time,
        )
    except ValueError as e:
        console.print(f"[red]❌ Invalid preferences: {_escape(e)}[/red]")
        raise SystemExit(1)

    PreferencesStore(get_db()).save_preferences(user_id, preferences)
    console.print(f"[green]✅ Preferences saved for {user_id}[/green]")


@cli.command()
@click.option("--days", type=int, default=None, help="Only show this weekly frequency")
def splits(days):
    """List split archetypes and goal recommendations."""
    registry = get_registry()
    frequencies = [days] if days else registry.supported_frequencies

    for frequency in frequencies:
        recommended = {
            goal.value: index
            for goal, table in registry.recommendations.items()
            for f, index in table.items()
            if f == frequency
        }
        table = Table(title=f"{frequency} days per week", box=box.ROUNDED)
        table.add_column("#", style="cyan")
        table.add_column("Split", style="bold")
        table.add_column("Style")
        table.add_column("Days")
        table.add_column("Recommended for", style="green")
        for index, archetype in enumerate(registry.archetypes_for(frequency)):
            goals = ", ".join(g for g, i in recommended.items() if i == index)
            table.add_row(str(index), archetype.label, archetype.style, " | ".join(archetype.days), goals)
        console.print(table)


def _load_preferences(store: PreferencesStore, user_id: str):
    preferences = store.get_preferences(user_id)
    if preferences is None:
        console.print("[yellow]⚠️  Complete your workout profile first (liftplan set-preferences).[/yellow]")
    return preferences


@cli.command()
@user_option
def preview(user_id):
    """Show the plan that would be generated, without saving it."""
    db = get_db()
    preferences = _load_preferences(PreferencesStore(db), user_id)
    if preferences is None:
        return

    generator = PlanGenerator(load_catalog(db))
    try:
        days = generator.build_plan(preferences)
    except PreconditionError as e:
        console.print(f"[red]❌ {e.user_message} ({_escape(e)})[/red]")
        return

    for day in days:
        table = Table(title=f"Day {day.day_number}: {day.title}", box=box.SIMPLE)
        table.add_column("Exercise", style="bold")
        table.add_column("Sets", style="yellow")
        table.add_column("Reps", style="green")
        table.add_column("Rest", style="magenta")
        for name in day.exercise_names:
            sets = [s for s in day.sets if s.exercise_name == name]
            table.add_row(name, str(len(sets)), str(sets[0].planned_reps), f"{sets[0].rest_time}s")
        console.print(table)
        if day.skipped_exercises:
            console.print(f"[yellow]  Skipped (not in catalog): {', '.join(day.skipped_exercises)}[/yellow]")


@cli.command()
@user_option
def generate(user_id):
    """Generate and save a training plan."""
    console.print(Panel.fit(f"🏋️ Generating plan for {user_id}", style="bold blue"))
    db = get_db()
    store = PreferencesStore(db)
    preferences = _load_preferences(store, user_id)
    if preferences is None:
        return

    generator = PlanGenerator(load_catalog(db), gateway=PersistenceGateway(db), preferences_source=store)
    try:
        with console.status("[black]Building workouts...[/black]"):
            workout_ids = generator.generate_plan(user_id, preferences)
    except (PreconditionError, PlanPersistenceFailed) as e:
        console.print(f"[red]❌ {e.user_message}[/red]")
        return

    console.print(f"[green]✅ Created {len(workout_ids)} workouts: {', '.join(map(str, workout_ids))}[/green]")


@cli.command()
@user_option
@click.option("--all", "show_all", is_flag=True, help="Include user-created workouts")
def workouts(user_id, show_all):
    """List saved workouts."""
    gateway = PersistenceGateway(get_db())
    rows = gateway.list_workouts(user_id, None if show_all else WORKOUT_TYPE_AUTO)
    if not rows:
        console.print("[yellow]No workouts found.[/yellow]")
        return

    set_counts = {}
    for workout_set in gateway.list_workout_sets(w.workout_id for w in rows):
        set_counts[workout_set.workout_id] = set_counts.get(workout_set.workout_id, 0) + 1

    table = Table(title=f"Workouts for {user_id}", box=box.ROUNDED)
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Type")
    table.add_column("Sets", style="yellow")
    table.add_column("Created", style="magenta")
    for workout in rows:
        table.add_row(
            str(workout.workout_id),
            workout.title,
            workout.workout_type,
            str(set_counts.get(workout.workout_id, 0)),
            workout.created_at.strftime("%Y-%m-%d %H:%M") if workout.created_at else "",
        )
    console.print(table)


@cli.command()
@user_option
@click.option("--window", "window_days", type=int, default=config.ACTIVITY_WINDOW_DAYS, help="Trailing window in days")
@click.option("--trained-only", is_flag=True, help="Hide muscles with no training")
def activity(user_id, window_days, trained_only):
    """Show per-muscle training frequency for the trailing window."""
    db = get_db()
    aggregator = MuscleActivityAggregator(PersistenceGateway(db), load_catalog(db))
    states = aggregator.aggregate_activity(user_id, window_days=window_days)

    table = Table(title=f"Muscle activity (last {window_days} days)", box=box.ROUNDED)
    table.add_column("Muscle", style="bold")
    table.add_column("Days", style="yellow")
    table.add_column("Intensity", style="green")
    table.add_column("Color")
    for state in sorted(states.values(), key=lambda s: (-s.weekly_frequency, s.id)):
        if trained_only and not state.weekly_frequency:
            continue
        table.add_row(state.name, str(state.weekly_frequency), f"{state.intensity:.2f}",
                      f"[{state.color}]■[/{state.color}] {state.color}")
    console.print(table)


@cli.command()
@user_option
@click.confirmation_option(prompt="Delete all auto-generated workouts for this user?")
def cleanup(user_id):
    """Remove auto-generated workouts (subscription cancellation cleanup)."""
    deleted = PersistenceGateway(get_db()).delete_auto_generated_workouts(user_id)
    console.print(f"[green]✅ Deleted {deleted} auto-generated workouts; session history kept[/green]")


def main():
    """Main entry point."""
    try:
        config.validate()
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
    except LiftplanError as e:
        console.print(f"[red]❌ {e.user_message} ({_escape(e)})[/red]")


if __name__ == "__main__":
    main()
