"""Define a command-line interface for planning blocks-world commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from blocksworld.errors import BlocksWorldError
from blocksworld.io.logging import console, log_warning
from blocksworld.io.pydantic_schemata import CandidateCommandsSchema, PlannerSettings, WorldSchema
from blocksworld.io.yaml_utils import export_yaml_data
from blocksworld.logic.goal_evaluator import satisfied_conjunctions
from blocksworld.pipeline import interpret_and_plan
from blocksworld.world.simulator import ArmSimulator

if TYPE_CHECKING:
    from blocksworld.pipeline import CandidatePlan
    from blocksworld.world.configuration import WorldState


def _render_world(world: WorldState, title: str) -> Table:
    """Render a table listing the objects of each stack (bottom to top)."""
    config = world.configuration
    table = Table(title=title, show_lines=False)
    table.add_column("Column", justify="right", style="cyan", no_wrap=True)
    table.add_column("Objects (bottom to top)", style="bold")

    for idx, stack in enumerate(config.stacks):
        arm_marker = " (arm)" if idx == config.arm else ""
        objects = ", ".join(f"{obj}: {world.definition_of(obj)}" for obj in stack)
        table.add_row(f"{idx}{arm_marker}", objects or "-")

    held = config.holding
    held_text = "nothing" if held is None else f"{held}: {world.definition_of(held)}"
    table.caption = f"Holding: {held_text}"
    return table


def _render_candidates(candidates: list[CandidatePlan]) -> Table:
    """Render a numbered table of the candidate plans."""
    table = Table(title="Candidate Plans", show_lines=True)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Command", style="bold")
    table.add_column("Goal", style="magenta")
    table.add_column("Cost", justify="right")
    table.add_column("Actions", style="green")

    for idx, candidate in enumerate(candidates, start=1):
        result = candidate.result
        table.add_row(
            str(idx),
            str(candidate.interpretation.command),
            str(result.goal),
            f"{result.cost:g}",
            result.plan.symbols or "-",
        )
    return table


def _plan_record(candidate: CandidatePlan) -> dict[str, object]:
    """Convert a candidate plan into YAML-serializable data."""
    result = candidate.result
    return {
        "command": str(candidate.interpretation.command),
        "goal": str(result.goal),
        "cost": result.cost,
        "actions": [action.value for action in result.plan.actions],
        "narration": list(result.plan.narration),
    }


@click.command()
@click.argument("world_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("commands_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--settings", "settings_yaml", type=click.Path(exists=True, path_type=Path))
@click.option("--timeout", "timeout_s", type=float, help="Override the search timeout (seconds).")
@click.option("--output", "output_yaml", type=click.Path(path_type=Path), help="Export plans.")
@click.option("--verbose", is_flag=True, help="Log search progress.")
def cli(
    world_yaml: Path,
    commands_yaml: Path,
    settings_yaml: Path | None,
    timeout_s: float | None,
    output_yaml: Path | None,
    verbose: bool,
) -> None:
    """Ground the candidate commands in COMMANDS_YAML and plan them in the world of WORLD_YAML."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )

    world = WorldSchema.validate_yaml(world_yaml).to_world()
    commands_schema = CandidateCommandsSchema.validate_yaml(commands_yaml)
    settings = PlannerSettings()
    if settings_yaml is not None:
        settings = PlannerSettings.from_yaml(settings_yaml)
    if timeout_s is not None:
        settings = settings.model_copy(update={"timeout_s": timeout_s})

    console.print(_render_world(world, title="Initial World"))
    if commands_schema.utterance is not None:
        console.print(Panel.fit(f"[bold]{commands_schema.utterance}[/]", border_style="blue"))

    try:
        candidates = interpret_and_plan(commands_schema.to_commands(), world, settings)
    except BlocksWorldError as err:
        console.print(f"[red]{type(err).__name__}[/]: {err}")
        raise SystemExit(1) from err

    console.print(_render_candidates(candidates))

    if len(candidates) > 1:
        log_warning(f"Command is ambiguous; executing the first of {len(candidates)} plans.")
    chosen = candidates[0]
    console.print(Panel(chosen.message, title="Plan", border_style="green"))

    final_world = ArmSimulator(world).run(chosen.result.plan.actions)
    console.print(_render_world(final_world, title="Final World"))

    achieved = satisfied_conjunctions(chosen.result.goal, final_world.configuration)
    if not achieved:
        raise RuntimeError(f"Executing the plan did not achieve its goal: {chosen.result.goal}")
    console.print(f"[green]Achieved:[/] {' | '.join(str(conj) for conj in achieved)}")

    if output_yaml is not None:
        export_yaml_data([_plan_record(c) for c in candidates], output_yaml)
        console.print(f"[cyan]Exported plans to:[/] {output_yaml}")


def main() -> None:
    """Run the command-line interface."""
    cli()


if __name__ == "__main__":
    main()
