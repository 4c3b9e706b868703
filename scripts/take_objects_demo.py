"""Interactively plan commands to take objects from a blocks world loaded from YAML.

To run this script, use the commands:

    pip install -e .
    python scripts/take_objects_demo.py tests/test_data/worlds/small_world.yaml

"""

from pathlib import Path

import click
from rich.prompt import Prompt

from blocksworld.errors import BlocksWorldError
from blocksworld.grounding import Entity, ObjectDescription, TakeCommand
from blocksworld.io import console
from blocksworld.io.pydantic_schemata import WorldSchema
from blocksworld.pipeline import interpret_and_plan
from blocksworld.world import ArmSimulator
from blocksworld.world.objects import FORMS


@click.command()
@click.argument("world_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(world_yaml: Path) -> None:
    """Repeatedly take an object described by the user, carrying the world between commands."""
    world = WorldSchema.validate_yaml(world_yaml).to_world()

    while True:
        console.print(f"\n[bold]World:[/] {world.configuration}")
        form = Prompt.ask("Form of the object to take", choices=[*FORMS, "anyform", "quit"])
        if form == "quit":
            break
        color = Prompt.ask("Color of the object (blank for any)", default="") or None

        command = TakeCommand(Entity(ObjectDescription(form=form, color=color), "any"))
        try:
            candidates = interpret_and_plan([command], world)
        except BlocksWorldError as err:
            console.print(f"[red]{type(err).__name__}[/]: {err}")
            continue

        chosen = candidates[0]
        console.print(f"[cyan]Goal:[/] {chosen.result.goal}")
        console.print(f"[green]Plan ({chosen.result.plan.symbols or '-'}):[/] {chosen.message}")

        # Return the taken object to the column it was picked from
        world = ArmSimulator(world).run(chosen.result.plan.actions)
        if world.configuration.holding is not None:
            config = world.configuration
            world = world.with_configuration(config.with_drop(config.arm))


if __name__ == "__main__":
    main()
