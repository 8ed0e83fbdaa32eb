"""
mudgame CLI - Command line interface for the game.

Usage:
    mudgame play          Play in the terminal
    mudgame show-world    Print the loaded scenario
"""

import logging

import click

from mudgame import __version__, config
from mudgame.commands import build_router
from mudgame.engine import Simulation, load_world
from mudgame.engine.systems import look_helpers

QUIT_WORDS = ("quit", "exit", "q")


def _load(world_path):
    try:
        return load_world(world_path)
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Could not load world: {exc}") from exc


@click.group()
@click.version_option(version=__version__, prog_name="mudgame")
@click.option(
    "--log-level",
    default=config.LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def main(log_level: str):
    """mudgame - fight your way through a single room."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--seed", type=int, envvar=config.SEED_ENV, default=None, help="Seed for reproducible games")
@click.option(
    "--map-cols",
    type=click.IntRange(min=3),
    envvar=config.MAP_COLS_ENV,
    default=config.MAP_COLS,
    show_default=True,
    help="Map width in characters",
)
@click.option(
    "--map-rows",
    type=click.IntRange(min=3),
    envvar=config.MAP_ROWS_ENV,
    default=config.MAP_ROWS,
    show_default=True,
    help="Map height in characters",
)
@click.option(
    "--world",
    "world_path",
    type=click.Path(dir_okay=False),
    default=config.WORLD_FILE,
    help="World data YAML file (default: bundled scenario)",
)
@click.option(
    "--script",
    type=click.File("r"),
    default=None,
    help="Read commands from a file instead of the keyboard",
)
def play(seed: int | None, map_cols: int, map_rows: int, world_path: str | None, script):
    """Play the game in the terminal.

    Type 'help' for commands and 'quit' to leave.

    Examples:
        mudgame play
        mudgame play --seed 7
        mudgame play --script moves.txt
    """
    sim = Simulation(_load(world_path), seed=seed)
    router = build_router(sim, map_cols=map_cols, map_rows=map_rows)

    click.echo(look_helpers.format_room(sim.world))
    click.echo("Type 'help' for a list of commands.")

    stream = script if script is not None else click.get_text_stream("stdin")
    interactive = script is None and stream.isatty()

    while True:
        if interactive:
            click.echo("> ", nl=False)
        line = stream.readline()
        if not line:
            break
        command = line.strip()
        if not command:
            continue
        if command.lower() in QUIT_WORDS:
            break
        if not interactive:
            click.echo(f"> {command}")
        for event in router.dispatch(command):
            click.echo(event["text"])

    click.echo("Farewell.")


@main.command("show-world")
@click.option(
    "--world",
    "world_path",
    type=click.Path(dir_okay=False),
    default=config.WORLD_FILE,
    help="World data YAML file (default: bundled scenario)",
)
def show_world(world_path: str | None):
    """Print the rooms, characters and items of a world file."""
    world = _load(world_path)
    room = world.room
    click.echo(f"Room: {room.name} [{room.id}] at ({room.x:g}, {room.y:g}) size {room.width:g}x{room.height:g}")
    player = world.player
    click.echo(
        f"Player: {player.name} [{player.id}] health {player.health}, "
        f"base attack {player.base_attack_power}"
    )
    for npc in room.npcs:
        click.echo(f"NPC: {npc.name} [{npc.id}] health {npc.health}, defense {npc.defense}")
    for item in room.items:
        click.echo(f"Item: {look_helpers.format_inventory_entry(item)} [{item.id}]")


if __name__ == "__main__":
    main()
