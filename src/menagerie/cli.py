"""Command-line interface for menagerie."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from menagerie.config import CONFIG_DIR_NAME, Config, DEFAULT_CONFIG_TOML


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log lifecycle events to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """menagerie: animals and cats walking through object-oriented basics."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _load_config(ctx: click.Context, path: str | None) -> Config:
    root = Path(path).resolve() if path else None
    try:
        config = Config.load(root) if root else Config.load_from_cwd()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    verbose = ctx.obj.get("verbose", False) if ctx.obj else False
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(config.log_level)
        if not isinstance(level, int):
            raise click.ClickException(
                f"Unknown log level in configuration: {config.log_level!r}"
            )

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("menagerie").setLevel(level)
    return config


# --------------------------------------------------------------------------- #
# init
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--path", default=".", help="Project root directory")
def init(path: str):
    """Create .menagerie/config.toml in the project root."""
    root = Path(path).resolve()
    config_dir = root / CONFIG_DIR_NAME
    config_file = config_dir / "config.toml"

    if config_dir.exists():
        click.echo(f"Already initialised at {config_dir}")
    else:
        config_dir.mkdir(parents=True)
        click.echo(f"Created {config_dir}")

    if not config_file.exists():
        config_file.write_text(DEFAULT_CONFIG_TOML)
        click.echo(f"Created {config_file}")
    else:
        click.echo(f"Config already exists: {config_file}")


# --------------------------------------------------------------------------- #
# demo
# --------------------------------------------------------------------------- #

@main.command()
@click.option(
    "--no-shutdown",
    is_flag=True,
    help="Do not release the animals still alive when the demo ends",
)
@click.option("--path", default=None, help="Project root (default: auto-detect)")
@click.pass_context
def demo(ctx: click.Context, no_shutdown: bool, path: str | None):
    """Run the reference walkthrough and print its transcript."""
    config = _load_config(ctx, path)

    from menagerie.driver import run_demo

    run_demo(release_at_exit=config.release_at_exit and not no_shutdown)


# --------------------------------------------------------------------------- #
# feed / meow
# --------------------------------------------------------------------------- #

@main.command()
@click.argument("name")
@click.option("--hunger", default=0, type=int, help="Starting hunger (not validated)")
@click.option("--amount", "-a", default=10, type=int, help="How much to eat")
@click.option("--cat", "is_cat", is_flag=True, help="Make a Cat instead of an Animal")
@click.option("--race", default="", help="Race of the cat (implies --cat)")
@click.option("--as-animal", is_flag=True, help="Feed through an Animal handle")
@click.option("--path", default=None, help="Project root (default: auto-detect)")
@click.pass_context
def feed(
    ctx: click.Context,
    name: str,
    hunger: int,
    amount: int,
    is_cat: bool,
    race: str,
    as_animal: bool,
    path: str | None,
):
    """Feed one animal once and show the hunger it is left with."""
    _load_config(ctx, path)

    from menagerie.animals import Animal, Cat
    from menagerie.dispatch import as_type

    is_cat = is_cat or bool(race)
    creature = Cat(name, hunger, race) if is_cat else Animal(name, hunger)

    with creature:
        if is_cat and race:
            click.echo(f"Race:   {race}")
        target = as_type(creature, Animal) if as_animal else creature
        target.eat(amount)
        click.echo(f"Hunger: {creature.hunger}")


@main.command()
@click.argument("name")
@click.option("--race", default="", help="Race of the cat")
@click.option("--as-animal", is_flag=True, help="Meow through an Animal handle")
@click.option("--path", default=None, help="Project root (default: auto-detect)")
@click.pass_context
def meow(ctx: click.Context, name: str, race: str, as_animal: bool, path: str | None):
    """Make a cat meow."""
    _load_config(ctx, path)

    from menagerie.animals import Animal, Cat
    from menagerie.dispatch import as_type

    with Cat(name, race=race) as cat:
        target = as_type(cat, Animal) if as_animal else cat
        target.meow()
